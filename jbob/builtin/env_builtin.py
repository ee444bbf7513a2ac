"""Built-in functions for the J-Bob runtime environment.

The prelude is the minimum the J-Bob proof library needs. Every built-in is
total: `car`/`cdr` of a non-pair is (), and `+`/`<` read non-integers as 0.
Predicates answer with the symbol `t` or with ().
"""
from __future__ import annotations

from typing import Sequence

from jbob import LispValue
from jbob.evaluation.builder import AstBuilder
from jbob.evaluation.evaluator import evaluate
from jbob.reader.parser import read_file
from jbob.types.environment import Environment
from jbob.types.function import NativeFunction
from jbob.types.nil import Null
from jbob.types.pair import Pair
from jbob.types.symbol import SymbolTable


# Defined in J-Bob itself; counts the cons cells of a tree
BOOTSTRAP_SOURCE = """
(defun size (x)
  (if (atom x)
      '0
      (+ '1 (+ (size (car x)) (size (cdr x))))))
"""


def _num(value: LispValue) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return 0


def cons(args: Sequence[LispValue]) -> Pair:
    return Pair(args[0], args[1])


def car(args: Sequence[LispValue]) -> LispValue:
    x = args[0]
    return x.car if isinstance(x, Pair) else Null


def cdr(args: Sequence[LispValue]) -> LispValue:
    x = args[0]
    return x.cdr if isinstance(x, Pair) else Null


def natp(args: Sequence[LispValue]) -> bool:
    x = args[0]
    return isinstance(x, int) and not isinstance(x, bool) and x >= 0


def add(args: Sequence[LispValue]) -> int:
    return _num(args[0]) + _num(args[1])


def register(env: Environment, symbols: SymbolTable) -> None:
    """Install the prelude into `env`, interning names through `symbols`."""
    t = symbols.intern("t")

    def truth(b: bool) -> LispValue:
        return t if b else Null

    def native(name: str, arity: int, op) -> None:
        sym = symbols.intern(name)
        env.define(sym, NativeFunction(sym, arity, op))

    native("atom", 1, lambda args: truth(not isinstance(args[0], Pair)))
    native("cons", 2, cons)
    native("car", 1, car)
    native("cdr", 1, cdr)
    native("equal", 2, lambda args: truth(args[0] == args[1]))
    native("natp", 1, lambda args: truth(natp(args)))
    native("+", 2, add)
    native("<", 2, lambda args: truth(_num(args[0]) < _num(args[1])))

    builder = AstBuilder(symbols)
    for form in read_file(BOOTSTRAP_SOURCE, symbols):
        evaluate(builder.build(form), env)
