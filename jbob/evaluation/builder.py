"""Turns raw s-expressions into executable trees.

Special forms are recognised by symbol identity: the builder interns each
form name in its own SymbolTable once, so a head symbol is a special form
exactly when it is that table's symbol for the name.
"""

from __future__ import annotations

from jbob import SExpression
from jbob.errors import BuildError
from jbob.evaluation.ast import Apply, Ast, Literal, VariableRef
from jbob.evaluation.special_forms import SPECIAL_FORMS, SpecialForm
from jbob.types.function import Function
from jbob.types.nil import Null
from jbob.types.pair import Pair, iter_list
from jbob.types.symbol import Symbol, SymbolTable


class AstBuilder:
    __slots__ = ("symbols", "forms")

    def __init__(self, symbols: SymbolTable):
        self.symbols = symbols
        self.forms: dict[Symbol, SpecialForm] = {
            symbols.intern(name): form for name, form in SPECIAL_FORMS.items()
        }

    def build(self, value: SExpression) -> Ast:
        # bool is an int subclass but never a J-Bob value
        if isinstance(value, int) and not isinstance(value, bool):
            return Literal(value)
        if isinstance(value, Symbol):
            return VariableRef(value)
        if value is Null:
            raise BuildError("the expression () needs to be quoted")
        if isinstance(value, Pair):
            form = self.forms.get(value.car) if isinstance(value.car, Symbol) else None
            if form is not None:
                return self._build_special_form(form, value.cdr)
            function = self.build(value.car)
            arguments = tuple(self.build(arg) for arg in iter_list(value.cdr))
            return Apply(function, arguments)
        # Not produced by the reader, but a function value is its own literal
        if isinstance(value, Function):
            return Literal(value)
        raise BuildError(f"cannot build an expression from {value!r}")

    def _build_special_form(self, form: SpecialForm, rest: SExpression) -> Ast:
        args = list(iter_list(rest))
        if len(args) != form.arity:
            raise BuildError(f"{form.name} has {len(args)} arguments, expected {form.arity}")
        return form.handler(args, self.build)


def build(value: SExpression, symbols: SymbolTable) -> Ast:
    """Build `value` using a one-off builder over `symbols`."""
    return AstBuilder(symbols).build(value)
