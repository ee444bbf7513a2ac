"""Callable values: host-provided natives and user-defined closures."""

from __future__ import annotations

from typing import Callable, Sequence

from jbob import LispValue
from jbob.errors import ArityError, JBobError
from jbob.types.environment import Environment
from jbob.types.symbol import Symbol

NativeOp = Callable[[Sequence[LispValue]], LispValue]


class Function:
    """Common call contract: a display name, a fixed arity, and `call`.

    Functions compare equal only by identity.
    """

    __slots__ = ("name", "arity")

    def __init__(self, name: Symbol | None, arity: int):
        self.name = name
        self.arity = arity

    def call(self, args: Sequence[LispValue]) -> LispValue:
        if len(args) != self.arity:
            raise ArityError(
                f"called '{self}' with {len(args)} arguments, but it expected {self.arity}"
            )
        return self.invoke(args)

    def invoke(self, args: Sequence[LispValue]) -> LispValue:
        raise NotImplementedError

    def __str__(self) -> str:
        if self.name is None:
            return "#<function>"
        return f"#<function '{self.name}'>"

    def __repr__(self) -> str:
        return str(self)


class NativeFunction(Function):
    """A function implemented in Python."""

    __slots__ = ("op",)

    def __init__(self, name: Symbol | None, arity: int, op: NativeOp):
        super().__init__(name, arity)
        self.op = op

    def invoke(self, args: Sequence[LispValue]) -> LispValue:
        return self.op(args)


class Closure(Function):
    """A user-defined function with formal parameters, body, and closure env."""

    __slots__ = ("parameters", "body", "env")

    def __init__(self, name: Symbol | None, parameters: Sequence[Symbol], body, env: Environment):
        super().__init__(name, len(parameters))
        self.parameters: tuple[Symbol, ...] = tuple(parameters)
        self.body = body
        # Captured by reference, not copied: later defines in this frame are visible
        self.env: Environment = env

    def invoke(self, args: Sequence[LispValue]) -> LispValue:
        # Local import: the evaluator itself constructs Closures
        from jbob.evaluation.evaluator import evaluate

        frame = self.env.make_child()
        for param, arg in zip(self.parameters, args):
            frame.define(param, arg)
        try:
            return evaluate(self.body, frame)
        except JBobError as err:
            raise err.within(f"error in '{self.name}'") from err
