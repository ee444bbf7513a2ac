"""Cons cells and proper-list helpers."""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator

from jbob import LispValue
from jbob.errors import ImproperListError
from jbob.types.nil import Null


class Pair:
    """An immutable cons cell. Pairs are shared by reference, never copied."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        object.__setattr__(self, "car", car)
        object.__setattr__(self, "cdr", cdr)

    def __setattr__(self, attr, value):
        raise AttributeError("Pair is immutable")

    @classmethod
    def from_iterable(cls, items: Iterable[LispValue], tail: LispValue = Null) -> LispValue:
        """Build a right-nested list of `items` ending in `tail`."""
        result = tail
        for item in reversed(list(items)):
            result = cls(item, result)
        return result

    def __eq__(self, other) -> bool:
        a, b = self, other
        # Walk the spine iteratively so long lists do not hit the recursion limit
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is b:
                return True
            if a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        if isinstance(a, Pair) or isinstance(b, Pair):
            return False
        return a is b or a == b

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(str(self.car))
            rest = self.cdr
            while isinstance(rest, Pair):
                buffer.write(" ")
                buffer.write(str(rest.car))
                rest = rest.cdr
            if rest is not Null:
                buffer.write(" . ")
                buffer.write(str(rest))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Pair({self.car!r}, {self.cdr!r})"


def iter_list(value: LispValue) -> Iterator[LispValue]:
    """Yield the elements of a proper list.

    Raises ImproperListError when the chain does not end in ().
    """
    rest = value
    while isinstance(rest, Pair):
        yield rest.car
        rest = rest.cdr
    if rest is not Null:
        raise ImproperListError(f"expected a proper list, found {value}")
