"""Function application for J-Bob.

Arity checking and dispatch between natives and closures live on
`Function.call`; this module only rejects values that are not functions.
"""

from typing import Sequence

from jbob import LispValue
from jbob.errors import NotCallableError
from jbob.types.function import Function


def apply(head: LispValue, args: Sequence[LispValue]) -> LispValue:
    if not isinstance(head, Function):
        raise NotCallableError(f"cannot call {head} as function")
    return head.call(args)
