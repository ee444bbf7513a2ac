"""Executable tree built from raw s-expressions.

Nodes are frozen once built. A Define's body is shared by every call of the
closure it produces.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from jbob import LispValue
from jbob.types.symbol import Symbol


@dataclass(frozen=True)
class Literal:
    value: LispValue


@dataclass(frozen=True)
class VariableRef:
    symbol: Symbol


@dataclass(frozen=True)
class Apply:
    function: Ast
    arguments: Tuple[Ast, ...]


@dataclass(frozen=True)
class If:
    condition: Ast
    then: Ast
    else_: Ast


@dataclass(frozen=True)
class Define:
    name: Symbol
    parameters: Tuple[Symbol, ...]
    body: Ast


Ast = Union[Literal, VariableRef, Apply, If, Define]
