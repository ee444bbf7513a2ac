"""Registry of special forms for the AST builder.

Maps form names to their expected argument count and the handler that turns
the (already arity-checked) arguments into an AST node. The builder consults
this table before treating a list as a function application.
"""

from __future__ import annotations

from typing import Callable, NamedTuple

from jbob import SExpression
from jbob.evaluation.ast import Ast
from jbob.evaluation.special_forms.quote_form import quote_form
from jbob.evaluation.special_forms.if_form import if_form
from jbob.evaluation.special_forms.define_form import define_form

BuildFn = Callable[[SExpression], Ast]


class SpecialForm(NamedTuple):
    name: str
    arity: int
    handler: Callable[[list[SExpression], BuildFn], Ast]


SPECIAL_FORMS: dict[str, SpecialForm] = {
    "quote": SpecialForm("quote", 1, quote_form),
    "if": SpecialForm("if", 3, if_form),
    "defun": SpecialForm("defun", 3, define_form),
    # dethm marks a proof obligation; at runtime it is a defun
    "dethm": SpecialForm("dethm", 3, define_form),
}
