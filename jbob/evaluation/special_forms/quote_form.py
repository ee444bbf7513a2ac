from jbob import SExpression
from jbob.evaluation.ast import Literal


def quote_form(args: list[SExpression], build_fn) -> Literal:
    """(quote x) yields x itself, unevaluated."""
    return Literal(args[0])
