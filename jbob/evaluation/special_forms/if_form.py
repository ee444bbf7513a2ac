from jbob import SExpression
from jbob.evaluation.ast import If


def if_form(args: list[SExpression], build_fn) -> If:
    question, answer, else_ = args
    return If(build_fn(question), build_fn(answer), build_fn(else_))
