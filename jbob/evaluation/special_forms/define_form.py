from jbob import SExpression
from jbob.errors import BuildError
from jbob.evaluation.ast import Define
from jbob.types.pair import iter_list
from jbob.types.symbol import Symbol


def _expect_symbol(value: SExpression, role: str) -> Symbol:
    if not isinstance(value, Symbol):
        raise BuildError(f"expected a symbol as {role}, found {value}")
    return value


def define_form(args: list[SExpression], build_fn) -> Define:
    """
    (defun name (params...) body)
    The parameter list must be a proper list of symbols.
    """
    name, params, body = args
    name = _expect_symbol(name, "function name")
    parameters = tuple(_expect_symbol(p, "parameter") for p in iter_list(params))
    return Define(name, parameters, build_fn(body))
