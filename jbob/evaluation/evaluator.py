"""Tree-walking evaluator for J-Bob.

No tail calls are eliminated: every application recurses on the Python
stack. The only side effect is `Define` binding into its environment.
"""

from __future__ import annotations

import logging

from jbob import LispValue
from jbob.evaluation.apply import apply
from jbob.evaluation.ast import Apply, Ast, Define, If, Literal, VariableRef
from jbob.types.environment import Environment
from jbob.types.function import Closure
from jbob.types.nil import Null

logger = logging.getLogger(__name__)


def evaluate(ast: Ast, env: Environment) -> LispValue:
    match ast:
        case Literal(value=value):
            return value

        case VariableRef(symbol=symbol):
            return env.lookup(symbol)

        case Apply(function=function, arguments=arguments):
            head = evaluate(function, env)
            # Left to right
            args = [evaluate(arg, env) for arg in arguments]
            return apply(head, args)

        case If(condition=condition, then=then, else_=else_):
            # Only () is false; 0 is true
            if evaluate(condition, env) is not Null:
                return evaluate(then, env)
            return evaluate(else_, env)

        case Define(name=name, parameters=parameters, body=body):
            # The closure captures `env` itself, so binding `name` there
            # afterwards makes self-calls resolve at call time.
            closure = Closure(name, parameters, body, env)
            env.define(name, closure)
            logger.debug("defined %s/%d", name, len(parameters))
            return Null

    raise TypeError(f"not an AST node: {ast!r}")
