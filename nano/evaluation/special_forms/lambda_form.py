from nano import EvaluatorFn, NanoValue
from nano.types.closure import Closure
from nano.types.environment import Environment
from nano.types.expr import ELam


def lambda_form(expr: ELam, env: Environment, _: EvaluatorFn) -> NanoValue:
    # The body is not evaluated until application; env is shared, not copied.
    return Closure(env, expr.param, expr.body)
