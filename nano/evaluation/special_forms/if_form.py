from nano import EvaluatorFn, NanoValue
from nano.errors import NanoTypeError
from nano.types.environment import Environment
from nano.types.expr import EIf
from nano.types.value import is_bool


def if_form(expr: EIf, env: Environment, evaluate_fn: EvaluatorFn) -> NanoValue:
    cond = evaluate_fn(env, expr.cond)
    # No truthiness: the predicate must be a boolean
    if not is_bool(cond):
        raise NanoTypeError("type error: expected bool")

    if cond:
        return evaluate_fn(env, expr.then)
    else:
        return evaluate_fn(env, expr.else_)
