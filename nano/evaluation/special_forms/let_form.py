from nano import EvaluatorFn, NanoValue
from nano.types.environment import Environment
from nano.types.expr import ELet


def let_form(expr: ELet, env: Environment, evaluate_fn: EvaluatorFn) -> NanoValue:
    """Evaluate `let x = e1 in e2`.

    `e1` is evaluated in the environment that already contains `x`, so a
    lambda bound here can call itself by name. Only the lambda case can make
    use of this: a non-function `e1` that reads `x` finds it unbound.
    """
    new_env = env.extend_recursive(
        expr.name, lambda inner: evaluate_fn(inner, expr.bound)
    )
    return evaluate_fn(new_env, expr.body)
