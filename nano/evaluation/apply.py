"""Application engine for Nano.

Centralizes function application so the evaluator and any host code calling
Nano functions share one set of rules:
- Closures run their body in the captured environment extended with the
  parameter (lexical scoping); the caller's environment is never consulted.
- Primitives are plain Python callables applied to the argument value.
- Anything else is a type error.
"""

from __future__ import annotations

from nano import NanoValue, EvaluatorFn
from nano.errors import NanoTypeError
from nano.types.closure import Closure
from nano.types.environment import Environment
from nano.types.expr import EApp
from nano.types.value import Primitive


def is_function(value: NanoValue) -> bool:
    return isinstance(value, (Closure, Primitive))


def apply(fn: NanoValue, arg: NanoValue, evaluate_fn: EvaluatorFn) -> NanoValue:
    """Apply an already evaluated function value to an evaluated argument."""
    if isinstance(fn, Closure):
        return evaluate_fn(fn.extend_env(arg), fn.body)
    elif isinstance(fn, Primitive):
        return fn(arg)
    else:
        raise NanoTypeError("type error: expected function")


def app_form(expr: EApp, env: Environment, evaluate_fn: EvaluatorFn) -> NanoValue:
    fn = evaluate_fn(env, expr.fn)
    if not is_function(fn):
        # The argument is never evaluated for a non-function
        raise NanoTypeError("type error: expected function")
    arg = evaluate_fn(env, expr.arg)
    return apply(fn, arg, evaluate_fn)
