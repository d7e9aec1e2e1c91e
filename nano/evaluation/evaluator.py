"""Core evaluator for the Nano interpreter.

A strict recursive-descent walk over the expression tree. Failures are raised
as NanoError subclasses and never caught here; the driver decides how to
report them.
"""

from __future__ import annotations

from nano import NanoValue
from nano.errors import NanoInternalError
from nano.types.environment import Environment
from nano.types.expr import EBool, EInt, ENil, EVar, Expr
from nano.types.nil import Nil
from nano.evaluation.special_forms import SPECIAL_FORMS


def evaluate(env: Environment, expr: Expr) -> NanoValue:
    """Evaluate `expr`, resolving its free variables in `env`."""
    match expr:
        case EInt(value=value) | EBool(value=value):
            return value
        case EVar(name=name):
            return env.lookup(name)
        case ENil():
            return Nil

    handler = SPECIAL_FORMS.get(type(expr))
    if handler is None:
        raise NanoInternalError(f"internal error: cannot evaluate {expr!r}")
    return handler(expr, env, evaluate)
