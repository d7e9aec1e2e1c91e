"""Binary operators.

Both operands are always evaluated, left first, before any type check. This
holds for `&&` and `||` too: Nano's logical operators do not short-circuit.
"""

from __future__ import annotations

import operator
from typing import Callable

from nano import EvaluatorFn, NanoValue
from nano.errors import NanoTypeError, NanoInternalError
from nano.types.environment import Environment
from nano.types.expr import Binop, EBin
from nano.types.value import Pair, is_bool, is_int, is_nil


_INTEGER_OPS: dict[Binop, Callable[[int, int], NanoValue]] = {
    Binop.Plus: operator.add,
    Binop.Minus: operator.sub,
    Binop.Mul: operator.mul,
    Binop.Lt: operator.lt,
    Binop.Le: operator.le,
}

_BOOLEAN_OPS: dict[Binop, Callable[[bool, bool], bool]] = {
    Binop.And: lambda a, b: a and b,
    Binop.Or: lambda a, b: a or b,
}


def _equals(op: Binop, left: NanoValue, right: NanoValue) -> bool:
    # nil is comparable with anything: equal only to itself
    if is_nil(left) or is_nil(right):
        return is_nil(left) and is_nil(right)
    if is_int(left) and is_int(right):
        return left == right
    if is_bool(left) and is_bool(right):
        return left == right
    raise NanoTypeError(f"type error: incompatible types for {op.name}")


def eval_op(op: Binop, left: NanoValue, right: NanoValue) -> NanoValue:
    """Apply `op` to two evaluated operands."""
    if op is Binop.Cons:
        return Pair(left, right)

    if op in _INTEGER_OPS:
        if not (is_int(left) and is_int(right)):
            raise NanoTypeError("type error: expected integers")
        return _INTEGER_OPS[op](left, right)

    if op is Binop.Eq:
        return _equals(op, left, right)
    if op is Binop.Ne:
        return not _equals(op, left, right)

    if op in _BOOLEAN_OPS:
        if not (is_bool(left) and is_bool(right)):
            raise NanoTypeError("type error: expected booleans")
        return _BOOLEAN_OPS[op](left, right)

    raise NanoInternalError(f"internal error: unknown operator {op!r}")


def binop_form(expr: EBin, env: Environment, evaluate_fn: EvaluatorFn) -> NanoValue:
    left = evaluate_fn(env, expr.left)
    right = evaluate_fn(env, expr.right)
    return eval_op(expr.op, left, right)
