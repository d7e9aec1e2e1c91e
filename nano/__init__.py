# Core type aliases for Nano's data model.
# Expressions are frozen dataclasses (nano.types.expr); runtime values reuse plain
# Python types where they exist (int, bool) and small classes where they do not
# (Nil, Pair, Closure, Primitive, VErr).
#
# Naming guidance:
# - Expr:      Use in reader/evaluator code to denote syntax trees.
# - NanoValue: Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
NanoValue = Any

# Evaluator function type: passed to form handlers so they can recurse
EvaluatorFn = Callable[..., NanoValue]
