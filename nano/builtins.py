"""Built-in functions bound in the initial environment.

The prelude holds exactly two primitives, `head` and `tail`. Each takes one
list value; neither is ever applied to anything but an evaluated value.
"""
from __future__ import annotations

from nano import NanoValue
from nano.errors import NanoEmptyListError, NanoTypeError
from nano.types.environment import Environment
from nano.types.nil import Nil
from nano.types.value import Pair, Primitive, is_nil


def head(value: NanoValue) -> NanoValue:
    """First element of a non-empty list."""
    if isinstance(value, Pair):
        return value.head
    if is_nil(value):
        raise NanoEmptyListError("head called on empty list")
    raise NanoTypeError("head called on non-list")


def tail(value: NanoValue) -> NanoValue:
    """Rest of a list; the tail of [] is []."""
    if isinstance(value, Pair):
        return value.tail
    if is_nil(value):
        return Nil
    raise NanoTypeError("tail called on non-list")


PRIMITIVES: dict[str, Primitive] = {
    "head": Primitive("head", head),
    "tail": Primitive("tail", tail),
}

_PRELUDE = Environment.from_bindings(PRIMITIVES.items())


def prelude() -> Environment:
    """The initial environment. Shared safely since environments never change."""
    return _PRELUDE
