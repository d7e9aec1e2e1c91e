"""Runtime values that have no native Python counterpart.

Integers and booleans are plain `int` and `bool`, the empty list is the `Nil`
singleton, and the classes below cover cons cells, built-in functions and the
driver's error result. Closures live in nano.types.closure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from nano import NanoValue
from nano.types.nil import Nil, NilType


@dataclass(frozen=True, slots=True)
class Pair:
    """A cons cell. Lists are right-nested pairs ending in Nil."""

    head: NanoValue
    tail: NanoValue

    def __str__(self) -> str:
        return f"({show(self.head)} : {show(self.tail)})"


@dataclass(frozen=True, slots=True, eq=False)
class Primitive:
    """A built-in unary function, opaque to the evaluator."""

    name: str
    fn: Callable[[NanoValue], NanoValue]

    def __call__(self, arg: NanoValue) -> NanoValue:
        return self.fn(arg)

    def __str__(self) -> str:
        return f"<<primitive: {self.name}>>"


@dataclass(frozen=True, slots=True)
class VErr:
    """The driver's result for a failed evaluation. Never seen by the evaluator."""

    message: str

    def __str__(self) -> str:
        return f"ERROR: {self.message}"


def is_int(value: NanoValue) -> bool:
    # bool is a subclass of int in Python but a distinct Nano type
    return isinstance(value, int) and not isinstance(value, bool)


def is_bool(value: NanoValue) -> bool:
    return isinstance(value, bool)


def is_nil(value: NanoValue) -> bool:
    return isinstance(value, NilType)


def show(value: NanoValue) -> str:
    """Render a value the way the REPL prints it."""
    if is_bool(value):
        return "True" if value else "False"
    return str(value)


def from_list(items: Iterable[NanoValue]) -> NanoValue:
    """Build a nil-terminated pair chain from a Python iterable."""
    result: NanoValue = Nil
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def to_list(value: NanoValue) -> list[NanoValue]:
    """Flatten a nil-terminated pair chain; ValueError for improper lists."""
    items: list[NanoValue] = []
    while isinstance(value, Pair):
        items.append(value.head)
        value = value.tail
    if not is_nil(value):
        raise ValueError(f"not a proper list: tail is {show(value)}")
    return items
