"""Runtime environment for Nano.

An Environment is a persistent singly-linked chain of bindings. Extending an
environment allocates one new frame whose tail is the old environment, so the
old environment is untouched and closures can capture "the environment at this
point" by holding a reference. Earlier frames shadow later ones.
"""

from __future__ import annotations

from io import StringIO
from typing import Callable, Iterable, Iterator

from nano import NanoValue
from nano.errors import NanoUnboundVariable


# Placeholder held by a recursive binding while its right-hand side is evaluated
_UNSET = object()


class Environment:
    """Immutable chain of (name, value) frames with structural sharing."""

    __slots__ = ("_name", "_value", "_rest")

    def __init__(self):
        # The frameless environment; use extend() to add bindings
        self._name: str | None = None
        self._value: NanoValue = _UNSET
        self._rest: Environment | None = None

    @classmethod
    def empty(cls) -> Environment:
        return _EMPTY

    @classmethod
    def from_bindings(cls, bindings: Iterable[tuple[str, NanoValue]]) -> Environment:
        """Build an environment whose first binding is the first pair given."""
        env = _EMPTY
        for name, value in reversed(list(bindings)):
            env = env.extend(name, value)
        return env

    @property
    def is_empty(self) -> bool:
        return self._rest is None

    def extend(self, name: str, value: NanoValue) -> Environment:
        """Return a new environment binding `name` in front of this one."""
        env = Environment.__new__(Environment)
        env._name = name
        env._value = value
        env._rest = self
        return env

    def extend_recursive(
        self, name: str, compute: Callable[[Environment], NanoValue]
    ) -> Environment:
        """Bind `name` to the value `compute` produces in the extended environment.

        The new frame exists (unfilled) while `compute` runs, so closures built
        by `compute` capture an environment in which `name` refers to
        themselves. The frame is filled before the environment is returned.
        """
        env = self.extend(name, _UNSET)
        env._value = compute(env)
        return env

    def lookup(self, name: str) -> NanoValue:
        """Return the value of the first frame binding `name`.

        Raises NanoUnboundVariable if no frame binds it, or if the first
        frame binding it is a recursive one whose value is still being
        computed. Outer bindings of the same name are shadowed by that frame
        and never consulted.
        """
        env: Environment = self
        while env._rest is not None:
            if env._name == name:
                if env._value is _UNSET:
                    raise NanoUnboundVariable(name, "used in its own definition")
                return env._value
            env = env._rest
        raise NanoUnboundVariable(name)

    def __contains__(self, name: str) -> bool:
        return any(n == name for n, _ in self)

    def __iter__(self) -> Iterator[tuple[str, NanoValue]]:
        """Yield (name, value) pairs front to back, shadowed bindings included."""
        env: Environment = self
        while env._rest is not None:
            yield env._name, env._value
            env = env._rest

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def names(self) -> list[str]:
        return [n for n, _ in self]

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment: ")
            buffer.write(", ".join(
                f"{n}=<unset>" if v is _UNSET else f"{n}={v}" for n, v in self
            ))
            buffer.write(">")
            return buffer.getvalue()


_EMPTY = Environment()


def lookup(name: str, env: Environment) -> NanoValue:
    return env.lookup(name)


def extend(env: Environment, name: str, value: NanoValue) -> Environment:
    return env.extend(name, value)
