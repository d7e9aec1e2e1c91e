import pytest

from nano.builtins import prelude
from nano.interpreter import Interpreter
from nano.types.environment import Environment


# Bindings used throughout the evaluator examples; note z1 is bound twice and
# the first (front) binding wins.
ENV0 = [
    ("z1", 0),
    ("x", 1),
    ("y", 2),
    ("z", 3),
    ("z1", 4),
]


@pytest.fixture
def env0() -> Environment:
    return Environment.from_bindings(ENV0)


@pytest.fixture
def empty_env() -> Environment:
    return Environment.empty()


@pytest.fixture
def prelude_env() -> Environment:
    return prelude()


@pytest.fixture
def interp() -> Interpreter:
    """Fresh interpreter over the prelude."""
    return Interpreter()
