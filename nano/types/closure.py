"""Closure representation for Nano."""

from __future__ import annotations

from nano import NanoValue
from nano.types.environment import Environment
from nano.types.expr import Expr


class Closure:
    """A one-parameter function value with the environment it was created in."""

    __slots__ = ("env", "param", "body")

    def __init__(self, env: Environment, param: str, body: Expr):
        self.env: Environment = env
        self.param: str = param
        self.body: Expr = body

    def __str__(self) -> str:
        return f"<<closure: \\{self.param} -> {self.body}>>"

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, arg: NanoValue) -> Environment:
        """
        Bind the argument value to the parameter on top of the captured
        environment (not the caller's) and return the environment for the body.
        """
        return self.env.extend(self.param, arg)
