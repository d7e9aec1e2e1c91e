"""Expression tree for Nano programs.

The reader produces these nodes and the evaluator consumes them read-only.
Every node is a frozen dataclass so trees can be shared freely, compared
structurally in tests, and captured inside closures without copying.
`str()` renders a node back into Nano surface syntax.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Binop(Enum):
    Plus = "+"
    Minus = "-"
    Mul = "*"
    Lt = "<"
    Le = "<="
    Eq = "=="
    Ne = "/="
    And = "&&"
    Or = "||"
    Cons = ":"

    @property
    def symbol(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class Expr:
    """Base class of all expression nodes."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EInt(Expr):
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class EBool(Expr):
    value: bool

    def __str__(self) -> str:
        return "True" if self.value else "False"


@dataclass(frozen=True, slots=True)
class EVar(Expr):
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class EBin(Expr):
    op: Binop
    left: Expr
    right: Expr

    def __str__(self) -> str:
        return f"({_operand(self.left)} {self.op} {_operand(self.right)})"


@dataclass(frozen=True, slots=True)
class EIf(Expr):
    cond: Expr
    then: Expr
    else_: Expr

    def __str__(self) -> str:
        return f"if {self.cond} then {self.then} else {self.else_}"


@dataclass(frozen=True, slots=True)
class ELet(Expr):
    name: str
    bound: Expr
    body: Expr

    def __str__(self) -> str:
        return f"let {self.name} = {self.bound} in {self.body}"


@dataclass(frozen=True, slots=True)
class ELam(Expr):
    param: str
    body: Expr

    def __str__(self) -> str:
        return f"\\{self.param} -> {self.body}"


@dataclass(frozen=True, slots=True)
class EApp(Expr):
    fn: Expr
    arg: Expr

    def __str__(self) -> str:
        return f"({_operand(self.fn)} {_operand(self.arg)})"


@dataclass(frozen=True, slots=True)
class ENil(Expr):

    def __str__(self) -> str:
        return "[]"


def _operand(expr: Expr) -> str:
    # if/let/lambda extend as far right as possible, so they need parens as operands
    if isinstance(expr, (EIf, ELet, ELam)):
        return f"({expr})"
    return str(expr)
