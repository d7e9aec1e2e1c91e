"""Top-level driver: parse, evaluate in the prelude, report.

This is the one place where a NanoError stops being an exception and becomes
a value (VErr). Everything below raises; everything above receives data.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Mapping

from nano import NanoValue
from nano.builtins import prelude
from nano.config import get_recursion_limit
from nano.errors import NanoError
from nano.evaluation.evaluator import evaluate
from nano.reader.parser import parse
from nano.types.environment import Environment
from nano.types.expr import Expr
from nano.types.value import VErr


logger = logging.getLogger(__name__)


def _ensure_recursion_limit() -> None:
    limit = get_recursion_limit()
    if sys.getrecursionlimit() < limit:
        logger.debug("raising recursion limit to %d", limit)
        sys.setrecursionlimit(limit)


class Interpreter:
    """
    Evaluates Nano programs against a fixed base environment: the prelude,
    optionally extended with host-supplied bindings. Each program is a single
    expression, so nothing carries over from one call to the next.
    """

    def __init__(self, bindings: Mapping[str, NanoValue] | None = None):
        env = prelude()
        for name, value in (bindings or {}).items():
            env = env.extend(name, value)
        self.env: Environment = env
        _ensure_recursion_limit()

    def eval_expr(self, expr: Expr) -> NanoValue:
        """Evaluate a parsed expression; NanoError propagates."""
        return evaluate(self.env, expr)

    def eval(self, source: str) -> NanoValue:
        """Parse and evaluate source text; NanoError propagates."""
        return self.eval_expr(parse(source))

    def run_expr(self, expr: Expr) -> NanoValue:
        """Evaluate a parsed expression, returning VErr instead of raising."""
        try:
            return self.eval_expr(expr)
        except NanoError as e:
            logger.debug("evaluation failed: %s", e.message)
            return VErr(e.message)

    def run(self, source: str) -> NanoValue:
        """Parse and evaluate source text, returning VErr instead of raising."""
        try:
            expr = parse(source)
        except NanoError as e:
            logger.debug("parse failed: %s", e.message)
            return VErr(e.message)
        return self.run_expr(expr)


def exec_expr(expr: Expr) -> NanoValue:
    return Interpreter().run_expr(expr)


def exec_string(source: str) -> NanoValue:
    return Interpreter().run(source)


def exec_file(path: str | Path) -> NanoValue:
    source = Path(path).read_text(encoding="utf-8")
    logger.info("running %s", path)
    return exec_string(source)
