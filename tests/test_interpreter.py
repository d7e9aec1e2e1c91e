import logging
import sys

import pytest

from nano.config import get_log_level, get_recursion_limit
from nano.errors import NanoSyntaxError, NanoUnboundVariable
from nano.interpreter import Interpreter, exec_expr, exec_file, exec_string
from nano.types.closure import Closure
from nano.types.expr import Binop, EApp, EBin, EInt, ENil, EVar
from nano.types.nil import Nil
from nano.types.value import Pair, Primitive, VErr, show


def test_exec_string_values():
    assert exec_string("(\\x -> x + x) 3") == 6
    assert exec_string("(2 + 3) * (4 + 5)") == 45
    assert exec_string("let fac n = if n == 0 then 1 else n * fac (n - 1) in fac 10") == 3628800


def test_exec_string_closure_scoping():
    source = """
    let f = \\g -> let x = 0 in g 2 in
    let x = 100 in
    let h = \\y -> x + y in
      f h
    """
    assert exec_string(source) == 102


@pytest.mark.parametrize(
    "source,message",
    [
        ("p", "unbound variable: p"),
        ("head []", "head called on empty list"),
        ("1 + True", "type error: expected integers"),
        ("2 == True", "type error: incompatible types for Eq"),
        ("if 1 then 2 else 3", "type error: expected bool"),
        ("1 2", "type error: expected function"),
    ]
)
def test_errors_become_error_values(source, message):
    result = exec_string(source)
    assert result == VErr(message)
    assert str(result) == f"ERROR: {message}"


def test_syntax_errors_become_error_values():
    result = exec_string("let x = in 1")
    assert isinstance(result, VErr)
    assert result.message.startswith("unexpected 'in'")


def test_exec_expr():
    el = EBin(Binop.Cons, EInt(1), EBin(Binop.Cons, EInt(2), ENil()))
    assert str(exec_expr(el)) == "(1 : (2 : []))"
    assert exec_expr(EApp(EVar("head"), el)) == 1
    assert str(exec_expr(EApp(EVar("tail"), el))) == "(2 : [])"


def test_exec_file(tmp_path):
    path = tmp_path / "t1.nano"
    path.write_text("(2 + 3) * (4 + 5)\n", encoding="utf-8")
    assert exec_file(path) == 45

    bad = tmp_path / "t2.nano"
    bad.write_text("-- nothing bound\nmissing\n", encoding="utf-8")
    assert exec_file(str(bad)) == VErr("unbound variable: missing")


def test_exec_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        exec_file(tmp_path / "nope.nano")


def test_interpreter_eval_raises(interp):
    with pytest.raises(NanoUnboundVariable):
        interp.eval("undefined")
    with pytest.raises(NanoSyntaxError):
        interp.eval("1 +")


def test_interpreter_with_host_bindings():
    double = Primitive("double", lambda v: v * 2)
    interp = Interpreter({"x": 1, "y": 2, "double": double})
    assert interp.eval("x + y") == 3
    assert interp.eval("double 21") == 42
    assert interp.eval("head [x]") == 1


def test_interpreter_runs_are_independent(interp):
    assert interp.run("let a = 1 in a") == 1
    assert interp.run("a") == VErr("unbound variable: a")


def test_deep_recursion_within_limit(interp):
    source = "let sum n = if n == 0 then 0 else n + sum (n - 1) in sum 200"
    assert interp.eval(source) == 20100


def test_interpreter_raises_recursion_limit():
    Interpreter()
    assert sys.getrecursionlimit() >= get_recursion_limit()


def test_failures_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="nano.interpreter"):
        Interpreter().run("head []")
    assert "evaluation failed: head called on empty list" in caplog.text


# -----------------------------------------------------
# Printing
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", "42"),
        ("True", "True"),
        ("1 < 0", "False"),
        ("[]", "[]"),
        ("[1, 2]", "(1 : (2 : []))"),
        ("\\x -> x + 1", "<<closure: \\x -> (x + 1)>>"),
        ("head", "<<primitive: head>>"),
        ("tail []", "[]"),
    ]
)
def test_show(source, expected):
    assert show(exec_string(source)) == expected


def test_closure_value_shape():
    result = exec_string("\\x -> x")
    assert isinstance(result, Closure)
    assert result.param == "x"
    assert result.body == EVar("x")


# -----------------------------------------------------
# Configuration
# -----------------------------------------------------

@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, 10_000),
        ("20000", 20_000),
        ("abc", 10_000),
        ("10", 1000),
    ]
)
def test_recursion_limit_from_env(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("NANO_RECURSION_LIMIT", raising=False)
    else:
        monkeypatch.setenv("NANO_RECURSION_LIMIT", raw)
    assert get_recursion_limit() == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, "WARNING"),
        ("debug", "DEBUG"),
        ("bogus", "WARNING"),
    ]
)
def test_log_level_from_env(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("NANO_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("NANO_LOG_LEVEL", raw)
    assert get_log_level() == expected


def test_pair_and_nil_values():
    assert Pair(1, Nil) == Pair(1, Nil)
    assert Pair(1, Nil) != Pair(2, Nil)
    assert not Nil


@pytest.mark.parametrize(
    "source,message",
    [
        ("head 1", "head called on non-list"),
        ("tail True", "tail called on non-list"),
        ("let x = 1 in let x = x + 1 in x", "unbound variable: x (used in its own definition)"),
    ]
)
def test_error_messages(source, message):
    assert exec_string(source) == VErr(message)
