"""
  Nano Lexer and Parser

- Regex lexer producing (kind, text, pos) tokens
- Recursive-descent parser over a TokenStream, one function per precedence level
- Emits the frozen expression nodes of nano.types.expr:

    - 123            -> EInt(123)
    - True / False   -> EBool(...)
    - x              -> EVar("x")
    - e1 + e2        -> EBin(Binop.Plus, e1, e2), likewise - * < <= == /= && || :
    - f x            -> EApp(EVar("f"), EVar("x"))
    - \\x y -> e      -> ELam("x", ELam("y", e))
    - let f x = e in b  -> ELet("f", ELam("x", e), b)
    - if c then t else e -> EIf(c, t, e)
    - [] / [1, 2]    -> ENil() / EBin(Cons, 1, EBin(Cons, 2, ENil()))

Operator precedence, loosest first:
    ||  (left)
    &&  (left)
    == /= < <=  (non-associative)
    :   (right)
    + - (left)
    *   (left)
    application (left)
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional

from nano.errors import NanoSyntaxError
from nano.types.expr import (
    Binop, Expr, EApp, EBin, EBool, EIf, EInt, ELam, ELet, ENil, EVar,
)


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>--[^\n]*)"  # line comment
    r"|(?P<number>\d+)"
    r"|(?P<ident>[A-Za-z_][A-Za-z0-9_']*)"
    r"|(?P<arrow>->)"
    r"|(?P<op>&&|\|\||==|/=|<=|<|\+|-|\*|:)"
    r"|(?P<equals>=)"
    r"|(?P<backslash>\\)"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<lbracket>\[)"
    r"|(?P<rbracket>\])"
    r"|(?P<comma>,)"
    r")",
)

KEYWORDS = frozenset({"let", "in", "if", "then", "else", "True", "False"})

BINOPS: dict[str, Binop] = {op.symbol: op for op in Binop}

_COMPARISONS = frozenset({Binop.Eq, Binop.Ne, Binop.Lt, Binop.Le})

# Tokens that can begin an application argument
_ATOM_START = frozenset({"number", "ident", "lparen", "lbracket"})


class Token(NamedTuple):
    kind: str
    text: str
    pos: int


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, text, pos); comments are dropped."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            rest = source[pos:]
            if rest.isspace():
                return
            pos += len(rest) - len(rest.lstrip())
            raise NanoSyntaxError(f"unexpected character {source[pos]!r}", pos)
        kind = m.lastgroup
        text = m.group(kind)
        start = m.start(kind)
        pos = m.end()
        if kind == "comment":
            continue
        if kind == "ident" and text in KEYWORDS:
            kind = "keyword"
        yield Token(kind, text, start)


class TokenStream:
    def __init__(self, tokens: Iterator[Token], source_length: int = 0):
        self.tokens = iter(tokens)
        self.buffer: list[Token] = []
        self.end = Token("eof", "", source_length)

    def peek(self) -> Token:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return self.end
        return self.buffer[0]

    def advance(self) -> Token:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, self.end)

    def at(self, kind: str, text: Optional[str] = None) -> bool:
        tok = self.peek()
        return tok.kind == kind and (text is None or tok.text == text)

    def expect(self, kind: str, text: Optional[str] = None) -> Token:
        if not self.at(kind, text):
            tok = self.peek()
            wanted = text if text is not None else kind
            raise NanoSyntaxError(f"expected {wanted!r} but found {_describe(tok)}", tok.pos)
        return self.advance()

    def parse_all(self) -> Expr:
        """Parse a complete program: exactly one expression, then end of input."""
        expr = self.parse_expr()
        tok = self.peek()
        if tok.kind != "eof":
            raise NanoSyntaxError(f"unexpected {_describe(tok)}", tok.pos)
        return expr

    # ------------------------
    # Binding forms
    # ------------------------
    def parse_expr(self) -> Expr:
        if self.at("backslash"):
            return self.parse_lambda()
        if self.at("keyword", "let"):
            return self.parse_let()
        if self.at("keyword", "if"):
            return self.parse_if()
        return self.parse_or()

    def _params(self) -> list[str]:
        params = []
        while self.at("ident"):
            params.append(self.advance().text)
        return params

    def parse_lambda(self) -> Expr:
        self.expect("backslash")
        params = self._params()
        if not params:
            tok = self.peek()
            raise NanoSyntaxError("lambda requires a parameter", tok.pos)
        self.expect("arrow")
        return _curry(params, self.parse_expr())

    def parse_let(self) -> Expr:
        self.expect("keyword", "let")
        name = self.expect("ident").text
        params = self._params()
        self.expect("equals")
        bound = self.parse_expr()
        self.expect("keyword", "in")
        body = self.parse_expr()
        return ELet(name, _curry(params, bound), body)

    def parse_if(self) -> Expr:
        self.expect("keyword", "if")
        cond = self.parse_expr()
        self.expect("keyword", "then")
        then = self.parse_expr()
        self.expect("keyword", "else")
        return EIf(cond, then, self.parse_expr())

    # ------------------------
    # Operators
    # ------------------------
    def _binop(self, *ops: Binop) -> Optional[Binop]:
        tok = self.peek()
        if tok.kind == "op" and BINOPS[tok.text] in ops:
            self.advance()
            return BINOPS[tok.text]
        return None

    def parse_or(self) -> Expr:
        expr = self.parse_and()
        while (op := self._binop(Binop.Or)) is not None:
            expr = EBin(op, expr, self.parse_and())
        return expr

    def parse_and(self) -> Expr:
        expr = self.parse_comparison()
        while (op := self._binop(Binop.And)) is not None:
            expr = EBin(op, expr, self.parse_comparison())
        return expr

    def parse_comparison(self) -> Expr:
        expr = self.parse_cons()
        if (op := self._binop(*_COMPARISONS)) is not None:
            expr = EBin(op, expr, self.parse_cons())
            tok = self.peek()
            if tok.kind == "op" and BINOPS[tok.text] in _COMPARISONS:
                raise NanoSyntaxError(f"cannot chain comparison {tok.text!r}", tok.pos)
        return expr

    def parse_cons(self) -> Expr:
        expr = self.parse_additive()
        if (op := self._binop(Binop.Cons)) is not None:
            return EBin(op, expr, self.parse_cons())
        return expr

    def parse_additive(self) -> Expr:
        expr = self.parse_multiplicative()
        while (op := self._binop(Binop.Plus, Binop.Minus)) is not None:
            expr = EBin(op, expr, self.parse_multiplicative())
        return expr

    def parse_multiplicative(self) -> Expr:
        expr = self.parse_application()
        while (op := self._binop(Binop.Mul)) is not None:
            expr = EBin(op, expr, self.parse_application())
        return expr

    def parse_application(self) -> Expr:
        # A binding form as an operand extends as far right as possible
        if self.at("backslash") or self.at("keyword", "let") or self.at("keyword", "if"):
            return self.parse_expr()
        expr = self.parse_atom()
        while self._starts_atom():
            expr = EApp(expr, self.parse_atom())
        return expr

    # ------------------------
    # Atoms
    # ------------------------
    def _starts_atom(self) -> bool:
        tok = self.peek()
        return tok.kind in _ATOM_START or (tok.kind == "keyword" and tok.text in ("True", "False"))

    def parse_atom(self) -> Expr:
        tok = self.advance()
        if tok.kind == "number":
            return EInt(int(tok.text))
        if tok.kind == "keyword" and tok.text in ("True", "False"):
            return EBool(tok.text == "True")
        if tok.kind == "ident":
            return EVar(tok.text)
        if tok.kind == "lparen":
            expr = self.parse_expr()
            self.expect("rparen")
            return expr
        if tok.kind == "lbracket":
            return self.parse_list()
        raise NanoSyntaxError(f"unexpected {_describe(tok)}", tok.pos)

    def parse_list(self) -> Expr:
        # '[' already consumed
        items: list[Expr] = []
        if not self.at("rbracket"):
            items.append(self.parse_expr())
            while self.at("comma"):
                self.advance()
                items.append(self.parse_expr())
        self.expect("rbracket")
        result: Expr = ENil()
        for item in reversed(items):
            result = EBin(Binop.Cons, item, result)
        return result


def _curry(params: list[str], body: Expr) -> Expr:
    for param in reversed(params):
        body = ELam(param, body)
    return body


def _describe(tok: Token) -> str:
    return "end of input" if tok.kind == "eof" else f"{tok.text!r}"


def parse(source: str) -> Expr:
    """Parse Nano source text into an expression tree."""
    return TokenStream(lex(source), len(source)).parse_all()
