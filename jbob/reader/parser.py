"""
  J-Bob Reader, Lexer and Parser

- Streaming: one top-level expression at a time
- Emits runtime values directly:

    - integers (optionally signed: 1, +2, -20) -> int
    - nil -> Null
    - () -> Null
    - (a b c) -> Pair chain ending in Null
    - (a . b) -> Pair chain ending in b
    - 'x -> (quote x)
    - anything else -> Symbol, interned through the caller's SymbolTable

Errors carry a 1-based line and column and render a caret under the
offending character.
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional

from jbob import SExpression
from jbob.errors import ParseError
from jbob.types.nil import Null
from jbob.types.pair import Pair
from jbob.types.symbol import SymbolTable


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<quote>')"
    r"|(?P<atom>[^\s();']+)"  # integers, symbols and the dot
)

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class Token(NamedTuple):
    type: str
    value: str
    offset: int


def position(source: str, offset: int) -> tuple[int, int, str]:
    """Return the 1-based (line, column) of `offset` and the text of its line."""
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    line_end = source.find("\n", offset)
    if line_end == -1:
        line_end = len(source)
    return line, offset - line_start + 1, source[line_start:line_end]


def syntax_error(source: str, offset: int, message: str) -> ParseError:
    line, column, text = position(source, offset)
    return ParseError(message, line, column, text)


def lex(source: str) -> Iterator[Token]:
    """Token generator: skips whitespace and comments."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise syntax_error(source, pos, f"unexpected character {source[pos]!r}")
        kind = m.lastgroup
        if kind not in ("whitespace", "comment"):
            yield Token(kind, m.group(kind), pos)
        pos = m.end()


class TokenStream:
    def __init__(self, source: str, symbols: SymbolTable):
        self.source = source
        self.symbols = symbols
        self.tokens = lex(source)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            tok = next(self.tokens, None)
            if tok is None:
                return None
            self.buffer.append(tok)
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def error(self, tok: Optional[Token], message: str) -> ParseError:
        offset = len(self.source) if tok is None else tok.offset
        return syntax_error(self.source, offset, message)

    def parse_expr(self) -> Optional[SExpression]:
        """Parse the next expression, or return None at end of input."""
        tok = self.advance()
        if tok is None:
            return None

        if tok.type == "lparen":
            return self._parse_list(tok)

        if tok.type == "rparen":
            raise self.error(tok, "unexpected ')'")

        if tok.type == "quote":
            expr = self._parse_required("expected an expression after quote")
            return Pair(self.symbols.intern("quote"), Pair(expr, Null))

        if tok.value == ".":
            raise self.error(tok, "unexpected '.'")
        return self._parse_atom(tok.value)

    def parse_form(self) -> Optional[SExpression]:
        """Parse one top-level expression, reporting runaway nesting at its start."""
        start = self.peek()
        try:
            return self.parse_expr()
        except RecursionError as err:
            raise self.error(start, "expression nested too deeply") from err

    def parse_all(self) -> Iterator[SExpression]:
        while (expr := self.parse_form()) is not None:
            yield expr

    def _parse_required(self, message: str) -> SExpression:
        nxt = self.peek()
        if nxt is None or nxt.type == "rparen":
            raise self.error(nxt, message)
        return self.parse_expr()

    def _parse_list(self, open_tok: Token) -> SExpression:
        items: list[SExpression] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise self.error(open_tok, "unmatched '('")
            if tok.type == "rparen":
                self.advance()
                return Pair.from_iterable(items)
            if tok.type == "atom" and tok.value == ".":
                if not items:
                    raise self.error(tok, "unexpected '.'")
                self.advance()
                tail = self._parse_required("expected an expression after '.'")
                close = self.advance()
                if close is None or close.type != "rparen":
                    raise self.error(close, "expected ')' after dotted tail")
                return Pair.from_iterable(items, tail)
            items.append(self.parse_expr())

    def _parse_atom(self, text: str) -> SExpression:
        if INTEGER_RE.fullmatch(text):
            return int(text)
        if text == "nil":
            return Null
        return self.symbols.intern(text)


def read_str(source: str, symbols: SymbolTable) -> SExpression:
    """Parse exactly one expression from `source`."""
    stream = TokenStream(source, symbols)
    expr = stream.parse_form()
    if expr is None:
        raise stream.error(None, "expected an expression")
    extra = stream.peek()
    if extra is not None:
        raise stream.error(extra, "unexpected input after expression")
    return expr


def read_file(source: str, symbols: SymbolTable) -> list[SExpression]:
    """Parse every top-level expression in `source`, in order."""
    return list(TokenStream(source, symbols).parse_all())
