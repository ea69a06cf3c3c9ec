"""
  Cinder Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives instead of Cons cells:

    - lists -> Python list
    - symbols -> Symbol
    - integers -> int (signed 64-bit range)
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from cinder import SExpression
from cinder.errors import CinderSyntaxError
from cinder.types.symbol import Symbol


INT_MIN = -(2**63)
INT_MAX = 2**63 - 1
MAX_DIGITS = 19

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<symbol>[^\s();]+)"  # symbols and integers
    r")",
)

INTEGER_RE = re.compile(r"[+-]?\d+")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # Only trailing whitespace is left
            if source[pos:].isspace():
                break
            raise CinderSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("lparen", "rparen", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break


def parse_atom(text: str) -> SExpression:
    """Turn a symbol token into an int or a Symbol."""
    if INTEGER_RE.fullmatch(text):
        # Bound the digit count before converting; 2**63 has 19 digits
        if len(text.lstrip("+-").lstrip("0")) > MAX_DIGITS:
            raise CinderSyntaxError(f"Integer literal out of range: {text[:24]}...")
        value = int(text)
        if not INT_MIN <= value <= INT_MAX:
            raise CinderSyntaxError(f"Integer literal out of range: {text}")
        return value
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Parse one expression, or return None when the input is exhausted."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return parse_atom(tok_val)

        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type == "rparen":
                    self.advance()
                    return items
                if next_type is None:
                    raise CinderSyntaxError("Unmatched '('")
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise CinderSyntaxError("Unexpected ')'")

        raise CinderSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(line: str) -> SExpression:
    """Parse exactly one expression from `line`.

    Returns None for a blank or comment-only line.
    """
    stream = TokenStream(lex(line))
    expr = stream.parse_expr()
    if expr is None:
        return None
    tok_type, tok_val = stream.peek()
    if tok_type is not None:
        raise CinderSyntaxError(f"Unexpected input after expression: {tok_val!r}")
    return expr


def read_all(source: str) -> list[SExpression]:
    """Parse every top-level expression in `source`."""
    return list(TokenStream(lex(source)).parse_all())
