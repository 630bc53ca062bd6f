"""
  Reader: lexer and parser for vau source text.

- Streaming, lazy parsing
- Emits the core expression representation:

    - () -> Nil
    - lists -> Pair chains
    - dotted lists -> Pair chains with a non-Nil final tail
    - strings -> Str
    - numbers -> int/float
    - everything else -> Symbol (#t, #f, nil, $vau, ...)
"""

from __future__ import annotations

import ast
import re
from typing import Iterator, Optional

from vau import Expression
from vau.errors import VauSyntaxError
from vau.types.nil import Nil
from vau.types.pair import Str, to_list
from vau.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<ml_start>#\|)"  # multi-line comment start
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()";]+)'  # numbers and symbols
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+")
FLOAT_RE = re.compile(r"[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?")

Token = tuple[str, str, int]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, position) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise VauSyntaxError(f"Unexpected char {source[pos]!r}", pos)
        if m.group("comment"):
            pos = m.end()
            continue
        if m.group("ml_start"):
            start = m.start("ml_start")
            pos = m.end()
            depth = 1
            while depth > 0:
                if pos >= n:
                    raise VauSyntaxError("Unterminated multi-line comment", start)
                if source.startswith("#|", pos):
                    depth += 1
                    pos += 2
                elif source.startswith("|#", pos):
                    depth -= 1
                    pos += 2
                else:
                    pos += 1
            continue
        for name in ("lparen", "rparen", "string", "symbol"):
            if m.group(name) is not None:
                yield name, m.group(name), m.start(name)
                break
        pos = m.end()


def _atom(text: str) -> Expression:
    if INT_RE.fullmatch(text):
        return int(text)
    if FLOAT_RE.fullmatch(text):
        return float(text)
    return Symbol(text)


def _unescape(literal: str, pos: int) -> str:
    # Raw line breaks are allowed inside string literals.
    literal = literal.replace("\r", "\\r").replace("\n", "\\n")
    try:
        return ast.literal_eval(literal)
    except (SyntaxError, ValueError) as exc:
        raise VauSyntaxError(f"Invalid string literal {literal}", pos) from exc


class TokenStream:
    def __init__(self, tokens: Iterator[Token]):
        self.tokens = iter(tokens)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, -1
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, -1))

    def parse_expr(self) -> Expression:
        """Read one expression; None once the input is exhausted."""
        tok_type, tok_val, pos = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            if tok_val == ".":
                raise VauSyntaxError("Unexpected '.'", pos)
            return _atom(tok_val)

        if tok_type == "string":
            self.advance()
            return Str(_unescape(tok_val, pos))

        if tok_type == "rparen":
            raise VauSyntaxError("Unexpected ')'", pos)

        # List or dotted list
        self.advance()
        items = []
        while True:
            next_type, next_val, next_pos = self.peek()
            if next_type is None:
                raise VauSyntaxError("Unmatched '('", pos)
            if next_type == "rparen":
                self.advance()
                return to_list(items)
            if next_type == "symbol" and next_val == ".":
                if not items:
                    raise VauSyntaxError("Expected an expression before '.'", next_pos)
                self.advance()
                if self.peek()[0] in (None, "rparen"):
                    raise VauSyntaxError("Expected an expression after '.'", next_pos)
                cdr_expr = self.parse_expr()
                close_type, _, close_pos = self.peek()
                if close_type != "rparen":
                    raise VauSyntaxError("Expected ')' after dotted tail", close_pos)
                self.advance()
                return to_list(items, cdr_expr)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[Expression]:
        while True:
            tok_type, _, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse_all(source: str) -> Iterator[Expression]:
    """Yield every expression in `source`, in order."""
    return TokenStream(lex(source)).parse_all()


def parse_to_expression(source: str) -> Expression:
    """Read exactly one expression from `source`."""
    stream = TokenStream(lex(source))
    if stream.peek()[0] is None:
        raise VauSyntaxError("Expected an expression, got end of input")
    expression = stream.parse_expr()
    tok_type, _, pos = stream.peek()
    if tok_type is not None:
        raise VauSyntaxError("Unexpected input after expression", pos)
    return expression
