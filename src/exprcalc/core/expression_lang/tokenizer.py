"""
Tokenizer for the exprcalc expression language.

Converts an expression string into a lazy sequence of typed tokens.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterator
from enum import StrEnum, auto

from exprcalc.core.errors import NumberFormatError, UnexpectedCharacter


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals and names
    NUMBER = auto()
    IDENT = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    CARET = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: str, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind, self.value, self.pos) == (other.kind, other.value, other.pos)

    def __hash__(self) -> int:
        return hash((self.kind, self.value, self.pos))

    @property
    def number(self) -> float:
        """Numeric value of a NUMBER token."""
        return float(self.value)


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
    "^": TokenKind.CARET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
}

_WHITESPACE = " \t\n\r"

# Number: digits with an optional fraction; no exponent, no leading dot
_NUMBER_RE = re.compile(r"[0-9]+(\.[0-9]+)?")
# Identifier: ASCII letter followed by ASCII letters/digits
_IDENT_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9]*")


def iter_tokens(source: str) -> Iterator[Token]:
    """Lazily tokenize ``source``.

    The generator always finishes with a single EOF token positioned at
    ``len(source)``. Errors are raised when the offending character is
    reached, so tokens before it are yielded first.

    Raises:
        UnexpectedCharacter: For any character outside the language.
        NumberFormatError: For a digit string that does not fit a finite float.
    """
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c in _WHITESPACE:
            i += 1
            continue

        m = _NUMBER_RE.match(source, i)
        if m:
            text = m.group(0)
            if not math.isfinite(float(text)):
                raise NumberFormatError(text, i)
            yield Token(TokenKind.NUMBER, text, i)
            i = m.end()
            continue

        m = _IDENT_RE.match(source, i)
        if m:
            yield Token(TokenKind.IDENT, m.group(0), i)
            i = m.end()
            continue

        kind = _SINGLE_CHAR.get(c)
        if kind is None:
            raise UnexpectedCharacter(c, i)
        yield Token(kind, c, i)
        i += 1

    yield Token(TokenKind.EOF, "", n)


class TokenStream:
    """Restartable token sequence over a fixed source string.

    Each iteration re-lexes ``source`` from the start, so a stream can be
    walked any number of times and always yields the same tokens.
    """

    def __init__(self, source: str) -> None:
        self.source = source

    def __iter__(self) -> Iterator[Token]:
        return iter_tokens(self.source)

    def __repr__(self) -> str:
        return f"TokenStream({self.source!r})"


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens."""
    return list(iter_tokens(source))
