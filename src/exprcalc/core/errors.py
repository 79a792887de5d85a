"""
Error types for exprcalc tokenizing, parsing, and evaluation.

Every failure the pipeline can report is an ``ExprCalcError``; the shell
catches that base class, prints the message, and keeps going.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from exprcalc.core.expression_lang.tokenizer import Token


@dataclass
class ErrorContext:
    """
    Source location of an error inside a single-line expression.

    Attributes:
        source: The expression text that was being processed
        position: 0-based character offset of the offending input
    """

    source: str
    position: int

    def format(self) -> str:
        """
        Format the expression with a caret marker under the error column.

        Returns:
            Two lines: the source, then ``^`` at the error position.
        """
        marker = " " * self.position + "^"
        return f"{self.source}\n{marker}"


class ExprCalcError(Exception):
    """Base exception for all exprcalc errors."""

    kind = "Error"

    def __init__(self, message: str, position: int | None = None) -> None:
        self.message = message
        self.position = position
        super().__init__(f"{self.kind}: {message}")

    def context(self, source: str) -> ErrorContext | None:
        """Attach the error position to ``source``, if the error has one."""
        if self.position is None:
            return None
        return ErrorContext(source=source, position=min(self.position, len(source)))


class ConfigError(ExprCalcError):
    """Raised for an unreadable or invalid configuration file."""

    kind = "ConfigError"


# ---------------------------------------------------------------------------
# Lexing
# ---------------------------------------------------------------------------


class LexError(ExprCalcError):
    """
    Raised when the input text cannot be split into tokens.

    Examples:
    - Characters outside the expression alphabet (``@``, ``$``, ``.5``)
    - Digit strings too large for a float
    """


class UnexpectedCharacter(LexError):
    kind = "UnexpectedCharacter"

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        super().__init__(f"unexpected character {char!r} at position {position}", position)


class NumberFormatError(LexError):
    kind = "NumberFormatError"

    def __init__(self, text: str, position: int) -> None:
        self.text = text
        super().__init__(f"number {text!r} at position {position} is not a finite float", position)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class ParseError(ExprCalcError):
    """
    Raised when the token stream does not match the grammar.

    Examples:
    - ``(1 + 2`` (missing close parenthesis)
    - ``1 2`` (tokens left after a complete expression)
    - ``1 +`` (input ends where an operand is required)
    """


class UnmatchedParenthesis(ParseError):
    kind = "UnmatchedParenthesis"

    def __init__(self, position: int) -> None:
        super().__init__(f"'(' at position {position} is never closed", position)


class TrailingTokens(ParseError):
    kind = "TrailingTokens"

    def __init__(self, token: Token) -> None:
        self.token = token
        super().__init__(
            f"unexpected {token.value!r} at position {token.pos} after a complete expression",
            token.pos,
        )


class UnexpectedEndOfInput(ParseError):
    kind = "UnexpectedEndOfInput"

    def __init__(self, position: int) -> None:
        super().__init__(f"expression ends at position {position} where an operand was expected", position)


class ExpectedExpression(ParseError):
    kind = "ExpectedExpression"

    def __init__(self, token: Token) -> None:
        self.token = token
        super().__init__(f"expected a number, name or '(' but got {token.value!r} at position {token.pos}", token.pos)


class ExpressionTooDeep(ParseError):
    kind = "ExpressionTooDeep"

    def __init__(self, position: int) -> None:
        super().__init__(f"expression is nested too deeply to parse (reached position {position})", position)


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


class EvalError(ExprCalcError):
    """
    Raised when a well-formed expression cannot be evaluated.

    Examples:
    - Names missing from the function and constant tables
    - Calls with the wrong number of arguments
    """


class UndefinedSymbol(EvalError):
    kind = "UndefinedSymbol"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown function or constant {name!r}")


class ArityMismatch(EvalError):
    kind = "ArityMismatch"

    def __init__(self, name: str, expected: str, got: int) -> None:
        self.name = name
        self.expected = expected
        self.got = got
        super().__init__(f"{name}() expects {expected} argument(s), got {got}")
