"""Core exprcalc functionality: errors, expression IR, expression language, configuration."""

from . import ir
from .errors import (
    ArityMismatch,
    ConfigError,
    ErrorContext,
    EvalError,
    ExpectedExpression,
    ExpressionTooDeep,
    ExprCalcError,
    LexError,
    NumberFormatError,
    ParseError,
    TrailingTokens,
    UndefinedSymbol,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
    UnmatchedParenthesis,
)

__all__ = [
    "ir",
    "ArityMismatch",
    "ConfigError",
    "ErrorContext",
    "EvalError",
    "ExpectedExpression",
    "ExpressionTooDeep",
    "ExprCalcError",
    "LexError",
    "NumberFormatError",
    "ParseError",
    "TrailingTokens",
    "UndefinedSymbol",
    "UnexpectedCharacter",
    "UnexpectedEndOfInput",
    "UnmatchedParenthesis",
]
