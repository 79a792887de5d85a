"""
exprcalc - command-line arithmetic expression evaluator.

Parses single-line math expressions with a fixed operator-precedence grammar
and evaluates them with a built-in library of functions and constants.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import EvalError, ExprCalcError, LexError, ParseError
from .core.expression_lang import Calculator, evaluate, parse_expr, tokenize

__version__ = get_version()

__all__ = [
    "__version__",
    "Calculator",
    "EvalError",
    "ExprCalcError",
    "LexError",
    "ParseError",
    "evaluate",
    "parse_expr",
    "tokenize",
]
