"""
exprcalc expression language.

Tokenizer, parser, function tables, and evaluator for single-line
arithmetic expressions.

Usage:
    from exprcalc.core.expression_lang import parse_expr, evaluate

    expr = parse_expr("1 + 2 * max(3, 4)")
    result = evaluate(expr)
    # result == 9.0
"""

from exprcalc.core.expression_lang.evaluator import Calculator, evaluate
from exprcalc.core.expression_lang.functions import CONSTANTS, FUNCTIONS, FunctionSpec
from exprcalc.core.expression_lang.parser import parse_expr
from exprcalc.core.expression_lang.tokenizer import Token, TokenKind, TokenStream, iter_tokens, tokenize

__all__ = [
    "CONSTANTS",
    "FUNCTIONS",
    "Calculator",
    "FunctionSpec",
    "Token",
    "TokenKind",
    "TokenStream",
    "evaluate",
    "iter_tokens",
    "parse_expr",
    "tokenize",
]
