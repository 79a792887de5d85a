"""
Recursive descent parser for the exprcalc expression language.

Grammar (precedence low to high):
    expression     → addition
    addition       → multiplication (("+"|"-") multiplication)*
    multiplication → unary (("*"|"/"|"%"|"^") unary)*
    unary          → "-" parentheses | parentheses
    parentheses    → "(" expression ")" | atom
    atom           → NUMBER | call
    call           → IDENT ("(" (expression ("," expression)*)? ")")?

``^`` shares the multiplication tier and every tier is left-associative, so
``2 ^ 3 ^ 2`` is ``(2 ^ 3) ^ 2`` and ``2 * 2 ^ 3`` is ``(2 * 2) ^ 3``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from exprcalc.core.errors import (
    ExpectedExpression,
    ExpressionTooDeep,
    TrailingTokens,
    UnexpectedEndOfInput,
    UnmatchedParenthesis,
)
from exprcalc.core.expression_lang.tokenizer import Token, TokenKind, iter_tokens
from exprcalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    FuncCall,
    Literal,
    UnaryExpr,
    UnaryOp,
)

logger = logging.getLogger(__name__)

_ADDITION_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}

_MULTIPLICATION_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
    TokenKind.PERCENT: BinaryOp.MOD,
    TokenKind.CARET: BinaryOp.POW,
}


class _Parser:
    """Recursive descent parser with one token of lookahead.

    Tokens are pulled from the iterator on demand; once EOF is reached it
    stays current.
    """

    def __init__(self, tokens: Iterator[Token]) -> None:
        self.tokens = tokens
        self.current = next(tokens)

    def advance(self) -> Token:
        tok = self.current
        if tok.kind != TokenKind.EOF:
            self.current = next(self.tokens)
        return tok

    def match(self, *kinds: TokenKind) -> Token | None:
        if self.current.kind in kinds:
            return self.advance()
        return None

    def close_paren(self, opening: Token) -> None:
        """Consume the ')' that closes ``opening``."""
        if self.current.kind != TokenKind.RPAREN:
            raise UnmatchedParenthesis(opening.pos)
        self.advance()

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        return self.parse_addition()

    def parse_addition(self) -> Expr:
        """multiplication (('+' | '-') multiplication)*"""
        left = self.parse_multiplication()
        while self.current.kind in _ADDITION_OPS:
            op = _ADDITION_OPS[self.advance().kind]
            right = self.parse_multiplication()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_multiplication(self) -> Expr:
        """unary (('*' | '/' | '%' | '^') unary)*"""
        left = self.parse_unary()
        while self.current.kind in _MULTIPLICATION_OPS:
            op = _MULTIPLICATION_OPS[self.advance().kind]
            right = self.parse_unary()
            left = BinaryExpr(op=op, left=left, right=right)
        return left

    def parse_unary(self) -> Expr:
        """'-' parentheses | parentheses"""
        if self.match(TokenKind.MINUS):
            return UnaryExpr(op=UnaryOp.NEG, operand=self.parse_parentheses())
        return self.parse_parentheses()

    def parse_parentheses(self) -> Expr:
        """'(' expression ')' | atom"""
        opening = self.match(TokenKind.LPAREN)
        if opening is None:
            return self.parse_atom()
        expr = self.parse_expr()
        self.close_paren(opening)
        return expr

    def parse_atom(self) -> Expr:
        """NUMBER | call"""
        tok = self.current
        if tok.kind == TokenKind.NUMBER:
            self.advance()
            return Literal(value=tok.number)
        if tok.kind == TokenKind.IDENT:
            return self._parse_call()
        if tok.kind == TokenKind.EOF:
            raise UnexpectedEndOfInput(tok.pos)
        raise ExpectedExpression(tok)

    def _parse_call(self) -> FuncCall:
        """IDENT ('(' (expression (',' expression)*)? ')')?"""
        name_tok = self.advance()
        opening = self.match(TokenKind.LPAREN)
        if opening is None:
            return FuncCall(name=name_tok.value, bare=True)

        args: list[Expr] = []
        if self.current.kind != TokenKind.RPAREN:
            args.append(self.parse_expr())
            while self.match(TokenKind.COMMA):
                args.append(self.parse_expr())

        self.close_paren(opening)
        return FuncCall(name=name_tok.value, args=args)


def parse_expr(source: str | Iterable[Token]) -> Expr:
    """Parse an expression into an AST.

    Args:
        source: Expression string (e.g., "1 + 2 * sin(pi / 4)") or an
            iterable of tokens ending with EOF, such as a ``TokenStream``.

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: If the tokens do not form exactly one expression, or
            nest deeper than the interpreter stack allows.
        LexError: If tokenization fails.
    """
    tokens = iter_tokens(source) if isinstance(source, str) else iter(source)
    parser = _Parser(tokens)
    try:
        expr = parser.parse_expr()
    except RecursionError:
        raise ExpressionTooDeep(parser.current.pos) from None

    # Ensure all tokens consumed
    if parser.current.kind != TokenKind.EOF:
        raise TrailingTokens(parser.current)

    logger.debug("parsed %r as %s", source, expr)
    return expr
