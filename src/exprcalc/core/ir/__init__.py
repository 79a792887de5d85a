"""Expression tree (IR) for exprcalc."""

from .expressions import BinaryExpr, BinaryOp, Expr, FuncCall, Literal, UnaryExpr, UnaryOp, render

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "FuncCall",
    "Literal",
    "UnaryExpr",
    "UnaryOp",
    "render",
]
