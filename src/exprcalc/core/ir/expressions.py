"""
Expression tree types for exprcalc.

The parser produces these nodes and the evaluator walks them. The node set is
closed:

- Literals: 42, 3.14
- Arithmetic: +, -, *, /, %, ^
- Negation: -x
- Calls and names: sin(x), max(1, 2, 3), pi
"""

from __future__ import annotations

from enum import StrEnum

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators, by tier."""

    # Addition tier
    ADD = "+"
    SUB = "-"
    # Multiplication tier (power included)
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"


class UnaryOp(StrEnum):
    """Unary operators."""

    NEG = "-"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A numeric literal."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class UnaryExpr(BaseModel):
    """Unary operation: op operand."""

    op: UnaryOp = UnaryOp.NEG
    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class FuncCall(BaseModel):
    """
    Function call or bare name: name(arg1, arg2, ...) or name.

    A bare name is a call with no arguments and ``bare=True``; the evaluator
    resolves both forms the same way, against functions first and constants
    second.

    Examples:
        - FuncCall(name="sin", args=[Literal(value=1.0)]) → sin(1)
        - FuncCall(name="pi", bare=True) → pi
    """

    name: str = Field(description="Function or constant name")
    args: list[Expr] = Field(default_factory=list, description="Arguments")
    bare: bool = Field(default=False, description="Written without parentheses")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | BinaryExpr | UnaryExpr | FuncCall

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
UnaryExpr.model_rebuild()
FuncCall.model_rebuild()


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _literal_text(value: float) -> str:
    # Positional notation only: the grammar has no exponent syntax
    return np.format_float_positional(value, trim="-")


def _needs_group(operand: Expr) -> bool:
    """Whether a negated operand must be parenthesised to parse back."""
    if isinstance(operand, UnaryExpr):
        return True
    return isinstance(operand, Literal) and bool(np.signbit(operand.value))


def render(expr: Expr) -> str:
    """
    Render an expression tree as source text that parses back to it.

    Binary operations are fully parenthesised. Rendering walks the tree with
    an explicit stack, so arbitrarily long chains render without recursion.

    Examples:
        - ``1 + 2 * 3`` → ``(1 + (2 * 3))``
        - ``-(-3)`` → ``-(-3)``
        - ``0.00001`` → ``0.00001``
    """
    parts: list[str] = []
    stack: list[Expr | str] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Literal):
            parts.append(_literal_text(item.value))
        elif isinstance(item, BinaryExpr):
            stack.extend([")", item.right, f" {item.op.value} ", item.left, "("])
        elif isinstance(item, UnaryExpr):
            if _needs_group(item.operand):
                stack.extend([")", item.operand, f"{item.op.value}("])
            else:
                stack.extend([item.operand, item.op.value])
        elif item.bare:
            parts.append(item.name)
        else:
            stack.append(")")
            for i, arg in enumerate(reversed(item.args)):
                if i:
                    stack.append(", ")
                stack.append(arg)
            stack.append(f"{item.name}(")
    return "".join(parts)
