"""
Expression evaluator for the exprcalc expression language.

Evaluates expression AST nodes to a float. Pure evaluation: no I/O, no side
effects, and no use of Python's eval(). Arithmetic follows IEEE-754 double
semantics, so division by zero, overflow and out-of-domain math produce
inf/NaN rather than exceptions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import numpy as np

from exprcalc.core.errors import ArityMismatch, UndefinedSymbol
from exprcalc.core.expression_lang.functions import CONSTANTS, FUNCTIONS, FunctionSpec
from exprcalc.core.expression_lang.parser import parse_expr
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

_BINARY_KERNELS = {
    BinaryOp.ADD: np.add,
    BinaryOp.SUB: np.subtract,
    BinaryOp.MUL: np.multiply,
    BinaryOp.DIV: np.true_divide,
    BinaryOp.MOD: np.fmod,
    BinaryOp.POW: np.power,
}


class Calculator:
    """Evaluates expressions against a fixed set of functions and constants.

    A calculator holds no state besides its read-only tables, so evaluating
    the same input twice always gives the same result.
    """

    def __init__(
        self,
        functions: Mapping[str, FunctionSpec] = FUNCTIONS,
        constants: Mapping[str, float] = CONSTANTS,
    ) -> None:
        self.functions = functions
        self.constants = constants

    def parse(self, source: str) -> Expr:
        return parse_expr(source)

    def evaluate(self, expr: Expr | str) -> float:
        """Evaluate a parsed expression, or parse and evaluate a string.

        Raises:
            LexError, ParseError: If a string cannot be parsed.
            EvalError: If a name is unknown or a call has the wrong arity.
        """
        if isinstance(expr, str):
            expr = self.parse(expr)
        with np.errstate(all="ignore"):
            result = float(self._interpret(expr))
        logger.debug("%s = %r", expr, result)
        return result

    def _interpret(self, expr: Expr) -> float:
        """Evaluate ``expr`` bottom-up with an explicit work stack.

        Each node is visited twice: first to schedule its operands (left to
        right), then to combine their values. Long operator chains and deep
        nesting never grow the Python call stack.
        """
        values: list[float] = []
        pending: list[tuple[Expr, bool]] = [(expr, False)]
        while pending:
            node, operands_done = pending.pop()

            if isinstance(node, Literal):
                values.append(node.value)

            elif isinstance(node, BinaryExpr):
                if operands_done:
                    right = values.pop()
                    left = values.pop()
                    values.append(_BINARY_KERNELS[node.op](left, right))
                else:
                    pending.extend([(node, True), (node.right, False), (node.left, False)])

            elif isinstance(node, UnaryExpr):
                if node.op != UnaryOp.NEG:
                    raise ValueError(f"Unknown unary op: {node.op}")
                if operands_done:
                    values.append(np.negative(values.pop()))
                else:
                    pending.extend([(node, True), (node.operand, False)])

            elif isinstance(node, FuncCall):
                if operands_done:
                    start = len(values) - len(node.args)
                    args = values[start:]
                    del values[start:]
                    values.append(self._apply_call(node, args))
                else:
                    pending.append((node, True))
                    pending.extend((arg, False) for arg in reversed(node.args))

            else:
                raise TypeError(f"Unknown expression type: {type(node).__name__}")

        return values.pop()

    def _apply_call(self, expr: FuncCall, args: list[float]) -> float:
        """Resolve a call or bare name: functions first, then constants."""
        spec = self.functions.get(expr.name)
        if spec is not None:
            if not spec.accepts(len(args)):
                raise ArityMismatch(expr.name, spec.arity, len(args))
            return spec.impl(*args)

        if expr.name in self.constants:
            if args:
                raise ArityMismatch(expr.name, "0", len(args))
            return self.constants[expr.name]

        raise UndefinedSymbol(expr.name)


_default_calculator = Calculator()


def evaluate(expr: Expr | str) -> float:
    """Evaluate an expression with the built-in functions and constants.

    This is a safe tree-walking interpreter; it does NOT use Python's eval().

    Args:
        expr: Parsed expression AST, or expression source text.

    Returns:
        The result as a Python float (possibly inf or NaN).

    Raises:
        ExprCalcError: Subclasses for lexing, parsing and evaluation failures.
    """
    return _default_calculator.evaluate(expr)
