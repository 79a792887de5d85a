"""Tests for the exprcalc evaluator."""

from __future__ import annotations

import math

import pytest

from exprcalc.core.errors import (
    ArityMismatch,
    EvalError,
    ExpressionTooDeep,
    ExprCalcError,
    UndefinedSymbol,
    UnmatchedParenthesis,
)
from exprcalc.core.expression_lang.evaluator import Calculator, evaluate
from exprcalc.core.expression_lang.functions import FunctionSpec
from exprcalc.core.expression_lang.parser import parse_expr
from exprcalc.core.ir.expressions import BinaryExpr, BinaryOp, FuncCall, Literal, UnaryExpr


class TestEvalArithmetic:
    """Arithmetic operators."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("1+2", 3.0),
            ("1+2*3", 7.0),
            ("(1+3)%3", 1.0),
            ("10 - 4 * 2", 2.0),
            ("(10 - 4) * 2", 12.0),
            ("7 / 2", 3.5),
            ("2 ^ 10", 1024.0),
            ("10 - 4 - 3", 3.0),
            ("8 / 4 / 2", 1.0),
        ],
    )
    def test_basic(self, source: str, expected: float) -> None:
        assert evaluate(source) == expected

    def test_power_is_left_associative(self) -> None:
        assert evaluate("2 ^ 3 ^ 2") == 64.0

    def test_power_shares_multiplication_tier(self) -> None:
        assert evaluate("2 * 2 ^ 3") == 64.0
        assert evaluate("1 + 2 ^ 3") == 9.0

    def test_documented_example(self) -> None:
        assert evaluate("1 + 2 * (2 ^ 10) + ceil(10 / 3) + sin(2 * pi)") == 2053.0

    def test_fractional_and_negative_powers(self) -> None:
        assert evaluate("4 ^ 0.5") == 2.0
        assert evaluate("2 ^ -1") == 0.5

    def test_modulo_takes_sign_of_dividend(self) -> None:
        assert evaluate("-7 % 3") == -1.0
        assert evaluate("7 % -3") == 1.0
        assert evaluate("5.5 % 2") == 1.5

    def test_float_addition(self) -> None:
        assert evaluate("0.1 + 0.2") == 0.1 + 0.2


class TestEvalUnary:
    """Unary minus."""

    def test_negate(self) -> None:
        assert evaluate("-5") == -5.0

    def test_negate_group(self) -> None:
        assert evaluate("-(-3)") == 3.0

    def test_negative_operand(self) -> None:
        assert evaluate("2 * -3") == -6.0
        assert evaluate("2 - -3") == 5.0

    def test_negation_before_power(self) -> None:
        assert evaluate("-2 ^ 2") == 4.0


class TestEvalIEEE:
    """Numeric edge cases follow IEEE-754 instead of raising."""

    def test_division_by_zero(self) -> None:
        result = evaluate("1 / (1 - 1)")
        assert math.isinf(result)
        assert result > 0

    def test_negative_division_by_zero(self) -> None:
        assert evaluate("-1 / 0") == -math.inf

    def test_zero_over_zero(self) -> None:
        assert math.isnan(evaluate("0 / 0"))

    def test_modulo_by_zero(self) -> None:
        assert math.isnan(evaluate("5 % 0"))

    def test_power_overflow(self) -> None:
        assert evaluate("10 ^ 400") == math.inf

    def test_negative_base_fractional_exponent(self) -> None:
        assert math.isnan(evaluate("-8 ^ (1 / 3)"))

    def test_zero_to_negative_power(self) -> None:
        assert evaluate("0 ^ -1") == math.inf

    def test_nan_propagates(self) -> None:
        assert math.isnan(evaluate("sqrt(-1) * 0 + 1"))

    def test_infinity_arithmetic(self) -> None:
        assert math.isnan(evaluate("1 / 0 - 1 / 0"))
        assert evaluate("1 / (1 / 0)") == 0.0

    def test_result_is_python_float(self) -> None:
        assert type(evaluate("1 / 0")) is float
        assert type(evaluate("sin(1)")) is float


class TestEvalCalls:
    """Name resolution and arity checks."""

    def test_constants(self) -> None:
        assert evaluate("pi") == math.pi
        assert evaluate("e") == math.e

    def test_constant_with_empty_parens(self) -> None:
        assert evaluate("pi()") == math.pi

    def test_constant_with_arguments(self) -> None:
        with pytest.raises(ArityMismatch) as exc_info:
            evaluate("pi(1)")
        assert exc_info.value.name == "pi"
        assert exc_info.value.expected == "0"
        assert exc_info.value.got == 1

    def test_undefined_function(self) -> None:
        with pytest.raises(UndefinedSymbol) as exc_info:
            evaluate("foo(1)")
        assert exc_info.value.name == "foo"
        assert "foo" in str(exc_info.value)

    def test_undefined_constant(self) -> None:
        with pytest.raises(UndefinedSymbol) as exc_info:
            evaluate("1 + x")
        assert exc_info.value.name == "x"

    def test_names_are_case_sensitive(self) -> None:
        with pytest.raises(UndefinedSymbol):
            evaluate("PI")
        with pytest.raises(UndefinedSymbol):
            evaluate("Sin(1)")

    def test_too_many_arguments(self) -> None:
        with pytest.raises(ArityMismatch) as exc_info:
            evaluate("sin(1, 2)")
        assert exc_info.value.name == "sin"
        assert exc_info.value.expected == "1"
        assert exc_info.value.got == 2

    def test_too_few_arguments(self) -> None:
        with pytest.raises(ArityMismatch):
            evaluate("clamp(1, 2)")
        with pytest.raises(ArityMismatch):
            evaluate("max()")

    def test_bare_function_name(self) -> None:
        with pytest.raises(ArityMismatch) as exc_info:
            evaluate("sin")
        assert exc_info.value.got == 0

    def test_nested_calls(self) -> None:
        assert evaluate("max(abs(-5), min(3, 7))") == 5.0
        assert evaluate("sqrt(abs(-16))") == 4.0

    def test_error_inside_argument(self) -> None:
        with pytest.raises(UndefinedSymbol) as exc_info:
            evaluate("max(1, nope)")
        assert exc_info.value.name == "nope"

    def test_errors_share_base(self) -> None:
        with pytest.raises(EvalError):
            evaluate("foo")
        with pytest.raises(ExprCalcError):
            evaluate("(1 + 2")

    def test_unmatched_paren_from_text(self) -> None:
        with pytest.raises(UnmatchedParenthesis):
            evaluate("(1 + 2")


class TestEvalTrees:
    """The evaluator accepts trees as well as text."""

    def test_tree(self) -> None:
        tree = BinaryExpr(op=BinaryOp.MUL, left=Literal(value=6.0), right=Literal(value=7.0))
        assert evaluate(tree) == 42.0

    def test_parsed_tree(self) -> None:
        assert evaluate(parse_expr("max(1, 5, 3)")) == 5.0

    def test_unknown_name_in_tree(self) -> None:
        with pytest.raises(UndefinedSymbol):
            evaluate(FuncCall(name="tau", bare=True))


class TestEvalLongInputs:
    """Long chains evaluate without exhausting the call stack."""

    def test_long_sum(self) -> None:
        assert evaluate("+".join(["1"] * 5000)) == 5000.0

    def test_long_mixed_chain(self) -> None:
        assert evaluate("10" + " - 1 * 1" * 5000) == -4990.0

    def test_long_argument_list(self) -> None:
        args = ", ".join(str(i) for i in range(5000))
        assert evaluate(f"max({args})") == 4999.0

    def test_deep_tree(self) -> None:
        tree = Literal(value=3.0)
        for _ in range(5001):
            tree = UnaryExpr(operand=tree)
        assert evaluate(tree) == -3.0

    def test_deep_nesting_from_text(self) -> None:
        with pytest.raises(ExpressionTooDeep):
            evaluate("(" * 5000 + "1" + ")" * 5000)

    def test_operands_left_to_right(self) -> None:
        with pytest.raises(UndefinedSymbol) as exc_info:
            evaluate("foo(1) + bar(sin(1, 2))")
        assert exc_info.value.name == "foo"

    def test_arguments_before_lookup(self) -> None:
        with pytest.raises(ArityMismatch):
            evaluate("foo(sin(1, 2))")


class TestCalculator:
    """Calculator instances are stateless apart from their tables."""

    @pytest.mark.parametrize("source", ["0.1 + 0.2", "sin(1) / 3", "2 ^ 0.5", "1 / 0", "0 / 0"])
    def test_fresh_calculators_agree_bit_for_bit(self, source: str) -> None:
        first = Calculator().evaluate(source)
        second = Calculator().evaluate(source)
        assert first.hex() == second.hex()

    def test_repeat_evaluation(self) -> None:
        calc = Calculator()
        assert calc.evaluate("max(1, 2)") == calc.evaluate("max(1, 2)")

    def test_custom_tables(self) -> None:
        double = FunctionSpec(name="double", impl=lambda x: 2 * x, min_args=1, max_args=1)
        calc = Calculator(functions={"double": double}, constants={"tau": 2 * math.pi})
        assert calc.evaluate("double(tau)") == 4 * math.pi
        with pytest.raises(UndefinedSymbol):
            calc.evaluate("sin(1)")

    def test_parse(self) -> None:
        assert Calculator().parse("1") == Literal(value=1.0)


@pytest.mark.parametrize("literal", ["0", "1", "42", "3.14", "0.1", "123456789.987654321", "9007199254740993"])
def test_literal_evaluates_to_itself(literal: str) -> None:
    assert evaluate(literal) == float(literal)
