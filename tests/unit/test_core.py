"""Unit tests for the Calculator session."""

import pytest

from longcalc import (
    ZERO,
    Calculator,
    DivisionByZeroError,
    DivisionResult,
    ExponentTooLargeError,
    InvalidExpressionError,
    SignedInteger,
    UnsupportedOperatorError,
    from_string,
    parse_expression,
)


class TestParseExpression:
    def test_splits_at_operator(self):
        assert parse_expression("1234+5678") == ("1234", "+", "5678")

    def test_strips_whitespace(self):
        assert parse_expression("  2^10\n") == ("2", "^", "10")

    def test_unknown_operator_is_still_split(self):
        assert parse_expression("7%3") == ("7", "%", "3")

    def test_no_operator(self):
        with pytest.raises(InvalidExpressionError) as exc_info:
            parse_expression("12345")
        assert exc_info.value.reason == "No operator found"

    def test_empty_expression(self):
        with pytest.raises(InvalidExpressionError):
            parse_expression("")

    def test_empty_left_operand(self):
        with pytest.raises(InvalidExpressionError):
            parse_expression("+5")

    def test_empty_right_operand(self):
        with pytest.raises(InvalidExpressionError):
            parse_expression("5*")


class TestEvaluate:
    """Tests for Calculator.evaluate."""

    @pytest.mark.parametrize(
        ("expression", "text"),
        [
            ("1234+5678", "=6912\n\n"),
            ("1000-1", "=999\n\n"),
            ("1-1000", "=-999\n\n"),
            ("999*999", "=998001\n\n"),
            ("17/5", "=3......2\n\n"),
            ("2^10", "=1024\n\n"),
            ("0^5", "=0\n\n"),
            ("5^0", "=1\n\n"),
            ("0007+3", "=10\n\n"),
        ],
    )
    def test_scenarios(self, calculator, expression, text):
        evaluation = calculator.evaluate(expression)
        assert evaluation.ok
        assert evaluation.text == text

    def test_subtraction_result_is_signed(self, calculator):
        evaluation = calculator.evaluate("3-5")
        assert isinstance(evaluation.result, SignedInteger)
        assert int(evaluation.result) == -2

    def test_division_by_zero_recovers(self, calculator):
        evaluation = calculator.evaluate("5/0")
        assert isinstance(evaluation.error, DivisionByZeroError)
        assert evaluation.result == DivisionResult(ZERO, ZERO)
        assert evaluation.text == "=0......0\n\n"
        assert not evaluation.ok

    def test_exponent_too_large_recovers(self, small_limit_calculator):
        evaluation = small_limit_calculator.evaluate("2^51")
        assert isinstance(evaluation.error, ExponentTooLargeError)
        assert evaluation.result == ZERO

    def test_large_exponent_warning_is_captured(self, small_limit_calculator):
        evaluation = small_limit_calculator.evaluate("2^11")
        assert evaluation.ok
        assert evaluation.result == from_string("2048")
        assert len(evaluation.warnings) == 1
        assert "11" in evaluation.warnings[0]

    def test_unsupported_operator(self, calculator):
        evaluation = calculator.evaluate("7%3")
        assert isinstance(evaluation.error, UnsupportedOperatorError)
        assert evaluation.result is None
        assert evaluation.text == ""

    def test_invalid_expression(self, calculator):
        evaluation = calculator.evaluate("hello")
        assert isinstance(evaluation.error, InvalidExpressionError)
        assert evaluation.result is None

    def test_stray_characters_in_right_operand(self, calculator):
        evaluation = calculator.evaluate("1+2+3")
        assert isinstance(evaluation.error, InvalidExpressionError)
        assert evaluation.operator == "+"

    def test_errors_do_not_stop_later_evaluations(self, calculator):
        calculator.evaluate("5/0")
        assert calculator.evaluate("6/3").text == "=2......0\n\n"


class TestHistory:
    def test_history_records_every_evaluation(self, calculator):
        calculator.evaluate("1+1")
        calculator.evaluate("oops")
        history = calculator.history
        assert [e.expression for e in history] == ["1+1", "oops"]
        assert calculator.last is history[-1]

    def test_history_is_a_copy(self, calculator):
        calculator.evaluate("1+1")
        calculator.history.clear()
        assert len(calculator.history) == 1

    def test_clear(self, calculator):
        calculator.evaluate("1+1")
        assert calculator.clear() is calculator
        assert calculator.history == []
        assert calculator.last is None

    def test_evaluation_str(self, calculator):
        assert str(calculator.evaluate("17/5")) == "17/5 =3......2"
        assert str(calculator.evaluate("x")) == "x (no result)"

    def test_repr(self, calculator):
        calculator.evaluate("1+1")
        assert repr(calculator) == "Calculator(max_exponent=1000000, history_len=1)"


class TestCompute:
    def test_compute_raises_instead_of_recovering(self, calculator):
        with pytest.raises(DivisionByZeroError):
            calculator.compute("5", "/", "0")

    def test_compute_validates_operator(self, calculator):
        with pytest.raises(UnsupportedOperatorError):
            calculator.compute("5", "%", "2")

    def test_compute_does_not_record_history(self, calculator):
        calculator.compute("5", "+", "2")
        assert calculator.history == []
