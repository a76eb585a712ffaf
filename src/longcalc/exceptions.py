"""Custom exceptions for the longcalc package."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from longcalc.digits import Magnitude
    from longcalc.operations import DivisionResult


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class InvalidInputError(CalculatorError):
    """Raised when an operand is not valid digit text or not a magnitude."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class InvalidExpressionError(CalculatorError):
    """Raised when an expression has no operator or an empty operand."""

    def __init__(self, expression: str, reason: str = "invalid expression") -> None:
        super().__init__(reason, expression)
        self.expression = expression
        self.reason = reason


class UnsupportedOperatorError(CalculatorError):
    """Raised when the operator is not one of + - * / ^."""

    def __init__(self, operator: str) -> None:
        super().__init__("Unsupported operator", repr(operator))
        self.operator = operator


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero.

    ``result`` holds the defined zero quotient / zero remainder pair so that
    callers can recover without computing anything.
    """

    def __init__(self, dividend: Magnitude, result: DivisionResult) -> None:
        super().__init__("Division by zero")
        self.dividend = dividend
        self.result = result


class ExponentTooLargeError(CalculatorError):
    """Raised when an exponent exceeds the configured ceiling."""

    def __init__(self, limit: int, result: Magnitude) -> None:
        super().__init__("Exponent too large, limit is", limit)
        self.limit = limit
        self.result = result


class ExponentLargeWarning(UserWarning):
    """Advisory emitted when an exponent is large but still allowed."""

    def __init__(self, exponent: int) -> None:
        super().__init__(f"Exponent is {exponent}, the calculation may take a while")
        self.exponent = exponent
