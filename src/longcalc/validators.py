"""Input validation functions with strict type checking."""

from __future__ import annotations

from collections.abc import Sequence

from longcalc.exceptions import InvalidInputError, UnsupportedOperatorError

# Operators understood by the engine
OPERATORS = frozenset("+-*/^")

_DIGIT_CHARS = frozenset("0123456789")


def validate_digit_string(text: str) -> str:
    """
    Validate that text is a non-empty run of ASCII decimal digits.

    Args:
        text: The operand text to validate

    Returns:
        The validated text

    Raises:
        InvalidInputError: If text is not a str, is empty, or holds
            anything other than '0'-'9'
    """
    if not isinstance(text, str):
        raise InvalidInputError(text, f"Expected str, got {type(text).__name__}")

    if not text:
        raise InvalidInputError(text, "Operand must not be empty")

    if not _DIGIT_CHARS.issuperset(text):
        raise InvalidInputError(text, "Operand must contain only the digits 0-9")

    return text


def validate_magnitude(value: Sequence[int]) -> tuple[int, ...]:
    """
    Validate that a value is a non-negative digit sequence.

    Only tuples and lists are accepted, so signed values have to be
    unwrapped to their magnitude before reaching the arithmetic kernels.

    Args:
        value: Digits, least significant first

    Returns:
        The digits as a tuple

    Raises:
        InvalidInputError: If value is empty, not a sequence of ints,
            carries a sign sentinel, or holds a digit outside [0, 9]
    """
    if not isinstance(value, (tuple, list)):
        raise InvalidInputError(value, f"Expected digit sequence, got {type(value).__name__}")

    if not value:
        raise InvalidInputError(value, "Digit sequence must not be empty")

    for digit in value:
        # bool is an int subclass but never a digit
        if not isinstance(digit, int) or isinstance(digit, bool):
            raise InvalidInputError(value, f"Expected int digits, got {type(digit).__name__}")
        if digit < 0:
            raise InvalidInputError(value, "Signed value where a magnitude is required")
        if digit > 9:
            raise InvalidInputError(value, "Digits must lie in [0, 9]")

    return tuple(value)


def validate_operator(op: str) -> str:
    """
    Validate that op is one of the supported operator characters.

    Args:
        op: Operator character

    Returns:
        The validated operator

    Raises:
        UnsupportedOperatorError: If op is not one of + - * / ^
    """
    if op not in OPERATORS:
        raise UnsupportedOperatorError(op)

    return op
