"""
Digit-sequence representation and magnitude ordering.

A magnitude is a tuple of decimal digits stored least significant first,
so ``(4, 3, 2, 1)`` is 1234. Canonical magnitudes have no high zero digits
and zero is ``(0,)``.

Signed values use the tagged ``SignedInteger`` form. The trailing sign
sentinel encoding (a ``-1`` appended after the digits) is kept only for
text compatibility through ``to_sentinel`` / ``from_sentinel``.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

from longcalc.exceptions import InvalidInputError
from longcalc.validators import validate_digit_string, validate_magnitude

Magnitude = tuple[int, ...]

ZERO: Magnitude = (0,)
ONE: Magnitude = (1,)

# Out-of-range marker that follows the digits of a negative value
SIGN_SENTINEL = -1


class Ordering(enum.IntEnum):
    """Result of comparing two magnitudes."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class Sign(enum.Enum):
    POSITIVE = "+"
    NEGATIVE = "-"


@dataclass(frozen=True)
class SignedInteger:
    """
    A magnitude tagged with a sign.

    Zero is never negative: constructing a negative zero yields a
    positive one.
    """

    magnitude: Magnitude
    sign: Sign = Sign.POSITIVE

    def __post_init__(self) -> None:
        magnitude = trim(validate_magnitude(self.magnitude))
        object.__setattr__(self, "magnitude", magnitude)
        if magnitude == ZERO and self.sign is Sign.NEGATIVE:
            object.__setattr__(self, "sign", Sign.POSITIVE)

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    def to_sentinel(self) -> tuple[int, ...]:
        """Encode as digits followed by the sign sentinel when negative."""
        if self.is_negative:
            return self.magnitude + (SIGN_SENTINEL,)
        return self.magnitude

    @classmethod
    def from_sentinel(cls, sequence: Sequence[int]) -> SignedInteger:
        """Decode a digit sequence that may end with the sign sentinel."""
        if sequence and sequence[-1] == SIGN_SENTINEL:
            return cls(tuple(sequence[:-1]), Sign.NEGATIVE)
        return cls(tuple(sequence))

    def __int__(self) -> int:
        value = to_int(self.magnitude)
        return -value if self.is_negative else value

    def __str__(self) -> str:
        digits = "".join(map(str, reversed(self.magnitude)))
        return f"-{digits}" if self.is_negative else digits


def trim(digits: Sequence[int]) -> Magnitude:
    """Drop high zero digits, keeping at least one digit."""
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    return tuple(digits[:end])


def is_zero(digits: Sequence[int]) -> bool:
    return len(digits) == 1 and digits[0] == 0


def from_string(text: str) -> Magnitude:
    """
    Build a canonical magnitude from decimal digit text.

    Args:
        text: Most-significant-first digits, e.g. ``"1234"``

    Returns:
        Least-significant-first digits with leading zeros removed

    Raises:
        InvalidInputError: If text is empty or not purely digits
    """
    validate_digit_string(text)
    return trim(tuple(ord(char) - ord("0") for char in reversed(text)))


def from_int(value: int) -> Magnitude:
    """Build a magnitude from a non-negative Python int."""
    if value < 0:
        raise InvalidInputError(value, "Magnitude must be non-negative")
    return from_string(str(value))


def to_int(digits: Sequence[int]) -> int:
    return int("".join(map(str, reversed(digits))))


def _compare(a: Magnitude, b: Magnitude) -> Ordering:
    if len(a) != len(b):
        return Ordering.GREATER if len(a) > len(b) else Ordering.LESS

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return Ordering.GREATER if a[i] > b[i] else Ordering.LESS

    return Ordering.EQUAL


def compare(a: Sequence[int], b: Sequence[int]) -> Ordering:
    """
    Order two non-negative magnitudes.

    The longer canonical sequence is larger; equal lengths are decided by
    the first differing digit from the most significant end.

    Raises:
        InvalidInputError: If either operand is not a magnitude (a sign
            sentinel must be stripped first)
    """
    return _compare(trim(validate_magnitude(a)), trim(validate_magnitude(b)))
