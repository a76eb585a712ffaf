"""Exact arithmetic on decimal digit sequences."""

from __future__ import annotations

import logging
import warnings
from collections.abc import Sequence
from typing import NamedTuple

from longcalc.digits import (
    ONE,
    ZERO,
    Magnitude,
    Ordering,
    Sign,
    SignedInteger,
    _compare,
    is_zero,
    trim,
)
from longcalc.exceptions import (
    DivisionByZeroError,
    ExponentLargeWarning,
    ExponentTooLargeError,
)
from longcalc.validators import validate_magnitude

logger = logging.getLogger(__name__)

# Exponents above this are refused outright
MAX_EXPONENT = 1_000_000
# Exponents above this still run but trigger an ExponentLargeWarning
EXPONENT_WARNING_THRESHOLD = 1_000


class DivisionResult(NamedTuple):
    quotient: Magnitude
    remainder: Magnitude


def _magnitude(value: Sequence[int]) -> Magnitude:
    return trim(validate_magnitude(value))


def _add(a: Magnitude, b: Magnitude) -> Magnitude:
    width = max(len(a), len(b))
    result = [0] * (width + 1)
    carry = 0
    for i in range(width):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        result[i] = total % 10
        carry = total // 10
    result[width] = carry
    return trim(result)


def _subtract(a: Magnitude, b: Magnitude) -> SignedInteger:
    order = _compare(a, b)
    if order is Ordering.EQUAL:
        return SignedInteger(ZERO)

    sign = Sign.POSITIVE
    if order is Ordering.LESS:
        a, b = b, a
        sign = Sign.NEGATIVE

    result = list(a)
    for i in range(len(result)):
        if i < len(b):
            result[i] -= b[i]
        if result[i] < 0:
            result[i] += 10
            result[i + 1] -= 1
    return SignedInteger(trim(result), sign)


def _multiply(a: Magnitude, b: Magnitude) -> Magnitude:
    result = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        if x == 0:
            continue
        for j, y in enumerate(b):
            result[i + j] += x * y

    for i in range(len(result) - 1):
        result[i + 1] += result[i] // 10
        result[i] %= 10
    return trim(result)


def _power(base: Magnitude, exponent: int) -> Magnitude:
    if exponent == 0:
        return ONE
    if exponent == 1:
        return base

    half = _power(base, exponent // 2)
    result = _multiply(half, half)
    if exponent % 2 == 1:
        result = _multiply(result, base)
    return result


def quotient_digit(remainder: Sequence[int], divisor: Sequence[int]) -> int:
    """
    Find the largest digit d in [0, 9] with d * divisor <= remainder.

    Binary search over the ten candidates, so at most four products are
    formed per call.

    Args:
        remainder: Current running remainder
        divisor: Non-zero divisor

    Returns:
        The quotient digit for this step of long division
    """
    remainder = _magnitude(remainder)
    divisor = _magnitude(divisor)

    low, high = 0, 9
    while low <= high:
        mid = (low + high) // 2
        if _compare(_multiply((mid,), divisor), remainder) is Ordering.GREATER:
            high = mid - 1
        else:
            low = mid + 1
    return high


def add(a: Sequence[int], b: Sequence[int]) -> Magnitude:
    """
    Add two magnitudes.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Associative: add(add(a, b), c) == add(a, add(b, c))
        - Identity: add(a, ZERO) == a

    Args:
        a: First operand, least significant digit first
        b: Second operand, least significant digit first

    Returns:
        Canonical digits of a + b

    Raises:
        InvalidInputError: If either operand is not a non-negative magnitude
    """
    return _add(_magnitude(a), _magnitude(b))


def subtract(a: Sequence[int], b: Sequence[int]) -> SignedInteger:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) and subtract(b, a) differ only in sign
        - Identity: subtract(a, ZERO) == a
        - Self-inverse: subtract(a, a) == ZERO, never negative

    Args:
        a: Minuend
        b: Subtrahend

    Returns:
        The signed difference; use ``to_sentinel()`` for the sentinel form

    Raises:
        InvalidInputError: If either operand is not a non-negative magnitude
    """
    return _subtract(_magnitude(a), _magnitude(b))


def multiply(a: Sequence[int], b: Sequence[int]) -> Magnitude:
    """
    Multiply two magnitudes with the grade-school method.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, ONE) == a
        - Zero: multiply(a, ZERO) == ZERO

    Raises:
        InvalidInputError: If either operand is not a non-negative magnitude
    """
    return _multiply(_magnitude(a), _magnitude(b))


def power(
    base: Sequence[int],
    exponent: Sequence[int],
    *,
    max_exponent: int = MAX_EXPONENT,
    warn_threshold: int = EXPONENT_WARNING_THRESHOLD,
) -> Magnitude:
    """
    Raise base to a non-negative integer exponent by repeated squaring.

    Properties:
        - Zero exponent: power(a, ZERO) == ONE, including a == ZERO
        - Zero base: power(ZERO, n) == ZERO for n != ZERO
        - Identity: power(a, ONE) == a

    Args:
        base: The base magnitude
        exponent: The exponent as a magnitude
        max_exponent: Largest exponent that will be computed
        warn_threshold: Exponents above this emit an ExponentLargeWarning

    Returns:
        Canonical digits of base ** exponent

    Raises:
        InvalidInputError: If either operand is not a non-negative magnitude
        ExponentTooLargeError: If exponent exceeds max_exponent; its
            ``result`` is ZERO
    """
    base = _magnitude(base)
    exponent = _magnitude(exponent)

    if is_zero(exponent):
        return ONE
    if is_zero(base):
        return ZERO
    if exponent == ONE:
        return base

    value = 0
    for digit in reversed(exponent):
        value = value * 10 + digit
        if value > max_exponent:
            logger.debug("Refusing exponent above %d", max_exponent)
            raise ExponentTooLargeError(max_exponent, ZERO)

    if value > warn_threshold:
        warnings.warn(ExponentLargeWarning(value), stacklevel=2)

    return _power(base, value)


def divide(a: Sequence[int], b: Sequence[int]) -> DivisionResult:
    """
    Long division of a by b, one quotient digit at a time.

    Properties:
        - Reconstruction: a == add(multiply(q, b), r)
        - Range: r < b
        - Identity: divide(a, ONE) == (a, ZERO)

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient and remainder

    Raises:
        InvalidInputError: If either operand is not a non-negative magnitude
        DivisionByZeroError: If b is zero; its ``result`` is (ZERO, ZERO)
    """
    a = _magnitude(a)
    b = _magnitude(b)

    if is_zero(b):
        logger.debug("Division by zero requested")
        raise DivisionByZeroError(a, DivisionResult(ZERO, ZERO))
    if is_zero(a):
        return DivisionResult(ZERO, ZERO)

    order = _compare(a, b)
    if order is Ordering.LESS:
        return DivisionResult(ZERO, a)
    if order is Ordering.EQUAL:
        return DivisionResult(ONE, ZERO)

    quotient = [0] * len(a)
    remainder: Magnitude = ()
    for i in range(len(a) - 1, -1, -1):
        remainder = trim((a[i],) + remainder)
        digit = quotient_digit(remainder, b)
        quotient[i] = digit
        if digit > 0:
            remainder = _subtract(remainder, _multiply((digit,), b)).magnitude

    return DivisionResult(trim(quotient), trim(remainder))


def safe_divide(
    a: Sequence[int], b: Sequence[int], default: DivisionResult | None = None
) -> DivisionResult:
    """
    Divide a by b, returning default if b is zero.

    This is a non-throwing variant of divide for callers that want the
    defined zero/zero pair instead of an exception.

    Args:
        a: Dividend
        b: Divisor
        default: Pair to return if b is zero, (ZERO, ZERO) when omitted

    Returns:
        Quotient and remainder of a and b, or default if b is zero
    """
    try:
        return divide(a, b)
    except DivisionByZeroError as exc:
        return exc.result if default is None else default
