"""Text rendering of digit sequences and signed values."""

from __future__ import annotations

from collections.abc import Sequence

from longcalc.digits import SIGN_SENTINEL, SignedInteger
from longcalc.operations import DivisionResult

# Printed between quotient and remainder
DIVISION_SEPARATOR = "......"


def render(
    value: SignedInteger | Sequence[int],
    most_significant_first: bool = True,
    trailing_blank_line: bool = False,
) -> str:
    """
    Render a value as text.

    Args:
        value: A SignedInteger, a magnitude, or digits ending in the sign
            sentinel
        most_significant_first: Emit digits in reading order rather than
            storage order
        trailing_blank_line: Finish the line and add an empty one

    Returns:
        The rendered text; an empty sequence renders as ``"0"``
    """
    if isinstance(value, SignedInteger):
        value = value.to_sentinel()

    if value and value[-1] == SIGN_SENTINEL:
        text = "-" + render(value[:-1], most_significant_first)
    elif not value:
        text = "0"
    elif most_significant_first:
        text = "".join(str(digit) for digit in reversed(value))
    else:
        text = "".join(str(digit) for digit in value)

    if trailing_blank_line:
        text += "\n\n"
    return text


def render_division(result: DivisionResult) -> str:
    """Render ``quotient......remainder`` followed by a blank line."""
    quotient = render(result.quotient, most_significant_first=True)
    remainder = render(result.remainder, most_significant_first=True, trailing_blank_line=True)
    return f"{quotient}{DIVISION_SEPARATOR}{remainder}"
