"""Calculator session: expression splitting, dispatch, and recovery."""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from longcalc.digits import Magnitude, SignedInteger, from_string
from longcalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    ExponentTooLargeError,
    InvalidExpressionError,
    InvalidInputError,
)
from longcalc.formatting import render, render_division
from longcalc.operations import (
    EXPONENT_WARNING_THRESHOLD,
    MAX_EXPONENT,
    DivisionResult,
    add,
    divide,
    multiply,
    power,
    subtract,
)
from longcalc.validators import validate_operator

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

Result = Union[Magnitude, SignedInteger, DivisionResult]


def parse_expression(expression: str) -> tuple[str, str, str]:
    """
    Split ``<digits><operator><digits>`` at its first non-digit character.

    Args:
        expression: Raw expression such as ``"1234+5678"``

    Returns:
        Left operand text, operator character, right operand text

    Raises:
        InvalidExpressionError: If no operator is present or an operand
            is empty or not digit text
    """
    expression = expression.strip()
    for index, char in enumerate(expression):
        if not char.isascii() or not char.isdigit():
            break
    else:
        raise InvalidExpressionError(expression, "No operator found")

    left, op, right = expression[:index], expression[index], expression[index + 1 :]
    if not left or not right:
        raise InvalidExpressionError(expression, "Operands must not be empty")
    return left, op, right


@dataclass
class Evaluation:
    """Outcome of evaluating one expression."""

    expression: str
    operator: str | None = None
    result: Result | None = None
    error: CalculatorError | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def text(self) -> str:
        """Display text, ``=`` followed by the rendered result."""
        if self.result is None:
            return ""
        if isinstance(self.result, DivisionResult):
            return "=" + render_division(self.result)
        return "=" + render(self.result, trailing_blank_line=True)

    def __str__(self) -> str:
        return f"{self.expression} {self.text.strip() or '(no result)'}"


class Calculator:
    """
    An expression calculator over arbitrary-precision integers.

    Every engine error is recovered here: the returned Evaluation carries
    the error and, for division by zero or an oversized exponent, the
    defined fallback result.

    Example:
        >>> calc = Calculator()
        >>> calc.evaluate("17/5").text
        '=3......2\\n\\n'
        >>> calc.evaluate("5/0").error
        DivisionByZeroError('Division by zero')
    """

    def __init__(
        self,
        max_exponent: int = MAX_EXPONENT,
        warn_threshold: int = EXPONENT_WARNING_THRESHOLD,
    ) -> None:
        self.max_exponent = max_exponent
        self.warn_threshold = warn_threshold
        self._history: list[Evaluation] = []
        self._operations: dict[str, Callable[[Magnitude, Magnitude], Result]] = {
            "+": add,
            "-": subtract,
            "*": multiply,
            "/": divide,
            "^": self._power,
        }

    @property
    def history(self) -> list[Evaluation]:
        """List of all evaluations performed."""
        return self._history.copy()

    @property
    def last(self) -> Evaluation | None:
        return self._history[-1] if self._history else None

    def _power(self, base: Magnitude, exponent: Magnitude) -> Magnitude:
        return power(
            base,
            exponent,
            max_exponent=self.max_exponent,
            warn_threshold=self.warn_threshold,
        )

    def compute(self, left: str, op: str, right: str) -> Result:
        """
        Apply op to two digit strings without recovering from errors.

        Raises:
            CalculatorError: Any engine error, unchanged
        """
        validate_operator(op)
        return self._operations[op](from_string(left), from_string(right))

    def evaluate(self, expression: str) -> Evaluation:
        """Parse, compute, and record one expression."""
        evaluation = Evaluation(expression=expression.strip())
        try:
            left, op, right = parse_expression(expression)
            evaluation.operator = op
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always")
                evaluation.result = self.compute(left, op, right)
            evaluation.warnings = [str(w.message) for w in caught]
        except (DivisionByZeroError, ExponentTooLargeError) as exc:
            logger.info("Recovered from %s in %r", type(exc).__name__, evaluation.expression)
            evaluation.error = exc
            evaluation.result = exc.result
        except InvalidInputError as exc:
            # Stray characters after the operator make the whole expression invalid
            evaluation.error = InvalidExpressionError(evaluation.expression, exc.reason)
            logger.info("Rejected %r: %s", evaluation.expression, evaluation.error)
        except CalculatorError as exc:
            logger.info("Rejected %r: %s", evaluation.expression, exc)
            evaluation.error = exc

        logger.debug("Evaluated %s", evaluation)
        self._history.append(evaluation)
        return evaluation

    def clear(self) -> Calculator:
        """Forget all recorded evaluations."""
        self._history.clear()
        return self

    def __repr__(self) -> str:
        return f"Calculator(max_exponent={self.max_exponent}, history_len={len(self._history)})"
