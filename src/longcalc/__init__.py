"""
Exact arithmetic on decimal integers of any length.

Numbers are digit tuples stored least significant digit first, with a
tagged SignedInteger for the results of subtraction. The package offers:
- Addition, subtraction, multiplication, long division and powers
- Magnitude comparison and canonical form helpers
- A Calculator session that turns expressions like "17/5" into results
"""

from longcalc.core import Calculator, Evaluation, parse_expression
from longcalc.digits import (
    ONE,
    SIGN_SENTINEL,
    ZERO,
    Ordering,
    Sign,
    SignedInteger,
    compare,
    from_int,
    from_string,
    is_zero,
    to_int,
    trim,
)
from longcalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    ExponentLargeWarning,
    ExponentTooLargeError,
    InvalidExpressionError,
    InvalidInputError,
    UnsupportedOperatorError,
)
from longcalc.formatting import render, render_division
from longcalc.operations import (
    DivisionResult,
    add,
    divide,
    multiply,
    power,
    quotient_digit,
    safe_divide,
    subtract,
)
from longcalc.validators import (
    validate_digit_string,
    validate_magnitude,
    validate_operator,
)

__all__ = [
    "ONE",
    "SIGN_SENTINEL",
    "ZERO",
    "Calculator",
    "CalculatorError",
    "DivisionByZeroError",
    "DivisionResult",
    "Evaluation",
    "ExponentLargeWarning",
    "ExponentTooLargeError",
    "InvalidExpressionError",
    "InvalidInputError",
    "Ordering",
    "Sign",
    "SignedInteger",
    "UnsupportedOperatorError",
    "add",
    "compare",
    "divide",
    "from_int",
    "from_string",
    "is_zero",
    "multiply",
    "parse_expression",
    "power",
    "quotient_digit",
    "render",
    "render_division",
    "safe_divide",
    "subtract",
    "to_int",
    "trim",
    "validate_digit_string",
    "validate_magnitude",
    "validate_operator",
]

__version__ = "0.1.0"
