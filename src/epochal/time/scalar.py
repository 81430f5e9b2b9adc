"""Extended-precision scalar used for every day count, second count and span.

Values are exact rationals (:class:`fractions.Fraction`), so sums, differences and
scalings by rational factors never round. Rounding only happens where it is asked
for, through :func:`.roundScalar` or when rendering with :func:`.formatScalar`.
"""

from __future__ import annotations

# Standard Library Imports
from decimal import Decimal
from fractions import Fraction
from numbers import Rational
from typing import Union

# Third Party Imports
from numpy import floating, integer

Scalar = Fraction
"""Exact rational type backing all time arithmetic."""

ScalarLike = Union[int, float, str, Decimal, Fraction, integer, floating]
"""Values accepted wherever a :data:`.Scalar` is expected."""


def toScalar(value: ScalarLike) -> Scalar:
    """Convert `value` to an exact :data:`.Scalar`.

    Floats are taken at their exact binary value; strings and ``Decimal`` keep every written digit.

    Args:
        value: number to convert.

    Raises:
        TypeError: if `value` is not a real number or numeric string.

    Returns:
        exact rational equal to `value`.
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Cannot use a bool as a time scalar: {value!r}")
    if isinstance(value, integer):
        return Fraction(int(value))
    if isinstance(value, floating):
        return Fraction(float(value))
    if isinstance(value, (int, float, str, Decimal, Rational)):
        return Fraction(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to a time scalar")


def floorDivMod(value: Scalar, divisor: Scalar) -> tuple[int, Scalar]:
    """Floor-divide `value` by `divisor`, returning the integer quotient and the remainder.

    The remainder carries the sign of `divisor`, so for positive divisors it is in ``[0, divisor)``.
    """
    quotient, remainder = divmod(value, divisor)
    return int(quotient), Fraction(remainder)


def roundScalar(value: Scalar, precision: int) -> Scalar:
    """Round `value` to `precision` decimal digits, ties to even."""
    return round(value, precision)


def formatScalar(value: Scalar, precision: int) -> str:
    """Render `value` in fixed-point notation with exactly `precision` fractional digits."""
    precision = max(precision, 0)
    scale = 10**precision
    scaled = round(value * scale)
    sign = "-" if scaled < 0 else ""
    whole, fraction = divmod(abs(scaled), scale)
    if precision == 0:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{fraction:0{precision}d}"
