from __future__ import annotations

# Standard Library Imports
from decimal import Decimal
from fractions import Fraction

# Third Party Imports
import pytest
from numpy import float64, int64

# EPOCHAL Imports
from epochal.time.scalar import floorDivMod, formatScalar, roundScalar, toScalar


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3, Fraction(3)),
        (0.5, Fraction(1, 2)),
        ("32.184", Fraction(32184, 1000)),
        (Decimal("1e-21"), Fraction(1, 10**21)),
        (Fraction(7, 3), Fraction(7, 3)),
        (int64(-19), Fraction(-19)),
        (float64(0.25), Fraction(1, 4)),
    ],
)
def testToScalar(value, expected: Fraction):
    """Test exact conversion of supported number types."""
    assert toScalar(value) == expected


@pytest.mark.parametrize("value", [None, True, [1.0], object()])
def testToScalarRejects(value):
    """Test that non-numbers are rejected."""
    with pytest.raises(TypeError):
        toScalar(value)


def testFloorDivMod():
    """Test floor division and remainder signs."""
    assert floorDivMod(Fraction(-19), Fraction(86400)) == (-1, Fraction(86381))
    assert floorDivMod(Fraction("604800.5"), Fraction(604800)) == (1, Fraction(1, 2))
    quotient, remainder = floorDivMod(Fraction(7, 2), 1)
    assert isinstance(quotient, int)
    assert remainder == Fraction(1, 2)


def testRoundScalar():
    """Test that rounding resolves ties to even."""
    assert roundScalar(Fraction(5, 2), 0) == 2
    assert roundScalar(Fraction(7, 2), 0) == 4
    assert roundScalar(Fraction("0.125"), 2) == Fraction("0.12")
    assert roundScalar(Fraction("0.135"), 2) == Fraction("0.14")


@pytest.mark.parametrize(
    ("value", "precision", "text"),
    [
        (Fraction(0), 3, "0.000"),
        (Fraction(-19), 1, "-19.0"),
        (Fraction("12.345"), 2, "12.34"),
        (Fraction(-5, 4), 1, "-1.2"),
        (Fraction(1, 3), 0, "0"),
        (Fraction(2, 3), -2, "1"),
        (Fraction(1, 10**21), 21, "0.000000000000000000001"),
    ],
)
def testFormatScalar(value: Fraction, precision: int, text: str):
    """Test fixed-point rendering."""
    assert formatScalar(value, precision) == text
