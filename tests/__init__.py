"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from fractions import Fraction

# EPOCHAL Imports
from epochal.time.calendar import daysSinceEpoch
from epochal.time.stardate import Timestamp

# Common calendar days, counted from 2000-01-01
LEAP_DAY_2016: int = daysSinceEpoch(2016, 12, 31)
"""``int``: UTC day ending with the leap second inserted before 2017-01-01."""

TEST_START_DAY: int = daysSinceEpoch(2018, 12, 1)

# Common UTC timestamps around the 2016 leap second
UTC_235959: Timestamp = Timestamp(LEAP_DAY_2016, 86399)
UTC_235960: Timestamp = Timestamp(LEAP_DAY_2016, 86400)
UTC_235960_5: Timestamp = Timestamp(LEAP_DAY_2016, Fraction(172801, 2))

# Julian Dates of 2016-12-31T23:59:59 and 23:59:60 UTC
JD_235959: float = 2457754.499976852
JD_235960: float = 2457754.499988426

# TAI durations spanning sub-zeptosecond to ten-billion-year magnitudes
SAMPLE_DURATIONS: tuple[Fraction, ...] = (
    Fraction(0),
    Fraction(1, 10**22),
    Fraction(-19),
    Fraction("32.184"),
    Fraction("536543999.123456789012345678901"),
    Fraction(-(10**9), 3),
    Fraction(315576000000000000),
    Fraction(-315576000000000000) + Fraction(1, 10**21),
)
