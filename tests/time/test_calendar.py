from __future__ import annotations

# Standard Library Imports
import datetime
from fractions import Fraction

# Third Party Imports
import pytest

# EPOCHAL Imports
from epochal.time.calendar import (
    calendarDate,
    dateFromDays,
    datetimeToInstant,
    daysSinceEpoch,
    instantFromCalendar,
    instantToDatetime,
)
from epochal.time.scales import EPOCH, TS_GPS, TS_TAI, TS_UTC
from epochal.time.stardate import Duration

# Local Imports
from .. import LEAP_DAY_2016, TEST_START_DAY, UTC_235960


def testDayCounts():
    """Test day counts relative to 2000-01-01."""
    assert daysSinceEpoch(2000, 1, 1) == 0
    assert daysSinceEpoch(1999, 12, 31) == -1
    assert LEAP_DAY_2016 == 6209
    assert dateFromDays(TEST_START_DAY) == datetime.date(2018, 12, 1)
    assert dateFromDays(-8400) == datetime.date(1977, 1, 1)


def testEpochLabels():
    """Test the library epoch in TAI and UTC."""
    assert instantFromCalendar(2000, 1, 1, timescale=TS_TAI) == EPOCH
    assert instantFromCalendar(2000, 1, 1) - EPOCH == Duration(32)
    assert calendarDate(EPOCH, TS_UTC) == (1999, 12, 31, 23, 59, 28)


def testLeapSecond():
    """Test labelling the 2016 leap second."""
    leap = instantFromCalendar(2016, 12, 31, 23, 59, 60)
    assert leap.since == UTC_235960
    assert calendarDate(leap) == (2016, 12, 31, 23, 59, 60)
    assert calendarDate(leap, TS_TAI) == (2017, 1, 1, 0, 0, 36)
    assert calendarDate(leap, TS_GPS) == (2017, 1, 1, 0, 0, 17)

    half = instantFromCalendar(2016, 12, 31, 23, 59, Fraction("60.5"))
    assert calendarDate(half)[5] == Fraction("60.5")


@pytest.mark.parametrize(
    "fields",
    [
        (2016, 12, 30, 23, 59, 60),
        (2016, 12, 31, 12, 0, 60),
        (2016, 12, 31, 23, 59, 61),
        (2016, 13, 1, 0, 0, 0),
        (2016, 2, 30, 0, 0, 0),
        (2016, 1, 0, 0, 0, 0),
        (2016, 1, 1, 24, 0, 0),
        (2016, 1, 1, 0, 60, 0),
        (2016, 1, 1, 0, 0, -1),
    ],
)
def testInvalidFields(fields: tuple):
    """Test rejected calendar fields."""
    with pytest.raises(ValueError):
        instantFromCalendar(*fields)


def testNoLeapSecondOnUniformScale():
    """Test that 23:59:60 does not exist on a uniform-day scale."""
    with pytest.raises(ValueError, match="has no second"):
        instantFromCalendar(2016, 12, 31, 23, 59, 60, timescale=TS_TAI)


def testFractionalClock():
    """Test clock fields with fractional seconds."""
    moment = instantFromCalendar(2018, 12, 1, 12, 30, Fraction("15.125"), timescale=TS_GPS)
    assert moment.timescale is TS_GPS
    assert calendarDate(moment) == (2018, 12, 1, 12, 30, Fraction("15.125"))


def testDatetimeRoundTrip():
    """Test conversion to and from ``datetime``."""
    date_time = datetime.datetime(2018, 12, 1, 12, 0, 0, 250000)
    moment = datetimeToInstant(date_time)
    assert calendarDate(moment) == (2018, 12, 1, 12, 0, Fraction(1, 4))
    assert instantToDatetime(moment) == date_time
    assert instantToDatetime(moment.useTimescale(TS_TAI)) == date_time
    assert instantToDatetime(moment, TS_TAI) == date_time + datetime.timedelta(seconds=37)


def testAwareDatetime():
    """Test that aware datetimes are shifted to UTC first."""
    zone = datetime.timezone(datetime.timedelta(hours=1))
    aware = datetime.datetime(2017, 1, 1, 1, 0, 0, tzinfo=zone)
    assert datetimeToInstant(aware) == instantFromCalendar(2017, 1, 1)


def testLeapSecondDatetime():
    """Test that a leap second has no ``datetime`` equivalent."""
    leap = instantFromCalendar(2016, 12, 31, 23, 59, 60)
    with pytest.raises(ValueError, match="leap second"):
        instantToDatetime(leap)
    assert instantToDatetime(leap + Duration(1)) == datetime.datetime(2017, 1, 1)
