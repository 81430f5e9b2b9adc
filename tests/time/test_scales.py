from __future__ import annotations

# Standard Library Imports
from fractions import Fraction

# Third Party Imports
import pytest

# EPOCHAL Imports
from epochal.time.calendar import instantFromCalendar
from epochal.time.instant import Instant
from epochal.time.scales import (
    DEFAULT_REGISTRY,
    EPOCH,
    GPS2000,
    GPS_WEEK,
    TS_GPS,
    TS_TAI,
    TS_TT,
    TS_UTC,
    TT2000,
    gpsInstant,
    gpsInstantFromWeek,
    gpsTimestamp,
    gpsWeekSeconds,
    ttDuration,
    ttInstant,
)
from epochal.time.stardate import Duration, Timestamp

# Local Imports
from .. import SAMPLE_DURATIONS


def testConstants():
    """Test the epoch offsets of the GPS and TT accessors."""
    assert GPS2000 == 630720000
    assert GPS_WEEK == 604800
    assert TT2000 == Fraction("725759967.816")


def testDefaultRegistry():
    """Test that the built-in scales are registered."""
    assert DEFAULT_REGISTRY.names() == ("TAI", "GPS", "TT", "UTC")
    assert DEFAULT_REGISTRY.get("UTC") is TS_UTC
    assert DEFAULT_REGISTRY.get("TT") is TS_TT


def testBuiltinOffsets():
    """Test GPS = TAI - 19 s and TT = TAI + 32.184 s."""
    assert Instant(Timestamp(0, 0), TS_GPS) - EPOCH == Duration(19)
    assert Instant(Timestamp(0, 0), TS_TT) - EPOCH == Duration("-32.184")
    assert TS_UTC.has_leap_seconds


def testGPSEpoch():
    """Test that the GPS epoch is 1980-01-06T00:00:00 UTC."""
    gps_epoch = instantFromCalendar(1980, 1, 6, timescale=TS_UTC)
    assert gpsInstant(0) == gps_epoch
    assert gpsTimestamp(gps_epoch) == Duration(0)
    assert gpsWeekSeconds(gps_epoch) == (0, 0)


def testGPSTimestampAtEpoch():
    """Test GPS seconds at 2000-01-01T00:00:00 TAI."""
    assert gpsTimestamp(EPOCH) == Duration(630720000 - 19)
    assert gpsWeekSeconds(Instant(Timestamp(0, 0), TS_GPS)) == (1042, 518400)


@pytest.mark.parametrize("seconds", SAMPLE_DURATIONS)
def testGPSRoundTrip(builtin_scale, seconds: Fraction):
    """Test that GPS seconds convert back to the same instant."""
    moment = Instant.fromDuration(seconds, builtin_scale)
    back = gpsInstant(gpsTimestamp(moment))
    assert back == moment
    assert back.timescale is TS_GPS


@pytest.mark.parametrize(
    ("weeks", "seconds"),
    [(0, 0), (1042, 518400), (2000, Fraction("3600.25")), (2238, 604799)],
)
def testGPSWeeks(weeks: int, seconds: Fraction):
    """Test the week and seconds-of-week decomposition."""
    moment = gpsInstantFromWeek(weeks, seconds)
    assert gpsWeekSeconds(moment) == (weeks, seconds)
    assert gpsTimestamp(moment) == Duration(weeks * 604800 + seconds)


def testGPSWeekRollover():
    """Test that the last second of a week is followed by the next week."""
    moment = gpsInstantFromWeek(1999, 604799) + Duration(1)
    assert gpsWeekSeconds(moment) == (2000, 0)


def testTTEpoch():
    """Test that the TT epoch is 1977-01-01T00:00:00 TAI."""
    tt_epoch = instantFromCalendar(1977, 1, 1, timescale=TS_TAI)
    assert ttDuration(tt_epoch) == Duration(0)
    assert ttInstant(0) == tt_epoch
    assert ttDuration(EPOCH) == Duration(725760000)


@pytest.mark.parametrize("seconds", SAMPLE_DURATIONS)
def testTTRoundTrip(builtin_scale, seconds: Fraction):
    """Test that TT seconds convert back to the same instant."""
    moment = Instant.fromDuration(seconds, builtin_scale)
    back = ttInstant(ttDuration(moment))
    assert back == moment
    assert back.timescale is TS_TT
    assert back.useTimescale(TS_TAI).duration == moment.duration
