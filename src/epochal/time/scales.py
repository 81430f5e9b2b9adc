"""Built-in timescales, the library epoch, and GPS / TT epoch accessors.

TAI, GPS and TT are fixed offsets of each other with uniform 86400-second days:

* GPS = TAI - 19 s
* TT  = TAI + 32.184 s

UTC follows the bundled IERS leap-second table.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from .instant import Instant
from .leap_seconds import BUILTIN_LEAP_SECONDS, leapSecondTimescale
from .scalar import Scalar, floorDivMod
from .stardate import DAY_SECONDS, Duration, Timestamp
from .timescale import TimescaleRegistry, taiTimescale

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .scalar import ScalarLike


TS_TAI = taiTimescale("TAI")
"""International Atomic Time, the basis every conversion routes through."""

TS_GPS = taiTimescale("GPS", offset=Duration(-19))
"""GPS system time."""

TS_TT = taiTimescale("TT", offset=Duration("32.184"))
"""Terrestrial Time."""

TS_UTC = leapSecondTimescale("UTC", BUILTIN_LEAP_SECONDS)
"""Coordinated Universal Time with the bundled leap-second table."""

DEFAULT_REGISTRY = TimescaleRegistry((TS_TAI, TS_GPS, TS_TT, TS_UTC))
""":class:`.TimescaleRegistry` holding the built-in scales."""

EPOCH = Instant(Timestamp(0, 0), TS_TAI)
"""2000-01-01T00:00:00 TAI, the zero of every :class:`.Duration`."""

GPS2000: Scalar = 7300 * DAY_SECONDS
"""``Scalar``: seconds from the GPS epoch, 1980-01-06T00:00:00 GPS, to 2000-01-01T00:00:00 GPS."""

GPS_WEEK: Scalar = 7 * DAY_SECONDS
"""``Scalar``: length of a GPS week, 604800 s."""

TT2000: Scalar = 8400 * DAY_SECONDS - Scalar("32.184")
"""``Scalar``: seconds from the TT epoch, 1977-01-01T00:00:00 TAI, to 2000-01-01T00:00:00 TT."""


def gpsTimestamp(moment: Instant) -> Duration:
    """Seconds of GPS time elapsed since the GPS epoch at `moment`."""
    return Duration(moment.useTimescale(TS_GPS).since.totalSeconds() + GPS2000)


def gpsInstant(gps_seconds: Duration | ScalarLike) -> Instant:
    """Instant `gps_seconds` seconds of GPS time after the GPS epoch."""
    return Instant(Timestamp.fromSeconds(Duration(gps_seconds).seconds - GPS2000), TS_GPS)


def gpsInstantFromWeek(weeks: int, seconds: ScalarLike) -> Instant:
    """Instant at GPS week `weeks` and `seconds` into that week."""
    return gpsInstant(Duration(weeks * GPS_WEEK) + seconds)


def gpsWeekSeconds(moment: Instant) -> tuple[int, Scalar]:
    """Split the GPS time of `moment` into a week number and seconds into the week."""
    return floorDivMod(gpsTimestamp(moment).seconds, GPS_WEEK)


def ttDuration(moment: Instant) -> Duration:
    """Seconds of TT elapsed since the TT epoch at `moment`."""
    return Duration(moment.useTimescale(TS_TT).since.totalSeconds() + TT2000)


def ttInstant(tt_seconds: Duration | ScalarLike) -> Instant:
    """Instant `tt_seconds` seconds of TT after the TT epoch."""
    return Instant(Timestamp.fromSeconds(Duration(tt_seconds).seconds - TT2000), TS_TT)
