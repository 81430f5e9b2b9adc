"""Helpers between civil calendar dates and :class:`.Instant` values.

Dates are proleptic Gregorian, so the supported range is that of ``datetime.date``
(years 1 through 9999). A calendar date is always read in a timescale; on a leap-second
scale ``23:59:60`` exists on days that end with an inserted leap second.
"""

from __future__ import annotations

# Standard Library Imports
import datetime
from typing import TYPE_CHECKING

# Local Imports
from ..common.logger import epochalLogError
from .instant import Instant
from .scalar import Scalar, floorDivMod, toScalar
from .scales import TS_UTC
from .stardate import DAY_SECONDS, Timestamp

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .scalar import ScalarLike
    from .timescale import Timescale


_EPOCH_DATE = datetime.date(2000, 1, 1)


def daysSinceEpoch(year: int, month: int, day: int) -> int:
    """Whole days from 2000-01-01 to the given date."""
    return datetime.date(year, month, day).toordinal() - _EPOCH_DATE.toordinal()


def dateFromDays(days: int) -> datetime.date:
    """Calendar date `days` days after 2000-01-01."""
    return datetime.date.fromordinal(_EPOCH_DATE.toordinal() + days)


def instantFromCalendar(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: ScalarLike = 0,
    timescale: Timescale = TS_UTC,
) -> Instant:
    """Build the instant labelled by a calendar date and clock time in `timescale`.

    Args:
        year (``int``): Calendar year
        month (``int``): Month of the year
        day (``int``): Day of the month
        hour (``int``): Hours in the day
        minute (``int``): Minutes in the hour
        second (:data:`.ScalarLike`): Seconds in the minute, up to 60.x at the end of a day with
            an inserted leap second
        timescale (:class:`.Timescale`): scale the clock reading belongs to. Defaults to UTC.

    Raises:
        ValueError: if any field is out of range for the date and scale.

    Returns:
        :class:`.Instant`: the labelled instant, expressed in `timescale`.
    """
    if month > 12 or month < 1:
        _raiseValueError("Month must be an integer (1-12).")
    if day > 31 or day < 1:
        _raiseValueError("Day must be an integer (1-31).")
    if hour > 23 or hour < 0:
        _raiseValueError("Hour must be an integer (0-23).")
    if minute > 59 or minute < 0:
        _raiseValueError("Minute must be an integer (0-59).")

    second = toScalar(second)
    if second >= 61 or second < 0:
        _raiseValueError("Second must be a number in [0, 61).")
    if second >= 60 and (hour, minute) != (23, 59):
        _raiseValueError("Second 60 only exists at 23:59 on a leap-second day.")

    try:
        days = daysSinceEpoch(year, month, day)
    except ValueError as err:
        epochalLogError(f"Invalid calendar date {year}-{month}-{day}: {err}")
        raise

    stamp = Timestamp(days, hour * 3600 + minute * 60 + second)
    if stamp.seconds >= timescale.daySeconds(stamp):
        _raiseValueError(f"{year:04d}-{month:02d}-{day:02d} has no second {second} in {timescale.name}.")

    return Instant(stamp, timescale)


def calendarDate(
    moment: Instant,
    timescale: Timescale | None = None,
) -> tuple[int, int, int, int, int, Scalar]:
    """Return the ``(year, month, day, hour, minute, second)`` labelling `moment`.

    Args:
        moment (:class:`.Instant`): instant to label.
        timescale (:class:`.Timescale`, optional): scale to read the clock in. Defaults to the
            instant's own scale.

    Returns:
        ``tuple``: integer fields plus exact fractional seconds; a leap second reads as
        ``23:59:60.x``.
    """
    if timescale is None:
        timescale = moment.timescale
    stamp = moment.useTimescale(timescale).since
    date = dateFromDays(stamp.days)

    if stamp.seconds >= DAY_SECONDS:
        return date.year, date.month, date.day, 23, 59, stamp.seconds - (DAY_SECONDS - 60)

    hour, remainder = floorDivMod(stamp.seconds, 3600)
    minute, second = floorDivMod(remainder, 60)
    return date.year, date.month, date.day, hour, minute, second


def datetimeToInstant(date_time: datetime.datetime, timescale: Timescale = TS_UTC) -> Instant:
    """Convert a ``datetime`` to an :class:`.Instant` read in `timescale`.

    Aware datetimes are first shifted to UTC wall-clock time, so `timescale` should be a
    UTC-family scale for them.
    """
    if date_time.tzinfo is not None:
        date_time = date_time.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return instantFromCalendar(
        date_time.year,
        date_time.month,
        date_time.day,
        date_time.hour,
        date_time.minute,
        date_time.second + Scalar(date_time.microsecond, 1_000_000),
        timescale=timescale,
    )


def instantToDatetime(moment: Instant, timescale: Timescale = TS_UTC) -> datetime.datetime:
    """Convert an :class:`.Instant` to a naive ``datetime`` read in `timescale`.

    The result is rounded to the nearest microsecond.

    Raises:
        ValueError: if `moment` falls inside a leap second, which ``datetime`` cannot hold.
    """
    stamp = moment.useTimescale(timescale).since
    if stamp.seconds >= DAY_SECONDS:
        _raiseValueError(f"{moment} is inside a leap second and has no datetime equivalent.")

    midnight = datetime.datetime.combine(dateFromDays(stamp.days), datetime.time())
    return midnight + datetime.timedelta(microseconds=round(stamp.seconds * 1_000_000))


def _raiseValueError(message: str):
    epochalLogError(f"Calendar: {message}")
    raise ValueError(f"Calendar: {message}")
