"""Leap-second tables and the UTC-family timescales built from them.

A UTC-family timestamp stores whole UTC days since 2000-01-01 and the seconds
elapsed into that UTC day. On a day ending in an inserted leap second the
seconds into day run up to 86401, so ``23:59:60.5`` is ``(day, 86400.5)``.

The bundled table is read from ERFA (:mod:`erfa`), which tracks IERS Bulletin C.

References:
    IERS Bulletin C, TAI - UTC since 1972-01-01.
"""

from __future__ import annotations

# Standard Library Imports
import datetime
from bisect import bisect_right
from typing import TYPE_CHECKING

# Third Party Imports
import erfa

# Local Imports
from .scalar import Scalar, floorDivMod
from .stardate import DAY_SECONDS, Duration, Timestamp
from .timescale import UTC_UNIT, Timescale

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable


_EPOCH_ORDINAL: int = datetime.date(2000, 1, 1).toordinal()

_WHOLE_SECOND_UTC_YEAR: int = 1972
"""``int``: first year of UTC with whole-second steps; earlier ERFA rows carry fractional offsets and drift."""


def _erfaLeapSeconds() -> tuple[tuple[int, int, int], ...]:
    """Read the whole-second TAI - UTC steps from ERFA's leap-second table."""
    return tuple(
        (int(row["year"]), int(row["month"]), int(round(row["tai_utc"])))
        for row in erfa.leap_seconds.get()
        if row["year"] >= _WHOLE_SECOND_UTC_YEAR
    )


IERS_LEAP_SECONDS: tuple[tuple[int, int, int], ...] = _erfaLeapSeconds()
"""``tuple``: ``(year, month, TAI - UTC)`` for every offset change, effective on day 1 of the month."""


class LeapSecondTable:
    """Immutable, sorted record of TAI - UTC offsets.

    Before the first entry its offset applies unchanged; after the last entry the last offset
    applies forever.
    """

    __slots__ = ("_days", "_offsets", "_tai_starts")

    def __init__(self, entries: Iterable[tuple[int, int]]):
        """Build a table from ``(utc_day, tai_minus_utc)`` pairs.

        Args:
            entries (``iterable``): UTC day counts since 2000-01-01 at which a new whole-second
                offset takes effect, paired with that offset.

        Raises:
            ValueError: if `entries` is empty or lists the same day twice.
        """
        ordered = sorted((int(day), int(offset)) for day, offset in entries)
        if not ordered:
            raise ValueError("LeapSecondTable: at least one entry is required.")
        days = tuple(day for day, _ in ordered)
        if len(set(days)) != len(days):
            raise ValueError("LeapSecondTable: duplicate effective days.")

        object.__setattr__(self, "_days", days)
        object.__setattr__(self, "_offsets", tuple(offset for _, offset in ordered))
        object.__setattr__(
            self,
            "_tai_starts",
            tuple(day * DAY_SECONDS + offset for day, offset in ordered),
        )

    def __setattr__(self, name, value):
        """Tables are immutable."""
        raise AttributeError(f"LeapSecondTable is immutable, cannot set {name!r}")

    @classmethod
    def fromCalendar(cls, entries: Iterable[tuple[int, int, int]]) -> LeapSecondTable:
        """Build a table from ``(year, month, tai_minus_utc)`` rows like :data:`.IERS_LEAP_SECONDS`."""
        return cls(
            (datetime.date(year, month, 1).toordinal() - _EPOCH_ORDINAL, offset)
            for year, month, offset in entries
        )

    @property
    def entries(self) -> tuple[tuple[int, int], ...]:
        """The ``(utc_day, tai_minus_utc)`` pairs, sorted by day."""
        return tuple(zip(self._days, self._offsets))

    def offsetAtDay(self, day: int) -> int:
        """TAI - UTC in whole seconds at the start of UTC day `day`."""
        index = bisect_right(self._days, day) - 1
        return self._offsets[max(index, 0)]

    def secondsInDay(self, day: int) -> Scalar:
        """Length of UTC day `day`, 86401 when it ends with an inserted leap second."""
        return DAY_SECONDS + self.offsetAtDay(day + 1) - self.offsetAtDay(day)

    def toTAI(self, timestamp: Timestamp) -> Duration:
        """Project a UTC-family timestamp onto the TAI timeline."""
        return Duration(timestamp.totalSeconds() + self.offsetAtDay(timestamp.days))

    def fromTAI(self, duration: Duration) -> Timestamp:
        """Label a TAI duration with a UTC-family timestamp, placing leap seconds at ``23:59:60``."""
        index = max(bisect_right(self._tai_starts, duration.seconds) - 1, 0)
        utc_seconds = duration.seconds - self._offsets[index]
        day, seconds = floorDivMod(utc_seconds, DAY_SECONDS)

        # Inside an inserted leap second the naive day count has already rolled over
        if index + 1 < len(self._days) and day >= self._days[index + 1]:
            day = self._days[index + 1] - 1
            seconds = utc_seconds - day * DAY_SECONDS

        return Timestamp(day, seconds)

    def __eq__(self, other):
        """."""
        if not isinstance(other, LeapSecondTable):
            return NotImplemented
        return self.entries == other.entries

    def __hash__(self):
        """."""
        return hash(self.entries)

    def __repr__(self):
        """Return a string representation of this :class:`.LeapSecondTable`."""
        return f"LeapSecondTable({len(self._days)} entries, latest TAI-UTC={self._offsets[-1]} s)"


BUILTIN_LEAP_SECONDS: LeapSecondTable = LeapSecondTable.fromCalendar(IERS_LEAP_SECONDS)
""":class:`.LeapSecondTable`: the IERS table shipped with ERFA."""


def leapSecondTimescale(name: str, table: LeapSecondTable, unit: str = UTC_UNIT) -> Timescale:
    """Build a UTC-family scale whose days follow the leap seconds in `table`.

    Args:
        name (``str``): scale name.
        table (:class:`.LeapSecondTable`): TAI - UTC offsets.
        unit (``str``, optional): basis label. Scales sharing the ``"UTC"`` unit convert between
            each other without any numeric change, so they must encode timestamps identically.

    Returns:
        :class:`.Timescale`: scale with all three day-length hooks set.
    """

    def secondsInDay(timestamp: Timestamp) -> Scalar:
        return table.secondsInDay(timestamp.days)

    def toMJD2000(timestamp: Timestamp, tz_delta: Scalar) -> Scalar:
        # Shift by real day lengths so a leap second is never folded into the next day
        if tz_delta:
            timestamp = table.fromTAI(table.toTAI(timestamp) + tz_delta)
        return timestamp.days + timestamp.seconds / table.secondsInDay(timestamp.days)

    def fromMJD2000(mjd2000: Scalar) -> Timestamp:
        days, fraction = floorDivMod(mjd2000, 1)
        return Timestamp(days, fraction * table.secondsInDay(days))

    return Timescale(
        name,
        table.fromTAI,
        table.toTAI,
        unit=unit,
        seconds_in_day=secondsInDay,
        to_mjd2000=toMJD2000,
        from_mjd2000=fromMJD2000,
    )
