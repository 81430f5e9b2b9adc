"""Defines the :class:`.Instant` value and the operations that compare, shift and round it.

An instant is a :class:`.Timestamp` tagged with the :class:`.Timescale` that
interprets it. Two instants are equal when they name the same physical time,
whatever scales they carry:

.. code-block:: python

    gps = Instant.fromDuration(Duration(0), TS_GPS)
    tai = Instant.fromDuration(Duration(0), TS_TAI)

    gps == tai                  # True
    gps.since == tai.since      # False, -19 s vs 0 s

Scale conversions are deferred: an instant keeps the scale it was built in, and
cross-scale operations convert on demand. When one instant is compared against
many others in a different scale, convert it once with :meth:`.Instant.useTimescale`.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import InvalidTimescaleError, TimescaleMismatchError
from ..common.logger import epochalLogError
from .stardate import Duration, Timestamp
from .timescale import TAI_UNIT, Timescale, checkTimescale, convert

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .scalar import ScalarLike


class Instant:
    """A point in time expressed as a timestamp of a particular timescale.

    Attributes:
        since (:class:`.Timestamp`): timestamp relative to 2000-01-01, read in `timescale`.
        timescale (:class:`.Timescale`): scale the timestamp is expressed in.
    """

    __slots__ = ("since", "timescale")

    def __init__(self, since: Timestamp, timescale: Timescale):
        """Tag `since` with `timescale`.

        Note:
            Nothing checks that `since` was actually measured in `timescale`. Use
            :meth:`.fromTimestamp` where the arguments come from outside the package.
        """
        object.__setattr__(self, "since", since)
        object.__setattr__(self, "timescale", timescale)

    def __setattr__(self, name, value):
        """Instants are immutable."""
        raise AttributeError(f"Instant is immutable, cannot set {name!r}")

    @classmethod
    def fromTimestamp(cls, timescale: Timescale, timestamp: Timestamp) -> Instant:
        """Build an instant from a scale-native timestamp, validating both arguments.

        The timestamp is normalized through the scale, so seconds past the end of a day carry
        into the following day, e.g. ``Timestamp(0, 86400)`` on TAI becomes ``Timestamp(1, 0)``.

        Raises:
            InvalidTimescaleError: if `timescale` is not a :class:`.Timescale`, or
                `timestamp` is not a :class:`.Timestamp`.
        """
        checkTimescale(timescale)
        if not isinstance(timestamp, Timestamp):
            msg = f"Expected a Timestamp for scale {timescale.name!r}, got {type(timestamp).__name__}"
            epochalLogError(msg)
            raise InvalidTimescaleError(msg)
        return cls(timescale.fromTAI(timescale.toTAI(timestamp)), timescale)

    @classmethod
    def fromDuration(cls, duration: Duration | ScalarLike, timescale: Timescale) -> Instant:
        """Build the instant `duration` TAI seconds after 2000-01-01, expressed in `timescale`."""
        checkTimescale(timescale)
        return cls(timescale.fromTAI(Duration(duration)), timescale)

    @property
    def duration(self) -> Duration:
        """TAI seconds since 2000-01-01, the scale-independent form of this instant."""
        return self.timescale.toTAI(self.since)

    def useTimescale(self, target: Timescale) -> Instant:
        """Return the same physical instant with its timestamp expressed in `target`."""
        if self.timescale.name == target.name:
            return self
        return Instant(convert(self.since, self.timescale, target), target)

    def addDays(self, days: int) -> Instant:
        """Shift the stored timestamp by whole scale-native days."""
        return Instant(self.since.addDays(days), self.timescale)

    def addDurationIn(self, timescale: Timescale, span: Duration | ScalarLike) -> Instant:
        """Re-express in `timescale`, then add `span` with uniform 86400-second days.

        This ignores leap seconds on purpose, matching how Unix or NTP clocks count.
        """
        moved = self.useTimescale(timescale)
        return Instant(moved.since.addSeconds(span), timescale)

    def roundToPrecision(self, precision: int) -> Instant:
        """Round to `precision` fractional-second digits, ties to even.

        A negative `precision` leaves the instant unchanged. Leap-second scales are rounded on
        the TAI timeline and converted back, so a value inside a leap second rounds onto
        ``23:59:60`` or the neighbouring whole second, never onto a label that does not exist.
        """
        if precision < 0:
            return self
        if self.timescale.has_leap_seconds:
            rounded = self.duration.toTimestamp().round(precision)
            return Instant(self.timescale.fromTAI(rounded.toDuration()), self.timescale)
        return Instant(self.since.round(precision), self.timescale)

    def compare(self, other: Instant) -> int:
        """Return -1, 0 or 1 as this instant is before, at, or after `other`."""
        theirs = convert(other.since, other.timescale, self.timescale)
        if self.since < theirs:
            return -1
        if self.since > theirs:
            return 1
        return 0

    def show(self, precision: int | None = None) -> str:
        """Render as ``"<seconds since 2000-01-01> s <scale>"``.

        Args:
            precision (``int``, optional): fractional digits. Defaults to the configured
                ``display.Precision``.

        Returns:
            ``str``: the rendering. The scale suffix is dropped for TAI and unnamed scales.
        """
        if precision is None:
            precision = BehavioralConfig.getConfig().display.Precision
        text = f"{self.since.render(precision)} s"
        if self.timescale.name and self.timescale.name != "TAI":
            text = f"{text} {self.timescale.name}"
        return text

    def __add__(self, other):
        """Move forward by a physical :class:`.Duration`, keeping this instant's scale."""
        if not isinstance(other, Duration):
            return NotImplemented
        if self.timescale.unit == TAI_UNIT:
            return Instant(self.since.addSeconds(other), self.timescale)
        moved = self.timescale.toTAI(self.since) + other
        return Instant(self.timescale.fromTAI(moved), self.timescale)

    def __radd__(self, other):
        """."""
        return self.__add__(other)

    def __sub__(self, other):
        """Move back by a :class:`.Duration`, or measure the :class:`.Duration` since another instant."""
        if isinstance(other, Instant):
            return self.duration - other.duration
        if isinstance(other, Duration):
            return self + (-other)
        return NotImplemented

    def __eq__(self, other):
        """Same physical instant, regardless of scale."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other):
        """."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other):
        """."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        """."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        """."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        """."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self):
        """Hash the TAI duration so physically equal instants hash equally.

        Note:
            Scales sharing the ``"UTC"`` unit compare by label without any conversion. Two such
            scales built from different leap-second tables can therefore hold instants that
            compare equal yet hash differently, so do not mix them in one ``set`` or ``dict``.
            Scales built from the same table hash consistently.
        """
        return hash(("Instant", self.duration.seconds))

    def __repr__(self):
        """Return a string representation of this :class:`.Instant`."""
        return f"Instant({self.show()})"

    def __str__(self):
        """."""
        return self.show()


def instant(timescale: Timescale, timestamp: Timestamp) -> Instant:
    """Checked shortcut for :meth:`.Instant.fromTimestamp`."""
    return Instant.fromTimestamp(timescale, timestamp)


def useTimescale(moment: Instant, target: Timescale) -> Instant:
    """Return `moment` with its timestamp re-expressed in `target`."""
    return moment.useTimescale(target)


def compare(first: Instant, second: Instant) -> int:
    """Three-way comparison of two instants in `first`'s scale."""
    return first.compare(second)


def addDays(moment: Instant, days: int) -> Instant:
    """Shift `moment` by whole scale-native days, with no TAI round trip."""
    return moment.addDays(days)


def addDurationIn(moment: Instant, timescale: Timescale, span: Duration | ScalarLike) -> Instant:
    """Add a scale-native span to `moment` after re-expressing it in `timescale`."""
    return moment.addDurationIn(timescale, span)


def roundToPrecision(moment: Instant, precision: int) -> Instant:
    """Round `moment` to `precision` fractional-second digits."""
    return moment.roundToPrecision(precision)


def show(moment: Instant, precision: int | None = None) -> str:
    """Render `moment` as seconds since 2000-01-01 plus its scale name."""
    return moment.show(precision)


def minimum(first: Instant, *others: Instant) -> Instant:
    """Earliest of the given instants; ties keep the first one given."""
    earliest = first
    for other in others:
        if not earliest <= other:
            earliest = other
    return earliest


def maximum(first: Instant, *others: Instant) -> Instant:
    """Latest of the given instants; ties keep the first one given."""
    latest = first
    for other in others:
        if not latest >= other:
            latest = other
    return latest


def rawDuration(moment: Instant) -> Duration:
    """Reinterpret the stored timestamp as a TAI :class:`.Duration` with no conversion.

    This is only meaningful for scales counting seconds on the TAI basis.

    Raises:
        TimescaleMismatchError: if the instant's scale unit is not ``"TAI"``.
    """
    if moment.timescale.unit != TAI_UNIT:
        msg = (
            f"Cannot project a {moment.timescale.name!r} timestamp (unit {moment.timescale.unit!r}) "
            "to a TAI duration without conversion"
        )
        epochalLogError(msg)
        raise TimescaleMismatchError(msg)
    return moment.since.toDuration()
