"""Defines the :class:`.Timescale` descriptor and the conversion engine between scales.

A timescale is a named rule mapping a TAI :class:`.Duration` to a scale-native
:class:`.Timestamp` and back. Scales with irregular day lengths (leap-second
scales) supply extra hooks; every other scale gets uniform 86400-second days.

All conversions route through TAI:

.. code-block:: python

    stamp_gps = convert(stamp_tt, TS_TT, TS_GPS)
    # same as
    stamp_gps = TS_GPS.fromTAI(TS_TT.toTAI(stamp_tt))

Note:
    Scale identity is the name. Building two scales with the same name but different
    behavior is a caller error that conversions cannot detect; a :class:`.TimescaleRegistry`
    rejects such clashes at registration time.
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ..common.exceptions import DuplicateTimescaleError, InvalidTimescaleError
from ..common.logger import epochalLogDebug, epochalLogError
from .scalar import floorDivMod, toScalar
from .stardate import DAY_SECONDS, Duration, Timestamp

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable, Iterator

    # Local Imports
    from .scalar import Scalar, ScalarLike


TAI_UNIT: str = "TAI"
"""``str``: unit label of scales that count uniform SI seconds offset from TAI."""

UTC_UNIT: str = "UTC"
"""``str``: unit label shared by UTC-family scales, which differ only in their leap-second table."""


class Timescale:
    """Immutable description of a time scale.

    Attributes:
        name (``str``): identity and display name; equality and hashing use only this.
        unit (``str``): basis label used for conversion fast paths.
    """

    __slots__ = ("name", "unit", "_from_tai", "_to_tai", "_seconds_in_day", "_to_mjd2000", "_from_mjd2000")

    def __init__(
        self,
        name: str,
        from_tai: Callable[[Duration], Timestamp],
        to_tai: Callable[[Timestamp], Duration],
        unit: str | None = None,
        seconds_in_day: Callable[[Timestamp], Scalar] | None = None,
        to_mjd2000: Callable[[Timestamp, Scalar], Scalar] | None = None,
        from_mjd2000: Callable[[Scalar], Timestamp] | None = None,
    ):
        """Bundle the conversion functions of a scale.

        Args:
            name (``str``): scale name.
            from_tai (``callable``): maps a TAI :class:`.Duration` to a scale-native :class:`.Timestamp`.
            to_tai (``callable``): exact inverse of `from_tai`.
            unit (``str``, optional): basis label. Defaults to `name`.
            seconds_in_day (``callable``, optional): length of the day containing a timestamp.
            to_mjd2000 (``callable``, optional): ``(timestamp, tz_delta) -> days since 2000-01-01``.
            from_mjd2000 (``callable``, optional): ``days since 2000-01-01 -> timestamp``.
        """
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "unit", name if unit is None else unit)
        object.__setattr__(self, "_from_tai", from_tai)
        object.__setattr__(self, "_to_tai", to_tai)
        object.__setattr__(self, "_seconds_in_day", seconds_in_day)
        object.__setattr__(self, "_to_mjd2000", to_mjd2000)
        object.__setattr__(self, "_from_mjd2000", from_mjd2000)

    def __setattr__(self, name, value):
        """Timescales are immutable."""
        raise AttributeError(f"Timescale is immutable, cannot set {name!r}")

    def fromTAI(self, duration: Duration) -> Timestamp:
        """Express a TAI duration as a timestamp of this scale."""
        return self._from_tai(duration)

    def toTAI(self, timestamp: Timestamp) -> Duration:
        """Project a timestamp of this scale onto the TAI timeline."""
        return self._to_tai(timestamp)

    @property
    def has_leap_seconds(self) -> bool:
        """Whether days of this scale can differ from 86400 seconds."""
        return self._seconds_in_day is not None

    @property
    def has_mjd2000_hooks(self) -> tuple[bool, bool]:
        """Presence of the ``(to_mjd2000, from_mjd2000)`` hooks."""
        return (self._to_mjd2000 is not None, self._from_mjd2000 is not None)

    def daySeconds(self, timestamp: Timestamp) -> Scalar:
        """Length in SI seconds of the day containing `timestamp`."""
        if self._seconds_in_day is None:
            return DAY_SECONDS
        return toScalar(self._seconds_in_day(timestamp))

    def mjd2000(self, timestamp: Timestamp, tz_delta: Duration | ScalarLike = 0) -> Scalar:
        """Fractional days since 2000-01-01 for a timestamp of this scale.

        Args:
            timestamp (:class:`.Timestamp`): timestamp expressed in this scale.
            tz_delta (:class:`.Duration`, optional): scale-native shift applied first, e.g. a
                fixed zone offset.

        Returns:
            ``Scalar``: whole days plus the elapsed fraction of the current day.
        """
        if self._to_mjd2000 is not None:
            return toScalar(self._to_mjd2000(timestamp, _seconds(tz_delta)))

        shifted = timestamp.addSeconds(_seconds(tz_delta))
        return shifted.days + shifted.seconds / DAY_SECONDS

    def timestampAtMJD2000(self, mjd2000: ScalarLike) -> Timestamp:
        """Timestamp of this scale at `mjd2000` fractional days since 2000-01-01."""
        mjd2000 = toScalar(mjd2000)
        if self._from_mjd2000 is not None:
            return self._from_mjd2000(mjd2000)

        days, fraction = floorDivMod(mjd2000, 1)
        return Timestamp(days, fraction * DAY_SECONDS)

    def __eq__(self, other):
        """Scales are equal when their names are equal."""
        if not isinstance(other, Timescale):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        """."""
        return hash(("Timescale", self.name))

    def __repr__(self):
        """Return a string representation of this :class:`.Timescale`."""
        return f"Timescale({self.name!r}, unit={self.unit!r})"

    def __str__(self):
        """."""
        return self.name


def _seconds(span: Duration | ScalarLike) -> Scalar:
    if isinstance(span, Duration):
        return span.seconds
    return toScalar(span)


def timescale(
    name: str,
    from_tai: Callable[[Duration], Timestamp],
    to_tai: Callable[[Timestamp], Duration],
    unit: str | None = None,
    seconds_in_day: Callable[[Timestamp], Scalar] | None = None,
    to_mjd2000: Callable[[Timestamp, Scalar], Scalar] | None = None,
    from_mjd2000: Callable[[Scalar], Timestamp] | None = None,
) -> Timescale:
    """Build a :class:`.Timescale` from its conversion functions.

    Note:
        `from_tai` and `to_tai` must be exact inverses. This is not checked.
    """
    return Timescale(
        name,
        from_tai,
        to_tai,
        unit=unit,
        seconds_in_day=seconds_in_day,
        to_mjd2000=to_mjd2000,
        from_mjd2000=from_mjd2000,
    )


def taiTimescale(name: str, offset: Duration | ScalarLike = 0) -> Timescale:
    """Build a scale that runs at TAI rate, shifted by a fixed `offset`.

    Args:
        name (``str``): scale name.
        offset (:class:`.Duration`): seconds added to TAI to get this scale, e.g. ``-19`` for GPS.

    Returns:
        :class:`.Timescale`: uniform-day scale with unit ``"TAI"`` and no hooks.
    """
    offset = Duration(offset)

    def shiftFromTAI(duration: Duration) -> Timestamp:
        return (duration + offset).toTimestamp()

    def shiftToTAI(timestamp: Timestamp) -> Duration:
        return timestamp.toDuration() - offset

    return Timescale(name, shiftFromTAI, shiftToTAI, unit=TAI_UNIT)


def hasLeapSeconds(scale: Timescale) -> bool:
    """Return whether `scale` supplies a day-length hook."""
    return scale.has_leap_seconds


def checkTimescale(scale) -> Timescale:
    """Return `scale` unchanged if it is a :class:`.Timescale`.

    Raises:
        InvalidTimescaleError: if `scale` is anything else.
    """
    if not isinstance(scale, Timescale):
        msg = f"Expected a Timescale, got {type(scale).__name__}: {scale!r}"
        epochalLogError(msg)
        raise InvalidTimescaleError(msg)
    return scale


def convert(timestamp: Timestamp, source: Timescale, target: Timescale) -> Timestamp:
    """Re-express `timestamp` from the `source` scale in the `target` scale.

    Same-named scales return `timestamp` unchanged, as do two scales of the UTC family, whose
    raw encodings are identical. Everything else goes through TAI.
    """
    if source.name == target.name:
        return timestamp
    if source.unit == UTC_UNIT and target.unit == UTC_UNIT:
        return timestamp
    return target.fromTAI(source.toTAI(timestamp))


def toTAI(scale: Timescale, timestamp: Timestamp) -> Duration:
    """Project a timestamp of `scale` onto the TAI timeline."""
    return scale.toTAI(timestamp)


def fromTAI(scale: Timescale, duration: Duration) -> Timestamp:
    """Express a TAI duration as a timestamp of `scale`."""
    return scale.fromTAI(duration)


class TimescaleRegistry:
    """Lookup of timescales by name that refuses conflicting registrations."""

    def __init__(self, scales: tuple[Timescale, ...] = ()):
        """Create a registry, optionally pre-populated with `scales`."""
        self._scales: dict[str, Timescale] = {}
        for scale in scales:
            self.register(scale)

    def register(self, scale: Timescale) -> Timescale:
        """Add `scale` under its name.

        Registering the same object twice is a no-op.

        Raises:
            InvalidTimescaleError: if `scale` is not a :class:`.Timescale`.
            DuplicateTimescaleError: if a different scale already uses the name.
        """
        checkTimescale(scale)
        existing = self._scales.get(scale.name)
        if existing is scale:
            return scale
        if existing is not None:
            msg = f"A different timescale is already registered as {scale.name!r}"
            epochalLogError(msg)
            raise DuplicateTimescaleError(msg)

        self._scales[scale.name] = scale
        epochalLogDebug(f"Registered timescale {scale!r}")
        return scale

    def get(self, name: str) -> Timescale:
        """Return the scale registered as `name`.

        Raises:
            InvalidTimescaleError: if nothing is registered under `name`.
        """
        try:
            return self._scales[name]
        except KeyError as err:
            msg = f"Unknown timescale {name!r}, known: {', '.join(self.names())}"
            epochalLogError(msg)
            raise InvalidTimescaleError(msg) from err

    def names(self) -> tuple[str, ...]:
        """Names of all registered scales, in registration order."""
        return tuple(self._scales)

    def __contains__(self, item) -> bool:
        """Look up by name or by :class:`.Timescale`."""
        if isinstance(item, Timescale):
            return self._scales.get(item.name) is item
        return item in self._scales

    def __iter__(self) -> Iterator[Timescale]:
        """."""
        return iter(self._scales.values())

    def __len__(self) -> int:
        """."""
        return len(self._scales)
