"""Defines the :class:`.Duration` & :class:`.Timestamp` value types.

Both types hold exact :data:`.Scalar` values measured from the library epoch,
2000-01-01, but they mean different things:

* a :class:`.Duration` is a count of SI seconds on the TAI timeline and is the
  scale-independent representation of an instant, or a physical span;
* a :class:`.Timestamp` is a ``(days, seconds into day)`` pair whose meaning
  depends on the :class:`.Timescale` that interprets it.

Mixing them in arithmetic raises a ``TypeError`` so a raw scale-native
timestamp is never silently treated as a physical duration.

.. code-block:: python

    span = Duration(90)
    stamp = Timestamp.fromSeconds(86400 + 90)

    stamp.addSeconds(span)  # works, scale-native addition
    span + stamp            # throws exception
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from .scalar import Scalar, floorDivMod, formatScalar, roundScalar, toScalar

# Type Checking Imports
if TYPE_CHECKING:
    # Local Imports
    from .scalar import ScalarLike


DAY_SECONDS: Scalar = Scalar(86400)
"""``Scalar``: length of a nominal day in SI seconds."""

_MIXING_MESSAGE = "Cannot perform operations between Duration/Timestamp objects, use conversion methods."


class Duration:
    """SI seconds elapsed since 2000-01-01 on the TAI timeline, or a span of SI seconds."""

    __slots__ = ("seconds",)

    def __init__(self, seconds: ScalarLike = 0):
        """Create a duration of `seconds` SI seconds."""
        if isinstance(seconds, Timestamp):
            raise TypeError(f"Duration: {_MIXING_MESSAGE}")
        if isinstance(seconds, Duration):
            seconds = seconds.seconds
        object.__setattr__(self, "seconds", toScalar(seconds))

    def __setattr__(self, name, value):
        """Durations are immutable."""
        raise AttributeError(f"Duration is immutable, cannot set {name!r}")

    @staticmethod
    def _coerce(other) -> Scalar | None:
        """Seconds held by `other`, or ``None`` if it is not a span or a plain number."""
        if isinstance(other, Timestamp):
            raise TypeError(f"Duration: {_MIXING_MESSAGE}")
        if isinstance(other, Duration):
            return other.seconds
        # Numeric text is only accepted by the constructor
        if isinstance(other, str):
            return None
        try:
            return toScalar(other)
        except TypeError:
            return None

    def __add__(self, other):
        """Sum of two spans."""
        if (seconds := self._coerce(other)) is None:
            return NotImplemented
        return Duration(self.seconds + seconds)

    def __radd__(self, other):
        """."""
        if (seconds := self._coerce(other)) is None:
            return NotImplemented
        return Duration(seconds + self.seconds)

    def __sub__(self, other):
        """Difference of two spans."""
        if (seconds := self._coerce(other)) is None:
            return NotImplemented
        return Duration(self.seconds - seconds)

    def __rsub__(self, other):
        """."""
        if (seconds := self._coerce(other)) is None:
            return NotImplemented
        return Duration(seconds - self.seconds)

    def __neg__(self):
        """."""
        return Duration(-self.seconds)

    def __abs__(self):
        """."""
        return Duration(abs(self.seconds))

    def __mul__(self, factor):
        """Scale this span by a unit-less factor."""
        if isinstance(factor, Duration) or (scale := self._coerce(factor)) is None:
            return NotImplemented
        return Duration(self.seconds * scale)

    __rmul__ = __mul__

    def __truediv__(self, other):
        """Divide by a factor, or by another duration to get a unit-less ratio."""
        if isinstance(other, Duration):
            return self.seconds / other.seconds
        if (divisor := self._coerce(other)) is None:
            return NotImplemented
        return Duration(self.seconds / divisor)

    def __eq__(self, other):
        """."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.seconds == other.seconds

    def __lt__(self, other):
        """."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.seconds < other.seconds

    def __le__(self, other):
        """."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.seconds <= other.seconds

    def __gt__(self, other):
        """."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.seconds > other.seconds

    def __ge__(self, other):
        """."""
        if not isinstance(other, Duration):
            return NotImplemented
        return self.seconds >= other.seconds

    def __hash__(self):
        """."""
        return hash(("Duration", self.seconds))

    def __float__(self):
        """Nearest double-precision value, in seconds."""
        return float(self.seconds)

    def __bool__(self):
        """."""
        return self.seconds != 0

    def toTimestamp(self) -> Timestamp:
        """Reinterpret these seconds as a uniform-day :class:`.Timestamp`."""
        return Timestamp.fromSeconds(self.seconds)

    def __repr__(self):
        """Return a string representation of this :class:`.Duration`."""
        return f"Duration({formatScalar(self.seconds, 9)} seconds)"

    def __str__(self):
        """."""
        return self.__repr__()


class Timestamp:
    """A count of days since 2000-01-01 plus the seconds elapsed into that day.

    The seconds into the day are in ``[0, 86400)`` for every uniform-day timescale. Only
    leap-second timescales store values at or beyond 86400, which label the leap second
    itself (``23:59:60.x``).
    """

    __slots__ = ("days", "seconds")

    def __init__(self, days: int = 0, seconds: ScalarLike = 0):
        """Create a timestamp from a day count and the seconds into that day.

        Args:
            days (``int``): whole days since 2000-01-01.
            seconds (:data:`.ScalarLike`): seconds elapsed into day `days`.
        """
        if isinstance(days, (Duration, Timestamp)) or isinstance(seconds, (Duration, Timestamp)):
            raise TypeError(f"Timestamp: {_MIXING_MESSAGE}")
        if int(days) != days:
            raise ValueError(f"Timestamp: day count must be integral, got {days!r}")
        object.__setattr__(self, "days", int(days))
        object.__setattr__(self, "seconds", toScalar(seconds))

    def __setattr__(self, name, value):
        """Timestamps are immutable."""
        raise AttributeError(f"Timestamp is immutable, cannot set {name!r}")

    @classmethod
    def fromSeconds(cls, total: ScalarLike) -> Timestamp:
        """Split `total` seconds since 2000-01-01 into whole 86400-second days and a remainder."""
        days, seconds = floorDivMod(toScalar(total), DAY_SECONDS)
        return cls(days, seconds)

    def totalSeconds(self) -> Scalar:
        """Seconds since 2000-01-01 counting every day as 86400 seconds."""
        return self.days * DAY_SECONDS + self.seconds

    def toDuration(self) -> Duration:
        """Reinterpret this timestamp as a :class:`.Duration`, with no scale conversion."""
        return Duration(self.totalSeconds())

    def addDays(self, days: int) -> Timestamp:
        """Shift the day count, leaving the seconds into day untouched."""
        return Timestamp(self.days + days, self.seconds)

    def addSeconds(self, span: Duration | ScalarLike) -> Timestamp:
        """Add `span` seconds using uniform 86400-second days."""
        if isinstance(span, Timestamp):
            raise TypeError(f"Timestamp: {_MIXING_MESSAGE}")
        if isinstance(span, Duration):
            span = span.seconds
        return Timestamp.fromSeconds(self.totalSeconds() + toScalar(span))

    def round(self, precision: int) -> Timestamp:
        """Round the seconds into day to `precision` digits, carrying into the next day.

        Args:
            precision (``int``): number of fractional digits to keep.

        Returns:
            :class:`.Timestamp`: rounded timestamp. A leap-second value (at or past 86400) is
            rounded in place and never carried.
        """
        rounded = roundScalar(self.seconds, precision)
        if self.seconds < DAY_SECONDS <= rounded:
            return Timestamp(self.days + 1, rounded - DAY_SECONDS)
        return Timestamp(self.days, rounded)

    def _key(self) -> tuple[int, Scalar]:
        return (self.days, self.seconds)

    def _check(self, other) -> bool:
        if isinstance(other, Duration):
            raise TypeError(f"Timestamp: {_MIXING_MESSAGE}")
        return isinstance(other, Timestamp)

    def __eq__(self, other):
        """."""
        if not self._check(other):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        """."""
        if not self._check(other):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other):
        """."""
        if not self._check(other):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other):
        """."""
        if not self._check(other):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other):
        """."""
        if not self._check(other):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self):
        """."""
        return hash(("Timestamp", self.days, self.seconds))

    def render(self, precision: int) -> str:
        """Total seconds since 2000-01-01, in fixed point with `precision` digits."""
        return formatScalar(self.totalSeconds(), precision)

    def __repr__(self):
        """Return a string representation of this :class:`.Timestamp`."""
        return f"Timestamp(days={self.days}, seconds={formatScalar(self.seconds, 9)})"

    def __str__(self):
        """."""
        return self.__repr__()


Duration.ZERO = Duration(0)
