"""Convert between :class:`.Instant` values and Julian / Modified Julian day numbers.

Day numbers are read in a chosen timescale. For leap-second scales the fraction of
a day is measured against the real length of that day, so the last second of
2016-12-31 UTC spans 1/86401 of a day:

.. code-block:: python

    float(julianDate(instantFromCalendar(2016, 12, 31, 23, 59, 59), TS_UTC))  # 2457754.499976852
    float(julianDate(instantFromCalendar(2016, 12, 31, 23, 59, 60), TS_UTC))  # 2457754.499988426
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import asarray, float64

# Local Imports
from .instant import Instant
from .scalar import Scalar, toScalar

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable

    # Third Party Imports
    from numpy import ndarray

    # Local Imports
    from .scalar import ScalarLike
    from .stardate import Duration
    from .timescale import Timescale


JD_EPOCH_DELTA: Scalar = Scalar(4800001, 2)
"""``Scalar``: Julian Date of the Modified Julian Date epoch, 2400000.5 days."""

MJD_EPOCH_DELTA: Scalar = Scalar(51544)
"""``Scalar``: Modified Julian Date of 2000-01-01T00:00:00."""


def instantAtMJD(mjd: ScalarLike, timescale: Timescale) -> Instant:
    """Return the instant at Modified Julian Date `mjd`, read in `timescale`."""
    mjd2000 = toScalar(mjd) - MJD_EPOCH_DELTA
    return Instant(timescale.timestampAtMJD2000(mjd2000), timescale)


def instantAtJD(jd: ScalarLike, timescale: Timescale) -> Instant:
    """Return the instant at Julian Date `jd`, read in `timescale`."""
    return instantAtMJD(toScalar(jd) - JD_EPOCH_DELTA, timescale)


def modifiedJulianDate(moment: Instant, timescale: Timescale, tz_delta: Duration | ScalarLike = 0) -> Scalar:
    """Modified Julian Date of `moment` in `timescale`.

    Args:
        moment (:class:`.Instant`): instant to convert.
        timescale (:class:`.Timescale`): scale the day count is read in.
        tz_delta (:class:`.Duration`, optional): scale-native offset added before splitting into
            days, e.g. a fixed time-zone offset. Defaults to 0.

    Returns:
        ``Scalar``: exact fractional MJD.
    """
    stamp = moment.useTimescale(timescale).since
    return timescale.mjd2000(stamp, tz_delta) + MJD_EPOCH_DELTA


def julianDate(moment: Instant, timescale: Timescale) -> Scalar:
    """Julian Date of `moment` in `timescale`."""
    return modifiedJulianDate(moment, timescale) + JD_EPOCH_DELTA


def julianDateArray(moments: Iterable[Instant], timescale: Timescale) -> ndarray:
    """Julian Dates of several instants as a ``float64`` array, for plotting or fitting."""
    return asarray([float(julianDate(moment, timescale)) for moment in moments], dtype=float64)


def elapsedSecondsArray(moments: Iterable[Instant], reference: Instant) -> ndarray:
    """SI seconds from `reference` to each instant, as a ``float64`` array."""
    origin = reference.duration
    return asarray([float(moment.duration - origin) for moment in moments], dtype=float64)
