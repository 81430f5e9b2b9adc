"""High-precision, time-scale-aware instants.

:mod:`epochal` represents an instant as a timestamp tagged with the time scale it is
expressed in (TAI, UTC, GPS, TT or a user-defined scale). Comparisons, arithmetic,
rounding and Julian-day conversions are exact and correct across leap seconds.

.. code-block:: python

    from epochal.time.calendar import instantFromCalendar
    from epochal.time.julian import julianDate
    from epochal.time.scales import TS_GPS, TS_UTC

    leap = instantFromCalendar(2016, 12, 31, 23, 59, 60, timescale=TS_UTC)
    julianDate(leap, TS_UTC)
    leap.useTimescale(TS_GPS).show(3)
"""

from __future__ import annotations

__version__ = "1.0.0"
