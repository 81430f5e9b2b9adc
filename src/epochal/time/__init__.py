"""Time-scale-aware instants and the conversions between time scales.

The building blocks, leaves first:

* :mod:`.scalar`: exact rational arithmetic for every time quantity.
* :mod:`.stardate`: :class:`.Duration` (TAI seconds) and :class:`.Timestamp` (days + seconds into day).
* :mod:`.timescale`: the :class:`.Timescale` descriptor and the conversion engine.
* :mod:`.instant`: the :class:`.Instant` value and its comparison, arithmetic and rounding.
* :mod:`.julian`: Julian / Modified Julian day numbers.
* :mod:`.leap_seconds`, :mod:`.scales`: UTC and the built-in TAI, GPS and TT scales.
* :mod:`.calendar`: civil calendar dates.

Keeping :class:`.Duration` and :class:`.Timestamp` as separate types, like keeping an
:class:`.Instant` distinct from its raw timestamp, makes it hard to mix up values that
are similar in magnitude but measured on different scales.
"""
