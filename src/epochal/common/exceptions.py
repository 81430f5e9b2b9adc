"""Contains all the custom-defined exceptions used in :mod:`epochal`."""

from __future__ import annotations


class EpochalError(Exception):
    """Base class for errors raised by checked time-scale boundaries."""


class InvalidTimescaleError(EpochalError):
    """A caller supplied something that is not a usable :class:`.Timescale`."""


class TimescaleMismatchError(EpochalError):
    """A timestamp was interpreted under a scale whose unit does not fit the operation."""


class DuplicateTimescaleError(EpochalError):
    """Two different :class:`.Timescale` objects were registered under the same name."""
