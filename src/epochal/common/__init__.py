"""Shared plumbing for the :mod:`epochal` package: logging, configuration, and error types."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime


def pathSafeTime(dt: datetime | None = None) -> str:
    """Return a string form of `dt` usable inside a file name.

    Args:
        dt: wall-clock time to stamp; defaults to now.

    Returns:
        ISO-8601 text with ``:`` replaced by ``-`` and ``.`` removed.
    """
    if dt is None:
        dt = datetime.now()
    return dt.isoformat().replace(":", "-").replace(".", "")
