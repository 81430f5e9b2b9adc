from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# EPOCHAL Imports
from epochal.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig
from epochal.time.instant import Instant
from epochal.time.scales import TS_GPS, TS_TAI, TS_TT, TS_UTC

# Local Imports
from . import UTC_235959, UTC_235960_5


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Automatically delete the config environment variable, if set.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        yield
        # Make sure the shared config holds the defaults after each test function
        BehavioralConfig()


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(params=[TS_TAI, TS_GPS, TS_TT, TS_UTC], ids=lambda scale: scale.name)
def builtin_scale(request: pytest.FixtureRequest):
    """Each built-in :class:`.Timescale` in turn."""
    return request.param


@pytest.fixture(name="leap_instant")
def getLeapInstant() -> Instant:
    """2016-12-31T23:59:60.5 UTC, half way through a leap second."""
    return Instant(UTC_235960_5, TS_UTC)


@pytest.fixture(name="before_leap")
def getBeforeLeapInstant() -> Instant:
    """2016-12-31T23:59:59 UTC, the second before a leap second."""
    return Instant(UTC_235959, TS_UTC)
