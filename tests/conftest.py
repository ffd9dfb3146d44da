"""Pytest configuration and fixtures.

Provides environment isolation, settings-cache resets and shared error
fixtures. All fixtures here are autouse unless noted.
"""

from __future__ import annotations

import logging
import os
import time

import pytest

from ensured.config import reset_settings
from ensured.errors import NullArgumentError, OutOfRangeError

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_settings_env(request, monkeypatch):
    """Clear ENSURED_* variables and cached settings around each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith("ENSURED_"):
                monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def fixed_local_timezone():
    """Pin the process-local timezone to a fixed UTC+03:00 (opt-in).

    Yields the UTC offset in hours.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")
    previous = os.environ.get("TZ")
    os.environ["TZ"] = "ABC-03"
    time.tzset()
    try:
        yield 3
    finally:
        if previous is None:
            os.environ.pop("TZ", None)
        else:
            os.environ["TZ"] = previous
        time.tzset()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def debug_library_logging():
    """Let caplog see the library's DEBUG records."""
    logging.getLogger("ensured").setLevel(logging.DEBUG)


# =============================================================================
# Shared Errors (opt-in)
# =============================================================================


@pytest.fixture
def null_error() -> NullArgumentError:
    """A null-argument error for parameter ``name``."""
    return NullArgumentError("name")


@pytest.fixture
def range_error() -> OutOfRangeError:
    """An out-of-range error for parameter ``age``."""
    return OutOfRangeError("age", "Value was out of range.", actual_value=-1)
