"""ensured: argument validation and success/failure outcomes.

Public API:
    - checks: Boolean validation predicates
    - guards: Error producers (``when_*``) and raise wrappers (``raise_if_*``)
    - Outcome / ValuedOutcome: Success/failure containers with accumulated errors
    - success / failure / determine / add_or_raise: Outcome helpers
    - Settings / get_settings / override_settings / use_env_file: Library settings
"""

from __future__ import annotations

import logging

from ensured import checks, guards
from ensured.config import (
    Settings,
    get_settings,
    override_settings,
    reset_settings,
    use_env_file,
)
from ensured.errors import (
    ArgumentError,
    ConfigurationError,
    EnsuredError,
    NullArgumentError,
    OutcomeError,
    OutOfRangeError,
)
from ensured.outcome import Outcome, ValuedOutcome
from ensured.outcomes import add_or_raise, determine, failure, success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("ensured-outcomes")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("ensured").addHandler(logging.NullHandler())

__all__ = [
    "ArgumentError",
    "ConfigurationError",
    "EnsuredError",
    "NullArgumentError",
    "OutOfRangeError",
    "Outcome",
    "OutcomeError",
    "Settings",
    "ValuedOutcome",
    "add_or_raise",
    "checks",
    "determine",
    "failure",
    "get_settings",
    "guards",
    "override_settings",
    "reset_settings",
    "success",
    "use_env_file",
]
