"""Error producers: validation checks that describe what went wrong.

Each ``when_*`` function mirrors a predicate in :mod:`ensured.checks` and
returns ``None`` when the value is acceptable, or an unraised
:class:`~ensured.errors.ArgumentError` describing the violation. Callers then
choose to raise it (the matching ``raise_if_*`` function) or to record it on
an :class:`~ensured.outcome.Outcome`.

Producers compose by short-circuiting so the most specific root cause is
reported first: null, then empty, then whitespace.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ensured import checks
from ensured.errors import ArgumentError, NullArgumentError, OutOfRangeError

if TYPE_CHECKING:
    from datetime import datetime

log = logging.getLogger(__name__)

_OUT_OF_RANGE = "Value was out of range."


# --- Construction helpers ---


def argument_null(param_name: str) -> NullArgumentError:
    """Build the error for a required value that was None."""
    return NullArgumentError(param_name)


def argument_out_of_range(
    param_name: str,
    actual_value: object | None = None,
    message: str | None = None,
) -> OutOfRangeError:
    """Build the error for a value outside its allowed range."""
    return OutOfRangeError(param_name, message, actual_value=actual_value)


def raise_error(error: BaseException | None) -> None:
    """Raise ``error`` if it is not None."""
    if error is not None:
        log.debug("Raising %s: %s", type(error).__name__, error)
        raise error


def any_present(*errors: BaseException | None) -> bool:
    """Return True if at least one of ``errors`` is not None."""
    return any(e is not None for e in errors)


# --- Producers ---


def when_null(value: object, param_name: str) -> NullArgumentError | None:
    """Return an error if ``value`` is None."""
    return argument_null(param_name) if checks.is_null(value) else None


def when_null_or_empty(value: str | None, param_name: str) -> ArgumentError | None:
    """Return an error if ``value`` is None or empty."""
    error = when_null(value, param_name)
    if error is not None:
        return error
    if checks.is_null_or_empty(value):
        return argument_out_of_range(
            param_name, message=f"{_OUT_OF_RANGE} Must not be empty."
        )
    return None


def when_null_or_whitespace(
    value: str | None, param_name: str
) -> ArgumentError | None:
    """Return an error if ``value`` is None, empty, or only whitespace."""
    error = when_null_or_empty(value, param_name)
    if error is not None:
        return error
    if checks.is_null_or_whitespace(value):
        return argument_out_of_range(
            param_name, message=f"{_OUT_OF_RANGE} Must not be whitespace."
        )
    return None


def when_length_is_incorrect(
    value: str | None,
    min_length: int,
    max_length: int,
    param_name: str,
) -> OutOfRangeError | None:
    """Return an error if the length of ``value`` is outside the bounds.

    None counts as length 0, as in :func:`ensured.checks.has_correct_length`.

    Raises:
        OutOfRangeError: If ``min_length`` is negative.
    """
    if checks.has_correct_length(value, min_length, max_length):
        return None
    if min_length == 0:
        message = f"{_OUT_OF_RANGE} The length must be at most {max_length}."
    else:
        message = (
            f"{_OUT_OF_RANGE} The length must be between "
            f"{min_length} and {max_length}."
        )
    return argument_out_of_range(param_name, value, message)


def when_does_not_match_pattern(
    value: str | None, pattern: str, param_name: str
) -> ArgumentError | None:
    """Return an error if ``value`` is None or ``pattern`` does not match it."""
    error = when_null(value, param_name)
    if error is not None:
        return error
    if checks.matches_pattern(value, pattern):
        return None
    return argument_out_of_range(
        param_name, value, f"{_OUT_OF_RANGE} Must match the pattern {pattern}."
    )


def when_out_of_range(
    value: datetime, min_value: datetime, param_name: str
) -> OutOfRangeError | None:
    """Return an error if ``value`` is earlier than ``min_value``."""
    if checks.is_in_range(value, min_value):
        return None
    return argument_out_of_range(
        param_name,
        value,
        f"{_OUT_OF_RANGE} Must not be earlier than {min_value.isoformat()}.",
    )


# --- Raise wrappers ---


def raise_if_null(value: object, param_name: str) -> None:
    """Raise :class:`NullArgumentError` if ``value`` is None."""
    raise_error(when_null(value, param_name))


def raise_if_null_or_empty(value: str | None, param_name: str) -> None:
    """Raise if ``value`` is None or empty."""
    raise_error(when_null_or_empty(value, param_name))


def raise_if_null_or_whitespace(value: str | None, param_name: str) -> None:
    """Raise if ``value`` is None, empty, or only whitespace."""
    raise_error(when_null_or_whitespace(value, param_name))


def raise_if_length_is_incorrect(
    value: str | None, min_length: int, max_length: int, param_name: str
) -> None:
    """Raise :class:`OutOfRangeError` if the length of ``value`` is out of bounds."""
    raise_error(when_length_is_incorrect(value, min_length, max_length, param_name))


def raise_if_does_not_match_pattern(
    value: str | None, pattern: str, param_name: str
) -> None:
    """Raise if ``value`` is None or does not match ``pattern``."""
    raise_error(when_does_not_match_pattern(value, pattern, param_name))


def raise_if_out_of_range(
    value: datetime, min_value: datetime, param_name: str
) -> None:
    """Raise :class:`OutOfRangeError` if ``value`` is earlier than ``min_value``."""
    raise_error(when_out_of_range(value, min_value, param_name))
