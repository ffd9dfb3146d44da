"""Validation predicates.

Pure boolean tests over a single value. These never raise for the value
being tested; the only exceptions are argument errors for unusable
parameters (a negative minimum length, a None pattern subject) and
``re.error`` for a malformed pattern.
"""

from __future__ import annotations

from datetime import UTC, datetime
from functools import lru_cache
import re

from ensured.config import get_settings
from ensured.errors import NullArgumentError, OutOfRangeError


def is_null(value: object) -> bool:
    """Return True if ``value`` is None."""
    return value is None


def is_null_or_empty(value: str | None) -> bool:
    """Return True if ``value`` is None or an empty string."""
    return value is None or value == ""


def is_null_or_whitespace(value: str | None) -> bool:
    """Return True if ``value`` is None, empty, or only whitespace."""
    return is_null_or_empty(value) or value.isspace()


def length_of(value: str | None) -> int:
    """Return the length of ``value``; the length of None is 0."""
    return 0 if value is None else len(value)


def has_correct_length(value: str | None, min_length: int, max_length: int) -> bool:
    """Return True if the length of ``value`` is within ``[min_length, max_length]``.

    A ``max_length`` below ``min_length`` is not rejected; the check simply
    never succeeds.

    Raises:
        OutOfRangeError: If ``min_length`` is negative.
    """
    if min_length < 0:
        raise OutOfRangeError(
            "min_length",
            "Minimum length must not be negative.",
            actual_value=min_length,
        )
    return min_length <= length_of(value) <= max_length


PATTERN_CACHE_SIZE = 256


@lru_cache(maxsize=PATTERN_CACHE_SIZE)
def _compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile regex pattern, keeping recently used patterns."""
    return re.compile(pattern)


def matches_pattern(value: str, pattern: str) -> bool:
    """Return True if ``pattern`` matches anywhere in ``value``.

    Anchor the pattern (``^...$``) to require a full match.

    Raises:
        NullArgumentError: If ``value`` is None.
        re.error: If ``pattern`` is not a valid regular expression.
    """
    if value is None:
        raise NullArgumentError("value")
    return _compile_pattern(pattern).search(value) is not None


def to_aware(value: datetime) -> datetime:
    """Return ``value`` with a timezone, without moving its wall-clock time.

    Aware datetimes are returned unchanged. Naive datetimes are read as local
    time or as UTC according to the ``naive_datetimes`` setting.
    """
    if value.utcoffset() is not None:
        return value
    if get_settings().naive_datetimes == "utc":
        return value.replace(tzinfo=UTC)
    try:
        return value.astimezone()
    except (OverflowError, OSError, ValueError):
        # The platform cannot resolve local time this close to the datetime
        # limits; use the current local offset.
        return value.replace(tzinfo=datetime.now().astimezone().tzinfo)


def is_in_range(value: datetime, min_value: datetime) -> bool:
    """Return True if ``value`` is at or after ``min_value`` as instants.

    Aware datetimes compare by instant, so no conversion to UTC is needed and
    values at the ``datetime.min``/``datetime.max`` limits do not overflow.
    """
    return to_aware(value) >= to_aware(min_value)
