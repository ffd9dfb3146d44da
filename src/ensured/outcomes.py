"""Factory functions for outcomes and the fail-fast collection helper."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, overload

from ensured.guards import raise_if_null
from ensured.outcome import Outcome, ValuedOutcome

if TYPE_CHECKING:
    from collections.abc import MutableSequence

    from ensured.outcome import ErrorLike

log = logging.getLogger(__name__)

_UNSET: Any = object()


@overload
def success() -> Outcome: ...


@overload
def success[T](value: T) -> ValuedOutcome[T]: ...


def success(value: Any = _UNSET) -> Outcome | ValuedOutcome[Any]:
    """Create a successful outcome.

    Without arguments this is an :class:`Outcome`; with a value it is a
    :class:`ValuedOutcome` carrying that value (None included).
    """
    if value is _UNSET:
        return Outcome.succeed()
    return ValuedOutcome.succeed(value)


def failure(*errors: ErrorLike | None) -> Outcome:
    """Create a failed :class:`Outcome` seeded with ``errors``.

    Use ``ValuedOutcome.fail`` when the caller expects a value.
    """
    return Outcome.fail(*errors)


def determine(error: BaseException | None) -> Outcome:
    """Succeed when ``error`` is None, otherwise fail with exactly that error."""
    return Outcome.determine(error)


def add_or_raise[T](collection: MutableSequence[T], outcome: ValuedOutcome[T]) -> None:
    """Append the outcome's value to ``collection``, or raise its first error.

    On failure the collection is left untouched.

    Raises:
        NullArgumentError: If ``collection`` is None.
    """
    raise_if_null(collection, "collection")
    if outcome.is_success():
        collection.append(outcome.value)  # type: ignore[arg-type]
        return
    log.debug("Refusing to collect failed outcome: %r", outcome)
    outcome.raise_for_failure()
