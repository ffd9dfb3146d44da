"""Outcome types: success/failure containers that accumulate errors.

Success or failure is fixed when an outcome is constructed. Afterwards the
only mutation is appending errors through ``with_error``, which returns the
same instance for chaining and never flips the flag; appending errors to a
success leaves it a success.

Outcomes do not coerce implicitly. Use ``is_success()`` instead of truthiness,
and ``unwrap()`` / ``unwrap_or_default()`` to read a payload.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from ensured.config import get_settings
from ensured.errors import ArgumentError, OutcomeError

if TYPE_CHECKING:
    from collections.abc import Iterable

log = logging.getLogger(__name__)

type ErrorLike = BaseException | str


def _as_error(error: ErrorLike) -> BaseException:
    return OutcomeError(error) if isinstance(error, str) else error


class _OutcomeBase:
    """Success flag plus an ordered, append-only list of errors."""

    __slots__ = ("_errors", "_success")

    def __init__(self, success: bool, errors: Iterable[ErrorLike | None] = ()) -> None:
        self._success = success
        self._errors: list[BaseException] = []
        self._add_errors(errors)

    def _add_errors(self, errors: Iterable[ErrorLike | None]) -> None:
        self._errors.extend(_as_error(e) for e in errors if e is not None)

    def _require_errors(self) -> Self:
        if not self._errors and get_settings().require_failure_errors:
            raise ArgumentError(
                "errors", "A failed outcome requires at least one error."
            )
        return self

    @property
    def success(self) -> bool:
        """Whether the operation succeeded. Fixed at construction."""
        return self._success

    @property
    def errors(self) -> tuple[BaseException, ...]:
        """Recorded errors in insertion order."""
        return tuple(self._errors)

    def is_success(self) -> bool:
        return self._success

    def is_failure(self) -> bool:
        return not self._success

    def to_bool(self) -> bool:
        """Return the success flag."""
        return self._success

    def __bool__(self) -> bool:
        raise TypeError(
            f"The truth value of {type(self).__name__} is ambiguous; "
            "use is_success() or is_failure()."
        )

    def first_error(self) -> BaseException | None:
        """Return the first recorded error, or None when there is none."""
        return self._errors[0] if self._errors else None

    def with_error(self, *errors: ErrorLike | None) -> Self:
        """Append errors and return this outcome.

        Strings are wrapped in :class:`~ensured.errors.OutcomeError`; None
        entries are skipped. The success flag is not changed.
        """
        self._add_errors(errors)
        return self

    def raise_for_failure(self) -> None:
        """Raise the first recorded error if this outcome is a failure."""
        if self._success:
            return
        error = self.first_error()
        if error is None:
            error = OutcomeError("Outcome failed without errors.")
        log.debug("Raising for failed outcome: %s", error)
        raise error

    def _describe(self) -> str:
        state = "success" if self._success else "failure"
        return f"{state}, errors={self._errors!r}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._describe()})"


class Outcome(_OutcomeBase):
    """Result of an operation that produces no value."""

    __slots__ = ()

    @classmethod
    def succeed(cls) -> Outcome:
        """Create a successful outcome with no errors."""
        return cls(True)

    @classmethod
    def fail(cls, *errors: ErrorLike | None) -> Outcome:
        """Create a failed outcome seeded with ``errors``.

        Raises:
            ArgumentError: If no errors are given and the
                ``require_failure_errors`` setting is on.
        """
        return cls(False, errors)._require_errors()

    @classmethod
    def determine(cls, error: BaseException | None) -> Outcome:
        """Succeed when ``error`` is None, otherwise fail with exactly that error."""
        if error is None:
            return cls.succeed()
        return cls.fail(error)


class ValuedOutcome[T](_OutcomeBase):
    """Result of an operation that produces a value of type ``T``.

    ``value`` is only meaningful on success; on failure it is None.
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        success: bool,
        value: T | None = None,
        errors: Iterable[ErrorLike | None] = (),
    ) -> None:
        super().__init__(success, errors)
        self._value = value if success else None

    @classmethod
    def succeed(cls, value: T | None = None) -> ValuedOutcome[T]:
        """Create a successful outcome carrying ``value``."""
        return cls(True, value)

    @classmethod
    def fail(cls, *errors: ErrorLike | None) -> ValuedOutcome[T]:
        """Create a failed outcome seeded with ``errors``.

        Raises:
            ArgumentError: If no errors are given and the
                ``require_failure_errors`` setting is on.
        """
        return cls(False, None, errors)._require_errors()

    @classmethod
    def determine(cls, error: BaseException | None) -> ValuedOutcome[T]:
        """Succeed without a value when ``error`` is None, otherwise fail."""
        if error is None:
            return cls.succeed()
        return cls.fail(error)

    @property
    def value(self) -> T | None:
        """The payload on success, None on failure."""
        return self._value

    def unwrap(self) -> T | None:
        """Return the payload, raising the first recorded error on failure."""
        self.raise_for_failure()
        return self._value

    def unwrap_or_default(self, default: T | None = None) -> T | None:
        """Return the payload on success, otherwise ``default``."""
        return self._value if self._success else default

    def _describe(self) -> str:
        if self._success:
            return f"success, value={self._value!r}, errors={self._errors!r}"
        return super()._describe()
