"""Exception hierarchy for ensured.

Exceptions double as error values: producers in :mod:`ensured.guards` return
them instead of raising, and :class:`~ensured.outcome.Outcome` accumulates them.
"""

from __future__ import annotations

from typing import ClassVar


class EnsuredError(Exception):
    """Base exception for all ensured errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        """Return the message, followed by the hint when one is set."""
        msg = super().__str__()
        return f"{msg} {self.hint}" if self.hint else msg


class ConfigurationError(EnsuredError):
    """Library settings could not be resolved."""


class OutcomeError(EnsuredError):
    """Free-form domain error recorded on an outcome.

    Strings passed to ``Outcome.with_error`` are wrapped in this type.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.__cause__ = cause


class ArgumentError(EnsuredError, ValueError):
    """An argument failed validation.

    Carries the parameter name and, where one exists, the offending value so
    the call site can be diagnosed from the message alone.
    """

    kind: ClassVar[str] = "invalid_argument"
    default_message: ClassVar[str] = "Value does not fall within the expected range."

    def __init__(
        self,
        param_name: str | None,
        message: str | None = None,
        *,
        actual_value: object | None = None,
        hint: str | None = None,
    ) -> None:
        self.param_name = param_name
        self.actual_value = actual_value
        self.reason = message or self.default_message
        super().__init__(self._format(), hint=hint)

    def _format(self) -> str:
        parts = [self.reason]
        if self.param_name:
            parts.append(f"(Parameter '{self.param_name}')")
        if self.actual_value is not None:
            parts.append(f"Actual value was {self.actual_value!r}.")
        return " ".join(parts)


class NullArgumentError(ArgumentError):
    """A required value was None."""

    kind: ClassVar[str] = "null_argument"
    default_message: ClassVar[str] = "Value cannot be null."


class OutOfRangeError(ArgumentError):
    """A value was outside an allowed length, pattern, or bound."""

    kind: ClassVar[str] = "out_of_range"
    default_message: ClassVar[str] = (
        "Specified argument was out of the range of valid values."
    )
