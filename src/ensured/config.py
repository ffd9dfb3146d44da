"""Library settings: a frozen Pydantic schema resolved from the environment.

Settings resolve once per process from ``ENSURED_*`` environment variables and
can be overridden for the current context with :func:`override_settings`.
A ``.env`` file is read only when named through :func:`use_env_file`; its
values are never copied into ``os.environ``.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from functools import cache
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ensured.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

log = logging.getLogger(__name__)

ENV_PREFIX = "ENSURED_"

_HINTS = {
    "naive_datetimes": "Set ENSURED_NAIVE_DATETIMES to 'local' or 'utc'.",
    "require_failure_errors": (
        "Set ENSURED_REQUIRE_FAILURE_ERRORS to a boolean such as 'true' or 'false'."
    ),
}


class Settings(BaseModel):
    """Behavioural switches for the validation and outcome helpers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    #: How naive datetimes are placed on the UTC timeline before comparison.
    naive_datetimes: Literal["local", "utc"] = "local"
    #: Reject ``failure()`` calls that carry no errors.
    require_failure_errors: bool = True

    @field_validator("naive_datetimes", mode="before")
    @classmethod
    def normalize_naive_datetimes(cls, v: Any) -> Any:
        """Accept any casing and surrounding whitespace."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


_OVERRIDE: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "ensured_settings", default=None
)

_ENV_FILE: Path | None = None


def _pick(source: Mapping[str, str | None]) -> dict[str, str]:
    values: dict[str, str] = {}
    for name in Settings.model_fields:
        raw = source.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None and raw.strip():
            values[name] = raw
    return values


def _validate(values: dict[str, Any]) -> Settings:
    try:
        return Settings.model_validate(values)
    except ValidationError as e:
        err = e.errors()[0]
        field = str(err["loc"][0]) if err.get("loc") else ""
        raise ConfigurationError(
            f"Invalid setting {field!r}: {err.get('msg')}",
            hint=_HINTS.get(field),
        ) from e


@cache
def _resolve() -> Settings:
    # Environment variables win over the env file.
    values = _pick(dotenv_values(_ENV_FILE)) if _ENV_FILE is not None else {}
    values.update(_pick(os.environ))
    settings = _validate(values)
    log.debug("Resolved settings: %s (env file: %s)", settings, _ENV_FILE)
    return settings


def get_settings() -> Settings:
    """Return the active settings.

    A context-local override wins over the process-wide environment settings.

    Raises:
        ConfigurationError: If an ``ENSURED_*`` value is invalid.
    """
    override = _OVERRIDE.get()
    if override is not None:
        return override
    return _resolve()


def use_env_file(path: str | os.PathLike[str]) -> Settings:
    """Also read ``ENSURED_*`` settings from the dotenv file at ``path``.

    Variables already set in the environment take precedence. The file's
    contents are not exported to ``os.environ``.

    Raises:
        ConfigurationError: If ``path`` is not a file or holds invalid values.
    """
    global _ENV_FILE
    env_file = Path(path)
    if not env_file.is_file():
        raise ConfigurationError(
            f"Settings file not found: {env_file}",
            hint="Pass the path of an existing .env file.",
        )
    _ENV_FILE = env_file
    _resolve.cache_clear()
    return get_settings()


def reset_settings() -> None:
    """Forget the env file and cached settings so the next read re-resolves them."""
    global _ENV_FILE
    _ENV_FILE = None
    _resolve.cache_clear()


@contextmanager
def override_settings(**overrides: Any) -> Generator[Settings]:
    """Apply setting overrides for the current context.

    Example:
        with override_settings(naive_datetimes="utc"):
            assert is_in_range(datetime(2020, 1, 2), datetime(2020, 1, 1))
    """
    merged = {**get_settings().model_dump(), **overrides}
    settings = _validate(merged)
    token = _OVERRIDE.set(settings)
    try:
        yield settings
    finally:
        _OVERRIDE.reset(token)
