"""Settings: frozen library settings with environment and scoped overrides."""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass, replace
from functools import cache
import os
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

from tryvalue.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator

ENV_PREFIX = "TRYVALUE_"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"", "0", "false", "no", "off"})


def _coerce_bool(name: str, raw: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean, got {raw!r}",
        hint="Use one of: 1/0, true/false, yes/no, on/off.",
    )


@dataclass(frozen=True)
class Settings:
    """Immutable settings for tryvalue.

    Example:
        with settings_scope(log_captures=True):
            Outcome.of(risky)  # captured exceptions are logged at DEBUG
    """

    #: Log every captured (non-fatal) exception at DEBUG level.
    log_captures: bool = False

    def __post_init__(self) -> None:
        """Validate field types."""
        if not isinstance(self.log_captures, bool):
            raise ConfigurationError(
                f"log_captures must be a bool, got {type(self.log_captures).__name__}",
                hint="Pass True or False.",
            )

    @classmethod
    def from_env(cls) -> Settings:
        """Resolve settings from ``TRYVALUE_*`` variables (``.env`` included)."""
        load_dotenv()
        values: dict[str, Any] = {}
        raw = os.environ.get(f"{ENV_PREFIX}LOG_CAPTURES")
        if raw is not None:
            values["log_captures"] = _coerce_bool(f"{ENV_PREFIX}LOG_CAPTURES", raw)
        return cls(**values)


_SCOPED: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "tryvalue_settings", default=None
)


# Resolved once per process; tests clear it via ``_default_settings.cache_clear()``.
@cache
def _default_settings() -> Settings:
    return Settings.from_env()


def get_settings() -> Settings:
    """Return the scoped settings if a scope is active, else the process default."""
    scoped = _SCOPED.get()
    return scoped if scoped is not None else _default_settings()


@contextmanager
def settings_scope(
    settings: Settings | None = None, **overrides: Any
) -> Generator[Settings]:
    """Temporarily apply settings for the current context.

    Args:
        settings: Settings to use as the base; defaults to ``get_settings()``.
        **overrides: Field values replacing those of the base settings.

    Yields:
        The effective settings inside the scope.
    """
    base = settings if settings is not None else get_settings()
    try:
        effective = replace(base, **overrides)
    except TypeError as exc:
        raise ConfigurationError(
            str(exc), hint="Valid fields: log_captures."
        ) from exc
    token = _SCOPED.set(effective)
    try:
        yield effective
    finally:
        _SCOPED.reset(token)


__all__ = ["ENV_PREFIX", "Settings", "get_settings", "settings_scope"]
