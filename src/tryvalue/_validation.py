"""Internal precondition helpers shared by the outcome modules.

Precondition violations are reported immediately as ``TypeError`` and are
never deferred into a Failure.
"""

from __future__ import annotations

import typing


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = TypeError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            raise exc(f"{field_name}: {message}")
        raise exc(message)


def _require_callable(func: typing.Any, field_name: str) -> None:
    _require(
        condition=func is not None,
        message="is None",
        field_name=field_name,
    )
    _require(
        condition=callable(func),
        message=f"must be callable, got {type(func).__name__}",
        field_name=field_name,
    )


def _require_exception(cause: typing.Any, field_name: str) -> None:
    """Validate a cause is an exception instance (classes are rejected)."""
    _require(
        condition=cause is not None,
        message="is None",
        field_name=field_name,
    )
    _require(
        condition=isinstance(cause, BaseException),
        message=f"must be an exception instance, got {type(cause).__name__}",
        field_name=field_name,
    )
