"""Classification of exceptions that must never be wrapped in a Failure.

Fatal exceptions signal process-level conditions: interruption, broken
imports, forced termination and interpreter resource exhaustion. Swallowing
them inside a Failure would hide shutdown requests and resource exhaustion
from the code that supervises the process, so they always propagate.
"""

from __future__ import annotations

import asyncio
import logging

from tryvalue.errors import FatalError

log = logging.getLogger(__name__)

# Cancellation and interruption
_INTERRUPTION: tuple[type[BaseException], ...] = (
    KeyboardInterrupt,
    asyncio.CancelledError,
)
# Irrecoverable linkage (a found module failed to bind a name or initialize)
_LINKAGE: tuple[type[BaseException], ...] = (ImportError,)
# Forced termination of the interpreter or of a generator frame
_TERMINATION: tuple[type[BaseException], ...] = (SystemExit, GeneratorExit)
# Interpreter resource exhaustion and internal faults
_RESOURCE_EXHAUSTION: tuple[type[BaseException], ...] = (
    MemoryError,
    RecursionError,
    SystemError,
)

FATAL_EXCEPTION_TYPES: tuple[type[BaseException], ...] = (
    *_INTERRUPTION,
    *_LINKAGE,
    *_TERMINATION,
    *_RESOURCE_EXHAUSTION,
    FatalError,
)

# A module that is simply absent is an ordinary, recoverable condition.
_RECOVERABLE_LINKAGE: tuple[type[BaseException], ...] = (ModuleNotFoundError,)


def is_fatal(exc: BaseException) -> bool:
    """Return True if ``exc`` must propagate instead of becoming a Failure.

    Interruption is always fatal, even when the computation would have
    swallowed it for unrelated reasons.

    ``ImportError`` is fatal but its subclass ``ModuleNotFoundError`` is not:
    ``Outcome.of(lambda: import_module("yaml")).or_else(None)`` yields
    ``None`` when the module is absent, while a module that exists but fails
    to bind (``cannot import name ...``) still escalates.
    """
    if isinstance(exc, _RECOVERABLE_LINKAGE):
        return False
    return isinstance(exc, FATAL_EXCEPTION_TYPES)


def escalate(exc: BaseException) -> FatalError:
    """Wrap a fatal exception in the ``FatalError`` to raise in its place.

    An exception that is already a ``FatalError`` is returned unchanged so
    nested escalation never stacks wrappers.
    """
    if isinstance(exc, FatalError):
        return exc
    log.warning("Fatal %s escalated; it will not be wrapped", type(exc).__name__)
    return FatalError(exc)


__all__ = ["FATAL_EXCEPTION_TYPES", "escalate", "is_fatal"]
