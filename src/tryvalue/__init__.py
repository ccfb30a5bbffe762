"""tryvalue: deferred exception handling with a Success/Failure value type.

Public API:
    - Outcome: sealed base type with the combinator API
    - Success / Failure: the two variants
    - is_fatal(): classifier for exceptions that are never wrapped
    - Settings / settings_scope(): library settings
"""

from __future__ import annotations

import logging

from tryvalue.config import Settings, get_settings, settings_scope
from tryvalue.errors import (
    ConfigurationError,
    EmptyValueError,
    FatalError,
    OutcomeError,
    PredicateError,
)
from tryvalue.fatal import FATAL_EXCEPTION_TYPES, is_fatal
from tryvalue.functions import and_then, compose, identity
from tryvalue.outcome import Failure, Outcome, OutcomeIterator, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("tryvalue")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("tryvalue").addHandler(logging.NullHandler())

__all__ = [
    "FATAL_EXCEPTION_TYPES",
    "ConfigurationError",
    "EmptyValueError",
    "Failure",
    "FatalError",
    "Outcome",
    "OutcomeError",
    "OutcomeIterator",
    "PredicateError",
    "Settings",
    "Success",
    "and_then",
    "compose",
    "get_settings",
    "identity",
    "is_fatal",
    "settings_scope",
]
