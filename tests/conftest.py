"""Pytest configuration and fixtures.

Provides environment isolation and settings-cache resets. All fixtures here
are autouse unless noted.
"""

from __future__ import annotations

import os

import pytest

from tryvalue.config import ENV_PREFIX, _default_settings

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr("tryvalue.config.load_dotenv", lambda *_a, **_k: False)


@pytest.fixture(autouse=True)
def isolate_settings_env(request, monkeypatch):
    """Clear TRYVALUE_* variables and the cached default settings.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith(ENV_PREFIX):
                monkeypatch.delenv(key, raising=False)
    _default_settings.cache_clear()
    yield
    _default_settings.cache_clear()


# =============================================================================
# Shared Values
# =============================================================================


@pytest.fixture
def cause() -> ValueError:
    """A recoverable exception instance to wrap in failures."""
    return ValueError("boom")
