"""Pytest configuration and fixtures for apikit tests."""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's APIKIT_* settings out of the tests."""
    for name in ("APIKIT_BASE_URL", "APIKIT_TOKEN", "APIKIT_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
