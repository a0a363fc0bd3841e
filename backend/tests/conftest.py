"""Shared test fixtures and configuration."""
import pytest

from chapel.config import reset_settings

SETTINGS_ENV_VARS = (
    "APP_NAME",
    "DEBUG",
    "LOG_LEVEL",
    "ADMIN_ROUTE_PREFIX",
    "ROLE_ALIASES",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Run every test against default settings unless it sets env vars itself."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
