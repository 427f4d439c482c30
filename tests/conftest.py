"""Shared test fixtures."""
import pytest
from homelogger.config import Settings
from homelogger.models.regional import RegionalSettings


@pytest.fixture
def app_config():
    """App configuration backed by a private in-memory database."""
    return Settings(
        database_url="sqlite+aiosqlite://",
        server_url="http://settings.test",
        json_logs=False,
    )


@pytest.fixture
def default_settings():
    return RegionalSettings()


@pytest.fixture
def make_settings():
    """Build ``RegionalSettings`` with overrides, e.g. ``make_settings(date_format="DD/MM/YYYY")``."""
    def _make(**overrides):
        return RegionalSettings(**overrides)
    return _make
