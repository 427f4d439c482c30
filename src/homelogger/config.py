"""Application configuration via environment variables with HOMELOGGER_ prefix."""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """HomeLogger regional service configuration.

    All settings are read from environment variables prefixed with
    ``HOMELOGGER_``. The database URL is wrapped in ``SecretStr`` so that
    embedded credentials are never accidentally logged or serialised.

    Not to be confused with :class:`homelogger.models.regional.RegionalSettings`,
    which is the user-facing regional configuration stored in the database.
    """

    model_config = SettingsConfigDict(env_prefix="HOMELOGGER_")

    # ── Database ───────────────────────────────────────────────────────────
    database_url: SecretStr = SecretStr("sqlite+aiosqlite:///./homelogger.db")

    # ── Settings service (client side) ─────────────────────────────────────
    # Base URL of the backend serving /settings; required by SettingsProvider
    server_url: str = ""
    request_timeout: float = Field(default=10.0, gt=0)

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "INFO"
    json_logs: bool = True

    # ── API ─────────────────────────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8083
    cors_origins: list[str] = Field(default=["http://localhost:3000"])
