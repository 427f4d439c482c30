"""Client-side owner of the regional settings lifecycle.

The provider loads settings from the settings service, refreshes them on
demand and pushes partial updates. It holds the only copy of the current
``RegionalSettings``; callers read :attr:`SettingsProvider.settings` and pass
the value explicitly into the formatting functions.
"""
from __future__ import annotations

from typing import Any

import httpx
import structlog
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from ..config import Settings
from ..models.regional import RegionalSettings

logger = structlog.get_logger(__name__)


class ConfigurationError(RuntimeError):
    """Required configuration is missing."""


class SettingsNotLoadedError(RuntimeError):
    """Settings were read before the first successful load."""


class SettingsServiceError(RuntimeError):
    """The settings service could not be reached or returned an error."""


class SettingsProvider:
    """Load, refresh and update ``RegionalSettings`` against ``{server_url}/settings``."""

    def __init__(self, server_url: str, *, timeout: float = 10.0, client: httpx.Client | None = None):
        if not server_url:
            raise ConfigurationError("server_url is required for the settings provider")
        self._client = client or httpx.Client(base_url=server_url, timeout=timeout)
        self._owns_client = client is None
        self._settings: RegionalSettings | None = None

    @classmethod
    def from_config(cls, config: Settings | None = None) -> SettingsProvider:
        config = config or Settings()
        if not config.server_url:
            raise ConfigurationError(
                "HOMELOGGER_SERVER_URL environment variable is not set, and is required."
            )
        return cls(config.server_url, timeout=config.request_timeout)

    @property
    def loaded(self) -> bool:
        return self._settings is not None

    @property
    def settings(self) -> RegionalSettings:
        if self._settings is None:
            raise SettingsNotLoadedError("Settings used before they were loaded; call refresh() first")
        return self._settings

    def _request(self, method: str, payload: dict[str, Any] | None = None) -> RegionalSettings:
        try:
            response = self._client.request(method, "/settings", json=payload)
            response.raise_for_status()
            return RegionalSettings.from_partial(response.json())
        except httpx.HTTPStatusError as e:
            logger.error("settings_request_failed", method=method,
                         status=e.response.status_code, body=e.response.text)
            raise SettingsServiceError(
                f"Settings service returned {e.response.status_code}: {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("settings_request_failed", method=method, error=str(e))
            raise SettingsServiceError(f"Settings service unreachable: {e}") from e
        except (ValueError, ValidationError) as e:
            logger.error("settings_response_invalid", method=method, error=str(e))
            raise SettingsServiceError(f"Settings service returned invalid settings: {e}") from e

    def refresh(self) -> RegionalSettings:
        """Fetch settings from the service. On failure the previous value is kept."""
        self._settings = self._request("GET")
        logger.info("settings_loaded", locale=self._settings.locale,
                    date_format=self._settings.date_format)
        return self._settings

    def update(self, **changes: Any) -> RegionalSettings:
        """Send a partial update using attribute names, e.g. ``update(time_zone="Europe/London")``."""
        unknown = set(changes) - set(RegionalSettings.model_fields)
        if unknown:
            raise TypeError(f"Unknown settings fields: {', '.join(sorted(unknown))}")
        payload = {to_camel(k): v for k, v in changes.items()}
        self._settings = self._request("PUT", payload)
        logger.info("settings_updated", fields=sorted(changes))
        return self._settings

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> SettingsProvider:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
