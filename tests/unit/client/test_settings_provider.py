"""Test the client-side settings provider."""
import json
import httpx
import pytest
from homelogger.config import Settings
from homelogger.client.settings_provider import (
    ConfigurationError, SettingsNotLoadedError, SettingsProvider, SettingsServiceError,
)


def _provider(handler):
    client = httpx.Client(transport=httpx.MockTransport(handler), base_url="http://settings.test")
    return SettingsProvider("http://settings.test", client=client)


class TestLifecycle:
    def test_settings_before_load_raises(self):
        provider = _provider(lambda request: httpx.Response(200, json={}))
        assert provider.loaded is False
        with pytest.raises(SettingsNotLoadedError):
            provider.settings

    def test_refresh_merges_with_defaults(self):
        def handler(request):
            assert request.method == "GET"
            assert request.url.path == "/settings"
            return httpx.Response(200, json={"ID": 1, "locale": "en-GB", "dateFormat": "DD/MM/YYYY"})

        provider = _provider(handler)
        settings = provider.refresh()

        assert provider.loaded is True
        assert provider.settings is settings
        assert settings.locale == "en-GB"
        assert settings.date_format == "DD/MM/YYYY"
        assert settings.currency == "USD"

    def test_update_sends_wire_names(self):
        sent = {}

        def handler(request):
            if request.method == "PUT":
                sent.update(json.loads(request.content))
                return httpx.Response(200, json={"timeZone": "Europe/London", "weekStart": 1})
            return httpx.Response(200, json={})

        provider = _provider(handler)
        settings = provider.update(time_zone="Europe/London", week_start=1)

        assert sent == {"timeZone": "Europe/London", "weekStart": 1}
        assert settings.time_zone == "Europe/London"
        assert provider.settings.week_start == 1

    def test_update_rejects_unknown_fields(self):
        provider = _provider(lambda request: httpx.Response(200, json={}))
        with pytest.raises(TypeError):
            provider.update(colour="blue")


class TestErrors:
    def test_server_error_keeps_previous_settings(self):
        responses = iter([
            httpx.Response(200, json={"currency": "EUR"}),
            httpx.Response(500, text="Error getting settings: boom"),
        ])
        provider = _provider(lambda request: next(responses))
        provider.refresh()

        with pytest.raises(SettingsServiceError, match="500"):
            provider.refresh()
        assert provider.settings.currency == "EUR"

    def test_rejected_update(self):
        def handler(request):
            return httpx.Response(400, text="weekStart must be between 0 and 6")

        provider = _provider(handler)
        with pytest.raises(SettingsServiceError, match="weekStart"):
            provider.update(week_start=9)
        assert provider.loaded is False

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        provider = _provider(handler)
        with pytest.raises(SettingsServiceError, match="unreachable"):
            provider.refresh()

    def test_invalid_payload(self):
        provider = _provider(lambda request: httpx.Response(200, json={"weekStart": 42}))
        with pytest.raises(SettingsServiceError, match="invalid settings"):
            provider.refresh()

    def test_non_object_payload(self):
        provider = _provider(lambda request: httpx.Response(200, json=[1, 2]))
        with pytest.raises(SettingsServiceError, match="invalid settings"):
            provider.refresh()
        assert provider.loaded is False


class TestConfiguration:
    def test_from_config(self, app_config):
        with SettingsProvider.from_config(app_config) as provider:
            assert provider.loaded is False

    def test_missing_server_url(self):
        with pytest.raises(ConfigurationError):
            SettingsProvider.from_config(Settings(server_url=""))

    def test_empty_url_rejected(self):
        with pytest.raises(ConfigurationError):
            SettingsProvider("")
