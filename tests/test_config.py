"""Tests for GatewaySettings."""

import dataclasses

import pytest

from quantaroute_geocoder.config import GatewaySettings
from quantaroute_geocoder.constants import QuantaRouteConfig


class TestDefaults:
    def test_defaults(self):
        settings = GatewaySettings()
        assert settings.api_key is None
        assert settings.base_url == QuantaRouteConfig.BASE_URL
        assert settings.timeout == QuantaRouteConfig.TIMEOUT_SECONDS

    def test_frozen(self):
        settings = GatewaySettings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.api_key = "changed"


class TestFromEnv:
    def test_empty_environment(self):
        settings = GatewaySettings.from_env({})
        assert settings == GatewaySettings()

    def test_reads_all_variables(self):
        settings = GatewaySettings.from_env(
            {
                "QUANTAROUTE_API_KEY": "abc",
                "QUANTAROUTE_BASE_URL": "http://localhost:9000",
                "QUANTAROUTE_TIMEOUT": "5",
            }
        )
        assert settings.api_key == "abc"
        assert settings.base_url == "http://localhost:9000"
        assert settings.timeout == 5.0

    def test_empty_key_is_none(self):
        assert GatewaySettings.from_env({"QUANTAROUTE_API_KEY": ""}).api_key is None

    def test_invalid_timeout_falls_back(self, caplog):
        settings = GatewaySettings.from_env({"QUANTAROUTE_TIMEOUT": "soon"})
        assert settings.timeout == QuantaRouteConfig.TIMEOUT_SECONDS
        assert "QUANTAROUTE_TIMEOUT" in caplog.text

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("QUANTAROUTE_API_KEY", "from-process")
        assert GatewaySettings.from_env().api_key == "from-process"
