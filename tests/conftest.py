"""Shared test fixtures for quantaroute-geocoder."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from quantaroute_geocoder.config import GatewaySettings
from quantaroute_geocoder.constants import ALL_TOOLS

# Sample QuantaRoute API payloads (already unwrapped from {"success", "data"})
SAMPLE_GEOCODE_DATA = {
    "digipin": "39J-438-TJC7",
    "latitude": 28.6315,
    "longitude": 77.2167,
    "address": "Connaught Place, New Delhi, Delhi, India",
    "confidence": 0.92,
}

SAMPLE_LOCATION_DATA = {
    "pincode": "110001",
    "office_name": "Connaught Place S.O",
    "division": "New Delhi Central",
    "region": "Delhi",
    "circle": "Delhi",
    "state": "Delhi",
    "district": None,
}

SAMPLE_VALIDATE_DATA = {"digipin": "39J-438-TJC7", "isValid": True}

SAMPLE_HEALTH_DATA = {"status": "healthy", "version": "1.0.0"}


@pytest.fixture
def stub_client():
    """Canonical client stand-in; every operation returns a canned payload."""
    client = AsyncMock()
    for name in ALL_TOOLS:
        getattr(client, name).return_value = {"operation": name}
    client.geocode.return_value = SAMPLE_GEOCODE_DATA
    client.lookup_location_from_coordinates.return_value = SAMPLE_LOCATION_DATA
    client.validate_digipin.return_value = SAMPLE_VALIDATE_DATA
    client.get_health.return_value = SAMPLE_HEALTH_DATA
    return client


@pytest.fixture
def client_factory(stub_client):
    """Factory handing out the stub client; call_count counts client builds."""
    return MagicMock(return_value=stub_client)


@pytest.fixture
def gateway(client_factory):
    """Gateway with a configured fallback key and the stub client."""
    from quantaroute_geocoder.core.gateway import Gateway

    return Gateway(GatewaySettings(api_key="env-key"), client_factory=client_factory)


@pytest.fixture
def keyless_gateway(client_factory):
    """Gateway with no fallback key configured."""
    from quantaroute_geocoder.core.gateway import Gateway

    return Gateway(GatewaySettings(), client_factory=client_factory)
