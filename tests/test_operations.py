"""Tests for the operation table."""

from quantaroute_geocoder.constants import ALL_TOOLS
from quantaroute_geocoder.core.client import QuantaRouteClient
from quantaroute_geocoder.core.operations import (
    OPERATIONS,
    OPERATIONS_BY_ENDPOINT,
    OPERATIONS_BY_NAME,
)


class TestOperationTable:
    def test_order_matches_tool_list(self):
        assert [op.name for op in OPERATIONS] == ALL_TOOLS

    def test_names_unique(self):
        assert len(OPERATIONS_BY_NAME) == len(OPERATIONS)

    def test_endpoints_unique(self):
        assert len(OPERATIONS_BY_ENDPOINT) == len(OPERATIONS)

    def test_every_operation_has_client_method(self):
        for op in OPERATIONS:
            assert callable(getattr(QuantaRouteClient, op.name))

    def test_endpoints_are_kebab_case(self):
        for op in OPERATIONS:
            assert op.endpoint == op.endpoint.lower()
            assert "_" not in op.endpoint

    def test_schemas_are_objects(self):
        for op in OPERATIONS:
            assert op.input_schema["type"] == "object"

    def test_only_nearby_disabled(self):
        disabled = [op.name for op in OPERATIONS if not op.enabled]
        assert disabled == ["find_nearby_boundaries"]


class TestRoutes:
    def test_validate_digipin_accepts_get_and_post(self):
        op = OPERATIONS_BY_ENDPOINT["validate-digipin"]
        assert op.route_for("GET").source == "query"
        assert op.route_for("POST").source == "body"

    def test_autocomplete_is_get_only(self):
        op = OPERATIONS_BY_ENDPOINT["autocomplete"]
        route = op.route_for("GET")
        assert route.query_fields == (("q", "query"), ("limit", "limit"))
        assert route.integer_fields == ("limit",)
        assert op.route_for("POST") is None

    def test_service_endpoints_are_get_only(self):
        for endpoint in ("usage", "location-statistics", "health"):
            op = OPERATIONS_BY_ENDPOINT[endpoint]
            assert op.route_for("GET").source == "none"
            assert op.route_for("POST") is None

    def test_lookup_endpoints_are_post_only(self):
        op = OPERATIONS_BY_ENDPOINT["lookup-location-from-coordinates"]
        assert op.route_for("POST") is not None
        assert op.route_for("GET") is None
