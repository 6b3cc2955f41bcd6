"""Tests for quantaroute-geocoder response models."""

import json

import pytest
from pydantic import ValidationError

from quantaroute_geocoder.models.responses import (
    ApiDocsResponse,
    ApiResponse,
    AuthenticationInfo,
    NotFoundResponse,
    NotImplementedResponse,
    TextContent,
    ToolCallResult,
    ToolDefinition,
    to_payload,
)


class TestApiResponse:
    def test_success_payload(self):
        r = ApiResponse(success=True, data={"digipin": "39J-438-TJC7"})
        assert r.to_payload() == {"success": True, "data": {"digipin": "39J-438-TJC7"}}

    def test_success_keeps_nested_nulls(self):
        r = ApiResponse(success=True, data={"district": None})
        assert r.to_payload() == {"success": True, "data": {"district": None}}

    def test_success_with_null_data(self):
        assert ApiResponse(success=True).to_payload() == {"success": True, "data": None}

    def test_error_payload(self):
        r = ApiResponse(success=False, error="address is required")
        assert r.to_payload() == {"success": False, "error": "address is required"}

    def test_extra_forbid(self):
        with pytest.raises(ValidationError):
            ApiResponse(success=True, extra_field="bad")

    def test_json_roundtrip(self):
        r = ApiResponse(success=True, data=[1, 2])
        data = json.loads(r.model_dump_json())
        assert data["data"] == [1, 2]


class TestNotFoundResponse:
    def test_alias(self):
        r = NotFoundResponse(
            error="Endpoint 'x' not found",
            endpoint="x",
            method="GET",
            available_endpoints=["GET /api"],
        )
        payload = to_payload(r)
        assert payload["availableEndpoints"] == ["GET /api"]
        assert payload["success"] is False
        assert payload["message"] == "See GET /api for available endpoints"

    def test_populate_by_alias(self):
        r = NotFoundResponse(
            error="e", endpoint="x", method="GET", availableEndpoints=["GET /api"]
        )
        assert r.available_endpoints == ["GET /api"]


class TestNotImplementedResponse:
    def test_defaults(self):
        r = NotImplementedResponse(message="soon", endpoint="find-nearby-boundaries", note="n")
        payload = to_payload(r)
        assert payload["error"] == "Not Implemented"
        assert payload["status"] == "experimental"
        assert payload["success"] is False


class TestApiDocsResponse:
    def test_aliases(self):
        r = ApiDocsResponse(
            message="QuantaRoute Geocoder REST API",
            version="1.0.0",
            documentation="https://example.test",
            authentication=AuthenticationInfo(
                header="x-api-key",
                env="QUANTAROUTE_API_KEY",
                note="note",
                get_api_key="https://example.test/keys",
            ),
            endpoints={"GET /api": "docs"},
        )
        payload = to_payload(r)
        assert payload["success"] is True
        assert payload["authentication"]["method"] == "API Key"
        assert payload["authentication"]["getApiKey"] == "https://example.test/keys"


class TestToolModels:
    def test_text_content_type(self):
        assert TextContent(text="{}").type == "text"

    def test_result_text_joins_blocks(self):
        r = ToolCallResult(content=[TextContent(text="a"), TextContent(text="b")])
        assert r.text == "a\nb"

    def test_tool_definition_alias(self):
        t = ToolDefinition(name="get_health", description="d", input_schema={"type": "object"})
        assert to_payload(t)["inputSchema"] == {"type": "object"}

    def test_tool_definition_extra_forbid(self):
        with pytest.raises(ValidationError):
            ToolDefinition(name="x", description="d", input_schema={}, extra_field=1)
