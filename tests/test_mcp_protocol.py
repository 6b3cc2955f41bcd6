"""Tests for tool requests answered through the MCP protocol handler."""

import json

import pytest

from quantaroute_geocoder.async_server import create_mcp_server
from quantaroute_geocoder.constants import ALL_TOOLS, BATCH_MAX_ITEMS, JsonRpcErrorCode
from quantaroute_geocoder.core.operations import OPERATIONS_BY_NAME
from quantaroute_geocoder.tools.dispatcher import ToolDispatcher
from quantaroute_geocoder.tools.protocol import GatewayProtocolHandler


@pytest.fixture
def server(gateway):
    return create_mcp_server(ToolDispatcher(gateway))


async def call_tool(server, name, arguments=None, msg_id=1):
    params = {"name": name}
    if arguments is not None:
        params["arguments"] = arguments
    message = {"jsonrpc": "2.0", "id": msg_id, "method": "tools/call", "params": params}
    response, _ = await server.protocol.handle_request(message)
    return response


async def list_tools(server):
    message = {"jsonrpc": "2.0", "id": 1, "method": "tools/list", "params": {}}
    response, _ = await server.protocol.handle_request(message)
    return {tool["name"]: tool for tool in response["result"]["tools"]}


class TestServerWiring:
    def test_protocol_handler(self, server):
        assert isinstance(server.protocol, GatewayProtocolHandler)

    def test_every_tool_registered(self, server):
        assert sorted(tool.name for tool in server.get_tools()) == sorted(ALL_TOOLS)


class TestToolsList:
    async def test_lists_every_tool_in_order(self, server):
        assert list(await list_tools(server)) == ALL_TOOLS

    async def test_declared_schemas_published(self, server):
        tools = await list_tools(server)
        for name, tool in tools.items():
            assert tool["inputSchema"] == OPERATIONS_BY_NAME[name].input_schema
            assert tool["description"] == OPERATIONS_BY_NAME[name].description

    async def test_batch_geocode_item_bound(self, server):
        schema = (await list_tools(server))["batch_geocode"]["inputSchema"]
        assert schema["properties"]["addresses"]["maxItems"] == BATCH_MAX_ITEMS
        assert schema["required"] == ["addresses"]

    async def test_autocomplete_query_length(self, server):
        schema = (await list_tools(server))["autocomplete"]["inputSchema"]
        assert schema["properties"]["query"]["minLength"] == 3

    async def test_disabled_tool_listed(self, server):
        assert "find_nearby_boundaries" in await list_tools(server)


class TestToolsCall:
    async def test_success(self, server, stub_client):
        response = await call_tool(server, "geocode", {"address": "Connaught Place"}, msg_id=7)
        assert response["id"] == 7
        assert "error" not in response
        content = response["result"]["content"]
        assert len(content) == 1
        assert content[0]["type"] == "text"
        assert json.loads(content[0]["text"]) == stub_client.geocode.return_value

    async def test_arguments_omitted(self, server):
        response = await call_tool(server, "get_health")
        assert json.loads(response["result"]["content"][0]["text"])["status"] == "healthy"

    async def test_unknown_tool(self, server):
        response = await call_tool(server, "teleport", {})
        assert response["error"] == {
            "code": JsonRpcErrorCode.METHOD_NOT_FOUND,
            "message": "Unknown tool: teleport",
        }

    async def test_arguments_not_object(self, server, client_factory):
        response = await call_tool(server, "get_health", ["x"])
        assert response["error"] == {
            "code": JsonRpcErrorCode.INVALID_PARAMS,
            "message": "Invalid arguments",
        }
        client_factory.assert_not_called()

    @pytest.mark.parametrize(
        "name,arguments",
        [
            ("geocode", {}),
            ("geocode", {"address": "   "}),
            ("autocomplete", {"query": "ab"}),
            ("batch_geocode", {"addresses": []}),
        ],
    )
    async def test_validation_error_code(self, server, client_factory, name, arguments):
        response = await call_tool(server, name, arguments)
        assert response["error"]["code"] == JsonRpcErrorCode.INVALID_PARAMS
        client_factory.assert_not_called()

    @pytest.mark.parametrize("latitude", ["12.5", True])
    async def test_latitude_not_coerced(self, server, stub_client, client_factory, latitude):
        response = await call_tool(
            server, "lookup_location_from_coordinates", {"latitude": latitude, "longitude": 77.2}
        )
        assert response["error"]["code"] == JsonRpcErrorCode.INVALID_PARAMS
        assert "latitude" in response["error"]["message"]
        client_factory.assert_not_called()
        stub_client.lookup_location_from_coordinates.assert_not_awaited()

    async def test_limit_not_coerced(self, server, client_factory):
        response = await call_tool(server, "autocomplete", {"query": "Conn", "limit": "5"})
        assert response["error"]["code"] == JsonRpcErrorCode.INVALID_PARAMS
        client_factory.assert_not_called()

    async def test_find_nearby_boundaries_not_implemented(self, server, client_factory):
        response = await call_tool(
            server, "find_nearby_boundaries", {"latitude": 28.6, "longitude": 77.2}
        )
        assert response["error"]["code"] == JsonRpcErrorCode.INTERNAL_ERROR
        assert "not yet implemented" in response["error"]["message"]
        client_factory.assert_not_called()

    async def test_missing_key(self, keyless_gateway):
        server = create_mcp_server(ToolDispatcher(keyless_gateway))
        response = await call_tool(server, "get_usage", {})
        assert response["error"]["code"] == JsonRpcErrorCode.INVALID_REQUEST

    async def test_unexpected_error(self, server, stub_client):
        stub_client.get_health.side_effect = RuntimeError("boom")
        response = await call_tool(server, "get_health", {})
        assert response["error"] == {
            "code": JsonRpcErrorCode.INTERNAL_ERROR,
            "message": "Tool execution failed: boom",
        }
