"""
chuk-mcp-server integration for the tool-call surface.

Tools are registered from the operation table rather than from function
signatures: each one publishes its operation's declared input schema and
hands the argument object to the dispatcher untouched, so validation sees
exactly what the client sent. tools/call answers failures with the
dispatcher's JSON-RPC code instead of chuk's generic execution error.
"""

import logging
from typing import Any

from chuk_mcp_server import ChukMCPServer
from chuk_mcp_server.component_registry import ComponentRegistry
from chuk_mcp_server.protocol import MCPProtocolHandler
from chuk_mcp_server.types import ToolHandler
from chuk_mcp_server.types.base import MCPTool

from ..constants import ErrorMessages, JsonRpcErrorCode
from ..models.responses import ToolDefinition
from .dispatcher import ToolCallError, ToolDispatcher

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"


class OperationTool(ToolHandler):
    """Tool handler backed by one gateway operation."""

    @classmethod
    def from_definition(
        cls, definition: ToolDefinition, dispatcher: ToolDispatcher
    ) -> "OperationTool":
        async def call(arguments: Any):
            return await dispatcher.call_tool(definition.name, arguments)

        tool = cls(
            mcp_tool=MCPTool(
                name=definition.name,
                description=definition.description,
                inputSchema=definition.input_schema,
            ),
            handler=call,
            parameters=[],
        )
        tool._ensure_cached_formats()
        return tool

    async def execute(self, arguments: Any) -> Any:
        # No signature-based conversion; ToolCallError propagates as raised.
        return await self.handler(arguments)


def register_operation_tools(mcp, dispatcher: ToolDispatcher, names: list[str]) -> None:
    """Register the named operations as tools on the MCP server."""
    for definition in dispatcher.list_tools():
        if definition.name in names:
            mcp.add_tool(OperationTool.from_definition(definition, dispatcher))


class GatewayProtocolHandler(MCPProtocolHandler):
    """MCP protocol handler whose tools/call honours ToolCallError codes."""

    async def _handle_tools_call(
        self, params: dict[str, Any], msg_id: Any, oauth_token: str | None = None
    ) -> tuple[dict[str, Any], None]:
        params = params or {}
        name = params.get("name", "")
        arguments = params.get("arguments", {})

        try:
            if not isinstance(arguments, dict):
                raise ToolCallError(
                    JsonRpcErrorCode.INVALID_PARAMS, ErrorMessages.INVALID_ARGUMENTS
                )
            tool = self.tools.get(name)
            if tool is None:
                raise ToolCallError(
                    JsonRpcErrorCode.METHOD_NOT_FOUND, ErrorMessages.UNKNOWN_TOOL.format(name)
                )
            result = await tool.execute(arguments)
        except ToolCallError as e:
            logger.debug("tools/call %s answered %s: %s", name, e.code, e.message)
            return {"jsonrpc": JSONRPC_VERSION, "id": msg_id, "error": e.to_dict()}, None

        return {"jsonrpc": JSONRPC_VERSION, "id": msg_id, "result": result.model_dump()}, None


class GatewayMCPServer(ChukMCPServer):
    """ChukMCPServer answering tool requests through GatewayProtocolHandler."""

    def __init__(self, name: str | None = None, **kwargs):
        super().__init__(name, **kwargs)
        self.protocol = GatewayProtocolHandler(self.server_info, self.capabilities)
        self._components = ComponentRegistry(self.protocol)
