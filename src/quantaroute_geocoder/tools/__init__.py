"""Tool-call surface for quantaroute-geocoder."""

from .dispatcher import ToolCallError, ToolDispatcher
from .protocol import GatewayMCPServer, GatewayProtocolHandler, OperationTool

__all__ = [
    "GatewayMCPServer",
    "GatewayProtocolHandler",
    "OperationTool",
    "ToolCallError",
    "ToolDispatcher",
]
