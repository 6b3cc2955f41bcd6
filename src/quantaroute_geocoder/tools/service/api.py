"""
Service tool registration for quantaroute-geocoder.

Registers get_usage, get_location_statistics and get_health.
"""

from ...constants import SERVICE_TOOLS
from ..protocol import register_operation_tools


def register_service_tools(mcp, dispatcher):
    """Register service status tools with the MCP server."""
    register_operation_tools(mcp, dispatcher, SERVICE_TOOLS)
