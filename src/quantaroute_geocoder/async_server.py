#!/usr/bin/env python3
"""
Async QuantaRoute Geocoder MCP Server using chuk-mcp-server

DigiPin geocoding, reverse geocoding, validation, autocomplete and
administrative boundary lookup via the QuantaRoute API.
"""

import logging

from .config import GatewaySettings
from .constants import ServerConfig
from .core.gateway import Gateway
from .tools.digipin import register_digipin_tools
from .tools.dispatcher import ToolDispatcher
from .tools.location import register_location_tools
from .tools.protocol import GatewayMCPServer
from .tools.service import register_service_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_mcp_server(dispatcher: ToolDispatcher) -> GatewayMCPServer:
    """MCP server with every tool module registered against the dispatcher."""
    server = GatewayMCPServer(ServerConfig.NAME)
    register_digipin_tools(server, dispatcher)
    register_location_tools(server, dispatcher)
    register_service_tools(server, dispatcher)
    return server


# Shared dispatch core, configured once from the environment at import
gateway = Gateway(GatewaySettings.from_env())
dispatcher = ToolDispatcher(gateway)

# Create the MCP server instance
mcp = create_mcp_server(dispatcher)

if gateway.settings.api_key is None:
    logger.warning("QUANTAROUTE_API_KEY is not set; tool calls will fail authentication")

# Run the server
if __name__ == "__main__":
    logger.info("Starting QuantaRoute Geocoder MCP Server...")
    mcp.run(stdio=True)
