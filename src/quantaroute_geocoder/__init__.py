"""QuantaRoute Geocoder gateway: REST and MCP front-ends over one canonical client."""

from .constants import ServerConfig

__version__ = ServerConfig.VERSION
