"""
Location lookup tool registration for quantaroute-geocoder.

Registers lookup_location_from_coordinates, lookup_location_from_digipin,
batch_location_lookup and find_nearby_boundaries. The last one is listed
but answers not-implemented until the backend ships it.
"""

from ...constants import LOCATION_TOOLS
from ..protocol import register_operation_tools


def register_location_tools(mcp, dispatcher):
    """Register location lookup tools with the MCP server."""
    register_operation_tools(mcp, dispatcher, LOCATION_TOOLS)
