"""
DigiPin tool registration for quantaroute-geocoder.

Registers geocode, reverse_geocode, coordinates_to_digipin, validate_digipin,
batch_geocode and autocomplete.
"""

from ...constants import DIGIPIN_TOOLS
from ..protocol import register_operation_tools


def register_digipin_tools(mcp, dispatcher):
    """Register DigiPin tools with the MCP server."""
    register_operation_tools(mcp, dispatcher, DIGIPIN_TOOLS)
