from .api import register_location_tools

__all__ = ["register_location_tools"]
