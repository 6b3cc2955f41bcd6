from .api import register_service_tools

__all__ = ["register_service_tools"]
