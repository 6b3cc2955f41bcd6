from .api import register_digipin_tools

__all__ = ["register_digipin_tools"]
