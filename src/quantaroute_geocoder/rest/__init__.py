"""REST surface for quantaroute-geocoder."""

from .app import create_app
from .dispatcher import HttpDispatcher, HttpResult, parse_path

__all__ = ["HttpDispatcher", "HttpResult", "create_app", "parse_path"]
