"""
Constants for quantaroute-geocoder.

All magic strings, API metadata, and configuration values live here.
"""


class ServerConfig:
    NAME = "quantaroute-geocoder"
    VERSION = "1.0.0"
    DESCRIPTION = "QuantaRoute Geocoder gateway: DigiPin geocoding and location lookup"
    DOCUMENTATION_URL = "https://github.com/mapdevsaikat/quantaroute-geocoder"
    API_KEY_URL = "https://developers.quantaroute.com"


class QuantaRouteConfig:
    BASE_URL = "https://api.quantaroute.com"
    USER_AGENT = "quantaroute-geocoder/1.0.0"
    TIMEOUT_SECONDS = 30.0
    API_KEY_HEADER = "x-api-key"
    DEFAULT_COUNTRY = "India"
    AUTOCOMPLETE_DEFAULT_LIMIT = 5
    AUTOCOMPLETE_MAX_LIMIT = 10
    AUTOCOMPLETE_MIN_QUERY_LENGTH = 3
    NEARBY_DEFAULT_RADIUS_KM = 5.0
    NEARBY_MAX_RADIUS_KM = 100.0
    NEARBY_DEFAULT_LIMIT = 10
    NEARBY_MAX_LIMIT = 50


class ApiPaths:
    """Backend paths under QuantaRouteConfig.BASE_URL."""

    GEOCODE = "/v1/digipin/geocode"
    REVERSE = "/v1/digipin/reverse"
    COORDINATES_TO_DIGIPIN = "/v1/digipin/coordinates-to-digipin"
    VALIDATE = "/v1/digipin/validate/{}"
    BATCH_GEOCODE = "/v1/digipin/batch"
    AUTOCOMPLETE = "/v1/digipin/autocomplete"
    USAGE = "/v1/digipin/usage"
    LOCATION_LOOKUP = "/v1/location/lookup"
    LOCATION_BATCH_LOOKUP = "/v1/location/batch-lookup"
    LOCATION_NEARBY = "/v1/location/nearby"
    LOCATION_STATS = "/v1/location/stats"
    HEALTH = "/health"


class EnvVar:
    MCP_STDIO = "MCP_STDIO"
    QUANTAROUTE_API_KEY = "QUANTAROUTE_API_KEY"
    QUANTAROUTE_BASE_URL = "QUANTAROUTE_BASE_URL"
    QUANTAROUTE_TIMEOUT = "QUANTAROUTE_TIMEOUT"


class CorsConfig:
    HEADERS = {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type, Authorization, x-api-key",
    }


class JsonRpcErrorCode:
    """JSON-RPC error codes used by the tool-call surface."""

    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


# REST surface
API_PREFIX = "/api"

# Batch limits
BATCH_MAX_ITEMS = 100

# Tool lists
DIGIPIN_TOOLS = [
    "geocode",
    "reverse_geocode",
    "coordinates_to_digipin",
    "validate_digipin",
    "batch_geocode",
    "autocomplete",
]
LOCATION_TOOLS = [
    "lookup_location_from_coordinates",
    "lookup_location_from_digipin",
    "batch_location_lookup",
    "find_nearby_boundaries",
]
SERVICE_TOOLS = ["get_usage", "get_location_statistics", "get_health"]
ALL_TOOLS = DIGIPIN_TOOLS + LOCATION_TOOLS + SERVICE_TOOLS


class ErrorMessages:
    FIELD_REQUIRED = "{} is required"
    FIELD_NOT_STRING = "{} must be a string"
    FIELD_NOT_NUMBER = "{} must be a number"
    FIELD_NOT_INTEGER = "{} must be an integer"
    FIELD_NOT_POSITIVE = "{} must be a positive integer"
    INVALID_LAT = "latitude must be between -90 and 90, got {}"
    INVALID_LON = "longitude must be between -180 and 180, got {}"
    QUERY_TOO_SHORT = "query must be at least {} characters long"
    RADIUS_OUT_OF_RANGE = "radius_km must be greater than 0 and at most {}, got {}"
    BATCH_EMPTY = "{} must be a non-empty array"
    BATCH_TOO_LARGE = "Maximum {} {} allowed per batch, got {}"
    BATCH_ITEM_NOT_OBJECT = "{}[{}] must be an object"
    BATCH_ADDRESS_REQUIRED = "addresses[{}].address is required"
    BATCH_LOCATION_INVALID = "locations[{}] must have latitude and longitude or digipin"
    API_KEY_REQUIRED = (
        "API key is required. Set QUANTAROUTE_API_KEY environment variable "
        "or provide x-api-key header"
    )
    AUTHENTICATION_FAILED = "Authentication failed: {}"
    RATE_LIMITED = "Rate limit exceeded: {}"
    API_ERROR = "API error ({}): {}"
    REQUEST_FAILED = "Request failed: {}"
    NOT_IMPLEMENTED = (
        "The {} endpoint is not yet implemented in the backend API. "
        "This feature is coming soon."
    )
    NOT_IMPLEMENTED_NOTE = (
        "This feature is marked as experimental and will be available in a future "
        "release. The backend endpoint /v1/location/nearby needs to be implemented first."
    )
    UNKNOWN_OPERATION = "Unknown operation: {}"
    UNKNOWN_TOOL = "Unknown tool: {}"
    ENDPOINT_NOT_FOUND = "Endpoint '{}' not found"
    INVALID_JSON = "Request body must be valid JSON"
    INVALID_ARGUMENTS = "Invalid arguments"
    TOOL_FAILED = "Tool execution failed: {}"
    INTERNAL = "Internal server error"
