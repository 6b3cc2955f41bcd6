"""
Operation table shared by the REST and tool-call dispatchers.

Every canonical operation is declared once here: its tool name, REST endpoint
and accepted methods, validation rule, declared input schema, and whether it
is enabled. Operation names match QuantaRouteClient method names.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from ..constants import BATCH_MAX_ITEMS, QuantaRouteConfig
from . import validation


@dataclass(frozen=True)
class HttpRoute:
    """One accepted HTTP method for an endpoint and where its arguments come from.

    ``source`` is "body", "query" or "none". For query routes, ``query_fields``
    maps query-string names to argument names, ``integer_fields`` lists the
    arguments parsed as integers and ``example`` is a sample query string for
    the documentation payload.
    """

    method: str
    source: str = "body"
    query_fields: tuple[tuple[str, str], ...] = ()
    integer_fields: tuple[str, ...] = ()
    example: str = ""


@dataclass(frozen=True)
class Operation:
    """A canonical backend capability reachable from both front-ends."""

    name: str
    endpoint: str
    description: str
    validate: Callable[[dict], dict]
    routes: tuple[HttpRoute, ...]
    input_schema: dict = field(default_factory=lambda: {"type": "object", "properties": {}})
    enabled: bool = True
    usage: str = ""

    def route_for(self, method: str) -> HttpRoute | None:
        for route in self.routes:
            if route.method == method:
                return route
        return None


POST_BODY = (HttpRoute("POST"),)
GET_ONLY = (HttpRoute("GET", source="none"),)

_DIGIPIN_SCHEMA = {
    "type": "object",
    "properties": {
        "digipin": {
            "type": "string",
            "description": "DigiPin code (format: XXX-XXX-XXXX)",
        },
    },
    "required": ["digipin"],
}

_COORDINATES_SCHEMA = {
    "type": "object",
    "properties": {
        "latitude": {"type": "number", "description": "Latitude coordinate (-90 to 90)"},
        "longitude": {"type": "number", "description": "Longitude coordinate (-180 to 180)"},
    },
    "required": ["latitude", "longitude"],
}

_ADDRESS_PROPERTIES = {
    "address": {"type": "string", "description": "The address to geocode (required)"},
    "city": {"type": "string", "description": "City name (optional)"},
    "state": {"type": "string", "description": "State name (optional)"},
    "pincode": {"type": "string", "description": "Postal code (optional)"},
    "country": {
        "type": "string",
        "description": (
            f"Country name (optional, defaults to {QuantaRouteConfig.DEFAULT_COUNTRY})"
        ),
    },
}


OPERATIONS: tuple[Operation, ...] = (
    Operation(
        name="geocode",
        endpoint="geocode",
        description=(
            "Geocode an address to get DigiPin code and coordinates. Returns location "
            "information including latitude, longitude, and DigiPin."
        ),
        validate=validation.validate_geocode,
        routes=POST_BODY,
        input_schema={
            "type": "object",
            "properties": _ADDRESS_PROPERTIES,
            "required": ["address"],
        },
        usage="Geocode an address",
    ),
    Operation(
        name="reverse_geocode",
        endpoint="reverse-geocode",
        description=(
            "Reverse geocode a DigiPin code to get coordinates and address information."
        ),
        validate=validation.validate_digipin,
        routes=POST_BODY,
        input_schema=_DIGIPIN_SCHEMA,
        usage="Reverse geocode a DigiPin",
    ),
    Operation(
        name="coordinates_to_digipin",
        endpoint="coordinates-to-digipin",
        description="Convert latitude and longitude coordinates to a DigiPin code.",
        validate=validation.validate_coordinates,
        routes=POST_BODY,
        input_schema=_COORDINATES_SCHEMA,
        usage="Convert coordinates to DigiPin",
    ),
    Operation(
        name="validate_digipin",
        endpoint="validate-digipin",
        description="Validate a DigiPin format and check if it corresponds to a real location.",
        validate=validation.validate_digipin,
        routes=(
            HttpRoute(
                "GET",
                source="query",
                query_fields=(("digipin", "digipin"),),
                example="?digipin=XXX-XXX-XXXX",
            ),
            HttpRoute("POST"),
        ),
        input_schema=_DIGIPIN_SCHEMA,
        usage="Validate DigiPin format",
    ),
    Operation(
        name="batch_geocode",
        endpoint="batch-geocode",
        description=(
            f"Geocode multiple addresses in a single batch request "
            f"(up to {BATCH_MAX_ITEMS} addresses)."
        ),
        validate=validation.validate_batch_geocode,
        routes=POST_BODY,
        input_schema={
            "type": "object",
            "properties": {
                "addresses": {
                    "type": "array",
                    "description": "Array of address objects to geocode",
                    "items": {
                        "type": "object",
                        "properties": {
                            name: {"type": "string"} for name in _ADDRESS_PROPERTIES
                        },
                        "required": ["address"],
                    },
                    "minItems": 1,
                    "maxItems": BATCH_MAX_ITEMS,
                },
            },
            "required": ["addresses"],
        },
        usage="Geocode multiple addresses",
    ),
    Operation(
        name="autocomplete",
        endpoint="autocomplete",
        description="Get autocomplete suggestions for addresses (minimum 3 characters).",
        validate=validation.validate_autocomplete,
        routes=(
            HttpRoute(
                "GET",
                source="query",
                query_fields=(("q", "query"), ("limit", "limit")),
                integer_fields=("limit",),
                example="?q=query&limit=5",
            ),
        ),
        input_schema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query (minimum 3 characters)",
                    "minLength": QuantaRouteConfig.AUTOCOMPLETE_MIN_QUERY_LENGTH,
                },
                "limit": {
                    "type": "integer",
                    "description": "Maximum number of suggestions (default: 5, max: 10)",
                    "default": QuantaRouteConfig.AUTOCOMPLETE_DEFAULT_LIMIT,
                },
            },
            "required": ["query"],
        },
        usage="Get address autocomplete suggestions",
    ),
    Operation(
        name="lookup_location_from_coordinates",
        endpoint="lookup-location-from-coordinates",
        description=(
            "Get administrative boundaries (pincode, state, division, locality) "
            "from coordinates."
        ),
        validate=validation.validate_coordinates,
        routes=POST_BODY,
        input_schema=_COORDINATES_SCHEMA,
        usage="Get location details from coordinates",
    ),
    Operation(
        name="lookup_location_from_digipin",
        endpoint="lookup-location-from-digipin",
        description="Get administrative boundaries from a DigiPin code.",
        validate=validation.validate_digipin,
        routes=POST_BODY,
        input_schema=_DIGIPIN_SCHEMA,
        usage="Get location details from DigiPin",
    ),
    Operation(
        name="batch_location_lookup",
        endpoint="batch-location-lookup",
        description=(
            "Batch lookup for multiple locations. Each location can be specified by "
            f"coordinates or DigiPin (up to {BATCH_MAX_ITEMS} locations)."
        ),
        validate=validation.validate_batch_location_lookup,
        routes=POST_BODY,
        input_schema={
            "type": "object",
            "properties": {
                "locations": {
                    "type": "array",
                    "description": (
                        "Array of location objects (each with latitude+longitude OR digipin)"
                    ),
                    "items": {
                        "type": "object",
                        "oneOf": [
                            {
                                "properties": {
                                    "latitude": {"type": "number"},
                                    "longitude": {"type": "number"},
                                },
                                "required": ["latitude", "longitude"],
                            },
                            {
                                "properties": {"digipin": {"type": "string"}},
                                "required": ["digipin"],
                            },
                        ],
                    },
                    "minItems": 1,
                    "maxItems": BATCH_MAX_ITEMS,
                },
            },
            "required": ["locations"],
        },
        usage="Batch location lookup",
    ),
    Operation(
        name="find_nearby_boundaries",
        endpoint="find-nearby-boundaries",
        description=(
            "Find nearby postal boundaries within a specified radius "
            "(experimental feature, not yet available)."
        ),
        validate=validation.validate_nearby_boundaries,
        routes=POST_BODY,
        input_schema={
            "type": "object",
            "properties": {
                "latitude": {"type": "number", "description": "Center latitude"},
                "longitude": {"type": "number", "description": "Center longitude"},
                "radius_km": {
                    "type": "number",
                    "description": "Search radius in kilometers (default: 5.0, max: 100)",
                    "default": QuantaRouteConfig.NEARBY_DEFAULT_RADIUS_KM,
                },
                "limit": {
                    "type": "integer",
                    "description": "Maximum number of results (default: 10, max: 50)",
                    "default": QuantaRouteConfig.NEARBY_DEFAULT_LIMIT,
                },
            },
            "required": ["latitude", "longitude"],
        },
        # The backend has no /v1/location/nearby endpoint yet.
        enabled=False,
        usage="Find nearby postal boundaries (NOT YET IMPLEMENTED - Coming Soon)",
    ),
    Operation(
        name="get_usage",
        endpoint="usage",
        description="Get API usage statistics and quota information.",
        validate=validation.validate_no_arguments,
        routes=GET_ONLY,
        usage="Get API usage statistics",
    ),
    Operation(
        name="get_location_statistics",
        endpoint="location-statistics",
        description=(
            "Get live statistics about the Location Lookup service "
            "(total boundaries, states, divisions, etc.)."
        ),
        validate=validation.validate_no_arguments,
        routes=GET_ONLY,
        usage="Get location lookup statistics",
    ),
    Operation(
        name="get_health",
        endpoint="health",
        description="Check API health status and availability.",
        validate=validation.validate_no_arguments,
        routes=GET_ONLY,
        usage="Health check",
    ),
)

OPERATIONS_BY_NAME: dict[str, Operation] = {op.name: op for op in OPERATIONS}
OPERATIONS_BY_ENDPOINT: dict[str, Operation] = {op.endpoint: op for op in OPERATIONS}
