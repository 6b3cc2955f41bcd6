"""
Per-operation input contracts.

Each ``validate_*`` function takes the raw argument mapping of one operation
and returns the normalized keyword arguments for the matching client method,
or raises ValidationError on the first violated rule.
"""

import math
from typing import Any

from ..constants import BATCH_MAX_ITEMS, ErrorMessages, QuantaRouteConfig
from .errors import ValidationError

GEOCODE_OPTIONAL_FIELDS = ("city", "state", "pincode", "country")


# --- Field rules ---


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def require_string(arguments: dict, field: str) -> str:
    """Required non-empty string, stripped of surrounding whitespace."""
    value = arguments.get(field)
    if value is None or value == "":
        raise ValidationError(ErrorMessages.FIELD_REQUIRED.format(field))
    if not isinstance(value, str):
        raise ValidationError(ErrorMessages.FIELD_NOT_STRING.format(field))
    value = value.strip()
    if not value:
        raise ValidationError(ErrorMessages.FIELD_REQUIRED.format(field))
    return value


def optional_string(arguments: dict, field: str) -> str | None:
    value = arguments.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(ErrorMessages.FIELD_NOT_STRING.format(field))
    return value


def require_number(arguments: dict, field: str) -> float:
    """Required JSON number. Booleans and numeric strings are rejected."""
    value = arguments.get(field)
    if value is None:
        raise ValidationError(ErrorMessages.FIELD_REQUIRED.format(field))
    if not _is_number(value):
        raise ValidationError(ErrorMessages.FIELD_NOT_NUMBER.format(field))
    return value


def optional_positive_int(arguments: dict, field: str, default: int) -> int:
    value = arguments.get(field)
    if value is None:
        return default
    if not _is_number(value) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(ErrorMessages.FIELD_NOT_INTEGER.format(field))
    if value < 1:
        raise ValidationError(ErrorMessages.FIELD_NOT_POSITIVE.format(field))
    return int(value)


def check_coordinates(lat: float, lon: float) -> None:
    """Inclusive WGS84 bounds. NaN fails both comparisons and is rejected."""
    if not (-90 <= lat <= 90):
        raise ValidationError(ErrorMessages.INVALID_LAT.format(lat))
    if not (-180 <= lon <= 180):
        raise ValidationError(ErrorMessages.INVALID_LON.format(lon))


def require_coordinates(arguments: dict) -> tuple[float, float]:
    latitude = require_number(arguments, "latitude")
    longitude = require_number(arguments, "longitude")
    check_coordinates(latitude, longitude)
    return latitude, longitude


def require_batch(arguments: dict, field: str) -> list:
    """Non-empty array of at most BATCH_MAX_ITEMS entries."""
    items = arguments.get(field)
    if items is None:
        raise ValidationError(ErrorMessages.FIELD_REQUIRED.format(field))
    if not isinstance(items, list) or not items:
        raise ValidationError(ErrorMessages.BATCH_EMPTY.format(field))
    if len(items) > BATCH_MAX_ITEMS:
        raise ValidationError(
            ErrorMessages.BATCH_TOO_LARGE.format(BATCH_MAX_ITEMS, field, len(items))
        )
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValidationError(ErrorMessages.BATCH_ITEM_NOT_OBJECT.format(field, index))
    return items


# --- Operation rules ---


def validate_geocode(arguments: dict) -> dict:
    params: dict[str, Any] = {"address": require_string(arguments, "address")}
    for field in GEOCODE_OPTIONAL_FIELDS:
        value = optional_string(arguments, field)
        if value:
            params[field] = value
    return params


def validate_digipin(arguments: dict) -> dict:
    """Shared by reverse geocoding, DigiPin validation and DigiPin lookup."""
    return {"digipin": require_string(arguments, "digipin")}


def validate_coordinates(arguments: dict) -> dict:
    latitude, longitude = require_coordinates(arguments)
    return {"latitude": latitude, "longitude": longitude}


def validate_batch_geocode(arguments: dict) -> dict:
    addresses = require_batch(arguments, "addresses")
    for index, entry in enumerate(addresses):
        address = entry.get("address")
        if not isinstance(address, str) or not address.strip():
            raise ValidationError(ErrorMessages.BATCH_ADDRESS_REQUIRED.format(index))
    return {"addresses": addresses}


def _is_valid_location(entry: dict) -> bool:
    latitude, longitude = entry.get("latitude"), entry.get("longitude")
    if _is_number(latitude) and _is_number(longitude):
        return -90 <= latitude <= 90 and -180 <= longitude <= 180
    digipin = entry.get("digipin")
    return isinstance(digipin, str) and bool(digipin.strip())


def validate_batch_location_lookup(arguments: dict) -> dict:
    locations = require_batch(arguments, "locations")
    for index, entry in enumerate(locations):
        if not _is_valid_location(entry):
            raise ValidationError(ErrorMessages.BATCH_LOCATION_INVALID.format(index))
    return {"locations": locations}


def validate_autocomplete(arguments: dict) -> dict:
    # Length is checked on the raw value; "  a" is three characters.
    query = arguments.get("query")
    if query is None or query == "":
        raise ValidationError(ErrorMessages.FIELD_REQUIRED.format("query"))
    if not isinstance(query, str):
        raise ValidationError(ErrorMessages.FIELD_NOT_STRING.format("query"))
    if len(query) < QuantaRouteConfig.AUTOCOMPLETE_MIN_QUERY_LENGTH:
        raise ValidationError(
            ErrorMessages.QUERY_TOO_SHORT.format(QuantaRouteConfig.AUTOCOMPLETE_MIN_QUERY_LENGTH)
        )
    limit = optional_positive_int(
        arguments, "limit", QuantaRouteConfig.AUTOCOMPLETE_DEFAULT_LIMIT
    )
    return {"query": query, "limit": limit}


def validate_nearby_boundaries(arguments: dict) -> dict:
    latitude, longitude = require_coordinates(arguments)
    radius_km = arguments.get("radius_km")
    if radius_km is None:
        radius_km = QuantaRouteConfig.NEARBY_DEFAULT_RADIUS_KM
    elif not _is_number(radius_km) or math.isnan(radius_km):
        raise ValidationError(ErrorMessages.FIELD_NOT_NUMBER.format("radius_km"))
    if not (0 < radius_km <= QuantaRouteConfig.NEARBY_MAX_RADIUS_KM):
        raise ValidationError(
            ErrorMessages.RADIUS_OUT_OF_RANGE.format(
                QuantaRouteConfig.NEARBY_MAX_RADIUS_KM, radius_km
            )
        )
    limit = optional_positive_int(arguments, "limit", QuantaRouteConfig.NEARBY_DEFAULT_LIMIT)
    return {
        "latitude": latitude,
        "longitude": longitude,
        "radius_km": radius_km,
        "limit": limit,
    }


def validate_no_arguments(arguments: dict) -> dict:
    return {}
