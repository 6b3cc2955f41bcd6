"""
HTTP dispatcher for the REST surface.

ParsePath -> MatchMethodAndEndpoint -> (RootDocs | Validate -> Invoke) -> Serialize.
Framework-free so it can be driven by FastAPI or called directly.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

from ..constants import API_PREFIX, EnvVar, ErrorMessages, QuantaRouteConfig, ServerConfig
from ..core.errors import (
    AuthenticationError,
    GeocoderError,
    OperationNotImplementedError,
    RateLimitError,
    UnknownOperationError,
    ValidationError,
)
from ..core.gateway import Gateway
from ..core.operations import OPERATIONS, OPERATIONS_BY_ENDPOINT, HttpRoute, Operation
from ..models.responses import (
    ApiDocsResponse,
    ApiResponse,
    AuthenticationInfo,
    NotFoundResponse,
    NotImplementedResponse,
    to_payload,
)

logger = logging.getLogger(__name__)

ROOT_ENDPOINT = f"GET {API_PREFIX}"
NOT_IMPLEMENTED_SUFFIX = " (NOT YET IMPLEMENTED)"


@dataclass
class HttpResult:
    """Status code plus JSON payload; ``payload`` is None for an empty body."""

    status_code: int
    payload: dict | None = None


def parse_path(path: str | Sequence[str] | None = None, url: str | None = None) -> list[str]:
    """Split the request path into segments below the /api prefix.

    Args:
        path: Structured path parameter, either "a/b" or ["a", "b"]
        url: Raw request URL, used when ``path`` yields nothing

    Returns:
        Non-empty path segments; the first one is the endpoint
    """
    if isinstance(path, str):
        segments = [s for s in path.split("/") if s]
    elif path:
        segments = [s for s in path if s]
    else:
        segments = []

    if not segments and url:
        url_path = urlsplit(url).path
        if url_path == API_PREFIX or url_path.startswith(API_PREFIX + "/"):
            url_path = url_path[len(API_PREFIX) :]
        segments = [s for s in url_path.split("/") if s]
    return segments


def extract_arguments(route: HttpRoute, query: Mapping[str, str], body: Any) -> dict:
    """Build the raw argument mapping for a route from its query string or body.

    Raises:
        ValidationError: If an integer query parameter does not parse
    """
    if route.source == "body":
        return dict(body) if isinstance(body, dict) else {}
    if route.source == "query":
        arguments: dict[str, Any] = {}
        for param, name in route.query_fields:
            value = query.get(param)
            if value is None or value == "":
                continue
            if name in route.integer_fields:
                try:
                    value = int(value)
                except ValueError as e:
                    raise ValidationError(ErrorMessages.FIELD_NOT_INTEGER.format(name)) from e
            arguments[name] = value
        return arguments
    return {}


def status_for_error(error: Exception) -> int:
    """Map a failure onto an HTTP status code."""
    if isinstance(error, AuthenticationError):
        return 401
    if isinstance(error, RateLimitError):
        return 429
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, UnknownOperationError):
        return 404
    if isinstance(error, OperationNotImplementedError):
        return 501
    message = str(error)
    if "required" in message or "must be" in message:
        return 400
    return 500


def _route_label(route: HttpRoute, endpoint: str) -> str:
    return f"{route.method} {API_PREFIX}/{endpoint}{route.example}"


def _labelled_routes() -> list[tuple[str, Operation]]:
    """(METHOD /path label, operation) pairs, GET routes first."""
    routes = [(route, op) for op in OPERATIONS for route in op.routes]
    routes.sort(key=lambda item: item[0].method != "GET")
    return [(_route_label(route, op.endpoint), op) for route, op in routes]


def endpoint_descriptions() -> dict[str, str]:
    endpoints = {ROOT_ENDPOINT: "Get API information (this endpoint)"}
    for label, op in _labelled_routes():
        endpoints[label] = op.usage
    return endpoints


def available_endpoints() -> list[str]:
    """Endpoint list for 404 responses, flagging disabled operations."""
    labels = [ROOT_ENDPOINT]
    for label, op in _labelled_routes():
        labels.append(label if op.enabled else label + NOT_IMPLEMENTED_SUFFIX)
    return labels


def api_documentation() -> ApiDocsResponse:
    return ApiDocsResponse(
        message="QuantaRoute Geocoder REST API",
        version=ServerConfig.VERSION,
        documentation=ServerConfig.DOCUMENTATION_URL,
        authentication=AuthenticationInfo(
            header=QuantaRouteConfig.API_KEY_HEADER,
            env=EnvVar.QUANTAROUTE_API_KEY,
            note=(
                f"API key can be provided via {QuantaRouteConfig.API_KEY_HEADER} header or "
                f"{EnvVar.QUANTAROUTE_API_KEY} environment variable. Get your API key from "
                f"{ServerConfig.API_KEY_URL}"
            ),
            get_api_key=ServerConfig.API_KEY_URL,
        ),
        endpoints=endpoint_descriptions(),
    )


class HttpDispatcher:
    """Routes REST requests onto gateway operations."""

    def __init__(self, gateway: Gateway):
        self._gateway = gateway

    async def dispatch(
        self,
        method: str,
        segments: Sequence[str],
        query: Mapping[str, str] | None = None,
        body: Any = None,
        api_key: str | None = None,
    ) -> HttpResult:
        """Handle one REST request.

        Args:
            method: HTTP method
            segments: Path segments below /api (see parse_path)
            query: Query-string parameters
            body: Decoded JSON body, if any
            api_key: Value of the x-api-key header, if any

        Returns:
            HttpResult with status code and JSON payload
        """
        method = method.upper()
        if method == "OPTIONS":
            return HttpResult(200)

        endpoint = segments[0] if segments else ""
        logger.debug("Dispatching %s /%s", method, endpoint)

        if not endpoint and method == "GET":
            return HttpResult(200, to_payload(api_documentation()))

        operation = OPERATIONS_BY_ENDPOINT.get(endpoint)
        route = operation.route_for(method) if operation else None
        if operation is None or route is None:
            return self._not_found(endpoint, method)

        try:
            arguments = extract_arguments(route, query or {}, body)
            result = await self._gateway.execute(operation.name, arguments, api_key=api_key)
        except OperationNotImplementedError as e:
            return HttpResult(
                status_for_error(e),
                to_payload(
                    NotImplementedResponse(
                        message=str(e),
                        endpoint=operation.endpoint,
                        note=ErrorMessages.NOT_IMPLEMENTED_NOTE,
                    )
                ),
            )
        except GeocoderError as e:
            logger.error("%s /%s failed: %s", method, endpoint, e)
            return self.error_result(e)
        except Exception as e:
            logger.exception("%s /%s failed unexpectedly", method, endpoint)
            return self.error_result(e)

        return HttpResult(200, ApiResponse(success=True, data=result).to_payload())

    @staticmethod
    def error_result(error: Exception) -> HttpResult:
        message = str(error) or ErrorMessages.INTERNAL
        return HttpResult(
            status_for_error(error), ApiResponse(success=False, error=message).to_payload()
        )

    @staticmethod
    def _not_found(endpoint: str, method: str) -> HttpResult:
        response = NotFoundResponse(
            error=ErrorMessages.ENDPOINT_NOT_FOUND.format(endpoint),
            endpoint=endpoint or "(root)",
            method=method,
            available_endpoints=available_endpoints(),
        )
        return HttpResult(404, to_payload(response))
