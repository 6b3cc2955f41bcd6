"""
FastAPI application exposing the REST surface under /api.

A single catch-all route hands every request to the HttpDispatcher and
attaches the CORS headers to whatever it returns.
"""

import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from ..config import GatewaySettings
from ..constants import API_PREFIX, CorsConfig, ErrorMessages, QuantaRouteConfig, ServerConfig
from ..core.errors import ValidationError
from ..core.gateway import Gateway
from .dispatcher import HttpDispatcher, HttpResult, parse_path

logger = logging.getLogger(__name__)

ACCEPTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _to_response(result: HttpResult) -> Response:
    if result.payload is None:
        return Response(status_code=result.status_code, headers=CorsConfig.HEADERS)
    return JSONResponse(result.payload, status_code=result.status_code, headers=CorsConfig.HEADERS)


async def _read_body(request: Request):
    """Decode a JSON request body; an empty body decodes to None."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        raise ValidationError(ErrorMessages.INVALID_JSON) from e


def create_app(gateway: Gateway | None = None) -> FastAPI:
    """Build the REST application.

    Args:
        gateway: Shared dispatch core; built from the environment when omitted.
            The `rest` server mode passes the gateway async_server built at
            import time, so the REST app and the MCP tools share one instance.

    Returns:
        FastAPI app serving /api and /api/{path}
    """
    gateway = gateway or Gateway(GatewaySettings.from_env())
    dispatcher = HttpDispatcher(gateway)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await gateway.close()

    app = FastAPI(
        title=ServerConfig.NAME,
        version=ServerConfig.VERSION,
        description=ServerConfig.DESCRIPTION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.gateway = gateway
    app.state.dispatcher = dispatcher

    @app.api_route(API_PREFIX, methods=ACCEPTED_METHODS)
    @app.api_route(API_PREFIX + "/{path:path}", methods=ACCEPTED_METHODS)
    async def handle(request: Request) -> Response:
        segments = parse_path(request.path_params.get("path"), str(request.url))
        body = None
        if request.method == "POST":
            try:
                body = await _read_body(request)
            except ValidationError as e:
                return _to_response(HttpDispatcher.error_result(e))

        result = await dispatcher.dispatch(
            request.method,
            segments,
            query=dict(request.query_params),
            body=body,
            api_key=request.headers.get(QuantaRouteConfig.API_KEY_HEADER),
        )
        return _to_response(result)

    return app
