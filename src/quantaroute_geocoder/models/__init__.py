"""Response models for quantaroute-geocoder."""

from .responses import (
    ApiDocsResponse,
    ApiResponse,
    AuthenticationInfo,
    NotFoundResponse,
    NotImplementedResponse,
    TextContent,
    ToolCallResult,
    ToolDefinition,
    to_payload,
)

__all__ = [
    "ApiDocsResponse",
    "ApiResponse",
    "AuthenticationInfo",
    "NotFoundResponse",
    "NotImplementedResponse",
    "TextContent",
    "ToolCallResult",
    "ToolDefinition",
    "to_payload",
]
