"""
Response models for quantaroute-geocoder.

REST envelopes and tool-call results are Pydantic models so both transports
serialize the same payload consistently.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


def to_payload(model: BaseModel) -> dict:
    """Dump a response model for JSON transport.

    None-valued fields are dropped and fields use their wire aliases
    (e.g. ``availableEndpoints``).
    """
    return model.model_dump(by_alias=True, exclude_none=True)


class ApiResponse(BaseModel):
    """Canonical REST envelope."""

    model_config = ConfigDict(extra="forbid")

    success: bool = Field(..., description="Whether the operation succeeded")
    data: Any = Field(None, description="Backend payload, passed through")
    error: str | None = Field(None, description="Error message when success is false")

    def to_payload(self) -> dict:
        """Success carries only ``data``, failure only ``error``.

        ``data`` is emitted verbatim, including any null members.
        """
        if self.success:
            return self.model_dump(include={"success", "data"})
        return self.model_dump(include={"success", "error"})


class NotFoundResponse(BaseModel):
    """REST response for an unknown endpoint or method."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    success: Literal[False] = False
    error: str = Field(..., description="Which endpoint was not found")
    message: str = Field("See GET /api for available endpoints", description="Hint")
    endpoint: str = Field(..., description="Requested endpoint, or (root)")
    method: str = Field(..., description="Requested HTTP method")
    available_endpoints: list[str] = Field(
        ..., alias="availableEndpoints", description="Every known METHOD /path"
    )


class NotImplementedResponse(BaseModel):
    """REST response for a disabled operation."""

    model_config = ConfigDict(extra="forbid")

    success: Literal[False] = False
    error: str = "Not Implemented"
    message: str = Field(..., description="Why the operation is unavailable")
    endpoint: str = Field(..., description="Requested endpoint")
    status: str = "experimental"
    note: str = Field(..., description="What must happen before it is available")


class AuthenticationInfo(BaseModel):
    """How to supply an API key."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    method: str = "API Key"
    header: str = Field(..., description="Request header carrying the key")
    env: str = Field(..., description="Environment variable used as fallback")
    note: str = Field(..., description="Human-readable explanation")
    get_api_key: str = Field(..., alias="getApiKey", description="Where to obtain a key")


class ApiDocsResponse(BaseModel):
    """Static documentation served at GET /api."""

    model_config = ConfigDict(extra="forbid")

    success: Literal[True] = True
    message: str = Field(..., description="API title")
    version: str = Field(..., description="Gateway version")
    documentation: str = Field(..., description="Documentation URL")
    authentication: AuthenticationInfo
    endpoints: dict[str, str] = Field(..., description="METHOD /path -> description")


class TextContent(BaseModel):
    """A single text block of a tool result."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["text"] = "text"
    text: str = Field(..., description="Serialized JSON payload")


class ToolCallResult(BaseModel):
    """Tool-call envelope: the backend payload as formatted JSON text."""

    model_config = ConfigDict(extra="forbid")

    content: list[TextContent] = Field(..., description="Result content blocks")

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)


class ToolDefinition(BaseModel):
    """A tool as advertised by the list operation."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(..., description="snake_case tool name")
    description: str = Field(..., description="What the tool does")
    input_schema: dict[str, Any] = Field(
        ..., alias="inputSchema", description="JSON Schema of the argument object"
    )
