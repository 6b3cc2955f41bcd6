"""
Tool-call dispatcher.

Lists the operations with their declared input schemas and invokes one by
name, serializing the result as formatted JSON text. Every failure leaves as
a ToolCallError carrying a JSON-RPC error code.
"""

import json
import logging
from typing import Any

from ..constants import ErrorMessages, JsonRpcErrorCode
from ..core.errors import (
    AuthenticationError,
    GeocoderError,
    OperationNotImplementedError,
    UnknownOperationError,
    ValidationError,
)
from ..core.gateway import Gateway
from ..models.responses import TextContent, ToolCallResult, ToolDefinition

logger = logging.getLogger(__name__)


class ToolCallError(Exception):
    """Structured tool failure with a JSON-RPC error code."""

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


def error_code_for(error: GeocoderError) -> int:
    """Map a gateway failure onto a JSON-RPC error code."""
    if isinstance(error, ValidationError):
        return JsonRpcErrorCode.INVALID_PARAMS
    if isinstance(error, AuthenticationError):
        return JsonRpcErrorCode.INVALID_REQUEST
    if isinstance(error, UnknownOperationError):
        return JsonRpcErrorCode.METHOD_NOT_FOUND
    return JsonRpcErrorCode.INTERNAL_ERROR


class ToolDispatcher:
    """Exposes gateway operations as named tools."""

    def __init__(self, gateway: Gateway):
        self._gateway = gateway

    def list_tools(self) -> list[ToolDefinition]:
        """Every operation with its declared argument schema."""
        return [
            ToolDefinition(
                name=op.name,
                description=op.description,
                input_schema=op.input_schema,
            )
            for op in self._gateway.operations
        ]

    async def call_tool(self, name: str, arguments: Any) -> ToolCallResult:
        """Invoke one tool.

        Args:
            name: snake_case tool name
            arguments: Argument object; anything other than a dict is rejected

        Returns:
            ToolCallResult with the payload as indented JSON text

        Raises:
            ToolCallError: On any failure, with the matching JSON-RPC code
        """
        if not isinstance(arguments, dict):
            raise ToolCallError(JsonRpcErrorCode.INVALID_PARAMS, ErrorMessages.INVALID_ARGUMENTS)

        try:
            result = await self._gateway.execute(name, arguments)
        except UnknownOperationError as e:
            raise ToolCallError(
                JsonRpcErrorCode.METHOD_NOT_FOUND, ErrorMessages.UNKNOWN_TOOL.format(name)
            ) from e
        except OperationNotImplementedError as e:
            logger.warning("%s called but is not implemented", name)
            raise ToolCallError(JsonRpcErrorCode.INTERNAL_ERROR, str(e)) from e
        except GeocoderError as e:
            logger.error("%s failed: %s", name, e)
            raise ToolCallError(error_code_for(e), str(e)) from e
        except Exception as e:
            logger.exception("%s failed unexpectedly", name)
            raise ToolCallError(
                JsonRpcErrorCode.INTERNAL_ERROR, ErrorMessages.TOOL_FAILED.format(e)
            ) from e

        text = json.dumps(result, indent=2, ensure_ascii=False)
        return ToolCallResult(content=[TextContent(text=text)])
