"""
Gateway: the dispatch core shared by the REST and tool-call front-ends.

Resolves an operation by name, checks it is enabled, applies its validation
rule, resolves the credential and performs exactly one client call.
"""

import logging
from collections.abc import Callable
from typing import Any

import httpx

from ..config import GatewaySettings
from ..constants import ErrorMessages
from .client import QuantaRouteClient
from .errors import AuthenticationError, OperationNotImplementedError, UnknownOperationError
from .operations import OPERATIONS, OPERATIONS_BY_NAME, Operation

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], QuantaRouteClient]


class Gateway:
    """Central manager for QuantaRoute operations.

    A client is built per call with the resolved API key. By default all
    clients share one lazily created httpx.AsyncClient; pass
    ``client_factory`` to substitute another implementation.
    """

    def __init__(
        self,
        settings: GatewaySettings | None = None,
        client_factory: ClientFactory | None = None,
    ):
        self._settings = settings or GatewaySettings()
        self._client_factory = client_factory or self._default_client
        self._http_client: httpx.AsyncClient | None = None

    @property
    def settings(self) -> GatewaySettings:
        return self._settings

    @property
    def operations(self) -> tuple[Operation, ...]:
        return OPERATIONS

    def _default_client(self, api_key: str) -> QuantaRouteClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._settings.timeout)
        return QuantaRouteClient(
            api_key,
            base_url=self._settings.base_url,
            timeout=self._settings.timeout,
            http_client=self._http_client,
        )

    @staticmethod
    def get_operation(name: str) -> Operation:
        """Look up an operation by its snake_case name.

        Raises:
            UnknownOperationError: If the name is not in the operation table
        """
        operation = OPERATIONS_BY_NAME.get(name)
        if operation is None:
            raise UnknownOperationError(ErrorMessages.UNKNOWN_OPERATION.format(name), name)
        return operation

    def resolve_api_key(self, supplied: str | None = None) -> str:
        """Request-supplied key wins over the configured fallback.

        Raises:
            AuthenticationError: If neither is present
        """
        if supplied:
            return supplied
        if self._settings.api_key:
            return self._settings.api_key
        raise AuthenticationError(ErrorMessages.API_KEY_REQUIRED)

    async def execute(
        self,
        name: str,
        arguments: dict | None = None,
        api_key: str | None = None,
    ) -> Any:
        """Run one operation end to end.

        Args:
            name: Operation name (e.g. "geocode")
            arguments: Raw argument mapping from the transport
            api_key: Credential supplied with the request, if any

        Returns:
            The backend payload, unwrapped but otherwise untouched

        Raises:
            UnknownOperationError: Name not in the operation table
            OperationNotImplementedError: Operation is disabled
            ValidationError: Arguments violate the operation's contract
            AuthenticationError: No credential, or backend 401
            RateLimitError, BackendError, TransportError: Backend call failed
        """
        operation = self.get_operation(name)
        if not operation.enabled:
            raise OperationNotImplementedError(
                ErrorMessages.NOT_IMPLEMENTED.format(operation.endpoint), operation.name
            )

        params = operation.validate(arguments or {})
        key = self.resolve_api_key(api_key)

        logger.debug("Executing %s", operation.name)
        client = self._client_factory(key)
        try:
            return await getattr(client, operation.name)(**params)
        finally:
            await client.close()

    async def close(self) -> None:
        """Close the shared httpx client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
