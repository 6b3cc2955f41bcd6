"""
Error taxonomy shared by the client, the validation rules and both dispatchers.
"""


class GeocoderError(Exception):
    """Base class for every failure surfaced by the gateway."""


class ValidationError(GeocoderError, ValueError):
    """Input violated an operation's contract. Raised before any network call."""


class AuthenticationError(GeocoderError):
    """No credential available, or the backend answered 401."""


class RateLimitError(GeocoderError):
    """The backend answered 429."""


class BackendError(GeocoderError):
    """The backend answered with any other non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(GeocoderError):
    """No response was received (connect failure, timeout, protocol error)."""


class OperationNotImplementedError(GeocoderError):
    """The operation exists but is disabled until the backend supports it."""

    def __init__(self, message: str, operation: str):
        super().__init__(message)
        self.operation = operation


class UnknownOperationError(GeocoderError, LookupError):
    """The requested operation, endpoint or tool name is not recognised."""

    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.name = name
