"""Typed error hierarchy mapping Etherpad envelope codes and client-side failures."""


class EPLiteError(Exception):
    """Base exception for all eplite errors."""

    def __init__(
        self,
        message: str,
        code: int | None = None,
        operation: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.operation = operation
        self.status_code = status_code


class ConfigurationError(EPLiteError):
    """Client constructed with a missing API key or an unusable base URL."""


class TransportError(EPLiteError):
    """Connection-level failure, or a response body that is not JSON."""


class MalformedResponseError(EPLiteError):
    """JSON parsed but did not have the expected envelope or data shape."""


class APIError(EPLiteError):
    """Non-zero envelope code reported by the server."""


class InvalidParametersError(APIError):
    """code 1: malformed or missing parameter."""


class InternalError(APIError):
    """code 2: server-side failure."""


class UnknownOperationError(APIError):
    """code 3: operation name not recognized (also raised client-side)."""


class PermissionDeniedError(APIError):
    """code 4: API key invalid or operation not permitted."""


# Map envelope codes to exception classes.
CODE_MAP: dict[int, type[APIError]] = {
    1: InvalidParametersError,
    2: InternalError,
    3: UnknownOperationError,
    4: PermissionDeniedError,
}
