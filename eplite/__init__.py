"""
eplite - Python client for the Etherpad HTTP API.

Dispatches named API operations over HTTP and maps the response envelope
to results or typed errors.
"""

__version__ = "0.1.0"

from ._client import DEFAULT_API_VERSION, DEFAULT_BASE_URL, EPLite
from ._exceptions import (
    APIError,
    ConfigurationError,
    EPLiteError,
    InternalError,
    InvalidParametersError,
    MalformedResponseError,
    PermissionDeniedError,
    TransportError,
    UnknownOperationError,
)
from ._operations import MUTATING, OPERATIONS, Operation, classify
from ._types import AttributePool, ChatMessage, DiffHTML, Endpoint, SessionInfo, Stats, is_secure

__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_BASE_URL",
    "MUTATING",
    "OPERATIONS",
    # Errors
    "APIError",
    # Models
    "AttributePool",
    "ChatMessage",
    "ConfigurationError",
    "DiffHTML",
    # Main client
    "EPLite",
    "EPLiteError",
    "Endpoint",
    "InternalError",
    "InvalidParametersError",
    "MalformedResponseError",
    "Operation",
    "PermissionDeniedError",
    "SessionInfo",
    "Stats",
    "TransportError",
    "UnknownOperationError",
    "classify",
    "is_secure",
]
