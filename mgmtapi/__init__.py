"""Typed async client for the tenant management REST API."""

from .api import ManagementAPI
from .config import TransportConfig, build_base_url
from .core import (
    ApiStatusError,
    HttpMethod,
    InvalidArgumentError,
    ManagementError,
    RequestExecutionError,
    ResponseDecodingError,
    ResponseError,
)
from .models import (
    ApiErrorBody,
    Client,
    ClientGrant,
    Connection,
    EncryptionKey,
    JWTConfiguration,
)
from .runtime.rest import (
    EmptyBodyRequest,
    PendingRequest,
    Request,
    RESTTransport,
    VoidRequest,
)

__version__ = "0.1.0"

__all__ = [
    "ManagementAPI",
    "TransportConfig",
    "build_base_url",
    "HttpMethod",
    # Errors
    "ManagementError",
    "InvalidArgumentError",
    "RequestExecutionError",
    "ResponseError",
    "ApiStatusError",
    "ResponseDecodingError",
    # Models
    "Client",
    "ClientGrant",
    "Connection",
    "EncryptionKey",
    "JWTConfiguration",
    "ApiErrorBody",
    # Requests
    "PendingRequest",
    "Request",
    "EmptyBodyRequest",
    "VoidRequest",
    "RESTTransport",
]
