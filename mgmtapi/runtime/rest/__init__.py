"""REST runtime abstractions."""

from .adapters import ModelAdapter, ModelListAdapter, ResponseAdapter, VoidAdapter
from .http_client import HTTPClient, HTTPResponse
from .request import (
    EmptyBodyRequest,
    PendingRequest,
    Request,
    Transport,
    VoidRequest,
    join_path,
)
from .runner import RestEndpointSpec, RestRunner
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "RESTTransport",
    "Transport",
    "PendingRequest",
    "Request",
    "EmptyBodyRequest",
    "VoidRequest",
    "join_path",
    "ResponseAdapter",
    "ModelAdapter",
    "ModelListAdapter",
    "VoidAdapter",
    "RestEndpointSpec",
    "RestRunner",
]
