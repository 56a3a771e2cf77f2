"""Core components."""

from .enums import HttpMethod
from .exceptions import (
    ApiStatusError,
    InvalidArgumentError,
    ManagementError,
    RequestExecutionError,
    ResponseDecodingError,
    ResponseError,
)
from .validation import require

__all__ = [
    "HttpMethod",
    "ManagementError",
    "InvalidArgumentError",
    "RequestExecutionError",
    "ResponseError",
    "ApiStatusError",
    "ResponseDecodingError",
    "require",
]
