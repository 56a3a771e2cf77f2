"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..models.error import ApiErrorBody


class ManagementError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidArgumentError(ManagementError, ValueError):
    """A required argument is missing or malformed.

    Raised client-side before any network I/O happens.
    """

    pass


class RequestExecutionError(ManagementError):
    """Transport-level failure (DNS, refused connection, TLS, timeout)."""

    def __init__(self, message: str, *, method: str | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class ResponseError(ManagementError):
    """The server answered but the response could not be turned into a result."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiStatusError(ResponseError):
    """Server responded with a non-2xx status.

    ``body`` holds the parsed JSON payload when the server sent one, the raw
    text otherwise. ``error`` is the typed view of the payload when it has the
    usual ``statusCode``/``error``/``message`` shape.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Any = None,
        error: ApiErrorBody | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.body = body
        self.error = error

    @property
    def description(self) -> str | None:
        if self.error is not None:
            return self.error.message
        return None


class ResponseDecodingError(ResponseError):
    """2xx response whose body does not match the expected shape."""

    def __init__(self, message: str, status_code: int | None = None, raw: str = "") -> None:
        super().__init__(message, status_code=status_code)
        self.raw = raw
