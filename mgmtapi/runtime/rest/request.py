"""Pending requests and their typed execution.

Architecture:
    A PendingRequest accumulates everything one HTTP call needs: method,
    URL, headers, query parameters and at most one body representation.
    Request binds a PendingRequest to a transport and a ResponseAdapter, and
    ``execute()`` performs the exchange and decodes the result.

Design Decisions:
    - One body per request: either ``set_body`` (whole object) or
      ``add_parameter`` (named field map), never both on the same instance
    - Single shot: a request executes once and is discarded afterwards
    - Status first: any non-2xx answer raises ApiStatusError before the
      adapter ever sees the body

See Also:
    - ResponseAdapter: result shapes (object, list, void)
    - RestRunner: builds requests from endpoint specs
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Generic, Protocol, Self, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError
from yarl import URL

from ...core.enums import HttpMethod
from ...core.exceptions import ApiStatusError, InvalidArgumentError
from ...models.error import ApiErrorBody
from .adapters import ResponseAdapter, VoidAdapter
from .http_client import HTTPResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Transport(Protocol):
    """What a request needs from the transport layer."""

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Any = None,
        json_body: Any = None,
        data: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse: ...

    async def release(self) -> None:
        """Free what was opened for the running event loop."""
        ...

    async def close(self) -> None: ...


def join_path(base: URL, *segments: str) -> URL:
    """Append path segments to ``base``, percent-encoding each one.

    A segment containing ``/`` stays a single segment.

    Examples:
        >>> str(join_path(URL("https://t.example.com/"), "api", "v2", "clients"))
        'https://t.example.com/api/v2/clients'
    """
    prefix = base.raw_path.rstrip("/")
    encoded = "/".join(quote(str(s), safe="") for s in segments)
    return base.with_path(f"{prefix}/{encoded}", encoded=True)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, Mapping):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


class PendingRequest:
    """A single HTTP call, built but not yet sent."""

    def __init__(
        self,
        method: HttpMethod | str,
        url: URL | str,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.method = HttpMethod(method)
        self._url = URL(url) if isinstance(url, str) else url
        self._headers: dict[str, str] = {}
        self._query: list[tuple[str, str]] = []
        self._body: Any = None
        self._fields: dict[str, Any] = {}
        for name, value in (headers or {}).items():
            self.add_header(name, value)

    @property
    def url(self) -> URL:
        """Full URL including the query string."""
        if not self._query:
            return self._url
        return self._url.with_query(self._query)

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    @property
    def query_params(self) -> list[tuple[str, str]]:
        return list(self._query)

    @property
    def has_body(self) -> bool:
        return self._body is not None or bool(self._fields)

    @property
    def body(self) -> Any:
        """JSON-ready body, or None when nothing was set."""
        if self._body is not None:
            return _jsonable(self._body)
        if self._fields:
            return {name: _jsonable(value) for name, value in self._fields.items()}
        return None

    def add_header(self, name: str, value: str) -> Self:
        """Set a header, replacing any header with the same name."""
        if not name:
            raise InvalidArgumentError("header name cannot be empty")
        for existing in [k for k in self._headers if k.lower() == name.lower()]:
            del self._headers[existing]
        self._headers[name] = value
        return self

    def add_query_parameter(self, name: str, value: Any) -> Self:
        """Append a query parameter. None is skipped, lists repeat the name."""
        if not name:
            raise InvalidArgumentError("parameter name cannot be empty")
        if value is None:
            return self
        if isinstance(value, (list, tuple)):
            self._query.extend((name, _query_value(v)) for v in value)
        else:
            self._query.append((name, _query_value(value)))
        return self

    def add_parameter(self, name: str, value: Any) -> Self:
        """Add a named parameter.

        GET requests receive it as a query parameter. Any other method
        collects it into the body field map, which cannot be combined with
        ``set_body``.

        Raises:
            InvalidArgumentError: If the name is empty or a whole body was
                already set
        """
        if self.method.sends_query:
            return self.add_query_parameter(name, value)
        if not name:
            raise InvalidArgumentError("parameter name cannot be empty")
        if self._body is not None:
            raise InvalidArgumentError(
                "Cannot add body parameters to a request whose body was set with set_body()"
            )
        self._fields[name] = value
        return self

    def add_parameters(self, values: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> Self:
        items = values.items() if isinstance(values, Mapping) else values
        for name, value in items:
            self.add_parameter(name, value)
        return self

    def set_body(self, body: BaseModel | Mapping[str, Any]) -> Self:
        """Use ``body`` as the whole request payload.

        Raises:
            InvalidArgumentError: If body is None, or a body (whole or field
                map) is already present
        """
        if body is None:
            raise InvalidArgumentError("'body' cannot be null!")
        if self._body is not None:
            raise InvalidArgumentError("Request body was already set")
        if self._fields:
            raise InvalidArgumentError(
                "Cannot set the body of a request that already has body parameters"
            )
        self._body = body if isinstance(body, BaseModel) else dict(body)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.method.value} {self.url})"


class Request(PendingRequest, Generic[T]):
    """A pending request bound to a transport and a result shape."""

    def __init__(
        self,
        transport: Transport,
        method: HttpMethod | str,
        url: URL | str,
        adapter: ResponseAdapter[T],
        *,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(method, url, headers=headers)
        self._transport = transport
        self.adapter = adapter
        self._executed = False

    def _payload(self) -> tuple[Any, bytes | None]:
        """Return ``(json_body, raw_data)`` to hand to the transport."""
        return self.body, None

    async def execute(self) -> T:
        """Send the request and decode the response.

        Returns:
            The decoded result, shaped by this request's adapter

        Raises:
            InvalidArgumentError: If the request was already executed
            RequestExecutionError: On transport failures
            ApiStatusError: If the server answered with a non-2xx status
            ResponseDecodingError: If a 2xx body does not match the shape
        """
        if self._executed:
            raise InvalidArgumentError("Request was already executed")
        self._executed = True

        json_body, data = self._payload()
        response = await self._transport.request(
            self.method.value,
            str(self.url),
            json_body=json_body,
            data=data,
            headers=self.headers,
        )
        if not response.ok:
            raise _status_error(response)
        return self.adapter.decode(response)

    def execute_blocking(self) -> T:
        """Run ``execute()`` on a fresh event loop.

        Whatever the transport opened for that loop is released afterwards.
        The transport itself stays open, so blocking calls from several
        threads can share one client. Do not call this from a running loop.
        """

        async def _run() -> T:
            try:
                return await self.execute()
            finally:
                await self._transport.release()

        return asyncio.run(_run())


class EmptyBodyRequest(Request[T]):
    """Request that always sends a zero-length body (e.g. POST actions)."""

    def _payload(self) -> tuple[Any, bytes | None]:
        return None, b""

    def add_parameter(self, name: str, value: Any) -> Self:
        if self.method.sends_query:
            return super().add_parameter(name, value)
        raise InvalidArgumentError(f"{type(self).__name__} cannot carry body parameters")

    def set_body(self, body: BaseModel | Mapping[str, Any]) -> Self:
        raise InvalidArgumentError(f"{type(self).__name__} cannot carry a body")


class VoidRequest(Request[None]):
    """Request whose success depends only on the status code.

    It may still send a body, e.g. the email of a user to delete.
    """

    def __init__(
        self,
        transport: Transport,
        method: HttpMethod | str,
        url: URL | str,
        adapter: ResponseAdapter[None] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(transport, method, url, adapter or VoidAdapter(), headers=headers)


def _status_error(response: HTTPResponse) -> ApiStatusError:
    body: Any = response.text
    error: ApiErrorBody | None = None
    try:
        body = json.loads(response.text) if response.text else None
    except ValueError:
        body = response.text
    if isinstance(body, dict):
        try:
            error = ApiErrorBody.model_validate(body)
        except ValidationError:
            error = None

    if error is not None and error.message:
        message = error.message
    elif isinstance(body, str) and body:
        message = body
    else:
        message = f"Request failed with status code {response.status}"

    logger.debug("API error response", extra={"status": response.status, "error": message})
    return ApiStatusError(message, status_code=response.status, body=body, error=error)
