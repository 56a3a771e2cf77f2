"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel
from yarl import URL

from ...config import API_PATH_PREFIX
from ...core.enums import HttpMethod
from ...core.exceptions import InvalidArgumentError
from ...core.validation import require
from .adapters import ResponseAdapter, VoidAdapter
from .request import EmptyBodyRequest, Request, Transport, VoidRequest, join_path

T = TypeVar("T")


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: HttpMethod
    # Segments after the api/v2 prefix; each one is percent-encoded separately
    build_path: Callable[[dict[str, Any]], tuple[str, ...]]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    # Whole body (set_body) and named body fields (add_parameter) are exclusive
    build_body: Callable[[dict[str, Any]], BaseModel | Mapping[str, Any]] | None = None
    build_parameters: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    empty_body: bool = False
    # Params that must be present and non-empty, checked before the URL is built
    required: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.build_body is not None and self.build_parameters is not None:
            raise InvalidArgumentError(
                f"Endpoint {self.id!r} cannot declare both build_body and build_parameters"
            )
        if self.empty_body and (self.build_body or self.build_parameters):
            raise InvalidArgumentError(f"Endpoint {self.id!r} is declared with an empty body")


class RestRunner:
    def __init__(self, transport: Transport, base_url: URL) -> None:
        self._t = transport
        self._base_url = base_url

    @property
    def base_url(self) -> URL:
        return self._base_url

    def prepare(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter[T],
        params: dict[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> Request[T]:
        """Build the request for ``spec`` without sending it."""
        for name in spec.required:
            require(params.get(name), name.replace("_", " "))

        url = join_path(self._base_url, *API_PATH_PREFIX, *spec.build_path(params))

        request: Request[Any]
        if spec.empty_body:
            request = EmptyBodyRequest(self._t, spec.method, url, adapter, headers=headers)
        elif isinstance(adapter, VoidAdapter):
            request = VoidRequest(self._t, spec.method, url, adapter, headers=headers)
        else:
            request = Request(self._t, spec.method, url, adapter, headers=headers)

        if spec.build_query:
            for name, value in spec.build_query(params).items():
                request.add_query_parameter(name, value)
        if spec.build_body:
            request.set_body(spec.build_body(params))
        if spec.build_parameters:
            request.add_parameters(spec.build_parameters(params))
        return request
