"""REST transport wrapping the HTTP client."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...config import TransportConfig
from .http_client import HTTPClient, HTTPResponse, ResponseHook


class RESTTransport:
    """Thin seam between requests and the HTTP client.

    Requests only ever talk to a transport, so tests can hand the facade a
    double exposing the same ``request`` coroutine.
    """

    def __init__(
        self, base_url: str | None = None, *, config: TransportConfig | None = None
    ) -> None:
        self.config = config or TransportConfig()
        self._http = HTTPClient(base_url=base_url, config=self.config)

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Any = None,
        json_body: Any = None,
        data: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        return await self._http.request(
            method, url, params=params, json=json_body, data=data, headers=headers
        )

    async def release(self) -> None:
        await self._http.release()

    async def close(self) -> None:
        await self._http.close()
