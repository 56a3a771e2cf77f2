"""HTTP client helper."""

from __future__ import annotations

import asyncio
import codecs
import inspect
import json as jsonlib
import logging
import threading
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from ...config import TransportConfig
from ...core.exceptions import RequestExecutionError

logger = logging.getLogger(__name__)

ResponseHook = Callable[[aiohttp.ClientResponse], Awaitable[None] | None]

_REDACTED = "Bearer ***"
_DEFAULT_CHARSET = "utf-8"


@dataclass(frozen=True)
class HTTPResponse:
    """Status, headers and raw body of a completed exchange.

    The body is kept as bytes. ``text`` never fails and is meant for error
    reporting and logs; ``decode_text()`` is strict and is what result
    decoding goes through.
    """

    status: int
    content: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)
    charset: str = _DEFAULT_CHARSET

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        """Body with undecodable bytes replaced by U+FFFD."""
        return self.content.decode(self.charset, errors="replace")

    def decode_text(self) -> str:
        """Body decoded strictly.

        Raises:
            UnicodeDecodeError: If the body is not valid in ``charset``
        """
        return self.content.decode(self.charset)


def redact_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    """Copy headers with the Authorization value masked."""
    if not headers:
        return {}
    return {k: (_REDACTED if k.lower() == "authorization" else v) for k, v in headers.items()}


def _response_charset(response: aiohttp.ClientResponse) -> str:
    charset = response.charset or _DEFAULT_CHARSET
    try:
        return codecs.lookup(charset).name
    except LookupError:
        logger.debug("Unknown response charset", extra={"charset": charset})
        return _DEFAULT_CHARSET


class HTTPClient:
    """Async HTTP client wrapper.

    An aiohttp session is bound to the loop it was opened on, so one session
    is kept per running event loop. Blocking calls, each on their own loop,
    can then share a client from several threads.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        *,
        config: TransportConfig | None = None,
    ) -> None:
        self.config = config or TransportConfig()
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout or self.config.timeout)
        self._sessions: dict[asyncio.AbstractEventLoop, aiohttp.ClientSession] = {}
        self._lock = threading.Lock()
        self._response_hooks: list[ResponseHook] = []

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create the session of the running event loop."""
        loop = asyncio.get_running_loop()
        with self._lock:
            session = self._sessions.get(loop)
            if session is None or session.closed:
                headers = {"User-Agent": self.config.user_agent, **self.config.default_headers}
                session = aiohttp.ClientSession(timeout=self.timeout, headers=headers)
                self._sessions[loop] = session
            return session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a callable invoked with every raw response."""
        self._response_hooks.append(hook)

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Any = None,
        json: Any = None,
        data: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        """Send a request and read the whole response body.

        Args:
            method: HTTP verb
            url: Absolute URL, or a path appended to ``base_url``
            params: Query parameters (mapping or sequence of pairs)
            json: JSON-serializable body
            data: Raw body bytes, mutually exclusive with ``json``
            headers: Per-request headers

        Returns:
            HTTPResponse with status, headers and the raw body

        Raises:
            RequestExecutionError: On connection, TLS or timeout failures
        """
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        logger.debug(
            "Sending request",
            extra={"method": method, "url": url, "headers": redact_headers(headers)},
        )
        if self.config.log_bodies and json is not None:
            logger.debug("Request body: %s", jsonlib.dumps(json))

        try:
            async with self.session.request(
                method, url, params=params, json=json, data=data, headers=headers
            ) as response:
                await self._run_hooks(response)
                content = await response.read()
                result = HTTPResponse(
                    status=response.status,
                    content=content,
                    headers=dict(response.headers),
                    charset=_response_charset(response),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug("Request failed", extra={"method": method, "url": url, "error": repr(e)})
            raise RequestExecutionError(
                f"Failed to execute {method} {url}: {e}", method=method, url=url
            ) from e

        logger.debug(
            "Received response", extra={"method": method, "url": url, "status": result.status}
        )
        if self.config.log_bodies:
            logger.debug("Response body: %s", result.text)
        return result

    async def _run_hooks(self, response: aiohttp.ClientResponse) -> None:
        for hook in self._response_hooks:
            try:
                outcome = hook(response)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception:
                logger.warning("Response hook failed", exc_info=True)

    async def release(self) -> None:
        """Close the session of the running loop only.

        Sessions opened by other loops stay usable. Entries left behind by
        loops that have since been closed are dropped.
        """
        loop = asyncio.get_running_loop()
        with self._lock:
            session = self._sessions.pop(loop, None)
            for stale in [other for other in self._sessions if other.is_closed()]:
                del self._sessions[stale]
        if session is not None and not session.closed:
            await session.close()

    async def close(self) -> None:
        """Close session."""
        await self.release()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
