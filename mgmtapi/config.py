"""Shared management API configuration.

This module centralizes the base URL rules, the API path prefix and the
transport settings so the facade and the endpoint modules stay small.

Design Decisions:
    - Frozen dataclass: TransportConfig is built once and shared read-only
    - Injectable: ManagementAPI accepts a config (or a ready transport) so
      tests can swap in a fake without touching globals
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

from yarl import URL

from .core.exceptions import InvalidArgumentError

# Every endpoint lives under {base}/api/v2/...
API_PATH_PREFIX: tuple[str, ...] = ("api", "v2")

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "mgmt-api-client"

ENV_DOMAIN = "MGMT_API_DOMAIN"
ENV_TOKEN = "MGMT_API_TOKEN"

_SCHEMES = ("https://", "http://")
_LABEL = r"[A-Za-z0-9_](?:[A-Za-z0-9_-]*[A-Za-z0-9_])?"
_HOST_RE = re.compile(rf"^{_LABEL}(?:\.{_LABEL})*$")


@dataclass(frozen=True)
class TransportConfig:
    """HTTP transport settings.

    Attributes:
        timeout: Total per-request timeout in seconds
        user_agent: Value of the User-Agent header
        log_bodies: Log request and response bodies at DEBUG level
        default_headers: Extra headers sent with every request
    """

    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    log_bodies: bool = False
    default_headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise InvalidArgumentError("timeout must be positive")


def build_base_url(domain: str) -> URL:
    """Build the API base URL from a domain.

    Args:
        domain: Tenant domain, with or without an ``http(s)://`` scheme

    Returns:
        Absolute URL whose path ends with ``/``

    Raises:
        InvalidArgumentError: If the result is not a valid absolute URL

    Examples:
        >>> str(build_base_url("tenant.example.com"))
        'https://tenant.example.com/'
        >>> str(build_base_url("http://localhost:8080"))
        'http://localhost:8080/'
    """
    if not domain or not domain.strip():
        raise InvalidArgumentError("'domain' cannot be empty!")

    raw = domain if domain.startswith(_SCHEMES) else f"https://{domain}"
    try:
        url = URL(raw)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(
            "The domain had an invalid format and couldn't be parsed as an URL."
        ) from e

    host = url.raw_host
    if not url.is_absolute() or not host or not _is_valid_host(host):
        raise InvalidArgumentError(
            "The domain had an invalid format and couldn't be parsed as an URL."
        )

    path = url.raw_path if url.raw_path.endswith("/") else f"{url.raw_path}/"
    return url.with_path(path, encoded=True).with_query(None).with_fragment(None)


def _is_valid_host(host: str) -> bool:
    if ":" in host:
        # IPv6 literal
        return all(c in "0123456789abcdefABCDEF:." for c in host)
    return bool(_HOST_RE.match(host))


def load_credentials_from_env() -> tuple[str, str]:
    """Read domain and token from the environment.

    Raises:
        InvalidArgumentError: If either variable is unset or empty
    """
    domain = os.environ.get(ENV_DOMAIN, "")
    token = os.environ.get(ENV_TOKEN, "")
    if not domain:
        raise InvalidArgumentError(f"{ENV_DOMAIN} is not set")
    if not token:
        raise InvalidArgumentError(f"{ENV_TOKEN} is not set")
    return domain, token
