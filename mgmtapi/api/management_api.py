"""ManagementAPI facade: one method per remote operation.

Architecture:
    This module implements the Facade pattern over the REST runtime. Each
    method looks up its endpoint spec and adapter, lets the runner build a
    request carrying the bearer token, and hands the un-executed request back
    to the caller. Nothing is sent until ``execute()`` is awaited.

Design Decisions:
    - Immutable client: base URL and token never change after construction,
      so requests built concurrently share no mutable state
    - Transport injection: a TransportConfig or a ready transport can be
      passed in, so tests substitute a fake without touching globals
    - Context manager pattern ensures the HTTP session is closed

See Also:
    - RestRunner: turns endpoint specs into requests
    - Request: the pending request/executor returned by every method
"""

from __future__ import annotations

import logging
from typing import Any

from ..config import TransportConfig, build_base_url, load_credentials_from_env
from ..core.exceptions import InvalidArgumentError
from ..core.validation import require
from ..endpoints import get_endpoint_adapter, get_endpoint_spec
from ..models import Client, ClientGrant, Connection
from ..runtime.rest import Request, RestRunner, RESTTransport, Transport

logger = logging.getLogger(__name__)


class ManagementAPI:
    """Client for the tenant management API.

    Example:
        >>> async with ManagementAPI("tenant.example.com", token) as api:
        ...     clients = await api.list_clients().execute()
        ...     await api.delete_client(clients[0].client_id).execute()
    """

    def __init__(
        self,
        domain: str,
        api_token: str,
        *,
        config: TransportConfig | None = None,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            domain: Tenant domain; ``https://`` is assumed when no scheme is given
            api_token: Bearer token sent with every request
            config: Transport settings, ignored when ``transport`` is given
            transport: Ready transport to use instead of an aiohttp one

        Raises:
            InvalidArgumentError: If domain or token is missing, or the domain
                does not form a valid URL
        """
        require(domain, "domain")
        require(api_token, "api token")

        self._base_url = build_base_url(domain)
        self._api_token = api_token
        self._owns_transport = transport is None
        self._transport: Transport = transport or RESTTransport(config=config)
        self._runner = RestRunner(self._transport, self._base_url)
        self._closed = False
        logger.debug("ManagementAPI created", extra={"base_url": str(self._base_url)})

    @classmethod
    def from_env(
        cls,
        *,
        config: TransportConfig | None = None,
        transport: Transport | None = None,
    ) -> ManagementAPI:
        """Build a client from MGMT_API_DOMAIN and MGMT_API_TOKEN."""
        domain, token = load_credentials_from_env()
        return cls(domain, token, config=config, transport=transport)

    @property
    def base_url(self) -> str:
        return str(self._base_url)

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._api_token}"}

    def request(self, endpoint_id: str, params: dict[str, Any] | None = None) -> Request[Any]:
        """Build the request for a registered endpoint without sending it.

        Raises:
            InvalidArgumentError: If endpoint_id is unknown or a required
                parameter is missing
        """
        spec = get_endpoint_spec(endpoint_id)
        adapter = get_endpoint_adapter(endpoint_id)
        if spec is None or adapter is None:
            raise InvalidArgumentError(f"Unknown REST endpoint: {endpoint_id}")
        return self._runner.prepare(
            spec=spec, adapter=adapter, params=dict(params or {}), headers=self._auth_headers()
        )

    async def fetch(self, endpoint_id: str, params: dict[str, Any] | None = None) -> Any:
        """Build and execute the request for a registered endpoint."""
        return await self.request(endpoint_id, params).execute()

    # Client grants

    def list_client_grants(self) -> Request[list[ClientGrant]]:
        """Request all client grants. Needs read:client_grants."""
        return self.request("list_client_grants")

    def create_client_grant(
        self, client_id: str, audience: str, scope: list[str]
    ) -> Request[ClientGrant]:
        """Create a client grant. Needs create:client_grants.

        Args:
            client_id: Client to associate the grant with
            audience: Audience of the grant
            scope: Scopes to grant
        """
        return self.request(
            "create_client_grant",
            {"client_id": client_id, "audience": audience, "scope": scope},
        )

    def delete_client_grant(self, client_grant_id: str) -> Request[None]:
        """Delete a client grant. Needs delete:client_grants."""
        return self.request("delete_client_grant", {"client_grant_id": client_grant_id})

    def update_client_grant(self, client_grant_id: str, scope: list[str]) -> Request[ClientGrant]:
        """Replace the scopes of a client grant. Needs update:client_grants."""
        return self.request(
            "update_client_grant", {"client_grant_id": client_grant_id, "scope": scope}
        )

    # Clients

    def list_clients(self) -> Request[list[Client]]:
        """Request all clients. Needs read:clients (and read:client_keys for secrets)."""
        return self.request("list_clients")

    def get_client(self, client_id: str) -> Request[Client]:
        return self.request("get_client", {"client_id": client_id})

    def create_client(self, client: Client) -> Request[Client]:
        return self.request("create_client", {"client": client})

    def update_client(self, client_id: str, client: Client) -> Request[Client]:
        """Update a client with the fields set on ``client``.

        Only non-None fields are sent. Changing the secret or encryption key
        needs update:client_keys.
        """
        return self.request("update_client", {"client_id": client_id, "client": client})

    def delete_client(self, client_id: str) -> Request[None]:
        return self.request("delete_client", {"client_id": client_id})

    def rotate_client_secret(self, client_id: str) -> Request[Client]:
        """Rotate a client secret. Needs update:client_keys.

        Sends an empty-body POST and returns the client with its new secret.
        """
        return self.request("rotate_client_secret", {"client_id": client_id})

    # Connections

    def list_connections(
        self,
        strategy: str | None = None,
        name: str | None = None,
        fields: str | None = None,
        include_fields: bool = True,
    ) -> Request[list[Connection]]:
        """Request connections, optionally filtered. Needs read:connections.

        Args:
            strategy: Only connections with this strategy
            name: Only the connection with this name
            fields: Comma separated fields to include or exclude
            include_fields: Whether ``fields`` are included or excluded;
                ignored when fields is None
        """
        return self.request(
            "list_connections",
            {
                "strategy": strategy,
                "name": name,
                "fields": fields,
                "include_fields": include_fields,
            },
        )

    def get_connection(
        self, connection_id: str, fields: str | None = None, include_fields: bool = True
    ) -> Request[Connection]:
        return self.request(
            "get_connection",
            {"connection_id": connection_id, "fields": fields, "include_fields": include_fields},
        )

    def create_connection(self, connection: Connection) -> Request[Connection]:
        return self.request("create_connection", {"connection": connection})

    def update_connection(self, connection_id: str, connection: Connection) -> Request[Connection]:
        """Update a connection. Needs update:connections.

        Sending ``options`` replaces all the options currently stored.
        """
        return self.request(
            "update_connection", {"connection_id": connection_id, "connection": connection}
        )

    def delete_connection(self, connection_id: str) -> Request[None]:
        return self.request("delete_connection", {"connection_id": connection_id})

    def delete_connection_user(self, connection_id: str, email: str) -> Request[None]:
        """Delete a user from a database connection. Needs delete:users."""
        return self.request(
            "delete_connection_user", {"connection_id": connection_id, "email": email}
        )

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._closed:
            return
        if self._owns_transport:
            await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> ManagementAPI:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"ManagementAPI(base_url={self.base_url!r})"
