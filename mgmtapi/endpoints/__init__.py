"""Management API endpoint registry.

This module collects the endpoint specifications and adapters declared by
the per-resource modules.
"""

from __future__ import annotations

from mgmtapi.runtime.rest import ResponseAdapter, RestEndpointSpec

from . import client_grants, clients, connections

_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, ResponseAdapter]] = {
    spec.id: (spec, adapter)
    for spec, adapter in (
        (client_grants.LIST_SPEC, client_grants.LIST_ADAPTER),
        (client_grants.CREATE_SPEC, client_grants.ADAPTER),
        (client_grants.DELETE_SPEC, client_grants.VOID_ADAPTER),
        (client_grants.UPDATE_SPEC, client_grants.ADAPTER),
        (clients.LIST_SPEC, clients.LIST_ADAPTER),
        (clients.GET_SPEC, clients.ADAPTER),
        (clients.CREATE_SPEC, clients.ADAPTER),
        (clients.UPDATE_SPEC, clients.ADAPTER),
        (clients.DELETE_SPEC, clients.VOID_ADAPTER),
        (clients.ROTATE_SECRET_SPEC, clients.ADAPTER),
        (connections.LIST_SPEC, connections.LIST_ADAPTER),
        (connections.GET_SPEC, connections.ADAPTER),
        (connections.CREATE_SPEC, connections.ADAPTER),
        (connections.UPDATE_SPEC, connections.ADAPTER),
        (connections.DELETE_SPEC, connections.VOID_ADAPTER),
        (connections.DELETE_USER_SPEC, connections.VOID_ADAPTER),
    )
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "list_clients", "get_connection")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> ResponseAdapter | None:
    """Get the response adapter bound to an endpoint ID."""
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoint_ids() -> list[str]:
    return list(_ENDPOINT_REGISTRY)


__all__ = [
    "client_grants",
    "clients",
    "connections",
    "get_endpoint_spec",
    "get_endpoint_adapter",
    "list_endpoint_ids",
]
