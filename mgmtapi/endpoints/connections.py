"""Connection endpoint definitions and adapters."""

from __future__ import annotations

from typing import Any

from mgmtapi.core import HttpMethod
from mgmtapi.models import Connection
from mgmtapi.runtime.rest import ModelAdapter, ModelListAdapter, RestEndpointSpec, VoidAdapter

RESOURCE = "connections"
USERS = "users"


def _collection_path(_params: dict[str, Any]) -> tuple[str, ...]:
    return (RESOURCE,)


def _item_path(params: dict[str, Any]) -> tuple[str, ...]:
    return (RESOURCE, params["connection_id"])


def _users_path(params: dict[str, Any]) -> tuple[str, ...]:
    return (RESOURCE, params["connection_id"], USERS)


def fields_query(params: dict[str, Any]) -> dict[str, Any]:
    """Field filtering pair.

    ``include_fields`` only travels together with ``fields``; without fields
    both are omitted whatever include_fields says.
    """
    fields = params.get("fields")
    if fields is None:
        return {}
    return {"fields": fields, "include_fields": bool(params.get("include_fields", True))}


def build_list_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the connections listing."""
    q: dict[str, Any] = {}
    if params.get("strategy") is not None:
        q["strategy"] = params["strategy"]
    if params.get("name") is not None:
        q["name"] = params["name"]
    q.update(fields_query(params))
    return q


def build_body(params: dict[str, Any]) -> Connection:
    return params["connection"]


def build_user_parameters(params: dict[str, Any]) -> dict[str, Any]:
    return {"email": params["email"]}


LIST_SPEC = RestEndpointSpec(
    id="list_connections",
    method=HttpMethod.GET,
    build_path=_collection_path,
    build_query=build_list_query,
)

GET_SPEC = RestEndpointSpec(
    id="get_connection",
    method=HttpMethod.GET,
    build_path=_item_path,
    build_query=fields_query,
    required=("connection_id",),
)

CREATE_SPEC = RestEndpointSpec(
    id="create_connection",
    method=HttpMethod.POST,
    build_path=_collection_path,
    build_body=build_body,
    required=("connection",),
)

# Sending options replaces every option currently stored
UPDATE_SPEC = RestEndpointSpec(
    id="update_connection",
    method=HttpMethod.PATCH,
    build_path=_item_path,
    build_body=build_body,
    required=("connection_id", "connection"),
)

DELETE_SPEC = RestEndpointSpec(
    id="delete_connection",
    method=HttpMethod.DELETE,
    build_path=_item_path,
    required=("connection_id",),
)

# Database connections only; needs the delete:users scope
DELETE_USER_SPEC = RestEndpointSpec(
    id="delete_connection_user",
    method=HttpMethod.DELETE,
    build_path=_users_path,
    build_parameters=build_user_parameters,
    required=("connection_id", "email"),
)

LIST_ADAPTER = ModelListAdapter(Connection)
ADAPTER = ModelAdapter(Connection)
VOID_ADAPTER = VoidAdapter()
