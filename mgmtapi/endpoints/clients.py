"""Client endpoint definitions and adapters.

Reading or writing ``client_secret`` and ``encryption_key`` needs the
read:client_keys / update:client_keys scopes on top of the regular
read:clients, create:clients, update:clients and delete:clients.
"""

from __future__ import annotations

from typing import Any

from mgmtapi.core import HttpMethod
from mgmtapi.models import Client
from mgmtapi.runtime.rest import ModelAdapter, ModelListAdapter, RestEndpointSpec, VoidAdapter

RESOURCE = "clients"
ROTATE_SECRET = "rotate-secret"


def _collection_path(_params: dict[str, Any]) -> tuple[str, ...]:
    return (RESOURCE,)


def _item_path(params: dict[str, Any]) -> tuple[str, ...]:
    return (RESOURCE, params["client_id"])


def _rotate_secret_path(params: dict[str, Any]) -> tuple[str, ...]:
    return (RESOURCE, params["client_id"], ROTATE_SECRET)


def build_body(params: dict[str, Any]) -> Client:
    return params["client"]


LIST_SPEC = RestEndpointSpec(
    id="list_clients",
    method=HttpMethod.GET,
    build_path=_collection_path,
)

GET_SPEC = RestEndpointSpec(
    id="get_client",
    method=HttpMethod.GET,
    build_path=_item_path,
    required=("client_id",),
)

CREATE_SPEC = RestEndpointSpec(
    id="create_client",
    method=HttpMethod.POST,
    build_path=_collection_path,
    build_body=build_body,
    required=("client",),
)

UPDATE_SPEC = RestEndpointSpec(
    id="update_client",
    method=HttpMethod.PATCH,
    build_path=_item_path,
    build_body=build_body,
    required=("client_id", "client"),
)

DELETE_SPEC = RestEndpointSpec(
    id="delete_client",
    method=HttpMethod.DELETE,
    build_path=_item_path,
    required=("client_id",),
)

# The generated secret is not base64 encoded
ROTATE_SECRET_SPEC = RestEndpointSpec(
    id="rotate_client_secret",
    method=HttpMethod.POST,
    build_path=_rotate_secret_path,
    empty_body=True,
    required=("client_id",),
)

LIST_ADAPTER = ModelListAdapter(Client)
ADAPTER = ModelAdapter(Client)
VOID_ADAPTER = VoidAdapter()
