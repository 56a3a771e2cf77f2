"""Client grant endpoint definitions and adapters.

Required token scopes: read:client_grants, create:client_grants,
update:client_grants and delete:client_grants respectively.
"""

from __future__ import annotations

from typing import Any

from mgmtapi.core import HttpMethod, InvalidArgumentError
from mgmtapi.models import ClientGrant
from mgmtapi.runtime.rest import ModelAdapter, ModelListAdapter, RestEndpointSpec, VoidAdapter

RESOURCE = "client-grants"


def _collection_path(_params: dict[str, Any]) -> tuple[str, ...]:
    return (RESOURCE,)


def _item_path(params: dict[str, Any]) -> tuple[str, ...]:
    return (RESOURCE, params["client_grant_id"])


def _scope(params: dict[str, Any]) -> list[str]:
    scope = params["scope"]
    # A bare string would otherwise be split into characters
    if isinstance(scope, str):
        raise InvalidArgumentError("'scope' must be a list of scope names, not a string")
    return list(scope)


def build_create_parameters(params: dict[str, Any]) -> dict[str, Any]:
    """Body fields for a new grant."""
    return {
        "client_id": params["client_id"],
        "audience": params["audience"],
        "scope": _scope(params),
    }


def build_update_parameters(params: dict[str, Any]) -> dict[str, Any]:
    return {"scope": _scope(params)}


LIST_SPEC = RestEndpointSpec(
    id="list_client_grants",
    method=HttpMethod.GET,
    build_path=_collection_path,
)

CREATE_SPEC = RestEndpointSpec(
    id="create_client_grant",
    method=HttpMethod.POST,
    build_path=_collection_path,
    build_parameters=build_create_parameters,
    required=("client_id", "audience", "scope"),
)

DELETE_SPEC = RestEndpointSpec(
    id="delete_client_grant",
    method=HttpMethod.DELETE,
    build_path=_item_path,
    required=("client_grant_id",),
)

UPDATE_SPEC = RestEndpointSpec(
    id="update_client_grant",
    method=HttpMethod.PATCH,
    build_path=_item_path,
    build_parameters=build_update_parameters,
    required=("client_grant_id", "scope"),
)

LIST_ADAPTER = ModelListAdapter(ClientGrant)
ADAPTER = ModelAdapter(ClientGrant)
VOID_ADAPTER = VoidAdapter()
