"""Unit tests for the endpoint registry and per-resource query builders."""

import pytest

from mgmtapi.core import HttpMethod
from mgmtapi.endpoints import (
    connections,
    get_endpoint_adapter,
    get_endpoint_spec,
    list_endpoint_ids,
)
from mgmtapi.runtime.rest import ModelAdapter, ModelListAdapter, VoidAdapter

EXPECTED = {
    "list_client_grants": (HttpMethod.GET, ModelListAdapter),
    "create_client_grant": (HttpMethod.POST, ModelAdapter),
    "delete_client_grant": (HttpMethod.DELETE, VoidAdapter),
    "update_client_grant": (HttpMethod.PATCH, ModelAdapter),
    "list_clients": (HttpMethod.GET, ModelListAdapter),
    "get_client": (HttpMethod.GET, ModelAdapter),
    "create_client": (HttpMethod.POST, ModelAdapter),
    "update_client": (HttpMethod.PATCH, ModelAdapter),
    "delete_client": (HttpMethod.DELETE, VoidAdapter),
    "rotate_client_secret": (HttpMethod.POST, ModelAdapter),
    "list_connections": (HttpMethod.GET, ModelListAdapter),
    "get_connection": (HttpMethod.GET, ModelAdapter),
    "create_connection": (HttpMethod.POST, ModelAdapter),
    "update_connection": (HttpMethod.PATCH, ModelAdapter),
    "delete_connection": (HttpMethod.DELETE, VoidAdapter),
    "delete_connection_user": (HttpMethod.DELETE, VoidAdapter),
}


def test_registry_covers_every_operation():
    assert sorted(list_endpoint_ids()) == sorted(EXPECTED)


@pytest.mark.parametrize("endpoint_id", sorted(EXPECTED))
def test_method_and_result_shape(endpoint_id):
    method, adapter_cls = EXPECTED[endpoint_id]
    spec = get_endpoint_spec(endpoint_id)
    assert spec is not None
    assert spec.method is method
    assert type(get_endpoint_adapter(endpoint_id)) is adapter_cls


def test_unknown_endpoint():
    assert get_endpoint_spec("nope") is None
    assert get_endpoint_adapter("nope") is None


def test_only_rotate_secret_sends_empty_body():
    empty = [i for i in list_endpoint_ids() if get_endpoint_spec(i).empty_body]
    assert empty == ["rotate_client_secret"]


class TestConnectionQueries:
    def test_fields_pair(self):
        assert connections.fields_query({"fields": "name", "include_fields": False}) == {
            "fields": "name",
            "include_fields": False,
        }

    def test_fields_missing_drops_include_fields(self):
        assert connections.fields_query({"fields": None, "include_fields": False}) == {}

    def test_include_fields_defaults_to_true(self):
        assert connections.fields_query({"fields": "name"})["include_fields"] is True

    def test_list_query_order(self):
        query = connections.build_list_query(
            {"strategy": "auth0", "name": "db", "fields": "id", "include_fields": True}
        )
        assert list(query) == ["strategy", "name", "fields", "include_fields"]
