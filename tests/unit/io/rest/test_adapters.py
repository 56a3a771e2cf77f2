"""Unit tests for typed response adapters."""

import pytest

from mgmtapi.core import ResponseDecodingError
from mgmtapi.models import Client, ClientGrant, Connection
from mgmtapi.runtime.rest import HTTPResponse, ModelAdapter, ModelListAdapter, VoidAdapter


def test_model_adapter_decodes_object():
    adapter = ModelAdapter(Connection)
    response = HTTPResponse(status=200, content=b'{"id": "con_1", "strategy": "auth0"}')
    result = adapter.decode(response)
    assert result == Connection(id="con_1", strategy="auth0")


def test_model_list_adapter_keeps_order():
    adapter = ModelListAdapter(ClientGrant)
    result = adapter.decode(
        HTTPResponse(status=200, content=b'[{"id": "cgr_2"}, {"id": "cgr_1"}, {"id": "cgr_3"}]')
    )
    assert [grant.id for grant in result] == ["cgr_2", "cgr_1", "cgr_3"]


def test_model_list_adapter_empty_array():
    assert ModelListAdapter(ClientGrant).decode(HTTPResponse(status=200, content=b"[]")) == []


@pytest.mark.parametrize(
    "adapter,text",
    [
        (ModelAdapter(Connection), "[]"),
        (ModelAdapter(Connection), ""),
        (ModelAdapter(Connection), "<html>oops</html>"),
        (ModelAdapter(Connection), '{"enabled_clients": "not-a-list"}'),
        (ModelListAdapter(Connection), '{"id": "con_1"}'),
    ],
)
def test_shape_mismatch_raises_decoding_error(adapter, text):
    with pytest.raises(ResponseDecodingError) as exc_info:
        adapter.decode(HTTPResponse(status=200, content=text.encode()))
    assert exc_info.value.raw == text
    assert exc_info.value.status_code == 200


def test_void_adapter_ignores_body():
    assert VoidAdapter().decode(HTTPResponse(status=200, content=b"not json at all")) is None


def test_adapter_repr_names_model():
    assert repr(ModelAdapter(Connection)) == "ModelAdapter(Connection)"
    assert repr(ModelListAdapter(ClientGrant)) == "ModelListAdapter(ClientGrant)"


def test_undecodable_body_raises_decoding_error():
    response = HTTPResponse(status=200, content=b'{"name": "\xff\xfe"}')

    with pytest.raises(ResponseDecodingError) as exc_info:
        ModelAdapter(Client).decode(response)

    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
    assert exc_info.value.raw == '{"name": "\ufffd\ufffd"}'


def test_body_is_decoded_with_response_charset():
    body = '{"name": "Café"}'.encode("latin-1")
    response = HTTPResponse(status=200, content=body, charset="latin-1")
    assert ModelAdapter(Client).decode(response) == Client(name="Café")


def test_void_adapter_ignores_undecodable_body():
    assert VoidAdapter().decode(HTTPResponse(status=204, content=b"\xff")) is None
