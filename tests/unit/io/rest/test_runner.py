"""Precise unit tests for RestRunner.

Tests focus on request construction from endpoint specs.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from yarl import URL

from mgmtapi.core import HttpMethod, InvalidArgumentError
from mgmtapi.models import Client
from mgmtapi.runtime.rest import (
    EmptyBodyRequest,
    HTTPResponse,
    ModelAdapter,
    Request,
    RestEndpointSpec,
    RestRunner,
    VoidAdapter,
    VoidRequest,
)

BASE = URL("https://tenant.example.com/")


class TestRestRunner:
    """Test RestRunner endpoint preparation."""

    @pytest.fixture
    def mock_transport(self):
        transport = MagicMock()
        response = HTTPResponse(status=200, content=b'{"name": "x"}')
        transport.request = AsyncMock(return_value=response)
        transport.close = AsyncMock()
        return transport

    @pytest.fixture
    def runner(self, mock_transport):
        return RestRunner(mock_transport, BASE)

    def test_prepare_get_endpoint(self, runner):
        spec = RestEndpointSpec(
            id="test",
            method=HttpMethod.GET,
            build_path=lambda p: ("things", p["id"]),
            build_query=lambda p: {"param": p.get("param"), "missing": None},
        )

        request = runner.prepare(
            spec=spec,
            adapter=ModelAdapter(Client),
            params={"id": "123", "param": "value"},
            headers={"Authorization": "Bearer t"},
        )

        assert type(request) is Request
        assert request.method is HttpMethod.GET
        assert str(request.url) == "https://tenant.example.com/api/v2/things/123?param=value"
        assert request.headers == {"Authorization": "Bearer t"}

    def test_prepare_body_endpoint(self, runner):
        spec = RestEndpointSpec(
            id="test",
            method=HttpMethod.POST,
            build_path=lambda p: ("things",),
            build_body=lambda p: p["client"],
        )

        request = runner.prepare(
            spec=spec, adapter=ModelAdapter(Client), params={"client": Client(name="x")}
        )

        assert request.body == {"name": "x"}

    def test_prepare_parameters_endpoint(self, runner):
        spec = RestEndpointSpec(
            id="test",
            method=HttpMethod.DELETE,
            build_path=lambda p: ("things", "users"),
            build_parameters=lambda p: {"email": p["email"]},
        )

        request = runner.prepare(spec=spec, adapter=VoidAdapter(), params={"email": "a@b.c"})

        assert isinstance(request, VoidRequest)
        assert request.body == {"email": "a@b.c"}

    def test_prepare_empty_body_endpoint(self, runner):
        spec = RestEndpointSpec(
            id="test", method=HttpMethod.POST, build_path=lambda p: ("a",), empty_body=True
        )

        request = runner.prepare(spec=spec, adapter=ModelAdapter(Client), params={})

        assert isinstance(request, EmptyBodyRequest)

    def test_required_params_checked_before_path(self, runner):
        build_path = MagicMock(return_value=("things",))
        spec = RestEndpointSpec(
            id="test",
            method=HttpMethod.GET,
            build_path=build_path,
            required=("thing_id",),
        )

        with pytest.raises(InvalidArgumentError, match="'thing id' cannot be null!"):
            runner.prepare(spec=spec, adapter=VoidAdapter(), params={"thing_id": None})

        build_path.assert_not_called()

    def test_spec_rejects_both_body_builders(self):
        with pytest.raises(InvalidArgumentError):
            RestEndpointSpec(
                id="bad",
                method=HttpMethod.POST,
                build_path=lambda p: ("a",),
                build_body=lambda p: {},
                build_parameters=lambda p: {},
            )

    def test_spec_rejects_body_on_empty_body_endpoint(self):
        with pytest.raises(InvalidArgumentError):
            RestEndpointSpec(
                id="bad",
                method=HttpMethod.POST,
                build_path=lambda p: ("a",),
                build_parameters=lambda p: {},
                empty_body=True,
            )
