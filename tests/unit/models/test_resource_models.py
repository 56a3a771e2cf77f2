"""Unit tests for resource models."""

from mgmtapi.models import ApiErrorBody, Client, ClientGrant, Connection, JWTConfiguration


def test_client_parses_nested_values():
    client = Client.model_validate(
        {
            "client_id": "abc123",
            "name": "Portal",
            "callbacks": ["https://portal.example.com/callback"],
            "jwt_configuration": {"lifetime_in_seconds": 36000, "alg": "RS256"},
            "encryption_key": {"pub": "-----BEGIN PUBLIC KEY-----"},
        }
    )
    assert client.client_id == "abc123"
    assert client.jwt_configuration == JWTConfiguration(lifetime_in_seconds=36000, alg="RS256")
    assert client.encryption_key is not None
    assert client.encryption_key.pub == "-----BEGIN PUBLIC KEY-----"


def test_client_keeps_unknown_fields():
    client = Client.model_validate({"client_id": "abc123", "refresh_token": {"rotation_type": "x"}})
    assert client.model_extra == {"refresh_token": {"rotation_type": "x"}}
    dumped = client.model_dump(mode="json", exclude_none=True)
    assert dumped["refresh_token"] == {"rotation_type": "x"}


def test_partial_client_dumps_only_set_fields():
    client = Client(name="Renamed", sso=False)
    assert client.model_dump(mode="json", exclude_none=True) == {"name": "Renamed", "sso": False}


def test_connection_options_are_free_form():
    connection = Connection.model_validate(
        {
            "id": "con_1",
            "name": "Username-Password-Authentication",
            "strategy": "auth0",
            "options": {"mfa": {"active": True}, "passwordPolicy": "good"},
            "enabled_clients": ["abc123"],
        }
    )
    assert connection.options == {"mfa": {"active": True}, "passwordPolicy": "good"}
    assert connection.enabled_clients == ["abc123"]


def test_client_grant_scope_list():
    grant = ClientGrant.model_validate(
        {"id": "cgr_1", "client_id": "abc123", "audience": "https://api", "scope": ["read:x"]}
    )
    assert grant.scope == ["read:x"]


def test_error_body_aliases():
    body = ApiErrorBody.model_validate(
        {
            "statusCode": 403,
            "error": "Forbidden",
            "message": "Insufficient scope",
            "errorCode": "insufficient_scope",
        }
    )
    assert body.status_code == 403
    assert body.error_code == "insufficient_scope"
    assert body.message == "Insufficient scope"
