"""Client (application) data model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class JWTConfiguration(BaseModel):
    """Signing settings for the tokens issued to a client."""

    lifetime_in_seconds: int | None = None
    secret_encoded: bool | None = None
    scopes: dict[str, Any] | None = None
    alg: str | None = None

    model_config = ConfigDict(extra="allow")


class EncryptionKey(BaseModel):
    """Key used to encrypt tokens for a client."""

    pub: str | None = None
    cert: str | None = None
    subject: str | None = None

    model_config = ConfigDict(extra="allow")


class Client(BaseModel):
    """A client registered in the tenant.

    All fields are optional so the same model serves as a full resource and
    as a partial update payload. Unknown fields returned by the server are
    kept as extras.
    """

    name: str | None = None
    description: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    app_type: str | None = None
    logo_uri: str | None = None
    is_first_party: bool | None = None
    oidc_conformant: bool | None = None
    callbacks: list[str] | None = None
    allowed_origins: list[str] | None = None
    web_origins: list[str] | None = None
    grant_types: list[str] | None = None
    client_aliases: list[str] | None = None
    allowed_clients: list[str] | None = None
    allowed_logout_urls: list[str] | None = None
    jwt_configuration: JWTConfiguration | None = None
    encryption_key: EncryptionKey | None = None
    sso: bool | None = None
    sso_disabled: bool | None = None
    cross_origin_auth: bool | None = None
    cross_origin_loc: str | None = None
    custom_login_page_on: bool | None = None
    custom_login_page: str | None = None
    custom_login_page_preview: str | None = None
    form_template: str | None = None
    is_heroku_app: bool | None = None
    addons: dict[str, Any] | None = None
    token_endpoint_auth_method: str | None = None
    client_metadata: dict[str, Any] | None = None
    mobile: dict[str, Any] | None = None

    model_config = ConfigDict(extra="allow")
