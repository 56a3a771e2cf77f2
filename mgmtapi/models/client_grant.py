"""Client grant data model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ClientGrant(BaseModel):
    """Authorization of a client to call an API audience with some scopes."""

    id: str | None = None
    client_id: str | None = None
    audience: str | None = None
    scope: list[str] | None = None

    model_config = ConfigDict(extra="allow")
