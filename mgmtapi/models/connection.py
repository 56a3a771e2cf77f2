"""Connection (identity provider) data model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class Connection(BaseModel):
    """An identity provider connection.

    Note that sending ``options`` on update replaces every option currently
    stored for the connection.
    """

    id: str | None = None
    name: str | None = None
    strategy: str | None = None
    options: dict[str, Any] | None = None
    enabled_clients: list[str] | None = None

    model_config = ConfigDict(extra="allow")
