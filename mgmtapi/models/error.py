"""Error payload returned by the management API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ApiErrorBody(BaseModel):
    """Structured error body, e.g. ``{"statusCode": 404, "error": "Not Found", ...}``."""

    status_code: int | None = Field(default=None, alias="statusCode")
    error: str | None = None
    message: str | None = None
    error_code: str | None = Field(default=None, alias="errorCode")

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)
