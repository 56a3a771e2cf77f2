"""Typed response adapters.

Architecture:
    An adapter is the result shape of a request. Endpoint definitions pick
    one of three explicitly:
    - ModelAdapter: JSON object -> one model instance
    - ModelListAdapter: JSON array -> list of model instances
    - VoidAdapter: body ignored, success decided by status alone

    Decoding goes through pydantic ``TypeAdapter`` so the target type is
    carried by the adapter's generic parameter instead of a runtime token
    passed around the request.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ...core.exceptions import ResponseDecodingError
from .http_client import HTTPResponse

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class ResponseAdapter(Generic[T]):
    """Turns a successful response into a typed result."""

    def parse(self, response: HTTPResponse) -> T:
        raise NotImplementedError

    def decode(self, response: HTTPResponse) -> T:
        """Parse ``response``, converting validation failures.

        Raises:
            ResponseDecodingError: If the body cannot be read in its charset
                or does not match the expected shape
        """
        try:
            return self.parse(response)
        except UnicodeDecodeError as e:
            raise ResponseDecodingError(
                f"Response body is not valid {response.charset}: {e.reason}",
                status_code=response.status,
                raw=response.text,
            ) from e
        except ValidationError as e:
            raise ResponseDecodingError(
                f"Failed to decode response body: {e.error_count()} validation error(s)",
                status_code=response.status,
                raw=response.text,
            ) from e


class ModelAdapter(ResponseAdapter[M]):
    """Decode a single JSON object into ``model``."""

    def __init__(self, model: type[M]) -> None:
        self.model = model
        self._type_adapter: TypeAdapter[M] = TypeAdapter(model)

    def parse(self, response: HTTPResponse) -> M:
        return self._type_adapter.validate_json(response.decode_text())

    def __repr__(self) -> str:
        return f"ModelAdapter({self.model.__name__})"


class ModelListAdapter(ResponseAdapter[list[M]]):
    """Decode a JSON array into a list of ``model``."""

    def __init__(self, model: type[M]) -> None:
        self.model = model
        self._type_adapter: TypeAdapter[list[M]] = TypeAdapter(list[model])  # type: ignore

    def parse(self, response: HTTPResponse) -> list[M]:
        return self._type_adapter.validate_json(response.decode_text())

    def __repr__(self) -> str:
        return f"ModelListAdapter({self.model.__name__})"


class VoidAdapter(ResponseAdapter[None]):
    """Ignore the body entirely."""

    def parse(self, response: HTTPResponse) -> None:
        return None

    def __repr__(self) -> str:
        return "VoidAdapter()"
