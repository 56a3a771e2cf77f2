"""Core enumerations."""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verbs used by the management API."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def sends_query(self) -> bool:
        """Whether named parameters go to the query string instead of the body."""
        return self is HttpMethod.GET
