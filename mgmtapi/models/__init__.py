"""Resource models for the management API.

Architecture:
    Pydantic v2 models for every resource the API manages. Fields default to
    None and bodies are serialized with ``exclude_none`` so a model carrying
    only a few fields doubles as a PATCH payload.

Model Categories:
    - Resources: Client, Connection, ClientGrant
    - Nested values: JWTConfiguration, EncryptionKey
    - Errors: ApiErrorBody
"""

from .client import Client, EncryptionKey, JWTConfiguration
from .client_grant import ClientGrant
from .connection import Connection
from .error import ApiErrorBody

__all__ = [
    "Client",
    "JWTConfiguration",
    "EncryptionKey",
    "Connection",
    "ClientGrant",
    "ApiErrorBody",
]
