"""High-level API facade."""

from .management_api import ManagementAPI

__all__ = ["ManagementAPI"]
