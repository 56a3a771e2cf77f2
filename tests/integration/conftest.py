"""Shared hooks for integration tests."""

import os

import pytest

NETWORK_ENV = "RUN_MGMT_API_NETWORK_TESTS"


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless RUN_MGMT_API_NETWORK_TESTS=1."""
    if os.environ.get(NETWORK_ENV) == "1":
        return
    skip = pytest.mark.skip(reason=f"Requires a live tenant. Set {NETWORK_ENV}=1 to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)
