"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_MYNX_NETWORK_TESTS=1
RUN_NETWORK = os.environ.get("RUN_MYNX_NETWORK_TESTS") == "1"


def pytest_collection_modifyitems(config, items):
    if RUN_NETWORK:
        return
    skip = pytest.mark.skip(reason="Requires network access. Set RUN_MYNX_NETWORK_TESTS=1 to run")
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(skip)
