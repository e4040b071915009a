"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_MAVENLINK_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_MAVENLINK_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_MAVENLINK_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def access_token():
    token = os.environ.get("MAVENLINK_ACCESS_TOKEN")
    if not token:
        pytest.skip("MAVENLINK_ACCESS_TOKEN is not set")
    return token
