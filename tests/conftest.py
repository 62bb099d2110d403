"""Pytest configuration and shared fixtures for gitlab-client-core tests."""

import pytest

from gitlab_client_core.auth import ConfigurationStore
from gitlab_client_core.gateway import APIGateway
from gitlab_client_core.testing import MockGitLabServer

DOMAIN = "https://gitlab.example.com"
TOKEN = "test-private-token"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear client-related environment variables before each test.

    This prevents a developer's real configuration from leaking into tests.
    """
    import os

    test_prefixes = ("TEST_", "GITLAB_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def store(tmp_path):
    """An empty configuration store rooted in a temporary directory."""
    return ConfigurationStore(config_root=tmp_path)


@pytest.fixture
def configured_store(store):
    """A configuration store holding the test token and domain."""
    store.save(token=TOKEN, domain=DOMAIN)
    return store


@pytest.fixture
def server():
    return MockGitLabServer()


@pytest.fixture
def gateway(configured_store, server):
    return APIGateway(configured_store, transport=server.transport)
