"""Shared fixtures: an app wired to an in-memory pool."""

import pytest
from fastapi.testclient import TestClient

from core.db import get_pool
from main import app

from .fakes import FakePool


@pytest.fixture
def fake_pool():
    return FakePool()


@pytest.fixture(name="client")
def client_fixture(fake_pool):
    """Test client whose handlers receive the fake pool."""
    app.dependency_overrides[get_pool] = lambda: fake_pool
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
