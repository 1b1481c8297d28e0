"""
Shared fixtures.

Every test gets its own store built from the fixture modules, so mutations
in one test never leak into another. The API client routes get_store() to
that same store.
"""

import pytest
from fastapi.testclient import TestClient

from oss_api.main import app
from oss_api.store import build_default_store, get_store


@pytest.fixture
def store():
    return build_default_store()


@pytest.fixture
def empty_store():
    return build_default_store(seed_purchases=False)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
