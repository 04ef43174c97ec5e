"""Pytest fixtures for the contracts API tests."""

import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.database.contracts import ContractStore, seed_contracts


@pytest.fixture
def store():
    """Fresh in-memory ContractStore holding the sample contracts."""
    return ContractStore(seed_contracts())


@pytest.fixture
def client(store):
    """TestClient bound to an app that owns the `store` fixture."""
    return TestClient(create_app(store=store))
