"""Pytest configuration and shared fixtures."""

import os

# Settings are read at import time; keep tests off the on-disk database.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CREATE_TABLES", "false")
os.environ.setdefault("RATE_LIMIT_DEFAULT", "20/minute")

from unittest.mock import create_autospec

import pytest
from fastapi.testclient import TestClient

from projectstore.application.stores.service import StoreService
from projectstore.interfaces.stores.dependencies import get_store_service
from projectstore.main import app
from projectstore.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Every test starts with a fresh request budget."""
    limiter.reset()
    yield


@pytest.fixture
def store_service():
    """Store Service double injected in place of the real one."""
    service = create_autospec(StoreService, instance=True)
    app.dependency_overrides[get_store_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_store_service, None)


@pytest.fixture
def client():
    return TestClient(app)
