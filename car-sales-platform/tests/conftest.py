"""
Pytest configuration and shared fixtures.

Adds the car-sales-platform directory to the Python path so tests can import
domain, repositories, services and api, and provides fresh in-memory stores.
"""

import sys
from pathlib import Path

import pytest

# Add the car-sales-platform directory to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from repositories.sale_repository import InMemorySaleRepository  # noqa: E402


@pytest.fixture()
def repository() -> InMemorySaleRepository:
    """A fresh, empty store for each test."""
    return InMemorySaleRepository()


@pytest.fixture()
def client(repository: InMemorySaleRepository):
    """API test client wired to the per-test store."""
    from fastapi.testclient import TestClient

    from api.main import app
    from repositories.sale_repository import get_sale_repository

    app.dependency_overrides[get_sale_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
