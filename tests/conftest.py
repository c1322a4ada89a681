"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides settings, catalog, application and client fixtures.

Every test gets a freshly seeded application, so additions and deletions
never leak between tests.

==============================================================================
"""

import pytest
from typing import Generator
from fastapi import FastAPI
from fastapi.testclient import TestClient

from supermarket.config import Settings
from supermarket.catalog.catalog import CatalogStore, DEFAULT_ITEMS
from supermarket.main import create_app


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings with the built-in seed and no .env file."""
    return Settings(_env_file=None, seed_catalog=True, seed_file=None, api_prefix="/api/v1")


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def catalog() -> CatalogStore:
    """Catalog seeded with the four built-in items."""
    return CatalogStore(DEFAULT_ITEMS)


@pytest.fixture
def empty_catalog() -> CatalogStore:
    """Catalog with no items."""
    return CatalogStore()


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================

@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Create a fresh application with its own catalog."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Create test client for the fresh application."""
    with TestClient(app) as test_client:
        yield test_client
