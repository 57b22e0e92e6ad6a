import pytest

from rest_framework.test import APIClient

from modules.core.container import container
from modules.core.repositories.memory import MemoryStore
from modules.products.entities import Product
from modules.products.repositories import ProductDjangoRepository
from modules.providers.entities import Provider
from modules.providers.repositories import ProviderDjangoRepository
from modules.users.entities import User
from modules.users.repositories import UserDjangoRepository


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# Relational backend rows
# ---------------------------------------------------------------------------


@pytest.fixture()
def product():
    """A persisted Product (relational backend)."""
    entity = Product.new(name="Widget", code="P-001", image_url="http://img/1.png")
    ProductDjangoRepository().create(entity)
    return entity


@pytest.fixture()
def user():
    """A persisted User (relational backend)."""
    entity = User.new(name="Ana", email="ana@example.com", role="admin", password="pw")
    UserDjangoRepository().create(entity)
    return entity


@pytest.fixture()
def other_user():
    entity = User.new(
        name="Bruno", email="bruno@example.com", role="operator", password="pw"
    )
    UserDjangoRepository().create(entity)
    return entity


@pytest.fixture()
def provider():
    """A persisted Provider (relational backend)."""
    entity = Provider.new(name="Acme", email="sales@acme.example.com", phone="555-0100")
    ProviderDjangoRepository().create(entity)
    return entity


# ---------------------------------------------------------------------------
# Memory backend
# ---------------------------------------------------------------------------


@pytest.fixture()
def memory_store():
    """A fresh, isolated MemoryStore."""
    return MemoryStore()


@pytest.fixture()
def memory_backend(settings):
    """Route the HTTP layer to the memory repositories for one test."""
    settings.REPOSITORY_BACKEND = "memory"
    container.reset()
    yield container.store
    container.reset()
