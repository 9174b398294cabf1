"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import Mock, AsyncMock

from fastapi.testclient import TestClient

# Set test environment variables
os.environ.setdefault("STOREFRONT_IDENTITY_BACKEND", "mock")
os.environ.setdefault("STOREFRONT_CART_BACKEND", "memory")
os.environ.setdefault("STOREFRONT_AUTH_DELAY", "0")
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")

from storefront.auth import MockIdentityProvider
from storefront.bootstrap import Storefront
from storefront.cart import CartManager, MemoryCartStorage
from storefront.catalog import CatalogService, Product, ProductEditor, load_seed_products
from storefront.config import Settings
from storefront.services import NotificationOutbox
from storefront.session import SessionRegistry


def _make_product(product_id: str, **overrides) -> Product:
    data = {
        "id": product_id,
        "name": f"Product {product_id}",
        "price": "10.00",
        "category": "Misc",
        "slug": f"product-{product_id}",
        "images": [f"/img/{product_id}.jpg"],
        "variants": [
            {"id": f"{product_id}-1", "name": "Small", "price": "10.00"},
            {"id": f"{product_id}-2", "name": "Large", "price": "12.00"},
        ],
    }
    data.update(overrides)
    return Product(**data)


@pytest.fixture
def make_product():
    """Factory for small products with two in-stock variants unless overridden"""
    return _make_product


@pytest.fixture
def seed_products():
    return load_seed_products()


@pytest.fixture
def catalog(seed_products):
    """Catalog over the seed products"""
    return CatalogService(seed_products)


@pytest.fixture
def storage():
    return MemoryCartStorage()


@pytest.fixture
def outbox():
    return NotificationOutbox()


@pytest.fixture
def cart(storage, outbox):
    """Cart manager on memory storage"""
    return CartManager("session-123", storage, notify=outbox)


@pytest.fixture
def mock_storage():
    """Cart storage whose calls can be inspected or made to fail"""
    storage = Mock()
    storage.load = AsyncMock(return_value=None)
    storage.save = AsyncMock()
    storage.delete = AsyncMock()
    return storage


@pytest.fixture
def identity_provider():
    """Demo accounts without the simulated latency"""
    return MockIdentityProvider(delay_seconds=0)


@pytest.fixture
def mock_supabase_client():
    """Mock Supabase client"""
    client = Mock()

    # Mock table operations
    table_mock = Mock()
    table_mock.select.return_value = table_mock
    table_mock.upsert.return_value = table_mock
    table_mock.eq.return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[]))

    client.table.return_value = table_mock
    client.auth = Mock()
    client.auth.sign_in_with_password = AsyncMock()
    client.auth.sign_up = AsyncMock()

    return client


@pytest.fixture
def storefront(catalog, storage, identity_provider):
    """Storefront wired to memory storage and the mock provider"""
    return Storefront(
        settings=Settings(auth_delay_seconds=0),
        catalog=catalog,
        editor=ProductEditor(catalog),
        sessions=SessionRegistry(storage),
        identity=identity_provider,
    )


@pytest.fixture
def client(storefront):
    """Test client"""
    from api.index import create_app

    with TestClient(create_app(storefront)) as test_client:
        yield test_client


@pytest.fixture
def session_headers(client):
    """Headers for a freshly opened session"""
    response = client.post("/api/session")
    return {"X-Session-Id": response.json()["session_id"]}


@pytest.fixture
def admin_headers(client, session_headers):
    """Session headers signed in as the demo admin"""
    response = client.post(
        "/api/admin/login",
        json={"email": "admin@example.com", "password": "admin123"},
        headers=session_headers,
    )
    assert response.status_code == 200
    return session_headers
