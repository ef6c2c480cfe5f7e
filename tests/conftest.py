"""Pytest configuration and fixtures"""
import os
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

# Set test environment variables (before boutique.config is imported)
os.environ.setdefault("AIRTABLE_API_KEY", "test_airtable_key")
os.environ.setdefault("AIRTABLE_BASE_ID", "appTestBase")
os.environ.setdefault("WHATSAPP_PHONE", "212696044246")
os.environ.setdefault("STORE_LANGUAGE", "fr")
os.environ["UPSTASH_REDIS_REST_URL"] = ""
os.environ["UPSTASH_REDIS_REST_TOKEN"] = ""

from boutique.cart import CartStore, MemoryStorage  # noqa: E402
from boutique.catalog import CatalogService, Product  # noqa: E402


@pytest.fixture
def veste():
    """Sample jacket"""
    return Product(
        id="recVeste001",
        name="Veste",
        price=Decimal("500"),
        image_url="https://dl.airtable.com/veste.jpg",
        availability="Disponible",
        category="Vestes",
    )


@pytest.fixture
def chemise():
    """Sample shirt"""
    return Product(
        id="recChemise01",
        name="Chemise lin",
        price=Decimal("249.5"),
        image_url="",
        availability="Disponible",
        category="Chemises",
    )


@pytest.fixture
def echarpe():
    """Sample scarf"""
    return Product(
        id="recEcharpe01",
        name="Écharpe",
        price=Decimal("120"),
        image_url="",
        availability="Sur commande",
        category="Accessoires",
    )


@pytest.fixture
def sample_products(veste, chemise, echarpe):
    """Catalog in Airtable order"""
    return [veste, chemise, echarpe]


@pytest.fixture
def sample_record():
    """Raw Airtable record with every field"""
    return {
        "id": "recVeste001",
        "createdTime": "2024-05-01T10:00:00.000Z",
        "fields": {
            "nom": "Veste",
            "prix": 500,
            "image": [
                {"id": "att1", "url": "https://dl.airtable.com/veste.jpg", "filename": "veste.jpg"},
                {"id": "att2", "url": "https://dl.airtable.com/veste-dos.jpg", "filename": "dos.jpg"},
            ],
            "disponibilite": "Disponible",
            "categorie": "Vestes",
        },
    }


@pytest.fixture
def memory_storage():
    """Empty in-memory cart storage"""
    return MemoryStorage()


@pytest.fixture
def cart_store(memory_storage):
    """Cart store over in-memory storage"""
    return CartStore(memory_storage)


@pytest.fixture
def catalog_service(sample_products):
    """Catalog service with a stubbed loader and no cache"""
    return CatalogService(loader=AsyncMock(return_value=sample_products), use_cache=False)
