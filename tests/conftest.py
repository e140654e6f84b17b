"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides backing stores, products files and catalog fixtures.

==============================================================================
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, Generator, List

import pytest

from product_manager.catalog import JsonFileStore, ProductCatalog
from product_manager.config import get_settings


# ============================================================================
# STORES
# ============================================================================

class MemoryStore:
    """In-memory backing store recording every write."""

    def __init__(self, data: Any = None, missing: bool = False):
        self.data = copy.deepcopy(data) if data is not None else []
        self.missing = missing
        self.writes: List[Any] = []

    def read(self) -> Any:
        if self.missing:
            raise FileNotFoundError("no products yet")
        return copy.deepcopy(self.data)

    def write(self, data: Any) -> None:
        self.data = copy.deepcopy(data)
        self.missing = False
        self.writes.append(copy.deepcopy(data))


class FailingWriteStore(MemoryStore):
    """Store whose writes always fail, like a read-only disk."""

    def write(self, data: Any) -> None:
        raise PermissionError("read-only file system")


# ============================================================================
# DATA FIXTURES
# ============================================================================

@pytest.fixture
def sample_records() -> List[Dict[str, Any]]:
    """Three well-formed product records."""
    return [
        {"id": 1, "name": "Laptop", "category": "Electronics", "price": 999.99, "available": True},
        {"id": 2, "name": "Hammer", "category": "Hardware", "price": 15, "available": False},
        {"id": 3, "name": "Headphones", "category": "electronics", "price": 49.5, "available": True},
    ]


@pytest.fixture
def new_product() -> Dict[str, Any]:
    """A valid product not present in sample_records."""
    return {"id": 10, "name": "Widget", "category": "Hardware", "price": 9.99, "available": True}


@pytest.fixture
def products_file(tmp_path: Path, sample_records) -> Path:
    """Products JSON file seeded with sample_records."""
    path = tmp_path / "products.json"
    path.write_text(json.dumps(sample_records, indent=2), encoding="utf-8")
    return path


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def memory_store(sample_records) -> MemoryStore:
    return MemoryStore(sample_records)


@pytest.fixture
def catalog(memory_store: MemoryStore) -> ProductCatalog:
    """Catalog over an in-memory store seeded with sample_records."""
    return ProductCatalog(memory_store)


@pytest.fixture
def empty_catalog() -> ProductCatalog:
    """Catalog whose store does not exist yet."""
    return ProductCatalog(MemoryStore(missing=True))


@pytest.fixture
def file_catalog(products_file: Path) -> ProductCatalog:
    """Catalog over a real products file."""
    return ProductCatalog(JsonFileStore(products_file))


# ============================================================================
# SETTINGS FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch) -> Generator[None, None, None]:
    """Isolate tests from the developer's environment and settings cache."""
    for name in ("PRODUCTS_FILE", "DEBUG", "LOG_LEVEL", "APP_NAME", "JSON_INDENT"):
        monkeypatch.delenv(f"PRODUCT_MANAGER_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
