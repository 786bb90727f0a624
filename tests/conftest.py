"""Pytest configuration and fixtures."""

from datetime import date
from typing import Any, Callable

import pytest

from stockroom.config import Settings
from stockroom.models.item import ItemCreate
from stockroom.state.inventory import InventoryStore
from stockroom.state.manager import BlobStore, InMemoryBlobStore, StorageError
from stockroom.state.repository import InventoryRepository


class FailingBlobStore(BlobStore):
    """Blob store whose backend is always down."""

    def __init__(self) -> None:
        self.write_attempts = 0

    def get(self, key: str) -> str | None:
        raise StorageError(f"cannot read {key}")

    def set(self, key: str, value: str) -> None:
        self.write_attempts += 1
        raise StorageError(f"cannot write {key}")

    def delete(self, key: str) -> None:
        raise StorageError(f"cannot delete {key}")


@pytest.fixture
def settings() -> Settings:
    """Create test settings that ignore any local .env file."""
    return Settings(_env_file=None, storage_backend="memory", log_format="text")


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    """Create an empty in-memory blob store."""
    return InMemoryBlobStore()


@pytest.fixture
def repository(blob_store: InMemoryBlobStore, settings: Settings) -> InventoryRepository:
    """Create a repository over the in-memory blob store."""
    return InventoryRepository(blob_store, settings)


@pytest.fixture
def store(repository: InventoryRepository, settings: Settings) -> InventoryStore:
    """Create a store starting from the default categories."""
    return InventoryStore(repository, settings)


@pytest.fixture
def failing_blob_store() -> FailingBlobStore:
    """Create a blob store that fails every call."""
    return FailingBlobStore()


@pytest.fixture
def failing_store(failing_blob_store: FailingBlobStore, settings: Settings) -> InventoryStore:
    """Create a store whose persistence always fails."""
    return InventoryStore(InventoryRepository(failing_blob_store, settings), settings)


# Sample data fixtures


@pytest.fixture
def widget() -> ItemCreate:
    """Create a low-stock, expired tool."""
    return ItemCreate(
        name="Widget",
        category="Tools",
        quantity=2,
        expiration_date=date(2020, 1, 1),
        location="A1",
        barcode="X1",
    )


@pytest.fixture
def arduino() -> ItemCreate:
    """Create a healthy electronics item."""
    return ItemCreate(
        name="Arduino Uno",
        category="Electronics",
        sub_type="Boards",
        quantity=25,
        expiration_date=date(2030, 12, 31),
        location="Aisle A-1",
        barcode="ELE001",
    )


@pytest.fixture
def make_item() -> Callable[..., ItemCreate]:
    """Build item payloads with sensible defaults."""

    def _make(**overrides: Any) -> ItemCreate:
        data = {
            "name": "Sample",
            "category": "Tools",
            "quantity": 20,
            "expiration_date": date(2030, 1, 1),
            "location": "Aisle D-1",
            "barcode": "TOO001",
        }
        data.update(overrides)
        return ItemCreate(**data)

    return _make
