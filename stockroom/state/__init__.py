"""State management modules."""

from stockroom.state.inventory import InventoryStore
from stockroom.state.manager import (
    BlobStore,
    InMemoryBlobStore,
    RedisBlobStore,
    StorageError,
    create_blob_store,
)
from stockroom.state.repository import InventoryRepository

__all__ = [
    "BlobStore",
    "InMemoryBlobStore",
    "InventoryRepository",
    "InventoryStore",
    "RedisBlobStore",
    "StorageError",
    "create_blob_store",
]
