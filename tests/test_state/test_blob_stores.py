"""Tests for the blob store backends."""

import pytest
import redis

from stockroom.config import Settings
from stockroom.state.manager import (
    InMemoryBlobStore,
    RedisBlobStore,
    StorageError,
    create_blob_store,
)


class _DictRedisClient:
    """Stands in for a redis client holding plain strings."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class _DownRedisClient:
    """Stands in for a redis client whose server is unreachable."""

    def get(self, key: str) -> str | None:
        raise redis.ConnectionError("Connection refused")

    def set(self, key: str, value: str) -> None:
        raise redis.ConnectionError("Connection refused")

    def delete(self, key: str) -> None:
        raise redis.ConnectionError("Connection refused")


def test_in_memory_store_round_trip() -> None:
    """Test basic get/set/delete on the in-memory store."""
    store = InMemoryBlobStore()

    assert store.get("inventory_items") is None

    store.set("inventory_items", "[]")
    assert store.get("inventory_items") == "[]"

    store.delete("inventory_items")
    store.delete("inventory_items")
    assert store.get("inventory_items") is None


def test_redis_store_applies_key_prefix() -> None:
    """Test that keys are namespaced with the configured prefix."""
    client = _DictRedisClient()
    store = RedisBlobStore("redis://unused", key_prefix="stockroom:", client=client)

    store.set("inventory_categories", '["Tools"]')

    assert client.data == {"stockroom:inventory_categories": '["Tools"]'}
    assert store.get("inventory_categories") == '["Tools"]'
    assert store.get("inventory_bins") is None

    store.delete("inventory_categories")
    assert client.data == {}


def test_redis_store_wraps_connection_errors() -> None:
    """Test that redis failures surface as StorageError."""
    store = RedisBlobStore("redis://unused", client=_DownRedisClient())

    with pytest.raises(StorageError):
        store.get("inventory_items")

    with pytest.raises(StorageError):
        store.set("inventory_items", "[]")

    with pytest.raises(StorageError):
        store.delete("inventory_items")


def test_create_blob_store_selects_backend() -> None:
    """Test that the configured backend is built."""
    memory = create_blob_store(Settings(_env_file=None, storage_backend="memory"))
    assert isinstance(memory, InMemoryBlobStore)

    remote = create_blob_store(
        Settings(
            _env_file=None,
            storage_backend="redis",
            redis_url="redis://cache:6379/2",
            storage_key_prefix="club:",
        )
    )
    assert isinstance(remote, RedisBlobStore)
    assert remote.redis_url == "redis://cache:6379/2"
    assert remote.key_prefix == "club:"
    assert remote.redis_client is None
