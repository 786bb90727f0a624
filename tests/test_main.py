"""Tests for application startup."""

from stockroom.config import Settings
from stockroom.main import create_inventory_store
from stockroom.models.item import ItemCreate
from stockroom.state.manager import InMemoryBlobStore


def test_create_inventory_store_loads_saved_state(
    settings: Settings,
    widget: ItemCreate,
) -> None:
    """Test that stores built on the same backend share saved state."""
    blob_store = InMemoryBlobStore()

    first = create_inventory_store(settings, blob_store=blob_store, configure_logging=False)
    item = first.add_item(widget)

    second = create_inventory_store(settings, blob_store=blob_store, configure_logging=False)

    assert second.get_item(item.id) == item
    assert second.repository.blob_store is blob_store


def test_create_inventory_store_uses_configured_backend(settings: Settings) -> None:
    """Test that the memory backend is picked from settings."""
    store = create_inventory_store(settings, configure_logging=False)

    assert isinstance(store.repository.blob_store, InMemoryBlobStore)
    assert store.get_all_items() == []
