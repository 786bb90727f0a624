"""Application entry point: builds the inventory store once at startup."""

from stockroom.config import Settings, get_settings
from stockroom.state.inventory import InventoryStore
from stockroom.state.manager import BlobStore, create_blob_store
from stockroom.state.repository import InventoryRepository
from stockroom.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_inventory_store(
    settings: Settings | None = None,
    blob_store: BlobStore | None = None,
    configure_logging: bool = True,
) -> InventoryStore:
    """
    Build the inventory store and everything it depends on.

    The returned store is meant to be created once per process and passed
    to whatever renders or edits the inventory.

    Args:
        settings: Settings to use; defaults to the environment
        blob_store: Storage backend; defaults to the configured one
        configure_logging: Whether to set up logging first

    Returns:
        A loaded InventoryStore
    """
    settings = settings or get_settings()

    if configure_logging:
        setup_logging(settings)

    blob_store = blob_store or create_blob_store(settings)
    repository = InventoryRepository(blob_store, settings)
    store = InventoryStore(repository, settings)

    logger.info(
        "inventory_store_initialized",
        backend=type(blob_store).__name__,
        items=len(store.items),
        bins=len(store.bins),
        categories=len(store.categories),
    )
    return store


if __name__ == "__main__":
    inventory = create_inventory_store()
    stats = inventory.get_stats()
    logger.info("inventory_summary", **stats.model_dump())
