"""Load and save the persisted parts of the inventory."""

import json
from typing import Any

from pydantic import TypeAdapter, ValidationError

from stockroom.config import Settings, get_settings
from stockroom.models.bin import Bin
from stockroom.models.item import Item
from stockroom.models.snapshot import InventorySnapshot
from stockroom.state.manager import BlobStore, StorageError
from stockroom.utils.logging import get_logger

logger = get_logger(__name__)

_items_adapter = TypeAdapter(list[Item])
_bins_adapter = TypeAdapter(list[Bin])
_categories_adapter = TypeAdapter(list[str])
_subtypes_adapter = TypeAdapter(dict[str, list[str]])


class InventoryRepository:
    """
    Persists an inventory snapshot as four independently keyed JSON blobs.

    Reads and writes are best-effort: storage and decoding failures are
    logged here and reported through return values, never raised.
    """

    def __init__(self, blob_store: BlobStore, settings: Settings | None = None):
        self.blob_store = blob_store
        self.settings = settings or get_settings()
        self.keys = self.settings.storage_keys

    def _read(self, part: str) -> Any:
        raw = self.blob_store.get(self.keys[part])
        if raw is None:
            return None
        return json.loads(raw)

    def load(self) -> InventorySnapshot | None:
        """
        Load the saved inventory.

        Returns:
            The snapshot, or None when nothing is saved or the saved
            state cannot be read or decoded
        """
        try:
            raw_items = self._read("items")
            raw_bins = self._read("bins")
            raw_categories = self._read("categories")
            raw_subtypes = self._read("subtypes")
        except StorageError as e:
            logger.error("inventory_load_failed", reason="storage", error=str(e))
            return None
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("inventory_load_failed", reason="malformed_json", error=str(e))
            return None

        if all(
            part is None for part in (raw_items, raw_bins, raw_categories, raw_subtypes)
        ):
            logger.info("inventory_load_empty")
            return None

        try:
            snapshot = InventorySnapshot(
                items=_items_adapter.validate_python(raw_items or []),
                bins=_bins_adapter.validate_python(raw_bins or []),
                categories=(
                    _categories_adapter.validate_python(raw_categories)
                    if raw_categories is not None
                    else None
                ),
                subtypes=_subtypes_adapter.validate_python(raw_subtypes or {}),
            )
        except ValidationError as e:
            logger.error(
                "inventory_load_failed",
                reason="malformed_state",
                error_count=e.error_count(),
            )
            return None

        logger.info(
            "inventory_loaded",
            items=len(snapshot.items),
            bins=len(snapshot.bins),
            categories=len(snapshot.categories or []),
        )
        return snapshot

    def save(self, snapshot: InventorySnapshot) -> bool:
        """
        Write every part of the snapshot.

        Returns:
            True when all four writes succeeded
        """
        payloads = {
            "items": [item.to_json_dict() for item in snapshot.items],
            "bins": [bin_.to_json_dict() for bin_ in snapshot.bins],
            "categories": list(snapshot.categories or []),
            "subtypes": snapshot.subtypes,
        }

        ok = True
        for part, payload in payloads.items():
            try:
                self.blob_store.set(self.keys[part], json.dumps(payload))
            except StorageError as e:
                ok = False
                logger.error(
                    "inventory_save_failed",
                    part=part,
                    key=self.keys[part],
                    error=str(e),
                )

        return ok

    def clear(self) -> None:
        """Delete all saved inventory state."""
        for part, key in self.keys.items():
            try:
                self.blob_store.delete(key)
            except StorageError as e:
                logger.error("inventory_clear_failed", part=part, key=key, error=str(e))
