"""Inventory store - owns items, bins and the category registry."""

import re
import time
from datetime import datetime, time as dt_time, timedelta, timezone
from uuid import uuid4

from stockroom.config import Settings, get_settings
from stockroom.models.alert import Alert, AlertSeverity, AlertType
from stockroom.models.bin import Bin, BinView
from stockroom.models.item import Item, ItemCreate, ItemUpdate
from stockroom.models.snapshot import InventorySnapshot
from stockroom.models.stats import DashboardStats, SearchFilters
from stockroom.state.repository import InventoryRepository
from stockroom.utils.logging import StoreLogger


def _slugify(category: str) -> str:
    return re.sub(r"\s", "-", category.strip().lower())


def bin_letter(index: int) -> str:
    """Spreadsheet-style bin letter for a zero-based index: A..Z, AA, AB, ..."""
    letters = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


class InventoryStore:
    """
    In-memory inventory with best-effort persistence.

    Responsibilities:
    - Item CRUD with a barcode lookup index
    - Bin assignment, capacity bookkeeping and auto-collapse
    - Category and subtype registry
    - Search, alerts and dashboard aggregates

    Readers get copies; every mutation is followed by a save through the
    repository, whose failures never fail the mutation.
    """

    def __init__(
        self,
        repository: InventoryRepository,
        settings: Settings | None = None,
    ):
        self.repository = repository
        self.settings = settings or get_settings()
        self.logger = StoreLogger("inventory_store")

        self.items: dict[str, Item] = {}
        self.bins: dict[str, Bin] = {}
        self.barcode_index: dict[str, str] = {}
        self.categories: list[str] = []
        self.category_subtypes: dict[str, list[str]] = {}

        snapshot = repository.load()
        if snapshot is None:
            self._initialize_defaults()
        else:
            self._restore(snapshot)

    # Initialization

    def _initialize_defaults(self) -> None:
        """Start from the default categories, one empty bin each."""
        for category in self.settings.default_categories:
            if category not in self.categories:
                self.categories.append(category)
                self._create_bin(category)

    def _restore(self, snapshot: InventorySnapshot) -> None:
        """Adopt saved state, treating the items as ground truth."""
        categories = (
            snapshot.categories
            if snapshot.categories is not None
            else self.settings.default_categories
        )
        self.categories = list(dict.fromkeys(categories))
        self.category_subtypes = {
            category: list(dict.fromkeys(names))
            for category, names in snapshot.subtypes.items()
        }

        for bin_ in snapshot.bins:
            bin_.item_ids = []
            bin_.current_quantity = 0
            self.bins[bin_.id] = bin_
            self._ensure_category(bin_.category)

        for item in snapshot.items:
            if item.id in self.items:
                self.logger.log_rejected("restore_item", "duplicate_id", item_id=item.id)
                continue

            self._ensure_category(item.category)
            bin_ = self.bins.get(item.bin_id)
            if bin_ is None or bin_.category != item.category:
                bin_ = self._find_or_create_bin(item.category)
                item.bin_id = bin_.id

            bin_.item_ids.append(item.id)
            bin_.current_quantity += item.quantity
            self.items[item.id] = item
            self.barcode_index[item.barcode] = item.id

        for category in self.categories:
            if not self._bins_for(category):
                self._create_bin(category)

    # Internal helpers

    def _persist(self) -> None:
        snapshot = InventorySnapshot(
            items=list(self.items.values()),
            bins=list(self.bins.values()),
            categories=list(self.categories),
            subtypes=self.category_subtypes,
        )
        if not self.repository.save(snapshot):
            self.logger.log_error(
                "persistence_failed",
                items=len(self.items),
                bins=len(self.bins),
            )

    def _generate_id(self) -> str:
        while True:
            item_id = f"item-{int(time.time() * 1000)}-{uuid4().hex[:9]}"
            if item_id not in self.items:
                return item_id

    def _bins_for(self, category: str) -> list[Bin]:
        return [bin_ for bin_ in self.bins.values() if bin_.category == category]

    def _ensure_category(self, category: str) -> None:
        if category not in self.categories:
            self.categories.append(category)
            self.logger.log_mutation("category_registered", "category", category)

    def _create_bin(self, category: str) -> Bin:
        count = len(self._bins_for(category))
        slug = _slugify(category)

        number = count + 1
        while f"bin-{slug}-{number}" in self.bins:
            number += 1

        bin_ = Bin(
            id=f"bin-{slug}-{number}",
            name=f"{category} Bin {bin_letter(count)}",
            category=category,
            max_capacity=self.settings.default_bin_capacity,
        )
        self.bins[bin_.id] = bin_

        self.logger.log_bin_event(
            "bin_created",
            bin_id=bin_.id,
            category=category,
            current_quantity=0,
            max_capacity=bin_.max_capacity,
            name=bin_.name,
        )
        return bin_

    def _find_or_create_bin(self, category: str) -> Bin:
        for bin_ in self.bins.values():
            if bin_.category == category and bin_.has_space:
                return bin_
        return self._create_bin(category)

    def _attach(self, item: Item, bin_: Bin) -> None:
        item.bin_id = bin_.id
        bin_.item_ids.append(item.id)
        bin_.current_quantity += item.quantity

        if bin_.is_over_capacity:
            self.logger.log_bin_event(
                "bin_over_capacity",
                bin_id=bin_.id,
                category=bin_.category,
                current_quantity=bin_.current_quantity,
                max_capacity=bin_.max_capacity,
            )

    def _detach(self, item: Item) -> None:
        """Take an item out of its bin, collapsing the bin if it is a spare."""
        bin_ = self.bins.get(item.bin_id)
        if bin_ is None:
            return

        if item.id in bin_.item_ids:
            bin_.item_ids.remove(item.id)
        bin_.current_quantity -= item.quantity

        if bin_.is_empty and len(self._bins_for(bin_.category)) > 1:
            del self.bins[bin_.id]
            self.logger.log_bin_event(
                "bin_collapsed",
                bin_id=bin_.id,
                category=bin_.category,
                current_quantity=bin_.current_quantity,
                max_capacity=bin_.max_capacity,
            )

    def _view(self, bin_: Bin) -> BinView:
        return BinView(
            id=bin_.id,
            name=bin_.name,
            category=bin_.category,
            max_capacity=bin_.max_capacity,
            current_quantity=bin_.current_quantity,
            items=[self.items[item_id].model_copy(deep=True) for item_id in bin_.item_ids],
        )

    # Bins

    def find_or_create_bin(self, category: str) -> Bin:
        """
        Find the first bin of a category with spare capacity, or open a new one.

        Args:
            category: Category the bin must hold

        Returns:
            A copy of the chosen bin
        """
        bin_count = len(self.bins)
        bin_ = self._find_or_create_bin(category)
        if len(self.bins) != bin_count:
            self._persist()
        return bin_.model_copy(deep=True)

    def get_all_bins(self) -> list[Bin]:
        return [bin_.model_copy(deep=True) for bin_ in self.bins.values()]

    def get_bin(self, bin_id: str) -> Bin | None:
        bin_ = self.bins.get(bin_id)
        return bin_.model_copy(deep=True) if bin_ else None

    def get_bin_items(self, bin_id: str) -> list[Item] | None:
        """Items held by a bin, in insertion order."""
        bin_ = self.bins.get(bin_id)
        if bin_ is None:
            return None
        return [self.items[item_id].model_copy(deep=True) for item_id in bin_.item_ids]

    def get_bin_view(self, bin_id: str) -> BinView | None:
        bin_ = self.bins.get(bin_id)
        return self._view(bin_) if bin_ else None

    def get_bin_views(self) -> list[BinView]:
        """All bins joined with their items, for presentation."""
        return [self._view(bin_) for bin_ in self.bins.values()]

    # Items

    def add_item(self, data: ItemCreate) -> Item:
        """
        Stock a new item in a bin of its category.

        Barcode uniqueness is not checked here; callers look the barcode up
        with get_item_by_barcode before adding.

        Args:
            data: Validated item payload

        Returns:
            The created item
        """
        self._ensure_category(data.category)
        bin_ = self._find_or_create_bin(data.category)
        now = datetime.utcnow()

        item = Item(
            **data.model_dump(),
            id=self._generate_id(),
            bin_id=bin_.id,
            created_at=now,
            updated_at=now,
        )

        self.items[item.id] = item
        self.barcode_index[item.barcode] = item.id
        self._attach(item, bin_)

        self.logger.log_mutation(
            "item_added",
            "item",
            item.id,
            bin_id=bin_.id,
            category=item.category,
            quantity=item.quantity,
        )
        self._persist()
        return item.model_copy(deep=True)

    def get_item(self, item_id: str) -> Item | None:
        item = self.items.get(item_id)
        return item.model_copy(deep=True) if item else None

    def get_all_items(self) -> list[Item]:
        return [item.model_copy(deep=True) for item in self.items.values()]

    def get_item_by_barcode(self, barcode: str) -> Item | None:
        """Exact-match barcode lookup."""
        item_id = self.barcode_index.get(barcode)
        return self.get_item(item_id) if item_id else None

    def update_item(self, item_id: str, updates: ItemUpdate) -> Item | None:
        """
        Apply a partial update to an item.

        A quantity change is reflected in the owning bin. A category change
        moves the item to a bin of the new category; the old bin collapses
        if it is left empty and is not the last one of its category.

        Args:
            item_id: Item to update
            updates: Fields to change

        Returns:
            The updated item, or None if the id is unknown
        """
        item = self.items.get(item_id)
        if item is None:
            self.logger.log_rejected("update_item", "not_found", item_id=item_id)
            return None

        updated = item.model_copy(
            update={**updates.changes(), "updated_at": datetime.utcnow()}
        )

        if updated.barcode != item.barcode:
            if self.barcode_index.get(item.barcode) == item_id:
                del self.barcode_index[item.barcode]
            self.barcode_index[updated.barcode] = item_id

        if updated.category != item.category:
            self._detach(item)
            self._ensure_category(updated.category)
            self._attach(updated, self._find_or_create_bin(updated.category))
        elif updated.quantity != item.quantity:
            bin_ = self.bins.get(item.bin_id)
            if bin_ is not None:
                bin_.current_quantity += updated.quantity - item.quantity

        self.items[item_id] = updated

        self.logger.log_mutation(
            "item_updated",
            "item",
            item_id,
            fields=sorted(updates.changes()),
            bin_id=updated.bin_id,
        )
        self._persist()
        return updated.model_copy(deep=True)

    def delete_item(self, item_id: str) -> bool:
        """Remove an item; False if the id is unknown."""
        item = self.items.get(item_id)
        if item is None:
            self.logger.log_rejected("delete_item", "not_found", item_id=item_id)
            return False

        self._detach(item)

        if self.barcode_index.get(item.barcode) == item_id:
            del self.barcode_index[item.barcode]
        del self.items[item_id]

        self.logger.log_mutation("item_deleted", "item", item_id, bin_id=item.bin_id)
        self._persist()
        return True

    # Queries

    def search_items(self, filters: SearchFilters | None = None) -> list[Item]:
        """
        Find items matching every given filter.

        Args:
            filters: category (exact), barcode (substring), expiration range
                (inclusive) and free-text search over name, barcode,
                location and sub type. Empty filters are ignored.

        Returns:
            Matching items in insertion order
        """
        filters = filters or SearchFilters()
        results = list(self.items.values())

        if filters.category:
            results = [i for i in results if i.category == filters.category]

        if filters.barcode:
            needle = filters.barcode.lower()
            results = [i for i in results if needle in i.barcode.lower()]

        if filters.expiration_start:
            results = [i for i in results if i.expiration_date >= filters.expiration_start]

        if filters.expiration_end:
            results = [i for i in results if i.expiration_date <= filters.expiration_end]

        if filters.search:
            results = [i for i in results if i.matches_text(filters.search)]

        return [item.model_copy(deep=True) for item in results]

    def get_alerts(self, now: datetime | None = None) -> list[Alert]:
        """
        Derive stock and expiration alerts for every item.

        Stock and expiration checks are independent, so one item can raise
        two alerts. Critical alerts come first.

        Args:
            now: Evaluation time (UTC); defaults to the current time

        Returns:
            Freshly computed alerts
        """
        now = now or datetime.utcnow()
        if now.tzinfo is not None:
            now = now.astimezone(timezone.utc).replace(tzinfo=None)
        window_end = now + timedelta(days=self.settings.expiring_window_days)

        alerts: list[Alert] = []
        for item in self.items.values():
            if item.quantity < self.settings.low_stock_threshold:
                alerts.append(
                    Alert(
                        id=f"alert-low-{item.id}",
                        type=AlertType.LOW_STOCK,
                        item_id=item.id,
                        item_name=item.name,
                        message=f"Low stock: Only {item.quantity} units remaining",
                        severity=(
                            AlertSeverity.CRITICAL
                            if item.quantity < self.settings.critical_stock_threshold
                            else AlertSeverity.WARNING
                        ),
                        created_at=now,
                    )
                )

            expires_at = datetime.combine(item.expiration_date, dt_time.min)
            expiration = item.expiration_date.isoformat()
            if expires_at < now:
                alerts.append(
                    Alert(
                        id=f"alert-expired-{item.id}",
                        type=AlertType.EXPIRED,
                        item_id=item.id,
                        item_name=item.name,
                        message=f"Item has expired on {expiration}",
                        severity=AlertSeverity.CRITICAL,
                        created_at=now,
                    )
                )
            elif expires_at < window_end:
                alerts.append(
                    Alert(
                        id=f"alert-expiring-{item.id}",
                        type=AlertType.EXPIRING,
                        item_id=item.id,
                        item_name=item.name,
                        message=f"Expiring on {expiration}",
                        severity=AlertSeverity.WARNING,
                        created_at=now,
                    )
                )

        # sort is stable, so item order is kept within each severity
        alerts.sort(key=lambda alert: 0 if alert.is_critical else 1)
        return alerts

    def get_stats(self, now: datetime | None = None) -> DashboardStats:
        """Aggregate quantities and alert counts for the dashboard."""
        alerts = self.get_alerts(now)

        category_breakdown: dict[str, int] = {}
        for item in self.items.values():
            category_breakdown[item.category] = (
                category_breakdown.get(item.category, 0) + item.quantity
            )

        return DashboardStats(
            total_items=sum(item.quantity for item in self.items.values()),
            total_bins=len(self.bins),
            low_stock_count=sum(1 for a in alerts if a.type == AlertType.LOW_STOCK),
            expiring_count=sum(
                1 for a in alerts if a.type in (AlertType.EXPIRING, AlertType.EXPIRED)
            ),
            category_breakdown=category_breakdown,
        )

    # Categories

    def get_categories(self) -> list[str]:
        return list(self.categories)

    def add_category(self, name: str) -> bool:
        """Register a category with one empty bin; False if it exists."""
        if name in self.categories:
            self.logger.log_rejected("add_category", "duplicate", category=name)
            return False

        self.categories.append(name)
        self._create_bin(name)

        self.logger.log_mutation("category_added", "category", name)
        self._persist()
        return True

    def update_category(self, old_name: str, new_name: str) -> bool:
        """
        Rename a category everywhere it is referenced.

        Args:
            old_name: Existing category
            new_name: Replacement name, which must not be taken

        Returns:
            False if old_name is unknown or new_name already exists
        """
        if old_name not in self.categories:
            self.logger.log_rejected("update_category", "not_found", category=old_name)
            return False
        if new_name in self.categories:
            self.logger.log_rejected("update_category", "duplicate", category=new_name)
            return False

        self.categories[self.categories.index(old_name)] = new_name

        prefix = f"{old_name} Bin "
        for bin_ in self._bins_for(old_name):
            bin_.category = new_name
            if bin_.name.startswith(prefix):
                bin_.name = f"{new_name} Bin {bin_.name[len(prefix):]}"

        for item in self.items.values():
            if item.category == old_name:
                item.category = new_name

        if old_name in self.category_subtypes:
            moved = self.category_subtypes.pop(old_name)
            orphans = self.category_subtypes.get(new_name, [])
            self.category_subtypes[new_name] = moved + [n for n in orphans if n not in moved]

        self.logger.log_mutation(
            "category_renamed", "category", new_name, previous_name=old_name
        )
        self._persist()
        return True

    def delete_category(self, name: str) -> bool:
        """Remove an unused category with its bins and subtypes."""
        if name not in self.categories:
            self.logger.log_rejected("delete_category", "not_found", category=name)
            return False
        if any(item.category == name for item in self.items.values()):
            self.logger.log_rejected("delete_category", "in_use", category=name)
            return False

        self.categories.remove(name)
        for bin_ in self._bins_for(name):
            del self.bins[bin_.id]
        self.category_subtypes.pop(name, None)

        self.logger.log_mutation("category_deleted", "category", name)
        self._persist()
        return True

    # Subtypes

    def get_subtypes(self, category: str) -> list[str]:
        return list(self.category_subtypes.get(category, []))

    def add_subtype(self, category: str, name: str) -> bool:
        if name in self.category_subtypes.get(category, []):
            self.logger.log_rejected(
                "add_subtype", "duplicate", category=category, subtype=name
            )
            return False

        self.category_subtypes.setdefault(category, []).append(name)

        self.logger.log_mutation("subtype_added", "subtype", name, category=category)
        self._persist()
        return True

    def delete_subtype(self, category: str, name: str) -> bool:
        if name not in self.category_subtypes.get(category, []):
            self.logger.log_rejected(
                "delete_subtype", "not_found", category=category, subtype=name
            )
            return False

        self.category_subtypes[category].remove(name)

        self.logger.log_mutation("subtype_deleted", "subtype", name, category=category)
        self._persist()
        return True
