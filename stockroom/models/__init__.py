"""Data models for the inventory tracker."""

from stockroom.models.alert import Alert, AlertSeverity, AlertType
from stockroom.models.bin import Bin, BinView
from stockroom.models.item import Item, ItemCreate, ItemUpdate
from stockroom.models.snapshot import InventorySnapshot
from stockroom.models.stats import DashboardStats, SearchFilters

__all__ = [
    # Alert
    "Alert",
    "AlertSeverity",
    "AlertType",
    # Bin
    "Bin",
    "BinView",
    # Item
    "Item",
    "ItemCreate",
    "ItemUpdate",
    # State
    "InventorySnapshot",
    "DashboardStats",
    "SearchFilters",
]
