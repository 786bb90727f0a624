"""Query and aggregate models."""

from datetime import date

from pydantic import Field

from stockroom.models.base import CamelModel


class SearchFilters(CamelModel):
    """Optional, AND-combined item filters."""

    category: str | None = None
    barcode: str | None = None
    expiration_start: date | None = None
    expiration_end: date | None = None
    search: str | None = None


class DashboardStats(CamelModel):
    """Aggregate figures for the dashboard."""

    total_items: int = 0
    total_bins: int = 0
    low_stock_count: int = 0
    expiring_count: int = 0
    category_breakdown: dict[str, int] = Field(default_factory=dict)
