"""Persisted inventory state."""

from pydantic import BaseModel, Field

from stockroom.models.bin import Bin
from stockroom.models.item import Item


class InventorySnapshot(BaseModel):
    """The four independently persisted parts of the inventory."""

    items: list[Item] = Field(default_factory=list)
    bins: list[Bin] = Field(default_factory=list)
    categories: list[str] | None = None
    subtypes: dict[str, list[str]] = Field(default_factory=dict)
