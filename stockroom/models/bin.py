"""Storage bin models."""

from pydantic import Field, model_validator

from stockroom.models.base import CamelModel
from stockroom.models.item import Item


class Bin(CamelModel):
    """A capacity-bounded container for items of one category."""

    id: str
    name: str
    category: str
    max_capacity: int = Field(default=100, gt=0)
    current_quantity: int = 0
    item_ids: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _accept_embedded_items(cls, data):
        # Older saves embed full item records instead of ids
        if isinstance(data, dict) and "items" in data and not (
            "itemIds" in data or "item_ids" in data
        ):
            data = dict(data)
            embedded = data.pop("items")
            if embedded is None:
                embedded = []
            if not isinstance(embedded, list):
                raise ValueError("items must be a list of item records")
            data["item_ids"] = [
                entry["id"] if isinstance(entry, dict) else entry
                for entry in embedded
                if isinstance(entry, str)
                or (isinstance(entry, dict) and isinstance(entry.get("id"), str))
            ]
        return data

    @property
    def has_space(self) -> bool:
        """Check if the bin is below its capacity."""
        return self.current_quantity < self.max_capacity

    @property
    def is_over_capacity(self) -> bool:
        """Check if the bin holds more than its capacity."""
        return self.current_quantity > self.max_capacity

    @property
    def is_empty(self) -> bool:
        """Check if the bin holds no items."""
        return not self.item_ids


class BinView(CamelModel):
    """A bin joined with its item records, for presentation."""

    id: str
    name: str
    category: str
    max_capacity: int
    current_quantity: int
    items: list[Item] = Field(default_factory=list)
