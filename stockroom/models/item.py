"""Inventory item models."""

from datetime import date, datetime

from pydantic import Field, field_validator

from stockroom.models.base import CamelModel


class ItemCreate(CamelModel):
    """Payload for stocking a new item."""

    name: str
    category: str
    sub_type: str | None = None
    quantity: int = Field(ge=0)
    expiration_date: date
    location: str = ""
    barcode: str

    @field_validator("name", "category", "barcode")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("field is required")
        return v


class ItemUpdate(CamelModel):
    """Partial update; only fields that were set are applied."""

    name: str | None = None
    category: str | None = None
    sub_type: str | None = None
    quantity: int | None = Field(default=None, ge=0)
    expiration_date: date | None = None
    location: str | None = None
    barcode: str | None = None

    @field_validator("name", "category", "barcode")
    @classmethod
    def _strip_required(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("field cannot be blank")
        return v

    def changes(self) -> dict:
        """Return the explicitly set fields, dropping nulls for required fields."""
        data = self.model_dump(exclude_unset=True)
        return {
            key: value
            for key, value in data.items()
            if value is not None or key == "sub_type"
        }


class Item(CamelModel):
    """One stocked unit of a product, owned by exactly one bin."""

    id: str
    name: str
    category: str
    sub_type: str | None = None
    quantity: int = Field(ge=0)
    expiration_date: date
    location: str = ""
    barcode: str
    bin_id: str
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def matches_text(self, needle: str) -> bool:
        """Case-insensitive substring match on name, barcode, location or sub type."""
        needle = needle.lower()
        haystacks = [self.name, self.barcode, self.location, self.sub_type or ""]
        return any(needle in value.lower() for value in haystacks)
