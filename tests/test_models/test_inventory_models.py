"""Tests for inventory data models."""

from datetime import date

import pytest
from pydantic import ValidationError

from stockroom.models.alert import Alert, AlertSeverity, AlertType
from stockroom.models.bin import Bin
from stockroom.models.item import Item, ItemCreate, ItemUpdate


def test_item_create_accepts_camel_case() -> None:
    """Test that payloads in the persisted camelCase spelling are accepted."""
    item = ItemCreate(
        name="Bubble Wrap",
        category="Packaging",
        subType="Rolls",
        quantity=2,
        expirationDate="2027-06-01",
        location="Aisle F-2",
        barcode="PAC002",
    )

    assert item.sub_type == "Rolls"
    assert item.expiration_date == date(2027, 6, 1)


def test_item_create_rejects_negative_quantity() -> None:
    """Test that quantities must be non-negative."""
    with pytest.raises(ValidationError):
        ItemCreate(
            name="Widget",
            category="Tools",
            quantity=-1,
            expiration_date=date(2030, 1, 1),
            barcode="X1",
        )


def test_item_create_requires_barcode() -> None:
    """Test that blank required fields are rejected."""
    with pytest.raises(ValidationError):
        ItemCreate(
            name="Widget",
            category="Tools",
            quantity=1,
            expiration_date=date(2030, 1, 1),
            barcode="   ",
        )


def test_item_update_changes_only_set_fields() -> None:
    """Test that an update reports only what the caller set."""
    update = ItemUpdate(quantity=4, sub_type=None)

    assert update.changes() == {"quantity": 4, "sub_type": None}
    assert ItemUpdate().changes() == {}


def test_item_update_drops_null_required_fields() -> None:
    """Test that nulls never overwrite required item fields."""
    update = ItemUpdate(name=None, location="B2")

    assert update.changes() == {"location": "B2"}


def test_item_dumps_camel_case() -> None:
    """Test that items serialize with camelCase keys."""
    item = Item(
        id="item-1",
        name="Widget",
        category="Tools",
        quantity=2,
        expiration_date=date(2020, 1, 1),
        barcode="X1",
        bin_id="bin-tools-1",
    )

    data = item.to_json_dict()

    assert data["expirationDate"] == "2020-01-01"
    assert data["binId"] == "bin-tools-1"
    assert "subType" in data


def test_item_matches_text_on_sub_type() -> None:
    """Test that free-text search covers the sub type."""
    item = Item(
        id="item-1",
        name="Gloves",
        category="Clothing",
        sub_type="Nitrile",
        quantity=10,
        expiration_date=date(2030, 1, 1),
        barcode="CLO009",
        bin_id="bin-clothing-1",
    )

    assert item.matches_text("nitr")
    assert item.matches_text("clo0")
    assert not item.matches_text("leather")


def test_bin_accepts_embedded_items() -> None:
    """Test that bins saved with full item records load as id lists."""
    bin_ = Bin.model_validate(
        {
            "id": "bin-tools-1",
            "name": "Tools Bin A",
            "category": "Tools",
            "maxCapacity": 100,
            "currentQuantity": 5,
            "items": [{"id": "item-1", "name": "Widget"}, {"id": "item-2"}],
        }
    )

    assert bin_.item_ids == ["item-1", "item-2"]


def test_bin_capacity_flags() -> None:
    """Test the bin capacity helpers."""
    bin_ = Bin(id="bin-food-1", name="Food Bin A", category="Food", max_capacity=10)

    assert bin_.is_empty
    assert bin_.has_space

    bin_.current_quantity = 12
    assert not bin_.has_space
    assert bin_.is_over_capacity


def test_alert_serializes_enum_values() -> None:
    """Test that alert types serialize to their wire values."""
    alert = Alert(
        id="alert-low-item-1",
        type=AlertType.LOW_STOCK,
        item_id="item-1",
        item_name="Widget",
        message="Low stock: Only 2 units remaining",
        severity=AlertSeverity.CRITICAL,
    )

    data = alert.to_json_dict()

    assert data["type"] == "low-stock"
    assert data["severity"] == "critical"
    assert data["itemName"] == "Widget"
    assert alert.is_critical


@pytest.mark.parametrize("field", ["name", "category", "barcode"])
def test_item_update_rejects_blank_required_fields(field: str) -> None:
    """Test that updates cannot blank out name, category or barcode."""
    with pytest.raises(ValidationError):
        ItemUpdate(**{field: "  "})


def test_item_update_strips_required_fields() -> None:
    """Test that update values are trimmed like create values."""
    update = ItemUpdate(category=" Tools ", barcode="X1 ")

    assert update.changes() == {"category": "Tools", "barcode": "X1"}
