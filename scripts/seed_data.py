"""Seed sample stock for the club inventory."""

from datetime import date

from stockroom.main import create_inventory_store
from stockroom.models.item import ItemCreate
from stockroom.state.inventory import InventoryStore

SAMPLE_ITEMS = [
    ItemCreate(
        name="Arduino Uno",
        category="Electronics",
        quantity=25,
        expiration_date=date(2026, 12, 31),
        location="Aisle A-1",
        barcode="ELE001",
    ),
    ItemCreate(
        name="Raspberry Pi 4",
        category="Electronics",
        quantity=8,
        expiration_date=date(2026, 6, 15),
        location="Aisle A-1",
        barcode="ELE002",
    ),
    ItemCreate(
        name="USB-C Cables",
        category="Electronics",
        quantity=3,
        expiration_date=date(2027, 1, 1),
        location="Aisle A-2",
        barcode="ELE003",
    ),
    ItemCreate(
        name="Work Gloves (L)",
        category="Clothing",
        sub_type="Gloves",
        quantity=50,
        expiration_date=date(2025, 8, 20),
        location="Aisle B-1",
        barcode="CLO001",
    ),
    ItemCreate(
        name="Safety Vests",
        category="Clothing",
        quantity=15,
        expiration_date=date(2026, 3, 10),
        location="Aisle B-2",
        barcode="CLO002",
    ),
    ItemCreate(
        name="Canned Beans",
        category="Food",
        quantity=200,
        expiration_date=date(2025, 12, 15),
        location="Aisle C-1",
        barcode="FOO001",
    ),
    ItemCreate(
        name="Protein Bars",
        category="Food",
        quantity=5,
        expiration_date=date(2025, 12, 10),
        location="Aisle C-2",
        barcode="FOO002",
    ),
    ItemCreate(
        name="Power Drill",
        category="Tools",
        quantity=12,
        expiration_date=date(2030, 1, 1),
        location="Aisle D-1",
        barcode="TOO001",
    ),
    ItemCreate(
        name="Screwdriver Set",
        category="Tools",
        quantity=30,
        expiration_date=date(2030, 1, 1),
        location="Aisle D-1",
        barcode="TOO002",
    ),
    ItemCreate(
        name="Steel Sheets",
        category="Raw Materials",
        quantity=45,
        expiration_date=date(2030, 1, 1),
        location="Aisle E-1",
        barcode="RAW001",
    ),
    ItemCreate(
        name="Cardboard Boxes",
        category="Packaging",
        quantity=500,
        expiration_date=date(2028, 1, 1),
        location="Aisle F-1",
        barcode="PAC001",
    ),
    ItemCreate(
        name="Bubble Wrap",
        category="Packaging",
        quantity=2,
        expiration_date=date(2027, 6, 1),
        location="Aisle F-2",
        barcode="PAC002",
    ),
]

SAMPLE_SUBTYPES = {
    "Clothing": ["Gloves", "Vests"],
    "Electronics": ["Boards", "Cables"],
}


def seed_items(store: InventoryStore) -> None:
    """Seed sample items, skipping barcodes already on file."""
    print("Seeding items...")

    for item in SAMPLE_ITEMS:
        if store.get_item_by_barcode(item.barcode):
            print(f"  - Skipped {item.name} (barcode {item.barcode} exists)")
            continue

        created = store.add_item(item)
        print(f"  ✓ Added {created.name} ({created.quantity}) to {created.bin_id}")

    print("✓ Items seeded successfully\n")


def seed_subtypes(store: InventoryStore) -> None:
    """Seed sample subtypes."""
    print("Seeding subtypes...")

    for category, names in SAMPLE_SUBTYPES.items():
        for name in names:
            if store.add_subtype(category, name):
                print(f"  ✓ Added {category} / {name}")

    print("✓ Subtypes seeded successfully\n")


def main() -> None:
    """Run all seed functions."""
    print("\n" + "=" * 50)
    print("  Seeding Stockroom Data")
    print("=" * 50 + "\n")

    store = create_inventory_store()
    seed_subtypes(store)
    seed_items(store)

    stats = store.get_stats()
    print(f"  Units on hand: {stats.total_items} in {stats.total_bins} bins")
    print(f"  Alerts: {stats.low_stock_count} low stock, {stats.expiring_count} expiring")

    print("=" * 50)
    print("  ✓ All data seeded successfully!")
    print("=" * 50 + "\n")


if __name__ == "__main__":
    main()
