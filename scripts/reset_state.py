"""Reset all saved inventory state (useful for testing)."""

from stockroom.config import get_settings
from stockroom.state.manager import create_blob_store
from stockroom.state.repository import InventoryRepository


def reset_all_state() -> None:
    """Delete the saved items, bins, categories and subtypes."""
    print("\n⚠️  WARNING: This will delete ALL saved inventory data!")
    response = input("Are you sure? (yes/no): ")

    if response.lower() != "yes":
        print("Cancelled.")
        return

    print("\nResetting state...")

    settings = get_settings()
    repository = InventoryRepository(create_blob_store(settings), settings)
    repository.clear()

    print("✓ All inventory state cleared\n")


if __name__ == "__main__":
    reset_all_state()
