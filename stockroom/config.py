"""Configuration management for the inventory tracker."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATEGORIES = [
    "Electronics",
    "Clothing",
    "Food",
    "Tools",
    "Raw Materials",
    "Packaging",
    "Chemicals",
    "Other",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage Configuration
    storage_backend: Literal["redis", "memory"] = Field(
        default="redis", description="Blob store used for persistence"
    )
    redis_url: str = Field(default="redis://localhost:6379/0", description="Redis URL")
    storage_key_prefix: str = Field(
        default="stockroom:", description="Prefix applied to every storage key"
    )
    items_key: str = Field(default="inventory_items", description="Key for the items blob")
    bins_key: str = Field(default="inventory_bins", description="Key for the bins blob")
    categories_key: str = Field(
        default="inventory_categories", description="Key for the category list"
    )
    subtypes_key: str = Field(
        default="inventory_subtypes", description="Key for the category subtypes"
    )

    # Environment
    environment: Literal["development", "staging", "production"] = Field(
        default="development"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "text"] = Field(default="json", description="Log format")

    # Inventory Settings
    default_categories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CATEGORIES),
        description="Categories created when no saved state exists",
    )
    default_bin_capacity: int = Field(
        default=100, gt=0, description="Capacity of newly created bins"
    )

    # Alert Settings
    low_stock_threshold: int = Field(default=10, description="Low stock alert threshold")
    critical_stock_threshold: int = Field(
        default=5, description="Low stock alerts below this are critical"
    )
    expiring_window_days: int = Field(
        default=30, description="Days ahead an expiration raises a warning"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v_upper

    @property
    def storage_keys(self) -> dict[str, str]:
        """Storage keys for the four persisted state parts."""
        return {
            "items": self.items_key,
            "bins": self.bins_key,
            "categories": self.categories_key,
            "subtypes": self.subtypes_key,
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
