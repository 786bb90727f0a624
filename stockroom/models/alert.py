"""Derived alert models."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from stockroom.models.base import CamelModel


class AlertType(str, Enum):
    """Alert kinds."""

    LOW_STOCK = "low-stock"
    EXPIRING = "expiring"
    EXPIRED = "expired"


class AlertSeverity(str, Enum):
    """Alert severities."""

    WARNING = "warning"
    CRITICAL = "critical"


class Alert(CamelModel):
    """Notification about low stock or a near or past expiration."""

    id: str
    type: AlertType
    item_id: str
    item_name: str
    message: str
    severity: AlertSeverity
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def is_critical(self) -> bool:
        return self.severity == AlertSeverity.CRITICAL
