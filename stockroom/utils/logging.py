"""Structured logging configuration."""

import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger.json import JsonFormatter

from stockroom.config import Settings, get_settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure structured logging for the application."""
    settings = settings or get_settings()

    # Configure standard library logging
    log_level = getattr(logging, settings.log_level)

    if settings.log_format == "json":
        # JSON logging for production
        handler = logging.StreamHandler(sys.stdout)
        formatter = JsonFormatter(
            fmt="%(timestamp)s %(level)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "asctime": "timestamp"},
        )
        handler.setFormatter(formatter)
    else:
        # Human-readable logging for development
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer() if settings.log_format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


class StoreLogger:
    """Specialized logger for inventory store mutations."""

    def __init__(self, component: str):
        self.component = component
        self.logger = get_logger(component)

    def log_mutation(
        self,
        action: str,
        entity: str,
        entity_id: str,
        **kwargs: Any,
    ) -> None:
        """Log a change to an item, bin, category or subtype."""
        self.logger.info(
            action,
            component=self.component,
            entity=entity,
            entity_id=entity_id,
            **kwargs,
        )

    def log_bin_event(
        self,
        action: str,
        bin_id: str,
        category: str,
        current_quantity: int,
        max_capacity: int,
        **kwargs: Any,
    ) -> None:
        """Log a bin lifecycle event."""
        log_data = {
            "component": self.component,
            "bin_id": bin_id,
            "category": category,
            "current_quantity": current_quantity,
            "max_capacity": max_capacity,
        }
        log_data.update(kwargs)

        if current_quantity > max_capacity:
            self.logger.warning(action, **log_data)
        else:
            self.logger.info(action, **log_data)

    def log_rejected(
        self,
        action: str,
        reason: str,
        **kwargs: Any,
    ) -> None:
        """Log an operation that did not happen."""
        self.logger.info(
            "operation_rejected",
            component=self.component,
            action=action,
            reason=reason,
            **kwargs,
        )

    def log_error(
        self,
        error: str,
        **kwargs: Any,
    ) -> None:
        """Log an error."""
        self.logger.error(
            "store_error",
            component=self.component,
            error=error,
            **kwargs,
        )
