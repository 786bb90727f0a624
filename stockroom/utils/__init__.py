"""Utility modules."""

from stockroom.utils.logging import StoreLogger, get_logger, setup_logging

__all__ = ["setup_logging", "get_logger", "StoreLogger"]
