"""Observability – structured logging helpers."""
from saga_storage.observability.logging.factory import JsonLoggerFactory, configure_logging
from saga_storage.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
