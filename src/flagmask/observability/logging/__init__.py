"""Observability – structlog configuration and logger helpers."""
from flagmask.observability.logging.factory import JsonLoggerFactory, resolve_level
from flagmask.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger", "resolve_level"]
