"""Observability – structured logging for flag-set changes."""
from flagmask.observability.logging import JsonLoggerFactory, get_logger, resolve_level

__all__ = ["JsonLoggerFactory", "get_logger", "resolve_level"]
