"""Observability – JsonLoggerFactory and level resolution."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from flagmask.kernel.errors import InvalidSettingValueError


def resolve_level(level: int | str, *, setting_name: str = "level") -> int:
    """Turn a stdlib level name (any case) or number into its numeric value.

    Raises
    ------
    InvalidSettingValueError
        When *level* is a name the :mod:`logging` module does not know.
    """
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric, int):
        raise InvalidSettingValueError(setting_name, level, "not a logging level name")
    return numeric


class JsonLoggerFactory:
    """Configure structlog to render JSON through the stdlib root logger."""

    @staticmethod
    def configure(
        level: int | str = logging.INFO,
        *,
        cache_logger_on_first_use: bool = True,
    ) -> None:
        numeric_level = resolve_level(level)

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=cache_logger_on_first_use,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(numeric_level)


__all__ = ["JsonLoggerFactory", "resolve_level"]
