"""Kernel – dependency-free building blocks shared by every flagmask layer."""

from flagmask.kernel.errors import (
    ConfigError,
    DomainError,
    FlagmaskError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DomainError",
    "FlagmaskError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
