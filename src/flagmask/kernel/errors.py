"""Kernel error hierarchy.

Hierarchy::

    FlagmaskError
    ├── DomainError                  flag-set rules (see ``flagmask.mask.errors``)
    └── ConfigError                  settings could not be turned into a flag set
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError

Every error carries a machine-readable ``code`` and a ``detail`` dict that is
merged into :meth:`FlagmaskError.to_dict`, so structured log events can
include the offending label, count, or state directly.
"""

from __future__ import annotations

from typing import Any


class FlagmaskError(Exception):
    """Root of the flagmask error hierarchy."""

    default_code: str = "flagmask_error"

    def __init__(self, message: str, *, code: str | None = None, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Flat, log-friendly rendering: error type, code, message and detail."""
        return {"error": type(self).__name__, "code": self.code, "message": self.message, **self.detail}


class DomainError(FlagmaskError):
    """A flag-set operation broke one of the set's rules."""

    default_code = "domain_error"


class ConfigError(FlagmaskError):
    """Settings are missing or unusable."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing", setting=setting_name)
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot describe a valid flag set.

    ``value`` is the offending value as seen by the validator (for label
    lists this is the label count, for states the raw integer).
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            setting=setting_name,
            value=value,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = [
    "ConfigError",
    "DomainError",
    "FlagmaskError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
