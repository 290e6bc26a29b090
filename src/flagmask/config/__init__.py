"""Config – env-driven settings for building flag sets."""

from flagmask.config.settings import EnvSettingsLoader, FlagSetSettings, build_flag_set, parse_int
from flagmask.kernel.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "FlagSetSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "build_flag_set",
    "parse_int",
]
