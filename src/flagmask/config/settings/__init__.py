"""Config settings – flag-set settings loaded from the environment."""
from flagmask.config.settings.flag_set import FlagSetSettings, build_flag_set
from flagmask.config.settings.loaders import EnvSettingsLoader, parse_int

__all__ = ["EnvSettingsLoader", "FlagSetSettings", "build_flag_set", "parse_int"]
