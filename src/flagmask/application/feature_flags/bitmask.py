"""Application feature flags – BitmaskFeatureFlagProvider."""

from __future__ import annotations

from flagmask.application.feature_flags.feature_flag import FeatureFlag
from flagmask.mask import FlagSet
from flagmask.observability.logging import get_logger

_log = get_logger(__name__)


class BitmaskFeatureFlagProvider:
    """Answers feature-flag questions from one shared :class:`FlagSet`.

    Keys the flag set defines are read from its state word; any other key
    falls back to :attr:`FeatureFlag.default_value`.

    Usage::

        provider = BitmaskFeatureFlagProvider(FlagSet(["dark_mode", "beta"]))
        provider.set("dark_mode", True)
        provider.is_enabled(FeatureFlag("dark_mode"))   # True
    """

    def __init__(self, flag_set: FlagSet | None = None) -> None:
        self._flag_set = flag_set if flag_set is not None else FlagSet()

    @property
    def flag_set(self) -> FlagSet:
        return self._flag_set

    def register(self, flag: FeatureFlag) -> bool:
        """Define *flag* in the flag set if missing; return whether it was added.

        The default value is applied only to a newly added label. A label
        that already exists keeps its current status whatever the default.
        """
        if flag.key in self._flag_set:
            return False
        self._flag_set.add_flag(flag.key)
        if flag.default_value:
            self._flag_set.set_flag(flag.key)
        _log.debug("feature_flag_registered", key=flag.key, default=flag.default_value)
        return True

    def set(self, flag: FeatureFlag | str, enabled: bool) -> int:
        """Turn a defined flag on or off and return the new state word.

        Raises :class:`~flagmask.mask.UnknownFlagError` for undefined keys.
        """
        key = flag.key if isinstance(flag, FeatureFlag) else flag
        if enabled:
            return self._flag_set.set_flag(key)
        return self._flag_set.clear_flag(key)

    def is_enabled(self, flag: FeatureFlag) -> bool:
        return flag.evaluate(self._flag_set)

    def get_variant(self, flag: FeatureFlag) -> str:
        return "on" if flag.evaluate(self._flag_set) else "off"


__all__ = ["BitmaskFeatureFlagProvider"]
