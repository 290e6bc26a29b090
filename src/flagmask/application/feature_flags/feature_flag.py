"""Application feature flags – FeatureFlag value object."""
from __future__ import annotations

import dataclasses

from flagmask.mask import FlagSet


@dataclasses.dataclass(frozen=True)
class FeatureFlag:
    """A label to look up in a :class:`FlagSet`, plus the answer when it is absent."""

    key: str
    default_value: bool = False

    def bit_in(self, flag_set: FlagSet) -> int | None:
        """Position of this flag in *flag_set* as a one-bit mask, or ``None``."""
        return flag_set.bit_for(self.key)

    def evaluate(self, flag_set: FlagSet) -> bool:
        if self.key not in flag_set:
            return self.default_value
        return flag_set.is_flag_active(self.key)


__all__ = ["FeatureFlag"]
