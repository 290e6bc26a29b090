"""Config settings – FlagSetSettings and build_flag_set."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from flagmask.kernel.errors import InvalidSettingValueError
from flagmask.mask import MAX_FLAGS, FlagSet
from flagmask.observability.logging import resolve_level


@dataclasses.dataclass
class FlagSetSettings:
    """Settings describing one flag set, validated on construction.

    Environment variables (prefix ``FLAGMASK``)::

        FLAGMASK_LABELS=is_admin,dark_mode,pro_account
        FLAGMASK_INITIAL_STATE=0b101
        FLAGMASK_LOG_LEVEL=DEBUG
    """

    _prefix: ClassVar[str] = "FLAGMASK"

    labels: list[str]
    initial_state: int = 0
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if len(self.labels) > MAX_FLAGS:
            raise InvalidSettingValueError(
                "labels", len(self.labels), f"at most {MAX_FLAGS} labels fit in the state word"
            )
        if self.initial_state < 0:
            raise InvalidSettingValueError(
                "initial_state", self.initial_state, "state words are non-negative"
            )
        resolve_level(self.log_level, setting_name="log_level")

    @property
    def max_state(self) -> int:
        return (1 << len(self.labels)) - 1


def build_flag_set(settings: FlagSetSettings) -> FlagSet:
    """Construct a :class:`FlagSet` from *settings*, applying ``initial_state``.

    ``initial_state`` goes through :meth:`FlagSet.set_state`, so values above
    ``settings.max_state`` are clamped rather than rejected.
    """
    flag_set = FlagSet(settings.labels)
    flag_set.set_state(settings.initial_state)
    return flag_set


__all__ = ["FlagSetSettings", "build_flag_set"]
