"""Mask – FlagSetSnapshot value object."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class FlagSetSnapshot:
    """Labels in bit order plus the state word, captured at one point in time.

    A :class:`~flagmask.mask.flag_set.FlagSet` is never copied implicitly;
    take a snapshot and rebuild from it when an independent copy is needed.
    """

    labels: tuple[str, ...]
    state: int = 0

    def as_dict(self) -> dict[str, object]:
        return {"labels": list(self.labels), "state": self.state}


__all__ = ["FlagSetSnapshot"]
