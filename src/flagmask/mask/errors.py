"""Mask – flag-set specific errors."""
from __future__ import annotations

from flagmask.kernel.errors import DomainError


class TooManyFlagsError(DomainError):
    """Raised when a flag set would track more labels than fit the state word.

    Attributes
    ----------
    requested:
        Number of labels the operation would have produced.
    limit:
        Maximum number of labels a flag set may track.
    """

    default_code = "too_many_flags"

    def __init__(self, requested: int, limit: int, message: str | None = None) -> None:
        super().__init__(
            message or f"Mask length must be less than {limit + 1} (got {requested})",
            requested=requested,
            limit=limit,
        )
        self.requested = requested
        self.limit = limit


class UnknownFlagError(DomainError):
    """Raised when setting or clearing a label the flag set does not define."""

    default_code = "unknown_flag"

    def __init__(self, label: str) -> None:
        super().__init__(f"Flag '{label}' is not defined", label=label)
        self.label = label


__all__ = ["TooManyFlagsError", "UnknownFlagError"]
