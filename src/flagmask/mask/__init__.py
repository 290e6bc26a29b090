"""Mask – the named-bit flag set and its errors."""
from flagmask.mask.errors import TooManyFlagsError, UnknownFlagError
from flagmask.mask.flag_set import MAX_FLAGS, FlagSet, define_mask
from flagmask.mask.snapshot import FlagSetSnapshot

__all__ = [
    "FlagSet",
    "FlagSetSnapshot",
    "MAX_FLAGS",
    "TooManyFlagsError",
    "UnknownFlagError",
    "define_mask",
]
