"""
flagmask – named-bit feature flags backed by a single integer state word.

Import path convention::

    from flagmask import FlagSet, define_mask
    from flagmask.mask import TooManyFlagsError, UnknownFlagError
    from flagmask.config.settings import FlagSetSettings, build_flag_set
    from flagmask.application.feature_flags import BitmaskFeatureFlagProvider
"""

from flagmask.mask import (
    MAX_FLAGS,
    FlagSet,
    FlagSetSnapshot,
    TooManyFlagsError,
    UnknownFlagError,
    define_mask,
)

__version__ = "0.1.0"
__all__ = [
    "FlagSet",
    "FlagSetSnapshot",
    "MAX_FLAGS",
    "TooManyFlagsError",
    "UnknownFlagError",
    "__version__",
    "define_mask",
]
