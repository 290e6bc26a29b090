"""Testing – property-based testing helpers for flag sets."""
from flagmask.testing.strategies import flag_labels_strategy, flag_set_strategy

__all__ = ["flag_labels_strategy", "flag_set_strategy"]
