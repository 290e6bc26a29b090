"""Application feature flags – FeatureFlag lookups backed by a FlagSet."""
from flagmask.application.feature_flags.feature_flag import FeatureFlag
from flagmask.application.feature_flags.bitmask import BitmaskFeatureFlagProvider

__all__ = ["BitmaskFeatureFlagProvider", "FeatureFlag"]
