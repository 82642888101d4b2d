"""Settings and feature flag adapters."""

from reportgate.adapters.settings.features import StaticFeatureFlags
from reportgate.adapters.settings.options import OptionsSettings


__all__ = ["OptionsSettings", "StaticFeatureFlags"]
