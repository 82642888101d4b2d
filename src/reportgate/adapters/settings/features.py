"""Feature flag adapters implementing FeatureFlagsPort."""

from __future__ import annotations

from collections.abc import Iterable


FEATURES_ENV = "REPORTGATE_FEATURES"


def parse_feature_list(raw: str) -> frozenset[str]:
    """Parse a comma-separated feature list, ignoring blanks."""
    return frozenset(name.strip() for name in raw.split(",") if name.strip())


class StaticFeatureFlags:
    """Feature flags fixed at construction time."""

    def __init__(self, enabled: Iterable[str] = ()) -> None:
        self._enabled = frozenset(enabled)

    @property
    def enabled(self) -> frozenset[str]:
        """Names of the enabled features."""
        return self._enabled

    def is_enabled(self, name: str) -> bool:
        """Return True if ``name`` is one of the enabled features."""
        return name in self._enabled

