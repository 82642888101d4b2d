"""Tests validating that example code patterns work correctly.

These tests ensure the examples in the examples/ directory represent
working, copy-pasteable code patterns, without touching the network.
"""

from datetime import UTC, datetime

import pytest

from reportgate import (
    Check,
    EligibilityGate,
    MemoryVersionCache,
    OptionsSettings,
    StaticFeatureFlags,
    VersionInfo,
    VersionResolver,
)
from reportgate.core.exceptions import CatalogUnavailableError


class OfflineCatalog:
    def fetch_version(self, package_id: str) -> str:
        raise CatalogUnavailableError("offline", package_id=package_id)


@pytest.mark.core
class TestCustomCollaborators:
    """Tests for custom_collaborators.py example pattern."""

    def test_duck_typed_collaborators_are_accepted(self) -> None:
        """Plain objects with the right methods work as ports."""

        class DatabaseOptions:
            def get_option(self, name: str, default: object = None) -> object:
                return {"woocommerce_allow_tracking": "yes"}.get(name, default)

        class RolloutFlags:
            def is_enabled(self, name: str) -> bool:
                return name == "remote_logging"

        cache = MemoryVersionCache()
        cache.put(
            "latest_woocommerce_version",
            VersionInfo("9.2.0", fetched_at=datetime.now(UTC)),
        )
        gate = EligibilityGate(
            feature_flags=RolloutFlags(),
            settings=DatabaseOptions(),
            resolver=VersionResolver(catalog=OfflineCatalog(), cache=cache),
            current_version=lambda: "9.2.0",
        )

        assert gate.is_allowed() is True


@pytest.mark.core
class TestBasicUsage:
    """Tests for basic_usage.py example pattern."""

    def test_denied_decision_explains_itself(self) -> None:
        """evaluate() names the failing check when is_allowed() is False."""
        gate = EligibilityGate(
            feature_flags=StaticFeatureFlags(["remote_logging"]),
            settings=OptionsSettings({"woocommerce_allow_tracking": "yes"}),
            resolver=VersionResolver(catalog=OfflineCatalog(), cache=MemoryVersionCache()),
            current_version="9.2.0",
        )

        assert gate.is_allowed() is False
        decision = gate.evaluate()
        assert decision.failed_check is Check.VERSION_CURRENT
        assert decision.detail == "latest version unavailable"
