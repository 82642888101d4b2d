"""Plugging in your own settings, feature flags and cache.

Any object with the right methods satisfies the ports; no subclassing
is needed.
"""

from reportgate import (
    EligibilityGate,
    MemoryVersionCache,
    VersionResolver,
    WordPressPluginCatalog,
)


class DatabaseOptions:
    """Reads options from a host application's options table."""

    def __init__(self, rows: dict[str, object]) -> None:
        self._rows = rows

    def get_option(self, name: str, default: object = None) -> object:
        return self._rows.get(name, default)


class RolloutFlags:
    """Feature flags from a rollout service."""

    def is_enabled(self, name: str) -> bool:
        return name in {"remote_logging"}


def installed_version() -> str:
    """Read the installed version lazily, e.g. from a plugin header."""
    return "9.2.0"


with WordPressPluginCatalog(timeout=3.0) as catalog:
    resolver = VersionResolver(catalog=catalog, cache=MemoryVersionCache())
    gate = EligibilityGate(
        feature_flags=RolloutFlags(),
        settings=DatabaseOptions(
            {
                "woocommerce_allow_tracking": "yes",
                "woocommerce_remote_variant_assignment": "7",
            }
        ),
        resolver=resolver,
        current_version=installed_version,
    )

    # The first call queries the catalog; later calls reuse the cached
    # latest version for a day.
    print(f"Allowed: {gate.is_allowed()}")
    print(f"Latest version: {resolver.latest_version()}")
