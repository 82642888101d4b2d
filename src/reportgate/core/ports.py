"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from reportgate.core.models import VersionInfo

Clock = Callable[[], datetime]


@runtime_checkable
class FeatureFlagsPort(Protocol):
    """Capability lookup answering whether a named feature is enabled."""

    def is_enabled(self, name: str) -> bool:
        """Return True if the feature called ``name`` is enabled."""
        ...


@runtime_checkable
class SettingsPort(Protocol):
    """Read-only access to stored configuration options."""

    def get_option(self, name: str, default: object = None) -> object:
        """Return the raw stored value for ``name``, or ``default`` if absent.

        Values are returned as stored (strings, ints, booleans); callers
        coerce them.
        """
        ...


@runtime_checkable
class CatalogLookupPort(Protocol):
    """Remote plugin catalog that publishes package versions."""

    def fetch_version(self, package_id: str) -> str:
        """Fetch the latest published version of a package.

        Args:
            package_id: Catalog identifier (slug) of the package.

        Returns:
            The version string. May be empty when the catalog omits it.

        Raises:
            CatalogError: If the lookup fails or the response is malformed.
        """
        ...


@runtime_checkable
class VersionCachePort(Protocol):
    """Key/value store for fetched version values.

    The cache stores entries as given; TTL validity is judged by the
    caller from VersionInfo.fetched_at.
    """

    def get(self, key: str) -> VersionInfo | None:
        """Get the stored entry, or None if nothing is stored.

        Raises:
            CacheCorruptError: If a stored entry cannot be read.
        """
        ...

    def put(self, key: str, info: VersionInfo) -> None:
        """Store an entry, overwriting any existing one."""
        ...

    def invalidate(self, key: str) -> None:
        """Remove an entry. Missing keys are ignored.

        Raises:
            CacheError: If a stored entry cannot be removed.
        """
        ...
