"""File-based cache adapter implementing VersionCachePort."""

from __future__ import annotations

import json
from datetime import datetime
from typing import TYPE_CHECKING

from reportgate.core.exceptions import CacheCorruptError, CacheError
from reportgate.core.models import VersionInfo


if TYPE_CHECKING:
    from pathlib import Path


class FileVersionCache:
    """Version cache persisted as one JSON file per key.

    Entries survive process restarts, so every process on a host shares
    the same latest-version lookup.

    Attributes:
        cache_dir: Directory where entries are stored.
    """

    def __init__(self, cache_dir: Path) -> None:
        """Initialize the cache with a directory path.

        Args:
            cache_dir: Directory where entries will be stored.
        """
        self.cache_dir = cache_dir

    def _entry_path(self, key: str) -> Path:
        """Get the path for a cache entry."""
        return self.cache_dir / f"{key}.json"

    def get(self, key: str) -> VersionInfo | None:
        """Get the stored entry, or None if not cached.

        Args:
            key: Cache key identifying the entry.

        Returns:
            The stored VersionInfo, or None if there is no entry.

        Raises:
            CacheCorruptError: If the entry exists but is corrupt/unreadable.
        """
        entry_path = self._entry_path(key)
        if not entry_path.exists():
            return None

        try:
            with entry_path.open() as f:
                data = json.load(f)
            fetched_at = datetime.fromisoformat(data["fetched_at"])
            if fetched_at.tzinfo is None:
                raise ValueError(f"fetched_at has no timezone: {data['fetched_at']!r}")
            return VersionInfo(
                value=data["value"],
                fetched_at=fetched_at,
                source=data.get("source", ""),
            )
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise CacheCorruptError(
                f"Cache entry corrupt for '{key}'",
                key=key,
                path=entry_path,
                cause=e,
            ) from e

    def put(self, key: str, info: VersionInfo) -> None:
        """Store an entry, overwriting any existing one.

        Args:
            key: Cache key for the entry.
            info: The version value to store.

        Raises:
            CacheError: If the entry cannot be written.
        """
        entry_path = self._entry_path(key)
        data = {
            "value": info.value,
            "fetched_at": info.fetched_at.isoformat(),
            "source": info.source,
        }
        # Write to a sibling file first so readers never see a partial entry
        tmp_path = entry_path.with_suffix(".json.tmp")
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w") as f:
                json.dump(data, f)
            tmp_path.replace(entry_path)
        except OSError as e:
            raise CacheError(f"Could not write cache entry '{key}': {e}") from e

    def invalidate(self, key: str) -> None:
        """Remove an entry from the cache.

        Args:
            key: Cache key to invalidate.

        Raises:
            CacheError: If the entry exists but cannot be removed.
        """
        try:
            self._entry_path(key).unlink(missing_ok=True)
        except OSError as e:
            raise CacheError(f"Could not remove cache entry '{key}': {e}") from e

