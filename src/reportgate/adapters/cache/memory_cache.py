"""In-process cache adapter implementing VersionCachePort."""

from __future__ import annotations

from reportgate.core.models import VersionInfo


class MemoryVersionCache:
    """Dict-backed cache that lives as long as the process.

    Concurrent writers race benignly: the last put wins.
    """

    def __init__(self) -> None:
        self._entries: dict[str, VersionInfo] = {}

    def get(self, key: str) -> VersionInfo | None:
        """Get the stored entry, or None if nothing is stored."""
        return self._entries.get(key)

    def put(self, key: str, info: VersionInfo) -> None:
        """Store an entry, overwriting any existing one."""
        self._entries[key] = info

    def invalidate(self, key: str) -> None:
        """Remove an entry. Missing keys are ignored."""
        self._entries.pop(key, None)

    def __len__(self) -> int:
        return len(self._entries)
