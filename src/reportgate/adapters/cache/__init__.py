"""Cache adapters implementing VersionCachePort."""

from reportgate.adapters.cache.file_cache import FileVersionCache
from reportgate.adapters.cache.memory_cache import MemoryVersionCache


__all__ = ["FileVersionCache", "MemoryVersionCache"]
