"""Definition cache facades.

CacheManager remembers lookups in a DefinitionStore and fails open: storage
errors are logged and reported as misses. NoCacheManager is the drop-in used
when caching is disabled.
"""

import logging

from ..core.interfaces import DefinitionCacheInterface
from ..logging_config import get_logger
from ..models.cache_models import CacheEntry, CacheStats
from .cache_engine import DefinitionStore
from .error_handler import handle_errors

logger = get_logger(__name__)


class CacheManager(DefinitionCacheInterface):
    """Cache manager facade."""

    def __init__(self, store: DefinitionStore):
        self._store = store
        self._hits = 0
        self._misses = 0

    def get(self, term: str) -> str | None:
        """Get cached definition"""
        entry = self._get_entry(term)
        if entry is None:
            self._misses += 1
            return None
        self._hits += 1
        return entry.definition

    @handle_errors(
        default_return=None, log_level=logging.WARNING, operation_name="cache_get"
    )
    def _get_entry(self, term: str) -> CacheEntry | None:
        return self._store.get(term)

    @handle_errors(log_level=logging.WARNING, operation_name="cache_put")
    def put(self, term: str, definition: str) -> None:
        """Cache definition. Existing entries are never overwritten."""
        self._store.insert(CacheEntry(term=term, definition=definition))
        logger.info(f"saved: {term}")

    def history(self, limit: int | None = None) -> list[CacheEntry]:
        """Remembered entries, newest first. Empty when the store fails."""
        return self._entries(limit) or []

    @handle_errors(default_return=None, operation_name="cache_history")
    def _entries(self, limit: int | None) -> list[CacheEntry] | None:
        return self._store.entries(limit)

    def get_stats(self) -> CacheStats:
        """Get cache statistics"""
        entries = self.history()
        total_requests = self._hits + self._misses
        hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0.0
        return CacheStats(
            total_entries=len(entries),
            reviewed_entries=sum(1 for e in entries if e.reviewed),
            hits=self._hits,
            misses=self._misses,
            hit_rate=hit_rate,
        )

    def close(self) -> None:
        self._store.close()


class NoCacheManager(DefinitionCacheInterface):
    """Cache that remembers nothing"""

    def get(self, term: str) -> str | None:
        return None

    def put(self, term: str, definition: str) -> None:
        pass

    def history(self, limit: int | None = None) -> list[CacheEntry]:
        return []

    def get_stats(self) -> CacheStats:
        return CacheStats(total_entries=0, reviewed_entries=0)

    def close(self) -> None:
        pass
