"""Data models for kodic"""

from .cache_models import CacheEntry, CacheStats
from .dictionary_response import (
    DictionaryResponse,
    Item,
    Mean,
    MeansCollector,
    SearchResultListMap,
    SearchResultMap,
    WordResult,
)

__all__ = [
    "CacheEntry",
    "CacheStats",
    "DictionaryResponse",
    "Item",
    "Mean",
    "MeansCollector",
    "SearchResultListMap",
    "SearchResultMap",
    "WordResult",
]
