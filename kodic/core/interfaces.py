"""Interface definitions for core components"""

from abc import ABC, abstractmethod

from ..models.cache_models import CacheEntry, CacheStats


class ClipboardReaderInterface(ABC):
    """Interface for reading the system clipboard"""

    @abstractmethod
    def read(self) -> str:
        """Return current text contents of the clipboard"""
        pass


class DictionaryClientInterface(ABC):
    """Interface for dictionary lookup services"""

    @abstractmethod
    def lookup(self, term: str) -> bytes | None:
        """Fetch the raw response body for a term"""
        pass


class DefinitionCacheInterface(ABC):
    """Interface for definition caching"""

    @abstractmethod
    def get(self, term: str) -> str | None:
        """Get a cached definition"""
        pass

    @abstractmethod
    def put(self, term: str, definition: str) -> None:
        """Remember a definition"""
        pass

    @abstractmethod
    def history(self, limit: int | None = None) -> list[CacheEntry]:
        """List remembered entries, newest first"""
        pass

    @abstractmethod
    def get_stats(self) -> CacheStats:
        """Get cache statistics"""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the underlying store"""
        pass


class NotifierInterface(ABC):
    """Interface for user-facing notifications"""

    @abstractmethod
    def notify(self, title: str, body: str) -> None:
        """Show a notification without waiting for it"""
        pass
