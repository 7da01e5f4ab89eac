"""Clipboard watcher: the lookup pipeline and its polling loop"""

import time
from dataclasses import dataclass

from ..config.settings import settings
from ..exceptions import ClipboardError
from ..logging_config import get_logger
from .input_validator import InputValidator
from .interfaces import (
    ClipboardReaderInterface,
    DefinitionCacheInterface,
    DictionaryClientInterface,
    NotifierInterface,
)
from .response_parser import ResponseParser
from .text_normalizer import TextNormalizer

logger = get_logger(__name__)


@dataclass
class LookupOutcome:
    """Result of a pipeline pass that produced a definition"""

    term: str
    definition: str
    from_cache: bool = False
    notified: bool = False


class ClipboardWatcher:
    """Polls the clipboard and shows definitions for newly copied words.

    One pass reads the clipboard, validates the text, consults the cache, and
    only on a miss asks the dictionary. A pass never raises for steady-state
    failures; it logs and produces nothing.
    """

    def __init__(
        self,
        clipboard: ClipboardReaderInterface,
        dictionary_client: DictionaryClientInterface,
        cache: DefinitionCacheInterface,
        notifier: NotifierInterface,
        validator: InputValidator | None = None,
        parser: ResponseParser | None = None,
        normalizer: TextNormalizer | None = None,
        poll_interval: float | None = None,
    ):
        self.clipboard = clipboard
        self.dictionary_client = dictionary_client
        self.cache = cache
        self.notifier = notifier
        self.validator = validator or InputValidator()
        self.parser = parser or ResponseParser()
        self.normalizer = normalizer or TextNormalizer()
        self.poll_interval = (
            poll_interval
            if poll_interval is not None
            else settings.clipboard.poll_interval
        )

        self._stats = {
            "cycles": 0,
            "lookups": 0,
            "cache_hits": 0,
            "notifications": 0,
            "failures": 0,
        }

    @property
    def stats(self) -> dict[str, int]:
        return dict(self._stats)

    def lookup(self, term: str) -> str | None:
        """Definition for ``term``, from the cache when possible"""
        definition, _ = self._resolve(term)
        return definition

    def _resolve(self, term: str) -> tuple[str | None, bool]:
        self._stats["lookups"] += 1

        cached = self.cache.get(term)
        if cached is not None:
            logger.debug(f"Cache hit for word: {term}")
            self._stats["cache_hits"] += 1
            return cached, True

        logger.debug(f"Cache miss for word: {term}, asking dictionary")
        body = self.dictionary_client.lookup(term)
        if body is None:
            self._stats["failures"] += 1
            return None, False

        fragments = self.parser.parse(body)
        if fragments is None:
            self._stats["failures"] += 1
            return None, False

        definition = self.normalizer.normalize(fragments)
        if not definition:
            logger.info(f"No usable definition for: {term}")
            self._stats["failures"] += 1
            return None, False

        self.cache.put(term, definition)
        return definition, False

    def run_once(self) -> LookupOutcome | None:
        """Run a single pipeline pass"""
        self._stats["cycles"] += 1
        try:
            raw = self.clipboard.read()
        except ClipboardError as e:
            logger.error(f"cannot read clipboard: {e}")
            return None

        term = self.validator.validate(raw)
        if term is None:
            return None

        definition, from_cache = self._resolve(term)
        if definition is None:
            return None

        self.notifier.notify(term, definition)
        self._stats["notifications"] += 1
        logger.info(f"Looked up: {term}")
        return LookupOutcome(
            term=term, definition=definition, from_cache=from_cache, notified=True
        )

    def run_forever(self, max_cycles: int | None = None) -> None:
        """Poll until interrupted, or for ``max_cycles`` passes.

        The interval is slept after each pass completes, so the real cadence
        is the pass duration plus the interval.
        """
        logger.info(f"Watching clipboard every {self.poll_interval}s")
        cycles = 0
        while max_cycles is None or cycles < max_cycles:
            try:
                self.run_once()
            finally:
                time.sleep(self.poll_interval)
            cycles += 1

    def close(self) -> None:
        """Release resources held by collaborators"""
        logger.info(f"Session stats: {self._stats}")
        self.cache.close()
