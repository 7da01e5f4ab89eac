"""Filtering of raw clipboard text into lookup terms"""

import re

from ..exceptions import WordValidationError
from ..logging_config import get_logger
from .constants import TextConstants

logger = get_logger(__name__)


class InputValidator:
    """Accepts single English words and debounces repeated clipboard polls.

    The validator remembers the last accepted term. Polling the same clipboard
    content again yields nothing until a different word is accepted. A fresh
    instance starts with no memory.
    """

    VALID_WORD_RE = re.compile(TextConstants.VALID_WORD_PATTERN)

    def __init__(self) -> None:
        self.last_term: str | None = None
        self._last_rejected: str | None = None

    @classmethod
    def clean_word(cls, raw: str) -> str:
        """Trim and lower-case a word, raising if it is not one English word"""
        word = (raw or "").strip()
        if not word:
            raise WordValidationError(word, "empty input")
        if not cls.VALID_WORD_RE.match(word):
            raise WordValidationError(word, "not a single English word")
        return word.lower()

    def validate(self, raw: str) -> str | None:
        """Return the lookup term for ``raw``, or None when it should be skipped"""
        word = (raw or "").strip()
        if self.last_term is not None and word.lower() == self.last_term:
            return None

        try:
            term = self.clean_word(word)
        except WordValidationError as e:
            # Unchanged clipboard content is polled over and over; warn once
            if not word or word == self._last_rejected:
                logger.debug(f"Skipping input: {e.reason}")
            else:
                logger.warning(f"wrong word: {word}")
            self._last_rejected = word
            return None

        self.last_term = term
        self._last_rejected = None
        return term
