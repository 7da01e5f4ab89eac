"""Cleaning of dictionary definition fragments"""

import re

from .constants import TextConstants


class TextNormalizer:
    """Turns raw meaning fragments into one numbered, markup-free line"""

    # Compile regex patterns once (sourced from TextConstants)
    WHITESPACE_RE = re.compile(TextConstants.WHITESPACE_PATTERN)

    CLEANING_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
        (re.compile(TextConstants.SPAN_TAG_PATTERN), ""),
        (re.compile(TextConstants.STRONG_TAG_PATTERN), ""),
        (re.compile(TextConstants.ARROW_NOTE_PATTERN), ""),
        (re.compile(TextConstants.EQUAL_NOTE_PATTERN), ""),
        (re.compile(TextConstants.BIARROW_NOTE_PATTERN), ""),
        (re.compile(TextConstants.ABBR_MARKER_PATTERN), ""),
    )

    @classmethod
    def clean_fragment(cls, text: str) -> str:
        """Strip markup and bracketed annotations from a single fragment"""
        if not text:
            return ""

        for pattern, replacement in cls.CLEANING_RULES:
            text = pattern.sub(replacement, text)

        return cls.WHITESPACE_RE.sub(" ", text).strip()

    @classmethod
    def normalize(cls, fragments: list[str]) -> str:
        """Number every fragment that survives cleaning.

        Fragments that clean to nothing are skipped and do not consume a
        number, so the output always counts 1, 2, 3... without gaps.

        >>> TextNormalizer.normalize(["<span>run</span>", "(Abbr.) ", "walk (= move)"])
        '1. run 2. walk '
        """
        parts: list[str] = []
        for fragment in fragments:
            cleaned = cls.clean_fragment(fragment)
            if not cleaned:
                continue
            parts.append(f"{len(parts) + 1}. {cleaned} ")
        return "".join(parts)
