"""Deterministic word counting and reading-time estimation."""

from __future__ import annotations

import math
import re

from articleparser.extractors.main_content import html_to_text
from articleparser.settings import WORDS_PER_MINUTE

_WORD_RE = re.compile(r"\w+")


class Heuristics:
    """Stateless statistics helper. Safe to instantiate once and reuse."""

    @staticmethod
    def count_words(html: str) -> int:
        """Count alphanumeric runs in the text of *html*.

        Punctuation-only fragments such as ``--`` or ``...`` are not words.
        """
        return len(_WORD_RE.findall(html_to_text(html)))

    @staticmethod
    def reading_time(word_count: int, wpm: int = WORDS_PER_MINUTE) -> int:
        """Return estimated reading time in minutes (minimum 1)."""
        return max(1, math.ceil(word_count / wpm))
