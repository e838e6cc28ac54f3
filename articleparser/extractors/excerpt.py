"""Plain-text excerpt generation."""

from __future__ import annotations

from articleparser.extractors.main_content import html_to_text
from articleparser.settings import (
    ELLIPSIS,
    EXCERPT_MAX_LENGTH,
    EXCERPT_SENTENCE_THRESHOLD,
)

_SENTENCE_TERMINALS: tuple[str, ...] = (".", "?", "!")


def generate_excerpt(content: str, max_length: int = EXCERPT_MAX_LENGTH) -> str:
    """Summarise the *content* markup as at most *max_length* characters.

    Text that fits is returned unchanged.  Longer text is cut after the last
    sentence terminal inside the limit when that terminal lies past 60% of
    it; otherwise at the last space before the limit, with ``"..."``
    appended.
    """
    text = html_to_text(content)
    if len(text) <= max_length:
        return text

    truncated = text[:max_length]
    last_sentence_end = max(truncated.rfind(mark) for mark in _SENTENCE_TERMINALS)
    if last_sentence_end > max_length * EXCERPT_SENTENCE_THRESHOLD:
        return text[: last_sentence_end + 1]

    last_space = truncated.rfind(" ")
    if last_space <= 0:
        # One unbroken token longer than the limit.
        return truncated + ELLIPSIS
    return text[:last_space] + ELLIPSIS
