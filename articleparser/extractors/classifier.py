"""Keyword-scoring classifier for category and tag suggestions.

The scored text is ``title + headings + content`` lower-cased.  Content still
carries its markup at this point; keyword matching is anchored on word
boundaries, and tag names or attributes rarely collide with taxonomy
keywords.

Two match styles are used:

* categories count whole-word matches (``\\bkeyword\\b``);
* tags count prefix matches (``\\bkeyword``), so ``invest`` also matches
  ``investing`` and ``investment``.

Category ties are resolved by a running maximum with strict ``>``: the entry
iterated first keeps the lead, and a document with no matches at all gets the
default category rather than an "uncategorized" marker.  Existing category
suggestions depend on this ordering.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence

from articleparser.settings import DEFAULT_CATEGORY, MAX_SUGGESTED_TAGS
from articleparser.taxonomy import CATEGORY_KEYWORDS, TAG_KEYWORDS

logger = logging.getLogger(__name__)

_Patterns = tuple[tuple[str, tuple[re.Pattern[str], ...]], ...]


def _compile(taxonomy: Mapping[str, tuple[str, ...]], *, whole_word: bool) -> _Patterns:
    suffix = r"\b" if whole_word else ""
    return tuple(
        (
            slug,
            tuple(re.compile(rf"\b{re.escape(kw)}{suffix}") for kw in keywords),
        )
        for slug, keywords in taxonomy.items()
    )


_CATEGORY_PATTERNS = _compile(CATEGORY_KEYWORDS, whole_word=True)
_TAG_PATTERNS = _compile(TAG_KEYWORDS, whole_word=False)


def build_classification_text(title: str, headings: Sequence[str], content: str) -> str:
    """Join the scored fields into one lower-cased string."""
    return f"{title} {' '.join(headings)} {content}".lower()


def _score(text: str, patterns: Iterable[re.Pattern[str]]) -> int:
    return sum(len(pattern.findall(text)) for pattern in patterns)


class KeywordClassifier:
    """Scores text against compiled keyword taxonomies.

    The default instance uses the built-in tables; pass other mappings to
    classify against a different taxonomy.
    """

    def __init__(
        self,
        categories: Mapping[str, tuple[str, ...]] | None = None,
        tags: Mapping[str, tuple[str, ...]] | None = None,
        default_category: str = DEFAULT_CATEGORY,
        max_tags: int = MAX_SUGGESTED_TAGS,
    ) -> None:
        self._category_patterns = (
            _CATEGORY_PATTERNS if categories is None
            else _compile(categories, whole_word=True)
        )
        self._tag_patterns = (
            _TAG_PATTERNS if tags is None
            else _compile(tags, whole_word=False)
        )
        self._default_category = default_category
        self._max_tags = max_tags

    def category_scores(self, text: str) -> dict[str, int]:
        return {slug: _score(text, patterns) for slug, patterns in self._category_patterns}

    def tag_scores(self, text: str) -> dict[str, int]:
        return {slug: _score(text, patterns) for slug, patterns in self._tag_patterns}

    def suggest_category(self, text: str) -> str:
        """Return the single best category slug for lower-cased *text*."""
        max_score = 0
        suggested = self._default_category
        for slug, score in self.category_scores(text).items():
            if score > max_score:
                max_score = score
                suggested = slug
        logger.debug("category %r scored %d", suggested, max_score)
        return suggested

    def suggest_tags(self, text: str) -> list[str]:
        """Return up to ``max_tags`` matching tag slugs in taxonomy order.

        Entries are not ranked by score: the first qualifying entries win.
        """
        matched = [slug for slug, score in self.tag_scores(text).items() if score > 0]
        logger.debug("tags matched: %s", matched)
        return matched[: self._max_tags]
