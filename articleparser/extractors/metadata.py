"""Title and metadata extraction from HTML.

Every field is resolved through a fallback chain: an ordered tuple of
lookups, each reading one candidate location.  Lookups run lazily in order
and the first one that yields a non-empty value wins.

Title chain (highest -> lowest):
    first <h1> -> <title> -> og:title -> twitter:title -> .title/.post-title/.article-title

Metadata chains:
    author       meta[name=author] -> [rel=author] text
    publish date article:published_time -> datetime of the first <time>
    description  meta[name=description] -> og:description
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from typing import Any

from bs4 import BeautifulSoup, Tag

from articleparser.items import ArticleMetadata
from articleparser.settings import FALLBACK_TITLE

logger = logging.getLogger(__name__)

Lookup = Callable[[BeautifulSoup], str | None]

_WHITESPACE_RE = re.compile(r"\s+")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _safe_str(val: Any, default: str = "") -> str:
    """Safely convert a BeautifulSoup attribute value (str | list | None) to str."""
    if val is None:
        return default
    if isinstance(val, list):
        return " ".join(str(v) for v in val)
    return str(val)


def clean_text(text: str) -> str:
    """Collapse whitespace runs (including newlines) and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def _text_of(selector: str) -> Lookup:
    def lookup(soup: BeautifulSoup) -> str | None:
        el = soup.select_one(selector)
        return el.get_text() if isinstance(el, Tag) else None

    return lookup


def _attr_of(selector: str, attr: str) -> Lookup:
    def lookup(soup: BeautifulSoup) -> str | None:
        el = soup.select_one(selector)
        if not isinstance(el, Tag):
            return None
        return _safe_str(el.get(attr)) or None

    return lookup


def _first(soup: BeautifulSoup, lookups: Iterable[Lookup]) -> str | None:
    """Return the first non-blank value produced by *lookups*, cleaned."""
    for lookup in lookups:
        value = lookup(soup)
        if value and value.strip():
            return clean_text(value)
    return None


# ---------------------------------------------------------------------------
# Fallback chains
# ---------------------------------------------------------------------------

TITLE_LOOKUPS: tuple[Lookup, ...] = (
    _text_of("h1"),
    _text_of("title"),
    _attr_of('meta[property="og:title"]', "content"),
    _attr_of('meta[name="twitter:title"]', "content"),
    _text_of(".title, .post-title, .article-title"),
)

AUTHOR_LOOKUPS: tuple[Lookup, ...] = (
    _attr_of('meta[name="author"]', "content"),
    _text_of('[rel="author"]'),
)

PUBLISH_DATE_LOOKUPS: tuple[Lookup, ...] = (
    _attr_of('meta[property="article:published_time"]', "content"),
    _attr_of("time", "datetime"),
)

DESCRIPTION_LOOKUPS: tuple[Lookup, ...] = (
    _attr_of('meta[name="description"]', "content"),
    _attr_of('meta[property="og:description"]', "content"),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def extract_title(soup: BeautifulSoup) -> str:
    """Resolve the article title, falling back to ``"Untitled Article"``."""
    title = _first(soup, TITLE_LOOKUPS)
    if title is None:
        logger.debug("no title candidate found, using fallback")
        return FALLBACK_TITLE
    return title


def extract_metadata(soup: BeautifulSoup) -> ArticleMetadata:
    """Read author, publish date and description; each may be ``None``.

    Called on the noise-stripped tree, so bylines inside page chrome
    (header, nav, aside, footer) do not count.
    """
    return ArticleMetadata(
        author=_first(soup, AUTHOR_LOOKUPS),
        publish_date=_first(soup, PUBLISH_DATE_LOOKUPS),
        description=_first(soup, DESCRIPTION_LOOKUPS),
    )
