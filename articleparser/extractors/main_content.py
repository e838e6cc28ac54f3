"""Main content location and markup cleanup.

The article body is the first container found in a fixed priority list of
CSS selectors, searched in the noise-stripped tree.  Its inner markup then
goes through a purely textual cleanup pass that never alters visible text.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag

from articleparser.settings import HTML_PARSER

logger = logging.getLogger(__name__)

# Priority CSS selectors (tried in order, first match wins)
_CONTENT_SELECTORS: tuple[str, ...] = (
    "article",
    "main",
    '[role="main"]',
    ".content",
    ".post-content",
    ".article-content",
    ".entry-content",
    "#content",
    "body",
)

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_EMPTY_PAIRED_TAG_RE = re.compile(r"<(\w+)[^>]*>\s*</\1>")
_WHITESPACE_RE = re.compile(r"\s+")
_INTER_TAG_WHITESPACE_RE = re.compile(r">\s+<")


def clean_html(html: str) -> str:
    """Normalise a markup fragment.

    Drops comments and empty paired tags, collapses whitespace runs and
    removes whitespace between adjacent tags.
    """
    html = _COMMENT_RE.sub("", html)
    html = _EMPTY_PAIRED_TAG_RE.sub("", html)
    html = _WHITESPACE_RE.sub(" ", html)
    html = _INTER_TAG_WHITESPACE_RE.sub("><", html)
    return html.strip()


def find_content_element(soup: BeautifulSoup) -> Tag | None:
    """Return the highest-priority content container in *soup*.

    Returns ``None`` when nothing matches, which only happens when the parser
    produced no ``<body>`` (empty or head-only input).
    """
    for selector in _CONTENT_SELECTORS:
        el = soup.select_one(selector)
        if el is not None:
            logger.debug("content located via %r", selector)
            return el
    logger.debug("no content container found")
    return None


def extract_content(stripped: BeautifulSoup) -> str:
    """Return the cleaned inner markup of the located content region."""
    el = find_content_element(stripped)
    if el is None:
        return ""
    return clean_html(el.decode_contents())


def html_to_text(html: str, features: str = HTML_PARSER) -> str:
    """Strip all tags from *html* and collapse whitespace.

    Tag boundaries become spaces so that adjacent block elements do not glue
    their words together.
    """
    if not html or not html.strip():
        return ""
    text = BeautifulSoup(html, features).get_text(separator=" ")
    return " ".join(text.split())
