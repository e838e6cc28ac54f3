"""Parse tree construction and noise stripping.

The original tree returned by :func:`parse_document` is never modified:
title, metadata, image and heading lookups read it as-is, while content
location runs on the copy returned by :func:`strip_noise`.
"""

from __future__ import annotations

import copy
import logging

from bs4 import BeautifulSoup, Tag

from articleparser.settings import HTML_PARSER

logger = logging.getLogger(__name__)

# Subtrees that never belong to the article body: page chrome, widgets and
# executable/styling nodes.  Matched by tag name or by class/id/role hint.
_NOISE_SELECTORS: tuple[str, ...] = (
    "script",
    "style",
    "noscript",
    "nav",
    "header",
    "footer",
    "aside",
    ".sidebar",
    ".advertisement",
    ".ad",
    ".ads",
    ".social-share",
    ".share-buttons",
    ".comments",
    "#comments",
    ".related-posts",
    '[role="navigation"]',
    '[role="banner"]',
    '[role="contentinfo"]',
    '[role="complementary"]',
)


def parse_document(html: str | bytes, features: str = HTML_PARSER) -> BeautifulSoup:
    """Build a navigable tree from raw markup.

    No well-formedness check is made: lxml repairs whatever it is given, so
    garbage input yields a (possibly empty) tree rather than an error.
    """
    if not isinstance(html, (str, bytes)):
        raise TypeError(f"expected str or bytes, got {type(html).__name__}")
    return BeautifulSoup(html, features)


def strip_noise(soup: BeautifulSoup) -> BeautifulSoup:
    """Return a copy of *soup* with every noise subtree removed."""
    working = copy.copy(soup)
    removed = 0
    for el in working.select(", ".join(_NOISE_SELECTORS)):
        # Nested matches are already gone with their ancestor.
        if not isinstance(el, Tag) or el.decomposed:
            continue
        el.decompose()
        removed += 1
    logger.debug("stripped %d noise subtrees", removed)
    return working
