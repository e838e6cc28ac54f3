"""Image and heading collection.

Both collectors scan the original, unstripped tree: a legitimate image or
section heading may sit inside a wrapper that the noise stripper removes.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

_HEADING_TAGS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")


def extract_images(soup: BeautifulSoup) -> list[str]:
    """Return every ``<img src>`` in document order.

    Inline ``data:`` URIs are skipped.  Duplicates are kept so callers can
    see image reuse.
    """
    images: list[str] = []
    for img in soup.find_all("img"):
        if not isinstance(img, Tag):
            continue
        src = str(img.get("src") or "").strip()
        if not src or src.lower().startswith("data:"):
            continue
        images.append(src)
    return images


def extract_headings(soup: BeautifulSoup) -> list[str]:
    """Return the trimmed text of every h1-h6 element, skipping empty ones."""
    headings: list[str] = []
    for heading in soup.find_all(_HEADING_TAGS):
        text = heading.get_text().strip()
        if text:
            headings.append(text)
    return headings
