"""URL slug generation from article titles."""

from __future__ import annotations

import re
import unicodedata

from articleparser.settings import SLUG_MAX_LENGTH

# Characters allowed in slugs
_SLUG_SAFE_RE = re.compile(r"[^a-z0-9\-]")
_MULTI_DASH_RE = re.compile(r"-{2,}")
_LEADING_TRAILING_DASH_RE = re.compile(r"^-+|-+$")


def title_to_slug(title: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Generate a URL-safe, lower-case slug from *title*.

    Accented letters are folded to ASCII; anything else outside ``[a-z0-9-]``
    becomes a dash.  Returns ``"untitled"`` when nothing usable is left.
    """
    folded = (
        unicodedata.normalize("NFKD", title)
        .encode("ascii", "ignore")
        .decode("ascii")
        .lower()
    )
    slug = _SLUG_SAFE_RE.sub("-", folded)
    slug = _MULTI_DASH_RE.sub("-", slug)
    slug = _LEADING_TRAILING_DASH_RE.sub("", slug)
    slug = slug[:max_length]
    slug = _LEADING_TRAILING_DASH_RE.sub("", slug)

    return slug or "untitled"
