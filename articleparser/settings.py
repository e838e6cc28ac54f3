"""Project settings for articleparser.

Plain module-level constants.  Per-instance overrides go through the
:class:`~articleparser.parser.HTMLArticleParser` constructor or the CLI flags;
the keyword taxonomies live in :mod:`articleparser.taxonomy`.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
# BeautifulSoup tree builder.  lxml is lenient and never rejects malformed
# markup, which matters for third-party exports.
HTML_PARSER = "lxml"

# ---------------------------------------------------------------------------
# Defaults for fields the source document may not provide
# ---------------------------------------------------------------------------
FALLBACK_TITLE = "Untitled Article"
DEFAULT_CATEGORY = "technology"

# ---------------------------------------------------------------------------
# Excerpt
# ---------------------------------------------------------------------------
EXCERPT_MAX_LENGTH = 200

# A sentence end is only used as the cut point when it falls past this
# fraction of the maximum length.
EXCERPT_SENTENCE_THRESHOLD = 0.6

ELLIPSIS = "..."

# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------
WORDS_PER_MINUTE = 200

# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------
MAX_SUGGESTED_TAGS = 5

# ---------------------------------------------------------------------------
# Import helpers / CLI
# ---------------------------------------------------------------------------
SUPPORTED_EXTENSIONS: tuple[str, ...] = (".html", ".htm")

SLUG_MAX_LENGTH = 100

DEFAULT_POST_STATUS = "draft"
