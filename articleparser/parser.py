"""articleparser.parser — HTML document to :class:`ParsedArticle`.

Runs the extraction stages in a fixed order against one document:

    parse -> strip noise -> title -> content -> metadata -> images/headings
          -> excerpt -> statistics -> category/tags

Usage::

    from articleparser import parse_html_file

    article = parse_html_file(open("export.html", encoding="utf-8").read())
    print(article.title, article.suggested_category, article.suggested_tags)

    # Reusable engine with non-default settings
    from articleparser import HTMLArticleParser

    parser = HTMLArticleParser(excerpt_length=160)
    article = parser.parse(html)

The engine performs no I/O and keeps no state between calls; identical input
always produces an identical record.
"""

from __future__ import annotations

import logging

from articleparser.extractors.assets import extract_headings, extract_images
from articleparser.extractors.classifier import KeywordClassifier, build_classification_text
from articleparser.extractors.document import parse_document, strip_noise
from articleparser.extractors.excerpt import generate_excerpt
from articleparser.extractors.heuristics import Heuristics
from articleparser.extractors.main_content import extract_content
from articleparser.extractors.metadata import extract_metadata, extract_title
from articleparser.items import ParsedArticle
from articleparser.settings import EXCERPT_MAX_LENGTH, HTML_PARSER, WORDS_PER_MINUTE

logger = logging.getLogger(__name__)

_heuristics = Heuristics()
_default_classifier = KeywordClassifier()


# ---------------------------------------------------------------------------
# Public exception
# ---------------------------------------------------------------------------

class ParseError(RuntimeError):
    """Raised when the markup parser itself fails on the input document.

    No partial record is produced.  Callers should report the failure and
    leave their own state untouched.

    Attributes:
        size -- length of the rejected input, in characters
    """

    def __init__(self, message: str, size: int = 0) -> None:
        super().__init__(message)
        self.size = size


class HTMLArticleParser:
    """Configured extraction engine.

    Creating ``HTMLArticleParser()`` with no arguments gives the same result
    as calling :func:`parse_html_file`.

    Args:
        excerpt_length:   Maximum excerpt length in characters (default 200).
        words_per_minute: Reading speed for the read-time estimate
                          (default 200).
        classifier:       Keyword classifier to use; defaults to the
                          built-in category and tag taxonomies.
        features:         BeautifulSoup tree builder (default ``"lxml"``).
    """

    def __init__(
        self,
        excerpt_length: int = EXCERPT_MAX_LENGTH,
        words_per_minute: int = WORDS_PER_MINUTE,
        classifier: KeywordClassifier | None = None,
        features: str = HTML_PARSER,
    ) -> None:
        if excerpt_length <= 0:
            raise ValueError(f"excerpt_length must be positive, got {excerpt_length}")
        if words_per_minute <= 0:
            raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")
        self._excerpt_length = excerpt_length
        self._words_per_minute = words_per_minute
        self._classifier = classifier or _default_classifier
        self._features = features

    def parse(self, html: str) -> ParsedArticle:
        """Extract a :class:`ParsedArticle` from raw *html*.

        Missing titles, containers, metadata and keyword matches all resolve
        to defaults.

        Raises:
            ParseError: The markup parser raised on the input.
            TypeError:  *html* is not text.
        """
        try:
            soup = parse_document(html, features=self._features)
            stripped = strip_noise(soup)
        except TypeError:
            raise
        except Exception as exc:
            raise ParseError(f"failed to parse HTML: {exc}", size=len(html)) from exc

        title = extract_title(soup)
        content = extract_content(stripped)
        metadata = extract_metadata(stripped)
        images = extract_images(soup)
        headings = extract_headings(soup)
        excerpt = generate_excerpt(content, max_length=self._excerpt_length)

        word_count = _heuristics.count_words(content)
        read_time = _heuristics.reading_time(word_count, wpm=self._words_per_minute)

        text = build_classification_text(title, headings, content)
        category = self._classifier.suggest_category(text)
        tags = self._classifier.suggest_tags(text)

        logger.debug(
            "parsed %r: %d words, %d images, %d headings, category=%s tags=%s",
            title, word_count, len(images), len(headings), category, tags,
        )

        return ParsedArticle(
            title=title,
            content=content,
            excerpt=excerpt,
            suggested_category=category,
            suggested_tags=tags,
            estimated_read_time=read_time,
            word_count=word_count,
            images=images,
            headings=headings,
            metadata=metadata,
        )


_default_parser = HTMLArticleParser()


def parse_html_file(html: str) -> ParsedArticle:
    """Parse one HTML document with default settings.

    See :meth:`HTMLArticleParser.parse`.
    """
    return _default_parser.parse(html)
