"""Import helpers around the extraction engine.

Turns an uploaded HTML export into a post draft the way the editorial import
screen does: validate the file name, read it, parse it, derive a slug, pick
the first image as cover, and map the suggested category/tag slugs onto the
stored records.  Persisting the draft is left to the caller.

Usage::

    from articleparser.importer import TaxonomyRecord, import_html_file

    categories = [TaxonomyRecord(id="1", slug="startups", name="Startups")]
    draft = import_html_file("post.html", categories=categories)
    db.insert("posts", draft.model_dump())
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

import dateparser

from articleparser.extractors.slug import title_to_slug
from articleparser.items import ImportDraft, ParsedArticle, TaxonomyRecord
from articleparser.parser import HTMLArticleParser, parse_html_file
from articleparser.settings import DEFAULT_POST_STATUS, SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")

__all__ = [
    "UnsupportedFileError",
    "TaxonomyRecord",
    "ImportDraft",
    "build_import_draft",
    "import_html_file",
    "normalize_publish_date",
    "read_html_file",
    "title_to_slug",
]


class UnsupportedFileError(ValueError):
    """Raised when a file is not an HTML document (by extension).

    Attributes:
        path -- the rejected path
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__(
            f"{Path(path).name!r} is not an HTML file "
            f"(expected one of: {', '.join(SUPPORTED_EXTENSIONS)})",
        )
        self.path = Path(path)


def is_supported_file(path: str | Path) -> bool:
    return Path(path).name.endswith(SUPPORTED_EXTENSIONS)


def read_html_file(path: str | Path) -> str:
    """Return the text of the HTML file at *path*.

    Undecodable bytes are replaced rather than rejected; exports are often
    mislabelled.

    Raises:
        UnsupportedFileError: *path* does not end in ``.html`` or ``.htm``.
        OSError:              The file cannot be read.
    """
    if not is_supported_file(path):
        raise UnsupportedFileError(path)
    return Path(path).read_text(encoding="utf-8", errors="replace")


def normalize_publish_date(raw: str | None) -> str | None:
    """Parse a publish date string to ISO 8601.

    Returns None on failure or when the year falls outside 1990-2099
    (catches epoch defaults like 1970-01-01 and far-future typos).
    """
    if not raw:
        return None
    raw = _WHITESPACE_RE.sub(" ", raw.strip())
    parsed = dateparser.parse(
        raw,
        settings={
            "RETURN_AS_TIMEZONE_AWARE": True,
            "PREFER_DAY_OF_MONTH": "first",
            "PREFER_LOCALE_DATE_ORDER": False,
        },
    )
    if parsed is None:
        logger.debug("unparseable publish date %r", raw)
        return None
    if not (1990 <= parsed.year <= 2099):
        return None
    return parsed.isoformat()


def _match_category(slug: str, categories: Iterable[TaxonomyRecord]) -> str | None:
    for category in categories:
        if category.slug == slug:
            return category.id
    return None


def build_import_draft(
    article: ParsedArticle,
    categories: Iterable[TaxonomyRecord] = (),
    tags: Iterable[TaxonomyRecord] = (),
    status: str = DEFAULT_POST_STATUS,
) -> ImportDraft:
    """Build the post draft for *article* against the stored taxonomy.

    Slugs are matched exactly.  A suggested category or tag with no stored
    record is dropped without error.  Matched tag ids follow the order of
    *tags*, not the order of the suggestions.
    """
    category_id = _match_category(article.suggested_category, categories)
    if category_id is None:
        logger.info("suggested category %r has no stored record", article.suggested_category)

    suggested = set(article.suggested_tags)
    tag_ids = [tag.id for tag in tags if tag.slug in suggested]

    return ImportDraft(
        title=article.title,
        slug=title_to_slug(article.title),
        excerpt=article.excerpt,
        content=article.content,
        cover_image_url=article.images[0] if article.images else None,
        category_id=category_id,
        tag_ids=tag_ids,
        status=status,
        estimated_read_time=article.estimated_read_time,
        author=article.metadata.author,
        source_published_at=normalize_publish_date(article.metadata.publish_date),
    )


def import_html_file(
    path: str | Path,
    categories: Iterable[TaxonomyRecord] = (),
    tags: Iterable[TaxonomyRecord] = (),
    status: str = DEFAULT_POST_STATUS,
    parser: HTMLArticleParser | None = None,
) -> ImportDraft:
    """Read, parse and draft the HTML file at *path* in one call.

    Raises:
        UnsupportedFileError: Wrong file extension.
        ParseError:           The document could not be parsed.
        OSError:              The file cannot be read.
    """
    html = read_html_file(path)
    article = parser.parse(html) if parser is not None else parse_html_file(html)
    return build_import_draft(article, categories=categories, tags=tags, status=status)
