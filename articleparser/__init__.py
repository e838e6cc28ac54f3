"""articleparser - turn exported HTML pages into structured blog articles.

Quick usage::

    from articleparser import parse_html_file

    article = parse_html_file(html)
    print(article.title)
    print(article.excerpt)
    print(article.suggested_category, article.suggested_tags)

    # camelCase dict for the editorial front end
    data = article.to_dict()

Import workflow (file -> draft row)::

    from articleparser import TaxonomyRecord, import_html_file

    draft = import_html_file(
        "export.html",
        categories=[TaxonomyRecord(id="7", slug="startups", name="Startups")],
    )
"""

from articleparser.importer import (
    UnsupportedFileError,
    build_import_draft,
    import_html_file,
    read_html_file,
)
from articleparser.items import ArticleMetadata, ImportDraft, ParsedArticle, TaxonomyRecord
from articleparser.parser import HTMLArticleParser, ParseError, parse_html_file

__version__ = "0.1.0"
__all__ = [
    "ArticleMetadata",
    "HTMLArticleParser",
    "ImportDraft",
    "ParseError",
    "ParsedArticle",
    "TaxonomyRecord",
    "UnsupportedFileError",
    "build_import_draft",
    "import_html_file",
    "parse_html_file",
    "read_html_file",
]
