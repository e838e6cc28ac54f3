"""CLI entry point: python -m articleparser FILE [FILE ...] [options]"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from articleparser.extractors.slug import title_to_slug
from articleparser.importer import UnsupportedFileError, read_html_file
from articleparser.items import ParsedArticle
from articleparser.parser import HTMLArticleParser, ParseError
from articleparser.settings import EXCERPT_MAX_LENGTH, WORDS_PER_MINUTE

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="articleparser",
        description=(
            "Extract a clean article (title, content, excerpt, images, headings,\n"
            "statistics and suggested category/tags) from exported HTML files."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("files", nargs="+", metavar="FILE",
                        help="HTML file(s) to parse (.html or .htm)")
    parser.add_argument("--out", default=None, metavar="DIR",
                        help="Write one <slug>.json per file into DIR "
                             "(default: print JSON to stdout)")
    parser.add_argument("--excerpt-length", type=int, default=EXCERPT_MAX_LENGTH,
                        metavar="N",
                        help=f"Maximum excerpt length (default: {EXCERPT_MAX_LENGTH})")
    parser.add_argument("--words-per-minute", type=int, default=WORDS_PER_MINUTE,
                        metavar="N",
                        help=f"Reading speed for read-time estimate "
                             f"(default: {WORDS_PER_MINUTE})")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help="Logging level (default: WARNING)")
    parser.add_argument("--quiet", action="store_true", default=False,
                        help="Do not print the summary table when using --out")
    return parser


def _unique_slug(slug: str, seen: set[str]) -> str:
    """Append -2, -3, … until *slug* is not in *seen*."""
    candidate = slug
    counter = 2
    while candidate in seen:
        candidate = f"{slug}-{counter}"
        counter += 1
    seen.add(candidate)
    return candidate


def _write_json(path: Path, data: dict | list) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def _print_summary(rows: list[dict[str, Any]], console: Console) -> None:
    table = Table(title="Parsed articles", box=box.SIMPLE_HEAVY)
    table.add_column("File", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Category", style="green")
    table.add_column("Tags")
    table.add_column("Words", justify="right")
    table.add_column("Read", justify="right")
    table.add_column("Output", style="yellow")

    for row in rows:
        article: ParsedArticle | None = row.get("article")
        if article is None:
            table.add_row(row["file"], f"[red]{row['error']}[/red]", "", "", "", "", "")
            continue
        table.add_row(
            row["file"],
            article.title,
            article.suggested_category,
            ", ".join(article.suggested_tags) or "—",
            str(article.word_count),
            f"{article.estimated_read_time} min",
            row.get("output", ""),
        )
    console.print(table)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    try:
        engine = HTMLArticleParser(
            excerpt_length=args.excerpt_length,
            words_per_minute=args.words_per_minute,
        )
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    out_dir = Path(args.out).resolve() if args.out else None
    seen_slugs: set[str] = set()
    rows: list[dict[str, Any]] = []
    records: list[dict[str, Any]] = []
    failed = 0

    for name in args.files:
        try:
            article = engine.parse(read_html_file(name))
        except (UnsupportedFileError, ParseError, OSError) as exc:
            logger.error("Failed to parse %s: %s", name, exc)
            rows.append({"file": name, "error": str(exc)})
            failed += 1
            continue

        record = article.to_dict()
        row: dict[str, Any] = {"file": name, "article": article}
        if out_dir is not None:
            slug = _unique_slug(title_to_slug(article.title), seen_slugs)
            target = out_dir / f"{slug}.json"
            _write_json(target, record)
            logger.info("wrote %s", target)
            row["output"] = target.name
        records.append(record)
        rows.append(row)

    if out_dir is None:
        if records:
            payload: Any = records[0] if len(args.files) == 1 else records
            print(json.dumps(payload, indent=2, ensure_ascii=False))
    elif not args.quiet:
        _print_summary(rows, Console())

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
