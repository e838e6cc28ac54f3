"""Unit tests for the individual extraction stages."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from articleparser.extractors.assets import extract_headings, extract_images
from articleparser.extractors.document import parse_document, strip_noise
from articleparser.extractors.excerpt import generate_excerpt
from articleparser.extractors.heuristics import Heuristics
from articleparser.extractors.main_content import (
    clean_html,
    extract_content,
    find_content_element,
    html_to_text,
)
from articleparser.extractors.metadata import extract_metadata, extract_title


def _soup(html: str) -> BeautifulSoup:
    return parse_document(html)


# ---------------------------------------------------------------------------
# Parse tree builder
# ---------------------------------------------------------------------------

class TestParseDocument:
    def test_returns_tree(self):
        soup = parse_document("<html><body><p>Hi</p></body></html>")
        assert soup.find("p").get_text() == "Hi"

    def test_malformed_markup_still_parses(self):
        soup = parse_document("<div><p>unclosed <b>bold <i>text</div></span>>>")
        assert "unclosed" in soup.get_text()

    def test_empty_input(self):
        soup = parse_document("")
        assert soup.get_text() == ""

    def test_rejects_non_text(self):
        with pytest.raises(TypeError):
            parse_document(None)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Noise stripper
# ---------------------------------------------------------------------------

class TestStripNoise:
    def test_removes_chrome_and_widgets(self, article_html):
        stripped = strip_noise(_soup(article_html))
        text = stripped.get_text(separator=" ")
        assert "Buy our finance course" not in text
        assert "Share on Twitter" not in text
        assert "Popular in Finance" not in text
        assert "Great finance advice" not in text
        assert "Copyright" not in text
        assert stripped.find("script") is None
        assert stripped.find("style") is None
        assert "Every startup founder" in text

    def test_original_tree_untouched(self, article_html):
        soup = _soup(article_html)
        strip_noise(soup)
        assert soup.find("nav") is not None
        assert soup.find("footer") is not None
        assert soup.select_one(".advertisement") is not None

    def test_role_hints(self):
        soup = _soup(
            '<body><div role="navigation">menu</div>'
            '<div role="complementary">aside</div><p>body</p></body>',
        )
        text = strip_noise(soup).get_text()
        assert "menu" not in text
        assert "aside" not in text
        assert "body" in text

    def test_nested_noise(self):
        soup = _soup(
            '<body><aside class="sidebar"><div class="ad"><nav>x</nav></div></aside>'
            "<p>kept</p></body>",
        )
        stripped = strip_noise(soup)
        assert stripped.find("aside") is None
        assert "kept" in stripped.get_text()

    def test_idempotent(self, article_html):
        once = strip_noise(_soup(article_html))
        twice = strip_noise(once)
        assert str(once) == str(twice)


# ---------------------------------------------------------------------------
# Title resolver
# ---------------------------------------------------------------------------

class TestTitleResolver:
    def test_h1_wins(self, article_html):
        assert extract_title(_soup(article_html)) == "Raising Your First Seed Round"

    def test_title_tag(self):
        html = "<html><head><title>Doc Title</title></head><body><h2>Sub</h2></body></html>"
        assert extract_title(_soup(html)) == "Doc Title"

    def test_og_title(self):
        html = '<html><head><meta property="og:title" content="OG Title"></head></html>'
        assert extract_title(_soup(html)) == "OG Title"

    def test_twitter_title(self):
        html = '<html><head><meta name="twitter:title" content="Card Title"></head></html>'
        assert extract_title(_soup(html)) == "Card Title"

    def test_class_hint(self):
        html = '<body><div class="post-title">Class Title</div></body>'
        assert extract_title(_soup(html)) == "Class Title"

    def test_fallback(self, untitled_html):
        assert extract_title(_soup(untitled_html)) == "Untitled Article"

    def test_blank_h1_falls_through(self):
        html = "<html><head><title>Backup</title></head><body><h1>   </h1></body></html>"
        assert extract_title(_soup(html)) == "Backup"

    def test_whitespace_normalised(self):
        html = "<body><h1>\n  My\n\n   Spaced   Title  </h1></body>"
        assert extract_title(_soup(html)) == "My Spaced Title"

    def test_h1_inside_header_still_counts(self):
        html = "<body><header><h1>Header Title</h1></header><p>x</p></body>"
        assert extract_title(_soup(html)) == "Header Title"


# ---------------------------------------------------------------------------
# Content locator
# ---------------------------------------------------------------------------

class TestContentLocator:
    def test_article_preferred_over_main(self):
        html = "<body><main><p>main text</p><article><p>article text</p></article></main></body>"
        assert extract_content(strip_noise(_soup(html))) == "<p>article text</p>"

    def test_main(self, noisy_main_html):
        content = extract_content(strip_noise(_soup(noisy_main_html)))
        assert content.startswith("<h2>Quarterly Notes</h2>")
        assert "Navigation link text" not in content
        assert "Sponsored" not in content
        assert "Reader comment" not in content

    def test_role_main(self):
        html = '<body><div role="main"><p>role text</p></div><p>outside</p></body>'
        assert extract_content(_soup(html)) == "<p>role text</p>"

    def test_class_hints_in_priority_order(self):
        html = (
            '<body><div class="entry-content"><p>entry</p></div>'
            '<div class="post-content"><p>post</p></div></body>'
        )
        assert extract_content(_soup(html)) == "<p>post</p>"

    def test_content_id(self):
        html = '<body><div id="content"><p>by id</p></div><p>other</p></body>'
        assert extract_content(_soup(html)) == "<p>by id</p>"

    def test_body_fallback(self):
        html = "<html><body><div><p>one</p></div><p>two</p></body></html>"
        assert extract_content(_soup(html)) == "<div><p>one</p></div><p>two</p>"

    def test_empty_document(self):
        soup = _soup("")
        assert find_content_element(soup) is None
        assert extract_content(soup) == ""

    def test_head_only_document(self):
        soup = _soup("<html><head><title>Hello there</title></head></html>")
        assert find_content_element(soup) is None
        assert extract_content(soup) == ""

    def test_fixture_content(self, article_html):
        content = extract_content(strip_noise(_soup(article_html)))
        assert content.startswith("<h1>Raising Your First Seed Round</h1>")
        assert "<!--" not in content
        assert "<p> </p>" not in content and "<p></p>" not in content
        assert "Every startup founder eventually faces" in content
        assert "finance" not in content.lower()


class TestCleanHtml:
    def test_drops_comments(self):
        assert clean_html("<p>a</p><!-- note\n spanning -->") == "<p>a</p>"

    def test_drops_empty_paired_tags(self):
        assert clean_html('<p> </p><div class="x"></div><p>x</p>') == "<p>x</p>"

    def test_keeps_void_elements(self):
        assert clean_html('<img src="a.jpg"/>') == '<img src="a.jpg"/>'

    def test_collapses_whitespace(self):
        assert clean_html("<p>a   b\n\tc</p>\n  <p>d</p>") == "<p>a b c</p><p>d</p>"

    def test_does_not_alter_text(self):
        assert clean_html("<p>keep  <b>this</b> text</p>") == "<p>keep <b>this</b> text</p>"


class TestHtmlToText:
    def test_strips_tags(self):
        assert html_to_text("<p>Hello <b>bold</b></p><p>world</p>") == "Hello bold world"

    def test_decodes_entities(self):
        assert html_to_text("<p>Fish &amp; Chips</p>") == "Fish & Chips"

    def test_empty(self):
        assert html_to_text("") == ""
        assert html_to_text("   ") == ""


# ---------------------------------------------------------------------------
# Metadata reader
# ---------------------------------------------------------------------------

class TestMetadataReader:
    def test_fixture_metadata(self, article_html):
        meta = extract_metadata(_soup(article_html))
        assert meta.author == "Jane Smith"
        assert meta.publish_date == "2024-01-15T09:30:00Z"
        assert meta.description == "A practical guide to raising your first seed round."

    def test_rel_author_fallback(self):
        html = '<body><span>by <a rel="author" href="/u/bob">\n Bob  Lee </a></span></body>'
        assert extract_metadata(_soup(html)).author == "Bob Lee"

    def test_time_datetime_fallback(self):
        html = '<body><p>Posted <time datetime="2023-05-01">May 1</time></p></body>'
        assert extract_metadata(_soup(html)).publish_date == "2023-05-01"

    def test_only_first_time_element_consulted(self):
        html = '<body><time>yesterday</time><time datetime="2023-05-01">May 1</time></body>'
        assert extract_metadata(_soup(html)).publish_date is None

    def test_og_description_fallback(self):
        html = '<head><meta property="og:description" content="From OG"></head>'
        assert extract_metadata(_soup(html)).description == "From OG"

    def test_blank_meta_skipped(self):
        html = (
            '<head><meta name="description" content="  ">'
            '<meta property="og:description" content="Second"></head>'
        )
        assert extract_metadata(_soup(html)).description == "Second"

    def test_all_missing(self, untitled_html):
        meta = extract_metadata(_soup(untitled_html))
        assert meta.author is None
        assert meta.publish_date is None
        assert meta.description is None


# ---------------------------------------------------------------------------
# Asset & outline collector
# ---------------------------------------------------------------------------

class TestImages:
    def test_fixture_images(self, article_html):
        assert extract_images(_soup(article_html)) == ["/images/hero.jpg", "/images/chart.png"]

    def test_duplicates_kept_in_order(self):
        html = '<img src="a.jpg"><img src="b.png"><img src="a.jpg">'
        assert extract_images(_soup(html)) == ["a.jpg", "b.png", "a.jpg"]

    def test_data_uri_and_missing_src_skipped(self):
        html = (
            '<img src="DATA:image/gif;base64,R0lGOD">'
            '<img alt="no src"><img src="">'
            '<img src="https://cdn.example.com/x.webp">'
        )
        assert extract_images(_soup(html)) == ["https://cdn.example.com/x.webp"]

    def test_images_in_noise_regions_collected(self):
        html = '<body><nav><img src="logo.svg"></nav><article><img src="p.jpg"></article></body>'
        assert extract_images(_soup(html)) == ["logo.svg", "p.jpg"]


class TestHeadings:
    def test_fixture_headings(self, article_html):
        assert extract_headings(_soup(article_html)) == [
            "Raising Your First Seed Round",
            "Before you pitch",
            "Talking to venture funds",
            "Popular in Finance",
            "Comments",
        ]

    def test_all_levels_in_document_order(self):
        html = (
            "<h3>three</h3><h1>one</h1><h6>six</h6>"
            "<h2>two</h2><h5>five</h5><h4>four</h4>"
        )
        assert extract_headings(_soup(html)) == ["three", "one", "six", "two", "five", "four"]

    def test_empty_headings_skipped_and_trimmed(self):
        html = "<h2>  </h2><h2>\n  Trimmed  \n</h2><h3></h3>"
        assert extract_headings(_soup(html)) == ["Trimmed"]

    def test_no_headings(self, untitled_html):
        assert extract_headings(_soup(untitled_html)) == []


# ---------------------------------------------------------------------------
# Excerpt summarizer
# ---------------------------------------------------------------------------

class TestExcerpt:
    def test_short_text_unchanged(self):
        assert generate_excerpt("<p>Short   and\nsweet.</p>") == "Short and sweet."

    def test_cuts_at_sentence_end(self):
        first = "x" * 150 + "."
        text = first + " more words" * 20
        assert generate_excerpt(f"<p>{text}</p>") == first

    def test_question_and_exclamation_marks(self):
        first = "y" * 130 + "?"
        text = first + " and then!" + " filler" * 30
        # "!" at index 140 is the last terminal within the limit
        assert generate_excerpt(text) == first + " and then!"

    def test_cuts_at_last_space_with_ellipsis(self):
        excerpt = generate_excerpt("alpha " * 50)
        assert excerpt.endswith("...")
        assert len(excerpt) <= 200 + len("...")
        assert all(word == "alpha" for word in excerpt[:-3].split())

    def test_early_sentence_end_ignored(self):
        excerpt = generate_excerpt("Short. " + "alpha " * 50)
        assert excerpt.startswith("Short. alpha")
        assert excerpt.endswith("alpha...")

    def test_single_long_token(self):
        assert generate_excerpt("z" * 300) == "z" * 200 + "..."

    def test_custom_max_length(self):
        excerpt = generate_excerpt("one two three four five six", max_length=10)
        assert excerpt == "one two..."

    def test_empty(self):
        assert generate_excerpt("") == ""

    def test_fixture_excerpt(self, article_html):
        content = extract_content(strip_noise(_soup(article_html)))
        excerpt = generate_excerpt(content)
        assert excerpt.startswith("Raising Your First Seed Round By Jane Smith")
        assert excerpt.endswith("raise a seed round?")
        assert len(excerpt) <= 200


# ---------------------------------------------------------------------------
# Statistics calculator
# ---------------------------------------------------------------------------

class TestStatistics:
    def test_counts_words(self):
        assert Heuristics.count_words("<p>Hello world.</p>") == 2

    def test_punctuation_not_counted(self):
        assert Heuristics.count_words("<p>Hello -- world ... !!!</p>") == 2

    def test_words_split_by_tags(self):
        assert Heuristics.count_words("<p>one</p><p>two</p>") == 2

    def test_empty(self):
        assert Heuristics.count_words("") == 0

    def test_reading_time_minimum_one(self):
        assert Heuristics.reading_time(0) == 1
        assert Heuristics.reading_time(100) == 1
        assert Heuristics.reading_time(200) == 1
        assert Heuristics.reading_time(201) == 2
        assert Heuristics.reading_time(1000) == 5

    def test_reading_time_custom_speed(self):
        assert Heuristics.reading_time(300, wpm=100) == 3
