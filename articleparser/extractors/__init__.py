"""Extraction sub-package: deterministic, stage-by-stage article extraction."""

from .assets import extract_headings, extract_images
from .classifier import KeywordClassifier, build_classification_text
from .document import parse_document, strip_noise
from .excerpt import generate_excerpt
from .heuristics import Heuristics
from .main_content import clean_html, extract_content, html_to_text
from .metadata import extract_metadata, extract_title
from .slug import title_to_slug

__all__ = [
    "parse_document",
    "strip_noise",
    "extract_title",
    "extract_content",
    "extract_metadata",
    "extract_images",
    "extract_headings",
    "generate_excerpt",
    "clean_html",
    "html_to_text",
    "build_classification_text",
    "title_to_slug",
    "Heuristics",
    "KeywordClassifier",
]
