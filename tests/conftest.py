"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def article_html() -> str:
    return _read_fixture("article.html")


@pytest.fixture
def minimal_article_html() -> str:
    return _read_fixture("minimal_article.html")


@pytest.fixture
def untitled_html() -> str:
    return _read_fixture("untitled.html")


@pytest.fixture
def noisy_main_html() -> str:
    return _read_fixture("noisy_main.html")
