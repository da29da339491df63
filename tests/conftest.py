"""Fixtures: sample article tree, cleaning rules and a temp book layout."""

import pytest
from bs4 import BeautifulSoup

from helpers import ARTICLE_HTML
from wikibook.config import BookConfig, CleaningRules


@pytest.fixture
def rules():
    return CleaningRules()


@pytest.fixture
def article():
    return BeautifulSoup(ARTICLE_HTML, "html.parser")


@pytest.fixture
def book_config(tmp_path):
    sources = tmp_path / "sources"
    sources.mkdir()
    return BookConfig(sources_dir=sources, results_dir=tmp_path / "results")
