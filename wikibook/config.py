"""Configuration objects and constants for the book compiler."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

DEFAULT_SOURCES_DIR = Path("sources")
DEFAULT_RESULTS_DIR = Path("results")
DEFAULT_IMAGE_WIDTH = "1920px"
DEFAULT_USER_AGENT = "wikibook/0.1 (offline article compiler; python-requests)"

DEAD_SELECTORS: Tuple[str, ...] = (
    ".navbox",
    ".noprint",
    ".ambox",
    ".reference",
    ".mw-editsection",
    ".mw-jump-link",
    ".Template-Fact",
    ".Inline-Template",
    ".rellink",
    ".printfooter",
    ".reflist",
    ".infobox",
    "#siteSub",
    "#contentSub",
    "#jump-to-nav",
    "#toc",
    "#mw-navigation",
    "#footer",
    "#catlinks",
    "#mw-indicator-semiprotect",
    "#mw-indicator-protect",
    "script",
    "noscript",
    "br",
)

# Heading ids that start the trailing apparatus of an article.
FOOTNOTE_IDS: Tuple[str, ...] = (
    "References",
    "Sources",
    "External_links",
    "See_also",
    "Notes",
    "脚注",
    "注釈",
    "出典",
    "参考文献",
    "関連項目",
    "外部リンク",
)


@dataclass(frozen=True)
class CleaningRules:
    """Static rule tables consumed by the page-cleaning stages."""

    content_id: str = "content"
    dead_selectors: Tuple[str, ...] = DEAD_SELECTORS
    footnote_ids: Tuple[str, ...] = FOOTNOTE_IDS
    thumbnail_selector: str = ".thumbinner"
    thumbnail_class: str = "thumbinner"
    navbox_selector: str = ".vertical-navbox"


@dataclass
class BookConfig:
    """Top-level settings that control fetching and compilation."""

    sources_dir: Path = DEFAULT_SOURCES_DIR
    results_dir: Path = DEFAULT_RESULTS_DIR
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    image_width: str = DEFAULT_IMAGE_WIDTH
    skip_failures: bool = False
