"""Page-cleaning stages that reduce an article to an offline fragment.

Every stage mutates the content region in place. :func:`clean_page` runs
them in a fixed order: later stages rely on what earlier ones removed.
"""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

from .config import CleaningRules
from .errors import ParseError
from .images import ImageLocalizer
from .matcher import find_by_id, select_all

logger = logging.getLogger("wikibook")

PRESENTATION_ATTRIBUTES = ("style", "align")


def find_content_region(document: BeautifulSoup, rules: CleaningRules) -> Tag:
    """Return the article container or raise :class:`ParseError`."""
    region = find_by_id(document, rules.content_id)
    if region is None:
        raise ParseError(f"Page has no element with id {rules.content_id!r}")
    return region


def strip_presentation(region: Tag, rules: CleaningRules) -> None:
    """Drop inline presentation attributes from the whole region."""
    for node in [region, *region.find_all(True)]:
        for attribute in PRESENTATION_ATTRIBUTES:
            node.attrs.pop(attribute, None)

    for thumb in select_all(region, [rules.thumbnail_selector]):
        thumb.attrs.pop("style", None)


def truncate_footnotes(region: Tag, rules: CleaningRules) -> Optional[str]:
    """Remove the first footnote heading found and everything after it.

    Returns the heading id that matched, or ``None`` when the page has no
    such section and was left intact.
    """
    for footnote_id in rules.footnote_ids:
        anchor = find_by_id(region, footnote_id)
        if anchor is None:
            continue
        heading = anchor.parent
        if heading is None or heading is region:
            continue

        following = list(heading.find_next_siblings())
        for sibling in following:
            sibling.decompose()
        heading.decompose()
        return footnote_id
    return None


def prune_dead_nodes(region: Tag, rules: CleaningRules) -> int:
    """Remove every subtree matching one of the dead selectors."""
    removed = 0
    for node in select_all(region, rules.dead_selectors):
        # Already gone along with a matching ancestor.
        if node.decomposed:
            continue
        node.decompose()
        removed += 1
    return removed


def neutralize_links(region: Tag) -> int:
    """Turn anchors into plain spans so readers show no dead controls."""
    links = region.find_all("a")
    for link in links:
        link.name = "span"
        link.attrs.pop("href", None)
    return len(links)


def flatten_navboxes(
    region: Tag, document: BeautifulSoup, rules: CleaningRules
) -> int:
    """Move images out of vertical navboxes and drop the boxes.

    Each image is prepended to the navbox's parent in its own thumbnail
    wrapper, so the relocated images end up in reverse order.
    """
    relocated = 0
    for navbox in select_all(region, [rules.navbox_selector]):
        if navbox.decomposed or navbox.parent is None:
            continue
        parent = navbox.parent
        for img in navbox.find_all("img"):
            wrapper = document.new_tag("div", attrs={"class": rules.thumbnail_class})
            wrapper.append(img.extract())
            parent.insert(0, wrapper)
            relocated += 1
        navbox.decompose()
    return relocated


def clean_page(
    document: BeautifulSoup,
    localizer: ImageLocalizer,
    rules: Optional[CleaningRules] = None,
) -> str:
    """Run every cleaning stage over the page and return the fragment HTML."""
    rules = rules or CleaningRules()
    region = find_content_region(document, rules)

    strip_presentation(region, rules)
    footnote_id = truncate_footnotes(region, rules)
    if footnote_id:
        logger.debug("Truncated page at #%s", footnote_id)
    else:
        logger.debug("No footnote heading found; page left intact")
    pruned = prune_dead_nodes(region, rules)
    links = neutralize_links(region)
    relocated = flatten_navboxes(region, document, rules)
    logger.debug(
        "Pruned %d node(s), neutralized %d link(s), relocated %d navbox image(s)",
        pruned,
        links,
        relocated,
    )
    images = localizer.localize_all(region)
    logger.debug("Localized %d image(s)", len(images))

    return str(region)
