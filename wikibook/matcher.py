"""Node lookup helpers shared by every cleaning stage."""

from __future__ import annotations

from typing import Iterable, List, Optional

from bs4 import Tag


def select_all(root: Tag, selectors: Iterable[str]) -> List[Tag]:
    """Return descendants matching any of ``selectors`` in document order."""
    selectors = [selector for selector in selectors if selector]
    if not selectors:
        return []
    return root.select(", ".join(selectors))


def find_by_id(root: Tag, identifier: str) -> Optional[Tag]:
    """Return the first descendant whose ``id`` is ``identifier``.

    Matching compares strings directly so ids such as ``脚注`` or
    ``See_also`` need no CSS escaping.
    """
    return root.find(id=identifier)
