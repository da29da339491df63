"""Utility helpers for URL rewriting and path handling."""

from __future__ import annotations

import posixpath
import re
from pathlib import Path
from urllib.parse import unquote, urlparse

IMAGE_SIZE_PATTERN = re.compile(r"\d{3,4}px")
IMAGE_SCHEME = "https:"


def upscale_image_url(src: str, width: str) -> str:
    """Turn a thumbnail ``src`` into an absolute URL for a ``width`` rendition.

    The media server resizes on the fly based on the ``<n>px`` token in the
    thumbnail path, so swapping the first such token is enough.
    """
    if src.startswith("//"):
        remote = IMAGE_SCHEME + src
    else:
        remote = src
    return IMAGE_SIZE_PATTERN.sub(width, remote, count=1)


def url_basename(url: str) -> str:
    """Return the last path segment of ``url`` exactly as it is encoded."""
    return posixpath.basename(urlparse(url).path)


def local_filename(url: str) -> str:
    """Return the URL-decoded basename used as the on-disk cache key."""
    return unquote(url_basename(url))


def list_name(path: Path) -> str:
    """Name of a URL list file without a trailing ``.txt``."""
    name = path.name
    if name.endswith(".txt") and name != ".txt":
        return name[: -len(".txt")]
    return name


def is_safe_filename(name: str) -> bool:
    """True when ``name`` is a single path component with no traversal."""
    if name in ("", ".", ".."):
        return False
    return not any(separator in name for separator in ("/", "\\", "\x00"))
