"""Data models used throughout the compilation pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ImageReference:
    """Image rewritten to point at a locally cached copy."""

    original_src: str
    remote_url: str
    filename: str
    relative_path: str


@dataclass
class BookResult:
    """Summary of one compiled URL list."""

    source_path: Path
    output_path: Path
    page_count: int
    image_count: int
    total_seconds: float
