"""High-level orchestration for turning URL lists into offline books."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List, Optional

from .cleaner import clean_page
from .config import BookConfig, CleaningRules
from .errors import FetchError, FilesystemError, ImageFetchError, ParseError
from .fetch import PageFetcher
from .images import ImageLocalizer
from .models import BookResult
from .style import BOOK_STYLE
from .utils import list_name

logger = logging.getLogger("wikibook")

# Per-page failures that ``skip_failures`` turns into warnings.
PAGE_ERRORS = (FetchError, ParseError, ImageFetchError)


def read_url_list(path: Path) -> List[str]:
    """Read one URL per line; only trailing empty lines are dropped."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(f"Failed to read URL list {path}: {exc}") from exc
    text = text.rstrip("\n")
    if not text:
        return []
    return text.split("\n")


def output_path_for(source_path: Path, config: BookConfig) -> Path:
    return config.results_dir / f"{list_name(source_path)}.html"


def save_book(fragments: List[str], output_path: Path) -> Path:
    """Write the fragments followed by the stylesheet to ``output_path``."""
    try:
        output_path.write_text("".join(fragments) + BOOK_STYLE, encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(f"Failed to write book {output_path}: {exc}") from exc
    logger.info("Saved book to %s", output_path)
    return output_path


def ensure_results_dir(config: BookConfig) -> None:
    try:
        config.results_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(
            f"Failed to create results directory {config.results_dir}: {exc}"
        ) from exc


def compile_list(
    source_path: Path,
    config: BookConfig,
    fetcher: PageFetcher,
    rules: Optional[CleaningRules] = None,
) -> BookResult:
    """Fetch, clean and concatenate every page named in ``source_path``."""
    rules = rules or CleaningRules()
    start = time.perf_counter()
    ensure_results_dir(config)

    urls = read_url_list(source_path)
    logger.info("Compiling %s (%d URL(s))", source_path, len(urls))
    localizer = ImageLocalizer(
        config.results_dir, fetcher.fetch_bytes, image_width=config.image_width
    )

    fragments: List[str] = []
    for url in urls:
        try:
            document = fetcher.fetch(url)
            fragments.append(clean_page(document, localizer, rules))
        except PAGE_ERRORS:
            if not config.skip_failures:
                raise
            logger.exception("Skipping %s", url)

    output_path = save_book(fragments, output_path_for(source_path, config))
    return BookResult(
        source_path=source_path,
        output_path=output_path,
        page_count=len(fragments),
        image_count=len(localizer.references),
        total_seconds=time.perf_counter() - start,
    )


def compile_all(
    config: BookConfig,
    fetcher: PageFetcher,
    rules: Optional[CleaningRules] = None,
) -> List[BookResult]:
    """Compile every list file in the sources directory, one after another."""
    try:
        sources = sorted(path for path in config.sources_dir.iterdir() if path.is_file())
    except OSError as exc:
        raise FilesystemError(
            f"Failed to list sources directory {config.sources_dir}: {exc}"
        ) from exc

    results: List[BookResult] = []
    for source_path in sources:
        results.append(compile_list(source_path, config, fetcher, rules))
    return results
