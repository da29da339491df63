"""Command-line entry point for the book compiler."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

from .compiler import compile_all
from .config import DEFAULT_RESULTS_DIR, DEFAULT_SOURCES_DIR, BookConfig
from .errors import WikiBookError
from .fetch import PageFetcher

logger = logging.getLogger("wikibook.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Compile lists of encyclopedia article URLs into self-contained HTML books."
        ),
    )
    parser.add_argument(
        "--sources",
        default=DEFAULT_SOURCES_DIR,
        type=Path,
        help="Directory of URL list files, one URL per line",
    )
    parser.add_argument(
        "--results",
        default=DEFAULT_RESULTS_DIR,
        type=Path,
        help="Directory where books and downloaded images are written",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Request timeout in seconds",
    )
    parser.add_argument(
        "--skip-failures",
        action="store_true",
        help="Log and omit pages that fail to fetch or parse instead of aborting",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = BookConfig(
        sources_dir=args.sources,
        results_dir=args.results,
        timeout=args.timeout,
        skip_failures=args.skip_failures,
    )
    fetcher = PageFetcher(timeout=config.timeout, user_agent=config.user_agent)

    overall_start = time.perf_counter()
    try:
        results = compile_all(config, fetcher)
    except WikiBookError as exc:
        logger.error("Compilation aborted: %s", exc)
        return 1
    total_elapsed = time.perf_counter() - overall_start

    logger.info(
        "Finished in %.2fs (%d book(s), %d page(s))",
        total_elapsed,
        len(results),
        sum(result.page_count for result in results),
    )
    if args.verbose:
        for result in results:
            logger.debug(
                "Compiled %s -> %s (pages=%d, images=%d, elapsed=%.2fs)",
                result.source_path,
                result.output_path,
                result.page_count,
                result.image_count,
                result.total_seconds,
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())
