"""Image downloading and local cache utilities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional

from bs4 import Tag
from filetype import guess

from .config import DEFAULT_IMAGE_WIDTH
from .errors import FilesystemError
from .models import ImageReference
from .utils import is_safe_filename, local_filename, upscale_image_url, url_basename

logger = logging.getLogger("wikibook")

SIZE_ATTRIBUTES = ("width", "height")


def is_image(data: bytes) -> bool:
    kind = guess(data)
    return bool(kind and kind.mime.startswith("image/"))


class ImageLocalizer:
    """Download article images into the results directory and relink them.

    The results directory doubles as the cache: a file is fetched only when
    nothing with its decoded basename exists there yet.
    """

    def __init__(
        self,
        results_dir: Path,
        fetch_bytes: Callable[[str], bytes],
        image_width: str = DEFAULT_IMAGE_WIDTH,
    ) -> None:
        self.results_dir = Path(results_dir)
        self.fetch_bytes = fetch_bytes
        self.image_width = image_width
        self.references: List[ImageReference] = []

    def remote_url(self, src: str) -> str:
        return upscale_image_url(src, self.image_width)

    def _inside_results_dir(self, filename: str) -> bool:
        root = self.results_dir.resolve()
        return (root / filename).resolve().parent == root

    def ensure_cached(self, remote_url: str, filename: str) -> Path:
        """Download ``remote_url`` to ``filename`` unless it already exists."""
        destination = self.results_dir / filename
        if destination.exists():
            logger.debug("Cache hit for %s", filename)
            return destination

        data = self.fetch_bytes(remote_url)
        if not is_image(data):
            logger.warning("Payload from %s is not a recognised image", remote_url)

        try:
            destination.write_bytes(data)
        except OSError as exc:
            raise FilesystemError(f"Failed to write image {destination}: {exc}") from exc
        logger.info("Downloaded %s (%d bytes)", filename, len(data))
        return destination

    def localize(self, img: Tag) -> Optional[ImageReference]:
        """Point ``img`` at a cached full-size copy of its remote source."""
        src = img.get("src")
        if not src or src.startswith("data:"):
            logger.warning("Skipping image without a remote src: %s", img)
            return None
        if src.startswith("./"):
            logger.debug("Image %s already points at the local cache", src)
            return None

        remote_url = self.remote_url(src)
        basename = url_basename(remote_url)
        filename = local_filename(remote_url)
        if not filename:
            logger.warning("Skipping image with no file name in %s", remote_url)
            return None
        if not is_safe_filename(filename) or not self._inside_results_dir(filename):
            logger.warning("Skipping image with unsafe file name %r from %s", filename, remote_url)
            return None

        self.ensure_cached(remote_url, filename)

        relative_path = f"./{basename}"
        img["src"] = relative_path
        for attribute in SIZE_ATTRIBUTES:
            img.attrs.pop(attribute, None)
        return ImageReference(
            original_src=src,
            remote_url=remote_url,
            filename=filename,
            relative_path=relative_path,
        )

    def localize_all(self, region: Tag) -> List[ImageReference]:
        """Localize every image below ``region`` in document order."""
        references: List[ImageReference] = []
        for img in region.find_all("img"):
            reference = self.localize(img)
            if reference:
                references.append(reference)
        self.references.extend(references)
        return references
