"""HTTP collaborators for fetching article pages and image bytes."""

from __future__ import annotations

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup
from requests.utils import requote_uri

from .config import DEFAULT_USER_AGENT
from .errors import FetchError, ImageFetchError

logger = logging.getLogger("wikibook")


class PageFetcher:
    """Blocking page and image fetcher sharing one ``requests`` session."""

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = user_agent

    def _get(self, url: str) -> requests.Response:
        resp = self.session.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return resp

    def fetch(self, url: str) -> BeautifulSoup:
        """Fetch ``url`` and parse it into a document tree."""
        escaped = requote_uri(url)

        logger.info("Loading %s", escaped)
        try:
            resp = self._get(escaped)
        except requests.RequestException as exc:
            raise FetchError(f"Failed to fetch {escaped}: {exc}") from exc
        return BeautifulSoup(resp.text, "html.parser")

    def fetch_bytes(self, url: str) -> bytes:
        """Download the raw bytes behind ``url``."""
        logger.debug("Downloading image %s", url)
        try:
            resp = self._get(url)
        except requests.RequestException as exc:
            raise ImageFetchError(f"Failed to fetch image {url}: {exc}") from exc
        return resp.content
