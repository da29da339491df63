"""Shared sample pages and an in-memory fetcher for the test suite."""

from typing import Dict, List, Optional

from bs4 import BeautifulSoup

from wikibook.errors import FetchError, ImageFetchError

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64

UPLOAD = "//upload.wikimedia.org/wikipedia/commons/thumb"

ARTICLE_HTML = f"""<!DOCTYPE html>
<html><head><title>Cat</title><script>var wg = 1;</script></head>
<body>
<div id="mw-navigation"><a href="/wiki/Main_Page">Main page</a></div>
<div id="content" style="margin-left: 11em">
  <h1 id="firstHeading" align="center">Cat</h1>
  <div id="siteSub">From Wikipedia, the free encyclopedia</div>
  <table class="vertical-navbox nowraplinks" style="float: right">
    <tr><td><img src="{UPLOAD}/a/aa/Alpha.jpg/220px-Alpha.jpg" width="220" height="165"></td></tr>
    <tr><td><img src="{UPLOAD}/b/bb/Beta.png/250px-Beta.png" width="250" height="200"></td></tr>
  </table>
  <p>The <a href="/wiki/Cat" title="Cat">cat</a> is a small mammal.<sup class="reference"><a href="#cite_note-1">[1]</a></sup></p>
  <div class="thumb tright"><div class="thumbinner" style="width: 222px"><img src="{UPLOAD}/c/cc/Gamma_%28cat%29.jpg/220px-Gamma_%28cat%29.jpg" width="220" height="150"><div class="thumbcaption">A <a href="/wiki/Kitten">kitten</a></div></div></div>
  <script>console.log("tracking");</script>
  <noscript><img src="//example.org/pixel.png"></noscript>
  <p>First line<br>second line</p>
  <div class="navbox"><a href="/wiki/Felidae">Felidae</a></div>
  <h2><span class="mw-headline" id="References">References</span><span class="mw-editsection">[edit]</span></h2>
  <div class="reflist"><ol><li>Source one</li></ol></div>
  <div class="printfooter">Retrieved from somewhere</div>
</div>
<div id="footer">Footer</div>
</body></html>
"""


def make_page(title: str, body: str = "") -> str:
    """Minimal page with a content region holding ``body``."""
    return (
        f"<html><body><div id=\"content\"><h1 id=\"firstHeading\">{title}</h1>"
        f"{body}</div></body></html>"
    )


class FakeFetcher:
    """Serves pages and image bytes from dictionaries and records calls."""

    def __init__(
        self,
        pages: Dict[str, str],
        images: Optional[Dict[str, bytes]] = None,
        default_image: Optional[bytes] = PNG_BYTES,
    ) -> None:
        self.pages = pages
        self.images = images or {}
        self.default_image = default_image
        self.fetched: List[str] = []
        self.image_requests: List[str] = []

    def fetch(self, url: str) -> BeautifulSoup:
        self.fetched.append(url)
        if url not in self.pages:
            raise FetchError(f"Failed to fetch {url}: 404")
        return BeautifulSoup(self.pages[url], "html.parser")

    def fetch_bytes(self, url: str) -> bytes:
        self.image_requests.append(url)
        if url in self.images:
            return self.images[url]
        if self.default_image is None:
            raise ImageFetchError(f"Failed to fetch image {url}: 404")
        return self.default_image
