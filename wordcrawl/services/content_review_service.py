from typing import Callable, Optional
from urllib.parse import urldefrag, urljoin, urlparse

from bs4 import BeautifulSoup

_NON_CONTENT_TAGS = ("script", "style", "noscript", "template", "svg")


class ContentReviewService:
    """Pull visible text and outgoing links out of an HTML document."""

    def __init__(self, soup_factory: Optional[Callable[[str], BeautifulSoup]] = None):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def extract_links(self, base_url: str, html: str) -> list[str]:
        """Absolute http(s) links in document order, fragments dropped."""
        soup = self._soup_factory(html)
        urls = []
        for a in soup.find_all("a", href=True):
            abs_url, _ = urldefrag(urljoin(base_url, a.get("href").strip()))
            if urlparse(abs_url).scheme not in ("http", "https"):
                continue
            urls.append(abs_url)
        return urls

    def extract_text(self, html: str) -> str:
        soup = self._soup_factory(html)
        for tag in _NON_CONTENT_TAGS:
            for element in soup.find_all(tag):
                element.decompose()
        return soup.get_text(separator=" ", strip=True)
