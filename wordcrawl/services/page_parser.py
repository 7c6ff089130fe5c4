import logging
import re
from collections import Counter
from typing import Pattern, Protocol, Sequence

from wordcrawl.domain.parse_result import ParseResult
from wordcrawl.exceptions import HttpFetchError
from wordcrawl.services.content_review_service import ContentReviewService
from wordcrawl.services.http_service import HttpService

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[a-z0-9]+(?:'[a-z0-9]+)*")


class PageParser(Protocol):
    """Turn a URL into word counts and outgoing links.

    Implementations may raise; the crawl engine treats any failure as fatal.
    """

    def parse(self, url: str) -> ParseResult: ...


def count_words(text: str, ignored_word_patterns: Sequence[Pattern] = ()) -> dict[str, int]:
    """Lower-case `text`, split it into words and count them.

    Words fully matching any of `ignored_word_patterns` are dropped.
    """
    counts: Counter = Counter()
    for word in _WORD_RE.findall(text.lower()):
        if any(p.fullmatch(word) for p in ignored_word_patterns):
            continue
        counts[word] += 1
    return dict(counts)


class HttpPageParser:
    """Fetch a page over HTTP and parse it with BeautifulSoup."""

    def __init__(
        self,
        http_service: HttpService,
        content_review_service: ContentReviewService,
        ignored_word_patterns: Sequence[Pattern] = (),
    ):
        self.http_service = http_service
        self.content_review_service = content_review_service
        self.ignored_word_patterns = tuple(ignored_word_patterns)

    def parse(self, url: str) -> ParseResult:
        response = self.http_service.fetch(url)
        if not response.ok:
            raise HttpFetchError(url, RuntimeError(f"status {response.status_code}"))

        if not response.is_html:
            logger.info("Not HTML (%s), counting nothing for %s", response.content_type, url)
            return ParseResult(word_counts={}, links=[])

        body = response.text or ""
        text = self.content_review_service.extract_text(body)
        links = self.content_review_service.extract_links(url, body)
        return ParseResult(word_counts=count_words(text, self.ignored_word_patterns), links=links)
