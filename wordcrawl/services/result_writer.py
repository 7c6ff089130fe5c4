import json
import logging
from typing import IO

from wordcrawl.domain.crawl_result import CrawlResult

logger = logging.getLogger(__name__)


class CrawlResultWriter:
    """Serialize a `CrawlResult` as ``{"wordCounts": {...}, "urlsVisited": N}``."""

    def __init__(self, result: CrawlResult, indent: int = 2):
        self.result = result
        self.indent = indent

    def to_dict(self) -> dict:
        return {
            "wordCounts": dict(self.result.word_counts),
            "urlsVisited": self.result.urls_visited,
        }

    def write(self, path: str) -> None:
        """Write to `path`, replacing any existing file."""
        with open(path, "w", encoding="utf-8") as f:
            self.write_to(f)
        logger.info("Wrote crawl result to %s", path)

    def write_to(self, stream: IO[str]) -> None:
        # sort_keys would lose the popularity order
        json.dump(self.to_dict(), stream, indent=self.indent, ensure_ascii=False)
        stream.write("\n")
