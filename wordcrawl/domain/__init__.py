"""Domain objects for wordcrawl - explicit re-exports to satisfy linters."""
from .crawl_configuration import CrawlConfiguration as CrawlConfiguration
from .crawl_context import CrawlContext as CrawlContext
from .crawl_result import CrawlResult as CrawlResult
from .parse_result import ParseResult as ParseResult
from .visited_registry import VisitedRegistry as VisitedRegistry
from .word_tally import WordTally as WordTally, top_n as top_n

__all__ = ["CrawlConfiguration", "CrawlContext", "CrawlResult", "ParseResult", "VisitedRegistry", "WordTally", "top_n"]
