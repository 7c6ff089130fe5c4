import logging
import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Optional

from wordcrawl.domain.crawl_configuration import CrawlConfiguration
from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.word_tally import top_n
from wordcrawl.services.expansion_task import ExpansionTask, JoinCounter
from wordcrawl.services.page_parser import PageParser

logger = logging.getLogger(__name__)


class CrawlEngine:
    """Runs depth- and deadline-bounded crawls on a thread pool.

    Each `crawl()` call gets its own visited registry, word tally and worker
    pool; nothing is shared between calls. The pool is sized to
    ``min(parallelism_budget, max_parallelism())``.
    """

    def __init__(
        self,
        *,
        config: CrawlConfiguration,
        parser: PageParser,
        clock: Callable[[], float] = time.monotonic,
    ):
        if config is None:
            raise ValueError("config is required")
        self.config = config
        self.parser = parser
        self.clock = clock

    def max_parallelism(self) -> int:
        return os.cpu_count() or 1

    def pool_size(self) -> int:
        return max(1, min(self.config.parallelism_budget, self.max_parallelism()))

    def crawl(self, starting_urls: Optional[Iterable[str]] = None) -> CrawlResult:
        """Crawl from `starting_urls` (default: the configured starting URLs).

        Raises the first `ParseError` if any page fails to parse. Deadline
        expiry is not an error; it only shrinks the result.
        """
        urls = list(self.config.starting_urls if starting_urls is None else starting_urls)
        deadline_instant = self.clock() + self.config.deadline_seconds
        context = CrawlContext(self.config, self.parser, deadline_instant, clock=self.clock)

        finished = threading.Event()
        root = JoinCounter(1, on_zero=finished.set)
        logger.info(
            "Starting crawl of %d url(s): max_depth=%s deadline=%ss workers=%d",
            len(urls), self.config.max_depth, self.config.deadline_seconds, self.pool_size(),
        )
        with ThreadPoolExecutor(max_workers=self.pool_size(), thread_name_prefix="wordcrawl") as pool:
            context.submit = pool.submit
            for url in urls:
                task = ExpansionTask(url, self.config.max_depth, context, parent=root)
                root.add()
                pool.submit(task.run)
            root.done()
            finished.wait()

        if context.error is not None:
            raise context.error

        if context.tally.is_empty():
            word_counts = {}
        else:
            word_counts = top_n(context.tally.snapshot(), self.config.popular_word_count)
        result = CrawlResult(word_counts=word_counts, urls_visited=context.visited.size())
        logger.info("Crawl finished: %d url(s) visited, %d word(s) ranked", result.urls_visited, len(result.word_counts))
        return result
