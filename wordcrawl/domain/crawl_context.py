import threading
import time
from typing import Callable, Optional

from wordcrawl.domain.crawl_configuration import CrawlConfiguration
from wordcrawl.domain.visited_registry import VisitedRegistry
from wordcrawl.domain.word_tally import WordTally


class CrawlContext:
    """Shared state for one `crawl()` call.

    Created fresh per invocation so concurrent crawls never see each
    other's visited URLs or counts.
    """

    def __init__(
        self,
        config: CrawlConfiguration,
        parser,
        deadline_instant: float,
        clock: Callable[[], float] = time.monotonic,
        submit: Optional[Callable] = None,
    ):
        self.config = config
        self.parser = parser
        self.deadline_instant = deadline_instant
        self.clock = clock
        self.submit = submit
        self.visited = VisitedRegistry()
        self.tally = WordTally()
        self._error_lock = threading.Lock()
        self._error: Optional[BaseException] = None
        self._aborted = threading.Event()

    def deadline_reached(self) -> bool:
        # A zero-length deadline must prune everything regardless of clock resolution.
        return self.clock() >= self.deadline_instant

    def is_ignored(self, url: str) -> bool:
        return self.config.is_ignored_url(url)

    @property
    def aborted(self) -> bool:
        return self._aborted.is_set()

    @property
    def error(self) -> Optional[BaseException]:
        with self._error_lock:
            return self._error

    def abort(self, error: BaseException) -> None:
        """Record the first failure; later tasks observe `aborted` and prune."""
        with self._error_lock:
            if self._error is None:
                self._error = error
        self._aborted.set()
