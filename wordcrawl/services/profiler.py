"""Method-level timing applied as explicit wrappers at composition time."""
import functools
import logging
import threading
import time
from datetime import datetime, timezone
from typing import Callable, Dict, IO, Iterable, Optional

from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.parse_result import ParseResult
from wordcrawl.utils.datetime_utils import format_duration, format_rfc1123

logger = logging.getLogger(__name__)


def _qualified_name(owner) -> str:
    cls = owner if isinstance(owner, type) else type(owner)
    return f"{cls.__module__}.{cls.__qualname__}"


class ProfilingState:
    """Thread-safe accumulator of total time spent per `Class#method`."""

    def __init__(self):
        self._lock = threading.Lock()
        self._totals: Dict[str, float] = {}

    def record(self, owner, method_name: str, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("negative duration")
        key = f"{_qualified_name(owner)}#{method_name}"
        with self._lock:
            self._totals[key] = self._totals.get(key, 0.0) + seconds

    def totals(self) -> Dict[str, float]:
        with self._lock:
            return dict(self._totals)

    def write(self, stream: IO[str]) -> None:
        for key, seconds in sorted(self.totals().items()):
            stream.write(f"{key} took {format_duration(seconds)}\n")


class Profiler:
    def __init__(self, clock: Callable[[], float] = time.perf_counter, started_at: Optional[datetime] = None):
        self.clock = clock
        self.state = ProfilingState()
        self.started_at = started_at or datetime.now(timezone.utc)

    def timed(self, owner, fn: Callable) -> Callable:
        """Wrap `fn` so each call's duration is recorded against `owner`, even if it raises."""

        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            start = self.clock()
            try:
                return fn(*args, **kwargs)
            finally:
                self.state.record(owner, fn.__name__, self.clock() - start)

        return wrapper

    def write_data(self, path: str) -> None:
        """Append the report to `path`."""
        with open(path, "a", encoding="utf-8") as f:
            self.write_to(f)
        logger.info("Wrote profile data to %s", path)

    def write_to(self, stream: IO[str]) -> None:
        stream.write(f"Run at {format_rfc1123(self.started_at)}\n")
        self.state.write(stream)
        stream.write("\n")


class ProfiledPageParser:
    """PageParser decorator that times `parse`."""

    def __init__(self, delegate, profiler: Profiler):
        self.delegate = delegate
        self._parse = profiler.timed(delegate, delegate.parse)

    def parse(self, url: str) -> ParseResult:
        return self._parse(url)


class ProfiledCrawlEngine:
    """CrawlEngine decorator that times `crawl`."""

    def __init__(self, delegate, profiler: Profiler):
        self.delegate = delegate
        self._crawl = profiler.timed(delegate, delegate.crawl)

    def crawl(self, starting_urls: Optional[Iterable[str]] = None) -> CrawlResult:
        return self._crawl(starting_urls)

    def max_parallelism(self) -> int:
        return self.delegate.max_parallelism()
