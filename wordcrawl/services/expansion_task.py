import logging
import threading
from typing import Callable, List, Optional

from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.parse_result import ParseResult
from wordcrawl.exceptions import ParseError

logger = logging.getLogger(__name__)


class JoinCounter:
    """Wait-for-N barrier: fires `on_zero` exactly once when every unit is done.

    Starts with `pending` units (normally 1, the owner's own work). Units
    must be added before the owner releases its own unit. A counter with a
    `parent` releases one of the parent's units when it reaches zero; this
    walks up the chain in a loop, so chain length is not bounded by the
    interpreter's recursion limit.
    """

    def __init__(
        self,
        pending: int = 1,
        on_zero: Optional[Callable[[], None]] = None,
        parent: Optional["JoinCounter"] = None,
    ):
        self._lock = threading.Lock()
        self._pending = pending
        self._on_zero = on_zero
        self._parent = parent

    @property
    def pending(self) -> int:
        with self._lock:
            return self._pending

    def add(self, n: int = 1) -> None:
        with self._lock:
            if self._pending <= 0:
                raise RuntimeError("cannot add work to a completed join")
            self._pending += n

    def done(self) -> None:
        counter = self
        while counter is not None:
            with counter._lock:
                counter._pending -= 1
                if counter._pending > 0:
                    return
            if counter._on_zero is not None:
                counter._on_zero()
            counter = counter._parent


class ExpansionTask:
    """Expand one URL at one remaining depth.

    The task prunes, claims the URL, parses it, merges its word counts and
    forks one child per outgoing link. It is not complete until every child
    is complete; completion propagates to the parent's join. Workers never
    block waiting for children, so any pool size can run any tree.
    """

    def __init__(self, url: str, remaining_depth: int, context: CrawlContext, parent: Optional[JoinCounter] = None):
        self.url = url
        self.remaining_depth = remaining_depth
        self.context = context
        self._join = JoinCounter(1, parent=parent)

    @property
    def deadline_instant(self) -> float:
        return self.context.deadline_instant

    def should_prune(self) -> bool:
        ctx = self.context
        if ctx.aborted:
            logger.debug("Skipping (aborted) %s", self.url)
            return True
        if ctx.deadline_reached():
            logger.debug("Skipping (deadline) %s", self.url)
            return True
        if self.remaining_depth == 0:
            logger.debug("Skipping (max depth reached) %s", self.url)
            return True
        if ctx.is_ignored(self.url):
            logger.debug("Skipping (ignored) %s", self.url)
            return True
        return False

    def compute(self) -> List["ExpansionTask"]:
        """Do this task's own work and return the children to fork."""
        if self.should_prune():
            return []
        if not self.context.visited.try_claim(self.url):
            logger.debug("Skipping (visited) %s", self.url)
            return []

        result = self._parse()
        self.context.tally.merge(result.word_counts)
        logger.info(
            "Parsed %s -> %d distinct words, %d links (depth left %d)",
            self.url, len(result.word_counts), len(result.links), self.remaining_depth,
        )
        if not result.links:
            return []
        return [
            ExpansionTask(link, self.remaining_depth - 1, self.context, parent=self._join)
            for link in result.links
        ]

    def _parse(self) -> ParseResult:
        try:
            return self.context.parser.parse(self.url)
        except ParseError:
            raise
        except Exception as e:
            raise ParseError(self.url, e) from e

    def run(self) -> None:
        """Entry point on a worker thread. Always releases this task's own unit."""
        children: List[ExpansionTask] = []
        try:
            children = self.compute()
        except Exception as e:
            logger.error("Aborting crawl: %s", e, exc_info=True)
            self.context.abort(e)

        try:
            self._fork(children)
        finally:
            self._join.done()

    def _fork(self, children: List["ExpansionTask"]) -> None:
        if not children:
            return
        self._join.add(len(children))
        for i, child in enumerate(children):
            try:
                self.context.submit(child.run)
            except Exception as e:
                # unscheduled children still hold units in our join
                logger.error("Aborting crawl: could not schedule %s: %s", child.url, e)
                self.context.abort(e)
                for unscheduled in children[i:]:
                    unscheduled.release()
                return

    def release(self) -> None:
        """Complete this task without running it."""
        self._join.done()
