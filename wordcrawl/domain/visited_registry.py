from typing import Set

from wordcrawl.utils.striped_locks import StripedLocks


class VisitedRegistry:
    """
    Tracks which URLs have been claimed during a single crawl.

    A claim is an atomic insert-if-absent: exactly one caller per distinct URL
    wins, regardless of thread or ordering. URLs are spread across lock
    stripes so claims for unrelated URLs do not serialize behind one lock.
    The registry only grows; it is created per crawl and discarded afterwards.
    """

    def __init__(self, stripes: int = 64):
        self._locks = StripedLocks(stripes)
        self._buckets: list[Set[str]] = [set() for _ in range(len(self._locks))]

    def try_claim(self, url: str) -> bool:
        """Claim `url`. Return True only for the first caller."""
        i = self._locks.index(url)
        with self._locks.lock_at(i):
            bucket = self._buckets[i]
            if url in bucket:
                return False
            bucket.add(url)
            return True

    def is_claimed(self, url: str) -> bool:
        i = self._locks.index(url)
        with self._locks.lock_at(i):
            return url in self._buckets[i]

    def size(self) -> int:
        """Number of distinct claimed URLs."""
        total = 0
        for i, bucket in enumerate(self._buckets):
            with self._locks.lock_at(i):
                total += len(bucket)
        return total

    def __len__(self) -> int:
        return self.size()

    def urls(self) -> Set[str]:
        """Snapshot of claimed URLs."""
        claimed: Set[str] = set()
        for i, bucket in enumerate(self._buckets):
            with self._locks.lock_at(i):
                claimed.update(bucket)
        return claimed
