"""Word-count aggregation: concurrent merge and deterministic top-N ranking."""
from typing import Dict, Mapping

from wordcrawl.utils.striped_locks import StripedLocks


def _rank_key(item):
    word, count = item
    return (-count, word)


def top_n(counts: Mapping[str, int], n: int) -> Dict[str, int]:
    """Return the `n` most frequent words as an insertion-ordered dict.

    Entries are ordered by count descending, then by word ascending
    (plain string comparison), so ties always rank the same way.
    `n` larger than the number of distinct words returns every entry;
    `n == 0` returns an empty dict.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if n == 0 or not counts:
        return {}
    ranked = sorted(counts.items(), key=_rank_key)
    return dict(ranked[:n])


class WordTally:
    """Thread-safe word -> count mapping for one crawl.

    Merges are commutative and associative, so the final tally does not
    depend on the order in which pages are processed. Words are spread over
    lock stripes; concurrent updates to different words rarely contend.
    """

    def __init__(self, stripes: int = 64):
        self._locks = StripedLocks(stripes)
        self._buckets: list[Dict[str, int]] = [{} for _ in range(len(self._locks))]

    def merge_add(self, word: str, delta: int) -> None:
        if delta < 0:
            raise ValueError(f"count for {word!r} must be >= 0, got {delta}")
        i = self._locks.index(word)
        with self._locks.lock_at(i):
            bucket = self._buckets[i]
            bucket[word] = bucket.get(word, 0) + delta

    def merge(self, counts: Mapping[str, int]) -> None:
        """Merge-add every entry of `counts`."""
        for word, delta in counts.items():
            self.merge_add(word, delta)

    def get(self, word: str) -> int:
        i = self._locks.index(word)
        with self._locks.lock_at(i):
            return self._buckets[i].get(word, 0)

    def snapshot(self) -> Dict[str, int]:
        merged: Dict[str, int] = {}
        for i, bucket in enumerate(self._buckets):
            with self._locks.lock_at(i):
                merged.update(bucket)
        return merged

    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        total = 0
        for i, bucket in enumerate(self._buckets):
            with self._locks.lock_at(i):
                total += len(bucket)
        return total

    def top_n(self, n: int) -> Dict[str, int]:
        return top_n(self.snapshot(), n)
