import threading
from typing import Hashable


class StripedLocks:
    """A fixed pool of locks, one per stripe, selected by key hash.

    Keys on different stripes never contend; keys on the same stripe share a lock.
    """

    def __init__(self, stripes: int = 64):
        if stripes < 1:
            raise ValueError("stripes must be >= 1")
        self._locks = [threading.Lock() for _ in range(stripes)]

    def __len__(self) -> int:
        return len(self._locks)

    def index(self, key: Hashable) -> int:
        return hash(key) % len(self._locks)

    def lock_at(self, index: int) -> threading.Lock:
        return self._locks[index]
