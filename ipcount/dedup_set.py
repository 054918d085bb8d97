"""Thread-safe set of seen IP tokens with atomic check-and-insert."""

import threading
from typing import Dict, List

PRESENT = object()


class DedupSet:
    """A lock-guarded map of seen keys plus its distinct counter."""

    def __init__(self):
        self._lock = threading.Lock()
        self._seen: Dict[str, object] = {}
        self._count = 0

    def check_and_insert(self, key: str) -> bool:
        """Insert key if absent; return True only for the first insertion."""
        # Membership test, insert and increment must be one critical section.
        with self._lock:
            if key in self._seen:
                return False
            self._seen[key] = PRESENT
            self._count += 1
            return True

    def exists(self, key: str) -> bool:
        with self._lock:
            return key in self._seen

    @property
    def count(self) -> int:
        """Number of distinct keys inserted so far."""
        with self._lock:
            return self._count

    def __len__(self):
        return self.count

    def __str__(self):
        return f"DedupSet(count={self.count})"


class ShardedDedupSet:
    """DedupSet split into independently locked shards by key hash."""

    def __init__(self, num_shards: int = 16):
        if num_shards < 1:
            raise ValueError(f"num_shards must be >= 1, got {num_shards}")
        self.num_shards = num_shards
        self.shards: List[DedupSet] = [DedupSet() for _ in range(num_shards)]

    def _shard(self, key: str) -> DedupSet:
        return self.shards[hash(key) % self.num_shards]

    def check_and_insert(self, key: str) -> bool:
        return self._shard(key).check_and_insert(key)

    def exists(self, key: str) -> bool:
        return self._shard(key).exists(key)

    @property
    def count(self) -> int:
        """Sum of shard counters; only exact once writers have stopped."""
        return sum(shard.count for shard in self.shards)

    def __len__(self):
        return self.count

    def __str__(self):
        return f"ShardedDedupSet(shards={self.num_shards}, count={self.count})"
