"""Static assignment of log files to workers."""

from typing import List

from ipcount_types import Partition


def range_for(worker_index: int, worker_count: int, total_files: int) -> Partition:
    """Contiguous block of file indices for one worker.

    Every worker gets total_files // worker_count files; the last worker
    also takes the remainder, so it can be noticeably larger than the rest.
    With more workers than files only the last worker gets anything.
    """
    if worker_count < 1:
        raise ValueError(f"worker_count must be >= 1, got {worker_count}")
    if not 0 <= worker_index < worker_count:
        raise ValueError(
            f"worker_index {worker_index} out of range for {worker_count} workers"
        )
    if total_files < 0:
        raise ValueError(f"total_files must be >= 0, got {total_files}")

    base = total_files // worker_count
    start = worker_index * base + 1
    if worker_index == worker_count - 1:
        return Partition(start, total_files + 1)
    return Partition(start, start + base)


def partition_all(worker_count: int, total_files: int) -> List[Partition]:
    """Partitions for every worker, in worker order."""
    return [range_for(i, worker_count, total_files) for i in range(worker_count)]
