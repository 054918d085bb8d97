"""Coordinator that partitions log files across worker threads."""

from pathlib import Path
from typing import Callable, List, Optional, Union

from dedup_set import DedupSet, ShardedDedupSet
from ipcount_types import (
    ConfigurationError,
    RunResult,
    RunState,
    WorkerFailedError,
    WorkerStartError,
)
from ipcount_worker import LogWorker
from log_source import LogSource
from partitioner import partition_all


class IPCountCoordinator:
    """Runs a fixed pool of workers over a log directory and counts distinct IPs."""

    def __init__(self, num_shards: int = 1, worker_factory: Callable = LogWorker):
        if num_shards < 1:
            raise ConfigurationError(f"number of shards must be > 0, got {num_shards}")
        self.num_shards = num_shards
        self.worker_factory = worker_factory

        self.state = RunState.IDLE
        self.workers: List[LogWorker] = []
        self.dedup: Optional[Union[DedupSet, ShardedDedupSet]] = None

    def run(self, directory: Union[str, Path], worker_count: int) -> RunResult:
        """Count distinct IPs in directory using worker_count threads."""
        self.state = RunState.IDLE
        self.workers = []

        if worker_count <= 0:
            self.state = RunState.FAILED
            raise ConfigurationError(
                f"number of workers must be > 0, got {worker_count}"
            )

        print(f"Coordinator: Directory with files to be parsed is {directory}")
        print(f"Coordinator: Number of workers is {worker_count}")

        # Scan
        self.state = RunState.SCANNING
        source = LogSource(directory)
        try:
            total_files = source.count()
        except ConfigurationError:
            self.state = RunState.FAILED
            raise
        print(f"Coordinator: Number of files that have to be read is {total_files}")

        # Dispatch
        self.state = RunState.DISPATCHING
        self.dedup = self._make_dedup()
        for worker_id, partition in enumerate(partition_all(worker_count, total_files)):
            print(f"Coordinator: Creating worker {worker_id} for {partition}")
            try:
                worker = self.worker_factory(worker_id, partition, source, self.dedup)
                worker.start()
            except Exception as exc:
                # Workers already running are joined before the error surfaces.
                self.state = RunState.FAILED
                self._join_all()
                raise WorkerStartError(
                    f"cannot start worker {worker_id}: {exc}"
                ) from exc
            self.workers.append(worker)

        # The count may only be read once every worker has been joined.
        self.state = RunState.AWAITING_WORKERS
        self._join_all()

        failed = [w for w in self.workers if w.failure is not None]
        if failed:
            self.state = RunState.FAILED
            raise WorkerFailedError(
                f"worker {failed[0].worker_id} failed: {failed[0].failure!r}"
            ) from failed[0].failure

        result = RunResult(
            distinct_count=self.dedup.count,
            total_files=total_files,
            worker_count=worker_count,
            workers=[w.stats for w in self.workers],
        )
        self.state = RunState.DONE

        print(
            f"Coordinator: Read {result.files_read} of {total_files} files, "
            f"{result.lines_read} lines, {len(result.skipped)} skipped"
        )
        return result

    def _make_dedup(self) -> Union[DedupSet, ShardedDedupSet]:
        if self.num_shards == 1:
            return DedupSet()
        return ShardedDedupSet(self.num_shards)

    def _join_all(self):
        """Block until every started worker has terminated."""
        for worker in self.workers:
            worker.join()
