"""Worker thread that reads one partition of log files."""

import threading
from typing import Optional, Union

from dedup_set import DedupSet, ShardedDedupSet
from ipcount_types import FileError, Partition, WorkerStats
from line_tokenizer import extract_ip
from log_source import LogSource


class LogWorker(threading.Thread):
    """Reads every file in its partition and feeds IPs into the shared set."""

    def __init__(
        self,
        worker_id: int,
        partition: Partition,
        source: LogSource,
        dedup: Union[DedupSet, ShardedDedupSet],
    ):
        super().__init__(name=f"ipcount-worker-{worker_id}")
        self.worker_id = worker_id
        self.partition = partition
        self.source = source
        self.dedup = dedup

        # Statistics
        self.stats = WorkerStats(worker_id, partition)
        self.failure: Optional[BaseException] = None

    def run(self):
        """Process files in ascending index order until the partition is exhausted."""
        print(
            f"Worker {self.worker_id}: Starting {self.partition} "
            f"with {len(self.partition)} files"
        )
        try:
            for file_index in self.partition:
                self.process_file(file_index)
        except Exception as exc:
            # Re-raised by the coordinator after the join barrier.
            self.failure = exc
            print(f"Worker {self.worker_id}: FAILED with {exc!r}")
            return

        print(
            f"Worker {self.worker_id}: Completed {self.partition}, "
            f"{self.stats.new_ips} new IPs"
        )

    def process_file(self, file_index: int):
        """Read one log file; a missing or unreadable file is recorded and skipped."""
        path = self.source.path_for(file_index)

        try:
            handle = open(path, "r", encoding="utf-8", errors="replace")
        except OSError as exc:
            self._skip(FileError(file_index, path, exc.strerror or str(exc)))
            return

        lines = 0
        with handle:
            try:
                for line in handle:
                    lines += 1
                    ip = extract_ip(line)
                    if ip is not None and self.dedup.check_and_insert(ip):
                        self.stats.new_ips += 1
            except OSError as exc:
                self.stats.lines_read += lines
                self._skip(
                    FileError(
                        file_index,
                        path,
                        f"read failed after {lines} lines: {exc.strerror or exc}",
                    )
                )
                return

        self.stats.files_read += 1
        self.stats.lines_read += lines
        print(
            f"Worker {self.worker_id}: Read file {file_index} ({path}), {lines} lines"
        )

    def _skip(self, error: FileError):
        self.stats.errors.append(error)
        print(f"Worker {self.worker_id}: Error: skipped {error}")
