"""Core data structures for the distinct-IP counter."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List


class IPCountError(Exception):
    """Base class for fatal errors that abort a run."""


class ConfigurationError(IPCountError):
    """Bad worker count or unreadable log directory."""


class WorkerStartError(IPCountError):
    """A worker thread could not be started."""


class WorkerFailedError(IPCountError):
    """A worker died with an unexpected exception."""


class RunState(Enum):
    """Lifecycle of a coordinator run."""

    IDLE = "idle"
    SCANNING = "scanning"
    DISPATCHING = "dispatching"
    AWAITING_WORKERS = "awaiting_workers"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class Partition:
    """Half-open range [start, end) of file indices owned by one worker."""

    start: int
    end: int

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end))

    def __len__(self) -> int:
        return max(0, self.end - self.start)

    def __contains__(self, file_index: int) -> bool:
        return self.start <= file_index < self.end

    def __str__(self):
        return f"Partition[{self.start}, {self.end})"


@dataclass
class FileError:
    """A log file that was skipped or only partially read."""

    file_index: int
    path: Path
    reason: str

    def __str__(self):
        return f"{self.path} (file {self.file_index}): {self.reason}"


@dataclass
class WorkerStats:
    """Counters a worker keeps about its own partition."""

    worker_id: int
    partition: Partition
    files_read: int = 0
    lines_read: int = 0
    new_ips: int = 0
    errors: List[FileError] = field(default_factory=list)


@dataclass
class RunResult:
    """Outcome of a completed run."""

    distinct_count: int
    total_files: int
    worker_count: int
    workers: List[WorkerStats] = field(default_factory=list)

    @property
    def files_read(self) -> int:
        return sum(w.files_read for w in self.workers)

    @property
    def lines_read(self) -> int:
        return sum(w.lines_read for w in self.workers)

    @property
    def skipped(self) -> List[FileError]:
        return [error for w in self.workers for error in w.errors]

    def __str__(self):
        return (
            f"RunResult(distinct={self.distinct_count}, files={self.files_read}/"
            f"{self.total_files}, workers={self.worker_count})"
        )
