"""Count distinct IPs in a small generated log directory."""

import random
import tempfile
from pathlib import Path

from ipcount_coordinator import IPCountCoordinator


def write_logs(directory: Path, num_files: int, lines_per_file: int, num_clients: int):
    """Write access1.log .. accessN.log with IPs drawn from num_clients addresses."""
    clients = [f"10.0.{i // 256}.{i % 256}" for i in range(num_clients)]
    for i in range(1, num_files + 1):
        with open(directory / f"access{i}.log", "w") as f:
            for _ in range(lines_per_file):
                ip = random.choice(clients)
                f.write(f'{ip} - - "GET /index.html HTTP/1.1" 200 512\n')


def run_example():
    """Run the same directory with different worker counts and a missing file."""
    with tempfile.TemporaryDirectory() as tmp:
        directory = Path(tmp)
        write_logs(directory, num_files=7, lines_per_file=200, num_clients=50)

        for workers in (1, 3, 10):
            result = IPCountCoordinator().run(directory, workers)
            print(f"\n=== {workers} workers: {result.distinct_count} distinct IPs ===\n")

        # access4.log disappears; its number is now past the file count too
        (directory / "access4.log").unlink()
        result = IPCountCoordinator(num_shards=4).run(directory, 3)
        print(f"\n=== After removing access4.log: {result.distinct_count} distinct IPs ===")
        for error in result.skipped:
            print(f"Skipped: {error}")


if __name__ == "__main__":
    run_example()
