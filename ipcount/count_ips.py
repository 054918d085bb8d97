"""Command-line entry point: count distinct IPs in a log directory."""

import argparse
import sys
from typing import List, Optional

from ipcount_coordinator import IPCountCoordinator
from ipcount_types import IPCountError


def positive_int(text: str) -> int:
    """argparse type for counts that must be > 0."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="count-ips",
        description="Count distinct client IPs across access1.log .. accessN.log.",
    )
    parser.add_argument("directory", help="directory holding the access logs")
    parser.add_argument(
        "workers", type=positive_int, help="number of worker threads (> 0)"
    )
    parser.add_argument(
        "--shards",
        type=positive_int,
        default=1,
        help="lock shards for the shared IP set (default: 1, a single lock)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    coordinator = IPCountCoordinator(num_shards=args.shards)
    try:
        result = coordinator.run(args.directory, args.workers)
    except IPCountError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for error in result.skipped:
        print(f"Skipped: {error}")
    print(f"\nTotal number of distinct IP addresses: {result.distinct_count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
