"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from evenodd.args import ArgumentError, Mode, check_args
from evenodd.config import ConfigError, parse_file
from evenodd.runner import format_list, run_program

_PROG = "evenodd"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        mode = check_args(args)
    except ArgumentError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if mode is Mode.HELP:
        print(f"Usage: {_PROG} path/to/file.txt")
        return 0

    try:
        config = parse_file(args[1])
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(
        f"NUM_PER_THREAD: {config.numbers_per_thread}\n"
        f"THREAD_NUM: {config.thread_num}"
    )
    result = run_program(config)
    sys.stdout.write("ODD NUMBERS:\n")
    sys.stdout.write(format_list(result.odd))
    sys.stdout.write("EVEN NUMBERS:\n")
    sys.stdout.write(format_list(result.even))
    return 0


if __name__ == "__main__":
    sys.exit(main())