"""Command-line entry point: read numbers, sort them, print the operations."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence, TextIO

from pushswap.bench import print_bench
from pushswap.parsing import ParseError, parse_arguments
from pushswap.sorting import select_algorithm
from pushswap.stack import Board, is_sorted


def _fail(err: TextIO) -> int:
    err.write("Error\n")
    return 1


def run(
    args: Iterable[str], out: TextIO | None = None, err: TextIO | None = None
) -> int:
    """Sort the numbers given in ``args`` and return the exit status."""
    out_stream = out if out is not None else sys.stdout
    err_stream = err if err is not None else sys.stderr
    arguments = list(args)
    if not arguments:
        return _fail(err_stream)
    try:
        parsed = parse_arguments(arguments)
    except ParseError:
        return _fail(err_stream)
    if is_sorted(parsed.values):
        return 0
    board = Board(parsed.values, out_stream)
    disorder = select_algorithm(
        board, parsed.strategy, parsed.minimum, parsed.maximum
    )
    if parsed.bench:
        print_bench(board, parsed.strategy, disorder, err_stream)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on ``argv`` (the command-line arguments by default)."""
    if argv is None:
        argv = sys.argv[1:]
    return run(argv)


if __name__ == "__main__":
    sys.exit(main())