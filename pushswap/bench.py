"""The benchmark report printed after sorting when ``--bench`` is given."""

from __future__ import annotations

import sys
from typing import TextIO

from pushswap.formatting import format_message
from pushswap.parsing import Strategy
from pushswap.stack import Board

_LABELS = {
    Strategy.ADAPTIVE: "Adaptive | O(n√n)",
    Strategy.SIMPLE: "Simple | O(n²)",
    Strategy.MEDIUM: "Medium | O(n√n)",
    Strategy.COMPLEX: "Complex | O(n log n)",
}


def strategy_label(strategy: int) -> str | None:
    """Return the report label for a strategy, or None for an unknown one."""
    return _LABELS.get(strategy)


def format_bench(board: Board, strategy: int, disorder: float) -> str:
    """Build the benchmark report for the operations applied to ``board``."""
    counts = board.counts
    lines = [
        format_message("[bench] disorder: %D%%\n", disorder * 100),
        format_message("[bench] strategy: %s\n", strategy_label(strategy)),
        format_message("[bench] total_ops: %d\n", board.total_ops()),
        format_message(
            "[bench] sa: %d sb: %d ss: %d pa: %d pb: %d\n",
            counts["sa"],
            counts["sb"],
            counts["ss"],
            counts["pa"],
            counts["pb"],
        ),
        format_message(
            "[bench] ra: %d rb: %d rr: %d rra: %d rrb: %d rrr: %d\n",
            counts["ra"],
            counts["rb"],
            counts["rr"],
            counts["rra"],
            counts["rrb"],
            counts["rrr"],
        ),
    ]
    return "".join(lines)


def print_bench(
    board: Board, strategy: int, disorder: float, out: TextIO | None = None
) -> None:
    """Write the benchmark report to ``out``, standard error by default."""
    stream = out if out is not None else sys.stderr
    stream.write(format_bench(board, strategy, disorder))