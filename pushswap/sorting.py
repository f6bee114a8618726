"""Sorting strategies expressed as sequences of stack operations."""

from __future__ import annotations

import math

from pushswap.parsing import Strategy
from pushswap.stack import Board, Stack, compute_disorder


def estimate_sqrt(n: int) -> int:
    """Return the integer nearest the square root of n, rounding ties down."""
    if n < 1:
        return 0
    low = math.isqrt(n)
    high = low + 1
    return low if n - low * low <= high * high - n else high


def find_min(stack: Stack) -> int:
    """Return the position of the first smallest value from the top."""
    values = stack.values()
    return values.index(min(values))


def rotate_top(board: Board, index: int) -> None:
    """Bring the element at ``index`` of stack a to the top the shorter way."""
    size = len(board.a)
    if index <= size // 2:
        for _ in range(index):
            board.ra()
    else:
        for _ in range(size - index):
            board.rra()


def simple_sort(board: Board) -> None:
    """Selection sort: move each minimum to b, then bring everything back."""
    while len(board.a):
        rotate_top(board, find_min(board.a))
        board.pb()
    while len(board.b):
        board.pa()


def _iterate_chunk(board: Board, low: int, high: int) -> None:
    remaining = len(board.a)
    wanted = high - low
    added = 0
    while remaining >= 0 and added < wanted and len(board.a):
        if low <= board.a.top().value < high:
            board.pb()
            added += 1
        else:
            board.ra()
        remaining -= 1


def _sort_chunks(board: Board) -> None:
    distance = 0
    while len(board.b):
        values = board.b.values()
        highest = max(values)
        if values[0] != highest:
            distance = values.index(highest)
        if distance < len(board.b) // 2:
            while board.b.top().value != highest:
                board.rb()
        else:
            while board.b.top().value != highest:
                board.rrb()
        board.pa()


def medium_sort(board: Board, minimum: int, maximum: int) -> None:
    """Push value ranges to b chunk by chunk, then pull maxima back to a."""
    chunks = estimate_sqrt(len(board.a))
    span = int((maximum - minimum) / chunks)
    chunk = 0
    while chunk <= chunks and len(board.a):
        low = minimum + chunk * span
        _iterate_chunk(board, low, low + span)
        chunk += 1
    _sort_chunks(board)


def _assign_index(stack: Stack) -> None:
    values = stack.values()
    for node in stack:
        node.index = sum(1 for value in values if value < node.value)


def complex_sort(board: Board) -> None:
    """Binary radix sort on the rank of each value."""
    _assign_index(board.a)
    max_bits = (len(board.a) - 1).bit_length() if len(board.a) > 0 else 0
    for bit in range(max_bits):
        for _ in range(len(board.a)):
            if (board.a.top().index >> bit) & 1 == 0:
                board.pb()
            else:
                board.ra()
        while len(board.b):
            board.pa()


def select_algorithm(
    board: Board, strategy: Strategy, minimum: int, maximum: int
) -> float:
    """Sort with the chosen strategy, or by disorder when adaptive; return the disorder."""
    disorder = compute_disorder(board.a.values())
    if strategy == Strategy.SIMPLE:
        simple_sort(board)
    elif strategy == Strategy.MEDIUM:
        medium_sort(board, minimum, maximum)
    elif strategy == Strategy.COMPLEX:
        complex_sort(board)
    elif disorder < 0.2:
        simple_sort(board)
    elif disorder < 0.5:
        medium_sort(board, minimum, maximum)
    else:
        complex_sort(board)
    return disorder