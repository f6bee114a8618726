import io
import random

import pytest

from pushswap.parsing import Strategy, parse_arguments
from pushswap.sorting import (
    complex_sort,
    estimate_sqrt,
    find_min,
    medium_sort,
    rotate_top,
    select_algorithm,
    simple_sort,
)
from pushswap.stack import Board, Stack, compute_disorder


def _board(values):
    return Board(values, out=io.StringIO())


def _shuffled(values, seed):
    items = list(values)
    random.Random(seed).shuffle(items)
    return items


def _replay(values, printed):
    replay = _board(values)
    for name in printed.split():
        getattr(replay, name)()
    return replay.a.values(), replay.b.values()


def _check_sorted(board, original):
    assert board.a.values() == sorted(original)
    assert board.b.values() == []
    assert _replay(original, board.out.getvalue()) == (sorted(original), [])


def test_estimate_sqrt_small_inputs():
    assert estimate_sqrt(0) == 0
    assert estimate_sqrt(-5) == 0
    assert estimate_sqrt(16) == 4


@pytest.mark.parametrize("n", range(1, 300))
def test_estimate_sqrt_is_nearest(n):
    root = estimate_sqrt(n)
    assert abs(root * root - n) <= abs((root + 1) ** 2 - n)
    assert abs(root * root - n) <= abs((root - 1) ** 2 - n)


def test_find_min_returns_first_position_of_minimum():
    assert find_min(Stack([3, 1, 2])) == 1
    assert find_min(Stack([-4, 8])) == 0


def test_rotate_top_uses_reverse_rotation_for_lower_half():
    board = _board([5, 4, 3, 2, 1])
    rotate_top(board, 4)
    assert board.a.top().value == 1
    assert board.counts["rra"] == 1
    assert board.counts["ra"] == 0


def test_rotate_top_uses_rotation_for_upper_half():
    board = _board([5, 4, 3, 2, 1])
    rotate_top(board, 2)
    assert board.a.top().value == 3
    assert board.counts["ra"] == 2
    assert board.counts["rra"] == 0


@pytest.mark.parametrize("seed", range(5))
def test_simple_sort_sorts(seed):
    original = _shuffled(range(-10, 15), seed)
    board = _board(original)
    simple_sort(board)
    _check_sorted(board, original)
    assert set(board.counts) <= {"ra", "rra", "pb", "pa"}
    assert board.counts["pb"] == len(original) == board.counts["pa"]


@pytest.mark.parametrize("size", [2, 3, 10, 20, 50, 100])
def test_medium_sort_sorts_parsed_input(size):
    original = _shuffled(range(1, size + 1), size)
    parsed = parse_arguments([" ".join(map(str, original))])
    board = _board(parsed.values)
    medium_sort(board, parsed.minimum, parsed.maximum)
    _check_sorted(board, original)
    assert set(board.counts) <= {"ra", "rb", "rrb", "pb", "pa"}


@pytest.mark.parametrize("seed", range(5))
def test_complex_sort_sorts_with_negatives(seed):
    original = _shuffled(range(-40, 60, 3), seed)
    board = _board(original)
    complex_sort(board)
    _check_sorted(board, original)
    assert set(board.counts) <= {"ra", "pb", "pa"}
    assert [node.index for node in board.a] == list(range(len(original)))


def test_select_forced_strategy_ignores_disorder():
    original = [2, 1, 3, 4, 5]
    board = _board(original)
    disorder = select_algorithm(board, Strategy.COMPLEX, 0, 5)
    assert disorder == compute_disorder(original)
    _check_sorted(board, original)
    assert set(board.counts) <= {"ra", "pb", "pa"}


def test_select_adaptive_low_disorder_uses_simple_sort():
    original = [1, 2, 3, 5, 4, 6, 7, 8]
    board = _board(original)
    disorder = select_algorithm(board, Strategy.ADAPTIVE, 0, 8)
    assert disorder < 0.2
    _check_sorted(board, original)
    assert set(board.counts) <= {"ra", "rra", "pb", "pa"}


def test_select_adaptive_reversed_input_uses_complex_sort():
    original = list(range(20, 0, -1))
    board = _board(original)
    disorder = select_algorithm(board, Strategy.ADAPTIVE, 0, 20)
    assert disorder == 1.0
    _check_sorted(board, original)
    assert set(board.counts) <= {"ra", "pb", "pa"}


def test_select_medium_strategy():
    original = _shuffled(range(1, 31), 7)
    board = _board(original)
    select_algorithm(board, Strategy.MEDIUM, 0, 30)
    _check_sorted(board, original)
    assert "rra" not in board.counts


def test_printed_operations_match_total():
    original = _shuffled(range(16), 3)
    board = _board(original)
    complex_sort(board)
    assert len(board.out.getvalue().split()) == board.total_ops()