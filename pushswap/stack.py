"""The two stacks of the puzzle and the operations that move numbers between them."""

from __future__ import annotations

import sys
from collections import Counter, deque
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Iterator, TextIO


@dataclass
class Node:
    """One number on a stack, with its rank among all numbers once assigned."""

    value: int
    index: int = 0


class Stack:
    """A stack of numbers whose first element is the top."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._nodes: deque[Node] = deque(Node(value) for value in values)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def values(self) -> list[int]:
        """Return the numbers from top to bottom."""
        return [node.value for node in self._nodes]

    def top(self) -> Node | None:
        """Return the top node, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    def add_back(self, value: int) -> None:
        """Append a number at the bottom."""
        self._nodes.append(Node(value))

    def swap(self) -> None:
        """Exchange the two top elements; does nothing with fewer than two."""
        if len(self._nodes) < 2:
            return
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        if len(self._nodes) >= 2:
            self._nodes.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        if len(self._nodes) >= 2:
            self._nodes.rotate(1)

    def push_onto(self, other: Stack) -> None:
        """Move the top element of this stack onto ``other``; nothing if empty."""
        if self._nodes:
            other._nodes.appendleft(self._nodes.popleft())

    def dump(self, out: TextIO | None = None) -> None:
        """Write each node's value and index, one per line."""
        stream = out if out is not None else sys.stdout
        for node in self._nodes:
            stream.write(f"value: {node.value} | index: {node.index}\n")


# Operations recorded against stack a; sb, rb and rrb are tallied on b and so
# are left out of the total.
_COUNTED_IN_TOTAL = ("sa", "ss", "pa", "pb", "ra", "rr", "rra", "rrr")


class Board:
    """Stacks a and b, printing and counting every named operation applied."""

    def __init__(self, values: Iterable[int] = (), out: TextIO | None = None) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.out = out
        self.counts: Counter[str] = Counter()

    def _record(self, name: str) -> None:
        stream = self.out if self.out is not None else sys.stdout
        stream.write(f"{name}\n")
        self.counts[name] += 1

    def total_ops(self) -> int:
        """Return the operation total as tallied on stack a."""
        return sum(self.counts[name] for name in _COUNTED_IN_TOTAL)

    def sa(self) -> None:
        self.a.swap()
        self._record("sa")

    def sb(self) -> None:
        self.b.swap()
        self._record("sb")

    def ss(self) -> None:
        self.a.swap()
        self.b.swap()
        self._record("ss")

    def pa(self) -> None:
        self.b.push_onto(self.a)
        self._record("pa")

    def pb(self) -> None:
        self.a.push_onto(self.b)
        self._record("pb")

    def ra(self) -> None:
        self.a.rotate()
        self._record("ra")

    def rb(self) -> None:
        self.b.rotate()
        self._record("rb")

    def rr(self) -> None:
        self.a.rotate()
        self.b.rotate()
        self._record("rr")

    def rra(self) -> None:
        self.a.reverse_rotate()
        self._record("rra")

    def rrb(self) -> None:
        self.b.reverse_rotate()
        self._record("rrb")

    def rrr(self) -> None:
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._record("rrr")


def compute_disorder(values: Iterable[int]) -> float:
    """Return the share of ordered pairs that are inverted, 0 when there are none."""
    pairs = list(combinations(values, 2))
    if not pairs:
        return 0.0
    mistakes = sum(1 for first, second in pairs if first > second)
    return mistakes / len(pairs)


def is_sorted(values: Iterable[int]) -> bool:
    """Return True when the numbers never decrease from top to bottom."""
    items = list(values)
    return all(first <= second for first, second in zip(items, items[1:]))


def has_duplicates(values: Iterable[int]) -> bool:
    """Return True when any number appears more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False