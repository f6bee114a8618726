"""Reading the numbers and option flags given on the command line."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable

from pushswap.stack import has_duplicates

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = frozenset("0123456789")


class ParseError(ValueError):
    """Raised when the arguments cannot form a valid stack."""


class Strategy(enum.IntEnum):
    """Which sorting algorithm to run."""

    ADAPTIVE = 0
    SIMPLE = 1
    MEDIUM = 2
    COMPLEX = 3


_STRATEGY_FLAGS = {
    "--simple": Strategy.SIMPLE,
    "--medium": Strategy.MEDIUM,
    "--complex": Strategy.COMPLEX,
}
_ADAPTIVE_FLAG = "--adaptive"
_BENCH_FLAG = "--bench"


@dataclass
class ParsedInput:
    """The numbers for stack a together with the options that were given."""

    values: list[int] = field(default_factory=list)
    strategy: Strategy = Strategy.ADAPTIVE
    bench: bool = False
    minimum: int = 0
    maximum: int = 0


def split_words(text: str) -> list[str]:
    """Split on spaces only, dropping empty pieces."""
    return [word for word in text.split(" ") if word]


def is_valid_number(text: str | None) -> bool:
    """Return True for an optional sign followed by one or more ASCII digits."""
    if not text:
        return False
    digits = text[1:] if text[0] in "+-" else text
    return bool(digits) and all(char in _DIGITS for char in digits)


def strict_atoi(text: str) -> int:
    """Convert a validated decimal string, rejecting values outside 32-bit range."""
    if not is_valid_number(text):
        raise ParseError(f"not a number: {text!r}")
    number = int(text)
    if not INT_MIN <= number <= INT_MAX:
        raise ParseError(f"out of range: {text!r}")
    return number


def parse_arguments(args: Iterable[str]) -> ParsedInput:
    """Parse the arguments after the program name.

    Each argument may hold several space-separated numbers or flags. The
    running minimum and maximum start from zero, as they always have.
    """
    parsed = ParsedInput()
    for argument in args:
        words = split_words(argument)
        if not words:
            raise ParseError("empty argument")
        for word in words:
            if word in _STRATEGY_FLAGS:
                parsed.strategy = _STRATEGY_FLAGS[word]
                continue
            if word == _ADAPTIVE_FLAG:
                continue
            if word == _BENCH_FLAG:
                parsed.bench = True
                continue
            value = strict_atoi(word)
            parsed.values.append(value)
            parsed.minimum = min(parsed.minimum, value)
            parsed.maximum = max(parsed.maximum, value)
        if has_duplicates(parsed.values):
            raise ParseError("duplicate number")
    return parsed