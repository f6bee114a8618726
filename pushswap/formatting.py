"""A small printf-style formatter with the conversions used for program output."""

from __future__ import annotations

import math
import sys
from typing import Any, Callable, Iterator, TextIO

_UINT32_MASK = 0xFFFFFFFF
_UINTPTR_MASK = (1 << 64) - 1
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class FormatError(ValueError):
    """Raised for an unknown conversion, a dangling '%' or a missing argument."""


def _to_int32(value: int) -> int:
    value = int(value) & _UINT32_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _to_uint32(value: int) -> int:
    return int(value) & _UINT32_MASK


def count_digits(n: int, base: int) -> int:
    """Return how many digits the magnitude of ``n`` takes in ``base``."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    n = abs(n)
    digits = 1
    while n >= base:
        n //= base
        digits += 1
    return digits


def format_fixed(value: float) -> str:
    """Render a number with two truncated decimals.

    The whole part and the hundredths are each truncated toward zero; a
    hundredths value below ten gets a leading zero.
    """
    value = float(value)
    if not math.isfinite(value):
        raise FormatError(f"cannot format {value!r} as a fixed-point number")
    whole = int(value)
    hundredths = int((value - whole) * 100)
    fraction = f"0{hundredths}" if hundredths < 10 else str(hundredths)
    return f"{whole}.{fraction}"


def _to_base(n: int, base: int, upper: bool) -> str:
    if n == 0:
        return "0"
    chars = []
    while n:
        n, remainder = divmod(n, base)
        chars.append(_DIGITS[remainder])
    text = "".join(reversed(chars))
    return text.upper() if upper else text


def format_hex(value: int, upper: bool = False) -> str:
    """Render ``value`` as an unsigned 32-bit hexadecimal number."""
    return _to_base(_to_uint32(value), 16, upper)


def format_pointer(address: int | None) -> str:
    """Render an address as ``0x`` plus lowercase hex, or ``(nil)`` for null."""
    if not address:
        return "(nil)"
    return "0x" + _to_base(int(address) & _UINTPTR_MASK, 16, False)


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise FormatError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(int(arg) & 0xFF)


def _format_string(arg: Any) -> str:
    return "(null)" if arg is None else str(arg)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": format_pointer,
    "d": lambda arg: str(_to_int32(arg)),
    "i": lambda arg: str(_to_int32(arg)),
    "u": lambda arg: str(_to_uint32(arg)),
    "x": lambda arg: format_hex(arg, False),
    "X": lambda arg: format_hex(arg, True),
    "D": format_fixed,
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{spec}") from None


def format_message(template: str, *args: Any) -> str:
    """Expand ``%c %s %p %d %i %u %x %X %D %%`` in ``template`` with ``args``."""
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("template ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            raise FormatError(f"unknown conversion %{spec}")
        pieces.append(convert(_next_arg(remaining, spec)))
    return "".join(pieces)


def write_message(stream: TextIO | None, template: str, *args: Any) -> int:
    """Format the message, write it to ``stream`` and return its length."""
    text = format_message(template, *args)
    target = stream if stream is not None else sys.stdout
    target.write(text)
    return len(text)