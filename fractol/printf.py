"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any

_UINT32_MASK = 0xFFFF_FFFF
_UINT64_MASK = 0xFFFF_FFFF_FFFF_FFFF


def _to_int32(value: Any) -> int:
    number = operator.index(value) & _UINT32_MASK
    return number - (1 << 32) if number & 0x8000_0000 else number


def _to_uint32(value: Any) -> int:
    return operator.index(value) & _UINT32_MASK


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _format_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address &= _UINT64_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": lambda value: str(_to_int32(value)),
    "i": lambda value: str(_to_int32(value)),
    "u": lambda value: str(_to_uint32(value)),
    "x": lambda value: format(_to_uint32(value), "x"),
    "X": lambda value: format(_to_uint32(value), "X"),
}


def _next_arg(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    Integers are taken as 32-bit values the way the conversions demand;
    unknown conversions produce nothing and consume no argument, and a
    lone trailing ``%`` ends the output.
    """
    values = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_next_arg(values)))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output; return the number of characters."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def num_len(n: int) -> int:
    """Number of characters in the decimal form of ``n``, minus sign included."""
    return len(str(operator.index(n)))