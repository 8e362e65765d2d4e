"""Small string and character helpers used to parse command-line input."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _code(c: int | str) -> int:
    """Return the character code of ``c``, given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    return c


def _skip_whitespace(text: str, pos: int = 0) -> int:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _read_sign(text: str, pos: int) -> tuple[int, int]:
    """Read an optional sign at ``pos``; return ``(sign, new_pos)``."""
    if pos < len(text) and text[pos] in "+-":
        return (-1 if text[pos] == "-" else 1), pos + 1
    return 1, pos


def _read_digits(text: str, pos: int) -> tuple[str, int]:
    start = pos
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    return text[start:pos], pos


def atof(text: str) -> float:
    """Parse a decimal number with an optional sign and fractional part.

    Leading whitespace is skipped; parsing stops at the first character
    that does not fit. Text with no digits yields 0.0.
    """
    pos = _skip_whitespace(text)
    sign, pos = _read_sign(text, pos)
    whole, pos = _read_digits(text, pos)
    value = 0.0
    for digit in whole:
        value = value * 10 + int(digit)
    if pos < len(text) and text[pos] == ".":
        fraction, pos = _read_digits(text, pos + 1)
        factor = 0.1
        decimal = 0.0
        for digit in fraction:
            decimal += int(digit) * factor
            factor *= 0.1
        value += decimal
    return sign * value


def atoi(text: str) -> int:
    """Parse a leading integer, skipping whitespace and one optional sign."""
    if not text:
        return 0
    pos = _skip_whitespace(text)
    sign, pos = _read_sign(text, pos)
    digits, _ = _read_digits(text, pos)
    value = 0
    for digit in digits:
        value = value * 10 + int(digit)
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove any characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end yields an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def isdigit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(c) <= 57


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(c) < 127


def toupper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; other values pass through unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def tolower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; other values pass through unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code