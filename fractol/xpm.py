"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

from fractol.colors import text_to_rgb
from fractol.image import Image
from fractol.libft import atoi

TRANSPARENT = 0xFF000000
"""Pixel value stored for the XPM color "None"."""

_WORD_SEPARATORS = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def find(text: str, needle: str) -> int | None:
    """Return the index of the first occurrence of ``needle`` in ``text``, or None."""
    index = text.find(needle)
    return None if index < 0 else index


def find_outside_quotes(text: str, needle: str) -> int | None:
    """Like :func:`find`, but skip matches that start inside a double-quoted string."""
    inside = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return None


def str_to_wordtab(line: str) -> list[str]:
    """Split ``line`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(line) if word]


def _blank(text: str, start: int, count: int) -> str:
    stop = min(len(text), start + max(count, 0))
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C and C++ style comments outside quoted strings with spaces.

    The text keeps its length, so positions within it do not move.
    """
    while (begin := find_outside_quotes(text, "/*")) is not None:
        end = find(text[begin + 2:], "*/")
        text = _blank(text, begin, (-1 if end is None else end) + 4)
    while (begin := find_outside_quotes(text, "//")) is not None:
        end = find(text[begin + 2:], "\n")
        text = _blank(text, begin, (-1 if end is None else end) + 3)
    return text


def color_key(chars: str) -> int:
    """Pack the characters naming an XPM color into a single integer key."""
    value = 0
    for ch in chars:
        value = ((value << 8) + ord(ch)) & 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _next_line(source: Iterator[str], what: str) -> str:
    try:
        return next(source)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_color(line: str, cpp: int) -> tuple[int, int]:
    if len(line) < cpp:
        raise XpmError(f"color line too short: {line!r}")
    words = str_to_wordtab(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"no 'c' color key in {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"no color after 'c' in {line!r}")
    end = words[index + 2] if index + 2 < len(words) else None
    return color_key(line[:cpp]), text_to_rgb(words[index + 1], end)


def parse_xpm_lines(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, color definitions, then pixel rows."""
    source = iter(lines)
    header = str_to_wordtab(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, color count and chars per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")

    palette: dict[int, int] = {}
    for _ in range(ncolors):
        key, rgb = _parse_color(_next_line(source, "color definition"), cpp)
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        line = _next_line(source, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width * cpp} characters")
        for x in range(width):
            color = palette.get(color_key(line[x * cpp:(x + 1) * cpp]), 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening < 0:
            return
        closing = text.find('"', opening + 1)
        if closing < 0:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def parse_xpm_text(text: str) -> Image:
    """Build an image from the contents of an XPM file."""
    return parse_xpm_lines(_quoted_strings(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> Image:
    """Read the XPM file at ``path`` into an image."""
    return parse_xpm_text(Path(path).read_bytes().decode("latin-1"))