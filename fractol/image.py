"""An in-memory 32-bit pixel buffer with simple drawing helpers."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from os import PathLike
from pathlib import Path


def host_byte_order() -> int:
    """Return 0 on a little-endian host and 1 on a big-endian one."""
    return 1 if sys.byteorder == "big" else 0


class Image:
    """A width x height grid of 0x00RRGGBB pixels stored as 32-bit words."""

    bits_per_pixel = 32

    def __init__(self, width: int, height: int, endian: int | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        if endian is None:
            endian = host_byte_order()
        if endian not in (0, 1):
            raise ValueError("endian must be 0 (little) or 1 (big)")
        self.width = width
        self.height = height
        self.endian = endian
        self.line_length = width * (self.bits_per_pixel // 8)
        self._data = bytearray(self.line_length * height)

    @property
    def data(self) -> bytes:
        """The raw pixel bytes, row after row."""
        return bytes(self._data)

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.line_length + x * (self.bits_per_pixel // 8)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at ``(x, y)``."""
        offset = self._offset(x, y)
        self._data[offset:offset + 4] = (color & 0xFFFFFFFF).to_bytes(4, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the color stored at ``(x, y)``."""
        offset = self._offset(x, y)
        return int.from_bytes(self._data[offset:offset + 4], self._byteorder)

    def draw_filled_square(self, x_start: int, y_start: int, size: int, color: int) -> None:
        """Fill a ``size`` x ``size`` square whose top-left corner is ``(x_start, y_start)``."""
        for y in range(size):
            for x in range(size):
                self.put_pixel(x_start + x, y_start + y, color)

    def draw_filled_triangle(self, x_start: int, y_start: int, size: int, color: int) -> None:
        """Fill a downward-pointing triangle ``size`` rows tall.

        Row ``y`` is ``2 * (size - y)`` pixels wide and centred on
        ``x_start + size // 2``.
        """
        half_size = size // 2
        for y in range(size):
            line_width = (size - y) * 2
            start_x = half_size - line_width // 2
            for x in range(line_width):
                self.put_pixel(x_start + start_x + x, y_start + y, color)

    def _pixels(self) -> Iterator[int]:
        for y in range(self.height):
            for x in range(self.width):
                yield self.get_pixel(x, y)

    def to_ppm(self) -> bytes:
        """Encode the image as a binary PPM (P6) file."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytearray()
        for color in self._pixels():
            body += bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
        return header + bytes(body)

    def save_ppm(self, path: str | PathLike[str]) -> None:
        """Write the image to ``path`` as a binary PPM file."""
        Path(path).write_bytes(self.to_ppm())