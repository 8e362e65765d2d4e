"""Mandelbrot set rendering and its command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from fractol.image import Image
from fractol.libft import atof

WIDTH = 800
HEIGHT = 800
MAX_ITER = 100
START = 0.0
IN_SET_COLOR = 0x00000000
ESCAPED_COLOR = 0x00FF8000

_USAGE = "Usage: mandelbrot LEFT RIGHT TOP BOTTOM\n"


@dataclass(frozen=True)
class Bounds:
    """The rectangle of the complex plane mapped onto the image."""

    left: float = -2.0
    right: float = 1.0
    top: float = 1.2
    bottom: float = -1.2


def complex_coords(
    x: int, y: int, bounds: Bounds, width: int = WIDTH, height: int = HEIGHT
) -> tuple[float, float]:
    """Map pixel ``(x, y)`` to the complex number ``(cr, ci)`` it stands for."""
    cr = bounds.left + x * ((bounds.right - bounds.left) / width)
    ci = bounds.top - y * ((bounds.top - bounds.bottom) / height)
    return cr, ci


def mandelbrot_iterations(cr: float, ci: float, max_iter: int = MAX_ITER) -> int:
    """Count iterations of z = z*z + c before |z| exceeds 2, capped at ``max_iter``."""
    zr = zi = START
    iterations = 0
    while zr * zr + zi * zi <= 4 and iterations < max_iter:
        zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
        iterations += 1
    return iterations


def render(
    bounds: Bounds | None = None,
    width: int = WIDTH,
    height: int = HEIGHT,
    max_iter: int = MAX_ITER,
) -> Image:
    """Draw the set: black for points that never escape, orange for the rest."""
    if bounds is None:
        bounds = Bounds()
    image = Image(width, height)
    for y in range(height):
        for x in range(width):
            cr, ci = complex_coords(x, y, bounds, width, height)
            inside = mandelbrot_iterations(cr, ci, max_iter) == max_iter
            image.put_pixel(x, y, IN_SET_COLOR if inside else ESCAPED_COLOR)
    return image


def main(argv: Sequence[str] | None = None) -> int:
    """Render the region given on the command line and write it to stdout as PPM."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write(_USAGE)
        return 1
    left, right, top, bottom = (atof(arg) for arg in args)
    image = render(Bounds(left, right, top, bottom))
    sys.stdout.buffer.write(image.to_ppm())
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())