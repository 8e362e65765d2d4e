"""Mandelbrot rendering to PPM, pixel images, colour names, XPM reading and text helpers."""

__version__ = "0.1.0"
__all__ = ["colors", "image", "libft", "mandelbrot", "printf", "xpm"]