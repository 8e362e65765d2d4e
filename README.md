# fractol

Renders the Mandelbrot set into an in-memory pixel image and writes it out
as a binary PPM (P6) file. Points that stay bounded for every iteration are
drawn black; all other points are drawn orange (`0x00FF8000`).

## Install

```
pip install .
```

## Command line

```
fractol-mandelbrot LEFT RIGHT TOP BOTTOM > mandelbrot.ppm
```

The four bounds give the region of the complex plane to render, for example
`fractol-mandelbrot -2.0 1.0 1.2 -1.2`. The image is 800 x 800 pixels with
at most 100 iterations per point, and it goes to standard output as binary
PPM. Each bound is read as a decimal number with an optional sign and
fractional part. Text that cannot be parsed counts as 0. If the command does
not get exactly four arguments, it writes a usage line to standard error and
exits with status 1.

## Library use

```python
from fractol.mandelbrot import Bounds, render

image = render(Bounds(left=-2.0, right=1.0, top=1.2, bottom=-1.2), 800, 800, 100)
image.save_ppm("mandelbrot.ppm")
```

### Modules

- `fractol.mandelbrot`: `Bounds` (defaults to -2.0, 1.0, 1.2, -1.2),
  `complex_coords(x, y, bounds, width, height)` to map a pixel to `(cr, ci)`,
  `mandelbrot_iterations(cr, ci, max_iter)`, `render(bounds, width, height,
  max_iter)` which returns an `Image`, and `main(argv=None)`, which the
  command runs.
- `fractol.image`: `Image(width, height, endian=None)` is a buffer of packed
  32-bit `0x00RRGGBB` pixels. Byte order 0 is little-endian and 1 is
  big-endian; the default is the host's order, from `host_byte_order()`. It
  has `put_pixel`, `get_pixel`, `draw_filled_square`,
  `draw_filled_triangle`, `to_ppm`, `save_ppm`, and the attributes `data`
  and `line_length`. An out-of-range pixel raises `IndexError`.
- `fractol.colors`: the X11 colour-name table `COLOR_NAMES` and two lookups.
  `lookup_color(name)` ignores case and raises `KeyError` for an unknown
  name. `text_to_rgb(name, end)` accepts `#RRGGBB` and one- or two-word
  names and returns 0 for anything it cannot resolve. `ColorLayout` is
  built from channel masks with `from_masks`, and its `convert(color,
  depth)` places a colour in a pixel of lower depth.
- `fractol.xpm`: reads XPM pixmaps into an `Image` with `parse_xpm_text`,
  `parse_xpm_lines` and `load_xpm`. Malformed input raises `XpmError`. The
  colour `None` is stored as `0xFF000000`. Helpers: `find`,
  `find_outside_quotes`, `str_to_wordtab`, `strip_comments`, `color_key`.
- `fractol.printf`: `format_string(fmt, *args)` and `printf(fmt, *args)` for
  the conversions `%c %s %p %d %i %u %x %X %%`. Integers are taken as 32-bit
  values. `printf` writes to standard output and returns the number of
  characters written. There is also `num_len(n)`.
- `fractol.libft`: C-style helpers: `atof`, `atoi`, `itoa`, `split`,
  `strtrim`, `substr`, `strnstr`, `strncmp`, `isalpha`, `isdigit`,
  `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`.

## What it does not do

The package opens no window and has no interactive viewer. It takes no
keyboard or mouse input, so there is no zooming or panning. To change the
view, run it again with other bounds and open the PPM file in any image
viewer.

## Tests

```
pip install ".[test]"
pytest
```