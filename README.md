# fractoscope

Building blocks for a fractal explorer, usable on their own from Python code.
The package has no third-party dependencies.

## Modules

- **`fractoscope.printf`**: a small printf-style formatter for the `%d`, `%i`,
  `%u`, `%c`, `%s`, `%x`, `%X`, `%p` and `%%` conversions, with the `#`, `0`,
  `-`, ` ` and `+` flags, a field width and a precision.
  `sprintf(fmt, *args)` returns the text, `printf(fmt, *args)` writes it to
  standard output and `dprintf(stream, fmt, *args)` writes it to any text
  stream; both writers return the number of characters written. An unknown
  conversion character is left in the output as plain text, and running out
  of arguments raises `TypeError`.
- **`fractoscope.fmtspec`** and **`fractoscope.conversions`**: the pieces the
  formatter is made of: `parse_spec`, `FormatSpec`, `Padding`, `pad`, and one
  function per conversion (`format_char`, `format_int`, `format_unsigned`,
  `format_hex`, `format_pointer`, `format_string`). Integers are wrapped to
  32 bits as the conversion expects.
- **`fractoscope.viewport`**: `Viewport` maps normalised screen coordinates
  (0 to 1, y pointing down) to points of the plane through a 2x2 linear
  transform, and space points back to integer pixel positions. It can be
  panned with `move` and zoomed by powers of 0.9 with `zoom`.
  `default_bounds(width, height)` gives `[xmin, xmax, ymin, ymax]` for a
  window of that size, with y from -1 to 1 and x scaled to the aspect ratio.
- **`fractoscope.fragment`**: `FragmentJob.run(shader)` calls a shader
  (a function from `complex` to a `0xRRGGBB` colour) for each pixel and
  stores the results in a pixel list. With `oversampling_data` it takes a
  grid of extra samples per pixel and blends them with the weights of
  `gauss_sample_weight`; with `post_pass` it only redoes pixels still at the
  default colour.
- **`fractoscope.colornames`**: `lookup_color(name)` resolves X11 colour
  names such as `"snow"` or `"light goldenrod"`, ignoring case, to
  `0xRRGGBB`; `"none"` gives -1 and unknown names raise `KeyError`.
- **`fractoscope.pixels`**: `mask_shifts` and `good_color` convert a colour
  for visuals shallower than 24 bits, `pack_pixel` packs a colour into bytes
  in either byte order, and `color_map` gives a test colour ramp.
- **`fractoscope.xpm`**: `parse_xpm_text`, `parse_xpm_lines` and
  `read_xpm_file` decode XPM images into an `XpmImage` (`width`, `height`,
  and `pixels` row by row; transparent pixels are `0xFF000000`). Malformed
  input raises `XpmError`. Helpers `split_words`, `strip_comments` and
  `text_to_rgb` are available as well.
- **`fractoscope.screenshot`**: `ppm_bytes` and `write_ppm` produce binary
  PPM (`P6`) images from `0xRRGGBB` pixels.
- **`fractoscope.cli`**: the usage, help and version texts of the explorer
  (`usage_text`, `help_text`, `version_text`).

## Examples

```python
from fractoscope.printf import sprintf
from fractoscope.colornames import lookup_color

print(sprintf("iter: %d | downsampling: %-3d|", 500, 2))
print(sprintf("%#x", lookup_color("snow")))   # 0xfffafa
```

```python
from fractoscope.viewport import Viewport
from fractoscope.fragment import FragmentJob

view = Viewport((4, 3))
pixels = [0] * 12
FragmentJob(view, (4, 3), pixels).run(lambda z: 0xFFFFFF if abs(z) < 1 else 0)
```

```python
from fractoscope.screenshot import write_ppm

# A 2x1 image: one red pixel, one blue pixel.
write_ppm("screenshot.ppm", 2, 1, [0xFF0000, 0x0000FF])
```

## What it does not do

The package opens no window and handles no mouse or keyboard input; there is
no command to run. `fractoscope.cli` only supplies texts and does not parse
arguments. No fractal formulas or colour gradients are included: the shader
given to `FragmentJob.run` decides every colour.

## Requirements

Python 3.10 or later. The tests use pytest (`pip install .[test]`).