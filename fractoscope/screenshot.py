"""Export of a raster to a binary PPM (P6) image."""

from __future__ import annotations

import os
from typing import Sequence


def ppm_bytes(width: int, height: int, pixels: Sequence[int]) -> bytes:
    """Encode ``width * height`` ``0xRRGGBB`` pixels, row by row, as P6 data."""
    count = width * height
    if width < 0 or height < 0:
        raise ValueError("width and height must not be negative")
    if len(pixels) < count:
        raise ValueError(f"expected {count} pixels, got {len(pixels)}")
    body = bytearray()
    for color in pixels[:count]:
        body += bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
    return f"P6\n{width} {height}\n255\n".encode("ascii") + bytes(body)


def write_ppm(
    path: str | os.PathLike[str], width: int, height: int, pixels: Sequence[int]
) -> int:
    """Write a P6 image to ``path`` and return the number of bytes written."""
    data = ppm_bytes(width, height, pixels)
    with open(path, "wb") as handle:
        handle.write(data)
    return len(data)