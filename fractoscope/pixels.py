"""Pixel colour conversion and packing for framebuffers of various depths."""

from __future__ import annotations


def _shift_and_bits(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask:#x}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return ``(red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits)``.

    The shift is the position of the lowest set bit of each mask and the bit
    count is the length of the run of set bits starting there.
    """
    result: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        result.extend(_shift_and_bits(mask))
    return tuple(result)


def good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert ``0xRRGGBB`` to the pixel value of a visual of ``depth`` bits.

    Depths of 24 or more use the colour unchanged; shallower visuals scale
    each channel to the bit layout described by ``shifts`` (see
    :func:`mask_shifts`).
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )


def pack_pixel(color: int, bytes_per_pixel: int, big_endian: bool) -> bytes:
    """Return the low ``bytes_per_pixel`` bytes of ``color`` in the given order."""
    if bytes_per_pixel <= 0:
        raise ValueError("bytes_per_pixel must be positive")
    value = color & ((1 << (8 * bytes_per_pixel)) - 1)
    return value.to_bytes(bytes_per_pixel, "big" if big_endian else "little")


def color_map(x: int, y: int, width: int, height: int, variant: int = 1) -> int:
    """Colour of the test gradient at ``(x, y)`` in a ``width`` x ``height`` area.

    Variant 2 uses the row instead of the column for the blue channel.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    blue = (y if variant == 2 else x) * 255 // width
    red = ((width - x) * 255 // width) << 16
    green = (y * 255 // height) << 8
    return blue + red + green