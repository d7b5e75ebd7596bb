"""Reading of XPM images into lists of ``0xAARRGGBB`` pixel values."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from .colornames import lookup_color

_TRANSPARENT = 0xFF000000
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_HEX_RE = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass
class XpmImage:
    """A decoded image; ``pixels`` holds ``width * height`` values, row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def _find_unquoted(text: list[str], pattern: str) -> int:
    quoted = False
    joined = "".join(text)
    for pos, ch in enumerate(joined):
        if ch == '"':
            quoted = not quoted
        if not quoted and joined.startswith(pattern, pos):
            return pos
    return -1


def _blank(chars: list[str], start: int, length: int) -> None:
    for pos in range(start, min(start + length, len(chars))):
        chars[pos] = " "


def strip_comments(text: str) -> str:
    """Replace C-style comments outside of double quotes with spaces.

    The length of the text is preserved; a line comment is blanked together
    with the newline that ends it.
    """
    chars = list(text)
    while (begin := _find_unquoted(chars, "/*")) != -1:
        end = "".join(chars).find("*/", begin + 2)
        end = end - (begin + 2) if end != -1 else -1
        _blank(chars, begin, end + 4)
    while (begin := _find_unquoted(chars, "//")) != -1:
        end = "".join(chars).find("\n", begin + 2)
        end = end - (begin + 2) if end != -1 else -1
        _blank(chars, begin, end + 3)
    return "".join(chars)


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _parse_hex(text: str) -> int:
    match = _HEX_RE.match(text)
    digits = match.group(2) if match else ""
    value = int(digits, 16) if digits else 0
    if match and match.group(1) == "-":
        value = -value
    return _to_int32(value)


def text_to_rgb(name: str, suffix: Optional[str] = None) -> int:
    """Colour value of an XPM colour specification.

    ``#RRGGBB`` is read as hexadecimal; otherwise ``name`` (joined with
    ``suffix`` by a space when given) is looked up among named colours.
    Unknown names give 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if suffix is not None:
        name = f"{name} {suffix}"[:63]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings (header, colours, then rows)."""
    source = iter(lines)

    def next_line() -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError("unexpected end of XPM data") from None

    header = split_words(next_line())
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("XPM header values must be positive")

    # Short keys overwrite earlier definitions; long keys keep the first one.
    last_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        words = split_words(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if at >= len(words):
            raise XpmError(f"colour definition without a colour: {line!r}")
        suffix = words[at + 1] if at + 1 < len(words) else None
        rgb = text_to_rgb(words[at], suffix)
        key = line[:cpp]
        if last_wins or key not in palette:
            palette[key] = rgb

    pixels: list[int] = []
    for _ in range(height):
        line = next_line()
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        for x in range(width):
            color = palette.get(line[x * cpp : (x + 1) * cpp], 0)
            pixels.append(_TRANSPARENT if color == -1 else color)
    return XpmImage(width, height, pixels)


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1 : end]
        pos = end + 1


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm_lines(_quoted_strings(strip_comments(text)))


def read_xpm_file(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    with open(path, encoding="latin-1") as handle:
        return parse_xpm_text(handle.read())