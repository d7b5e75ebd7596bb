"""Parsing of conversion specifications that follow a ``%`` sign."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Padding(enum.Enum):
    """How a converted value is padded up to the field width."""

    LEFT = 0
    """Spaces on the left (the default)."""
    RIGHT = 1
    """Spaces on the right (``-`` flag)."""
    ZEROS = 2
    """Leading zeros (``0`` flag, numbers only)."""


@dataclass
class FormatSpec:
    """Flags, width and precision of one conversion."""

    padding: Padding = Padding.LEFT
    width: int = 0
    alternate_form: bool = False
    precision: int = 0
    has_precision: bool = False
    force_sign: bool = False
    has_space: bool = False


def _char_at(text: str, pos: int) -> str:
    return text[pos] if pos < len(text) else ""


def _read_number(text: str, pos: int) -> tuple[int, int]:
    value = 0
    while _char_at(text, pos).isdigit() and _char_at(text, pos) in "0123456789":
        value = value * 10 + int(text[pos])
        pos += 1
    return value, pos


def parse_spec(text: str, pos: int) -> tuple[FormatSpec, int]:
    """Parse flags, width and precision starting at ``pos``.

    Returns the specification and the position just after it.
    """
    spec = FormatSpec()
    while True:
        ch = _char_at(text, pos)
        if ch == "#":
            pos += 1
            spec.alternate_form = True
            continue
        if ch == "0":
            pos += 1
            if spec.padding is not Padding.RIGHT:
                spec.padding = Padding.ZEROS
                continue
            # A '0' after '-' is swallowed; the next character is only
            # tested against the remaining flags.
            ch = _char_at(text, pos)
        if ch == "-":
            pos += 1
            spec.padding = Padding.RIGHT
        elif ch == " ":
            pos += 1
            spec.has_space = True
        elif ch == "+":
            pos += 1
            spec.force_sign = True
        else:
            break
    spec.width, pos = _read_number(text, pos)
    if _char_at(text, pos) == ".":
        precision, pos = _read_number(text, pos + 1)
        spec.precision = max(precision, 0)
        spec.has_precision = True
        if spec.padding is Padding.ZEROS:
            spec.padding = Padding.LEFT
    return spec, pos


def pad(char: str, width: int) -> str:
    """Return ``char`` repeated ``width`` times, or nothing if ``width`` <= 0."""
    return char * max(width, 0)