"""printf-style formatting built on the conversion helpers."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, TextIO

from .conversions import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_string,
    format_unsigned,
)
from .fmtspec import FormatSpec, parse_spec

_Converter = Callable[[FormatSpec, Any], str]

_CONVERSIONS: dict[str, _Converter] = {
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "c": format_char,
    "s": format_string,
    "x": lambda spec, value: format_hex(spec, value, False),
    "X": lambda spec, value: format_hex(spec, value, True),
    "p": format_pointer,
}


def _next_argument(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Supported conversions are ``d i u c s x X p`` and ``%%``. An unknown
    conversion character is not consumed and is emitted as plain text.
    """
    values = iter(args)
    pieces: list[str] = []
    pos = 0
    while True:
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            return "".join(pieces)
        pieces.append(fmt[pos:percent])
        if fmt[percent + 1 : percent + 2] == "%":
            pieces.append("%")
            pos = percent + 2
            continue
        spec, pos = parse_spec(fmt, percent + 1)
        converter = _CONVERSIONS.get(fmt[pos : pos + 1])
        if converter is None:
            continue
        pos += 1
        pieces.append(converter(spec, _next_argument(values)))


def dprintf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write formatted text to ``stream`` and return the number of characters."""
    text = sprintf(fmt, *args)
    stream.write(text)
    return len(text)


def printf(fmt: str, *args: Any) -> int:
    """Write formatted text to standard output and return its length."""
    return dprintf(sys.stdout, fmt, *args)