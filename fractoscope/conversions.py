"""Conversion of single values to text according to a FormatSpec."""

from __future__ import annotations

from .fmtspec import FormatSpec, Padding, pad

_NULL = "(null)"
_NIL = "(nil)"


def _to_int32(x: int) -> int:
    return ((x + 2**31) % 2**32) - 2**31


def _to_uint32(x: int) -> int:
    return x & 0xFFFFFFFF


def format_char(spec: FormatSpec | None, c: int | str) -> str:
    """Format a single character (an int is taken as an unsigned byte)."""
    ch = chr(c & 0xFF) if isinstance(c, int) else c[:1]
    if spec is None:
        return ch
    out = ""
    if spec.padding is not Padding.RIGHT:
        out += pad(" ", spec.width - 1)
    out += ch
    return out + pad(" ", spec.width - len(out))


def _sign_of(spec: FormatSpec, negative: bool) -> str:
    if negative:
        return "-"
    if spec.force_sign:
        return "+"
    if spec.has_space:
        return " "
    return ""


def format_int(spec: FormatSpec, x: int) -> str:
    """Format a signed 32-bit integer (``%d`` / ``%i``)."""
    x = _to_int32(x)
    digits = str(abs(x))
    width = len(digits)
    sign = _sign_of(spec, x < 0)
    out = ""
    if spec.padding is Padding.LEFT:
        out += pad(" ", spec.width - max(width, spec.precision) - len(sign))
    out += sign
    out += pad("0", spec.precision - width)
    if spec.padding is Padding.ZEROS:
        out += pad("0", spec.width - len(out) - width)
    out += digits
    return out + pad(" ", spec.width - len(out))


def format_unsigned(spec: FormatSpec, x: int) -> str:
    """Format an unsigned 32-bit integer (``%u``)."""
    x = _to_uint32(x)
    width = len(_NULL) if (x == 0 and spec.has_precision) else len(str(x))
    out = ""
    if spec.padding is Padding.LEFT:
        out += pad(" ", spec.width - max(width, spec.precision))
    if not spec.has_precision or x:
        out += pad("0", spec.precision - width)
    if spec.padding is Padding.ZEROS:
        out += pad("0", spec.width - len(out) - width)
    counted = len(out)
    if spec.has_precision and not x:
        if spec.precision == 0:
            # Emitted but not counted toward the field width.
            out += _NULL
        else:
            out += pad("0", spec.precision)
            counted = len(out)
    else:
        out += str(x)
        counted = len(out)
    return out + pad(" ", spec.width - counted)


def format_hex(spec: FormatSpec, x: int, uppercase: bool) -> str:
    """Format an unsigned 32-bit integer in hexadecimal (``%x`` / ``%X``)."""
    x = _to_uint32(x)
    digits = format(x, "X" if uppercase else "x")
    width = len(_NULL) if (x == 0 and spec.has_precision) else len(digits)
    prefixed = spec.alternate_form and x != 0
    out = ""
    if spec.padding is Padding.LEFT:
        out += pad(
            " ", spec.width - max(width, spec.precision) - 2 * prefixed
        )
    if prefixed:
        out += "0X" if uppercase else "0x"
    if x or not spec.has_precision:
        out += pad("0", spec.precision - width)
        if spec.padding is Padding.ZEROS:
            out += pad("0", spec.width - len(out) - width)
    if spec.has_precision and not x:
        if spec.width >= len(_NULL):
            out += _NULL
        else:
            out += pad("0", spec.precision)
    else:
        out += digits
    return out + pad(" ", spec.width - len(out))


def format_pointer(spec: FormatSpec, address: int | None) -> str:
    """Format an address as ``0x``-prefixed hexadecimal (``%p``)."""
    p = (address or 0) & 0xFFFFFFFFFFFFFFFF
    digits = format(p, "x")
    width = (len(digits) + 2) if p else len(_NIL)
    sign = "+" if spec.force_sign else (" " if spec.has_space else "")
    signed = bool(p) and bool(sign)
    out = ""
    if spec.padding is not Padding.RIGHT and (not spec.has_precision or not p):
        out += pad(" ", spec.width - width - signed)
    if p:
        out += sign + "0x"
        if spec.has_precision:
            out += pad("0", spec.precision - width - signed + 2)
        out += digits
    else:
        out += _NIL
    return out + pad(" ", spec.width - len(out))


def format_string(spec: FormatSpec | None, s: str | None) -> str:
    """Format a string (``%s``); ``None`` shows as ``(null)``."""
    if spec is None:
        return _NULL if s is None else s
    length = len(_NULL) if s is None else len(s)
    if spec.has_precision and (s is not None or spec.precision >= len(_NULL)):
        width = min(length, spec.precision)
    else:
        width = length
    out = ""
    if spec.padding is not Padding.RIGHT:
        shown = min(width, spec.precision) if spec.has_precision else width
        out += pad(" ", spec.width - shown)
    if s is not None:
        out += s[:width]
    elif not spec.has_precision or spec.precision >= len(_NULL):
        out += _NULL
    return out + pad(" ", spec.width - len(out))