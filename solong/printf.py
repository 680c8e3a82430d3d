"""Formatted output supporting the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_CONVERSIONS = frozenset("cspdiuxX%")
_UINT_MOD = 1 << 32
_ULONG_MOD = 1 << 64
_NULL_TEXT = "(null)"
_NIL_TEXT = "(nil)"


def _as_int32(n: int) -> int:
    value = int(n) % _UINT_MOD
    return value - _UINT_MOD if value >= 1 << 31 else value


def itoa(n: int) -> str:
    """Decimal text of a signed integer."""
    return str(int(n))


def utoa(n: int) -> str:
    """Decimal text of n taken as a 32-bit unsigned integer."""
    return str(int(n) % _UINT_MOD)


def hex_string(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of n taken as a 32-bit unsigned integer, no prefix."""
    return format(int(n) % _UINT_MOD, "X" if upper else "x")


def pointer_string(address: int | None) -> str:
    """An address as ``0x`` followed by lower-case hex, or ``(nil)`` for none."""
    if address is None or address == 0:
        return _NIL_TEXT
    return "0x" + format(int(address) % _ULONG_MOD, "x")


def _char_text(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _char_text(value)
    if spec == "s":
        return _NULL_TEXT if value is None else str(value)
    if spec in "di":
        return itoa(_as_int32(value))
    if spec == "u":
        return utoa(value)
    if spec in "xX":
        return hex_string(value, upper=spec == "X")
    return pointer_string(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Expand fmt with args.

    A ``%`` not followed by a known conversion is kept as written; a lone
    ``%`` at the very end produces nothing. Too few arguments raise TypeError.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec not in _CONVERSIONS:
            pieces.append(char)
            pieces.append(spec)
            continue
        if spec == "%":
            pieces.append("%")
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        pieces.append(_convert(spec, value))
    return "".join(pieces)


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expanded format to stream (stdout by default); return its length."""
    text = format_printf(fmt, *args)
    _out(stream).write(text)
    return len(text)


def put_char(char: str | int, stream: TextIO | None = None) -> int:
    """Write one character; return 1."""
    _out(stream).write(_char_text(char))
    return 1


def put_str(text: str | None, stream: TextIO | None = None) -> int:
    """Write text, or ``(null)`` for None; return the number of characters written."""
    written = _NULL_TEXT if text is None else text
    _out(stream).write(written)
    return len(written)


def put_endl(text: str | None, stream: TextIO | None = None) -> int:
    """Write text (nothing for None) followed by a newline; return the count written."""
    written = (text or "") + "\n"
    _out(stream).write(written)
    return len(written)


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write the decimal form of n; return the number of characters written."""
    return put_str(itoa(n), stream)