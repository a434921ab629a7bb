"""A small printf supporting the conversions the game uses."""

from __future__ import annotations

import re
import sys
from typing import IO, Any, Iterator

BASE_OCT = "01234567"
BASE_DEC = "0123456789"
BASE_HEX = "0123456789abcdef"
BASE_HEX_UPPER = "0123456789ABCDEF"

_CONVERSION = re.compile(r"%([scdixXupo% ])")
_UINT32 = 0xFFFFFFFF
_ULONG = 0xFFFFFFFFFFFFFFFF


def format_base(nb: int, base: str) -> str:
    """Write an integer in the given digit alphabet, with a leading '-' if negative."""
    if len(base) < 2:
        raise ValueError("a base needs at least two digits")
    if nb < 0:
        return "-" + format_base(-nb, base)
    digits = []
    while True:
        nb, remainder = divmod(nb, len(base))
        digits.append(base[remainder])
        if nb == 0:
            break
    return "".join(reversed(digits))


def format_pointer(address: int, base: str) -> str:
    """Write an address as an unsigned machine word in the given base."""
    return format_base(address & _ULONG, base)


def _int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value >= 1 << 31 else value


def _uint32(value: int) -> int:
    return value & _UINT32


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion in ("%", " "):
        return conversion
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if conversion == "s":
        return "(null)" if arg is None else str(arg)
    if conversion == "c":
        return _char(arg)
    if conversion in ("d", "i"):
        return format_base(_int32(arg), BASE_DEC)
    if conversion == "u":
        return format_base(_uint32(arg), BASE_DEC)
    if conversion == "x":
        return format_base(_uint32(arg), BASE_HEX)
    if conversion == "X":
        return format_base(_uint32(arg), BASE_HEX_UPPER)
    if conversion == "o":
        return format_base(_uint32(arg), BASE_OCT)
    # conversion == "p"
    if not arg:
        return "(nil)"
    return "0x" + format_pointer(arg, BASE_HEX)


def render(fmt: str, *args: Any) -> str:
    """Expand the conversions in fmt with args and return the text.

    An unknown conversion, or a lone '%' at the end, is copied as is.
    """
    remaining = iter(args)
    return _CONVERSION.sub(lambda m: _convert(m.group(1), remaining), fmt)


def printf(fmt: str | None, *args: Any, out: IO[str] | None = None) -> int:
    """Write the rendered text to out (stdout by default); return its length, or -1."""
    if fmt is None:
        return -1
    text = render(fmt, *args)
    (out if out is not None else sys.stdout).write(text)
    return len(text)