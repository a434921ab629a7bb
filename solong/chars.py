"""Character classification, integer/text conversion and small writers."""

from __future__ import annotations

import sys
from typing import IO

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_WHITESPACE = frozenset(" \n\t\r\v\f")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return int(c)


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is read, and digits are
    taken up to the first non-digit. The result wraps as a 32-bit int.
    """
    chars = iter(text)
    current = next(chars, "")
    while current in _WHITESPACE and current:
        current = next(chars, "")
    sign = 1
    if current in ("+", "-") and current:
        if current == "-":
            sign = -1
        current = next(chars, "")
    result = 0
    while current and "0" <= current <= "9":
        result = result * 10 + (ord(current) - ord("0"))
        current = next(chars, "")
    return _wrap_int32(sign * result)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)


def isalpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return isdigit(c) or isalpha(c)


def isascii(c: int | str) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def toupper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def _stream(out: IO[str] | None) -> IO[str]:
    return out if out is not None else sys.stdout


def putchar_fd(c: int | str, out: IO[str] | None = None) -> None:
    """Write one character; an integer is taken as a byte value."""
    char = c if isinstance(c, str) else chr(int(c) & 0xFF)
    if len(char) != 1:
        raise ValueError("expected a single character")
    _stream(out).write(char)


def putstr_fd(s: str, out: IO[str] | None = None) -> None:
    """Write a string."""
    _stream(out).write(s)


def putendl_fd(s: str, out: IO[str] | None = None) -> None:
    """Write a string followed by a newline."""
    stream = _stream(out)
    stream.write(s)
    stream.write("\n")


def putnbr_fd(n: int, out: IO[str] | None = None) -> None:
    """Write a 32-bit integer in decimal."""
    _stream(out).write(itoa(n))