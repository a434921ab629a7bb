"""String helpers: searching, splitting, bounded copies and comparisons."""

from __future__ import annotations

from typing import Callable, MutableSequence

_TERMINATOR = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def split(s: str, c: str) -> list[str]:
    """Split s on the separator c, dropping the empty pieces."""
    _single_char(c)
    return [piece for piece in s.split(c) if piece]


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    if _single_char(c) == _TERMINATOR:
        return len(s)
    index = s.find(c)
    return None if index == -1 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    if _single_char(c) == _TERMINATOR:
        return len(s)
    index = s.rfind(c)
    return None if index == -1 else index


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(s)


def striteri(s: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call f(index, char) on every character of s.

    Where f returns a character, it replaces the one at that index.
    """
    for index, char in enumerate(list(s)):
        replacement = f(index, char)
        if replacement is not None:
            s[index] = replacement


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of f(index, char) for every character of s."""
    return "".join(f(index, char) for index, char in enumerate(s))


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest in a buffer of size characters, NUL included.

    Returns the resulting text and the length the full result would have had.
    """
    _non_negative(size, "size")
    dest_len = len(dest)
    room = max(size - dest_len - 1, 0)
    result = dest + src[:room]
    if dest_len <= size:
        return result, dest_len + len(src)
    return result, size + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, NUL included.

    Returns the copied text and the length of src.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns the difference of the first unequal pair of character codes, the
    end of a string counting as zero, or 0 when they match.
    """
    _non_negative(n, "n")
    for index in range(n):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(hay: str, needle: str, length: int) -> int | None:
    """Find needle wholly within the first length characters of hay.

    Returns its index, 0 for an empty needle, or None.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = hay.find(needle, 0, length)
    return None if index == -1 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]