"""Reading XPM images into plain pixel grids."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from .chars import atoi
from .colors import parse_color

TRANSPARENT = 0xFF000000
"""Pixel value given to cells whose colour is ``None``."""

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_BLOCK_COMMENTS = re.compile(r'"[^"]*(?:"|\Z)|/\*.*?(?:\*/|\Z)', re.DOTALL)
_LINE_COMMENTS = re.compile(r'"[^"]*(?:"|\Z)|//[^\n]*(?:\n|\Z)')
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(Exception):
    """Raised when an XPM image cannot be read or is malformed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 0xRRGGBB values, TRANSPARENT where clear."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.pixels[y][x]


def words(text: str) -> list[str]:
    """Split text on spaces and tabs, dropping empty pieces."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank(pattern: re.Pattern[str], text: str) -> str:
    def replace(match: re.Match[str]) -> str:
        found = match.group()
        return found if found.startswith('"') else " " * len(found)

    return pattern.sub(replace, text)


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces.

    Block comments are removed first, then line comments together with the
    newline ending them. The text keeps its length.
    """
    return _blank(_LINE_COMMENTS, _blank(_BLOCK_COMMENTS, text))


def quoted_strings(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in turn."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _color_spec(tokens: list[str]) -> int:
    try:
        index = tokens.index("c")
    except ValueError:
        raise XpmError("colour definition has no 'c' key") from None
    if index + 1 >= len(tokens):
        raise XpmError("colour definition has no colour after 'c'")
    end = tokens[index + 2] if index + 2 < len(tokens) else None
    return parse_color(tokens[index + 1], end)


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == -1 else color & 0xFFFFFFFF


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings: header, colours, then pixel rows."""
    remaining = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = words(next_line("header"))
    if len(header) < 4:
        raise XpmError("incomplete header")
    width, height, ncolors, cpp = (atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid header")

    # With more than two characters per pixel the first definition of a key
    # wins; with one or two, the last one does.
    first_wins = cpp > 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        if len(line) < cpp:
            raise XpmError("colour definition is too short")
        key = line[:cpp]
        color = _color_spec(words(line[cpp:]))
        if first_wins:
            palette.setdefault(key, color)
        else:
            palette[key] = color

    rows = []
    for _ in range(height):
        line = next_line("pixel row")
        if len(line) < width * cpp:
            raise XpmError("pixel row is too short")
        rows.append(
            tuple(
                _pixel_value(palette.get(line[x * cpp : (x + 1) * cpp], 0))
                for x in range(width)
            )
        )
    return XpmImage(width, height, tuple(rows))


def parse_xpm(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm_lines(quoted_strings(strip_comments(text)))


def load_xpm(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"Can't read {os.fspath(path)}") from exc
    return parse_xpm(text)