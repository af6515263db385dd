"""Reading of XPM pixmaps into images."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from fdfview.colornames import parse_color_spec
from fdfview.image import Image

__all__ = [
    "XpmError",
    "split_words",
    "find_unquoted",
    "strip_comments",
    "quoted_lines",
    "parse_xpm",
    "load_xpm",
]

TRANSPARENT = 0xFF000000

_BLANKS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs."""
    return [word for word in _BLANKS.split(text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the index of the first needle outside double quotes, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    inside = False
    for pos, char in enumerate(text):
        if char == '"':
            inside = not inside
        if not inside and text.startswith(needle, pos):
            return pos
    return -1


def _blank_comments(text: str, opener: str, closer: str) -> str:
    start = find_unquoted(text, opener)
    while start != -1:
        end = text.find(closer, start + len(opener))
        stop = len(text) if end == -1 else end + len(closer)
        text = text[:start] + " " * (stop - start) + text[stop:]
        start = find_unquoted(text, opener)
    return text


def strip_comments(text: str) -> str:
    """Blank out C comments outside strings, keeping the text's length."""
    text = _blank_comments(text, "/*", "*/")
    return _blank_comments(text, "//", "\n")


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in turn."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what} line") from None


def _color_entry(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour line without a 'c' key: {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour line without a colour: {line!r}")
    suffix: Optional[str] = words[index + 2] if index + 2 < len(words) else None
    return line[:cpp], parse_color_spec(words[index + 1], suffix)


def parse_xpm(lines: Iterable[str], bits_per_pixel: int = 32) -> Image:
    """Build an image from the strings of an XPM pixmap.

    Unknown pixel codes give colour 0 and the colour "None" is stored as
    0xFF000000.
    """
    rows = iter(lines)
    words = split_words(_next_line(rows, "header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(words)!r}")

    # Short codes are looked up in a direct table where later entries win;
    # longer codes are searched so that the first definition wins.
    first_wins = cpp > 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _color_entry(_next_line(rows, "colour"), cpp)
        if first_wins:
            colors.setdefault(key, color)
        else:
            colors[key] = color

    image = Image(width, height, bits_per_pixel)
    for y in range(height):
        line = _next_line(rows, "pixel")
        for x in range(width):
            color = colors.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def load_xpm(path) -> Image:
    """Read an XPM file and return its image."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(quoted_lines(strip_comments(text)))