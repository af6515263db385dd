"""Reading of wireframe height maps: rows of space separated altitudes."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["MapError", "HeightMap", "count_row_gaps", "parse_map_text", "load_map"]

_DIGITS = "0123456789"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class MapError(ValueError):
    """Raised when a map cannot be read."""


@dataclass(frozen=True)
class HeightMap:
    """Altitudes by row; width and height count gaps between grid points."""

    rows: tuple[tuple[int, ...], ...]
    width: int
    height: int

    def altitude(self, x: int, y: int) -> int:
        """Return the altitude at column x of row y."""
        return self.rows[y][x]


def count_row_gaps(line: str) -> int:
    """Count the runs of spaces that follow a value in a map row."""
    size = len(line)

    def at(pos: int) -> str:
        return line[pos] if pos < size else ""

    pos = 0
    gaps = 0
    while at(pos):
        pos += 1
        while at(pos) and at(pos) in _DIGITS:
            pos += 1
        if at(pos) == " ":
            gaps += 1
        while at(pos) == " ":
            pos += 1
    return gaps


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_map_text(text: str) -> HeightMap:
    """Build a height map from the text of a map file."""
    lines = _split_lines(text)
    if not lines:
        raise MapError("Map is empty")

    width = 0
    for line in lines:
        gaps = count_row_gaps(line)
        if width == 0:
            width = gaps
        elif width != gaps:
            raise MapError("Map length error")

    rows = []
    for number, line in enumerate(lines, start=1):
        values = tuple(_atoi(word) for word in line.split(" ") if word)
        if len(values) < width + 1:
            raise MapError(f"Map row {number} has too few values")
        rows.append(values)
    return HeightMap(tuple(rows), width, len(lines) - 1)


def load_map(path) -> HeightMap:
    """Read and parse a map file."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(f"Failed to open file: {path}") from exc
    return parse_map_text(text)