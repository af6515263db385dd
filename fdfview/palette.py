"""Altitude-based line colouring that cycles through a fixed spectrum."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["rgb", "default_hues", "blend", "Palette", "WHITE"]

Hue = tuple[int, int, int]

WHITE = 0xFFFFFF
SPECTRUM_LENGTH = 160
STEPS_PER_HUE = 20

_INT_MAX = 2147483647
_INT_MIN = -2147483648


def rgb(red: int, green: int, blue: int) -> int:
    """Pack three 8-bit channels into a 0xRRGGBB value."""
    return (red & 0xFF) << 16 | (green & 0xFF) << 8 | (blue & 0xFF)


def default_hues() -> list[Hue]:
    """Return the spectrum stops: white, blue, green, yellow, orange, red, pink, purple."""
    return [
        (255, 255, 255),
        (0, 0, 255),
        (0, 255, 0),
        (255, 255, 0),
        (255, 105, 0),
        (255, 0, 0),
        (255, 0, 255),
        (120, 0, 255),
    ]


def _step(start: int, end: int, position: int) -> int:
    diff = end - start
    # Integer division that truncates toward zero.
    step = abs(diff) // STEPS_PER_HUE
    if diff < 0:
        step = -step
    return (step * position + start) & 0xFF


def blend(start: Hue, end: Hue, index: int) -> int:
    """Return the colour index/20 of the way from start to end.

    Every multiple of 20 gives the end colour exactly.
    """
    position = index % STEPS_PER_HUE
    if position == 0:
        return rgb(*end)
    return rgb(*(_step(s, e, position) for s, e in zip(start, end)))


@dataclass
class Palette:
    """Colour settings: a base band around zero altitude and the rest."""

    hues: list[Hue] = field(default_factory=default_hues)
    base_height: int = 0
    base_hue_count: int = 1
    hue_count: int = 1
    hue: int = WHITE

    def spectrum(self, count: int) -> int:
        """Set and return the colour at position count of the cycling spectrum."""
        index = count % SPECTRUM_LENGTH
        if index == 0:
            self.hue = WHITE
        else:
            segment = (index - 1) // STEPS_PER_HUE
            start = self.hues[segment]
            end = self.hues[(segment + 1) % len(self.hues)]
            self.hue = blend(start, end, index)
        return self.hue

    def choose(self, z1: float, z2: float) -> int:
        """Pick the colour for a segment whose ends have altitudes z1 and z2.

        A segment that straddles a band boundary keeps the current colour.
        """
        def within(low: float, high: float) -> bool:
            return low <= z1 <= high and low <= z2 <= high

        band = self.base_height
        if within(-band, band):
            self.spectrum(self.base_hue_count)
        elif within(band, _INT_MAX) or within(_INT_MIN, -band):
            self.spectrum(self.hue_count)
        return self.hue