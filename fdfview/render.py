"""Drawing of a height map as a projected wireframe, and the on-screen menu."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Iterator

from fdfview.heightmap import HeightMap
from fdfview.image import Image
from fdfview.palette import Palette
from fdfview.transform import Point, isometric, oblique, rotate, scale, scale_z, translate

__all__ = [
    "WINDOW_WIDTH",
    "WINDOW_HEIGHT",
    "MENU_X",
    "ViewState",
    "line_points",
    "Renderer",
    "menu_lines",
]

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
MENU_X = 100


@dataclass
class ViewState:
    """Everything the keyboard can change about the view.

    proj is 'i' for isometric, 'o' for oblique and 't' for top-down.
    """

    shift_x: int = 0
    shift_y: int = 0
    scale_factor: float = 50
    z_scale: float = 0.1
    proj: str = "i"
    rot_angle_x: float = 0.0
    rot_angle_y: float = 0.0
    rot_angle_z: float = 0.0
    obl_angle: float = 0.0
    palette: Palette = field(default_factory=Palette)
    should_render: bool = True
    frames: int = 0

    def reset(self) -> None:
        """Put every setting back to its starting value."""
        fresh = ViewState()
        for item in fields(self):
            setattr(self, item.name, getattr(fresh, item.name))


def _round(value: float) -> int:
    """Round half away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def line_points(start, end) -> Iterator[tuple[int, int]]:
    """Yield the pixels of a line between two (x, y) points, ends included."""
    x, y = _round(start[0]), _round(start[1])
    x_end, y_end = _round(end[0]), _round(end[1])
    dx = abs(x_end - x)
    dy = -abs(y_end - y)
    sx = -1 if x > x_end else 1
    sy = -1 if y > y_end else 1
    err = dx + dy
    while True:
        yield x, y
        if x == x_end and y == y_end:
            return
        err2 = 2 * err
        if err2 >= dy:
            err += dy
            x += sx
        if err2 <= dx:
            err += dx
            y += sy


class Renderer:
    """Projects a height map with the current view settings into images."""

    def __init__(
        self,
        heightmap: HeightMap,
        state: ViewState,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
    ) -> None:
        self.heightmap = heightmap
        self.state = state
        self.width = width
        self.height = height

    def project(self, point: Point) -> Point:
        """Map a grid point (column, row, altitude) to screen coordinates."""
        state = self.state
        factor = state.scale_factor
        projected = scale(scale_z(point, state.z_scale), factor)
        projected = translate(
            projected,
            -self.heightmap.width * factor / 2,
            -self.heightmap.height * factor / 2,
        )
        if state.proj == "o":
            projected = oblique(projected, state.obl_angle)
        if state.proj == "i":
            projected = isometric(projected, 1.0)
        if state.rot_angle_x or state.rot_angle_y or state.rot_angle_z:
            projected = rotate(
                projected, state.rot_angle_x, state.rot_angle_y, state.rot_angle_z
            )
        projected = translate(projected, self.width // 2, self.height // 2)
        return translate(projected, state.shift_x, state.shift_y)

    def draw_segment(self, image: Image, p1: Point, p2: Point) -> None:
        """Draw the projected segment between two grid points into image."""
        start = self.project(p1)
        end = self.project(p2)
        color = self.state.palette.choose(start.z, end.z)
        for x, y in line_points((start.x, start.y), (end.x, end.y)):
            if 0 < x < image.width and 0 < y < image.height:
                image.put_pixel(x, y, color)

    def _grid_point(self, column: int, row: int) -> Point:
        return Point(column, row, self.heightmap.altitude(column, row))

    def render(self) -> Image:
        """Draw the whole wireframe into a new image."""
        image = Image(self.width, self.height)
        columns = self.heightmap.width
        rows = self.heightmap.height
        for row in range(rows + 1):
            for column in range(columns + 1):
                here = self._grid_point(column, row)
                if column < columns:
                    self.draw_segment(image, here, self._grid_point(column + 1, row))
                if row < rows:
                    self.draw_segment(image, here, self._grid_point(column, row + 1))
        return image


def _degrees(angle: float) -> int:
    return int(angle * 180 / math.pi)


def menu_lines(state: ViewState, filename: str) -> list[tuple[int, int, str]]:
    """Return the menu as (x, y, text) entries in drawing order."""
    palette = state.palette
    entries = [
        (200, f"FDF: {filename}"),
        (230, "Isometric: i"),
        (250, "Oblique: o"),
        (270, "Top: t"),
        (290, "Reset: r"),
        (320, f"Scale (z/x): {int(state.scale_factor)}"),
        (350, f"Z Scale (f/g): {int(state.z_scale)}"),
        (380, f"X-axis Rotation (Deg) (q/a): {_degrees(state.rot_angle_x)}"),
        (400, f"Y-axis Rotation (Deg) (w/s): {_degrees(state.rot_angle_y)}"),
        (420, f"Z-axis Rotation (Deg) (e/d): {_degrees(state.rot_angle_z)}"),
        (450, f"Base Height (c/v): {palette.base_height}"),
        (470, f"Base Hue Count (h/j): {palette.base_hue_count}"),
        (490, f"Hue Count (k/l): {palette.hue_count}"),
        (520, f"Oblique Angle (Deg) (u): {_degrees(state.obl_angle)}"),
    ]
    return [(MENU_X, y, text) for y, text in entries]