"""Point transformations for projecting a wireframe onto the screen."""

from __future__ import annotations

from dataclasses import dataclass, replace
from math import cos, sin

__all__ = ["Point", "scale_z", "scale", "isometric", "oblique", "rotate", "translate"]


@dataclass(frozen=True)
class Point:
    """A point in map space or screen space."""

    x: float
    y: float
    z: float = 0.0


def scale_z(point: Point, factor: float) -> Point:
    """Scale only the altitude."""
    return replace(point, z=point.z * factor)


def scale(point: Point, factor: float) -> Point:
    """Scale all three coordinates."""
    return Point(point.x * factor, point.y * factor, point.z * factor)


def isometric(point: Point, angle: float = 1.0) -> Point:
    """Apply the isometric projection; y is computed from the projected x."""
    x = (point.x - point.y) * cos(angle)
    y = (x + point.y) * sin(angle) - point.z
    return replace(point, x=x, y=y)


def oblique(point: Point, angle: float) -> Point:
    """Shear x and y by half the altitude along the given angle."""
    offset = 0.5 * point.z * cos(angle)
    return replace(point, x=point.x + offset, y=point.y + offset)


def rotate(point: Point, angle_x: float, angle_y: float, angle_z: float) -> Point:
    """Rotate about the x, y and z axes in that order; z is left as it is."""
    y = point.y * cos(angle_x) - point.z * sin(angle_x)
    x = point.x * cos(angle_y) + point.z * sin(angle_y)
    new_x = x * cos(angle_z) - y * sin(angle_z)
    new_y = x * sin(angle_z) + y * cos(angle_z)
    return replace(point, x=new_x, y=new_y)


def translate(point: Point, dx: float, dy: float) -> Point:
    """Move a point in the screen plane."""
    return replace(point, x=point.x + dx, y=point.y + dy)