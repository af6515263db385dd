"""Keyboard handling for the wireframe viewer."""

from __future__ import annotations

import enum
import math

from fdfview.render import ViewState

__all__ = ["Key", "handle_key", "SHIFT_STEP", "ANGLE_STEP"]

SHIFT_STEP = 10
ANGLE_STEP = math.pi / 60


class Key(enum.IntEnum):
    """Keys the viewer reacts to, with their X keysym values."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    A = ord("a")
    C = ord("c")
    D = ord("d")
    E = ord("e")
    F = ord("f")
    G = ord("g")
    H = ord("h")
    I = ord("i")  # noqa: E741
    J = ord("j")
    K = ord("k")
    L = ord("l")
    O = ord("o")  # noqa: E741
    Q = ord("q")
    R = ord("r")
    S = ord("s")
    T = ord("t")
    U = ord("u")
    V = ord("v")
    W = ord("w")
    X = ord("x")
    Z = ord("z")


def _translation_rotation(state: ViewState, key: Key) -> None:
    if key is Key.LEFT:
        state.shift_x -= SHIFT_STEP
    elif key is Key.RIGHT:
        state.shift_x += SHIFT_STEP
    elif key is Key.DOWN:
        state.shift_y += SHIFT_STEP
    elif key is Key.UP:
        state.shift_y -= SHIFT_STEP
    elif key is Key.A:
        state.rot_angle_x += ANGLE_STEP
    elif key is Key.S:
        state.rot_angle_y += ANGLE_STEP
    elif key is Key.D:
        state.rot_angle_z += ANGLE_STEP
    elif key is Key.Q:
        state.rot_angle_x -= ANGLE_STEP
    elif key is Key.W:
        state.rot_angle_y -= ANGLE_STEP
    elif key is Key.E:
        state.rot_angle_z -= ANGLE_STEP


def _projection_scaling(state: ViewState, key: Key) -> None:
    if key is Key.T:
        state.proj = "t"
    elif key is Key.I:
        state.proj = "i"
    elif key is Key.R:
        state.reset()
    elif key is Key.O:
        state.proj = "o"
    elif key is Key.X:
        state.scale_factor += 1
    elif key is Key.Z and state.scale_factor > 0:
        state.scale_factor -= 1


def _extra_features(state: ViewState, key: Key) -> None:
    palette = state.palette
    if key is Key.G:
        state.z_scale += 0.1
    elif key is Key.F:
        state.z_scale -= 0.1
    elif key is Key.C and palette.base_height > 0:
        palette.base_height -= 1
    elif key is Key.V:
        palette.base_height += 1
    elif key is Key.H and palette.base_hue_count > 0:
        palette.base_hue_count -= 1
    elif key is Key.J:
        palette.base_hue_count += 1
    elif key is Key.K and palette.hue_count > 0:
        palette.hue_count -= 1
    elif key is Key.L:
        palette.hue_count += 1
    elif key is Key.U:
        state.obl_angle += ANGLE_STEP


def handle_key(state: ViewState, key: Key) -> bool:
    """Apply a key press to the view; return False when the viewer should quit."""
    state.should_render = True
    if key is Key.ESCAPE:
        return False
    _translation_rotation(state, key)
    _projection_scaling(state, key)
    _extra_features(state, key)
    return True