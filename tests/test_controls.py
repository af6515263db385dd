import math

import pytest

from fdfview.controls import Key, handle_key
from fdfview.render import ViewState


def test_escape_requests_quit():
    assert handle_key(ViewState(), Key.ESCAPE) is False


def test_other_keys_keep_running_and_request_render():
    state = ViewState(should_render=False)
    assert handle_key(state, Key.T) is True
    assert state.should_render is True


def test_arrows_shift_by_ten():
    state = ViewState()
    handle_key(state, Key.LEFT)
    assert state.shift_x == -10
    handle_key(state, Key.RIGHT)
    assert state.shift_x == 0
    handle_key(state, Key.DOWN)
    assert state.shift_y == 10
    handle_key(state, Key.UP)
    assert state.shift_y == 0


@pytest.mark.parametrize(
    "up,down,attr",
    [(Key.A, Key.Q, "rot_angle_x"), (Key.S, Key.W, "rot_angle_y"), (Key.D, Key.E, "rot_angle_z")],
)
def test_rotation_keys_are_inverse(up, down, attr):
    state = ViewState()
    handle_key(state, up)
    assert getattr(state, attr) == pytest.approx(math.pi / 60)
    handle_key(state, down)
    assert getattr(state, attr) == pytest.approx(0.0)


@pytest.mark.parametrize("key,proj", [(Key.T, "t"), (Key.O, "o"), (Key.I, "i")])
def test_projection_keys(key, proj):
    state = ViewState(proj="x")
    handle_key(state, key)
    assert state.proj == proj


def test_scale_keys_and_floor():
    state = ViewState(scale_factor=0)
    handle_key(state, Key.Z)
    assert state.scale_factor == 0
    handle_key(state, Key.X)
    assert state.scale_factor == 1


def test_z_scale_keys():
    state = ViewState()
    start = state.z_scale
    handle_key(state, Key.G)
    assert state.z_scale == pytest.approx(start + 0.1)
    handle_key(state, Key.F)
    assert state.z_scale == pytest.approx(start)


@pytest.mark.parametrize(
    "down,up,attr",
    [(Key.C, Key.V, "base_height"), (Key.H, Key.J, "base_hue_count"), (Key.K, Key.L, "hue_count")],
)
def test_palette_counters_stop_at_zero(down, up, attr):
    state = ViewState()
    setattr(state.palette, attr, 0)
    handle_key(state, down)
    assert getattr(state.palette, attr) == 0
    handle_key(state, up)
    assert getattr(state.palette, attr) == 1


def test_oblique_angle_key():
    state = ViewState()
    handle_key(state, Key.U)
    assert state.obl_angle == pytest.approx(math.pi / 60)


def test_reset_key_restores_defaults():
    state = ViewState()
    handle_key(state, Key.LEFT)
    handle_key(state, Key.X)
    handle_key(state, Key.O)
    handle_key(state, Key.R)
    assert state.shift_x == 0
    assert state.scale_factor == 50
    assert state.proj == "i"