import pytest

from fdfview.palette import Palette, blend, default_hues, rgb


def test_rgb_white():
    assert rgb(255, 255, 255) == 0xFFFFFF


def test_rgb_channels_positions():
    assert rgb(0, 0, 255) == 0x0000FF
    assert rgb(0, 255, 0) == 0x00FF00
    assert rgb(255, 0, 0) == 0xFF0000


def test_default_hues_from_source():
    hues = default_hues()
    assert len(hues) == 8
    assert hues[0] == (255, 255, 255)
    assert hues[4] == (255, 105, 0)
    assert hues[7] == (120, 0, 255)


def test_default_hues_are_fresh_lists():
    first = default_hues()
    first[0] = (1, 2, 3)
    assert default_hues()[0] == (255, 255, 255)


@pytest.mark.parametrize("index", [0, 20, 40, 140])
def test_blend_multiple_of_twenty_gives_end(index):
    assert blend((1, 2, 3), (10, 20, 30), index) == rgb(10, 20, 30)


@pytest.mark.parametrize("index", range(1, 20))
def test_blend_same_colours_is_constant(index):
    assert blend((12, 34, 56), (12, 34, 56), index) == rgb(12, 34, 56)


def test_blend_steps_with_integer_division():
    assert blend((0, 0, 0), (200, 100, 40), 10) == rgb(100, 50, 20)


def test_blend_negative_difference_truncates_toward_zero():
    assert blend((255, 0, 0), (0, 0, 0), 1) >> 16 == 243


def test_spectrum_zero_is_white():
    palette = Palette()
    assert palette.spectrum(0) == 0xFFFFFF
    assert palette.hue == 0xFFFFFF


def test_spectrum_stops():
    palette = Palette()
    assert palette.spectrum(20) == rgb(0, 0, 255)
    assert palette.spectrum(40) == rgb(0, 255, 0)
    assert palette.spectrum(100) == rgb(255, 0, 0)


@pytest.mark.parametrize("count", [0, 1, 19, 33, 77, 159])
def test_spectrum_cycles(count):
    palette = Palette()
    assert palette.spectrum(count) == palette.spectrum(count + 160)


def test_spectrum_last_segment_runs_back_to_white():
    palette = Palette()
    hues = default_hues()
    assert palette.spectrum(150) == blend(hues[7], hues[0], 150)


def test_choose_base_band_uses_base_count():
    palette = Palette(base_hue_count=20, hue_count=40)
    assert palette.choose(0, 0) == rgb(0, 0, 255)


def test_choose_above_band_uses_hue_count():
    palette = Palette(base_hue_count=20, hue_count=40)
    assert palette.choose(5, 7) == rgb(0, 255, 0)
    assert palette.choose(-5, -7) == rgb(0, 255, 0)


def test_choose_straddling_keeps_current_colour():
    palette = Palette(base_hue_count=20, hue_count=40)
    palette.choose(0, 0)
    assert palette.choose(5, -5) == rgb(0, 0, 255)
    assert palette.hue == rgb(0, 0, 255)


def test_choose_wider_band():
    palette = Palette(base_height=3, base_hue_count=20, hue_count=40)
    assert palette.choose(-3, 3) == rgb(0, 0, 255)
    assert palette.choose(3, 10) == rgb(0, 255, 0)