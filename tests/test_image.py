import pytest

from fdfview.image import ChannelShifts, Image, good_color, rgb_shifts

TRUECOLOR = rgb_shifts(0xFF0000, 0x00FF00, 0x0000FF)


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("size", [42, 242])
def test_new_image_layout(size):
    img = Image(size, size, 32)
    assert img.bits_per_pixel == 32
    assert img.size_line == size * 4
    assert img.endian == 0
    assert len(img.data) == img.size_line * size


@pytest.mark.parametrize("kind", [1, 2])
def test_fill_and_read_back(kind):
    w = h = 42
    img = Image(w, h, 32)
    expected = {}
    for y in range(h):
        for x in range(w):
            color = good_color(_color_map(x, y, w, h, kind), 24, TRUECOLOR)
            img.put_pixel(x, y, color)
            expected[(x, y)] = color
    assert all(img.get_pixel(x, y) == c for (x, y), c in expected.items())


def test_truecolor_value_is_identity():
    w = h = 242
    for y in range(0, h, 11):
        for x in range(0, w, 13):
            color = _color_map(x, y, w, h, 1)
            assert good_color(color, 24, TRUECOLOR) == color


def test_little_endian_bytes():
    img = Image(1, 1)
    img.put_pixel(0, 0, 0x11223344)
    assert bytes(img.data) == bytes([0x44, 0x33, 0x22, 0x11])


def test_rgb_shifts_truecolor():
    assert TRUECOLOR == ChannelShifts(16, 8, 8, 8, 0, 8)


def test_rgb_shifts_565():
    assert rgb_shifts(0xF800, 0x07E0, 0x001F) == ChannelShifts(11, 5, 5, 6, 0, 5)


def test_good_color_16_bit():
    shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0xFF0000, 16, shifts) == 0xF800
    assert good_color(0xFFFFFF, 16, shifts) == 0xFFFF
    assert good_color(0x000000, 16, shifts) == 0


def test_zero_mask_rejected():
    with pytest.raises(ValueError):
        rgb_shifts(0, 0xFF00, 0xFF)


def test_24_bit_rows_are_padded():
    img = Image(3, 1, 24)
    assert img.size_line == 12
    img.put_pixel(2, 0, 0xFF123456)
    assert img.get_pixel(2, 0) == 0x123456


def test_clear():
    img = Image(4, 4)
    img.put_pixel(3, 3, 0xFFFFFF)
    img.clear()
    assert img.get_pixel(3, 3) == 0
    assert not any(img.data)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (42, 0), (0, 42)])
def test_out_of_range(x, y):
    img = Image(42, 42)
    with pytest.raises(IndexError):
        img.put_pixel(x, y, 1)
    with pytest.raises(IndexError):
        img.get_pixel(x, y)


@pytest.mark.parametrize("args", [(0, 5), (5, 0), (-1, 3), (4, 4, 12)])
def test_invalid_image(args):
    with pytest.raises(ValueError):
        Image(*args)