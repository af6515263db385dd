"""In-memory pixel images and colour conversion for non-truecolour depths."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Image", "ChannelShifts", "rgb_shifts", "good_color"]

_SUPPORTED_DEPTHS = (8, 16, 24, 32)


@dataclass(frozen=True)
class ChannelShifts:
    """Position and width of each colour channel inside a pixel value."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int


def _shift_and_bits(mask: int, channel: str) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"{channel} mask must be a positive bit mask")
    shift = (mask & -mask).bit_length() - 1
    run = mask >> shift
    bits = ((run + 1) & ~run).bit_length() - 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> ChannelShifts:
    """Work out channel shifts and widths from a visual's colour masks."""
    red = _shift_and_bits(red_mask, "red")
    green = _shift_and_bits(green_mask, "green")
    blue = _shift_and_bits(blue_mask, "blue")
    return ChannelShifts(*red, *green, *blue)


def good_color(color: int, depth: int, shifts: ChannelShifts) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for the given depth.

    Depths of 24 bits and more take the colour as it is.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts.red_bits)) << shifts.red_shift)
        + ((green >> (16 - shifts.green_bits)) << shifts.green_shift)
        + ((blue >> (16 - shifts.blue_bits)) << shifts.blue_shift)
    )


class Image:
    """A little-endian packed pixel buffer with rows padded to 32 bits."""

    def __init__(self, width: int, height: int, bits_per_pixel: int = 32) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bits_per_pixel not in _SUPPORTED_DEPTHS:
            raise ValueError(f"unsupported bits per pixel: {bits_per_pixel}")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.size_line = (width * bits_per_pixel + 31) // 32 * 4
        self.endian = 0
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    def __repr__(self) -> str:
        return (
            f"Image(width={self.width}, height={self.height}, "
            f"bits_per_pixel={self.bits_per_pixel})"
        )

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low bytes of color at (x, y)."""
        offset = self._offset(x, y)
        size = self.bytes_per_pixel
        value = color & ((1 << self.bits_per_pixel) - 1)
        self.data[offset:offset + size] = value.to_bytes(size, "little")

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + self.bytes_per_pixel], "little")

    def clear(self) -> None:
        """Set every byte of the image to zero."""
        self.data[:] = bytes(len(self.data))