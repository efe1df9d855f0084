"""An in-memory 32-bit pixel image and colour conversion for shallow visuals."""

from __future__ import annotations

from typing import Sequence

BITS_PER_PIXEL = 32
LITTLE_ENDIAN = 0
BIG_ENDIAN = 1


class Image:
    """A width x height image of 32-bit pixels stored row by row.

    ``endian`` selects the byte order of each pixel in ``data``:
    0 stores the least significant byte first, 1 the most significant.
    """

    def __init__(self, width: int, height: int, endian: int = LITTLE_ENDIAN) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive: {width}x{height}")
        if endian not in (LITTLE_ENDIAN, BIG_ENDIAN):
            raise ValueError(f"endian must be 0 or 1, got {endian}")
        self.width = width
        self.height = height
        self.bpp = BITS_PER_PIXEL
        self.size_line = width * self.bytes_per_pixel
        self.endian = endian
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian == BIG_ENDIAN else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low 32 bits of *color* at (x, y)."""
        offset = self._offset(x, y)
        size = self.bytes_per_pixel
        self.data[offset:offset + size] = (color & 0xFFFFFFFF).to_bytes(
            size, self._byteorder
        )

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 32-bit value stored at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(
            self.data[offset:offset + self.bytes_per_pixel], self._byteorder
        )


def good_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert 0xRRGGBB to a pixel value for a visual of the given depth.

    At 24 bits or more the colour is returned unchanged. Below that,
    *shifts* holds, for red, green and blue in turn, the position of the
    channel mask and its width in bits.
    """
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    if depth >= 24:
        return color
    color &= 0xFFFFFFFF
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_pos, red_bits, green_pos, green_bits, blue_pos, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_pos)
        + ((green >> (16 - green_bits)) << green_pos)
        + ((blue >> (16 - blue_bits)) << blue_pos)
    )