"""In-memory pixel images and colour conversion for the display visual."""

from __future__ import annotations

from dataclasses import dataclass, field

LSB_FIRST = 0
MSB_FIRST = 1


@dataclass
class Image:
    """A ZPixmap-style pixel buffer with a fixed number of bits per pixel.

    Pixels are stored row after row, ``size_line`` bytes per row, each pixel
    taking ``bits_per_pixel // 8`` bytes in the byte order given by
    ``endian`` (0 for least significant byte first, 1 for most).
    """

    width: int
    height: int
    bits_per_pixel: int = 32
    endian: int = LSB_FIRST
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.bits_per_pixel <= 0 or self.bits_per_pixel % 8:
            raise ValueError(f"unsupported bits per pixel: {self.bits_per_pixel}")
        if self.endian not in (LSB_FIRST, MSB_FIRST):
            raise ValueError(f"invalid byte order: {self.endian}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def size_line(self) -> int:
        """Number of bytes in one row of pixels."""
        return self.width * self.bytes_per_pixel

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian == MSB_FIRST else "little"

    def _offset(self, x: int, y: int) -> int:
        return y * self.size_line + x * self.bytes_per_pixel

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y); positions outside the image are ignored."""
        if not self._inside(x, y):
            return
        opp = self.bytes_per_pixel
        value = color & ((1 << (8 * opp)) - 1)
        start = self._offset(x, y)
        self.data[start:start + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned pixel value at (x, y), or 0 outside the image."""
        if not self._inside(x, y):
            return 0
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + self.bytes_per_pixel], self._byteorder)

    def to_bytes(self) -> bytes:
        """Return a copy of the raw pixel data."""
        return bytes(self.data)


def rgb_mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, int, int, int, int, int]:
    """Return (shift, bits) for the red, green and blue masks of a visual.

    The shift is the position of the lowest set bit of the mask and the bit
    count is the length of the run of ones starting there.
    """
    result: list[int] = []
    for name, mask in (("red", red_mask), ("green", green_mask), ("blue", blue_mask)):
        if mask <= 0:
            raise ValueError(f"{name} mask must be a positive bit mask")
        shift = (mask & -mask).bit_length() - 1
        run = mask >> shift
        bits = (run ^ (run + 1)).bit_length() - 1
        result.extend((shift, bits))
    return tuple(result)  # type: ignore[return-value]


def good_color(color: int, depth: int, shifts: tuple[int, int, int, int, int, int]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual of ``depth`` bits.

    Visuals of 24 bits or more take the colour unchanged; shallower ones pack
    each component into the bits described by ``shifts``.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )