"""Pixel formats, off-screen images and window drawing surfaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import product
from typing import List, Tuple

BYTE_ORDER_LSB_FIRST = 0


def _split_mask(mask: int) -> Tuple[int, int]:
    """Return (shift, width) of the run of set bits that starts lowest in ``mask``."""
    if mask <= 0:
        raise ValueError("colour mask must be a positive bit mask")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def _scale(value: int, bits: int) -> int:
    """Keep the top ``bits`` bits of a 16-bit channel value."""
    if bits <= 16:
        return value >> (16 - bits)
    return value << (bits - 16)


@dataclass(frozen=True)
class PixelFormat:
    """How a 0xRRGGBB colour is laid out in a pixel of a given depth."""

    depth: int
    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int

    @classmethod
    def from_masks(
        cls, red_mask: int, green_mask: int, blue_mask: int, depth: int
    ) -> PixelFormat:
        """Derive the format from the channel masks of a true-colour visual."""
        red_shift, red_bits = _split_mask(red_mask)
        green_shift, green_bits = _split_mask(green_mask)
        blue_shift, blue_bits = _split_mask(blue_mask)
        return cls(depth, red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits)

    def convert(self, color: int) -> int:
        """Return the pixel value for ``color``; depths of 24 and up keep it as is."""
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            (_scale(red, self.red_bits) << self.red_shift)
            + (_scale(green, self.green_bits) << self.green_shift)
            + (_scale(blue, self.blue_bits) << self.blue_shift)
        )


DEFAULT_FORMAT = PixelFormat.from_masks(0xFF0000, 0x00FF00, 0x0000FF, 24)


@dataclass
class Image:
    """An off-screen 32-bit image whose pixel bytes are open to direct writes."""

    width: int
    height: int
    bits_per_pixel: int = field(default=32, init=False)
    endian: int = field(default=BYTE_ORDER_LSB_FIRST, init=False)
    size_line: int = field(default=0, init=False)
    data: bytearray = field(default_factory=bytearray, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must be non-negative")
        self.size_line = self.width * self._pixel_bytes
        self.data = bytearray(self.size_line * self.height)

    @property
    def _pixel_bytes(self) -> int:
        return self.bits_per_pixel // 8

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside a {self.width}x{self.height} image")
        return y * self.size_line + x * self._pixel_bytes

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y), least significant byte first."""
        offset = self._offset(x, y)
        size = self._pixel_bytes
        self.data[offset:offset + size] = (color & 0xFFFFFFFF).to_bytes(size, "little")

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + self._pixel_bytes], "little")


@dataclass
class Canvas:
    """The visible surface of a window; it starts black."""

    width: int
    height: int
    pixel_format: PixelFormat = field(default_factory=lambda: DEFAULT_FORMAT)
    _pixels: List[int] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("canvas dimensions must be non-negative")
        self._pixels = [0] * (self.width * self.height)

    @property
    def _depth_mask(self) -> int:
        return (1 << self.pixel_format.depth) - 1

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel_put(self, x: int, y: int, color: int) -> None:
        """Draw one pixel of ``color``; points outside the canvas are clipped."""
        if self._inside(x, y):
            self._pixels[y * self.width + x] = self.pixel_format.convert(color) & self._depth_mask

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value shown at (x, y)."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) lies outside a {self.width}x{self.height} canvas")
        return self._pixels[y * self.width + x]

    def put_image(self, image: Image, x: int, y: int) -> None:
        """Copy ``image`` with its top-left corner at (x, y), clipping to the canvas."""
        mask = self._depth_mask
        for j, i in product(range(image.height), range(image.width)):
            cx, cy = x + i, y + j
            if self._inside(cx, cy):
                self._pixels[cy * self.width + cx] = image.get_pixel(i, j) & mask

    def clear(self) -> None:
        """Reset every pixel to the black background."""
        self._pixels = [0] * (self.width * self.height)