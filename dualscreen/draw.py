"""Frame buffer drawing primitives for 240x240 RGB565 screens."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

SCREEN_WIDTH = 240
SCREEN_HEIGHT = 240

_UINT16 = 0xFFFF


@dataclass(frozen=True)
class Point:
    """A position on the screen."""

    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: int
    y: int
    width: int
    height: int


class FrameBuffer:
    """A grid of 16-bit RGB565 pixels; drawing outside the grid is ignored."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT, color: int = 0x0000) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame buffer dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = [color & _UINT16] * (width * height)

    def __len__(self) -> int:
        return len(self._pixels)

    def __iter__(self):
        return iter(self._pixels)

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self, color: int) -> None:
        """Fill the whole buffer with one color."""
        self._pixels = [color & _UINT16] * (self.width * self.height)

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the buffer are ignored."""
        if self._contains(x, y):
            self._pixels[y * self.width + x] = color & _UINT16

    def get_pixel(self, x: int, y: int) -> int:
        """Return the color of one pixel."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame buffer")
        return self._pixels[y * self.width + x]

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        """Draw a line with Bresenham's algorithm, both ends included."""
        dx = abs(x2 - x1)
        dy = abs(y2 - y1)
        sx = 1 if x1 < x2 else -1
        sy = 1 if y1 < y2 else -1
        err = dx - dy
        while True:
            self.set_pixel(x1, y1, color)
            if x1 == x2 and y1 == y2:
                break
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x1 += sx
            if e2 < dx:
                err += dx
                y1 += sy

    def draw_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Draw the outline of a rectangle."""
        right = x + width - 1
        bottom = y + height - 1
        self.draw_line(x, y, right, y, color)
        self.draw_line(right, y, right, bottom, color)
        self.draw_line(right, bottom, x, bottom, color)
        self.draw_line(x, bottom, x, y, color)

    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Fill a rectangle, clipped to the buffer."""
        left = max(x, 0)
        right = min(x + width, self.width)
        top = max(y, 0)
        bottom = min(y + height, self.height)
        if left >= right or top >= bottom:
            return
        run = [color & _UINT16] * (right - left)
        for row in range(top, bottom):
            start = row * self.width
            self._pixels[start + left:start + right] = run

    def draw_circle(self, x0: int, y0: int, radius: int, color: int) -> None:
        """Draw the outline of a circle with the midpoint algorithm."""
        x, y, err = radius, 0, 0
        while x >= y:
            for px, py in (
                (x0 + x, y0 + y), (x0 + y, y0 + x), (x0 - y, y0 + x), (x0 - x, y0 + y),
                (x0 - x, y0 - y), (x0 - y, y0 - x), (x0 + y, y0 - x), (x0 + x, y0 - y),
            ):
                self.set_pixel(px, py, color)
            if err <= 0:
                y += 1
                err += 2 * y + 1
            if err > 0:
                x -= 1
                err -= 2 * x + 1

    def fill_circle(self, x0: int, y0: int, radius: int, color: int) -> None:
        """Draw a filled circle."""
        x, y, err = radius, 0, 0
        while x >= y:
            for i in range(x0 - x, x0 + x + 1):
                self.set_pixel(i, y0 + y, color)
                self.set_pixel(i, y0 - y, color)
            for i in range(x0 - y, x0 + y + 1):
                self.set_pixel(i, y0 + x, color)
                self.set_pixel(i, y0 - x, color)
            if err <= 0:
                y += 1
                err += 2 * y + 1
            if err > 0:
                x -= 1
                err -= 2 * x + 1

    def to_bytes(self) -> bytes:
        """Return the pixels as big-endian 16-bit words, row by row, as sent to the panel."""
        return b"".join(pixel.to_bytes(2, "big") for pixel in self._pixels)


def rgb_to_565(r: int, g: int, b: int) -> int:
    """Pack 8-bit red, green and blue into an RGB565 color."""
    r &= 0xFF
    g &= 0xFF
    b &= 0xFF
    return ((r & 0xF8) << 8) | ((g & 0xFC) << 3) | (b >> 3)


def wheel_color(t: int) -> int:
    """Return a color that cycles smoothly as ``t`` advances."""
    t &= _UINT16
    r = int(math.sin(t * 0.05) * 127 + 128)
    g = int(math.sin(t * 0.08 + 2) * 127 + 128)
    b = int(math.sin(t * 0.13 + 4) * 127 + 128)
    return rgb_to_565(r, g, b)


def draw_1bit_image(
    fb: FrameBuffer,
    x: int,
    y: int,
    width: int,
    height: int,
    data: Sequence[int],
    color: int,
    scale: int = 1,
) -> None:
    """Draw the set bits of a packed, MSB-first 1-bit image, optionally shrunk by ``scale``."""
    if scale < 1:
        raise ValueError("scale must be at least 1")
    for dy in range(height // scale):
        src_y = dy * scale
        for dx in range(width // scale):
            src_x = dx * scale
            byte = data[(src_y * width + src_x) // 8]
            if byte & (1 << (7 - src_x % 8)):
                fb.set_pixel(x + dx, y + dy, color)