"""Bitmap font lookup and text rendering from a GB2312 font ROM image."""

from __future__ import annotations

from dataclasses import dataclass

from .draw import FrameBuffer

ASCII_WIDTH = 8
HZ16_WIDTH = 16
GLYPH_ROWS = 16

FONT_TYPE_ASCII = 0
FONT_TYPE_CHINESE = 1

_ADDRESS_MASK = 0xFFFFFF
_UINT32 = 0xFFFFFFFF
_ROW_MIN = 0xA1
_ROW_MAX = 0xFE
_ROW_SIZE = 94


class FontRom:
    """Read-only image of a serial font flash chip addressed with 24 bits."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytes(data)

    def __len__(self) -> int:
        return len(self._data)

    def read(self, address: int, length: int) -> bytes:
        """Return ``length`` bytes from ``address``; bytes past the image read as zero."""
        if not 0 <= length <= 0xFF:
            raise ValueError("a font read is limited to 0..255 bytes")
        address &= _ADDRESS_MASK
        chunk = self._data[address:address + length]
        return chunk + bytes(length - len(chunk))


def utf8_to_gb2312(code_point: int) -> int:
    """Return the two-byte GB2312 code of a character, or 0 if it has none."""
    try:
        encoded = chr(code_point).encode("gb2312")
    except (UnicodeEncodeError, ValueError, OverflowError):
        return 0
    if len(encoded) != 2:
        return 0
    return int.from_bytes(encoded, "big")


def _code_of(char: str | int) -> int:
    return ord(char) if isinstance(char, str) else char


@dataclass
class FontIndex:
    """Where the 8x16 ASCII and 16x16 GB2312 glyph tables sit in the font ROM."""

    ascii_start: int = 0x1D00
    ascii_bytes: int = 16
    hz16_start: int = 0x71300
    hz16_bytes: int = 32

    def ascii_offset(self, char: str | int) -> int:
        """Address of the glyph of an ASCII character."""
        return (self.ascii_start + (_code_of(char) & 0xFF) * self.ascii_bytes) & _UINT32

    def hz16_offset(self, area: int, index: int) -> int:
        """Address of the glyph with GB2312 row ``area`` and cell ``index``."""
        cell = ((area & 0xFF) - _ROW_MIN) * _ROW_SIZE + ((index & 0xFF) - _ROW_MIN)
        return (self.hz16_start + cell * self.hz16_bytes) & _UINT32

    def hz16_offset_from_char(self, char: str | int) -> int:
        """Address of the 16x16 glyph of a character, or 0 if it is not in GB2312."""
        code = utf8_to_gb2312(_code_of(char))
        if code == 0:
            return 0
        area, index = (code >> 8) & 0xFF, code & 0xFF
        if not (_ROW_MIN <= area <= _ROW_MAX and _ROW_MIN <= index <= _ROW_MAX):
            return 0
        return self.hz16_offset(area, index)

    def set_font_info(self, font_type: int, width: int, height: int, start: int, bytes_per_char: int) -> None:
        """Relocate the ASCII (type 0) 8x16 or the Chinese 16x16 table; other sizes are ignored."""
        if font_type == FONT_TYPE_ASCII:
            if width == ASCII_WIDTH and height == GLYPH_ROWS:
                self.ascii_start = start
                self.ascii_bytes = bytes_per_char
        elif width == HZ16_WIDTH and height == GLYPH_ROWS:
            self.hz16_start = start
            self.hz16_bytes = bytes_per_char


class FontRenderer:
    """Draws text into frame buffers with glyphs read from a font ROM."""

    def __init__(self, rom: FontRom, index: FontIndex | None = None) -> None:
        self.rom = rom
        self.index = index if index is not None else FontIndex()

    def draw_ascii(self, fb: FrameBuffer, x: int, y: int, char: str | int, color: int) -> None:
        """Draw one 8x16 ASCII glyph with its top left corner at (x, y)."""
        glyph = self.rom.read(self.index.ascii_offset(char), self.index.ascii_bytes)
        for row, line in enumerate(glyph[:GLYPH_ROWS]):
            for bit in range(ASCII_WIDTH):
                if line & (0x80 >> bit):
                    fb.set_pixel(x + bit, y + row, color)

    def _draw_hz16(self, fb: FrameBuffer, x: int, y: int, offset: int, color: int) -> None:
        glyph = self.rom.read(offset, self.index.hz16_bytes)
        rows = zip(glyph[0::2], glyph[1::2])
        for row, (high, low) in enumerate(rows):
            if row >= GLYPH_ROWS:
                break
            line = (high << 8) | low
            for bit in range(HZ16_WIDTH):
                if line & (0x8000 >> bit):
                    fb.set_pixel(x + bit, y + row, color)

    def draw_chinese(self, fb: FrameBuffer, x: int, y: int, area: int, index: int, color: int) -> None:
        """Draw the 16x16 glyph with GB2312 row ``area`` and cell ``index``."""
        self._draw_hz16(fb, x, y, self.index.hz16_offset(area, index), color)

    def draw_gb2312(self, fb: FrameBuffer, x: int, y: int, data: bytes, color: int) -> int:
        """Draw GB2312-encoded byte pairs up to the first zero byte; return the x after the text."""
        data = bytes(data)
        for area, index in zip(data[0::2], data[1::2]):
            if not area or not index:
                break
            self.draw_chinese(fb, x, y, area, index, color)
            x += HZ16_WIDTH
        return x

    def draw_string(self, fb: FrameBuffer, x: int, y: int, text: str, color: int) -> int:
        """Draw mixed ASCII and Chinese text up to any NUL; return the x after the text.

        Characters outside GB2312 are skipped; characters beyond the basic
        multilingual plane are drawn as ASCII code 0.
        """
        for char in text.partition("\0")[0]:
            code = ord(char)
            if code > 0xFFFF:
                code = 0
            if code < 0x80:
                self.draw_ascii(fb, x, y, code, color)
                x += ASCII_WIDTH
                continue
            offset = self.index.hz16_offset_from_char(code)
            if offset > 0:
                self._draw_hz16(fb, x, y, offset, color)
                x += HZ16_WIDTH
        return x