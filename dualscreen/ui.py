"""Simple widgets drawn into a frame buffer."""

from __future__ import annotations

from .draw import FrameBuffer
from .fonts import ASCII_WIDTH, GLYPH_ROWS, FontRenderer


def _half(value: int) -> int:
    """Halve rounding toward zero."""
    return int(value / 2)


class Label:
    """A line of text at a fixed position."""

    def __init__(self, x: int, y: int, text: str, color: int, renderer: FontRenderer) -> None:
        self.x = x
        self.y = y
        self.color = color
        self.renderer = renderer
        self._text = text
        self._changed = True

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        if value != self._text:
            self._changed = True
        self._text = value

    def draw(self, fb: FrameBuffer) -> None:
        self.renderer.draw_string(fb, self.x, self.y, self._text, self.color)

    def update(self) -> bool:
        """Report whether the text changed since the last update, then reset."""
        changed, self._changed = self._changed, False
        return changed


class Button:
    """A filled, outlined rectangle with centered text."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        text: str,
        bg_color: int,
        text_color: int,
        renderer: FontRenderer,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.bg_color = bg_color
        self.text_color = text_color
        self.renderer = renderer
        self._text = text
        self._changed = True

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        if value != self._text:
            self._changed = True
        self._text = value

    def draw(self, fb: FrameBuffer) -> None:
        fb.fill_rect(self.x, self.y, self.width, self.height, self.bg_color)
        fb.draw_rect(self.x, self.y, self.width, self.height, self.text_color)
        text_width = len(self._text.encode("utf-8")) * ASCII_WIDTH
        text_x = self.x + _half(self.width - text_width)
        text_y = self.y + _half(self.height - GLYPH_ROWS)
        self.renderer.draw_string(fb, text_x, text_y, self._text, self.text_color)

    def update(self) -> bool:
        """Report whether the text changed since the last update, then reset."""
        changed, self._changed = self._changed, False
        return changed

    def is_pressed(self, x: int, y: int) -> bool:
        """Whether (x, y) falls on the button, edges included."""
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height