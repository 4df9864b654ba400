"""Two 240x240 panels, each with its own frame buffer."""

from __future__ import annotations

import threading
from typing import Callable

from .draw import SCREEN_HEIGHT, SCREEN_WIDTH, FrameBuffer

FrameSink = Callable[[bytes], None]


class Screen:
    """One panel: a frame buffer plus the last frame that was sent to it.

    ``sink``, when given, receives the pixel bytes of every pushed frame in
    the order the panel expects them.
    """

    def __init__(
        self,
        name: str = "lcd",
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        sink: FrameSink | None = None,
    ) -> None:
        self.name = name
        self.fb = FrameBuffer(width, height, 0x0000)
        self.sink = sink
        self.last_frame: bytes | None = None
        self.frames_pushed = 0
        self._lock = threading.Lock()

    @property
    def width(self) -> int:
        return self.fb.width

    @property
    def height(self) -> int:
        return self.fb.height

    def push(self, fb: FrameBuffer) -> None:
        """Send the whole of ``fb`` to the panel."""
        if (fb.width, fb.height) != (self.width, self.height):
            raise ValueError(
                f"frame of {fb.width}x{fb.height} does not fit a "
                f"{self.width}x{self.height} panel"
            )
        data = fb.to_bytes()
        with self._lock:
            self.last_frame = data
            self.frames_pushed += 1
            if self.sink is not None:
                self.sink(data)


class DisplayManager:
    """Owns both panels and refreshes them together."""

    def __init__(self, lcd1: Screen | None = None, lcd2: Screen | None = None) -> None:
        self.lcd1 = lcd1 if lcd1 is not None else Screen("lcd1")
        self.lcd2 = lcd2 if lcd2 is not None else Screen("lcd2")

    @property
    def screens(self) -> tuple[Screen, Screen]:
        return self.lcd1, self.lcd2

    def update_displays(self) -> None:
        """Push each panel's own frame buffer to it."""
        for screen in self.screens:
            screen.push(screen.fb)

    def clear(self, color: int) -> None:
        """Fill both frame buffers with one color without pushing them."""
        for screen in self.screens:
            screen.fb.clear(color)