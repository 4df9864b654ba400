"""Time-driven animations that draw into a frame buffer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .draw import FrameBuffer, Point
from .timer import Clock, monotonic_millis


class Animation(ABC):
    """An animation that runs for ``duration`` milliseconds from its creation."""

    def __init__(self, duration: int, clock: Clock = monotonic_millis) -> None:
        self.duration = duration
        self._clock = clock
        self.start_time = clock()
        self.running = True

    def _progress(self) -> float | None:
        """Fraction of the duration passed, or None once it has ended."""
        elapsed = (self._clock() - self.start_time) & 0xFFFFFFFF
        if elapsed >= self.duration:
            self.running = False
            return None
        return elapsed / self.duration

    @abstractmethod
    def update(self) -> None:
        """Advance the animation to the current time."""

    @abstractmethod
    def draw(self, fb: FrameBuffer) -> None:
        """Draw the current state into ``fb``."""

    def is_finished(self) -> bool:
        return not self.running


def _split(color: int) -> tuple[int, int, int]:
    return (color >> 11) & 0x1F, (color >> 5) & 0x3F, color & 0x1F


class FadeAnimation(Animation):
    """A rectangle whose color blends from one RGB565 color to another."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        start_color: int,
        end_color: int,
        duration: int,
        clock: Clock = monotonic_millis,
    ) -> None:
        super().__init__(duration, clock)
        self.rect = (x, y, width, height)
        self.start_color = start_color
        self.end_color = end_color
        self.color = start_color

    def update(self) -> None:
        if not self.running:
            return
        progress = self._progress()
        if progress is None:
            self.color = self.end_color
            return
        r, g, b = (
            int(start + (end - start) * progress)
            for start, end in zip(_split(self.start_color), _split(self.end_color))
        )
        self.color = ((r << 11) | (g << 5) | b) & 0xFFFF

    def draw(self, fb: FrameBuffer) -> None:
        fb.fill_rect(*self.rect, self.color)


class SlideAnimation(Animation):
    """A solid rectangle moving in a straight line."""

    def __init__(
        self,
        start_x: int,
        start_y: int,
        end_x: int,
        end_y: int,
        width: int,
        height: int,
        color: int,
        duration: int,
        clock: Clock = monotonic_millis,
    ) -> None:
        super().__init__(duration, clock)
        self.start = Point(start_x, start_y)
        self.end = Point(end_x, end_y)
        self.position = self.start
        self.width = width
        self.height = height
        self.color = color

    def update(self) -> None:
        if not self.running:
            return
        progress = self._progress()
        if progress is None:
            self.position = self.end
            return
        self.position = Point(
            int(self.start.x + (self.end.x - self.start.x) * progress),
            int(self.start.y + (self.end.y - self.start.y) * progress),
        )

    def draw(self, fb: FrameBuffer) -> None:
        fb.fill_rect(self.position.x, self.position.y, self.width, self.height, self.color)