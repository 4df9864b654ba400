"""Pages of a screen and a manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .draw import FrameBuffer


class Page(ABC):
    """One screen of content with lifecycle hooks."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the page when it is added."""

    @abstractmethod
    def update(self) -> None:
        """Advance the page's state."""

    @abstractmethod
    def draw(self, fb: FrameBuffer) -> None:
        """Draw the page into ``fb``."""

    @abstractmethod
    def on_enter(self) -> None:
        """Called when the page becomes current."""

    @abstractmethod
    def on_exit(self) -> None:
        """Called when the page stops being current."""


class PageManager:
    """Holds pages and forwards update and draw to the current one."""

    def __init__(self) -> None:
        self.pages: list[Page] = []
        self.current_index = -1
        self.current_page: Page | None = None

    def add_page(self, page: Page) -> None:
        self.pages.append(page)
        page.init()

    def set_current_page(self, index: int) -> None:
        """Switch to the page at ``index``; an index out of range is ignored."""
        if not 0 <= index < len(self.pages):
            return
        if self.current_page is not None:
            self.current_page.on_exit()
        self.current_index = index
        self.current_page = self.pages[index]
        self.current_page.on_enter()

    def update(self) -> None:
        if self.current_page is not None:
            self.current_page.update()

    def draw(self, fb: FrameBuffer) -> None:
        if self.current_page is not None:
            self.current_page.draw(fb)