import threading

import pytest

from dualscreen.apps import AppContext, AppManager, AppStopped
from dualscreen.demos import demo01, demo02, demo03, register_demos
from dualscreen.display import DisplayManager, Screen
from dualscreen.draw import wheel_color
from dualscreen.fonts import FontRenderer, FontRom

BLANK_FRAME = bytes(240 * 240 * 2)


class FakeClock:
    def __init__(self, scale=1):
        self.now = 0
        self.scale = scale
        self.slept = []

    def millis(self):
        return self.now

    def delay(self, ms):
        self.slept.append(ms)
        self.now += ms * self.scale


def make_ctx(rom=b"", scale=1):
    frames1, frames2 = [], []
    display = DisplayManager(Screen("lcd1", sink=frames1.append), Screen("lcd2", sink=frames2.append))
    clock = FakeClock(scale)
    ctx = AppContext(display, FontRenderer(FontRom(rom)), clock=clock.millis, delay=clock.delay)
    return ctx, clock, frames1, frames2


def pixel(frame, x, y):
    offset = (y * 240 + x) * 2
    return int.from_bytes(frame[offset:offset + 2], "big")


FULL_ROM = bytes([0xFF]) * 0x100000


def test_demo01_flashes_rgb_three_times():
    ctx, clock, frames1, frames2 = make_ctx()
    demo01(ctx)
    expected = [0xF800, 0x07E0, 0x001F] * 3 + [0x0000]
    assert [pixel(f, 0, 0) for f in frames1] == expected
    assert [pixel(f, 0, 0) for f in frames2] == expected
    assert clock.slept == [500] * 9


def test_demo01_draws_message():
    ctx, _, frames1, frames2 = make_ctx(FULL_ROM)
    demo01(ctx)
    for frame in (frames1[-1], frames2[-1]):
        assert pixel(frame, 60, 100) == 0xFFFF
        assert pixel(frame, 59, 100) == 0x0000


def test_demo02_backgrounds_then_black():
    ctx, clock, frames1, frames2 = make_ctx()
    demo02(ctx)
    assert clock.slept == [5000]
    assert pixel(frames1[0], 0, 0) == 0x001F
    assert pixel(frames2[0], 0, 0) == 0xF800
    assert frames1[-1] == BLANK_FRAME
    assert frames2[-1] == BLANK_FRAME


def test_demo02_draws_text():
    ctx, _, frames1, frames2 = make_ctx(FULL_ROM)
    demo02(ctx)
    assert pixel(frames1[0], 50, 100) == 0xFFFF
    assert pixel(frames2[0], 50, 100) == 0xFFFF
    assert pixel(frames1[0], 49, 100) == 0x001F


def test_demo02_stops_when_asked():
    stop = threading.Event()
    stop.set()
    display = DisplayManager()
    ctx = AppContext(display, FontRenderer(FontRom()), stop, delay=lambda ms: None)
    with pytest.raises(AppStopped):
        demo02(ctx)
    assert display.lcd1.fb.get_pixel(0, 0) == 0x001F


def test_demo03_draws_circles_and_ends_black():
    ctx, clock, frames1, frames2 = make_ctx(scale=100)
    demo03(ctx)
    assert pixel(frames1[0], 120, 120) == wheel_color(0)
    assert pixel(frames2[0], 120, 120) == wheel_color(100)
    assert pixel(frames1[0], 0, 0) == 0x0000
    assert frames1[-1] == BLANK_FRAME
    assert frames2[-1] == BLANK_FRAME
    assert set(clock.slept) == {10}
    assert clock.now >= 10000


def test_demo03_circles_move_apart():
    ctx, _, frames1, frames2 = make_ctx(scale=100)
    demo03(ctx)
    # The second frame is drawn at 1000 ms, with the circles moved one step.
    assert pixel(frames1[1], 122 + 20, 121) == wheel_color(100)
    assert pixel(frames1[1], 122 + 21, 121) == 0x0000
    assert pixel(frames2[1], 118 - 20, 119) == wheel_color(200)
    assert pixel(frames2[1], 118 - 21, 119) == 0x0000


def test_register_demos():
    manager = AppManager(DisplayManager())
    register_demos(manager)
    assert manager.get_app(0x01) is demo01
    assert manager.get_app(0x02) is demo02
    assert manager.get_app(0x03) is demo03
    assert manager.get_app(0x04) is None