import pytest

from dualscreen.animation import Animation, FadeAnimation, SlideAnimation
from dualscreen.draw import FrameBuffer, Point


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def test_animation_is_abstract():
    with pytest.raises(TypeError):
        Animation(100)


def test_fade_starts_at_start_color():
    clock = FakeClock()
    fade = FadeAnimation(0, 0, 4, 4, 0xF800, 0x001F, 100, clock)
    fade.update()
    assert fade.color == 0xF800
    assert fade.is_finished() is False


def test_fade_reaches_end_color_and_finishes():
    clock = FakeClock()
    fade = FadeAnimation(0, 0, 4, 4, 0xF800, 0x001F, 100, clock)
    clock.now = 100
    fade.update()
    assert fade.color == 0x001F
    assert fade.is_finished() is True
    clock.now = 50
    fade.update()
    assert fade.color == 0x001F


def test_fade_midway_components_between_ends():
    clock = FakeClock()
    fade = FadeAnimation(0, 0, 4, 4, 0x0000, 0xFFFF, 100, clock)
    clock.now = 50
    fade.update()
    r, g, b = (fade.color >> 11) & 0x1F, (fade.color >> 5) & 0x3F, fade.color & 0x1F
    assert 0 < r < 0x1F
    assert 0 < g < 0x3F
    assert 0 < b < 0x1F
    assert fade.is_finished() is False


def test_fade_draw_fills_rect():
    clock = FakeClock()
    fade = FadeAnimation(2, 3, 4, 5, 0x07E0, 0x07E0, 100, clock)
    fb = FrameBuffer(20, 20)
    fade.draw(fb)
    drawn = {(x, y) for y in range(20) for x in range(20) if fb.get_pixel(x, y) == 0x07E0}
    assert drawn == {(x, y) for x in range(2, 6) for y in range(3, 8)}


def test_zero_duration_finishes_immediately():
    fade = FadeAnimation(0, 0, 1, 1, 0xF800, 0x001F, 0, FakeClock())
    fade.update()
    assert fade.is_finished() is True
    assert fade.color == 0x001F


def test_slide_moves_and_finishes():
    clock = FakeClock()
    slide = SlideAnimation(0, 0, 100, 40, 5, 5, 0xFFFF, 200, clock)
    slide.update()
    assert slide.position == Point(0, 0)
    clock.now = 100
    slide.update()
    assert 0 < slide.position.x < 100
    assert 0 < slide.position.y < 40
    clock.now = 250
    slide.update()
    assert slide.position == Point(100, 40)
    assert slide.is_finished() is True


def test_slide_backwards_stays_in_range():
    clock = FakeClock()
    slide = SlideAnimation(100, 0, 0, 0, 5, 5, 0xFFFF, 100, clock)
    clock.now = 30
    slide.update()
    assert 0 < slide.position.x < 100


def test_slide_draw_at_position():
    clock = FakeClock()
    slide = SlideAnimation(1, 1, 10, 10, 2, 2, 0xF800, 100, clock)
    clock.now = 100
    slide.update()
    fb = FrameBuffer(20, 20)
    slide.draw(fb)
    drawn = {(x, y) for y in range(20) for x in range(20) if fb.get_pixel(x, y) == 0xF800}
    assert drawn == {(10, 10), (11, 10), (10, 11), (11, 11)}