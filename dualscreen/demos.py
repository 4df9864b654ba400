"""Built-in demonstration apps."""

from __future__ import annotations

import logging

from .apps import AppContext, AppManager
from .draw import SCREEN_HEIGHT, SCREEN_WIDTH, wheel_color
from .protocol import APP_ID_DEMO01, APP_ID_DEMO02, APP_ID_DEMO03

log = logging.getLogger(__name__)

BLACK = 0x0000
WHITE = 0xFFFF
RED = 0xF800
GREEN = 0x07E0
BLUE = 0x001F

_UINT32 = 0xFFFFFFFF


def _both(ctx: AppContext, color: int) -> None:
    ctx.display.clear(color)


def demo01(ctx: AppContext) -> None:
    """Flash red, green and blue three times, then show a ready message."""
    fb1, fb2 = ctx.display.lcd1.fb, ctx.display.lcd2.fb
    for _ in range(3):
        for color in (RED, GREEN, BLUE):
            _both(ctx, color)
            ctx.display.update_displays()
            ctx.sleep(500)
    _both(ctx, BLACK)
    for fb in (fb1, fb2):
        ctx.renderer.draw_string(fb, 60, 100, "系统初始化完毕", WHITE)
    ctx.display.update_displays()


def demo02(ctx: AppContext) -> None:
    """Show greetings in ASCII and Chinese for five seconds."""
    fb1, fb2 = ctx.display.lcd1.fb, ctx.display.lcd2.fb
    draw = ctx.renderer.draw_string
    fb1.clear(BLUE)
    fb2.clear(RED)
    draw(fb1, 50, 100, "Demo02", WHITE)
    draw(fb1, 30, 120, "Hello", WHITE)
    draw(fb1, 30, 140, "你好", WHITE)
    draw(fb1, 30, 160, "你好这个世界", WHITE)
    draw(fb2, 50, 100, "Demo02", WHITE)
    draw(fb2, 30, 120, "World", WHITE)
    draw(fb2, 30, 140, "你好", WHITE)
    draw(fb2, 30, 160, "你好世界", WHITE)
    ctx.display.update_displays()
    ctx.sleep(5000)
    _both(ctx, BLACK)
    ctx.display.update_displays()


def demo03(ctx: AppContext) -> None:
    """Bounce a color-cycling circle on each screen for ten seconds."""
    fb1, fb2 = ctx.display.lcd1.fb, ctx.display.lcd2.fb
    draw = ctx.renderer.draw_string
    radius = 20
    start = ctx.millis()
    x1 = x2 = SCREEN_WIDTH // 2
    y1 = y2 = SCREEN_HEIGHT // 2
    dx1, dy1 = 2, 1
    dx2, dy2 = -2, -1
    fps_start = ctx.millis()
    frames = 0
    fps_text = ""

    while (ctx.millis() - start) & _UINT32 < 10000:
        _both(ctx, BLACK)
        now = ctx.millis()
        fb1.fill_circle(x1, y1, radius, wheel_color(now // 10))
        fb2.fill_circle(x2, y2, radius, wheel_color(now // 10 + 100))
        draw(fb1, 50, 20, "屏幕1测试程序 03", WHITE)
        draw(fb2, 50, 20, "屏幕2测试程序 03", WHITE)
        draw(fb1, 20, 200, "移动的炫彩圆", WHITE)
        draw(fb2, 20, 200, "移动的炫彩圆", WHITE)
        ctx.display.update_displays()

        x1 += dx1
        y1 += dy1
        x2 += dx2
        y2 += dy2
        if x1 <= radius or x1 >= SCREEN_WIDTH - radius:
            dx1 = -dx1
        if y1 <= radius or y1 >= SCREEN_HEIGHT - radius:
            dy1 = -dy1
        if x2 <= radius or x2 >= SCREEN_WIDTH - radius:
            dx2 = -dx2
        if y2 <= radius or y2 >= SCREEN_HEIGHT - radius:
            dy2 = -dy2

        frames += 1
        now = ctx.millis()
        span = (now - fps_start) & _UINT32
        if span >= 1000:
            fps = frames / (span / 1000.0)
            fps_text = f"FPS: {fps:.1f}"
            fps_start = now
            frames = 0
            log.info(fps_text)

        draw(fb1, 10, 40, fps_text, WHITE)
        draw(fb2, 10, 40, fps_text, WHITE)
        ctx.sleep(10)

    _both(ctx, BLACK)
    ctx.display.update_displays()


def register_demos(manager: AppManager) -> None:
    """Register the demo apps under their protocol ids."""
    manager.register_app(APP_ID_DEMO01, demo01)
    manager.register_app(APP_ID_DEMO02, demo02)
    manager.register_app(APP_ID_DEMO03, demo03)