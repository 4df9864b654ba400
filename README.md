# dualscreen

Drawing and control toolkit for a device with two 240×240 screens that
use 16-bit RGB565 colour. It uses only the standard library.

## Modules

- **`dualscreen.draw`**: `FrameBuffer` (pixels, lines, rectangles,
  circles, `to_bytes`), the `Point` and `Rect` value types, the colour
  helpers `rgb_to_565` and `wheel_color`, and `draw_1bit_image` for
  packed, MSB-first monochrome bitmaps. The bitmaps can be shrunk by an
  integer `scale`.
- **`dualscreen.fonts`**: `FontRom` (a byte image of a font flash chip),
  `FontIndex` (where the 8×16 ASCII and 16×16 GB2312 glyph tables sit in
  that image), `utf8_to_gb2312`, and `FontRenderer`, which draws text.
- **`dualscreen.protocol`**: the framed command packet. A packet has a
  `0xAA` header, a command, a length, the data, a checksum and a `0x55`
  tail. The module provides `Packet`, `encode_packet`, `parse_packet`,
  `calculate_checksum` and `verify_checksum`. Malformed input raises
  `PacketError`.
- **`dualscreen.timer`**: a stopwatch `Timer` and a `PeriodicTimer`. Both
  count milliseconds from `monotonic_millis`, or from any clock you pass
  in.
- **`dualscreen.animation`**: `FadeAnimation` blends a rectangle's
  colour. `SlideAnimation` moves a rectangle.
- **`dualscreen.ui`**: `Label` and `Button` widgets.
- **`dualscreen.pages`**: the abstract `Page`, and a `PageManager` that
  switches between pages.
- **`dualscreen.settings`**: `Settings` holds brightness, contrast and
  the default app, kept in a 32-byte file.
- **`dualscreen.display`**: `Screen`, which holds one panel's frame
  buffer, and `DisplayManager`, which holds two screens.
- **`dualscreen.apps`**: `AppManager` runs one registered app at a time
  in a background thread. `CommandExecutor` acts on parsed packets.
- **`dualscreen.demos`**: three demo apps (`demo01`, `demo02`, `demo03`)
  and `register_demos`.

## Drawing

```python
from dualscreen.draw import FrameBuffer, rgb_to_565

fb = FrameBuffer()                 # 240x240, all black
fb.fill_circle(120, 120, 20, rgb_to_565(255, 0, 0))
fb.draw_rect(10, 10, 50, 30, 0xFFFF)
print(hex(fb.get_pixel(120, 120)))  # 0xf800
raw = fb.to_bytes()                 # big-endian 16-bit pixels, row by row
```

Drawing outside the buffer is ignored, so shapes may run past the edges.
`get_pixel` raises `IndexError` for a pixel outside the buffer.

## Text

Glyphs are read from an image of the font chip. You supply the image:

```python
from pathlib import Path
from dualscreen.fonts import FontRom, FontRenderer

renderer = FontRenderer(FontRom(Path("font.bin").read_bytes()))
end_x = renderer.draw_string(fb, 10, 10, "Hello 你好", 0xFFFF)
```

ASCII characters are 8 pixels wide and Chinese characters 16 pixels wide.
Characters that have no GB2312 code are skipped. Addresses past the end of
the image read as zero bytes, so an empty `FontRom()` draws nothing.
`FontIndex.set_font_info` moves the glyph tables to other addresses.

## Packets

```python
from dualscreen.protocol import CMD_RUN_APP, PacketError, encode_packet, parse_packet

frame = encode_packet(CMD_RUN_APP, bytes([0x02]))
packet = parse_packet(frame)
assert packet.data == b"\x02"

try:
    parse_packet(b"\x00\x01\x02")
except PacketError as exc:
    print("rejected:", exc)
```

`parse_packet` skips any bytes before the first `0xAA` header. It rejects
a buffer that is too short or truncated, one with no header, one with the
wrong tail byte, and one with a bad checksum. The checksum is the sum of
the header, command, length and data bytes, modulo 256. The data is
limited to 255 bytes.

## Running apps

An app is a callable that takes an `AppContext`. Through the context it
reaches `ctx.display`, `ctx.renderer`, `ctx.millis()` and `ctx.sleep(ms)`.
When a stop is requested, `ctx.sleep` raises `AppStopped`, and this ends
the app.

```python
from dualscreen.apps import AppManager, CommandExecutor
from dualscreen.demos import register_demos
from dualscreen.display import DisplayManager
from dualscreen.protocol import APP_ID_DEMO02, CMD_RUN_APP, encode_packet, parse_packet

display = DisplayManager()
manager = AppManager(display, renderer)
register_demos(manager)

executor = CommandExecutor(manager)
executor.execute(parse_packet(encode_packet(CMD_RUN_APP, bytes([APP_ID_DEMO02]))))
manager.wait()
print(display.lcd1.frames_pushed)
```

The methods behave as follows:

- `run_app` first stops any app that is running. It then starts the
  app registered under the given id and returns `False` if no app has
  that id.
- `stop_current_app` stops the running app, clears both frame buffers
  to black and pushes them to the screens.
- An exception raised by an app is logged and kept in
  `AppManager.last_error`.

## Settings

```python
from dualscreen.settings import Settings

settings = Settings("settings.bin")  # defaults: 255, 128, app 0x01
settings.brightness = 200            # saved at once
```

A value outside 0 to 255 raises `ValueError`. So does a settings file that
is not exactly 32 bytes long.

## What it does not do

The package holds frames in memory. It has no drivers for the panels or
for the font chip. A pushed frame is kept in `Screen.last_frame`, and is
also handed as bytes to the `sink` callable if you give one to `Screen`.
Sending the frame anywhere is up to you. The same holds for packets: the
package does not read packets from a serial port or any other link. You
pass it the bytes yourself. The package has no command-line program.

## Tests

The tests use pytest, which is listed in the `test` extra:

```
pip install .[test]
pytest
```