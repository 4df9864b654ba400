from dualscreen.draw import FrameBuffer
from dualscreen.fonts import FontIndex, FontRenderer, FontRom
from dualscreen.ui import Button, Label

WHITE = 0xFFFF
BLUE = 0x001F


def _renderer():
    index = FontIndex()
    index.set_font_info(0, 8, 16, 0, 16)
    image = bytearray(256 * 16)
    start = index.ascii_offset("A")
    image[start:start + 16] = b"\xff" * 16
    return FontRenderer(FontRom(bytes(image)), index)


def _lit(fb, color=WHITE):
    return {(x, y) for y in range(fb.height) for x in range(fb.width) if fb.get_pixel(x, y) == color}


def test_label_draws_text():
    fb = FrameBuffer()
    label = Label(5, 6, "A", WHITE, _renderer())
    label.draw(fb)
    assert _lit(fb) == {(x, y) for x in range(5, 13) for y in range(6, 22)}


def test_label_text_can_change():
    fb = FrameBuffer()
    label = Label(0, 0, "A", WHITE, _renderer())
    label.update()
    label.text = "B"
    label.draw(fb)
    assert _lit(fb) == set()


def test_button_background_and_border():
    fb = FrameBuffer()
    button = Button(10, 10, 40, 20, "", BLUE, WHITE, _renderer())
    button.draw(fb)
    border = {(x, y) for x in range(10, 50) for y in (10, 29)} | {(x, y) for x in (10, 49) for y in range(10, 30)}
    assert _lit(fb) == border
    assert _lit(fb, BLUE) == {(x, y) for x in range(11, 49) for y in range(11, 29)}


def test_button_text_is_centered():
    fb = FrameBuffer()
    button = Button(0, 0, 40, 20, "A", BLUE, WHITE, _renderer())
    button.update()
    button.draw(fb)
    columns = sorted({x for x, y in _lit(fb) if y == 5 and 0 < x < 39})
    assert len(columns) == 8
    assert columns[0] - 1 == 38 - columns[-1]
    rows = sorted({y for x, y in _lit(fb) if x == columns[0] and 0 < y < 19})
    assert rows[0] - 1 == 18 - rows[-1]


def test_button_hit_test_includes_edges():
    button = Button(0, 0, 40, 20, "A", BLUE, WHITE, _renderer())
    assert button.is_pressed(40, 20)
    assert button.is_pressed(0, 0)
    assert not button.is_pressed(41, 20)
    assert not button.is_pressed(-1, 0)