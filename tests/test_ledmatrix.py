import pytest

from wordclock.font import FONT_I, FONT_NUMBERS
from wordclock.ledmatrix import (
    BLACK,
    GREEN,
    RED,
    WHITE,
    LEDMatrix,
    LedType,
    color,
)
from wordclock.settings import ClockSettings, Mode


class FakeStrip:
    def __init__(self):
        self.colors = {}
        self.shown = 0

    def set_pixel_color(self, index, value):
        self.colors[index] = value

    def show(self):
        self.shown += 1


@pytest.fixture
def settings():
    return ClockSettings(clock_width=11, clock_height=11,
                         color_time=color(1, 2, 3), color_name=color(4, 5, 6),
                         color_icon=color(7, 8, 9))


@pytest.fixture
def strip():
    return FakeStrip()


@pytest.fixture
def matrix(strip, settings):
    return LEDMatrix(strip, settings)


def test_color_packing():
    assert color(255, 0, 0) == RED == 0xFF0000
    assert color(255, 255, 255) == WHITE == 0xFFFFFF
    assert color(0, 255, 0) == GREEN == 0x00FF00
    assert color(0, 0, 0) == BLACK == 0


def test_first_cells_of_even_and_odd_rows(matrix, settings):
    width = settings.clock_width
    assert matrix.pixel_index(0, 0) == 0
    assert matrix.pixel_index(1, 0) == 2 * width - 1
    assert matrix.pixel_index(1, width - 1) == width


def test_index_round_trip(matrix, settings):
    total = settings.clock_width * settings.clock_height
    for i in range(total):
        assert matrix.pixel_index(matrix.pixel_row(i), matrix.pixel_col(i)) == i


def test_indices_cover_strip_once(matrix, settings):
    indices = {matrix.pixel_index(r, c)
               for r in range(settings.clock_width) for c in range(settings.clock_height)}
    assert indices == set(range(settings.clock_width * settings.clock_height))


def test_set_pixel_type_ignores_out_of_range(matrix, settings):
    matrix.set_pixel_type(settings.clock_width, 0, LedType.TIME)
    matrix.set_pixel_type(0, settings.clock_height, LedType.TIME)
    matrix.set_pixel_type(-1, 0, LedType.TIME)
    assert all(cell is LedType.OFF for row in matrix.leds for cell in row)


def test_set_and_clear(matrix):
    matrix.set_pixel_type(2, 3, LedType.NAME)
    assert matrix.leds[2][3] is LedType.NAME
    matrix.clear()
    assert matrix.leds[2][3] is LedType.OFF


def test_draw_uses_configured_colors(matrix, strip, settings):
    matrix.set_pixel_type(0, 0, LedType.TIME)
    matrix.set_pixel_type(0, 1, LedType.NAME)
    matrix.set_pixel_type(0, 2, LedType.ICON)
    matrix.set_pixel_type(0, 3, LedType.OTHER)
    matrix.draw(show=False)
    assert strip.shown == 0
    assert strip.colors[matrix.pixel_index(0, 0)] == settings.color_time
    assert strip.colors[matrix.pixel_index(0, 1)] == settings.color_name
    assert strip.colors[matrix.pixel_index(0, 2)] == settings.color_icon
    assert strip.colors[matrix.pixel_index(0, 3)] == GREEN
    assert strip.colors[matrix.pixel_index(0, 4)] == BLACK
    assert len(strip.colors) == settings.clock_width * settings.clock_height


def test_draw_rainbow_forces_white(matrix, strip, settings):
    settings.mode = Mode.RAINBOW
    matrix.set_pixel_type(1, 1, LedType.TIME)
    matrix.set_pixel_type(1, 2, LedType.OTHER)
    matrix.draw(show=True)
    assert strip.shown == 1
    assert strip.colors[matrix.pixel_index(1, 1)] == WHITE
    assert strip.colors[matrix.pixel_index(1, 2)] == GREEN


def test_print_glyph_places_vertical_bar(matrix):
    matrix.print_glyph(FONT_I, 2, 3, LedType.ICON)
    lit = {(r, c) for r, row in enumerate(matrix.leds) for c, cell in enumerate(row)
           if cell is LedType.ICON}
    assert lit == {(3 + i, 2 + 1) for i in range(5)}


def test_print_glyph_lights_one_cell_per_bit(matrix):
    drawing = FONT_NUMBERS[8]
    matrix.print_glyph(drawing, 0, 0, LedType.TIME)
    lit = sum(cell is LedType.TIME for row in matrix.leds for cell in row)
    assert lit == sum(bin(bits).count("1") for bits in drawing)


def test_print_glyph_clipped_at_edge(matrix, settings):
    matrix.print_glyph(FONT_I, 0, settings.clock_width - 2, LedType.TIME)
    lit = [(r, c) for r, row in enumerate(matrix.leds) for c, cell in enumerate(row)
           if cell is LedType.TIME]
    assert all(r < settings.clock_width for r, _ in lit)
    assert len(lit) == 2