"""A logical LED grid rendered onto a serpentine strip of pixels."""

from __future__ import annotations

import enum
from typing import Protocol, Sequence

from .font import FONT_HEIGHT, FONT_WIDTH
from .settings import MAX_CLOCK_SIZE, ClockSettings, Mode


def color(red: int, green: int, blue: int) -> int:
    """Pack 8-bit red, green and blue components into a 24-bit colour."""
    return ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


RED = color(255, 0, 0)
GREEN = color(0, 255, 0)
BLUE = color(0, 0, 255)
WHITE = color(255, 255, 255)
BLACK = color(0, 0, 0)


class LedType(enum.IntEnum):
    """What a lit LED represents; decides its colour."""

    OFF = 0
    TIME = 1
    NAME = 2
    ICON = 3
    OTHER = 4


class PixelStrip(Protocol):
    def set_pixel_color(self, index: int, color: int) -> None: ...

    def show(self) -> None: ...


class LEDMatrix:
    """Grid of LED roles, drawn onto a pixel strip wired row by row in a zigzag."""

    def __init__(self, pixels: PixelStrip, settings: ClockSettings) -> None:
        self.pixels = pixels
        self.settings = settings
        self.leds = [[LedType.OFF] * MAX_CLOCK_SIZE for _ in range(MAX_CLOCK_SIZE)]

    def set_pixel_type(self, x: int, y: int, led_type: LedType) -> None:
        """Set one cell; positions outside the clock are ignored."""
        if 0 <= x < self.settings.clock_width and 0 <= y < self.settings.clock_height:
            self.leds[x][y] = LedType(led_type)

    def clear(self) -> None:
        """Turn every cell of the clock off."""
        for row in self.leds[: self.settings.clock_width]:
            row[: self.settings.clock_height] = [LedType.OFF] * self.settings.clock_height

    def _color_of(self, led_type: LedType) -> int:
        if led_type is LedType.OFF:
            return BLACK
        if led_type is LedType.OTHER:
            return GREEN
        if self.settings.mode is Mode.RAINBOW:
            return WHITE
        return {
            LedType.TIME: self.settings.color_time,
            LedType.NAME: self.settings.color_name,
            LedType.ICON: self.settings.color_icon,
        }[led_type]

    def draw(self, show: bool) -> None:
        """Push the grid's colours to the strip, and show them if asked."""
        for row, cells in enumerate(self.leds[: self.settings.clock_width]):
            for col, led_type in enumerate(cells[: self.settings.clock_height]):
                self.pixels.set_pixel_color(self.pixel_index(row, col), self._color_of(led_type))
        if show:
            self.pixels.show()

    def print_glyph(self, drawing: Sequence[int], xpos: int, ypos: int,
                    led_type: LedType) -> None:
        """Mark the set bits of a font glyph with its top-left corner at (xpos, ypos)."""
        for i, bits in enumerate(drawing[:FONT_HEIGHT]):
            for j in range(FONT_WIDTH):
                if bits & (1 << j):
                    self.set_pixel_type(i + ypos, FONT_WIDTH - j - 1 + xpos, led_type)

    def pixel_index(self, row: int, col: int) -> int:
        """Strip index of a cell; odd rows run right to left."""
        width = self.settings.clock_width
        if row % 2:
            return row * width + (width - 1 - col)
        return row * width + col

    def pixel_row(self, i: int) -> int:
        """Row of the cell at strip index i."""
        return i // self.settings.clock_width

    def pixel_col(self, i: int) -> int:
        """Column of the cell at strip index i."""
        width = self.settings.clock_width
        row, col = divmod(i, width)
        if row % 2:
            col = width - 1 - col
        return col