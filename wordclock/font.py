"""A tiny 3x5 bitmap font for digits and a few letters."""

from __future__ import annotations

FONT_WIDTH = 3
FONT_HEIGHT = 5

FONT_NUMBERS: tuple[tuple[int, ...], ...] = (
    (0b111, 0b101, 0b101, 0b101, 0b111),  # 0
    (0b001, 0b011, 0b001, 0b001, 0b001),  # 1
    (0b111, 0b001, 0b111, 0b100, 0b111),  # 2
    (0b111, 0b001, 0b111, 0b001, 0b111),  # 3
    (0b101, 0b101, 0b111, 0b001, 0b001),  # 4
    (0b111, 0b100, 0b111, 0b001, 0b111),  # 5
    (0b100, 0b100, 0b111, 0b101, 0b111),  # 6
    (0b111, 0b001, 0b001, 0b001, 0b001),  # 7
    (0b111, 0b101, 0b111, 0b101, 0b111),  # 8
    (0b111, 0b101, 0b111, 0b001, 0b001),  # 9
)

FONT_I: tuple[int, ...] = (0b010, 0b010, 0b010, 0b010, 0b010)
FONT_P: tuple[int, ...] = (0b111, 0b101, 0b111, 0b100, 0b100)

_LETTERS = {"I": FONT_I, "P": FONT_P}


def glyph(char: str) -> tuple[int, ...]:
    """Return the row bitmaps of a character; the leftmost column is the highest bit."""
    if len(char) == 1 and char in "0123456789":
        return FONT_NUMBERS[int(char)]
    try:
        return _LETTERS[char.upper()]
    except KeyError:
        raise ValueError(f"no glyph for {char!r}") from None