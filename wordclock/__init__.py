"""Word clock LED matrix, font, settings, file loading and firmware update helpers."""

__version__ = "10"