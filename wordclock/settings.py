"""Clock configuration: operating modes, timing constants and persistent settings."""

from __future__ import annotations

import enum
from dataclasses import dataclass

VERSION = 10

PERIOD_READTIME = 1000
PERIOD_CHECK_UPDATE = 60 * 30 * 1000
PERIOD_STORE_COLORS = 60 * 1000
PERIOD_NTP_UPDATE = 60 * 1000
PERIOD_NTP_CHECK = PERIOD_NTP_UPDATE * 3
AP_SSID = "JouwWoordklok"
HOSTNAME = "jouwwoordklok"
AUTO_UPDATE = True
NEOPIXEL_PIN = 0

MAX_CLOCK_SIZE = 20
TIMEZONE_SIZE = 50

# Byte sizes of the stored values, in storage order.
_EEPROM_LAYOUT = (
    ("rtc_set", 1),
    ("mode", 4),
    ("color_time", 4),
    ("color_name", 4),
    ("color_icon", 4),
    ("brightness", 1),
    ("night_mode", 1),
    ("night_mode_start_hour", 1),
    ("night_mode_end_hour", 1),
    ("night_mode_start_min", 1),
    ("night_mode_end_min", 1),
    ("clock_width", 1),
    ("clock_height", 1),
    ("clock_layout", MAX_CLOCK_SIZE * MAX_CLOCK_SIZE),
    ("night_mode_brightness", 1),
    ("timezone", TIMEZONE_SIZE),
)

EEPROM_SIZE = sum(size for _, size in _EEPROM_LAYOUT)


class Mode(enum.IntEnum):
    """What the clock face shows."""

    WORD_CLOCK = 0
    DIGITAL_CLOCK = 1
    RAINBOW = 2


def eeprom_offsets() -> dict[str, int]:
    """Return the byte offset of each persistent setting, in storage order."""
    offsets: dict[str, int] = {}
    position = 0
    for name, size in _EEPROM_LAYOUT:
        offsets[name] = position
        position += size
    return offsets


@dataclass
class ClockSettings:
    """Runtime state shared between the clock's components."""

    mode: Mode = Mode.WORD_CLOCK
    color_time: int = 0
    color_name: int = 0
    color_icon: int = 0
    brightness: int = 0
    check_night_mode: bool = False
    night_mode: bool = False
    night_mode_start_hour: int = 0
    night_mode_start_min: int = 0
    night_mode_end_hour: int = 0
    night_mode_end_min: int = 0
    night_mode_brightness: int = 0
    clock_width: int = 0
    clock_height: int = 0
    clock_layout: str = ""
    timezone: str = ""

    def __post_init__(self) -> None:
        self.mode = Mode(self.mode)
        for name in ("clock_width", "clock_height"):
            value = getattr(self, name)
            if not 0 <= value <= MAX_CLOCK_SIZE:
                raise ValueError(f"{name} must be between 0 and {MAX_CLOCK_SIZE}, got {value}")
        if len(self.timezone.encode()) >= TIMEZONE_SIZE:
            raise ValueError(f"timezone must be shorter than {TIMEZONE_SIZE} bytes")