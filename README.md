# wordclock

Building blocks for a word clock. The package includes:

- an LED matrix model that maps logical pixels onto a serpentine pixel strip
- a small 3×5 font
- the clock's settings and the layout of its stored settings block
- a firmware and filesystem update checker and downloader

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `wordclock.settings`
  - `Mode` lists what the clock face shows: `WORD_CLOCK`, `DIGITAL_CLOCK` or `RAINBOW`.
  - `ClockSettings` is a dataclass. It holds the colours, the brightness, the night-mode times and brightness, the clock width and height, the layout and the time zone.
  - `ClockSettings` raises `ValueError` in two cases:
    - the width or height is outside 0–20
    - the time zone is 50 bytes or longer
  - `eeprom_offsets()` returns the byte offset of each persistent setting, in storage order.
  - The module also holds the timing constants and `EEPROM_SIZE`.
- `wordclock.font`
  - `glyph(char)` returns the five row bitmaps of a digit, `I` or `P`. The leftmost column is the highest bit.
  - `glyph` raises `ValueError` for any other character.
- `wordclock.ledmatrix`
  - `LEDMatrix(pixels, settings)` keeps a grid of `LedType` values (`OFF`, `TIME`, `NAME`, `ICON`, `OTHER`). Its methods are:
    - `set_pixel_type` ignores positions outside the clock.
    - `clear`
    - `draw(show)` pushes colours through `pixels.set_pixel_color(index, color)`. It calls `pixels.show()` when `show` is true.
    - `print_glyph`
    - `pixel_index`, `pixel_row` and `pixel_col` convert between cells and strip indices. Odd rows run right to left.
  - `draw` picks each cell's colour like this:
    - `TIME`, `NAME` and `ICON` cells take their colours from the settings. In rainbow mode they are white instead.
    - `OTHER` cells are green.
    - `OFF` cells are black.
  - `color(red, green, blue)` packs a 24-bit colour value.
- `wordclock.filesystem`
  - `load_from_file(file_name)` returns a file's contents, one character per byte.
  - If the file cannot be read, it returns an empty string.
- `wordclock.fota`
  - `FirmwareUpdater(firmware_type, firmware_version, filesystem_version, check_url="", use_device_id=False)` has these methods:
    - `check()` fetches a JSON version document from `check_url` over HTTPS without certificate checks. If `use_device_id` is true, it appends `?id=<device_id()>` to the URL.
    - `evaluate(document)` decides whether a newer firmware or filesystem image applies and returns an `UpdateInfo` or `None`.
    - `exec_ota(destination)` downloads the remembered image into the file `destination` and returns whether it was written completely.
    - `force_update(host, port, path, destination)` downloads the given image regardless of the installed version.
    - `on_progress(fn)` and `on_end(fn)` register callbacks.
  - `header_value`, `parse_response_headers` and `device_id` are helpers it uses.
  - Progress is reported through the `logging` module.

## Example

```python
from wordclock.font import glyph
from wordclock.ledmatrix import LEDMatrix, LedType
from wordclock.settings import ClockSettings


class Strip:
    def __init__(self, count):
        self.colors = [0] * count

    def set_pixel_color(self, index, color):
        self.colors[index] = color

    def show(self):
        pass


settings = ClockSettings(clock_width=11, clock_height=11, color_time=0xFF0000)
strip = Strip(11 * 11)
matrix = LEDMatrix(strip, settings)
matrix.print_glyph(glyph("4"), 0, 0, LedType.TIME)
matrix.draw(show=True)
```

## What it does not do

- **No hardware driver.** It does not drive LEDs. You supply the object that receives pixel colours.
- **No command-line program.** There is none.
- **No time keeping or text layout.** It does not keep time or turn the time into words on the clock face.
- **No log forwarding.** It does not send log messages over the network.
- **No settings storage.** It does not read or write the settings block. It only describes its layout.
- **No install or restart.** A downloaded update image is saved to a file. It is not flashed, and nothing is restarted.