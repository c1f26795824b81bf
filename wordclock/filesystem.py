"""Reading files from the clock's storage."""

from __future__ import annotations

import os
from pathlib import Path


def load_from_file(file_name: str | os.PathLike[str]) -> str:
    """Return the file's contents, one character per byte, or "" if it cannot be read."""
    try:
        data = Path(file_name).read_bytes()
    except OSError:
        return ""
    return data.decode("latin-1")