"""Loading image files as 8-bit linear RGB pixel data."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

from PIL import Image

BYTES_PER_PIXEL = 3

_MAGENTA = (255, 0, 255)
_LDR_GAMMA = 2.2
_SEARCH_DEPTH = 6


def float_to_byte(value: float) -> int:
    """Map a [0.0, 1.0] component to a byte, clamping values outside the range."""
    if value <= 0.0:
        return 0
    if 1.0 <= value:
        return 255
    return int(256.0 * value)


# 8-bit images are stored gamma-encoded; this table linearises each level.
_LINEAR_BYTES = bytes(
    float_to_byte((level / 255.0) ** _LDR_GAMMA) for level in range(256)
)


def _clamp(x: int, low: int, high: int) -> int:
    """Clamp ``x`` to the half-open range [low, high)."""
    if x < low:
        return low
    if x < high:
        return x
    return high - 1


def _candidates(filename: str) -> Iterator[Path]:
    imagedir = os.environ.get("RTW_IMAGES")
    if imagedir is not None:
        yield Path(imagedir) / filename
    yield Path(filename)
    for level in range(_SEARCH_DEPTH + 1):
        yield Path(*([os.pardir] * level), "images", filename)


class RtwImage:
    """An RGB image held as linear bytes, row by row from the top left.

    Given a file name, the image is looked for in the directory named by the
    ``RTW_IMAGES`` environment variable, then as given, then in ``images/``
    and in the ``images/`` directories of up to six parent directories.
    """

    def __init__(self, image_filename: str | os.PathLike[str] | None = None) -> None:
        self._data: bytes | None = None
        self._width = 0
        self._height = 0
        self._bytes_per_scanline = 0

        if image_filename is None:
            return

        name = os.fspath(image_filename)
        if any(self.load(candidate) for candidate in _candidates(name)):
            return

        print(f"ERROR: Could not load image file '{name}'.", file=sys.stderr)

    def load(self, filename: str | os.PathLike[str]) -> bool:
        """Load the image in ``filename``; return True on success."""
        try:
            with Image.open(filename) as img:
                rgb = img.convert("RGB")
                width, height = rgb.size
                raw = rgb.tobytes()
        except (OSError, ValueError):
            self._data = None
            self._width = self._height = 0
            self._bytes_per_scanline = 0
            return False

        self._width = width
        self._height = height
        self._bytes_per_scanline = width * BYTES_PER_PIXEL
        self._data = raw.translate(_LINEAR_BYTES)
        return True

    def width(self) -> int:
        """Image width in pixels, or 0 if nothing is loaded."""
        return 0 if self._data is None else self._width

    def height(self) -> int:
        """Image height in pixels, or 0 if nothing is loaded."""
        return 0 if self._data is None else self._height

    def pixel_data(self, x: int, y: int) -> tuple[int, int, int]:
        """The RGB bytes of the pixel at (x, y), clamped to the image; magenta if empty."""
        if self._data is None:
            return _MAGENTA

        x = _clamp(x, 0, self._width)
        y = _clamp(y, 0, self._height)

        start = y * self._bytes_per_scanline + x * BYTES_PER_PIXEL
        r, g, b = self._data[start:start + BYTES_PER_PIXEL]
        return r, g, b