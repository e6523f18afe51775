"""Color samples and their hex / rgb() text forms."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

LOGGER = logging.getLogger("thumbnail_padder.colors")

_INT_RUN = re.compile(r"\d+")
_HEX_COLOR = re.compile(r"#?([0-9a-f]{3}|[0-9a-f]{6})")


class ThumbnailError(Exception):
    """Base class for errors raised while building a thumbnail."""


class FormatError(ThumbnailError, ValueError):
    """Color text could not be parsed."""


@dataclass(frozen=True)
class ColorSample:
    """8-bit RGB color triple."""

    red: int
    green: int
    blue: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


BLACK = ColorSample(0, 0, 0)


def _clamp(value: int) -> int:
    return max(0, min(255, value))


def sample_to_hex(sample: ColorSample) -> str:
    """Format a sample like ``#ff0000``."""

    return "#%02x%02x%02x" % sample.as_tuple()


def sample_to_css(sample: ColorSample) -> str:
    """Format a sample like ``rgb(255, 0, 0)``."""

    return f"rgb({sample.red}, {sample.green}, {sample.blue})"


def parse_sample_text(text: str) -> ColorSample:
    """Read the first three integers of text such as ``rgb(12, 34, 56)``."""

    runs = _INT_RUN.findall(text or "")
    if len(runs) < 3:
        raise FormatError(f"Expected three color channels in {text!r}")
    red, green, blue = (_clamp(int(run)) for run in runs[:3])
    return ColorSample(red, green, blue)


def parse_hex(text: str) -> ColorSample:
    """Parse ``#rrggbb`` or ``#rgb`` picker values."""

    match = _HEX_COLOR.fullmatch((text or "").strip().lower())
    if not match:
        raise FormatError(f"Invalid hex color: {text!r}")
    digits = match.group(1)
    if len(digits) == 3:
        red, green, blue = (int(digit, 16) * 17 for digit in digits)
    else:
        red, green, blue = (int(digits[i : i + 2], 16) for i in range(0, 6, 2))
    return ColorSample(red, green, blue)


def to_sample(text: str) -> ColorSample:
    """Parse either color representation into a sample."""

    value = (text or "").strip()
    if value.startswith("#"):
        return parse_hex(value)
    try:
        return parse_sample_text(value)
    except FormatError:
        # bare hex digits such as "00ff00"
        return parse_hex(value)


def to_sample_or_black(text: str) -> ColorSample:
    """Parse color text, falling back to black on malformed input."""

    try:
        return to_sample(text)
    except FormatError as exc:
        LOGGER.warning("Invalid color format, defaulting to black: %s", exc)
        return BLACK
