"""Map raw CSS values onto Tailwind tokens.

Every function here is total: unknown or malformed input falls back to a
neutral token instead of raising.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

_NUMBER_PATTERN = re.compile(r"^\s*(-?\d*\.?\d+)\s*([a-z%]*)", re.IGNORECASE)
_RGB_PATTERN = re.compile(
    r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([\d.]+)\s*)?\)",
    re.IGNORECASE,
)
_HEX_PATTERN = re.compile(r"^#(?:[0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)
_CLASS_PREFIX = re.compile(r"^(bg|text|border)-")

BASE_FONT_PX = 16.0
PT_TO_PX = 1.333


@dataclass(frozen=True)
class TailwindColor:
    """A palette entry: the color token and the class that applies it."""

    color: str
    class_name: str

    def with_prefix(self, prefix: str) -> "TailwindColor":
        return TailwindColor(self.color, _CLASS_PREFIX.sub(f"{prefix}-", self.class_name))

    def to_prop(self) -> Dict[str, str]:
        return {"color": self.color, "className": self.class_name}


def _swatch(color: str) -> TailwindColor:
    return TailwindColor(color, f"bg-{color}")


TRANSPARENT = _swatch("transparent")
DEFAULT_COLOR = _swatch("gray-500")

_NAMED_COLORS: Dict[str, TailwindColor] = {
    "white": _swatch("white"),
    "black": _swatch("black"),
    "red": _swatch("red-500"),
    "green": _swatch("green-500"),
    "blue": _swatch("blue-500"),
    "yellow": _swatch("yellow-500"),
    "purple": _swatch("purple-500"),
    "pink": _swatch("pink-500"),
    "gray": _swatch("gray-500"),
    "grey": _swatch("gray-500"),
}

# Checked in order; the first bucket whose token occurs in the color wins.
_BUTTON_BUCKETS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("pink", ("pink", "fuchsia", "rose")),
    ("purple", ("purple", "violet")),
    ("blue", ("blue", "sky", "cyan")),
    ("green", ("green", "emerald", "teal")),
    ("yellow", ("yellow", "amber")),
    ("red", ("red",)),
    ("gray", ("gray", "grey", "slate")),
)

_SPACING_SCALE: Tuple[Tuple[float, str], ...] = (
    (1, "px"),
    (2, "0.5"),
    (4, "1"),
    (6, "1.5"),
    (8, "2"),
    (12, "3"),
    (16, "4"),
    (20, "5"),
    (24, "6"),
    (32, "8"),
    (40, "10"),
    (48, "12"),
    (64, "16"),
    (80, "20"),
    (96, "24"),
    (128, "32"),
    (160, "40"),
    (192, "48"),
)

_FONT_SCALE: Tuple[Tuple[float, str], ...] = (
    (12, "xs"),
    (14, "sm"),
    (16, "base"),
    (18, "lg"),
    (20, "xl"),
    (24, "2xl"),
    (30, "3xl"),
    (36, "4xl"),
    (48, "5xl"),
)


def map_color(value: str) -> TailwindColor:
    """Map any CSS color to the closest palette entry."""
    color = (value or "").strip().lower()
    if color in {"transparent", "none"}:
        return TRANSPARENT
    if color.startswith("#"):
        return _map_hex(color)
    if color.startswith("rgb"):
        return _map_rgb(color)
    return _NAMED_COLORS.get(color, DEFAULT_COLOR)


def map_background_color(value: str) -> TailwindColor:
    return map_color(value).with_prefix("bg")


def map_text_color(value: str) -> TailwindColor:
    return map_color(value).with_prefix("text")


def map_border_color(value: str) -> TailwindColor:
    return map_color(value).with_prefix("border")


def button_color_bucket(color: str) -> str:
    """Bucket a palette color token into one of the button color families."""
    lowered = color.lower()
    for bucket, needles in _BUTTON_BUCKETS:
        if any(needle in lowered for needle in needles):
            return bucket
    return "gray"


def map_button_color(value: str) -> Dict[str, str]:
    bucket = button_color_bucket(map_color(value).color)
    return {"value": bucket, "label": bucket.capitalize()}


def to_pixels(value: str) -> Optional[float]:
    """Convert a CSS length to pixels; ``None`` for percentages or garbage."""
    match = _NUMBER_PATTERN.match(value or "")
    if not match:
        return None
    number = float(match.group(1))
    unit = match.group(2).lower()
    if unit in {"em", "rem"}:
        return number * BASE_FONT_PX
    if unit == "pt":
        return number * PT_TO_PX
    if unit == "%":
        return None
    return number


def map_spacing(value: str) -> str:
    """Bucket one spacing length into the Tailwind spacing scale."""
    pixels = to_pixels(value)
    if pixels is None:
        return "normal"
    if pixels == 0:
        return "none"
    for limit, token in _SPACING_SCALE:
        if pixels <= limit:
            return token
    return "large"


def map_padding(value: str) -> str:
    """Map a 1, 2 or 4 value padding shorthand.

    Four-value shorthands keep only top and bottom; left and right are dropped
    because the target schema groups spacing by vertical side.
    """
    parts = (value or "").split()
    if len(parts) == 1:
        return map_spacing(parts[0])
    if len(parts) == 2:
        return f"{map_spacing(parts[0])}-y {map_spacing(parts[1])}-x"
    if len(parts) == 4:
        return f"{map_spacing(parts[0])}-t {map_spacing(parts[2])}-b"
    return "normal"


def map_margin(value: str) -> str:
    return map_padding(value)


def map_font_size(value: str) -> str:
    pixels = to_pixels(value)
    if pixels is None:
        return "base"
    for limit, token in _FONT_SCALE:
        if pixels <= limit:
            return token
    return "6xl"


def map_column_width(size: float) -> str:
    """Snap a column percentage to the nearest Tailwind fraction at or above it."""
    if size <= 25:
        return "1/4"
    if size <= 33.33:
        return "1/3"
    if size <= 50:
        return "1/2"
    if size <= 66.66:
        return "2/3"
    if size <= 75:
        return "3/4"
    return "full"


def _map_hex(value: str) -> TailwindColor:
    if not _HEX_PATTERN.match(value):
        return DEFAULT_COLOR
    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return _bucket_rgb(r, g, b)


def _map_rgb(value: str) -> TailwindColor:
    match = _RGB_PATTERN.search(value)
    if not match:
        return DEFAULT_COLOR
    r, g, b = (min(int(match.group(i)), 255) for i in (1, 2, 3))
    alpha = float(match.group(4)) if match.group(4) else 1.0
    if alpha < 0.5:
        return TRANSPARENT
    return _map_hex(f"#{r:02x}{g:02x}{b:02x}")


def _bucket_rgb(r: int, g: int, b: int) -> TailwindColor:
    # Coarse channel ranges, not a perceptual distance.
    if r > 200 and g > 200 and b > 200:
        return _swatch("gray-100")
    if r < 50 and g < 50 and b < 50:
        return _swatch("gray-900")
    if r > 200 and g < 100 and b < 100:
        return _swatch("red-500")
    if r < 100 and g > 150 and b < 100:
        return _swatch("green-500")
    if r < 100 and g < 100 and b > 200:
        return _swatch("blue-500")
    if r > 200 and g > 150 and b < 100:
        return _swatch("yellow-500")
    if r > 150 and g < 100 and b > 150:
        return _swatch("purple-500")
    return DEFAULT_COLOR


__all__ = [
    "TailwindColor",
    "button_color_bucket",
    "map_background_color",
    "map_border_color",
    "map_button_color",
    "map_color",
    "map_column_width",
    "map_font_size",
    "map_margin",
    "map_padding",
    "map_spacing",
    "map_text_color",
    "to_pixels",
]
