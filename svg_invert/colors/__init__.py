"""Color parsing, inversion and formatting for svg-invert.

This subpackage provides:
- The color value model (RGB, RGBA, Sentinel) and notation families
- A notation-preserving codec for hex, rgb(), hsl() and named colors
"""

from svg_invert.colors.codec import (
    format_color,
    invert_color,
    invert_color_text,
    parse_color,
)
from svg_invert.colors.types import (
    RGB,
    RGBA,
    ColorFamily,
    ColorValue,
    Notation,
    ParsedColor,
    Sentinel,
    SentinelKind,
)

__all__ = [
    "parse_color",
    "invert_color",
    "format_color",
    "invert_color_text",
    "RGB",
    "RGBA",
    "Sentinel",
    "SentinelKind",
    "ColorFamily",
    "ColorValue",
    "Notation",
    "ParsedColor",
]
