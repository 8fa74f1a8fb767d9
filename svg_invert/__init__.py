"""svg-invert: Invert the colors of SVG images.

This library rewrites every color in an SVG document to its inverse so a
single diagram works on both light and dark backgrounds:
- fill, stroke, stop-color and other color attributes
- color properties inside inline style attributes
- hex, rgb(), hsl() and named colors, kept in their original notation
- none, transparent and currentColor passed through untouched

Example:
    >>> from svg_invert import SvgInverter
    >>> inverter = SvgInverter()
    >>> inverter.invert_file("light.svg", "dark.svg")
"""

from svg_invert.api import InversionResult, SvgInverter, invert_svg
from svg_invert.config import Config
from svg_invert.exceptions import (
    ConfigError,
    SvgInvertError,
    SVGParseError,
    SVGWriteError,
)

__version__ = "0.1.0"

__all__ = [
    # Main API
    "SvgInverter",
    "InversionResult",
    "invert_svg",
    "Config",
    # Exceptions
    "SvgInvertError",
    "SVGParseError",
    "SVGWriteError",
    "ConfigError",
    # Metadata
    "__version__",
]
