"""SVG parsing and manipulation for svg-invert.

This subpackage provides:
- Safe SVG parsing with XXE protection (defusedxml)
- Inline style declaration handling
- Color-bearing location discovery
- SVG output generation
"""

from svg_invert.svg.locations import ColorLocation, iter_color_locations
from svg_invert.svg.parser import (
    SVGDocument,
    parse_svg,
    parse_svg_string,
    serialize_svg,
    write_svg,
)
from svg_invert.svg.style import parse_style, rewrite_style

__all__ = [
    "SVGDocument",
    "parse_svg",
    "parse_svg_string",
    "serialize_svg",
    "write_svg",
    "parse_style",
    "rewrite_style",
    "ColorLocation",
    "iter_color_locations",
]
