"""Main API for svg-invert.

``SvgInverter`` owns a cache from original color text to inverted color
text. Reusing one instance across several documents avoids re-parsing colors
the documents have in common; ``invert_svg`` is the one-shot shortcut.

An instance is not thread-safe. Separate instances share no state.

Example:
    >>> import io
    >>> from svg_invert import SvgInverter
    >>> inverter = SvgInverter()
    >>> out = io.BytesIO()
    >>> inverter.invert(io.BytesIO(b'<svg><rect fill="#000"/></svg>'), out)
    1
    >>> out.getvalue()
    b'<svg><rect fill="#fff" /></svg>'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any
from xml.etree.ElementTree import Element, ElementTree

from svg_invert.colors import codec
from svg_invert.colors.types import Sentinel, SentinelKind
from svg_invert.config import Config
from svg_invert.exceptions import SvgInvertError
from svg_invert.svg.parser import parse_svg, parse_svg_string, serialize_svg, write_svg
from svg_invert.svg.style import rewrite_style

logger = logging.getLogger(__name__)


@dataclass
class InversionResult:
    """Result of inverting a single file."""

    success: bool
    input_path: Path | None = None
    output_path: Path | None = None
    colors_replaced: int = 0
    errors: list[str] = field(default_factory=list)


class SvgInverter:
    """Inverts the colors of SVG documents.

    Args:
        config: Settings to use. Defaults to the built-in Config().
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self._color_attributes = tuple(self.config.color_attributes)
        self._style_properties = frozenset(name.lower() for name in self.config.style_properties)
        self._cache: dict[str, str] = {}

    @property
    def cache_size(self) -> int:
        """Number of distinct color strings seen by this instance."""
        return len(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()

    def invert(self, input_stream: IO[Any], output_stream: IO[Any]) -> int:
        """Invert the colors of the SVG read from ``input_stream``.

        The whole document is parsed and serialized in memory; nothing is
        written to ``output_stream`` unless parsing succeeds.

        Args:
            input_stream: Binary or text stream with one SVG document.
            output_stream: Binary or text stream receiving the result.

        Returns:
            Number of color locations rewritten.

        Raises:
            SVGParseError: If the input is not well-formed XML
            SVGWriteError: If the output stream cannot be written
        """
        document = parse_svg(input_stream)
        replaced = self.invert_tree(document.tree)
        write_svg(document, output_stream, indent=self.config.indent)
        return replaced

    def invert_string(self, svg_content: str | bytes) -> str:
        """Invert SVG markup held in memory and return the result as text."""
        document = parse_svg_string(svg_content)
        self.invert_tree(document.tree)
        return serialize_svg(document, indent=self.config.indent).decode("utf-8")

    def invert_file(self, input_path: str | Path, output_path: str | Path) -> InversionResult:
        """Invert one SVG file into another.

        Errors are reported in the result instead of raised so callers
        processing many files can decide whether to continue.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)
        result = InversionResult(success=False, input_path=input_path, output_path=output_path)

        try:
            document = parse_svg(input_path)
            result.colors_replaced = self.invert_tree(document.tree)
            write_svg(document, output_path, indent=self.config.indent)
        except SvgInvertError as e:
            result.errors.append(str(e))
            return result
        except OSError as e:
            result.errors.append(f"Cannot read {input_path}: {e}")
            return result

        result.success = True
        return result

    def invert_tree(self, tree: ElementTree | Element) -> int:
        """Rewrite color locations of an already parsed tree in place.

        Returns:
            Number of color locations rewritten.
        """
        root = tree.getroot() if hasattr(tree, "getroot") else tree
        replaced = 0
        for element in root.iter():
            if isinstance(element.tag, str):
                replaced += self._invert_element(element)

        logger.debug("Rewrote %d color location(s), %d color(s) cached", replaced, len(self._cache))
        return replaced

    def _invert_element(self, element: Element) -> int:
        replaced = 0
        for name in self._color_attributes:
            value = element.get(name)
            if value is not None:
                element.set(name, self._replace_color(value))
                replaced += 1

        if self.config.invert_styles and self._style_properties:
            style = element.get("style")
            if style:
                new_style, count = rewrite_style(style, self._style_properties, self._replace_color)
                if count:
                    element.set("style", new_style)
                    replaced += count

        return replaced

    def _replace_color(self, text: str) -> str:
        cached = self._cache.get(text)
        if cached is not None:
            return cached

        value, notation = codec.parse_color(text)
        if isinstance(value, Sentinel):
            if value.kind is SentinelKind.UNKNOWN:
                logger.debug("Passing through unrecognized color %r", text)
            result = text
        else:
            result = codec.format_color(codec.invert_color(value), notation, self.config.named_colors)

        self._cache[text] = result
        return result


def invert_svg(input_stream: IO[Any], output_stream: IO[Any], config: Config | None = None) -> int:
    """Invert one document with a fresh SvgInverter.

    Convenience for single use; no cache is kept between calls.
    """
    return SvgInverter(config=config).invert(input_stream, output_stream)
