"""Discovery of color-bearing locations in an SVG tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from xml.etree.ElementTree import Element

from svg_invert.svg.style import parse_declaration, split_declarations


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` part from an ElementTree tag."""
    return tag.rsplit("}", 1)[-1]


@dataclass(frozen=True)
class ColorLocation:
    """An attribute, or a declaration inside ``style``, that holds a color."""

    element: Element
    name: str
    value: str
    in_style: bool = False

    @property
    def label(self) -> str:
        tag = local_name(self.element.tag)
        if self.in_style:
            return f"{tag}@style:{self.name}"
        return f"{tag}@{self.name}"


def iter_color_locations(
    root: Element,
    attributes: Iterable[str],
    properties: Iterable[str] = (),
) -> Iterator[ColorLocation]:
    """Yield color locations in document order.

    Args:
        root: Root element of the tree to walk.
        attributes: Attribute names that hold a color.
        properties: Style property names that hold a color (case-insensitive).
    """
    attributes = tuple(attributes)
    properties = {name.lower() for name in properties}

    for element in root.iter():
        if not isinstance(element.tag, str):
            continue  # comments and processing instructions

        for name in attributes:
            value = element.get(name)
            if value is not None:
                yield ColorLocation(element, name, value)

        if not properties:
            continue
        for chunk in split_declarations(element.get("style")):
            declaration = parse_declaration(chunk)
            if declaration is not None and declaration.name.lower() in properties:
                yield ColorLocation(element, declaration.name, declaration.value, in_style=True)
