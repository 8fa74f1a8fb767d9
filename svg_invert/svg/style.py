"""Inline ``style`` attribute handling.

Declarations are split on semicolons that are not inside parentheses or
quotes, so values such as ``url("data:image/png;base64,...")`` survive.
When a style is rewritten, every well-formed declaration is emitted as
``name:value`` and declarations are joined with ``;``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Collection
from typing import NamedTuple

_IMPORTANT = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


class Declaration(NamedTuple):
    """A single ``name: value`` pair from a style attribute."""

    name: str
    value: str
    important: bool = False


def split_declarations(style: str | None) -> list[str]:
    """Split a style attribute into raw declaration chunks.

    Empty chunks (``;;`` or a trailing ``;``) are dropped.
    """
    if not style:
        return []

    chunks: list[str] = []
    current: list[str] = []
    depth = 0
    quote: str | None = None

    for ch in style:
        if quote:
            if ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif ch == ";" and depth == 0:
            chunks.append("".join(current))
            current = []
            continue
        current.append(ch)

    chunks.append("".join(current))
    return [chunk for chunk in chunks if chunk.strip()]


def parse_declaration(chunk: str) -> Declaration | None:
    """Parse one chunk. Returns None for chunks without ``name:``."""
    name, colon, value = chunk.partition(":")
    name = name.strip()
    if not colon or not name:
        return None

    value = value.strip()
    important = False
    match = _IMPORTANT.search(value)
    if match:
        value = value[: match.start()]
        important = True
    return Declaration(name, value, important)


def parse_style(style: str | None) -> dict[str, str]:
    """Return style declarations as a dict, ignoring malformed entries."""
    result: dict[str, str] = {}
    for chunk in split_declarations(style):
        declaration = parse_declaration(chunk)
        if declaration is not None:
            result[declaration.name] = declaration.value
    return result


def format_declaration(declaration: Declaration) -> str:
    text = f"{declaration.name}:{declaration.value}"
    if declaration.important:
        text += " !important"
    return text


def rewrite_style(
    style: str,
    properties: Collection[str],
    replace: Callable[[str], str],
) -> tuple[str, int]:
    """Replace the values of color properties inside a style attribute.

    Args:
        style: Raw ``style`` attribute value.
        properties: Lowercase property names whose values are colors.
        replace: Maps an original color value to its replacement.

    Returns:
        Tuple of (new style text, number of declarations replaced). When no
        declaration matches, the original text is returned unchanged.
    """
    parts: list[str] = []
    replaced = 0

    for chunk in split_declarations(style):
        declaration = parse_declaration(chunk)
        if declaration is None:
            parts.append(chunk.strip())
            continue
        if declaration.name.lower() in properties:
            declaration = declaration._replace(value=replace(declaration.value))
            replaced += 1
        parts.append(format_declaration(declaration))

    if not replaced:
        return style, 0

    text = ";".join(parts)
    if style.rstrip().endswith(";"):
        text += ";"
    return text, replaced
