"""Color value model shared by the codec and the inversion engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union


class SentinelKind(str, Enum):
    """Non-color tokens that are passed through untouched."""

    NONE = "none"
    TRANSPARENT = "transparent"
    CURRENT_COLOR = "currentcolor"
    INHERIT = "inherit"
    UNKNOWN = "unknown"


class ColorFamily(str, Enum):
    """How a color was spelled in the source text."""

    NAMED = "named"
    HEX3 = "hex3"
    HEX4 = "hex4"
    HEX6 = "hex6"
    HEX8 = "hex8"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"

    @property
    def is_hex(self) -> bool:
        return self in (ColorFamily.HEX3, ColorFamily.HEX4, ColorFamily.HEX6, ColorFamily.HEX8)


@dataclass(frozen=True)
class RGB:
    """Opaque color. Channels are 0-255; percentages and HSL may leave them fractional."""

    r: float
    g: float
    b: float


@dataclass(frozen=True)
class RGBA:
    """Color with alpha. Alpha is kept as a 0.0-1.0 fraction regardless of notation."""

    r: float
    g: float
    b: float
    a: float


@dataclass(frozen=True)
class Sentinel:
    """A token that must never be inverted.

    ``text`` is the exact source text, so formatting a sentinel reproduces
    the input byte-for-byte.
    """

    kind: SentinelKind
    text: str


ColorValue = Union[RGB, RGBA, Sentinel]


@dataclass(frozen=True)
class Notation:
    """Notation family plus the argument style detected at parse time.

    ``decimals`` holds the decimal places each functional argument was
    written with. Channel complements keep that many places, so inverting
    twice gives back the same text. None formats with up to two places.
    ``alpha_text`` is the alpha argument as written; alpha is never
    inverted, so it is copied to the output unchanged.
    """

    family: ColorFamily
    percent: bool = False
    separator: str = ","
    alpha_percent: bool = False
    uppercase: bool = False
    decimals: tuple[int, ...] | None = None
    alpha_text: str | None = None


class ParsedColor(NamedTuple):
    """Result of parsing color text."""

    value: ColorValue
    notation: Notation | None
