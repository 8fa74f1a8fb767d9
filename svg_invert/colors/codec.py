"""Color Codec: parse color text, invert it, and format it back.

The codec is stateless. ``parse_color`` turns text into a normalized value
plus the notation it was written in, ``invert_color`` complements the RGB
channels, and ``format_color`` renders a value in a given notation so that
``#f00`` comes back as a 3-digit hex, ``rgb(255, 0, 0)`` as an ``rgb()``
call with the same separators, and so on.

Text that cannot be parsed is returned as ``Sentinel(UNKNOWN)`` and formats
back to exactly the input text. Nothing in this module raises on bad input.

Example:
    >>> from svg_invert.colors import invert_color_text
    >>> invert_color_text("#f00")
    '#0ff'
    >>> invert_color_text("rgba(255, 0, 0, 0.5)")
    'rgba(0, 255, 255, 0.5)'
"""

from __future__ import annotations

import colorsys
import re
from decimal import Decimal

import webcolors

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

_SENTINELS = {
    "none": SentinelKind.NONE,
    "transparent": SentinelKind.TRANSPARENT,
    "currentcolor": SentinelKind.CURRENT_COLOR,
    "inherit": SentinelKind.INHERIT,
}

_HEX_FAMILIES = {
    3: ColorFamily.HEX3,
    4: ColorFamily.HEX4,
    6: ColorFamily.HEX6,
    8: ColorFamily.HEX8,
}

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_FUNCTION = re.compile(r"(rgba?|hsla?)\s*\((.*)\)", re.IGNORECASE | re.DOTALL)
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_COMMA_WITH_SPACE = re.compile(r",\s")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_color(text: str) -> ParsedColor:
    """Parse color text into a value and the notation it was written in.

    Args:
        text: Raw attribute or style value, e.g. ``"#FF0000"`` or ``"red"``.

    Returns:
        ParsedColor. ``notation`` is None for sentinels.
    """
    stripped = text.strip()
    lowered = stripped.lower()

    kind = _SENTINELS.get(lowered)
    if kind is not None:
        return ParsedColor(Sentinel(kind, text), None)

    if stripped.startswith("#"):
        parsed = _parse_hex(stripped[1:])
    elif "(" in stripped:
        parsed = _parse_functional(stripped)
    else:
        parsed = _parse_named(lowered)

    if parsed is None:
        return ParsedColor(Sentinel(SentinelKind.UNKNOWN, text), None)
    return parsed


def _parse_hex(digits: str) -> ParsedColor | None:
    family = _HEX_FAMILIES.get(len(digits))
    if family is None or not _HEX_DIGITS.fullmatch(digits):
        return None

    uppercase = digits == digits.upper() and digits != digits.lower()
    if len(digits) <= 4:
        digits = "".join(ch * 2 for ch in digits)
    channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]

    value: ColorValue
    if len(channels) == 4:
        value = RGBA(channels[0], channels[1], channels[2], channels[3] / 255)
    else:
        value = RGB(channels[0], channels[1], channels[2])
    return ParsedColor(value, Notation(family, uppercase=uppercase))


def _parse_named(lowered: str) -> ParsedColor | None:
    if not lowered.isalpha():
        return None
    try:
        rgb = webcolors.name_to_rgb(lowered, spec=webcolors.CSS3)
    except ValueError:
        return None
    return ParsedColor(RGB(rgb.red, rgb.green, rgb.blue), Notation(ColorFamily.NAMED))


def _parse_functional(stripped: str) -> ParsedColor | None:
    match = _FUNCTION.fullmatch(stripped)
    if match is None:
        return None

    name = match.group(1).lower()
    split = _split_arguments(match.group(2).strip())
    if split is None:
        return None
    args, separator = split
    if len(args) not in (3, 4):
        return None

    if name.startswith("rgb"):
        return _parse_rgb_arguments(name, args, separator)
    return _parse_hsl_arguments(name, args, separator)


def _split_arguments(body: str) -> tuple[list[str], str] | None:
    """Split a function body into arguments, detecting the separator style.

    Legacy syntax separates every argument with commas. CSS Color 4 syntax
    separates channels with whitespace and puts alpha after a slash.
    """
    if "," in body:
        if "/" in body:
            return None
        separator = ", " if _COMMA_WITH_SPACE.search(body) else ","
        args = [part.strip() for part in body.split(",")]
    else:
        if body.count("/") > 1:
            return None
        channels, slash, alpha = body.partition("/")
        args = channels.split()
        if slash:
            if len(args) != 3:
                return None
            args.append(alpha.strip())
        separator = " "

    if any(not arg for arg in args):
        return None
    return args, separator


def _parse_number(text: str) -> float | None:
    if not _NUMBER.fullmatch(text):
        return None
    return float(text)


def _parse_alpha(text: str) -> float | None:
    if text.endswith("%"):
        number = _parse_number(text[:-1])
        return None if number is None else _clamp(number / 100, 0.0, 1.0)
    number = _parse_number(text)
    return None if number is None else _clamp(number, 0.0, 1.0)


def _decimal_places(number_text: str) -> int:
    exponent = Decimal(number_text).as_tuple().exponent
    return max(0, -exponent)


def _parse_rgb_arguments(name: str, args: list[str], separator: str) -> ParsedColor | None:
    channel_args = args[:3]
    percent = all(arg.endswith("%") for arg in channel_args)
    if not percent and any(arg.endswith("%") for arg in channel_args):
        return None

    channels: list[float] = []
    decimals: list[int] = []
    for arg in channel_args:
        number_text = arg[:-1] if percent else arg
        number = _parse_number(number_text)
        if number is None:
            return None
        channels.append(_clamp(number * 255 / 100 if percent else number, 0.0, 255.0))
        decimals.append(_decimal_places(number_text))

    alpha_text = None
    value: ColorValue
    if len(args) == 4:
        alpha = _parse_alpha(args[3])
        if alpha is None:
            return None
        alpha_text = args[3]
        value = RGBA(channels[0], channels[1], channels[2], alpha)
    else:
        value = RGB(channels[0], channels[1], channels[2])

    family = ColorFamily.RGBA if name == "rgba" else ColorFamily.RGB
    notation = Notation(
        family,
        percent=percent,
        separator=separator,
        alpha_percent=bool(alpha_text and alpha_text.endswith("%")),
        decimals=tuple(decimals),
        alpha_text=alpha_text,
    )
    return ParsedColor(value, notation)


def _parse_hsl_arguments(name: str, args: list[str], separator: str) -> ParsedColor | None:
    hue_text = args[0][:-3] if args[0].lower().endswith("deg") else args[0]
    hue = _parse_number(hue_text)
    if hue is None:
        return None
    if not (args[1].endswith("%") and args[2].endswith("%")):
        return None
    saturation = _parse_number(args[1][:-1])
    lightness = _parse_number(args[2][:-1])
    if saturation is None or lightness is None:
        return None
    decimals = (_decimal_places(hue_text), _decimal_places(args[1][:-1]), _decimal_places(args[2][:-1]))

    r, g, b = colorsys.hls_to_rgb(
        (hue % 360) / 360,
        _clamp(lightness, 0.0, 100.0) / 100,
        _clamp(saturation, 0.0, 100.0) / 100,
    )

    alpha_text = None
    value: ColorValue
    if len(args) == 4:
        alpha = _parse_alpha(args[3])
        if alpha is None:
            return None
        alpha_text = args[3]
        value = RGBA(r * 255, g * 255, b * 255, alpha)
    else:
        value = RGB(r * 255, g * 255, b * 255)

    family = ColorFamily.HSLA if name == "hsla" else ColorFamily.HSL
    notation = Notation(
        family,
        percent=True,
        separator=separator,
        alpha_percent=bool(alpha_text and alpha_text.endswith("%")),
        decimals=decimals,
        alpha_text=alpha_text,
    )
    return ParsedColor(value, notation)


# ---------------------------------------------------------------------------
# Inversion
# ---------------------------------------------------------------------------


def invert_color(value: ColorValue) -> ColorValue:
    """Complement the R, G and B channels. Alpha and sentinels are untouched."""
    if isinstance(value, Sentinel):
        return value
    if isinstance(value, RGBA):
        return RGBA(255 - value.r, 255 - value.g, 255 - value.b, value.a)
    return RGB(255 - value.r, 255 - value.g, 255 - value.b)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_color(
    value: ColorValue,
    notation: Notation | None,
    prefer_names: bool = True,
) -> str:
    """Render a color value in the given notation.

    Args:
        value: Value to render.
        notation: Target notation. None renders the shortest hex form.
        prefer_names: For the named family, emit a keyword when the value
            matches one exactly. Otherwise the shortest hex form is used.

    Returns:
        Color text. Sentinels always render as their original text.
    """
    if isinstance(value, Sentinel):
        return value.text
    if notation is None:
        return _format_shortest_hex(value)

    family = notation.family
    if family is ColorFamily.NAMED:
        return _format_named(value, prefer_names)
    if family.is_hex:
        return _format_hex(value, family, notation.uppercase)
    if family in (ColorFamily.RGB, ColorFamily.RGBA):
        return _format_rgb(value, notation)
    return _format_hsl(value, notation)


def invert_color_text(text: str, prefer_names: bool = True) -> str:
    """Parse, invert and re-format color text in one call."""
    value, notation = parse_color(text)
    if isinstance(value, Sentinel):
        return value.text
    return format_color(invert_color(value), notation, prefer_names)


def _to_byte(channel: float) -> int:
    return int(round(_clamp(channel, 0.0, 255.0)))


def _alpha_byte(value: RGB | RGBA) -> int | None:
    if isinstance(value, RGBA):
        return _to_byte(value.a * 255)
    return None


def _hex_digits(channels: list[int], short: bool) -> str:
    if short and all(channel % 17 == 0 for channel in channels):
        return "".join(f"{channel // 17:x}" for channel in channels)
    return "".join(f"{channel:02x}" for channel in channels)


def _format_hex(value: RGB | RGBA, family: ColorFamily, uppercase: bool) -> str:
    channels = [_to_byte(value.r), _to_byte(value.g), _to_byte(value.b)]
    alpha = _alpha_byte(value)
    if family in (ColorFamily.HEX4, ColorFamily.HEX8):
        channels.append(255 if alpha is None else alpha)
    elif alpha is not None and alpha != 255:
        channels.append(alpha)

    digits = _hex_digits(channels, short=family in (ColorFamily.HEX3, ColorFamily.HEX4))
    return "#" + (digits.upper() if uppercase else digits)


def _format_shortest_hex(value: RGB | RGBA) -> str:
    channels = [_to_byte(value.r), _to_byte(value.g), _to_byte(value.b)]
    alpha = _alpha_byte(value)
    if alpha is not None and alpha != 255:
        channels.append(alpha)
    return "#" + _hex_digits(channels, short=True)


def _format_named(value: RGB | RGBA, prefer_names: bool) -> str:
    if prefer_names and isinstance(value, RGB):
        channels = (value.r, value.g, value.b)
        if all(float(channel).is_integer() for channel in channels):
            try:
                return webcolors.rgb_to_name(tuple(int(c) for c in channels), spec=webcolors.CSS3)
            except ValueError:
                pass
    return _format_shortest_hex(value)


def _format_rgb(value: RGB | RGBA, notation: Notation) -> str:
    channels = [value.r, value.g, value.b]
    if notation.percent:
        args = [arg + "%" for arg in _format_arguments([c * 100 / 255 for c in channels], notation.decimals)]
    else:
        args = _format_arguments(channels, notation.decimals)
    return _format_function(notation.family.value, args, _format_alpha(value, notation), notation.separator)


def _format_hsl(value: RGB | RGBA, notation: Notation) -> str:
    hue, lightness, saturation = colorsys.rgb_to_hls(
        _clamp(value.r, 0.0, 255.0) / 255,
        _clamp(value.g, 0.0, 255.0) / 255,
        _clamp(value.b, 0.0, 255.0) / 255,
    )
    # 359.9999 must not print as 360
    hue_places = notation.decimals[0] if notation.decimals else 2
    degrees = round(hue * 360, hue_places) % 360

    args = _format_arguments([degrees, saturation * 100, lightness * 100], notation.decimals)
    args[1] += "%"
    args[2] += "%"
    return _format_function(notation.family.value, args, _format_alpha(value, notation), notation.separator)


def _format_alpha(value: RGB | RGBA, notation: Notation) -> str | None:
    if not isinstance(value, RGBA):
        return None
    if notation.alpha_text is not None:
        return notation.alpha_text
    if notation.alpha_percent:
        return _format_number(value.a * 100) + "%"
    return _format_number(value.a, precision=4)


def _format_function(name: str, args: list[str], alpha: str | None, separator: str) -> str:
    if separator.strip():
        if alpha is not None:
            args = args + [alpha]
        return f"{name}({separator.join(args)})"
    body = " ".join(args)
    if alpha is not None:
        body = f"{body} / {alpha}"
    return f"{name}({body})"


def _format_arguments(numbers: list[float], decimals: tuple[int, ...] | None) -> list[str]:
    if decimals is None:
        return [_format_number(number) for number in numbers]
    return [_format_fixed(number, places) for number, places in zip(numbers, decimals)]


def _format_fixed(number: float, places: int) -> str:
    text = f"{number:.{places}f}"
    if text.startswith("-") and float(text) == 0:
        text = text[1:]
    return text


def _format_number(number: float, precision: int = 2) -> str:
    text = f"{round(number, precision):.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _clamp(number: float, low: float, high: float) -> float:
    return max(low, min(high, number))
