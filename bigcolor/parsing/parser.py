"""
Color string parser.

Grammars are tried in a fixed order against the trimmed, lowercased input:

1. named colors (``transparent`` is rgba(0, 0, 0, 0))
2. hex: ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``, ``#`` optional
3. functional notation, legacy (``rgb(255, 0, 0, .5)``) or modern
   (``rgb(255 0 0 / 50%)``): rgb[a], hsl[a], hsv[a], hsb[a], hwb[a],
   lab, lch, oklab, oklch, color(<space> ...), cmyk[a]

Out-of-range numbers are clamped; anything that does not fit the grammar
raises ``ParseError``.
"""
import logging
import re
from typing import Callable, NamedTuple, Optional

from ..conversions import clamp_unit, convert, space_to_rgb, resolve_space, to_byte
from ..types.format_type import ColorFormat
from .errors import ParseError
from .named_colors import lookup_name
from .tokens import (
    NONE_KEYWORD,
    parse_alpha,
    parse_angle,
    parse_percentage,
    parse_quantity,
)

log = logging.getLogger(__name__)

_FUNCTION_RE = re.compile(r"^([a-z][a-z0-9-]*)\s*\((.*)\)$", re.DOTALL)
_HEX_RE = re.compile(r"^#?[0-9a-f]+$")

UnitRGB = tuple[float, float, float]


class ParsedColor(NamedTuple):
    r: float
    g: float
    b: float
    a: float
    format: ColorFormat


class Arguments(NamedTuple):
    channels: list[str]
    alpha: Optional[str]
    legacy: bool


def parse_color(text: str) -> ParsedColor:
    """
    Parse a color string into byte-range RGB, unit alpha and its source format.

    Args:
        text: any accepted color string

    Returns:
        ParsedColor with r, g, b in [0, 255] and a in [0, 1]

    Raises:
        ParseError: the input matches no grammar; ``token`` names the culprit
    """
    if not isinstance(text, str):
        raise TypeError(f"Color string expected, got {type(text).__name__}")
    normalized = text.strip().lower()
    if not normalized:
        raise ParseError("Empty color string", text, text)
    try:
        parsed = _parse_normalized(normalized)
    except ParseError as err:
        if err.text is None:
            err.text = text
        raise
    log.debug("Parsed %r as %s", text, parsed.format.value)
    return parsed


def _parse_normalized(s: str) -> ParsedColor:
    if s == "transparent":
        return ParsedColor(0.0, 0.0, 0.0, 0.0, ColorFormat.NAME)
    named = lookup_name(s)
    if named is not None:
        r, g, b = named
        return ParsedColor(float(r), float(g), float(b), 1.0, ColorFormat.NAME)
    if s.startswith("#") or _HEX_RE.match(s):
        return parse_hex(s)
    match = _FUNCTION_RE.match(s)
    if not match:
        raise ParseError(f"Unrecognized color {s!r}", s)
    name, body = match.groups()
    handler = _FUNCTIONS.get(name)
    if handler is None:
        raise ParseError(f"Unknown color function {name!r}", name)
    rgb, alpha, fmt = handler(name, split_arguments(body))
    r, g, b = (to_byte(c) for c in rgb)
    return ParsedColor(r, g, b, alpha, fmt)


def parse_hex(s: str) -> ParsedColor:
    digits = s[1:] if s.startswith("#") else s
    if len(digits) not in (3, 4, 6, 8) or not _HEX_RE.match(digits):
        raise ParseError(f"Invalid hex color {s!r}", s)
    if len(digits) <= 4:
        values = [int(ch, 16) * 17 for ch in digits]
    else:
        values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    if len(values) == 4:
        return ParsedColor(float(values[0]), float(values[1]), float(values[2]), values[3] / 255, ColorFormat.HEX8)
    return ParsedColor(float(values[0]), float(values[1]), float(values[2]), 1.0, ColorFormat.HEX)


def split_arguments(body: str) -> Arguments:
    """Split a function body into channel tokens and an optional alpha token."""
    body = body.strip()
    if not body:
        raise ParseError("Missing arguments", "()")
    if "," in body:
        if "/" in body:
            raise ParseError("Cannot mix commas with a '/' alpha separator", body)
        parts = [part.strip() for part in body.split(",")]
        for part in parts:
            if len(part.split()) != 1:
                raise ParseError(f"Invalid argument {part!r}", part or ",")
            if part == NONE_KEYWORD:
                raise ParseError("'none' is only allowed in space-separated syntax", part)
        return Arguments(parts, None, True)

    left, sep, right = body.partition("/")
    alpha = None
    if sep:
        alpha_parts = right.split()
        if len(alpha_parts) != 1 or "/" in right:
            raise ParseError("Expected a single alpha value after '/'", right.strip() or "/")
        alpha = alpha_parts[0]
    return Arguments(left.split(), alpha, False)


def _channels_and_alpha(name: str, args: Arguments, count: int) -> tuple[list[str], float]:
    channels = list(args.channels)
    alpha = args.alpha
    if args.legacy and len(channels) == count + 1:
        alpha = channels.pop()
    if len(channels) != count:
        raise ParseError(
            f"{name}() expects {count} channels, got {len(channels)}",
            " ".join(channels) or name,
        )
    return channels, 1.0 if alpha is None else parse_alpha(alpha)


def _require_modern(name: str, args: Arguments) -> None:
    if args.legacy:
        raise ParseError(f"{name}() requires space-separated arguments", ",")


def _scaled(token: str, percent_reference: float, lo: Optional[float] = None, hi: Optional[float] = None) -> float:
    """A bare number, or a percentage of ``percent_reference``, optionally bounded."""
    value, is_percent = parse_quantity(token)
    if is_percent:
        value = value / 100 * percent_reference
    if lo is not None:
        value = max(lo, value)
    if hi is not None:
        value = min(hi, value)
    return value


## Function handlers: (name, args) -> (unit rgb, alpha, format)

def _parse_rgb(name: str, args: Arguments):
    channels, alpha = _channels_and_alpha(name, args, 3)
    quantities = [parse_quantity(token) for token in channels]
    kinds = {q.is_percent for q in quantities}
    if args.legacy and len(kinds) > 1:
        raise ParseError("Legacy rgb() cannot mix numbers and percentages", ", ".join(channels))
    rgb = tuple(clamp_unit(q.value / 100 if q.is_percent else q.value / 255) for q in quantities)
    fmt = ColorFormat.PRGB if kinds == {True} else ColorFormat.RGB
    return rgb, alpha, fmt


def _hue_model(model: str, fmt: ColorFormat) -> Callable:
    # hsl, hsv, hsb and hwb share "hue, percent, percent"; bare numbers use the 0-100 scale
    def handler(name: str, args: Arguments):
        channels, alpha = _channels_and_alpha(name, args, 3)
        hue = parse_angle(channels[0])
        second = _scaled(channels[1], 100.0, 0.0, 100.0) / 100
        third = _scaled(channels[2], 100.0, 0.0, 100.0) / 100
        return convert((hue, second, third), model, "rgb"), alpha, fmt
    return handler


def _parse_lab(name: str, args: Arguments):
    _require_modern(name, args)
    channels, alpha = _channels_and_alpha(name, args, 3)
    l = _scaled(channels[0], 100.0, 0.0, 100.0)
    a = _scaled(channels[1], 125.0)
    b = _scaled(channels[2], 125.0)
    return convert((l, a, b), "lab", "rgb"), alpha, ColorFormat.LAB


def _parse_lch(name: str, args: Arguments):
    _require_modern(name, args)
    channels, alpha = _channels_and_alpha(name, args, 3)
    l = _scaled(channels[0], 100.0, 0.0, 100.0)
    c = _scaled(channels[1], 150.0, 0.0)
    h = parse_angle(channels[2])
    return convert((l, c, h), "lch", "rgb"), alpha, ColorFormat.LCH


def _parse_oklab(name: str, args: Arguments):
    _require_modern(name, args)
    channels, alpha = _channels_and_alpha(name, args, 3)
    l = _scaled(channels[0], 1.0, 0.0, 1.0)
    a = _scaled(channels[1], 0.4)
    b = _scaled(channels[2], 0.4)
    return convert((l, a, b), "oklab", "rgb"), alpha, ColorFormat.OKLAB


def _parse_oklch(name: str, args: Arguments):
    _require_modern(name, args)
    channels, alpha = _channels_and_alpha(name, args, 3)
    l = _scaled(channels[0], 1.0, 0.0, 1.0)
    c = _scaled(channels[1], 0.4, 0.0)
    h = parse_angle(channels[2])
    return convert((l, c, h), "oklch", "rgb"), alpha, ColorFormat.OKLCH


def _parse_color_function(name: str, args: Arguments):
    _require_modern(name, args)
    if not args.channels:
        raise ParseError("color() requires a color space", name)
    space_token, *rest = args.channels
    try:
        space = resolve_space(space_token)
    except ValueError:
        raise ParseError(f"Unknown color space {space_token!r}", space_token) from None
    channels, alpha = _channels_and_alpha(name, Arguments(rest, args.alpha, False), 3)
    values = []
    for token in channels:
        value, is_percent = parse_quantity(token)
        value = value / 100 if is_percent else value
        # RGB spaces are bounded to their gamut, XYZ is not
        values.append(value if space.startswith("xyz") else clamp_unit(value))
    return space_to_rgb(space, *values), alpha, ColorFormat.COLOR


def _parse_cmyk(name: str, args: Arguments):
    channels, alpha = _channels_and_alpha(name, args, 4)
    c, m, y, k = (clamp_unit(parse_percentage(token) / 100) for token in channels)
    return convert((c, m, y, k), "cmyk", "rgb"), alpha, ColorFormat.CMYK


_FUNCTIONS: dict[str, Callable] = {
    "rgb": _parse_rgb,
    "rgba": _parse_rgb,
    "hsl": _hue_model("hsl", ColorFormat.HSL),
    "hsla": _hue_model("hsl", ColorFormat.HSL),
    "hsv": _hue_model("hsv", ColorFormat.HSV),
    "hsva": _hue_model("hsv", ColorFormat.HSV),
    "hsb": _hue_model("hsv", ColorFormat.HSB),
    "hsba": _hue_model("hsv", ColorFormat.HSB),
    "hwb": _hue_model("hwb", ColorFormat.HWB),
    "hwba": _hue_model("hwb", ColorFormat.HWB),
    "lab": _parse_lab,
    "lch": _parse_lch,
    "oklab": _parse_oklab,
    "oklch": _parse_oklch,
    "color": _parse_color_function,
    "cmyk": _parse_cmyk,
    "cmyka": _parse_cmyk,
}

SUPPORTED_FUNCTIONS = tuple(_FUNCTIONS)


def is_valid_color(text: str) -> bool:
    """True if ``text`` parses."""
    try:
        parse_color(text)
    except ParseError:
        return False
    return True
