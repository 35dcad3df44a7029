"""String renderers attached to ``BigColor`` as ``to_*_string`` methods."""
from __future__ import annotations
from typing import Callable, Optional, Union

from ..conversions import resolve_space, round_half_up
from ..defaults import (
    ALLOW_SHORT_HEX,
    ALPHA_DECIMALS,
    LAB_DECIMALS,
    OK_DECIMALS,
    PERCENT_DECIMALS,
    XYZ_DECIMALS,
    value_or_default,
)
from ..parsing import name_for_rgb
from ..types.format_type import ALPHALESS_FORMATS, ColorFormat
from .big_color import BigColor


def format_number(value: float, decimals: int) -> str:
    """Round and drop trailing zeros: ``format_number(50.0, 1) == "50"``."""
    text = f"{round(value, decimals):.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _alpha(color: BigColor) -> str:
    return format_number(color.a, ALPHA_DECIMALS)


def is_translucent(color: BigColor) -> bool:
    """True when the printed alpha is below 1, so strings re-parse to the same form."""
    return _alpha(color) != "1"


def _percent(fraction: float) -> str:
    return f"{format_number(fraction * 100, PERCENT_DECIMALS)}%"


def _modern_alpha(color: BigColor) -> str:
    return f" / {_alpha(color)}" if is_translucent(color) else ""


## Hex

def _hex_pairs(values: tuple[int, ...], allow_short: bool) -> str:
    pairs = [f"{v:02x}" for v in values]
    if allow_short and all(p[0] == p[1] for p in pairs):
        return "".join(p[0] for p in pairs)
    return "".join(pairs)


def to_hex_string(self: BigColor, allow_short: Optional[bool] = None) -> str:
    """``#rrggbb``, or ``#rgb`` when ``allow_short`` and every pair repeats."""
    return "#" + _hex_pairs(self.to_rgb(), value_or_default(allow_short, ALLOW_SHORT_HEX))


def to_hex8_string(self: BigColor, allow_short: Optional[bool] = None) -> str:
    return "#" + _hex_pairs(self.to_rgba8(), value_or_default(allow_short, ALLOW_SHORT_HEX))


def to_argb_hex_string(self: BigColor) -> str:
    """Alpha-first ``#aarrggbb``, as used by legacy filter syntaxes."""
    r, g, b, a = self.to_rgba8()
    return f"#{a:02x}{r:02x}{g:02x}{b:02x}"


## Legacy comma syntaxes

def to_rgb_string(self: BigColor) -> str:
    r, g, b = self.to_rgb()
    if is_translucent(self):
        return f"rgba({r}, {g}, {b}, {_alpha(self)})"
    return f"rgb({r}, {g}, {b})"


def to_percentage_rgb_string(self: BigColor) -> str:
    r, g, b = (f"{round_half_up(c)}%" for c in self.to_percentage_rgb())
    if is_translucent(self):
        return f"rgba({r}, {g}, {b}, {_alpha(self)})"
    return f"rgb({r}, {g}, {b})"


def _hue(hue: float) -> str:
    h = format_number(hue, PERCENT_DECIMALS)
    return "0" if h == "360" else h


def _hue_string(name: str, hue: float, second: float, third: float, color: BigColor) -> str:
    body = f"{_hue(hue)}, {_percent(second)}, {_percent(third)}"
    if is_translucent(color):
        return f"{name}a({body}, {_alpha(color)})"
    return f"{name}({body})"


def to_hsl_string(self: BigColor) -> str:
    return _hue_string("hsl", *self.to_hsl(), self)


def to_hsv_string(self: BigColor) -> str:
    return _hue_string("hsv", *self.to_hsv(), self)


def to_hsb_string(self: BigColor) -> str:
    return _hue_string("hsb", *self.to_hsv(), self)


def to_cmyk_string(self: BigColor) -> str:
    body = ", ".join(_percent(v) for v in self.to_cmyk())
    if is_translucent(self):
        return f"cmyka({body}, {_alpha(self)})"
    return f"cmyk({body})"


## Space-separated syntaxes

def to_hwb_string(self: BigColor) -> str:
    h, w, b = self.to_hwb()
    return f"hwb({_hue(h)} {_percent(w)} {_percent(b)}{_modern_alpha(self)})"


def to_lab_string(self: BigColor) -> str:
    l, a, b = (format_number(v, LAB_DECIMALS) for v in self.to_lab())
    return f"lab({l} {a} {b}{_modern_alpha(self)})"


def to_lch_string(self: BigColor) -> str:
    l, c, h = (format_number(v, LAB_DECIMALS) for v in self.to_lch())
    return f"lch({l} {c} {h}{_modern_alpha(self)})"


def to_oklab_string(self: BigColor) -> str:
    l, a, b = self.to_oklab()
    body = f"{format_number(l * 100, LAB_DECIMALS)}% {format_number(a, OK_DECIMALS)} {format_number(b, OK_DECIMALS)}"
    return f"oklab({body}{_modern_alpha(self)})"


def to_oklch_string(self: BigColor) -> str:
    l, c, h = self.to_oklch()
    body = f"{format_number(l * 100, LAB_DECIMALS)}% {format_number(c, OK_DECIMALS)} {format_number(h, LAB_DECIMALS)}"
    return f"oklch({body}{_modern_alpha(self)})"


def to_color_space_string(self: BigColor, space: str = "srgb") -> str:
    name = resolve_space(space)
    coords = " ".join(format_number(v, XYZ_DECIMALS) for v in self.to_color_space(name))
    return f"color({name} {coords}{_modern_alpha(self)})"


def to_xyz_string(self: BigColor) -> str:
    return to_color_space_string(self, "xyz-d65")


## Names and dispatch

def to_name(self: BigColor) -> Optional[str]:
    """Table name of an opaque color, ``"transparent"`` at alpha 0, else None."""
    if self.a == 0:
        return "transparent"
    if is_translucent(self):
        return None
    return name_for_rgb(self.to_rgb())


def _name_or_hex(color: BigColor) -> str:
    return to_name(color) or to_hex_string(color)


FORMATTERS: dict[ColorFormat, Callable[[BigColor], str]] = {
    ColorFormat.NAME: _name_or_hex,
    ColorFormat.HEX: to_hex_string,
    ColorFormat.HEX8: to_hex8_string,
    ColorFormat.RGB: to_rgb_string,
    ColorFormat.PRGB: to_percentage_rgb_string,
    ColorFormat.HSL: to_hsl_string,
    ColorFormat.HSV: to_hsv_string,
    ColorFormat.HSB: to_hsb_string,
    ColorFormat.HWB: to_hwb_string,
    ColorFormat.CMYK: to_cmyk_string,
    ColorFormat.LAB: to_lab_string,
    ColorFormat.LCH: to_lch_string,
    ColorFormat.OKLAB: to_oklab_string,
    ColorFormat.OKLCH: to_oklch_string,
    ColorFormat.COLOR: to_color_space_string,
}


def to_string(self: BigColor, fmt: Optional[Union[ColorFormat, str]] = None) -> str:
    """
    Render in ``fmt``, or in the format the color was parsed from.

    Formats without an alpha slot (names, 6-digit hex) fall back to the
    ``rgba()`` string for translucent colors; alpha 0 names render as
    ``transparent``.
    """
    fmt = ColorFormat(fmt) if fmt is not None else self.format
    if fmt in ALPHALESS_FORMATS and is_translucent(self):
        if fmt == ColorFormat.NAME and self.a == 0:
            return "transparent"
        return to_rgb_string(self)
    return FORMATTERS[fmt](self)


BigColor.to_hex_string = to_hex_string
BigColor.to_hex8_string = to_hex8_string
BigColor.to_argb_hex_string = to_argb_hex_string
BigColor.to_rgb_string = to_rgb_string
BigColor.to_percentage_rgb_string = to_percentage_rgb_string
BigColor.to_hsl_string = to_hsl_string
BigColor.to_hsv_string = to_hsv_string
BigColor.to_hsb_string = to_hsb_string
BigColor.to_hwb_string = to_hwb_string
BigColor.to_cmyk_string = to_cmyk_string
BigColor.to_lab_string = to_lab_string
BigColor.to_lch_string = to_lch_string
BigColor.to_oklab_string = to_oklab_string
BigColor.to_oklch_string = to_oklch_string
BigColor.to_xyz_string = to_xyz_string
BigColor.to_color_space_string = to_color_space_string
BigColor.to_name = to_name
BigColor.to_string = to_string
