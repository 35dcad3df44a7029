"""
HSL/RGB adjustments attached to ``BigColor``.

Amounts are percentage points (default 10). Every operation returns a new
color and keeps alpha and provenance.
"""
from __future__ import annotations
import warnings
from typing import Optional, Union

from ..conversions import clamp_unit, normalize_hue
from ..defaults import DEFAULT_AMOUNT, DEFAULT_MIX_AMOUNT, value_or_default
from ..types.format_type import BYTE_MAX
from .big_color import BigColor

ColorLike = Union[BigColor, str]


def coerce_color(value: ColorLike) -> BigColor:
    """Accept a ``BigColor`` or any parseable string."""
    if isinstance(value, BigColor):
        return value
    if isinstance(value, str):
        return BigColor.parse(value)
    raise TypeError(f"Expected BigColor or color string, got {type(value).__name__}")


def _adjust_hsl(color: BigColor, ds: float = 0.0, dl: float = 0.0) -> BigColor:
    h, s, l = color.to_hsl()
    return color._with_model("hsl", (h, clamp_unit(s + ds), clamp_unit(l + dl)))


def lighten(self: BigColor, amount: Optional[float] = None) -> BigColor:
    return _adjust_hsl(self, dl=value_or_default(amount, DEFAULT_AMOUNT) / 100)


def darken(self: BigColor, amount: Optional[float] = None) -> BigColor:
    return _adjust_hsl(self, dl=-value_or_default(amount, DEFAULT_AMOUNT) / 100)


def saturate(self: BigColor, amount: Optional[float] = None) -> BigColor:
    return _adjust_hsl(self, ds=value_or_default(amount, DEFAULT_AMOUNT) / 100)


def desaturate(self: BigColor, amount: Optional[float] = None) -> BigColor:
    return _adjust_hsl(self, ds=-value_or_default(amount, DEFAULT_AMOUNT) / 100)


def brighten(self: BigColor, amount: Optional[float] = None) -> BigColor:
    """Shift every RGB channel up by ``255 * amount / 100``."""
    shift = BYTE_MAX * value_or_default(amount, DEFAULT_AMOUNT) / 100
    return BigColor(self.r + shift, self.g + shift, self.b + shift, self.a, self.format)


def spin(self: BigColor, degrees: float) -> BigColor:
    """Rotate hue; the result wraps into [0, 360)."""
    h, s, l = self.to_hsl()
    return self._with_model("hsl", (normalize_hue(h + degrees), s, l))


def grayscale(self: BigColor) -> BigColor:
    h, _, l = self.to_hsl()
    return self._with_model("hsl", (h, 0.0, l))


def greyscale(self: BigColor) -> BigColor:
    warnings.warn(
        "greyscale() is deprecated; use grayscale()",
        DeprecationWarning,
        stacklevel=2,
    )
    return grayscale(self)


def invert(self: BigColor) -> BigColor:
    return BigColor(BYTE_MAX - self.r, BYTE_MAX - self.g, BYTE_MAX - self.b, self.a, self.format)


def mix(self: BigColor, other: ColorLike, amount: Optional[float] = None) -> BigColor:
    """
    Linear RGBA mix: 0 returns ``self``, 100 returns ``other``.

    Args:
        other: color or color string
        amount: percentage of ``other`` (default 50)
    """
    other = coerce_color(other)
    p = clamp_unit(value_or_default(amount, DEFAULT_MIX_AMOUNT) / 100)
    return BigColor(
        self.r + (other.r - self.r) * p,
        self.g + (other.g - self.g) * p,
        self.b + (other.b - self.b) * p,
        self.a + (other.a - self.a) * p,
        self.format,
    )


BigColor.lighten = lighten
BigColor.darken = darken
BigColor.saturate = saturate
BigColor.desaturate = desaturate
BigColor.brighten = brighten
BigColor.spin = spin
BigColor.grayscale = grayscale
BigColor.greyscale = greyscale
BigColor.invert = invert
BigColor.mix = mix
