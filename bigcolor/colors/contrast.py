"""WCAG 2.1 luminance, contrast ratio and readability."""
from __future__ import annotations
from typing import Iterable, Optional, Union

from ..conversions import clamp_unit
from ..defaults import BRIGHTNESS_THRESHOLD, WCAG_LEVEL, WCAG_SIZE, value_or_default
from ..types.format_type import BYTE_MAX
from ..types.wcag import READABILITY_THRESHOLDS, WCAGLevel, WCAGSize
from .big_color import BigColor
from .manipulation import ColorLike, coerce_color

BLACK = BigColor(0, 0, 0)
WHITE = BigColor(BYTE_MAX, BYTE_MAX, BYTE_MAX)


def _linearize(channel: float) -> float:
    c = channel / BYTE_MAX
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def get_luminance(self: BigColor) -> float:
    """Relative luminance in [0, 1]."""
    return 0.2126 * _linearize(self.r) + 0.7152 * _linearize(self.g) + 0.0722 * _linearize(self.b)


def get_brightness(self: BigColor) -> float:
    """Perceived brightness ``(R*299 + G*587 + B*114) / 1000`` on the 0-255 scale."""
    return (self.r * 299 + self.g * 587 + self.b * 114) / 1000


def is_light(self: BigColor) -> bool:
    return get_brightness(self) >= BRIGHTNESS_THRESHOLD


def is_dark(self: BigColor) -> bool:
    return not is_light(self)


def contrast_ratio(self: BigColor, other: ColorLike) -> float:
    """``(L1 + 0.05) / (L2 + 0.05)`` with the lighter color on top; symmetric."""
    l1 = get_luminance(self)
    l2 = get_luminance(coerce_color(other))
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


readability = contrast_ratio


def readability_threshold(level: Union[WCAGLevel, str, None] = None, size: Union[WCAGSize, str, None] = None) -> float:
    level = WCAGLevel.coerce(value_or_default(level, WCAG_LEVEL))
    size = WCAGSize.coerce(value_or_default(size, WCAG_SIZE))
    return READABILITY_THRESHOLDS[(level, size)]


def is_readable_on(
    self: BigColor,
    background: ColorLike,
    level: Union[WCAGLevel, str, None] = None,
    size: Union[WCAGSize, str, None] = None,
) -> bool:
    """
    WCAG readability of ``self`` as text over ``background``.

    Args:
        background: color or color string
        level: "AA" (default) or "AAA"
        size: "small" (default) or "large" text
    """
    return contrast_ratio(self, background) >= readability_threshold(level, size)


def most_readable(
    self: BigColor,
    candidates: Iterable[ColorLike],
    include_fallback_colors: bool = False,
    level: Union[WCAGLevel, str, None] = None,
    size: Union[WCAGSize, str, None] = None,
) -> BigColor:
    """
    The candidate with the highest contrast against ``self``.

    With ``include_fallback_colors``, white or black is returned instead when
    no candidate is readable at ``level``/``size``. Ties keep the earliest
    candidate.
    """
    best: Optional[BigColor] = None
    best_ratio = -1.0
    for candidate in candidates:
        color = coerce_color(candidate)
        ratio = contrast_ratio(self, color)
        if ratio > best_ratio:
            best, best_ratio = color, ratio
    if best is None and not include_fallback_colors:
        raise ValueError("most_readable needs at least one candidate")
    if include_fallback_colors and (best is None or best_ratio < readability_threshold(level, size)):
        return most_readable(self, [WHITE, BLACK])
    return best  # type: ignore[return-value]


def get_contrast_color(self: BigColor, intensity: float = 1.0) -> BigColor:
    """
    A color readable on ``self``.

    Picks black or white, whichever contrasts more with ``self``, then
    interpolates in RGB from ``self`` (intensity 0) to that extreme
    (intensity 1). Alpha is kept.
    """
    t = clamp_unit(intensity)
    target = BLACK if contrast_ratio(self, BLACK) >= contrast_ratio(self, WHITE) else WHITE
    return BigColor(
        self.r + (target.r - self.r) * t,
        self.g + (target.g - self.g) * t,
        self.b + (target.b - self.b) * t,
        self.a,
        self.format,
    )


BigColor.get_luminance = get_luminance
BigColor.get_brightness = get_brightness
BigColor.is_light = is_light
BigColor.is_dark = is_dark
BigColor.contrast_ratio = contrast_ratio
BigColor.readability = readability
BigColor.is_readable_on = is_readable_on
BigColor.most_readable = most_readable
BigColor.get_contrast_color = get_contrast_color
