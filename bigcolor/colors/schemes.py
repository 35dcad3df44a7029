from __future__ import annotations
from typing import Optional

from ..conversions import normalize_hue
from ..defaults import ANALOGOUS_COUNT, ANALOGOUS_STEP, MONOCHROMATIC_COUNT, value_or_default
from .big_color import BigColor


def _rotations(color: BigColor, offsets) -> list[BigColor]:
    h, s, l = color.to_hsl()
    return [color._with_model("hsl", (normalize_hue(h + offset), s, l)) for offset in offsets]


def complement(self: BigColor) -> BigColor:
    return _rotations(self, (180,))[0]


def triad(self: BigColor) -> list[BigColor]:
    return [self, *_rotations(self, (120, 240))]


def tetrad(self: BigColor) -> list[BigColor]:
    return [self, *_rotations(self, (90, 180, 270))]


def split_complement(self: BigColor) -> list[BigColor]:
    return [self, *_rotations(self, (150, 210))]


def polyad(self: BigColor, n: int) -> list[BigColor]:
    """``n`` colors with hues evenly spaced around the wheel, starting at ``self``."""
    if n < 1:
        raise ValueError(f"polyad needs at least one color, got {n}")
    step = 360 / n
    return [self, *_rotations(self, (step * i for i in range(1, n)))]


def analogous(self: BigColor, count: Optional[int] = None, angle_step: Optional[float] = None) -> list[BigColor]:
    """
    ``count`` neighbors of ``self`` spaced ``angle_step`` degrees apart.

    The base color sits in the middle of the run (left of center for even
    counts), and hues are ordered from most counter-clockwise to most
    clockwise.

    Args:
        count: number of colors, default 6
        angle_step: degrees between adjacent hues, default 30

    Raises:
        ValueError: if count < 1
    """
    count = value_or_default(count, ANALOGOUS_COUNT)
    angle_step = value_or_default(angle_step, ANALOGOUS_STEP)
    if count < 1:
        raise ValueError(f"analogous count must be at least 1, got {count}")
    first = -((count - 1) // 2)
    offsets = [angle_step * (first + i) for i in range(count)]
    return [self if offset == 0 else color for offset, color in zip(offsets, _rotations(self, offsets))]


def monochromatic(self: BigColor, count: Optional[int] = None) -> list[BigColor]:
    """
    ``count`` shades of one hue and saturation.

    Lightness is spread evenly over (0, 1) at ``(i + 1) / (count + 1)``, so
    pure black and pure white are never produced.
    """
    count = value_or_default(count, MONOCHROMATIC_COUNT)
    if count < 1:
        raise ValueError(f"monochromatic count must be at least 1, got {count}")
    h, s, _ = self.to_hsl()
    return [self._with_model("hsl", (h, s, (i + 1) / (count + 1))) for i in range(count)]


BigColor.complement = complement
BigColor.triad = triad
BigColor.tetrad = tetrad
BigColor.split_complement = split_complement
BigColor.polyad = polyad
BigColor.analogous = analogous
BigColor.monochromatic = monochromatic
