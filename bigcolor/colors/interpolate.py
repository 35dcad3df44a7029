from __future__ import annotations
from typing import Optional

import numpy as np
from numpy import ndarray as NDArray

from ..conversions import clamp_unit, np_convert
from ..conversions.lab import LAB_ACHROMATIC, OKLAB_ACHROMATIC
from ..defaults import HUE_DIRECTION, INTERPOLATION_SPACE, value_or_default
from ..types.color_types import HUE_INDEX, HueDirection
from .big_color import BigColor
from .manipulation import ColorLike, coerce_color

# Tolerance below which a saturation/chroma makes hue meaningless
_POWERLESS_EPS = 1e-9


def hue_lerp(h0, h1, u, direction: Optional[HueDirection] = None) -> NDArray:
    """
    Interpolate hue angles with wrapping.

    Args:
        h0: Start hue(s) in degrees
        h1: End hue(s) in degrees
        u: Interpolation coefficients
        direction: 'shortest' (default), 'longest', 'cw' (increasing hue)
            or 'ccw' (decreasing hue)

    Returns:
        Interpolated hue values in [0, 360)
    """
    direction = value_or_default(direction, HUE_DIRECTION)
    h0 = np.asarray(h0, dtype=float) % 360.0
    h1 = np.asarray(h1, dtype=float) % 360.0
    dh = h1 - h0

    if direction == "shortest":
        dh = np.where(dh > 180.0, dh - 360.0, dh)
        dh = np.where(dh < -180.0, dh + 360.0, dh)
    elif direction == "longest":
        dh = np.where((dh > 0) & (dh < 180.0), dh - 360.0, dh)
        dh = np.where((dh < 0) & (dh > -180.0), dh + 360.0, dh)
    elif direction == "cw":
        dh = np.where(dh < 0, dh + 360.0, dh)
    elif direction == "ccw":
        dh = np.where(dh > 0, dh - 360.0, dh)
    else:
        raise ValueError(f"Invalid hue direction: {direction}")

    return (h0 + np.asarray(u, dtype=float) * dh) % 360.0


def _powerless_hue(values: NDArray, space: str) -> NDArray:
    if space == "hwb":
        return values[..., 1] + values[..., 2] >= 1 - _POWERLESS_EPS
    if space == "lch":
        return values[..., 1] < LAB_ACHROMATIC
    if space == "oklch":
        return values[..., 1] < OKLAB_ACHROMATIC
    return values[..., 1] <= _POWERLESS_EPS


def lerp_model(c0, c1, u, space: str = "rgb", direction: Optional[HueDirection] = None) -> NDArray:
    """
    Per-channel linear interpolation of model tuples shaped (..., 3).

    Hue channels travel around the circle. When one endpoint is achromatic
    its hue is undefined and the other endpoint's hue is used for both.
    """
    c0 = np.asarray(c0, dtype=float)
    c1 = np.asarray(c1, dtype=float)
    u = np.asarray(u, dtype=float)
    out = c0 + (c1 - c0) * u[..., np.newaxis]

    hue_index = HUE_INDEX.get(space)
    if hue_index is None:
        return out

    h0 = c0[..., hue_index]
    h1 = c1[..., hue_index]
    gray0 = _powerless_hue(c0, space)
    gray1 = _powerless_hue(c1, space)
    h0, h1 = np.where(gray0, h1, h0), np.where(gray1, h0, h1)
    out[..., hue_index] = hue_lerp(h0, h1, u, direction)
    return out


def interpolate(
    self: BigColor,
    other: ColorLike,
    t: float,
    space: Optional[str] = None,
    hue_direction: Optional[HueDirection] = None,
) -> BigColor:
    """
    Blend toward ``other`` inside a color model.

    Args:
        other: end color or color string
        t: position in [0, 1] (clamped); 0 is ``self``, 1 is ``other``
        space: rgb (default), hsl, hsv, hwb, lab, lch, oklab, oklch, xyz
            or a ``color()`` space name
        hue_direction: path for hue-bearing models, default 'shortest'

    Returns:
        New color; alpha is always interpolated linearly.
    """
    other = coerce_color(other)
    space = value_or_default(space, INTERPOLATION_SPACE).lower()
    t = clamp_unit(t)
    c0 = np_convert(np.array(self.to_unit_rgb()), "rgb", space)
    c1 = np_convert(np.array(other.to_unit_rgb()), "rgb", space)
    mixed = lerp_model(c0, c1, t, space, hue_direction)
    alpha = self.a + (other.a - self.a) * t
    return BigColor.from_model(space, tuple(float(v) for v in mixed), alpha, self.format)


BigColor.interpolate = interpolate
