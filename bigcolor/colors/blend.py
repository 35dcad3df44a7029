"""
Separable blend modes (W3C Compositing Level 1) with source-over alpha.

Formulas take the backdrop ``cb`` and source ``cs`` as unit arrays and
broadcast, so whole palettes can be blended at once.
"""
from __future__ import annotations
from typing import Callable, Optional, Union

import numpy as np
from numpy import ndarray as NDArray

from ..conversions import clamp_unit
from ..defaults import DEFAULT_BLEND_AMOUNT, value_or_default
from ..types.blend_mode import BlendMode
from ..types.format_type import BYTE_MAX
from .big_color import BigColor
from .manipulation import ColorLike, coerce_color


def _normal(cb: NDArray, cs: NDArray) -> NDArray:
    return np.broadcast_to(cs, np.broadcast(cb, cs).shape).astype(float)


def _multiply(cb: NDArray, cs: NDArray) -> NDArray:
    return cb * cs


def _screen(cb: NDArray, cs: NDArray) -> NDArray:
    return cb + cs - cb * cs


def _hard_light(cb: NDArray, cs: NDArray) -> NDArray:
    return np.where(cs <= 0.5, _multiply(cb, 2 * cs), _screen(cb, 2 * cs - 1))


def _overlay(cb: NDArray, cs: NDArray) -> NDArray:
    return _hard_light(cs, cb)


def _darken(cb: NDArray, cs: NDArray) -> NDArray:
    return np.minimum(cb, cs)


def _lighten(cb: NDArray, cs: NDArray) -> NDArray:
    return np.maximum(cb, cs)


def _color_dodge(cb: NDArray, cs: NDArray) -> NDArray:
    ratio = cb / np.where(cs < 1, 1 - cs, 1.0)
    return np.where(cb <= 0, 0.0, np.where(cs >= 1, 1.0, np.minimum(1.0, ratio)))


def _color_burn(cb: NDArray, cs: NDArray) -> NDArray:
    ratio = (1 - cb) / np.where(cs > 0, cs, 1.0)
    return np.where(cb >= 1, 1.0, np.where(cs <= 0, 0.0, 1 - np.minimum(1.0, ratio)))


def _soft_light(cb: NDArray, cs: NDArray) -> NDArray:
    d = np.where(cb <= 0.25, ((16 * cb - 12) * cb + 4) * cb, np.sqrt(cb))
    return np.where(
        cs <= 0.5,
        cb - (1 - 2 * cs) * cb * (1 - cb),
        cb + (2 * cs - 1) * (d - cb),
    )


def _difference(cb: NDArray, cs: NDArray) -> NDArray:
    return np.abs(cb - cs)


def _exclusion(cb: NDArray, cs: NDArray) -> NDArray:
    return cb + cs - 2 * cb * cs


BLEND_FUNCTIONS: dict[BlendMode, Callable[[NDArray, NDArray], NDArray]] = {
    BlendMode.NORMAL: _normal,
    BlendMode.MULTIPLY: _multiply,
    BlendMode.SCREEN: _screen,
    BlendMode.OVERLAY: _overlay,
    BlendMode.DARKEN: _darken,
    BlendMode.LIGHTEN: _lighten,
    BlendMode.COLOR_DODGE: _color_dodge,
    BlendMode.COLOR_BURN: _color_burn,
    BlendMode.HARD_LIGHT: _hard_light,
    BlendMode.SOFT_LIGHT: _soft_light,
    BlendMode.DIFFERENCE: _difference,
    BlendMode.EXCLUSION: _exclusion,
}


def blend_channels(base, source, mode: Union[BlendMode, str] = BlendMode.NORMAL) -> NDArray:
    """
    Apply a blend formula to unit channel arrays.

    Args:
        base: backdrop channels in [0, 1], any shape
        source: source channels in [0, 1], broadcastable to ``base``
        mode: ``BlendMode`` or its CSS name

    Returns:
        blended channels clipped to [0, 1]
    """
    cb = np.asarray(base, dtype=float)
    cs = np.asarray(source, dtype=float)
    return np.clip(BLEND_FUNCTIONS[BlendMode.coerce(mode)](cb, cs), 0.0, 1.0)


def composite(cb: NDArray, ab: float, cs: NDArray, as_: float, mode: BlendMode) -> tuple[NDArray, float]:
    """
    Source-over composite of a blended source onto a backdrop.

    Returns:
        (unit rgb, alpha). With both alphas at 1 the color is just the
        blend result; a transparent backdrop shows the plain source.
    """
    ao = as_ + ab * (1 - as_)
    if ao <= 0:
        return cb, 0.0
    mixed = blend_channels(cb, cs, mode)
    source = (1 - ab) * cs + ab * mixed
    return (as_ * source + (1 - as_) * ab * cb) / ao, ao


def blend(
    self: BigColor,
    other: ColorLike,
    mode: Union[BlendMode, str] = BlendMode.NORMAL,
    amount: Optional[float] = None,
) -> BigColor:
    """
    Blend ``other`` over ``self``.

    ``amount`` (percent, default 100) scales the source's opacity, so for
    opaque colors the result is ``self`` interpolated toward the full-strength
    blend by ``amount / 100``. A translucent source is weighted by its own
    alpha as well: half-transparent blue over red gives ``rgb(128, 0, 128)``.
    """
    other = coerce_color(other)
    mode = BlendMode.coerce(mode)
    t = clamp_unit(value_or_default(amount, DEFAULT_BLEND_AMOUNT) / 100)
    cb = np.array(self.to_unit_rgb())
    cs = np.array(other.to_unit_rgb())
    rgb, alpha = composite(cb, self.a, cs, other.a * t, mode)
    r, g, b = (float(c) * BYTE_MAX for c in rgb)
    return BigColor(r, g, b, alpha, self.format)


BigColor.blend = blend
