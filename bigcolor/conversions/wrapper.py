"""
Conversion hub.

Every model registers one ``(to_unit_rgb, from_unit_rgb)`` pair; any
model-to-model conversion is the composition of the two through unit sRGB
(the perceptual models themselves go through XYZ internally).
"""
from typing import Callable, Sequence

import numpy as np
from numpy import ndarray as NDArray

from .cmyk import cmyk_to_rgb, rgb_to_cmyk
from .hsl import hsl_to_rgb, np_hsl_to_rgb, np_rgb_to_hsl, rgb_to_hsl
from .hsv import (
    hsv_to_rgb,
    hwb_to_rgb,
    np_hsv_to_rgb,
    np_hwb_to_rgb,
    np_rgb_to_hsv,
    np_rgb_to_hwb,
    rgb_to_hsv,
    rgb_to_hwb,
)
from .lab import (
    OKLAB_ACHROMATIC,
    lab_to_rgb,
    lch_to_rgb,
    np_cartesian_to_polar,
    np_lab_to_rgb,
    np_oklab_to_rgb,
    np_polar_to_cartesian,
    np_rgb_to_lab,
    np_rgb_to_oklab,
    oklab_to_rgb,
    oklch_to_rgb,
    rgb_to_lab,
    rgb_to_lch,
    rgb_to_oklab,
    rgb_to_oklch,
)
from .predefined import SPACES, SPACE_ALIASES, np_space_to_xyz, np_xyz_to_space, resolve_space, rgb_to_space, space_to_rgb
from .xyz import np_rgb_to_xyz, np_xyz_to_rgb, rgb_to_xyz, xyz_to_rgb

ToRGB = Callable[..., tuple]
FromRGB = Callable[[float, float, float], tuple]


def _rgb_identity(r: float, g: float, b: float) -> tuple[float, float, float]:
    return r, g, b


MODEL_CONVERTERS: dict[str, tuple[ToRGB, FromRGB]] = {
    "rgb": (_rgb_identity, _rgb_identity),
    "hsl": (hsl_to_rgb, rgb_to_hsl),
    "hsv": (hsv_to_rgb, rgb_to_hsv),
    "hsb": (hsv_to_rgb, rgb_to_hsv),
    "hwb": (hwb_to_rgb, rgb_to_hwb),
    "cmyk": (cmyk_to_rgb, rgb_to_cmyk),
    "lab": (lab_to_rgb, rgb_to_lab),
    "lch": (lch_to_rgb, rgb_to_lch),
    "oklab": (oklab_to_rgb, rgb_to_oklab),
    "oklch": (oklch_to_rgb, rgb_to_oklch),
    "xyz": (xyz_to_rgb, rgb_to_xyz),
}

NP_MODEL_CONVERTERS: dict[str, tuple[Callable[[NDArray], NDArray], Callable[[NDArray], NDArray]]] = {
    "rgb": (lambda v: np.asarray(v, dtype=float), lambda v: np.asarray(v, dtype=float)),
    "hsl": (np_hsl_to_rgb, np_rgb_to_hsl),
    "hsv": (np_hsv_to_rgb, np_rgb_to_hsv),
    "hsb": (np_hsv_to_rgb, np_rgb_to_hsv),
    "hwb": (np_hwb_to_rgb, np_rgb_to_hwb),
    "lab": (np_lab_to_rgb, np_rgb_to_lab),
    "lch": (lambda v: np_lab_to_rgb(np_polar_to_cartesian(v)), lambda v: np_cartesian_to_polar(np_rgb_to_lab(v))),
    "oklab": (np_oklab_to_rgb, np_rgb_to_oklab),
    "oklch": (
        lambda v: np_oklab_to_rgb(np_polar_to_cartesian(v)),
        lambda v: np_cartesian_to_polar(np_rgb_to_oklab(v), epsilon=OKLAB_ACHROMATIC),
    ),
    "xyz": (np_xyz_to_rgb, np_rgb_to_xyz),
}


def get_converters(space: str) -> tuple[ToRGB, FromRGB]:
    """
    Look up the hub pair for a model or predefined ``color()`` space.

    Raises:
        ValueError: if ``space`` names neither.
    """
    key = space.strip().lower()
    if key in MODEL_CONVERTERS:
        return MODEL_CONVERTERS[key]
    name = resolve_space(key)
    return (
        lambda c1, c2, c3: space_to_rgb(name, c1, c2, c3),
        lambda r, g, b: rgb_to_space(name, r, g, b),
    )


def convert(values: Sequence[float], from_space: str, to_space: str) -> tuple:
    """
    Convert one color tuple between any two registered models.

    Args:
        values: channel values in ``from_space`` units
        from_space: source model (e.g. "hsl", "oklch", "display-p3")
        to_space: target model

    Returns:
        tuple in ``to_space`` units. Unit RGB intermediates are not clamped.
    """
    if from_space == to_space:
        return tuple(float(v) for v in values)
    to_rgb, _ = get_converters(from_space)
    _, from_rgb = get_converters(to_space)
    return tuple(float(v) for v in from_rgb(*to_rgb(*values)))


def np_convert(values: NDArray, from_space: str, to_space: str) -> NDArray:
    """Vectorized ``convert`` over arrays shaped (..., 3)."""
    values = np.asarray(values, dtype=float)
    if from_space == to_space:
        return values
    rgb = _np_to_rgb(values, from_space)
    return _np_from_rgb(rgb, to_space)


def _np_to_rgb(values: NDArray, space: str) -> NDArray:
    key = space.strip().lower()
    if key in NP_MODEL_CONVERTERS:
        return NP_MODEL_CONVERTERS[key][0](values)
    if key == "cmyk":
        raise ValueError("cmyk has no vectorized converter")
    return np_xyz_to_rgb(np_space_to_xyz(key, values))


def _np_from_rgb(rgb: NDArray, space: str) -> NDArray:
    key = space.strip().lower()
    if key in NP_MODEL_CONVERTERS:
        return NP_MODEL_CONVERTERS[key][1](rgb)
    if key == "cmyk":
        raise ValueError("cmyk has no vectorized converter")
    return np_xyz_to_space(key, np_rgb_to_xyz(rgb))


def known_spaces() -> list[str]:
    return sorted(set(MODEL_CONVERTERS) | set(SPACES) | set(SPACE_ALIASES))
