"""
BigColor Model Conversions
==========================

Pure conversion functions between unit sRGB and every supported model,
with scalar and vectorized (numpy) implementations.

Channel conventions
-------------------
- rgb:            r, g, b in [0, 1]
- hsl / hsv / hwb: hue in degrees, other channels in [0, 1]
- cmyk:           c, m, y, k in [0, 1]
- lab / lch:      L in [0, 100], a/b/C in Lab units, hue in degrees (D50)
- oklab / oklch:  L in [0, 1], a/b/C in OKLab units, hue in degrees
- xyz:            CIE XYZ D65 with Y = 1 for white
- color() spaces: srgb, srgb-linear, display-p3, a98-rgb, prophoto-rgb,
                  rec2020, xyz-d50, xyz-d65 in their native [0, 1] ranges

Hub
---
    MODEL_CONVERTERS[model] -> (to_unit_rgb, from_unit_rgb)
    convert(values, from_space, to_space)
    np_convert(array, from_space, to_space)

Examples
--------
>>> from bigcolor.conversions import convert
>>> convert((0.0, 1.0, 0.5), "hsl", "rgb")
(1.0, 0.0, 0.0)
>>> convert((1.0, 0.0, 0.0), "rgb", "cmyk")
(0.0, 1.0, 1.0, 0.0)
"""
from .numbers import clamp_unit, clamp_byte, clamp_percent, normalize_hue, round_half_up, to_byte, from_byte
from .hsl import rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb
from .hsv import (
    rgb_to_hsv,
    hsv_to_rgb,
    np_rgb_to_hsv,
    np_hsv_to_rgb,
    rgb_to_hwb,
    hwb_to_rgb,
    np_rgb_to_hwb,
    np_hwb_to_rgb,
)
from .cmyk import rgb_to_cmyk, cmyk_to_rgb
from .xyz import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    rgb_to_xyz,
    xyz_to_rgb,
    np_rgb_to_xyz,
    np_xyz_to_rgb,
    d65_to_d50,
    d50_to_d65,
)
from .lab import (
    rgb_to_lab,
    lab_to_rgb,
    rgb_to_lch,
    lch_to_rgb,
    rgb_to_oklab,
    oklab_to_rgb,
    rgb_to_oklch,
    oklch_to_rgb,
    np_rgb_to_lab,
    np_lab_to_rgb,
    np_rgb_to_oklab,
    np_oklab_to_rgb,
)
from .predefined import SPACES, resolve_space, space_to_rgb, rgb_to_space
from .wrapper import MODEL_CONVERTERS, NP_MODEL_CONVERTERS, get_converters, convert, np_convert, known_spaces

__all__ = [
    # Channel primitives
    'clamp_unit', 'clamp_byte', 'clamp_percent', 'normalize_hue', 'round_half_up', 'to_byte', 'from_byte',

    # Cylindrical sRGB models
    'rgb_to_hsl', 'hsl_to_rgb', 'np_rgb_to_hsl', 'np_hsl_to_rgb',
    'rgb_to_hsv', 'hsv_to_rgb', 'np_rgb_to_hsv', 'np_hsv_to_rgb',
    'rgb_to_hwb', 'hwb_to_rgb', 'np_rgb_to_hwb', 'np_hwb_to_rgb',
    'rgb_to_cmyk', 'cmyk_to_rgb',

    # XYZ and perceptual models
    'srgb_to_linear', 'linear_to_srgb', 'np_srgb_to_linear', 'np_linear_to_srgb',
    'rgb_to_xyz', 'xyz_to_rgb', 'np_rgb_to_xyz', 'np_xyz_to_rgb', 'd65_to_d50', 'd50_to_d65',
    'rgb_to_lab', 'lab_to_rgb', 'rgb_to_lch', 'lch_to_rgb',
    'rgb_to_oklab', 'oklab_to_rgb', 'rgb_to_oklch', 'oklch_to_rgb',
    'np_rgb_to_lab', 'np_lab_to_rgb', 'np_rgb_to_oklab', 'np_oklab_to_rgb',

    # color() spaces
    'SPACES', 'resolve_space', 'space_to_rgb', 'rgb_to_space',

    # Hub
    'MODEL_CONVERTERS', 'NP_MODEL_CONVERTERS', 'get_converters', 'convert', 'np_convert', 'known_spaces',
]
