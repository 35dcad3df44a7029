from .format_type import ColorFormat, ALPHALESS_FORMATS, BYTE_MAX, PERCENT_MAX, HUE_360
from .color_types import (
    Scalar,
    Triplet,
    RGBTuple,
    RGBATuple,
    ColorSpace,
    PredefinedSpace,
    HueDirection,
    HUE_SPACES,
    HUE_INDEX,
    is_hue_space,
)
from .blend_mode import BlendMode
from .gradient_types import GradientType, ExtendMode, extend_to_bound_type
from .wcag import WCAGLevel, WCAGSize, READABILITY_THRESHOLDS

__all__ = [
    'ColorFormat', 'ALPHALESS_FORMATS', 'BYTE_MAX', 'PERCENT_MAX', 'HUE_360',
    'Scalar', 'Triplet', 'RGBTuple', 'RGBATuple', 'ColorSpace', 'PredefinedSpace',
    'HueDirection', 'HUE_SPACES', 'HUE_INDEX', 'is_hue_space',
    'BlendMode',
    'GradientType', 'ExtendMode', 'extend_to_bound_type',
    'WCAGLevel', 'WCAGSize', 'READABILITY_THRESHOLDS',
]
