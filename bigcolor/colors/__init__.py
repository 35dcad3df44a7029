"""
BigColor Color Values
=====================

``BigColor`` is the canonical, immutable color value: float sRGB channels
in [0, 255], alpha in [0, 1] and a provenance tag. Importing this package
attaches the formatting, manipulation, blending, scheme, contrast and
interpolation methods to it.

Usage
-----
>>> from bigcolor import BigColor
>>> red = BigColor.parse("#ff0000")
>>> red.to_rgb_string()
'rgb(255, 0, 0)'
>>> red.spin(120).to_hex_string()
'#00ff00'
>>> red.blend("blue", "multiply").to_hex_string()
'#000000'
"""
from .big_color import BigColor, parse, random
from . import formatting, manipulation, blend, schemes, contrast, interpolate
from .formatting import format_number
from .manipulation import coerce_color
from .blend import blend_channels, BLEND_FUNCTIONS
from .contrast import BLACK, WHITE, readability_threshold
from .interpolate import hue_lerp, lerp_model

__all__ = [
    'BigColor',
    'parse',
    'random',
    'format_number',
    'coerce_color',
    'blend_channels',
    'BLEND_FUNCTIONS',
    'BLACK',
    'WHITE',
    'readability_threshold',
    'hue_lerp',
    'lerp_model',
]
