"""
BigColor - Color Parsing, Conversion and Gradient Library
=========================================================

Parse any CSS color string, convert between color models, manipulate and
blend colors, check WCAG contrast, and build multi-stop gradients.

Key Features
------------
- CSS Color 4 parsing: names, hex, rgb(), hsl(), hwb(), lab(), lch(),
  oklab(), oklch(), color() and the hsv()/cmyk() extensions
- Conversions through XYZ for the perceptual and predefined RGB spaces
- Lighten/darken/saturate/spin, twelve blend modes and color schemes
- Linear, radial and conic gradients with pad, repeat and reflect
  extension, and CSS gradient strings in both directions

Quick Start
-----------
>>> from bigcolor import BigColor, Gradient
>>> BigColor.parse("hsl(120, 100%, 25%)").to_hex_string()
'#008000'
>>> BigColor.parse("red").mix("blue").to_rgb_string()
'rgb(128, 0, 128)'
>>> Gradient.from_colors(["black", "white"]).color_at(0.5).to_hex_string()
'#808080'
"""

from .types import (
    ColorFormat,
    BlendMode,
    GradientType,
    ExtendMode,
    WCAGLevel,
    WCAGSize,
)
from .parsing import ParseError, parse_color, is_valid_color
from .conversions import convert, np_convert
from .colors import BigColor, parse, random
from .gradients import (
    ColorStop,
    Gradient,
    Geometry,
    LinearGeometry,
    RadialGeometry,
    ConicGeometry,
    parse_css_gradient,
)

__version__ = "0.3.0"

__all__ = [
    # Core
    'BigColor', 'parse', 'random', 'ParseError', 'parse_color', 'is_valid_color',
    'convert', 'np_convert',

    # Enums
    'ColorFormat', 'BlendMode', 'GradientType', 'ExtendMode', 'WCAGLevel', 'WCAGSize',

    # Gradients
    'ColorStop', 'Gradient', 'Geometry', 'LinearGeometry', 'RadialGeometry', 'ConicGeometry',
    'parse_css_gradient',
]
