"""
BigColor Gradients
==================

Ordered color stops sampled along linear, radial or conic geometry, with
PAD / REPEAT / REFLECT handling of out-of-range positions.

>>> from bigcolor.gradients import Gradient
>>> g = Gradient.from_css_string("linear-gradient(to right, red, blue)")
>>> g.color_at(0.5).to_rgb_string()
'rgb(128, 0, 128)'
"""
from .color_stop import ColorStop
from .geometry import Geometry, LinearGeometry, RadialGeometry, ConicGeometry, SIDE_ANGLES
from .gradient import Gradient
from .css import parse_css_gradient, distribute_offsets, split_top_level

__all__ = [
    'ColorStop',
    'Geometry',
    'LinearGeometry',
    'RadialGeometry',
    'ConicGeometry',
    'SIDE_ANGLES',
    'Gradient',
    'parse_css_gradient',
    'distribute_offsets',
    'split_top_level',
]
