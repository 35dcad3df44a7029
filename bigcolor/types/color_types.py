from __future__ import annotations
from typing import Literal, Tuple, Union

Scalar = Union[int, float]
Triplet = Tuple[float, float, float]
RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[float, float, float, float]
ColorSpace = Literal[
    "rgb", "hsl", "hsv", "hsb", "hwb", "cmyk",
    "lab", "lch", "oklab", "oklch", "xyz",
]
PredefinedSpace = Literal[
    "srgb", "srgb-linear", "display-p3", "a98-rgb",
    "prophoto-rgb", "rec2020", "xyz", "xyz-d50", "xyz-d65",
]
HUE_SPACES = {"hsl", "hsv", "hsb", "hwb", "lch", "oklch"}
# Index of the hue channel inside each hue-bearing model tuple
HUE_INDEX = {"hsl": 0, "hsv": 0, "hsb": 0, "hwb": 0, "lch": 2, "oklch": 2}
HueDirection = Literal["cw", "ccw", "shortest", "longest"]
ModelTuple = Union[Triplet, Tuple[float, float, float, float]]


def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space carries a hue channel.

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES
