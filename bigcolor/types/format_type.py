# No dependencies
from enum import Enum


class ColorFormat(str, Enum):
    """Syntax a color was parsed from. Used for diagnostics and ``to_string``."""
    NAME = "name"
    HEX = "hex"
    HEX8 = "hex8"
    RGB = "rgb"
    PRGB = "prgb"
    HSL = "hsl"
    HSV = "hsv"
    HSB = "hsb"
    HWB = "hwb"
    CMYK = "cmyk"
    LAB = "lab"
    LCH = "lch"
    OKLAB = "oklab"
    OKLCH = "oklch"
    COLOR = "color"


# Formats whose string form has no alpha slot
ALPHALESS_FORMATS = {ColorFormat.NAME, ColorFormat.HEX}

BYTE_MAX = 255
PERCENT_MAX = 100.0
HUE_360 = 360
