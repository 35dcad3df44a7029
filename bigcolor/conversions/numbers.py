"""Channel primitives: range clamping, hue wrapping and rounding."""
import math
import numpy as np
from boundednumbers import clamp

from ..types.format_type import BYTE_MAX, PERCENT_MAX, HUE_360


def _finite(value: float) -> float:
    # NaN maps to 0 and infinities to the largest finite floats
    return float(np.nan_to_num(float(value), nan=0.0))


def clamp_unit(value: float) -> float:
    """Clamp to the inclusive range ``[0, 1]``. NaN clamps to 0."""
    return float(clamp(_finite(value), 0.0, 1.0))


def clamp_byte(value: float) -> float:
    """Clamp to ``[0, 255]`` keeping sub-integer precision."""
    return float(clamp(_finite(value), 0.0, float(BYTE_MAX)))


def clamp_percent(value: float) -> float:
    return float(clamp(_finite(value), 0.0, PERCENT_MAX))


def normalize_hue(h: float) -> float:
    """Wrap a hue angle into ``[0, 360)`` using a true (non-negative) modulo."""
    h = float(h) % HUE_360
    # -1e-17 % 360 rounds to 360.0
    return 0.0 if h >= HUE_360 else h


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def to_byte(unit: float) -> float:
    return clamp_byte(unit * BYTE_MAX)


def from_byte(byte: float) -> float:
    return float(byte) / BYTE_MAX
