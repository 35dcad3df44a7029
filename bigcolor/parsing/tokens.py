"""Numeric token grammar shared by the color and gradient parsers."""
import math
import re
from typing import NamedTuple

from ..conversions.numbers import clamp_unit, normalize_hue
from .errors import ParseError

NUMBER_PATTERN = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_NUMBER_RE = re.compile(rf"^{NUMBER_PATTERN}$")
_PERCENT_RE = re.compile(rf"^({NUMBER_PATTERN})%$")
_ANGLE_RE = re.compile(rf"^({NUMBER_PATTERN})(deg|grad|rad|turn)?$")

# Degrees per unit
ANGLE_UNITS = {
    None: 1.0,
    "deg": 1.0,
    "grad": 0.9,
    "rad": 180 / math.pi,
    "turn": 360.0,
}

# Keyword that stands for a missing component in space-separated syntax
NONE_KEYWORD = "none"


class Quantity(NamedTuple):
    value: float
    is_percent: bool


def _finite(value: float, token: str) -> float:
    if not math.isfinite(value):
        raise ParseError(f"Number out of range {token!r}", token)
    return value


def parse_number(token: str) -> float:
    if not _NUMBER_RE.match(token):
        raise ParseError(f"Invalid number {token!r}", token)
    return _finite(float(token), token)


def parse_percentage(token: str) -> float:
    """Parse ``"50%"`` to ``50.0``. The percent sign is required."""
    match = _PERCENT_RE.match(token)
    if not match:
        raise ParseError(f"Expected a percentage, got {token!r}", token)
    return _finite(float(match.group(1)), token)


def parse_quantity(token: str) -> Quantity:
    """Parse a bare number or a percentage, remembering which it was."""
    if token == NONE_KEYWORD:
        return Quantity(0.0, False)
    if token.endswith("%"):
        return Quantity(parse_percentage(token), True)
    return Quantity(parse_number(token), False)


def parse_angle(token: str) -> float:
    """
    Parse a hue/angle token into degrees in ``[0, 360)``.

    Unitless values are degrees. ``grad``, ``rad`` and ``turn`` are converted
    and the result wrapped with a true modulo, so ``-240`` equals ``120``.
    """
    if token == NONE_KEYWORD:
        return 0.0
    return normalize_hue(parse_raw_angle(token))


def parse_raw_angle(token: str) -> float:
    """Like ``parse_angle`` but without wrapping."""
    match = _ANGLE_RE.match(token)
    if not match:
        raise ParseError(f"Invalid angle {token!r}", token)
    return _finite(float(match.group(1)) * ANGLE_UNITS[match.group(2)], token)


def parse_alpha(token: str) -> float:
    """Alpha as a fraction or a percentage, clamped to ``[0, 1]``."""
    value, is_percent = parse_quantity(token)
    return clamp_unit(value / 100 if is_percent else value)


def is_angle(token: str) -> bool:
    return bool(_ANGLE_RE.match(token))


def is_percentage(token: str) -> bool:
    return bool(_PERCENT_RE.match(token))
