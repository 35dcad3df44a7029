"""
Serialization helpers.

Colors serialize to their ``#rrggbbaa`` hex form (``#rrggbb`` when opaque)
and deserialize through the full parser, so any accepted string loads.
Gradients serialize to their CSS string.
"""
from __future__ import annotations
import json
from typing import Any

from .colors import BigColor
from .gradients import Gradient
from .parsing import ParseError


def serialize_color(color: BigColor) -> str:
    return color.to_hex_string() if color.to_rgba8()[3] == 255 else color.to_hex8_string()


def deserialize_color(value: Any) -> BigColor:
    """Load a color from any accepted color string."""
    if isinstance(value, BigColor):
        return value
    if not isinstance(value, str):
        raise ParseError(f"Expected a color string, got {type(value).__name__}", repr(value))
    return BigColor.parse(value)


def serialize_gradient(gradient: Gradient) -> str:
    return gradient.to_css_string()


def deserialize_gradient(value: str) -> Gradient:
    return Gradient.from_css_string(value)


class BigColorJSONEncoder(json.JSONEncoder):
    """``json.dumps(obj, cls=BigColorJSONEncoder)`` for structures holding colors or gradients."""

    def default(self, o: Any) -> Any:
        if isinstance(o, BigColor):
            return serialize_color(o)
        if isinstance(o, Gradient):
            return serialize_gradient(o)
        return super().default(o)
