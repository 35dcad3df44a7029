from __future__ import annotations
from typing import Union

from ..colors import BigColor, coerce_color
from ..conversions import clamp_unit


class ColorStop:
    """A color pinned at an offset in [0, 1]. Offsets outside the range are clamped."""
    __slots__ = ('_color', '_offset', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, color: Union[BigColor, str], offset: float) -> None:
        self._color = coerce_color(color)
        self._offset = clamp_unit(offset)
        super().__setattr__('_is_frozen', True)

    @property
    def color(self) -> BigColor:
        return self._color

    @property
    def offset(self) -> float:
        return self._offset

    def with_color(self, color: Union[BigColor, str]) -> ColorStop:
        return ColorStop(color, self._offset)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorStop):
            return NotImplemented
        return self._color == other._color and self._offset == other._offset

    def __hash__(self) -> int:
        return hash((self._color, self._offset))

    def __iter__(self):
        yield self._color
        yield self._offset

    def __repr__(self) -> str:
        return f"ColorStop({self._color.to_string()!r}, {self._offset})"
