"""
Gradient geometries.

Coordinates live in the unit square with ``(0, 0)`` at the top-left and y
pointing down, matching CSS. ``position`` maps a point to an unbounded
gradient parameter; the gradient's extend mode folds it into [0, 1].
"""
from __future__ import annotations
import logging
import math
from typing import ClassVar, Optional

import numpy as np
from numpy import ndarray as NDArray

from ..colors import format_number
from ..conversions import normalize_hue
from ..types.gradient_types import GradientType

log = logging.getLogger(__name__)

Point = tuple[float, float]
CENTER: Point = (0.5, 0.5)

# CSS "to <side>" keywords; corners are exact for the unit square
SIDE_ANGLES: dict[str, float] = {
    "top": 0.0,
    "top right": 45.0,
    "right": 90.0,
    "bottom right": 135.0,
    "bottom": 180.0,
    "bottom left": 225.0,
    "left": 270.0,
    "top left": 315.0,
}
ANGLE_SIDES = {angle: side for side, angle in SIDE_ANGLES.items()}


def _css_point(point: Point) -> str:
    return f"{format_number(point[0] * 100, 2)}% {format_number(point[1] * 100, 2)}%"


def _farthest_corner(center: Point) -> float:
    cx, cy = center
    return math.hypot(max(cx, 1 - cx), max(cy, 1 - cy))


class Geometry:
    __slots__ = ('_is_frozen',)
    gradient_type: ClassVar[GradientType]

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def _freeze(self) -> None:
        super().__setattr__('_is_frozen', True)

    def np_position(self, x: NDArray, y: NDArray) -> NDArray:
        raise NotImplementedError

    def position(self, x: float, y: float) -> float:
        return float(self.np_position(np.asarray(x, dtype=float), np.asarray(y, dtype=float)))

    def css_args(self) -> Optional[str]:
        """
        Leading CSS argument, or None when every parameter is the default.

        CSS can only express part of some geometries; what is dropped is
        logged at debug level.
        """
        raise NotImplementedError


class LinearGeometry(Geometry):
    """Gradient line from ``start`` to ``end``."""
    __slots__ = ('_start', '_end')
    gradient_type = GradientType.LINEAR

    def __init__(self, start: Point = (0.5, 0.0), end: Point = (0.5, 1.0)) -> None:
        if tuple(start) == tuple(end):
            raise ValueError("Linear gradient start and end points must differ")
        self._start = (float(start[0]), float(start[1]))
        self._end = (float(end[0]), float(end[1]))
        self._freeze()

    @classmethod
    def from_angle(cls, degrees: float) -> LinearGeometry:
        """
        CSS angle convention: 0deg points up, 90deg right, 180deg down.

        The line passes through the center and is long enough that the
        corners hit offsets 0 and 1.
        """
        rad = math.radians(degrees)
        dx, dy = math.sin(rad), -math.cos(rad)
        half = (abs(dx) + abs(dy)) / 2
        cx, cy = CENTER
        return cls((cx - dx * half, cy - dy * half), (cx + dx * half, cy + dy * half))

    @property
    def start(self) -> Point:
        return self._start

    @property
    def end(self) -> Point:
        return self._end

    @property
    def angle(self) -> float:
        dx = self._end[0] - self._start[0]
        dy = self._end[1] - self._start[1]
        return round(normalize_hue(math.degrees(math.atan2(dx, -dy))), 9)

    def np_position(self, x: NDArray, y: NDArray) -> NDArray:
        dx = self._end[0] - self._start[0]
        dy = self._end[1] - self._start[1]
        return ((x - self._start[0]) * dx + (y - self._start[1]) * dy) / (dx * dx + dy * dy)

    def css_args(self) -> Optional[str]:
        """Angle or side keyword. Lines that miss the center or corners render by angle only."""
        angle = self.angle
        through_center = LinearGeometry.from_angle(angle)
        if not np.allclose(self._start + self._end, through_center._start + through_center._end):
            log.debug("Linear gradient endpoints %s -> %s have no CSS form; rendering by angle", self._start, self._end)
        if angle == 180.0:
            return None
        side = ANGLE_SIDES.get(angle)
        return f"to {side}" if side else f"{format_number(angle, 2)}deg"

    def __eq__(self, other) -> bool:
        return isinstance(other, LinearGeometry) and (self._start, self._end) == (other._start, other._end)

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"LinearGeometry(start={self._start}, end={self._end})"


class RadialGeometry(Geometry):
    """
    Distance from ``center`` over ``radius``.

    ``radius=None`` reaches the farthest corner of the unit square, which is
    the CSS default size.
    """
    __slots__ = ('_center', '_radius', '_shape')
    gradient_type = GradientType.RADIAL
    SHAPES: ClassVar[tuple[str, str]] = ("ellipse", "circle")

    def __init__(self, center: Point = CENTER, radius: Optional[float] = None, shape: str = "ellipse") -> None:
        if shape not in self.SHAPES:
            raise ValueError(f"Unknown radial shape: {shape!r}")
        self._center = (float(center[0]), float(center[1]))
        if radius is None:
            radius = _farthest_corner(self._center)
        if radius <= 0:
            raise ValueError(f"Radius must be positive, got {radius}")
        self._radius = float(radius)
        self._shape = shape
        self._freeze()

    @property
    def center(self) -> Point:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def shape(self) -> str:
        return self._shape

    def np_position(self, x: NDArray, y: NDArray) -> NDArray:
        return np.hypot(x - self._center[0], y - self._center[1]) / self._radius

    def css_args(self) -> Optional[str]:
        """Shape and center. A non-default radius has no CSS form here and is dropped."""
        if not math.isclose(self._radius, _farthest_corner(self._center)):
            log.debug("Radial gradient radius %s has no CSS form; rendering farthest-corner", self._radius)
        parts = []
        if self._shape != "ellipse":
            parts.append(self._shape)
        if self._center != CENTER:
            parts.append(f"at {_css_point(self._center)}")
        return " ".join(parts) or None

    def __eq__(self, other) -> bool:
        return isinstance(other, RadialGeometry) and (
            (self._center, self._radius, self._shape) == (other._center, other._radius, other._shape)
        )

    def __hash__(self) -> int:
        return hash((self._center, self._radius, self._shape))

    def __repr__(self) -> str:
        return f"RadialGeometry(center={self._center}, radius={self._radius}, shape={self._shape!r})"


class ConicGeometry(Geometry):
    """Clockwise sweep around ``center`` beginning at ``start_angle`` (0 is up)."""
    __slots__ = ('_center', '_start_angle')
    gradient_type = GradientType.CONIC

    def __init__(self, center: Point = CENTER, start_angle: float = 0.0) -> None:
        self._center = (float(center[0]), float(center[1]))
        self._start_angle = normalize_hue(start_angle)
        self._freeze()

    @property
    def center(self) -> Point:
        return self._center

    @property
    def start_angle(self) -> float:
        return self._start_angle

    def np_position(self, x: NDArray, y: NDArray) -> NDArray:
        theta = np.degrees(np.arctan2(x - self._center[0], -(y - self._center[1])))
        return ((theta - self._start_angle) % 360.0) / 360.0

    def css_args(self) -> Optional[str]:
        parts = []
        if self._start_angle:
            parts.append(f"from {format_number(self._start_angle, 2)}deg")
        if self._center != CENTER:
            parts.append(f"at {_css_point(self._center)}")
        return " ".join(parts) or None

    def __eq__(self, other) -> bool:
        return isinstance(other, ConicGeometry) and (
            (self._center, self._start_angle) == (other._center, other._start_angle)
        )

    def __hash__(self) -> int:
        return hash((self._center, self._start_angle))

    def __repr__(self) -> str:
        return f"ConicGeometry(center={self._center}, start_angle={self._start_angle})"
