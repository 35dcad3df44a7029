from __future__ import annotations
import logging
from typing import Iterable, Optional, Sequence, Union

import numpy as np
from boundednumbers import bound_type_to_np_function
from numpy import ndarray as NDArray

from ..colors import BigColor, format_number, lerp_model
from ..conversions import np_convert
from ..defaults import INTERPOLATION_SPACE, value_or_default
from ..types.color_types import HueDirection
from ..types.format_type import BYTE_MAX
from ..types.gradient_types import ExtendMode, GradientType
from .color_stop import ColorStop
from .geometry import Geometry, LinearGeometry

log = logging.getLogger(__name__)

StopLike = Union[ColorStop, tuple]


class Gradient:
    """
    Color stops sampled along a geometry.

    Stops are stable-sorted by offset on construction, so stops sharing an
    offset keep their given order and the earlier one wins at that offset.
    Query positions outside [0, 1] are folded by ``extend``; positions
    outside the first/last stop return that stop's color.
    """
    __slots__ = ('_stops', '_geometry', '_extend', '_space', '_hue_direction', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        stops: Iterable[StopLike],
        geometry: Optional[Geometry] = None,
        extend: Union[ExtendMode, str] = ExtendMode.PAD,
        space: Optional[str] = None,
        hue_direction: Optional[HueDirection] = None,
    ) -> None:
        stops = [stop if isinstance(stop, ColorStop) else ColorStop(*stop) for stop in stops]
        if not stops:
            raise ValueError("A gradient needs at least one color stop")
        self._stops = tuple(sorted(stops, key=lambda stop: stop.offset))
        self._geometry = value_or_default(geometry, LinearGeometry())
        self._extend = ExtendMode(extend)
        self._space = value_or_default(space, INTERPOLATION_SPACE).lower()
        self._hue_direction = hue_direction
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_colors(cls, colors: Sequence[Union[BigColor, str]], **kwargs) -> Gradient:
        """Evenly spaced stops, one per color."""
        if len(colors) == 1:
            return cls([ColorStop(colors[0], 0.0)], **kwargs)
        last = len(colors) - 1
        return cls([ColorStop(color, i / last) for i, color in enumerate(colors)], **kwargs)

    @classmethod
    def from_css_string(cls, text: str) -> Gradient:
        from .css import parse_css_gradient
        return parse_css_gradient(text)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def stops(self) -> tuple[ColorStop, ...]:
        return self._stops

    @property
    def geometry(self) -> Geometry:
        return self._geometry

    @property
    def gradient_type(self) -> GradientType:
        return self._geometry.gradient_type

    @property
    def extend(self) -> ExtendMode:
        return self._extend

    @property
    def space(self) -> str:
        return self._space

    # ------------------ SAMPLING ------------------
    def fold(self, positions) -> NDArray:
        """Map query positions into [0, 1] using the extend mode."""
        u = np.asarray(positions, dtype=float)
        fn = bound_type_to_np_function[self._extend.bound_type]
        return np.clip(fn(u, 0.0, 1.0), 0.0, 1.0)

    def np_rgba(self, positions) -> NDArray:
        """
        Vectorized sampling.

        Args:
            positions: array of query positions, any shape

        Returns:
            array of shape (..., 4): unit r, g, b and alpha
        """
        t = self.fold(positions)
        stops = self._stops
        rgba = np.array([[*stop.color.to_unit_rgb(), stop.color.a] for stop in stops])
        if len(stops) == 1:
            return np.broadcast_to(rgba[0], t.shape + (4,)).copy()

        offsets = np.array([stop.offset for stop in stops])
        # First stop whose offset reaches t closes the bracketing segment
        hi = np.clip(np.searchsorted(offsets, t, side="left"), 1, len(stops) - 1)
        lo = hi - 1
        width = offsets[hi] - offsets[lo]
        u = np.where(width > 0, (t - offsets[lo]) / np.where(width > 0, width, 1.0), 1.0)
        u = np.where(t <= offsets[0], 0.0, np.clip(u, 0.0, 1.0))

        c0 = np_convert(rgba[lo, :3], "rgb", self._space)
        c1 = np_convert(rgba[hi, :3], "rgb", self._space)
        mixed = np_convert(lerp_model(c0, c1, u, self._space, self._hue_direction), self._space, "rgb")
        alpha = rgba[lo, 3] + (rgba[hi, 3] - rgba[lo, 3]) * u
        return np.concatenate([np.clip(mixed, 0.0, 1.0), alpha[..., np.newaxis]], axis=-1)

    def color_at(self, position: float) -> BigColor:
        """Color at a position on the gradient line."""
        r, g, b, a = self.np_rgba(np.array([position]))[0]
        return BigColor(r * BYTE_MAX, g * BYTE_MAX, b * BYTE_MAX, a)

    def sample(self, steps: int) -> list[BigColor]:
        """``steps`` colors evenly spaced over [0, 1], endpoints included."""
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")
        positions = np.linspace(0.0, 1.0, steps) if steps > 1 else np.zeros(1)
        return [
            BigColor(r * BYTE_MAX, g * BYTE_MAX, b * BYTE_MAX, a)
            for r, g, b, a in self.np_rgba(positions)
        ]

    def color_at_point(self, x: float, y: float) -> BigColor:
        """Color at a point of the unit square, through the geometry."""
        return self.color_at(self._geometry.position(x, y))

    def render(self, width: int, height: int) -> NDArray:
        """Rasterize to a ``(height, width, 4)`` uint8 RGBA array over the unit square."""
        if width < 1 or height < 1:
            raise ValueError(f"Invalid render size {width}x{height}")
        xs = (np.arange(width) + 0.5) / width
        ys = (np.arange(height) + 0.5) / height
        grid_x, grid_y = np.meshgrid(xs, ys)
        rgba = self.np_rgba(self._geometry.np_position(grid_x, grid_y))
        return np.floor(rgba * BYTE_MAX + 0.5).astype(np.uint8)

    # ------------------ TRANSFORMS ------------------
    def _replace(self, stops=None, extend=None) -> Gradient:
        return Gradient(
            value_or_default(stops, self._stops),
            self._geometry,
            value_or_default(extend, self._extend),
            self._space,
            self._hue_direction,
        )

    def complementary(self) -> Gradient:
        """Every stop's hue rotated by 180 degrees; geometry and extend kept."""
        return self._replace(stops=[stop.with_color(stop.color.complement()) for stop in self._stops])

    def reversed(self) -> Gradient:
        return self._replace(stops=[ColorStop(stop.color, 1 - stop.offset) for stop in reversed(self._stops)])

    def with_extend(self, extend: Union[ExtendMode, str]) -> Gradient:
        return self._replace(extend=ExtendMode(extend))

    # ------------------ CSS ------------------
    def to_css_string(self) -> str:
        """
        CSS gradient function.

        REPEAT renders as ``repeating-*``. CSS has no reflect mode, so
        REFLECT renders like PAD.
        """
        if self._extend == ExtendMode.REFLECT:
            log.debug("Reflect extend has no CSS form; rendering as pad")
        prefix = "repeating-" if self._extend == ExtendMode.REPEAT else ""
        args = [f"{stop.color.to_string()} {format_number(stop.offset * 100, 2)}%" for stop in self._stops]
        leading = self._geometry.css_args()
        if leading:
            args.insert(0, leading)
        return f"{prefix}{self.gradient_type.value}-gradient({', '.join(args)})"

    def __str__(self) -> str:
        return self.to_css_string()

    def __repr__(self) -> str:
        return f"Gradient({self.to_css_string()!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Gradient):
            return NotImplemented
        return (self._stops, self._geometry, self._extend, self._space) == (
            other._stops, other._geometry, other._extend, other._space
        )

    def __hash__(self) -> int:
        return hash((self._stops, self._geometry, self._extend, self._space))

    def __len__(self) -> int:
        return len(self._stops)
