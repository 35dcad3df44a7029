from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterable, Optional, Sequence

import numpy as np

from ..conversions import (
    clamp_byte,
    clamp_unit,
    convert,
    from_byte,
    resolve_space,
    round_half_up,
    to_byte,
)
from ..parsing import ParseError, parse_color, parse_hex
from ..types.format_type import ColorFormat, BYTE_MAX
from ..types.color_types import RGBTuple, Triplet


class BigColor:
    """
    An immutable sRGB color with alpha.

    Channels are stored as floats: r, g, b in [0, 255] and a in [0, 1].
    Sub-integer precision is kept so that conversions through other models
    do not drift. ``format`` records the syntax the color was parsed from;
    no conversion depends on it.
    """
    __slots__ = ('_r', '_g', '_b', '_a', '_format', '_is_frozen')

    # Equality and hashing compare channels rounded to this many decimals
    EQ_DECIMALS: ClassVar[int] = 6

    # Attached by the manipulation/blend/scheme/contrast/interpolate modules
    lighten: Callable[..., BigColor]
    darken: Callable[..., BigColor]
    saturate: Callable[..., BigColor]
    desaturate: Callable[..., BigColor]
    brighten: Callable[..., BigColor]
    spin: Callable[..., BigColor]
    grayscale: Callable[..., BigColor]
    greyscale: Callable[..., BigColor]
    invert: Callable[..., BigColor]
    mix: Callable[..., BigColor]
    blend: Callable[..., BigColor]
    complement: Callable[..., BigColor]
    triad: Callable[..., list]
    tetrad: Callable[..., list]
    split_complement: Callable[..., list]
    analogous: Callable[..., list]
    monochromatic: Callable[..., list]
    polyad: Callable[..., list]
    get_luminance: Callable[..., float]
    get_brightness: Callable[..., float]
    is_light: Callable[..., bool]
    is_dark: Callable[..., bool]
    contrast_ratio: Callable[..., float]
    readability: Callable[..., float]
    is_readable_on: Callable[..., bool]
    most_readable: Callable[..., BigColor]
    get_contrast_color: Callable[..., BigColor]
    interpolate: Callable[..., BigColor]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: float, g: float, b: float, a: float = 1.0, fmt: ColorFormat = ColorFormat.RGB) -> None:
        self._r = clamp_byte(r)
        self._g = clamp_byte(g)
        self._b = clamp_byte(b)
        self._a = clamp_unit(a)
        self._format = ColorFormat(fmt)
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def parse(cls, text: str) -> BigColor:
        """Parse any accepted color string. Raises ``ParseError``."""
        parsed = parse_color(text)
        return cls(parsed.r, parsed.g, parsed.b, parsed.a, parsed.format)

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, a: float = 1.0) -> BigColor:
        return cls(r, g, b, a, ColorFormat.RGB)

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = BYTE_MAX) -> BigColor:
        return cls(r, g, b, a / BYTE_MAX, ColorFormat.RGB)

    @classmethod
    def from_hex(cls, text: str) -> BigColor:
        try:
            parsed = parse_hex(text.strip().lower())
        except ParseError as err:
            err.text = text
            raise
        return cls(parsed.r, parsed.g, parsed.b, parsed.a, parsed.format)

    @classmethod
    def from_model(
        cls,
        space: str,
        values: Sequence[float],
        a: float = 1.0,
        fmt: Optional[ColorFormat] = None,
    ) -> BigColor:
        """
        Build a color from a tuple in any registered model.

        Args:
            space: model or ``color()`` space name
            values: channel values in that model's units (see ``bigcolor.conversions``)
            a: alpha in [0, 1]
            fmt: provenance tag; defaults to the model's own format when one exists

        Returns:
            BigColor with out-of-gamut channels clamped
        """
        r, g, b = convert(values, space, "rgb")
        if fmt is None:
            fmt = _MODEL_FORMATS.get(space, ColorFormat.COLOR)
        return cls(to_byte(r), to_byte(g), to_byte(b), a, fmt)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> BigColor:
        return cls.from_model("hsl", (h, clamp_unit(s), clamp_unit(l)), a)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, a: float = 1.0) -> BigColor:
        return cls.from_model("hsv", (h, clamp_unit(s), clamp_unit(v)), a)

    @classmethod
    def from_hwb(cls, h: float, w: float, b: float, a: float = 1.0) -> BigColor:
        return cls.from_model("hwb", (h, clamp_unit(w), clamp_unit(b)), a)

    @classmethod
    def from_cmyk(cls, c: float, m: float, y: float, k: float, a: float = 1.0) -> BigColor:
        return cls.from_model("cmyk", tuple(clamp_unit(v) for v in (c, m, y, k)), a)

    @classmethod
    def from_lab(cls, l: float, a: float, b: float, alpha: float = 1.0) -> BigColor:
        return cls.from_model("lab", (min(max(l, 0.0), 100.0), a, b), alpha)

    @classmethod
    def from_lch(cls, l: float, c: float, h: float, alpha: float = 1.0) -> BigColor:
        return cls.from_model("lch", (min(max(l, 0.0), 100.0), max(c, 0.0), h), alpha)

    @classmethod
    def from_oklab(cls, l: float, a: float, b: float, alpha: float = 1.0) -> BigColor:
        return cls.from_model("oklab", (clamp_unit(l), a, b), alpha)

    @classmethod
    def from_oklch(cls, l: float, c: float, h: float, alpha: float = 1.0) -> BigColor:
        return cls.from_model("oklch", (clamp_unit(l), max(c, 0.0), h), alpha)

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float, alpha: float = 1.0) -> BigColor:
        """XYZ relative to D65, white at Y = 1."""
        return cls.from_model("xyz", (x, y, z), alpha)

    @classmethod
    def from_color_space(cls, space: str, c1: float, c2: float, c3: float, alpha: float = 1.0) -> BigColor:
        try:
            name = resolve_space(space)
        except ValueError:
            raise ParseError(f"Unknown color space {space!r}", space) from None
        return cls.from_model(name, (c1, c2, c3), alpha, ColorFormat.COLOR)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> float:
        return self._r

    @property
    def g(self) -> float:
        return self._g

    @property
    def b(self) -> float:
        return self._b

    @property
    def a(self) -> float:
        return self._a

    alpha = a

    @property
    def format(self) -> ColorFormat:
        """Syntax this color was parsed from."""
        return self._format

    @property
    def is_valid(self) -> bool:
        """Always True; out-of-range input is clamped on construction."""
        return True

    # ------------------ MODEL TUPLES ------------------
    def to_unit_rgb(self) -> Triplet:
        return from_byte(self._r), from_byte(self._g), from_byte(self._b)

    def to_rgb(self) -> RGBTuple:
        """Integer (r, g, b), rounded half up."""
        return round_half_up(self._r), round_half_up(self._g), round_half_up(self._b)

    def to_rgba8(self) -> tuple[int, int, int, int]:
        return (*self.to_rgb(), round_half_up(self._a * BYTE_MAX))

    def to_percentage_rgb(self) -> Triplet:
        r, g, b = self.to_unit_rgb()
        return r * 100, g * 100, b * 100

    def to_model(self, space: str) -> tuple:
        """Channels in any registered model, units as in ``bigcolor.conversions``."""
        return convert(self.to_unit_rgb(), "rgb", space)

    def to_hsl(self) -> Triplet:
        """(hue [0,360), saturation [0,1], lightness [0,1])"""
        return self.to_model("hsl")

    def to_hsv(self) -> Triplet:
        return self.to_model("hsv")

    to_hsb = to_hsv

    def to_hwb(self) -> Triplet:
        return self.to_model("hwb")

    def to_cmyk(self) -> tuple[float, float, float, float]:
        return self.to_model("cmyk")

    def to_lab(self) -> Triplet:
        return self.to_model("lab")

    def to_lch(self) -> Triplet:
        return self.to_model("lch")

    def to_oklab(self) -> Triplet:
        return self.to_model("oklab")

    def to_oklch(self) -> Triplet:
        return self.to_model("oklch")

    def to_xyz(self) -> Triplet:
        return self.to_model("xyz")

    def to_color_space(self, space: str) -> Triplet:
        return self.to_model(resolve_space(space))

    # ------------------ DERIVED COPIES ------------------
    def with_alpha(self, a: float) -> BigColor:
        return self.__class__(self._r, self._g, self._b, a, self._format)

    def with_format(self, fmt: ColorFormat) -> BigColor:
        return self.__class__(self._r, self._g, self._b, self._a, fmt)

    def _with_model(self, space: str, values: Iterable[float]) -> BigColor:
        return self.__class__.from_model(space, tuple(values), self._a, self._format)

    # ------------------ PROTOCOL ------------------
    def _key(self) -> tuple[float, float, float, float]:
        d = self.EQ_DECIMALS
        return round(self._r, d), round(self._g, d), round(self._b, d), round(self._a, d)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BigColor):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"BigColor({self.to_hex8_string()!r}, format={self._format.value!r})"

    def __str__(self) -> str:
        return self.to_string()

    def __reduce__(self):
        return (self.__class__, (self._r, self._g, self._b, self._a, self._format))

    # Formatters, defined in formatting.py
    to_hex_string: Callable[..., str]
    to_hex8_string: Callable[..., str]
    to_argb_hex_string: Callable[..., str]
    to_rgb_string: Callable[..., str]
    to_percentage_rgb_string: Callable[..., str]
    to_hsl_string: Callable[..., str]
    to_hsv_string: Callable[..., str]
    to_hsb_string: Callable[..., str]
    to_hwb_string: Callable[..., str]
    to_cmyk_string: Callable[..., str]
    to_lab_string: Callable[..., str]
    to_lch_string: Callable[..., str]
    to_oklab_string: Callable[..., str]
    to_oklch_string: Callable[..., str]
    to_xyz_string: Callable[..., str]
    to_color_space_string: Callable[..., str]
    to_name: Callable[..., Optional[str]]
    to_string: Callable[..., str]


_MODEL_FORMATS = {
    "rgb": ColorFormat.RGB,
    "hsl": ColorFormat.HSL,
    "hsv": ColorFormat.HSV,
    "hsb": ColorFormat.HSB,
    "hwb": ColorFormat.HWB,
    "cmyk": ColorFormat.CMYK,
    "lab": ColorFormat.LAB,
    "lch": ColorFormat.LCH,
    "oklab": ColorFormat.OKLAB,
    "oklch": ColorFormat.OKLCH,
}


def parse(text: str) -> BigColor:
    """Parse a color string into a ``BigColor``."""
    return BigColor.parse(text)


def random(rng: Optional[np.random.Generator] = None) -> BigColor:
    """An opaque color with uniformly drawn 8-bit channels."""
    if rng is None:
        rng = np.random.default_rng()
    r, g, b = (int(c) for c in rng.integers(0, BYTE_MAX + 1, 3))
    return BigColor.from_rgba8(r, g, b)
