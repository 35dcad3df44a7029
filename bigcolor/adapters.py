"""
Conversions to and from external color types.

Pillow works with 8-bit ``(r, g, b, a)`` tuples and ``Image`` objects;
numpy arrays hold unit RGBA floats. Pillow is optional and only imported
by the functions that need it.
"""
from __future__ import annotations
from typing import Iterable, Sequence, Union

import numpy as np
from numpy import ndarray as NDArray

from .colors import BigColor
from .gradients import Gradient
from .types.format_type import BYTE_MAX

PillowColor = Union[tuple, str, int]


## Pillow

def to_pillow(color: BigColor) -> tuple[int, int, int, int]:
    """8-bit RGBA tuple as accepted by ``PIL.Image.new`` and ``ImageDraw``."""
    return color.to_rgba8()


def from_pillow(value: PillowColor) -> BigColor:
    """
    Build a color from a Pillow color value.

    Args:
        value: (r, g, b) or (r, g, b, a) with 8-bit channels, a grayscale
            int, or any string ``PIL.ImageColor.getrgb`` understands
    """
    if isinstance(value, str):
        from PIL import ImageColor
        value = ImageColor.getrgb(value)
    if isinstance(value, int):
        return BigColor.from_rgba8(value, value, value)
    if len(value) in (3, 4):
        return BigColor.from_rgba8(*value)
    raise ValueError(f"Expected 3 or 4 channels, got {len(value)}")


def gradient_to_image(gradient: Gradient, width: int, height: int):
    """Rasterize ``gradient`` into an RGBA ``PIL.Image``."""
    from PIL import Image
    return Image.fromarray(gradient.render(width, height))


def swatch_image(colors: Sequence[BigColor], size: int = 32):
    """A horizontal strip of ``size``-pixel squares, one per color."""
    from PIL import Image
    if not colors:
        raise ValueError("swatch_image needs at least one color")
    strip = np.repeat(colors_to_array(colors)[np.newaxis, :, :], size, axis=0)
    strip = np.repeat(strip, size, axis=1)
    return Image.fromarray(np.floor(strip * BYTE_MAX + 0.5).astype(np.uint8))


## numpy

def to_numpy(color: BigColor) -> NDArray:
    """Unit ``[r, g, b, a]`` as float64."""
    return np.array([*color.to_unit_rgb(), color.a])


def from_numpy(values: NDArray) -> BigColor:
    values = np.asarray(values, dtype=float)
    if values.shape not in ((3,), (4,)):
        raise ValueError(f"Expected shape (3,) or (4,), got {values.shape}")
    alpha = float(values[3]) if values.shape == (4,) else 1.0
    r, g, b = (float(c) * BYTE_MAX for c in values[:3])
    return BigColor(r, g, b, alpha)


def colors_to_array(colors: Iterable[BigColor]) -> NDArray:
    """Stack colors into an ``(N, 4)`` unit RGBA array."""
    return np.array([to_numpy(color) for color in colors]).reshape(-1, 4)


def array_to_colors(values: NDArray) -> list[BigColor]:
    values = np.asarray(values, dtype=float)
    if values.ndim != 2 or values.shape[1] not in (3, 4):
        raise ValueError(f"Expected shape (N, 3) or (N, 4), got {values.shape}")
    return [from_numpy(row) for row in values]
