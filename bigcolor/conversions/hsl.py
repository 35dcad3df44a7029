import numpy as np
from numpy import ndarray as NDArray

from .numbers import normalize_hue


## RGB to HSL

def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    chroma = max_c - min_c
    lightness = (max_c + min_c) / 2.0

    if chroma == 0:
        # Achromatic: hue ties break to 0
        return 0.0, 0.0, lightness

    saturation = chroma / (1 - abs(2 * lightness - 1))
    return _hue_from_chroma(r, g, b, max_c, chroma), min(saturation, 1.0), lightness


def _hue_from_chroma(r: float, g: float, b: float, max_c: float, chroma: float) -> float:
    if max_c == r:
        hue = 60 * ((g - b) / chroma)
    elif max_c == g:
        hue = 60 * ((b - r) / chroma) + 120
    else:
        hue = 60 * ((r - g) / chroma) + 240
    return normalize_hue(hue)


def np_rgb_to_hsl(rgb: NDArray) -> NDArray:
    """
    Vectorized RGB to HSL.

    Args:
        rgb: array of shape (..., 3) in [0, 1]

    Returns:
        array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    rgb = np.asarray(rgb, dtype=float)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    max_c = rgb.max(axis=-1)
    min_c = rgb.min(axis=-1)
    chroma = max_c - min_c
    lightness = (max_c + min_c) / 2.0

    chromatic = chroma > 0
    safe_chroma = np.where(chromatic, chroma, 1.0)
    denom = 1 - np.abs(2 * lightness - 1)
    saturation = np.where(chromatic, chroma / np.where(denom > 0, denom, 1.0), 0.0)

    hue = np_hue_from_chroma(r, g, b, max_c, safe_chroma)
    hue = np.where(chromatic, hue, 0.0)
    return np.stack([hue, np.minimum(saturation, 1.0), lightness], axis=-1)


def np_hue_from_chroma(r: NDArray, g: NDArray, b: NDArray, max_c: NDArray, chroma: NDArray) -> NDArray:
    hue = np.where(
        max_c == r,
        60 * ((g - b) / chroma),
        np.where(
            max_c == g,
            60 * ((b - r) / chroma) + 120,
            60 * ((r - g) / chroma) + 240,
        ),
    )
    return hue % 360


## HSL to RGB

def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to unit RGB (CSS Color 4 algorithm).

    Args:
        h: Hue in degrees, any value (wrapped)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    a = s * min(l, 1 - l)

    def channel(n: int) -> float:
        k = (n + h / 30) % 12
        return l - a * max(-1.0, min(k - 3, 9 - k, 1.0))

    return channel(0), channel(8), channel(4)


def np_hsl_to_rgb(hsl: NDArray) -> NDArray:
    """Vectorized HSL to RGB; ``hsl`` has shape (..., 3)."""
    hsl = np.asarray(hsl, dtype=float)
    h = hsl[..., 0] % 360
    s = hsl[..., 1]
    l = hsl[..., 2]
    a = s * np.minimum(l, 1 - l)
    n = np.array([0.0, 8.0, 4.0])
    k = (n + (h / 30)[..., np.newaxis]) % 12
    f = np.clip(np.minimum(k - 3, 9 - k), -1.0, 1.0)
    return l[..., np.newaxis] - a[..., np.newaxis] * f
