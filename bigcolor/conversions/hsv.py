import numpy as np
from numpy import ndarray as NDArray

from .hsl import _hue_from_chroma, np_hue_from_chroma
from .numbers import normalize_hue


def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Unit RGB to (hue [0,360), saturation [0,1], value [0,1])."""
    max_c = max(r, g, b)
    chroma = max_c - min(r, g, b)
    if chroma == 0:
        return 0.0, 0.0, max_c
    return _hue_from_chroma(r, g, b, max_c, chroma), chroma / max_c, max_c


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """HSV to unit RGB. Hue is wrapped; s and v are fractions."""
    h = normalize_hue(h)

    def channel(n: int) -> float:
        k = (n + h / 60) % 6
        return v - v * s * max(0.0, min(k, 4 - k, 1.0))

    return channel(5), channel(3), channel(1)


def np_rgb_to_hsv(rgb: NDArray) -> NDArray:
    rgb = np.asarray(rgb, dtype=float)
    max_c = rgb.max(axis=-1)
    chroma = max_c - rgb.min(axis=-1)
    chromatic = chroma > 0
    safe_chroma = np.where(chromatic, chroma, 1.0)
    hue = np.where(
        chromatic,
        np_hue_from_chroma(rgb[..., 0], rgb[..., 1], rgb[..., 2], max_c, safe_chroma),
        0.0,
    )
    saturation = np.where(chromatic, chroma / np.where(max_c > 0, max_c, 1.0), 0.0)
    return np.stack([hue, saturation, max_c], axis=-1)


def np_hsv_to_rgb(hsv: NDArray) -> NDArray:
    hsv = np.asarray(hsv, dtype=float)
    h = hsv[..., 0] % 360
    s = hsv[..., 1][..., np.newaxis]
    v = hsv[..., 2][..., np.newaxis]
    n = np.array([5.0, 3.0, 1.0])
    k = (n + (h / 60)[..., np.newaxis]) % 6
    f = np.clip(np.minimum(k, 4 - k), 0.0, 1.0)
    return v - v * s * f


## HWB

def rgb_to_hwb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Unit RGB to (hue, whiteness, blackness)."""
    h, _, _ = rgb_to_hsv(r, g, b)
    return h, min(r, g, b), 1 - max(r, g, b)


def hwb_to_rgb(h: float, w: float, b: float) -> tuple[float, float, float]:
    """
    HWB to unit RGB.

    When whiteness and blackness sum to 1 or more the result is the gray
    ``w / (w + b)``.
    """
    total = w + b
    if total >= 1:
        gray = w / total
        return gray, gray, gray
    pure = hsv_to_rgb(h, 1.0, 1.0)
    scale = 1 - total
    return tuple(c * scale + w for c in pure)  # type: ignore[return-value]


def np_hwb_to_rgb(hwb: NDArray) -> NDArray:
    hwb = np.asarray(hwb, dtype=float)
    w = hwb[..., 1]
    b = hwb[..., 2]
    total = w + b
    pure = np_hsv_to_rgb(np.stack([hwb[..., 0], np.ones_like(w), np.ones_like(w)], axis=-1))
    tinted = pure * (1 - total)[..., np.newaxis] + w[..., np.newaxis]
    gray = (w / np.where(total > 0, total, 1.0))[..., np.newaxis]
    return np.where((total >= 1)[..., np.newaxis], np.broadcast_to(gray, tinted.shape), tinted)


def np_rgb_to_hwb(rgb: NDArray) -> NDArray:
    rgb = np.asarray(rgb, dtype=float)
    hue = np_rgb_to_hsv(rgb)[..., 0]
    return np.stack([hue, rgb.min(axis=-1), 1 - rgb.max(axis=-1)], axis=-1)
