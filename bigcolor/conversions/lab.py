"""CIE Lab / LCh (D50) and OKLab / OKLCh (D65)."""
import math
import numpy as np
from numpy import ndarray as NDArray

from .numbers import normalize_hue
from .xyz import (
    WHITE_D50,
    apply_matrix,
    as_triplet,
    d50_to_d65,
    d65_to_d50,
    np_rgb_to_xyz,
    np_xyz_to_rgb,
)

EPSILON = 216 / 24389
KAPPA = 24389 / 27

XYZ_TO_LMS = np.array([
    [0.8190224379967030, 0.3619062600528904, -0.1288737815209879],
    [0.0329836539323885, 0.9292868615863434, 0.0361446663506424],
    [0.0481771893596242, 0.2642395317527308, 0.6335478284694309],
])

LMS_TO_XYZ = np.array([
    [1.2268798758459243, -0.5578149944602171, 0.2813910456659647],
    [-0.0405757452148008, 1.1122868032803170, -0.0717110580655164],
    [-0.0763729366746601, -0.4214933324022432, 1.5869240198367816],
])

LMS_TO_OKLAB = np.array([
    [0.2104542683093140, 0.7936177747023054, -0.0040720430116193],
    [1.9779985324311684, -2.4285922420485799, 0.4505937096174110],
    [0.0259040424655478, 0.7827717124575296, -0.8086757549230774],
])

OKLAB_TO_LMS = np.array([
    [1.0000000000000000, 0.3963377773761749, 0.2158037573099136],
    [1.0000000000000000, -0.1055613458156586, -0.0638541728258133],
    [1.0000000000000000, -0.0894841775298119, -1.2914855480194092],
])

# Cartesian inputs are bounded so the cube transforms stay finite
LAB_LIMIT = 1e4
OKLAB_LIMIT = 1e3

# Chroma below these is treated as achromatic when recovering hue
LAB_ACHROMATIC = 0.05
OKLAB_ACHROMATIC = 4e-4


## Lab

def np_xyz_d50_to_lab(xyz: NDArray) -> NDArray:
    rel = np.asarray(xyz, dtype=float) / WHITE_D50
    f = np.where(rel > EPSILON, np.cbrt(rel), (KAPPA * rel + 16) / 116)
    l = 116 * f[..., 1] - 16
    a = 500 * (f[..., 0] - f[..., 1])
    b = 200 * (f[..., 1] - f[..., 2])
    return np.stack([l, a, b], axis=-1)


def np_lab_to_xyz_d50(lab: NDArray) -> NDArray:
    lab = np.clip(np.asarray(lab, dtype=float), -LAB_LIMIT, LAB_LIMIT)
    l, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    f1 = (l + 16) / 116
    f0 = a / 500 + f1
    f2 = f1 - b / 200
    x = np.where(f0 ** 3 > EPSILON, f0 ** 3, (116 * f0 - 16) / KAPPA)
    y = np.where(l > KAPPA * EPSILON, f1 ** 3, l / KAPPA)
    z = np.where(f2 ** 3 > EPSILON, f2 ** 3, (116 * f2 - 16) / KAPPA)
    return np.stack([x, y, z], axis=-1) * WHITE_D50


def np_rgb_to_lab(rgb: NDArray) -> NDArray:
    return np_xyz_d50_to_lab(d65_to_d50(np_rgb_to_xyz(rgb)))


def np_lab_to_rgb(lab: NDArray) -> NDArray:
    return np_xyz_to_rgb(d50_to_d65(np_lab_to_xyz_d50(lab)))


def rgb_to_lab(r: float, g: float, b: float) -> tuple[float, float, float]:
    return as_triplet(np_rgb_to_lab([r, g, b]))


def lab_to_rgb(l: float, a: float, b: float) -> tuple[float, float, float]:
    return as_triplet(np_lab_to_rgb([l, a, b]))


## Polar forms

def cartesian_to_polar(l: float, a: float, b: float, epsilon: float = LAB_ACHROMATIC) -> tuple[float, float, float]:
    """(L, a, b) to (L, C, h) with hue from ``atan2(b, a)`` wrapped to [0, 360)."""
    c = math.hypot(a, b)
    if c < epsilon:
        return l, c, 0.0
    return l, c, normalize_hue(math.degrees(math.atan2(b, a)))


def polar_to_cartesian(l: float, c: float, h: float) -> tuple[float, float, float]:
    rad = math.radians(h)
    return l, c * math.cos(rad), c * math.sin(rad)


def np_cartesian_to_polar(values: NDArray, epsilon: float = LAB_ACHROMATIC) -> NDArray:
    values = np.asarray(values, dtype=float)
    a, b = values[..., 1], values[..., 2]
    c = np.hypot(a, b)
    h = np.where(c < epsilon, 0.0, np.degrees(np.arctan2(b, a)) % 360)
    return np.stack([values[..., 0], c, h], axis=-1)


def np_polar_to_cartesian(values: NDArray) -> NDArray:
    values = np.asarray(values, dtype=float)
    c = values[..., 1]
    rad = np.radians(values[..., 2])
    return np.stack([values[..., 0], c * np.cos(rad), c * np.sin(rad)], axis=-1)


def rgb_to_lch(r: float, g: float, b: float) -> tuple[float, float, float]:
    return cartesian_to_polar(*rgb_to_lab(r, g, b))


def lch_to_rgb(l: float, c: float, h: float) -> tuple[float, float, float]:
    return lab_to_rgb(*polar_to_cartesian(l, max(c, 0.0), h))


## OKLab

def np_xyz_to_oklab(xyz: NDArray) -> NDArray:
    lms = apply_matrix(XYZ_TO_LMS, xyz)
    return apply_matrix(LMS_TO_OKLAB, np.cbrt(lms))


def np_oklab_to_xyz(oklab: NDArray) -> NDArray:
    oklab = np.clip(np.asarray(oklab, dtype=float), -OKLAB_LIMIT, OKLAB_LIMIT)
    lms = apply_matrix(OKLAB_TO_LMS, oklab)
    return apply_matrix(LMS_TO_XYZ, lms ** 3)


def np_rgb_to_oklab(rgb: NDArray) -> NDArray:
    return np_xyz_to_oklab(np_rgb_to_xyz(rgb))


def np_oklab_to_rgb(oklab: NDArray) -> NDArray:
    return np_xyz_to_rgb(np_oklab_to_xyz(oklab))


def rgb_to_oklab(r: float, g: float, b: float) -> tuple[float, float, float]:
    return as_triplet(np_rgb_to_oklab([r, g, b]))


def oklab_to_rgb(l: float, a: float, b: float) -> tuple[float, float, float]:
    return as_triplet(np_oklab_to_rgb([l, a, b]))


def rgb_to_oklch(r: float, g: float, b: float) -> tuple[float, float, float]:
    return cartesian_to_polar(*rgb_to_oklab(r, g, b), epsilon=OKLAB_ACHROMATIC)


def oklch_to_rgb(l: float, c: float, h: float) -> tuple[float, float, float]:
    return oklab_to_rgb(*polar_to_cartesian(l, max(c, 0.0), h))
