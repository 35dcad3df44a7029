"""
Linear-light sRGB and CIE XYZ.

All XYZ values use the ``Y = 1`` white scale. The sRGB primaries are
relative to D65; Lab works in D50 so the Bradford transforms adapt between
the two reference whites.
"""
import numpy as np
from numpy import ndarray as NDArray

WHITE_D65 = np.array([0.3127 / 0.3290, 1.0, (1.0 - 0.3127 - 0.3290) / 0.3290])
WHITE_D50 = np.array([0.3457 / 0.3585, 1.0, (1.0 - 0.3457 - 0.3585) / 0.3585])

# Rational forms keep the matrices exact inverses of each other
SRGB_TO_XYZ_D65 = np.array([
    [506752 / 1228815, 87881 / 245763, 12673 / 70218],
    [87098 / 409605, 175762 / 245763, 12673 / 175545],
    [7918 / 409605, 87881 / 737289, 1001167 / 1053270],
])

XYZ_D65_TO_SRGB = np.array([
    [12831 / 3959, -329 / 214, -1974 / 3959],
    [-851781 / 878810, 1648619 / 878810, 36519 / 878810],
    [705 / 12673, -2585 / 12673, 705 / 667],
])

# Bradford chromatic adaptation
D65_TO_D50 = np.array([
    [1.0479297925449969, 0.022946870601609652, -0.05019226628920524],
    [0.02962780877005599, 0.9904344267538799, -0.017073799063418826],
    [-0.009243040646204504, 0.015055191490298152, 0.7518742814281371],
])

D50_TO_D65 = np.array([
    [0.955473421488075, -0.02309845494876471, 0.06325924320057072],
    [-0.0283697093338637, 1.0099953980813041, 0.021041441191917323],
    [0.012314014864481998, -0.020507649298898964, 1.330365926242124],
])


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if abs(c) <= 0.04045:
        return c / 12.92
    sign = -1.0 if c < 0 else 1.0
    return sign * ((abs(c) + 0.055) / 1.055) ** 2.4


def linear_to_srgb(c: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if abs(c) <= 0.0031308:
        return 12.92 * c
    sign = -1.0 if c < 0 else 1.0
    return sign * (1.055 * abs(c) ** (1 / 2.4) - 0.055)


def np_srgb_to_linear(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    mag = np.abs(c)
    return np.where(mag <= 0.04045, c / 12.92, np.sign(c) * ((mag + 0.055) / 1.055) ** 2.4)


def np_linear_to_srgb(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    mag = np.abs(c)
    return np.where(mag <= 0.0031308, 12.92 * c, np.sign(c) * (1.055 * mag ** (1 / 2.4) - 0.055))


def apply_matrix(matrix: NDArray, values) -> NDArray:
    """Multiply each trailing 3-vector of ``values`` by ``matrix``."""
    return np.asarray(values, dtype=float) @ matrix.T


def as_triplet(values: NDArray) -> tuple[float, float, float]:
    return float(values[0]), float(values[1]), float(values[2])


def np_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """Unit sRGB (..., 3) to XYZ D65."""
    return apply_matrix(SRGB_TO_XYZ_D65, np_srgb_to_linear(rgb))


def np_xyz_to_rgb(xyz: NDArray) -> NDArray:
    """XYZ D65 (..., 3) to unit sRGB, unclamped."""
    return np_linear_to_srgb(apply_matrix(XYZ_D65_TO_SRGB, xyz))


def rgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    return as_triplet(np_rgb_to_xyz([r, g, b]))


def xyz_to_rgb(x: float, y: float, z: float) -> tuple[float, float, float]:
    return as_triplet(np_xyz_to_rgb([x, y, z]))


def d65_to_d50(xyz: NDArray) -> NDArray:
    return apply_matrix(D65_TO_D50, xyz)


def d50_to_d65(xyz: NDArray) -> NDArray:
    return apply_matrix(D50_TO_D65, xyz)
