"""
CSS Color 4 predefined RGB spaces for ``color(<space> c1 c2 c3)``.

Each space is a transfer function pair plus a primaries matrix to XYZ
relative to its own reference white. Conversion always goes through
XYZ D65, then to sRGB for canonical storage.
"""
from typing import Callable, NamedTuple

import numpy as np
from numpy import ndarray as NDArray

from .xyz import (
    SRGB_TO_XYZ_D65,
    XYZ_D65_TO_SRGB,
    apply_matrix,
    as_triplet,
    d50_to_d65,
    d65_to_d50,
    np_linear_to_srgb,
    np_rgb_to_xyz,
    np_srgb_to_linear,
    np_xyz_to_rgb,
)

Transfer = Callable[[NDArray], NDArray]


class SpaceProfile(NamedTuple):
    to_linear: Transfer
    from_linear: Transfer
    to_xyz: NDArray
    from_xyz: NDArray
    white: str


def _identity(c: NDArray) -> NDArray:
    return np.asarray(c, dtype=float)


def _gamma(exponent: float) -> Transfer:
    def transfer(c: NDArray) -> NDArray:
        c = np.asarray(c, dtype=float)
        return np.sign(c) * np.abs(c) ** exponent
    return transfer


def _prophoto_to_linear(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    mag = np.abs(c)
    return np.where(mag <= 16 / 512, c / 16, np.sign(c) * mag ** 1.8)


def _prophoto_from_linear(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    mag = np.abs(c)
    return np.where(mag >= 1 / 512, np.sign(c) * mag ** (1 / 1.8), 16 * c)


REC2020_ALPHA = 1.09929682680944
REC2020_BETA = 0.018053968510807


def _rec2020_to_linear(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    mag = np.abs(c)
    return np.where(
        mag < REC2020_BETA * 4.5,
        c / 4.5,
        np.sign(c) * ((mag + REC2020_ALPHA - 1) / REC2020_ALPHA) ** (1 / 0.45),
    )


def _rec2020_from_linear(c: NDArray) -> NDArray:
    c = np.asarray(c, dtype=float)
    mag = np.abs(c)
    return np.where(
        mag > REC2020_BETA,
        np.sign(c) * (REC2020_ALPHA * mag ** 0.45 - (REC2020_ALPHA - 1)),
        4.5 * c,
    )


IDENTITY = np.eye(3)

SPACES: dict[str, SpaceProfile] = {
    "srgb": SpaceProfile(np_srgb_to_linear, np_linear_to_srgb, SRGB_TO_XYZ_D65, XYZ_D65_TO_SRGB, "D65"),
    "srgb-linear": SpaceProfile(_identity, _identity, SRGB_TO_XYZ_D65, XYZ_D65_TO_SRGB, "D65"),
    "display-p3": SpaceProfile(
        np_srgb_to_linear,
        np_linear_to_srgb,
        np.array([
            [0.4865709486482162, 0.26566769316909306, 0.1982172852343625],
            [0.2289745640697488, 0.6917385218365064, 0.079286914093745],
            [0.0, 0.04511338185890264, 1.043944368900976],
        ]),
        np.array([
            [2.493496911941425, -0.9313836179191239, -0.40271078445071684],
            [-0.8294889695615747, 1.7626640603183463, 0.023624685841943577],
            [0.03584583024378447, -0.07617238926804182, 0.9568845240076872],
        ]),
        "D65",
    ),
    "a98-rgb": SpaceProfile(
        _gamma(563 / 256),
        _gamma(256 / 563),
        np.array([
            [0.5766690429101305, 0.1855582379065463, 0.1882286462349947],
            [0.29734497525053605, 0.6273635662554661, 0.07529145849399788],
            [0.02703136138641234, 0.07068885253582723, 0.9913375368376388],
        ]),
        np.array([
            [2.0415879038107465, -0.5650069742788596, -0.34473135077832956],
            [-0.9692436362808795, 1.8759675015077202, 0.04155505740717557],
            [0.013444280632031142, -0.11836239223101838, 1.0151749943912054],
        ]),
        "D65",
    ),
    "prophoto-rgb": SpaceProfile(
        _prophoto_to_linear,
        _prophoto_from_linear,
        np.array([
            [0.7977604896723027, 0.13518583717574031, 0.0313493495815248],
            [0.2880711282292934, 0.7118432178101014, 0.00008565396060525902],
            [0.0, 0.0, 0.8251046025104601],
        ]),
        np.array([
            [1.3457989731028281, -0.25558010007997534, -0.05110628506753401],
            [-0.5446224939028347, 1.5082327413132781, 0.02053603239147973],
            [0.0, 0.0, 1.2119675456389454],
        ]),
        "D50",
    ),
    "rec2020": SpaceProfile(
        _rec2020_to_linear,
        _rec2020_from_linear,
        np.array([
            [0.6369580483012914, 0.14461690358620832, 0.1688809751641721],
            [0.2627002120112671, 0.6779980715188708, 0.05930171646986196],
            [0.0, 0.028072693049087428, 1.060985057710791],
        ]),
        np.array([
            [1.716651187971268, -0.355670783776392, -0.253366281373660],
            [-0.666684351832489, 1.616481236634939, 0.0157685458139111],
            [0.017639857445311, -0.042770613257809, 0.942103121235474],
        ]),
        "D65",
    ),
    "xyz-d65": SpaceProfile(_identity, _identity, IDENTITY, IDENTITY, "D65"),
    "xyz-d50": SpaceProfile(_identity, _identity, IDENTITY, IDENTITY, "D50"),
}
SPACE_ALIASES = {"xyz": "xyz-d65"}


def resolve_space(space: str) -> str:
    """Return the canonical name of a predefined space, or raise ``ValueError``."""
    name = space.strip().lower()
    name = SPACE_ALIASES.get(name, name)
    if name not in SPACES:
        raise ValueError(f"Unknown color space: {space!r}")
    return name


def np_space_to_xyz(space: str, values: NDArray) -> NDArray:
    """Encoded space coordinates (..., 3) to XYZ D65."""
    profile = SPACES[resolve_space(space)]
    xyz = apply_matrix(profile.to_xyz, profile.to_linear(values))
    return d50_to_d65(xyz) if profile.white == "D50" else xyz


def np_xyz_to_space(space: str, xyz: NDArray) -> NDArray:
    profile = SPACES[resolve_space(space)]
    if profile.white == "D50":
        xyz = d65_to_d50(xyz)
    return profile.from_linear(apply_matrix(profile.from_xyz, xyz))


def space_to_rgb(space: str, c1: float, c2: float, c3: float) -> tuple[float, float, float]:
    return as_triplet(np_xyz_to_rgb(np_space_to_xyz(space, [c1, c2, c3])))


def rgb_to_space(space: str, r: float, g: float, b: float) -> tuple[float, float, float]:
    return as_triplet(np_xyz_to_space(space, np_rgb_to_xyz([r, g, b])))
