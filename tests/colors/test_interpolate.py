import numpy as np
import pytest

from bigcolor import parse
from bigcolor.colors import hue_lerp, lerp_model


def test_rgb_midpoint():
    assert parse("red").interpolate("blue", 0.5).to_rgb_string() == "rgb(128, 0, 128)"


def test_endpoints():
    red, blue = parse("red"), parse("blue")
    for space in ("rgb", "hsl", "hsv", "hwb", "lab", "lch", "oklab", "oklch", "xyz", "display-p3"):
        assert red.interpolate(blue, 0, space).to_rgb() == (255, 0, 0), space
        assert red.interpolate(blue, 1, space).to_rgb() == (0, 0, 255), space


def test_t_is_clamped():
    assert parse("red").interpolate("blue", 2).to_rgb() == (0, 0, 255)
    assert parse("red").interpolate("blue", -1).to_rgb() == (255, 0, 0)


def test_hsl_takes_shortest_hue_path():
    assert parse("red").interpolate("blue", 0.5, "hsl").to_hex_string() == "#ff00ff"
    h = parse("hsl(350, 100%, 50%)").interpolate("hsl(10, 100%, 50%)", 0.5, "hsl").to_hsl()[0]
    assert min(h, 360 - h) < 1e-6


@pytest.mark.parametrize("direction,expected", [
    ("shortest", "#ff00ff"),
    ("longest", "#00ff00"),
    ("cw", "#00ff00"),
    ("ccw", "#ff00ff"),
])
def test_hue_directions(direction, expected):
    assert parse("red").interpolate("blue", 0.5, "hsl", direction).to_hex_string() == expected


def test_hue_lerp():
    assert hue_lerp(350, 10, 0.5) == pytest.approx(0)
    assert hue_lerp(10, 350, 0.5) == pytest.approx(0)
    assert hue_lerp(0, 90, 0.5) == pytest.approx(45)
    assert hue_lerp(0, 90, 0.5, "longest") == pytest.approx(225)
    assert np.allclose(hue_lerp([0, 0], [90, 270], [0.5, 0.5]), [45, 315])
    with pytest.raises(ValueError):
        hue_lerp(0, 90, 0.5, "sideways")


def test_achromatic_endpoint_takes_other_hue():
    gray_to_blue = parse("#808080").interpolate("blue", 0.5, "hsl")
    assert gray_to_blue.to_hsl()[0] == pytest.approx(240, abs=0.5)
    assert gray_to_blue.to_rgb() == (64, 64, 191)


def test_lerp_model_non_hue_space():
    assert np.allclose(lerp_model([0, 0, 0], [1, 2, 3], 0.5, "rgb"), [0.5, 1, 1.5])


def test_alpha_is_linear():
    result = parse("rgba(255, 0, 0, 0)").interpolate("blue", 0.5, "oklch")
    assert result.a == pytest.approx(0.5)


def test_perceptual_midpoints_differ_from_rgb():
    rgb = parse("red").interpolate("blue", 0.5)
    oklab = parse("red").interpolate("blue", 0.5, "oklab")
    assert rgb.to_rgb() != oklab.to_rgb()
