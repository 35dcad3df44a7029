import numpy as np
import pytest

from bigcolor import BigColor, BlendMode, parse
from bigcolor.colors import BLEND_FUNCTIONS, blend_channels


def test_every_mode_has_a_formula():
    assert set(BLEND_FUNCTIONS) == set(BlendMode)


def test_normal_amount_zero_is_self():
    base, other = parse("#336699"), parse("#ffcc00")
    assert base.blend(other, BlendMode.NORMAL, 0) == base


def test_normal_amount_hundred_is_other():
    base, other = parse("#336699"), parse("#ffcc00")
    assert base.blend(other, "normal", 100) == other
    assert base.blend(other) == other


def test_normal_source_alpha_is_composited():
    result = parse("white").blend("rgba(0, 0, 0, 0.5)")
    assert result.to_rgb() == (128, 128, 128)
    assert result.a == 1.0


def test_partial_amount_interpolates():
    assert parse("blue").blend("red", "normal", 50).to_rgb_string() == "rgb(128, 0, 128)"


def test_multiply_and_screen():
    assert parse("red").blend("blue", "multiply").to_hex_string() == "#000000"
    assert parse("#ff8000").blend("#808080", "multiply").to_rgb() == (128, 64, 0)
    assert parse("black").blend("#336699", "screen").to_hex_string() == "#336699"
    assert parse("white").blend("#336699", "screen").to_hex_string() == "#ffffff"


def test_darken_lighten_difference():
    a, b = parse("#336699"), parse("#663399")
    assert a.blend(b, "darken").to_hex_string() == "#333399"
    assert a.blend(b, "lighten").to_hex_string() == "#666699"
    assert parse("white").blend("red", "difference").to_hex_string() == "#00ffff"
    assert a.blend(a, BlendMode.DIFFERENCE).to_hex_string() == "#000000"


def test_overlay_keeps_black_and_white_backdrops():
    assert parse("black").blend("#336699", "overlay").to_hex_string() == "#000000"
    assert parse("white").blend("#336699", "overlay").to_hex_string() == "#ffffff"


@pytest.mark.parametrize("mode,base,source,expected", [
    ("color-dodge", [0.0, 0.5, 0.5], [0.5, 1.0, 0.5], [0.0, 1.0, 1.0]),
    ("color-burn", [1.0, 0.5, 0.5], [0.5, 0.0, 0.5], [1.0, 0.0, 0.0]),
    ("soft-light", [0.2, 0.6, 0.9], [0.5, 0.5, 0.5], [0.2, 0.6, 0.9]),
    ("hard-light", [0.3, 0.3, 0.3], [1.0, 0.0, 0.5], [1.0, 0.0, 0.3]),
    ("exclusion", [0.5, 1.0, 0.0], [0.5, 1.0, 1.0], [0.5, 0.0, 1.0]),
    ("multiply", [0.5, 0.5, 1.0], [0.5, 1.0, 0.2], [0.25, 0.5, 0.2]),
    ("screen", [0.5, 0.0, 1.0], [0.5, 0.3, 0.2], [0.75, 0.3, 1.0]),
])
def test_blend_channel_formulas(mode, base, source, expected):
    assert np.allclose(blend_channels(base, source, mode), expected)


def test_blend_channels_broadcasts():
    palette = np.array([[0.2, 0.4, 0.6], [1.0, 1.0, 1.0]])
    result = blend_channels(palette, [0.5, 0.5, 0.5], BlendMode.MULTIPLY)
    assert result.shape == (2, 3)
    assert np.allclose(result[1], [0.5, 0.5, 0.5])


def test_blend_mode_names():
    assert BlendMode.coerce("soft_light") is BlendMode.SOFT_LIGHT
    assert BlendMode.coerce("SoftLight") is BlendMode.SOFT_LIGHT
    assert BlendMode.coerce("COLOR-DODGE") is BlendMode.COLOR_DODGE
    with pytest.raises(ValueError):
        BlendMode.coerce("dissolve")
    with pytest.raises(ValueError):
        parse("red").blend("blue", "dissolve")


def test_blend_onto_transparent_backdrop_shows_source():
    result = parse("transparent").blend("#336699", "multiply")
    assert result.to_hex_string() == "#336699"
    assert result.a == 1.0


def test_blend_two_transparent_colors():
    assert parse("transparent").blend("transparent").a == 0.0


def test_blend_keeps_base_format():
    assert parse("hsl(0, 100%, 50%)").blend("blue", "screen").to_string() == "hsl(300, 100%, 50%)"


def test_translucent_source_is_weighted_by_its_alpha():
    red = parse("red")
    result = red.blend("rgba(0, 0, 255, 0.5)")
    assert result.to_rgb() == (128, 0, 128)
    assert result.a == 1.0
    assert result == red.blend("blue", amount=50)
