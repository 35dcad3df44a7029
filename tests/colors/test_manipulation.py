import pytest

from bigcolor import BigColor, ColorFormat, parse
from bigcolor.colors import coerce_color


def test_lighten_darken():
    red = parse("red")
    assert red.lighten(20).to_hex_string() == "#ff6666"
    assert red.lighten().to_hex_string() == "#ff3333"
    assert red.darken(20).to_hex_string() == "#990000"
    assert red.lighten(100).to_hex_string() == "#ffffff"
    assert red.darken(100).to_hex_string() == "#000000"


def test_saturate_desaturate():
    red = parse("red")
    assert red.desaturate(100).to_hex_string() == "#808080"
    assert red.saturate(50) == red
    muted = BigColor.from_hsl(0, 0.5, 0.5)
    assert muted.saturate(50).to_hsl()[1] == pytest.approx(1.0)
    assert muted.desaturate().to_hsl()[1] == pytest.approx(0.4)


def test_spin():
    red = parse("red")
    assert red.spin(120).to_hex_string() == "#00ff00"
    assert red.spin(-120).to_hex_string() == "#0000ff"
    assert red.spin(480).to_hex_string() == "#00ff00"


@pytest.mark.parametrize("text", ["#336699", "hsl(300, 40%, 70%)", "#c0ffee", "rgb(1, 2, 3)"])
def test_spin_full_turn_is_identity(text):
    color = parse(text)
    assert color.spin(360).to_rgb() == color.to_rgb()
    assert color.spin(-720).to_rgb() == color.to_rgb()


def test_grayscale_keeps_lightness_and_alpha():
    color = parse("rgba(255, 0, 0, 0.5)").grayscale()
    assert color.to_rgb() == (128, 128, 128)
    assert color.a == 0.5


def test_greyscale_is_deprecated():
    with pytest.warns(DeprecationWarning):
        assert parse("red").greyscale() == parse("red").grayscale()


def test_invert():
    assert parse("#000000").invert().to_hex_string() == "#ffffff"
    assert parse("#123456").invert().to_hex_string() == "#edcba9"
    assert parse("rgba(0, 0, 0, 0.3)").invert().a == pytest.approx(0.3)


def test_brighten():
    assert parse("black").brighten().to_hex_string() == "#1a1a1a"
    assert parse("#f0f0f0").brighten(50).to_hex_string() == "#ffffff"


def test_mix():
    red, blue = parse("red"), parse("blue")
    assert red.mix(blue).to_rgb_string() == "rgb(128, 0, 128)"
    assert red.mix(blue, 0) == red
    assert red.mix(blue, 100) == blue
    assert red.mix("blue", 25).to_rgb() == (191, 0, 64)
    assert red.mix("transparent").a == pytest.approx(0.5)


def test_manipulation_keeps_format_and_returns_new_color():
    color = parse("hsl(0, 100%, 50%)")
    lighter = color.lighten()
    assert lighter is not color
    assert lighter.format == ColorFormat.HSL
    assert color.to_hex_string() == "#ff0000"


def test_coerce_color():
    red = parse("red")
    assert coerce_color(red) is red
    assert coerce_color("#f00") == red
    with pytest.raises(TypeError):
        coerce_color(0xff0000)
