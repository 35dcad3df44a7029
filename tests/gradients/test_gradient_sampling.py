import numpy as np
import pytest

from bigcolor import BigColor, ColorStop, ExtendMode, Gradient, GradientType, LinearGeometry, parse

RED = parse("red")
BLUE = parse("blue")


@pytest.fixture
def red_blue(red, blue):
    return Gradient([ColorStop(red, 0.0), ColorStop(blue, 1.0)])


def test_pad_endpoints_and_midpoint(red_blue):
    assert red_blue.color_at(0.0) == RED
    assert red_blue.color_at(1.0) == BLUE
    assert red_blue.color_at(0.5).to_rgb() == (128, 0, 128)
    assert red_blue.color_at(0.5) == RED.mix(BLUE)


def test_pad_clamps_queries(red_blue):
    assert red_blue.color_at(-1.0) == RED
    assert red_blue.color_at(2.0) == BLUE


def test_repeat(red_blue):
    g = red_blue.with_extend(ExtendMode.REPEAT)
    assert g.color_at(1.25) == red_blue.color_at(0.25)
    assert g.color_at(-0.75) == red_blue.color_at(0.25)


def test_reflect(red_blue):
    g = red_blue.with_extend("reflect")
    assert g.color_at(1.25) == red_blue.color_at(0.75)
    assert g.color_at(-0.25) == red_blue.color_at(0.25)


def test_stops_are_sorted():
    g = Gradient([(BLUE, 1.0), ("red", 0.0)])
    assert [stop.offset for stop in g.stops] == [0.0, 1.0]
    assert g.color_at(0.0) == RED


def test_duplicate_offsets_first_stop_wins():
    g = Gradient([("red", 0.0), ("lime", 0.5), ("blue", 0.5), ("white", 1.0)])
    assert g.color_at(0.5).to_hex_string() == "#00ff00"
    assert g.color_at(0.4999).g > 250
    assert g.color_at(0.5001).b > 250
    assert g.color_at(0.5001).g < 5


def test_ties_keep_given_order():
    g = Gradient([("lime", 0.5), ("blue", 0.5), ("red", 0.0), ("white", 1.0)])
    assert [stop.color.to_hex_string() for stop in g.stops] == ["#ff0000", "#00ff00", "#0000ff", "#ffffff"]
    assert g.color_at(0.5).to_hex_string() == "#00ff00"


def test_first_and_last_stop_cover_the_ends():
    g = Gradient([("red", 0.25), ("blue", 0.75)])
    assert g.color_at(0.1) == RED
    assert g.color_at(0.9) == BLUE
    assert g.color_at(0.5).to_rgb() == (128, 0, 128)


def test_single_stop():
    g = Gradient([("red", 0.3)])
    assert g.color_at(0.0) == RED
    assert g.color_at(0.9) == RED
    assert g.sample(3) == [RED, RED, RED]


def test_empty_gradient_is_an_error():
    with pytest.raises(ValueError):
        Gradient([])


def test_stop_offsets_clamp():
    stop = ColorStop("red", 1.5)
    assert stop.offset == 1.0
    assert ColorStop("red", -3).offset == 0.0
    color, offset = stop
    assert color == RED and offset == 1.0


def test_stop_is_immutable():
    stop = ColorStop("red", 0.5)
    with pytest.raises(AttributeError):
        stop.offset = 0.2


def test_sample(red_blue):
    colors = red_blue.sample(3)
    assert colors[0] == RED
    assert colors[1].to_rgb() == (128, 0, 128)
    assert colors[2] == BLUE
    assert red_blue.sample(1) == [RED]
    with pytest.raises(ValueError):
        red_blue.sample(0)


def test_from_colors():
    g = Gradient.from_colors(["red", "lime", "blue"])
    assert [stop.offset for stop in g.stops] == [0.0, 0.5, 1.0]
    assert g.color_at(0.5).to_hex_string() == "#00ff00"
    assert len(g) == 3


def test_alpha_is_interpolated():
    g = Gradient.from_colors(["transparent", "red"])
    assert g.color_at(0.5).a == pytest.approx(0.5)


def test_interpolation_space():
    g = Gradient.from_colors(["red", "blue"], space="hsl")
    assert g.space == "hsl"
    assert g.color_at(0.5).to_hex_string() == "#ff00ff"
    longest = Gradient.from_colors(["red", "blue"], space="hsl", hue_direction="longest")
    assert longest.color_at(0.5).to_hex_string() == "#00ff00"


def test_complementary(red_blue):
    comp = red_blue.complementary()
    assert comp.color_at(0.0).to_hex_string() == "#00ffff"
    assert comp.color_at(1.0).to_hex_string() == "#ffff00"
    assert comp.geometry == red_blue.geometry
    assert comp.extend == red_blue.extend
    assert red_blue.color_at(0.0) == RED


def test_reversed(red_blue):
    rev = red_blue.reversed()
    assert rev.color_at(0.0) == BLUE
    assert rev.color_at(1.0) == RED


def test_gradient_is_immutable(red_blue):
    with pytest.raises(AttributeError):
        red_blue._stops = ()


def test_equality_and_hash(red_blue):
    same = Gradient([("red", 0), ("blue", 1)])
    assert same == red_blue
    assert hash(same) == hash(red_blue)
    assert red_blue != red_blue.with_extend("repeat")


def test_default_geometry(red_blue):
    assert red_blue.gradient_type == GradientType.LINEAR
    assert red_blue.geometry == LinearGeometry()
    assert red_blue.extend == ExtendMode.PAD


def test_color_at_point():
    g = Gradient.from_colors(["red", "blue"], geometry=LinearGeometry.from_angle(90))
    assert g.color_at_point(0.0, 0.5) == RED
    assert g.color_at_point(1.0, 0.2) == BLUE
    assert g.color_at_point(0.5, 0.9).to_rgb() == (128, 0, 128)


def test_render():
    g = Gradient.from_colors(["black", "white"])
    pixels = g.render(4, 2)
    assert pixels.shape == (2, 4, 4)
    assert pixels.dtype == np.uint8
    # Default direction is top to bottom
    assert pixels[0, 0, 0] < pixels[1, 0, 0]
    assert (pixels[0, :, 0] == pixels[0, 0, 0]).all()
    assert (pixels[..., 3] == 255).all()
    with pytest.raises(ValueError):
        g.render(0, 2)


def test_np_rgba_shape(red_blue):
    rgba = red_blue.np_rgba(np.zeros((3, 5)))
    assert rgba.shape == (3, 5, 4)
    assert np.allclose(rgba[0, 0], [1, 0, 0, 1])
