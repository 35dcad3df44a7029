import pytest

from bigcolor.parsing import ParseError, is_valid_color, parse_color, split_arguments
from bigcolor.types import ColorFormat


def rgba(text):
    parsed = parse_color(text)
    return (round(parsed.r, 6), round(parsed.g, 6), round(parsed.b, 6), round(parsed.a, 6))


def assert_rgb_close(text, expected, tolerance=1.0):
    parsed = parse_color(text)
    for got, want in zip((parsed.r, parsed.g, parsed.b), expected):
        assert abs(got - want) <= tolerance, f"{text} -> {parsed}"


# ------------------ NAMES AND HEX ------------------

@pytest.mark.parametrize("text", ["red", "RED", "  Red  ", "#ff0000", "#F00", "ff0000", "f00", "#ff0000ff", "#f00f"])
def test_red_spellings(text):
    assert rgba(text) == (255.0, 0.0, 0.0, 1.0)


def test_name_format():
    assert parse_color("rebeccapurple") == (102.0, 51.0, 153.0, 1.0, ColorFormat.NAME)
    assert parse_color("burntsienna").format == ColorFormat.NAME


def test_transparent():
    assert parse_color("transparent") == (0.0, 0.0, 0.0, 0.0, ColorFormat.NAME)


def test_hex_formats():
    assert parse_color("#123456").format == ColorFormat.HEX
    assert parse_color("#123").format == ColorFormat.HEX
    assert parse_color("#12345678").format == ColorFormat.HEX8
    assert parse_color("#1234").format == ColorFormat.HEX8


def test_short_hex_expands_by_17():
    assert rgba("#abc") == (170.0, 187.0, 204.0, 1.0)
    assert parse_color("#f008").a == pytest.approx(0x88 / 255)


def test_hex8_alpha():
    assert parse_color("#ff000080").a == pytest.approx(128 / 255)


@pytest.mark.parametrize("text", ["#12345", "#1234567", "#ggg", "#", "#ff00zz"])
def test_invalid_hex(text):
    with pytest.raises(ParseError):
        parse_color(text)


# ------------------ RGB ------------------

def test_rgb_legacy():
    assert rgba("rgb(0,255,0)") == (0.0, 255.0, 0.0, 1.0)
    assert rgba("rgba(255, 0, 0, 0.5)") == (255.0, 0.0, 0.0, 0.5)
    assert rgba("rgb(255, 0, 0, 25%)") == (255.0, 0.0, 0.0, 0.25)


def test_rgb_modern():
    assert rgba("rgb(255 0 0 / 50%)") == (255.0, 0.0, 0.0, 0.5)
    assert rgba("rgba(0 0 255 / .25)") == (0.0, 0.0, 255.0, 0.25)


def test_rgb_percentages():
    parsed = parse_color("rgb(100%, 0%, 50%)")
    assert (parsed.r, parsed.g, parsed.b) == (255.0, 0.0, 127.5)
    assert parsed.format == ColorFormat.PRGB


def test_modern_rgb_may_mix_numbers_and_percentages():
    parsed = parse_color("rgb(255 0% 0)")
    assert rgba("rgb(255 0% 0)") == (255.0, 0.0, 0.0, 1.0)
    assert parsed.format == ColorFormat.RGB


def test_legacy_rgb_rejects_mixed_units():
    with pytest.raises(ParseError):
        parse_color("rgb(255, 0%, 0)")


def test_out_of_range_channels_clamp():
    assert rgba("rgb(300, -10, 0)") == (255.0, 0.0, 0.0, 1.0)
    assert rgba("rgb(0 0 0 / 2)") == (0.0, 0.0, 0.0, 1.0)
    assert rgba("rgba(0, 0, 0, -1)") == (0.0, 0.0, 0.0, 0.0)


def test_none_keyword_in_modern_syntax():
    assert rgba("rgb(none 255 0)") == (0.0, 255.0, 0.0, 1.0)
    with pytest.raises(ParseError):
        parse_color("rgb(none, 255, 0)")


# ------------------ HUE MODELS ------------------

def test_negative_hue_wraps():
    assert parse_color("hsl(-240, 100%, 50%)")[:4] == parse_color("hsl(120, 100%, 50%)")[:4]
    assert rgba("hsl(120, 100%, 50%)") == (0.0, 255.0, 0.0, 1.0)


@pytest.mark.parametrize("angle", ["180", "180deg", "200grad", "0.5turn", "3.141592653589793rad", "540", "-180deg"])
def test_hue_angle_units(angle):
    assert_rgb_close(f"hsl({angle} 100% 50%)", (0, 255, 255), tolerance=1e-6)


def test_hsla_alpha():
    assert parse_color("hsla(120, 100%, 50%, 0.3)").a == pytest.approx(0.3)
    assert parse_color("hsl(120deg 100% 50% / 30%)").a == pytest.approx(0.3)


def test_hsl_bare_numbers_use_percent_scale():
    assert rgba("hsl(0, 100, 50)") == rgba("hsl(0, 100%, 50%)")


def test_hsv_and_hsb():
    assert rgba("hsv(0, 100%, 100%)") == (255.0, 0.0, 0.0, 1.0)
    assert parse_color("hsb(0, 100%, 100%)").format == ColorFormat.HSB
    assert parse_color("hsva(240, 100%, 100%, 0.5)").a == 0.5


def test_hwb():
    assert rgba("hwb(0 0% 0%)") == (255.0, 0.0, 0.0, 1.0)
    assert rgba("hwb(0 60% 60%)")[:3] == (127.5, 127.5, 127.5)
    assert parse_color("hwb(120 0% 0% / 0.5)").format == ColorFormat.HWB


# ------------------ PERCEPTUAL MODELS ------------------

def test_lab_and_lch():
    assert_rgb_close("lab(54.29 80.81 69.89)", (255, 0, 0))
    assert_rgb_close("lch(54.29 106.84 40.85)", (255, 0, 0))
    assert_rgb_close("lab(100% 0 0)", (255, 255, 255))
    assert parse_color("lab(50% 0 0 / 0.5)").a == 0.5


def test_lab_percent_ab_scale():
    # 100% of a is 125
    assert rgba("lab(50 100% 0)") == rgba("lab(50 125 0)")


def test_oklab_and_oklch():
    assert_rgb_close("oklab(0.628 0.2249 0.1258)", (255, 0, 0))
    assert_rgb_close("oklab(62.8% 0.2249 0.1258)", (255, 0, 0))
    assert_rgb_close("oklch(0.628 0.2577 29.23)", (255, 0, 0))
    assert parse_color("oklch(0.7 0.1 200)").format == ColorFormat.OKLCH


@pytest.mark.parametrize("text", ["lab(50, 0, 0)", "lch(50, 10, 10)", "oklab(0.5, 0, 0)", "oklch(0.5, 0.1, 10)"])
def test_perceptual_models_require_modern_syntax(text):
    with pytest.raises(ParseError):
        parse_color(text)


# ------------------ COLOR() ------------------

def test_color_function_srgb():
    assert rgba("color(srgb 1 0 0)") == pytest.approx((255.0, 0.0, 0.0, 1.0), abs=1e-6)
    assert rgba("color(srgb 50% 50% 50%)")[:3] == pytest.approx((127.5, 127.5, 127.5), abs=1e-6)


def test_color_function_display_p3_clamps_to_srgb():
    parsed = parse_color("color(display-p3 1 0 0 / 0.5)")
    assert (parsed.r, parsed.g, parsed.b) == (255.0, 0.0, 0.0)
    assert parsed.a == 0.5
    assert parsed.format == ColorFormat.COLOR


def test_color_function_xyz():
    assert_rgb_close("color(xyz 0.9505 1 1.089)", (255, 255, 255))
    assert_rgb_close("color(xyz-d50 0.9643 1 0.8251)", (255, 255, 255))


def test_color_function_unknown_space():
    with pytest.raises(ParseError) as exc:
        parse_color("color(adobe-rgb 1 0 0)")
    assert exc.value.token == "adobe-rgb"


# ------------------ CMYK ------------------

def test_cmyk():
    assert rgba("cmyk(0%, 100%, 100%, 0%)") == (255.0, 0.0, 0.0, 1.0)
    assert parse_color("cmyka(0%, 100%, 100%, 0%, 0.5)").a == 0.5
    assert parse_color("cmyk(0%, 0%, 0%, 100%)")[:3] == (0.0, 0.0, 0.0)


def test_cmyk_requires_percentages():
    with pytest.raises(ParseError):
        parse_color("cmyk(0, 1, 1, 0)")


# ------------------ FAILURES ------------------

@pytest.mark.parametrize("text,token", [
    ("notacolor", "notacolor"),
    ("foo(1, 2, 3)", "foo"),
    ("rgb(a, b, c)", "a"),
    ("rgb(1 2 3 / x)", "x"),
    ("hsl(10px, 50%, 50%)", "10px"),
])
def test_parse_error_names_token(text, token):
    with pytest.raises(ParseError) as exc:
        parse_color(text)
    assert exc.value.token == token
    assert exc.value.text == text
    assert token in str(exc.value)


@pytest.mark.parametrize("text", [
    "",
    "   ",
    "rgb()",
    "rgb(1, 2)",
    "rgb(1 2 3 4)",
    "rgb(1, 2, 3, 4, 5)",
    "rgb(1, 2, 3 / 0.5)",
    "rgb(1 2 3 / 0.5 / 1)",
    "rgb(1, 2 3, 4)",
    "rgb(1, 2, 3,)",
    "hsl(1 2)",
    "red blue",
])
def test_malformed_input(text):
    with pytest.raises(ParseError):
        parse_color(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_color("nope")


def test_non_string_is_type_error():
    with pytest.raises(TypeError):
        parse_color(0xff0000)


def test_is_valid_color():
    assert is_valid_color("hsl(0 100% 50%)")
    assert not is_valid_color("hsl(0 100% 50% 1)")


def test_split_arguments():
    assert split_arguments("1, 2, 3") == (["1", "2", "3"], None, True)
    assert split_arguments("1 2  3 / 50%") == (["1", "2", "3"], "50%", False)


@pytest.mark.parametrize("text", [
    "lab(50 1e200 0)",
    "lch(50 1e200 30)",
    "oklab(0.5 1e200 0)",
    "oklch(0.5 1e200 120)",
    "lch(50 20 1e300)",
    "color(xyz 1e300 1e300 1e300)",
])
def test_huge_channels_clamp_to_finite_colors(text):
    parsed = parse_color(text)
    for channel in (parsed.r, parsed.g, parsed.b):
        assert 0.0 <= channel <= 255.0
    assert parsed.a == 1.0


@pytest.mark.parametrize("text,token", [
    ("lab(50 1e400 0)", "1e400"),
    ("lch(50 20 1e400)", "1e400"),
    ("oklab(0.5 1e400 0)", "1e400"),
    ("rgb(1e400 0 0)", "1e400"),
    ("rgb(1e400%, 0%, 0%)", "1e400%"),
    ("hsl(1e307rad 50% 50%)", "1e307rad"),
    ("rgb(0 0 0 / 1e999)", "1e999"),
])
def test_overflowing_numbers_are_parse_errors(text, token):
    with pytest.raises(ParseError) as info:
        parse_color(text)
    assert info.value.token == token
