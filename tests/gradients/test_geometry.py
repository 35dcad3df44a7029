import logging
import math

import pytest

from bigcolor import ConicGeometry, LinearGeometry, RadialGeometry


def test_linear_default_is_top_to_bottom():
    g = LinearGeometry()
    assert g.angle == 180.0
    assert g.position(0.3, 0.0) == pytest.approx(0.0)
    assert g.position(0.3, 1.0) == pytest.approx(1.0)
    assert g.css_args() is None


@pytest.mark.parametrize("angle,side", [
    (0, "to top"),
    (45, "to top right"),
    (90, "to right"),
    (135, "to bottom right"),
    (225, "to bottom left"),
    (270, "to left"),
    (315, "to top left"),
])
def test_linear_sides(angle, side):
    g = LinearGeometry.from_angle(angle)
    assert g.angle == pytest.approx(angle)
    assert g.css_args() == side


def test_linear_other_angle():
    assert LinearGeometry.from_angle(30).css_args() == "30deg"


def test_linear_corners_hit_the_ends():
    g = LinearGeometry.from_angle(45)
    assert g.position(0.0, 1.0) == pytest.approx(0.0)
    assert g.position(1.0, 0.0) == pytest.approx(1.0)
    assert g.position(0.5, 0.5) == pytest.approx(0.5)


def test_linear_to_right_projection():
    g = LinearGeometry.from_angle(90)
    assert g.position(0.25, 0.0) == pytest.approx(0.25)
    assert g.position(0.25, 1.0) == pytest.approx(0.25)


def test_linear_rejects_degenerate_line():
    with pytest.raises(ValueError):
        LinearGeometry((0.5, 0.5), (0.5, 0.5))


def test_radial():
    g = RadialGeometry()
    assert g.radius == pytest.approx(math.sqrt(0.5))
    assert g.position(0.5, 0.5) == 0.0
    assert g.position(1.0, 1.0) == pytest.approx(1.0)
    assert g.position(1.0, 0.5) == pytest.approx(0.5 / math.sqrt(0.5))
    assert g.css_args() is None


def test_radial_offset_center_reaches_far_corner():
    g = RadialGeometry(center=(0.0, 0.0), shape="circle")
    assert g.radius == pytest.approx(math.sqrt(2))
    assert g.position(1.0, 1.0) == pytest.approx(1.0)
    assert g.css_args() == "circle at 0% 0%"


def test_radial_validation():
    with pytest.raises(ValueError):
        RadialGeometry(shape="square")
    with pytest.raises(ValueError):
        RadialGeometry(radius=0)


@pytest.mark.parametrize("point,position", [
    ((0.5, 0.0), 0.0),
    ((1.0, 0.5), 0.25),
    ((0.5, 1.0), 0.5),
    ((0.0, 0.5), 0.75),
])
def test_conic_sweeps_clockwise_from_top(point, position):
    assert ConicGeometry().position(*point) == pytest.approx(position)


def test_conic_start_angle():
    g = ConicGeometry(start_angle=90)
    assert g.position(1.0, 0.5) == pytest.approx(0.0)
    assert g.position(0.5, 0.0) == pytest.approx(0.75)
    assert g.css_args() == "from 90deg"
    assert ConicGeometry(start_angle=-90).start_angle == 270.0


def test_geometries_are_immutable():
    with pytest.raises(AttributeError):
        RadialGeometry()._radius = 2.0


def test_geometry_equality():
    assert LinearGeometry.from_angle(90) == LinearGeometry.from_angle(90)
    assert RadialGeometry() == RadialGeometry(center=(0.5, 0.5))
    assert ConicGeometry() != RadialGeometry()


def test_css_args_logs_dropped_radius(caplog):
    caplog.set_level(logging.DEBUG, logger="bigcolor.gradients.geometry")
    assert RadialGeometry(radius=0.25).css_args() is None
    assert "radius" in caplog.text


def test_css_args_logs_off_center_line(caplog):
    caplog.set_level(logging.DEBUG, logger="bigcolor.gradients.geometry")
    assert LinearGeometry((0.0, 0.0), (0.5, 0.0)).css_args() == "to right"
    assert "no CSS form" in caplog.text


def test_css_args_quiet_for_expressible_geometry(caplog):
    caplog.set_level(logging.DEBUG, logger="bigcolor.gradients.geometry")
    LinearGeometry().css_args()
    LinearGeometry.from_angle(45).css_args()
    RadialGeometry(center=(0.25, 0.75)).css_args()
    assert caplog.text == ""
