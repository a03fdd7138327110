import numpy as np
import pytest

from circlecurves.config import CURVE_COLORS, PuzzleConfig
from circlecurves.model.curves import find_curve_at, generate_curves
from circlecurves.model.geometry_primitives import Circle, Point


@pytest.fixture
def circle() -> Circle:
    return Circle(Point(400, 300), 100)


def test_generates_twenty_default_curves(circle):
    curves = generate_curves(circle, np.random.default_rng(0))

    assert len(curves) == 20
    assert [c.color for c in curves] == list(CURVE_COLORS)
    for curve in curves:
        assert curve.scale == 1.0
        assert curve.line_width == 2.0
        assert curve.visible


def test_endpoints_lie_outside_the_circle(circle):
    curves = generate_curves(circle, np.random.default_rng(1))

    for curve in curves:
        for endpoint in (curve.start, curve.end):
            d = endpoint.distance_to(circle.center)
            assert 1.5 * circle.radius - 1e-9 <= d <= 2.0 * circle.radius + 1e-9


def test_control_point_stays_in_the_central_square(circle):
    curves = generate_curves(circle, np.random.default_rng(2))

    half = circle.radius / 2
    for curve in curves:
        assert abs(curve.control.x - circle.center.x) <= half
        assert abs(curve.control.y - circle.center.y) <= half


def test_endpoints_are_roughly_opposite(circle):
    curves = generate_curves(circle, np.random.default_rng(3))

    for curve in curves:
        a = curve.start - circle.center
        b = curve.end - circle.center
        cos_between = (a.x * b.x + a.y * b.y) / (a.magnitude * b.magnitude)
        # separated by pi +/- pi/4
        assert cos_between <= np.cos(3 * np.pi / 4) + 1e-9


def test_same_seed_same_curves(circle):
    first = generate_curves(circle, np.random.default_rng(99))
    second = generate_curves(circle, np.random.default_rng(99))
    assert first == second


def test_curve_count_follows_config(circle):
    curves = generate_curves(circle, np.random.default_rng(0), PuzzleConfig(curve_count=5))
    assert len(curves) == 5


def test_find_curve_at_hits_path_within_tolerance(circle):
    curves = generate_curves(circle, np.random.default_rng(4), PuzzleConfig(curve_count=1))
    curve = curves[0]
    on_path = curve.point_at(0.0)

    assert find_curve_at(curves, on_path) == 0
    assert find_curve_at(curves, Point(-5000, -5000)) is None


def test_find_curve_at_skips_hidden_curves(circle):
    curves = generate_curves(circle, np.random.default_rng(5), PuzzleConfig(curve_count=1))
    curves[0].visible = False
    assert find_curve_at(curves, curves[0].point_at(0.5)) is None
