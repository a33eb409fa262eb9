import math

import pytest

from bicubic2d.functions import Function, dx, dxx, dxy, dy, dyy, label, value

H = 1e-5
REL = 1e-5
ABS = 1e-7
POINTS = [(0.3, -0.4), (-0.7, 0.2), (1.1, 0.5)]


def test_label_of_radius():
    assert label(Function.RADIUS) == "f(x,y) = sqrt(x * x + y * y)"


def test_labels_are_distinct_for_every_function():
    assert len({label(f) for f in Function}) == len(Function) == 8


def test_label_accepts_integer_code():
    assert label(7) == "f(x,y) = 1/(25*x*x+25*y*y+1)"


@pytest.mark.parametrize("code", [-1, 8, 100])
def test_unknown_function_is_rejected(code):
    with pytest.raises(ValueError):
        value(code, 0.0, 0.0)
    with pytest.raises(ValueError):
        dx(code, 0.0, 0.0)


def test_integer_code_matches_enum():
    assert value(4, 3.0, 4.0) == value(Function.RADIUS, 3.0, 4.0) == 5.0


def test_constant_surface():
    assert value(Function.ONE, 2.5, -7.0) == 1.0


@pytest.mark.parametrize("function", list(Function))
@pytest.mark.parametrize("x, y", POINTS)
def test_first_derivatives_match_differences(function, x, y):
    fd_x = (value(function, x + H, y) - value(function, x - H, y)) / (2 * H)
    fd_y = (value(function, x, y + H) - value(function, x, y - H)) / (2 * H)
    assert dx(function, x, y) == pytest.approx(fd_x, rel=REL, abs=ABS)
    assert dy(function, x, y) == pytest.approx(fd_y, rel=REL, abs=ABS)


@pytest.mark.parametrize("function", list(Function))
@pytest.mark.parametrize("x, y", POINTS)
def test_second_derivatives_match_differences(function, x, y):
    fd_xy = (dx(function, x, y + H) - dx(function, x, y - H)) / (2 * H)
    fd_xx = (dx(function, x + H, y) - dx(function, x - H, y)) / (2 * H)
    fd_yy = (dy(function, x, y + H) - dy(function, x, y - H)) / (2 * H)
    assert dxy(function, x, y) == pytest.approx(fd_xy, rel=REL, abs=ABS)
    assert dxx(function, x, y) == pytest.approx(fd_xx, rel=REL, abs=ABS)
    assert dyy(function, x, y) == pytest.approx(fd_yy, rel=REL, abs=ABS)


def test_radius_derivatives_at_origin_are_zero():
    for derivative in (dx, dy, dxy, dxx, dyy):
        assert derivative(Function.RADIUS, 0.0, 0.0) == 0.0


def test_radius_derivatives_on_axes_are_signs():
    assert dx(Function.RADIUS, 2.0, 0.0) == 1.0
    assert dx(Function.RADIUS, -2.0, 0.0) == -dx(Function.RADIUS, 2.0, 0.0)
    assert dy(Function.RADIUS, 0.0, 3.0) == 1.0
    assert dy(Function.RADIUS, 0.0, -3.0) == -dy(Function.RADIUS, 0.0, 3.0)


def test_exponential_overflow_saturates():
    assert value(Function.EXP_X2_MINUS_Y2, 1000.0, 0.0) == math.inf
    assert dx(Function.EXP_X2_MINUS_Y2, 1000.0, 0.0) == math.inf
    assert value(Function.EXP_X2_MINUS_Y2, 0.0, 1000.0) == 0.0


def test_runge_symmetry():
    x, y = 0.37, -0.81
    v = value(Function.RUNGE, x, y)
    assert value(Function.RUNGE, -x, y) == v
    assert value(Function.RUNGE, y, x) == v
    assert dxx(Function.RUNGE, x, y) == dyy(Function.RUNGE, y, x)