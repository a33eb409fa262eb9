"""Test surfaces for the interpolation, with their analytic derivatives."""

from __future__ import annotations

import math
from enum import IntEnum

_EPS = 1e-15


class Function(IntEnum):
    """The surfaces that can be interpolated, numbered as on the command line."""

    ONE = 0
    X = 1
    Y = 2
    X_PLUS_Y = 3
    RADIUS = 4
    RADIUS_SQUARED = 5
    EXP_X2_MINUS_Y2 = 6
    RUNGE = 7


_LABELS = {
    Function.ONE: "f(x,y) = 1",
    Function.X: "f(x,y) = x",
    Function.Y: "f(x,y) = y",
    Function.X_PLUS_Y: "f(x,y) = x + y",
    Function.RADIUS: "f(x,y) = sqrt(x * x + y * y)",
    Function.RADIUS_SQUARED: "f(x,y) = x * x + y * y",
    Function.EXP_X2_MINUS_Y2: "f(x,y) = exp(x * x - y * y)",
    Function.RUNGE: "f(x,y) = 1/(25*x*x+25*y*y+1)",
}


def _exp(t: float) -> float:
    """Exponential that saturates to infinity instead of raising."""
    try:
        return math.exp(t)
    except OverflowError:
        return math.inf


def _runge_denominator(x: float, y: float) -> float:
    return 25 * x * x + 25 * y * y + 1


def value(function: Function | int, x: float, y: float) -> float:
    """Value of the surface at (x, y)."""
    function = Function(function)
    if function is Function.ONE:
        return x * 0 + y * 0 + 1
    if function is Function.X:
        return x + y * 0
    if function is Function.Y:
        return x * 0 + y
    if function is Function.X_PLUS_Y:
        return x + y
    if function is Function.RADIUS:
        return math.sqrt(x * x + y * y)
    if function is Function.RADIUS_SQUARED:
        return x * x + y * y
    if function is Function.EXP_X2_MINUS_Y2:
        return _exp(x * x - y * y)
    return 1 / _runge_denominator(x, y)


def dx(function: Function | int, x: float, y: float) -> float:
    """Partial derivative with respect to x."""
    function = Function(function)
    if function in (Function.ONE, Function.Y):
        return 0.0
    if function in (Function.X, Function.X_PLUS_Y):
        return 1.0
    if function is Function.RADIUS:
        if abs(y) < _EPS:
            if abs(x) < _EPS:
                return 0.0
            return 1.0 if x > 0 else -1.0
        return x / math.sqrt(x * x + y * y)
    if function is Function.RADIUS_SQUARED:
        return 2 * x
    if function is Function.EXP_X2_MINUS_Y2:
        return 2 * x * _exp(x * x - y * y)
    s = _runge_denominator(x, y)
    return -50 * x / (s * s)


def dy(function: Function | int, x: float, y: float) -> float:
    """Partial derivative with respect to y."""
    function = Function(function)
    if function in (Function.ONE, Function.X):
        return 0.0
    if function in (Function.Y, Function.X_PLUS_Y):
        return 1.0
    if function is Function.RADIUS:
        if abs(x) < _EPS:
            if abs(y) < _EPS:
                return 0.0
            return 1.0 if y > 0 else -1.0
        return y / math.sqrt(x * x + y * y)
    if function is Function.RADIUS_SQUARED:
        return 2 * y
    if function is Function.EXP_X2_MINUS_Y2:
        return -2 * y * _exp(x * x - y * y)
    s = _runge_denominator(x, y)
    return -50 * y / (s * s)


def dxy(function: Function | int, x: float, y: float) -> float:
    """Mixed second derivative."""
    function = Function(function)
    if function is Function.RADIUS:
        if abs(x) < _EPS and abs(y) < _EPS:
            return 0.0
        r = math.sqrt(x * x + y * y)
        return -y * x / (r * r * r)
    if function is Function.EXP_X2_MINUS_Y2:
        return -4 * x * y * _exp(x * x - y * y)
    if function is Function.RUNGE:
        s = _runge_denominator(x, y)
        return 5000 * x * y / (s * s * s)
    return 0.0


def _radius_second(numerator_sq: float, x: float, y: float) -> float:
    x2 = x * x
    y2 = y * y
    return numerator_sq * math.sqrt(y2 + x2) / (y2 * y2 + 2 * y2 * x2 + x2 * x2)


def dxx(function: Function | int, x: float, y: float) -> float:
    """Second derivative with respect to x."""
    function = Function(function)
    if function is Function.RADIUS:
        if abs(x) < _EPS and abs(y) < _EPS:
            return 0.0
        return _radius_second(y * y, x, y)
    if function is Function.RADIUS_SQUARED:
        return 2.0
    if function is Function.EXP_X2_MINUS_Y2:
        return (4 * x * x + 2) * _exp(x * x - y * y)
    if function is Function.RUNGE:
        s = _runge_denominator(x, y)
        return -50 * (s - 100 * x * x) / (s * s * s)
    return 0.0


def dyy(function: Function | int, x: float, y: float) -> float:
    """Second derivative with respect to y."""
    function = Function(function)
    if function is Function.RADIUS:
        if abs(x) < _EPS and abs(y) < _EPS:
            return 0.0
        return _radius_second(x * x, x, y)
    if function is Function.RADIUS_SQUARED:
        return 2.0
    if function is Function.EXP_X2_MINUS_Y2:
        return (4 * y * y - 2) * _exp(x * x - y * y)
    if function is Function.RUNGE:
        s = _runge_denominator(x, y)
        return -50 * (s - 100 * y * y) / (s * s * s)
    return 0.0


def label(function: Function | int) -> str:
    """Human-readable formula of the surface."""
    return _LABELS[Function(function)]