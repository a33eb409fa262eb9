"""Bicubic interpolation of a test surface over a rectangle."""

from __future__ import annotations

from enum import IntEnum

from .functions import Function, value
from .grid import Grid, Matrix, evaluate_cell
from .hermite import hermite_coefficients
from .spline import spline_coefficients


class Method(IntEnum):
    """How node derivatives are obtained."""

    HERMITE = 1
    SPLINE = 2


class Interpolation:
    """Piecewise bicubic interpolant of one of the test surfaces."""

    def __init__(
        self,
        method: Method | int,
        function: Function | int,
        n_x: int,
        n_y: int,
        x_a: float,
        x_b: float,
        y_a: float,
        y_b: float,
    ) -> None:
        self.method = Method(method)
        self.function = Function(function)
        self.grid = Grid(n_x, n_y, x_a, x_b, y_a, y_b)
        if self.method is Method.HERMITE:
            self._cells: list[list[Matrix]] = hermite_coefficients(self.grid, self.function)
        else:
            self._cells = spline_coefficients(self.grid, self.function)

    def evaluate(self, x: float, y: float) -> float:
        """Interpolated value at (x, y); points outside use the nearest cell."""
        i, j = self.grid.locate(x, y)
        return evaluate_cell(
            self._cells[i][j], x - self.grid.node_x(i), y - self.grid.node_y(j)
        )

    def exact(self, x: float, y: float) -> float:
        """Value of the interpolated surface itself at (x, y)."""
        return value(self.function, x, y)

    def __repr__(self) -> str:
        g = self.grid
        return (
            f"Interpolation({self.method.name}, {self.function.name}, "
            f"{g.n_x}, {g.n_y}, {g.x_a}, {g.x_b}, {g.y_a}, {g.y_b})"
        )