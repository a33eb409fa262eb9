"""Local bicubic Hermite interpolation from analytic and difference derivatives."""

from __future__ import annotations

from .functions import Function, dx, dxy, dy, value
from .grid import Grid, Matrix, cell_coefficients

Table = list[list[float]]


def node_derivatives(grid: Grid, function: Function | int) -> tuple[Table, Table, Table, Table]:
    """Values, x slopes, y slopes and mixed slopes at every node.

    Each table is indexed [i][j] for node (x_i, y_j). Interior nodes use the
    analytic derivatives; boundary nodes use central differences reaching
    one step outside the interval.
    """
    function = Function(function)
    h_x, h_y = grid.h_x, grid.h_y
    xs = [grid.node_x(i) for i in range(grid.n_x)]
    ys = [grid.node_y(j) for j in range(grid.n_y)]
    last_x, last_y = grid.n_x - 1, grid.n_y - 1

    values = [[value(function, x, y) for y in ys] for x in xs]

    def x_slope(i: int, j: int) -> float:
        y = ys[j]
        if i == 0:
            return (values[1][j] - value(function, grid.x_a - h_x, y)) / (2 * h_x)
        if i == last_x:
            return (value(function, grid.x_b + h_x, y) - values[last_x - 1][j]) / (2 * h_x)
        return dx(function, xs[i], y)

    slopes_x = [[x_slope(i, j) for j in range(grid.n_y)] for i in range(grid.n_x)]

    def y_slopes(i: int, j: int) -> tuple[float, float]:
        x = xs[i]
        if j == 0:
            below = value(function, x, grid.y_a - h_y)
            return (
                (values[i][1] - below) / (2 * h_y),
                (slopes_x[i][1] - below) / (2 * h_y),
            )
        if j == last_y:
            above = value(function, x, grid.y_b + h_y)
            return (
                (above - values[i][last_y - 1]) / (2 * h_y),
                (above - slopes_x[i][last_y - 1]) / (2 * h_y),
            )
        return dy(function, x, ys[j]), dxy(function, x, ys[j])

    pairs = [[y_slopes(i, j) for j in range(grid.n_y)] for i in range(grid.n_x)]
    slopes_y = [[fy for fy, _ in row] for row in pairs]
    mixed = [[fxy for _, fxy in row] for row in pairs]
    return values, slopes_x, slopes_y, mixed


def hermite_coefficients(grid: Grid, function: Function | int) -> list[list[Matrix]]:
    """Bicubic coefficients of every cell, indexed [i][j]."""
    values, slopes_x, slopes_y, mixed = node_derivatives(grid, function)

    def corners(i: int, j: int) -> list[list[float]]:
        return [
            [values[a][j], slopes_y[a][j], values[a][j + 1], slopes_y[a][j + 1]]
            if row % 2 == 0
            else [slopes_x[a][j], mixed[a][j], slopes_x[a][j + 1], mixed[a][j + 1]]
            for row, a in enumerate((i, i, i + 1, i + 1))
        ]

    return [
        [cell_coefficients(grid, corners(i, j)) for j in range(grid.n_y - 1)]
        for i in range(grid.n_x - 1)
    ]