"""Bicubic interpolation with node slopes taken from one-dimensional cubic splines."""

from __future__ import annotations

from typing import Sequence

from .functions import Function, dxx, dyy, value
from .grid import Grid, Matrix, cell_coefficients

Table = list[list[float]]


def solve_tridiagonal(
    lower: Sequence[float],
    diagonal: Sequence[float],
    upper: Sequence[float],
    rhs: Sequence[float],
) -> list[float]:
    """Solve a tridiagonal system by forward elimination and back substitution.

    ``lower[0]`` and ``upper[-1]`` lie outside the matrix and are ignored.
    """
    n = len(diagonal)
    if not len(lower) == len(upper) == len(rhs) == n:
        raise ValueError("all bands and the right-hand side must have the same length")
    if n == 0:
        return []
    diag = [float(d) for d in diagonal]
    solution = [float(r) for r in rhs]
    for i in range(1, n):
        diag[i] = diag[i] - upper[i - 1] * lower[i] / diag[i - 1]
        solution[i] = solution[i] - lower[i] / diag[i - 1] * solution[i - 1]
    solution[-1] = solution[-1] / diag[-1]
    for i in range(n - 2, -1, -1):
        solution[i] = (solution[i] - upper[i] * solution[i + 1]) / diag[i]
    return solution


def _spline_slopes(
    samples: Sequence[float], h: float, start_curvature: float, end_curvature: float
) -> list[float]:
    """Slopes of the cubic spline through equally spaced samples.

    The end conditions fix the second derivative at both ends.
    """
    inner = len(samples) - 2
    lower = [0.0] + [h] * inner + [1.0]
    diagonal = [2.0] + [4 * h] * inner + [2.0]
    upper = [1.0] + [h] * inner + [0.0]
    rhs = (
        [3 * (samples[1] - samples[0]) / h - h * start_curvature / 2]
        + [3 * (after - before) for before, after in zip(samples, samples[2:])]
        + [3 * (samples[-1] - samples[-2]) / h + h * end_curvature / 2]
    )
    return solve_tridiagonal(lower, diagonal, upper, rhs)


def node_derivatives(grid: Grid, function: Function | int) -> tuple[Table, Table, Table, Table]:
    """Values, x slopes, y slopes and mixed slopes at every node.

    Each table is indexed [i][j] for node (x_i, y_j). The x slopes come from
    splines along x, the y slopes from splines along y, and the mixed slopes
    from splines of the x slopes along y.
    """
    function = Function(function)
    xs = [grid.node_x(i) for i in range(grid.n_x)]
    ys = [grid.node_y(j) for j in range(grid.n_y)]

    values = [[value(function, x, y) for y in ys] for x in xs]

    slope_rows = [
        _spline_slopes(
            column,
            grid.h_x,
            dxx(function, grid.x_a, y),
            dxx(function, grid.x_b, y),
        )
        for column, y in zip(zip(*values), ys)
    ]
    slopes_x = [list(row) for row in zip(*slope_rows)]

    slopes_y: Table = []
    mixed: Table = []
    for x, row_values, row_slopes in zip(xs, values, slopes_x):
        start = dyy(function, x, grid.y_a)
        end = dyy(function, x, grid.y_b)
        slopes_y.append(_spline_slopes(row_values, grid.h_y, start, end))
        mixed.append(_spline_slopes(row_slopes, grid.h_y, start, end))
    return values, slopes_x, slopes_y, mixed


def spline_coefficients(grid: Grid, function: Function | int) -> list[list[Matrix]]:
    """Bicubic coefficients of every cell, indexed [i][j]."""
    values, slopes_x, slopes_y, mixed = node_derivatives(grid, function)

    def corners(i: int, j: int) -> list[list[float]]:
        rows = []
        for a in (i, i + 1):
            rows.append([values[a][j], slopes_y[a][j], values[a][j + 1], slopes_y[a][j + 1]])
            rows.append([slopes_x[a][j], mixed[a][j], slopes_x[a][j + 1], mixed[a][j + 1]])
        return rows

    return [
        [cell_coefficients(grid, corners(i, j)) for j in range(grid.n_y - 1)]
        for i in range(grid.n_x - 1)
    ]