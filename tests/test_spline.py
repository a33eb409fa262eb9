import math

import pytest

from bicubic2d.functions import Function, dx, dy
from bicubic2d.grid import Grid
from bicubic2d.spline import node_derivatives, solve_tridiagonal, spline_coefficients


def _tridiagonal_product(lower, diagonal, upper, x):
    n = len(x)
    out = []
    for i in range(n):
        total = diagonal[i] * x[i]
        if i > 0:
            total += lower[i] * x[i - 1]
        if i < n - 1:
            total += upper[i] * x[i + 1]
        out.append(total)
    return out


def test_solve_tridiagonal_recovers_known_solution():
    lower = [0.0, 1.0, 2.0, 1.0, 3.0]
    diagonal = [5.0, 6.0, 7.0, 5.0, 8.0]
    upper = [1.0, 2.0, 1.0, 1.0, 0.0]
    expected = [1.0, -2.0, 3.5, 0.25, -1.0]
    rhs = _tridiagonal_product(lower, diagonal, upper, expected)
    result = solve_tridiagonal(lower, diagonal, upper, rhs)
    assert result == pytest.approx(expected)


def test_solve_tridiagonal_ignores_outer_band_entries():
    diagonal = [4.0, 4.0, 4.0]
    rhs = [1.0, 2.0, 3.0]
    first = solve_tridiagonal([0.0, 1.0, 1.0], diagonal, [1.0, 1.0, 0.0], rhs)
    second = solve_tridiagonal([99.0, 1.0, 1.0], diagonal, [1.0, 1.0, -7.0], rhs)
    assert first == pytest.approx(second)


def test_solve_tridiagonal_single_equation():
    assert solve_tridiagonal([0.0], [4.0], [0.0], [2.0]) == pytest.approx([0.5])


def test_solve_tridiagonal_empty():
    assert solve_tridiagonal([], [], [], []) == []


def test_solve_tridiagonal_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        solve_tridiagonal([0.0, 1.0], [1.0, 2.0, 3.0], [1.0, 0.0, 0.0], [1.0, 1.0, 1.0])


def test_node_derivative_tables_have_grid_shape():
    grid = Grid(6, 4, -1.0, 1.0, 0.0, 2.0)
    tables = node_derivatives(grid, Function.RUNGE)
    for table in tables:
        assert len(table) == 6
        assert all(len(row) == 4 for row in table)


def test_values_match_function_at_nodes():
    grid = Grid(5, 7, -1.0, 1.0, -2.0, 2.0)
    values, _, _, _ = node_derivatives(grid, Function.EXP_X2_MINUS_Y2)
    for i in range(grid.n_x):
        for j in range(grid.n_y):
            assert values[i][j] == pytest.approx(
                math.exp(grid.node_x(i) ** 2 - grid.node_y(j) ** 2)
            )


def test_linear_function_has_exact_slopes():
    grid = Grid(5, 6, -1.0, 1.0, -3.0, 2.0)
    _, slopes_x, slopes_y, mixed = node_derivatives(grid, Function.X_PLUS_Y)
    for row_x, row_y, row_m in zip(slopes_x, slopes_y, mixed):
        assert row_x == pytest.approx([1.0] * grid.n_y)
        assert row_y == pytest.approx([1.0] * grid.n_y)
        assert row_m == pytest.approx([0.0] * grid.n_y, abs=1e-12)


def test_quadratic_slopes_are_reproduced_by_the_spline():
    grid = Grid(7, 5, -2.0, 1.0, -1.0, 3.0)
    _, slopes_x, slopes_y, _ = node_derivatives(grid, Function.RADIUS_SQUARED)
    for i in range(grid.n_x):
        for j in range(grid.n_y):
            x, y = grid.node_x(i), grid.node_y(j)
            assert slopes_x[i][j] == pytest.approx(dx(Function.RADIUS_SQUARED, x, y), abs=1e-10)
            assert slopes_y[i][j] == pytest.approx(dy(Function.RADIUS_SQUARED, x, y), abs=1e-10)


def _max_slope_error(n):
    grid = Grid(n, n, -1.0, 1.0, -1.0, 1.0)
    _, slopes_x, _, _ = node_derivatives(grid, Function.EXP_X2_MINUS_Y2)
    return max(
        abs(slopes_x[i][j] - dx(Function.EXP_X2_MINUS_Y2, grid.node_x(i), grid.node_y(j)))
        for i in range(n)
        for j in range(n)
    )


def test_slope_error_shrinks_with_finer_grid():
    assert _max_slope_error(41) < _max_slope_error(11)


def test_spline_coefficients_shape_and_constant_term():
    grid = Grid(5, 4, 0.0, 1.0, 0.0, 1.0)
    cells = spline_coefficients(grid, Function.RUNGE)
    values, _, _, _ = node_derivatives(grid, Function.RUNGE)
    assert len(cells) == grid.n_x - 1
    assert all(len(row) == grid.n_y - 1 for row in cells)
    for i, row in enumerate(cells):
        for j, cell in enumerate(row):
            assert cell[0][0] == pytest.approx(values[i][j])


def test_spline_coefficients_reject_unknown_function():
    grid = Grid(4, 4, 0.0, 1.0, 0.0, 1.0)
    with pytest.raises(ValueError):
        spline_coefficients(grid, 8)