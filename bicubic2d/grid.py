"""Uniform rectangular grid and the bicubic patch of one of its cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

Matrix = tuple[tuple[float, float, float, float], ...]


@dataclass(frozen=True)
class Grid:
    """Uniform grid of n_x by n_y nodes over [x_a, x_b] x [y_a, y_b]."""

    n_x: int
    n_y: int
    x_a: float
    x_b: float
    y_a: float
    y_b: float

    def __post_init__(self) -> None:
        if self.n_x < 3 or self.n_y < 3:
            raise ValueError("a grid needs at least 3 nodes along each axis")
        if self.x_a >= self.x_b:
            raise ValueError("x interval is empty")
        if self.y_a >= self.y_b:
            raise ValueError("y interval is empty")

    @property
    def h_x(self) -> float:
        return (self.x_b - self.x_a) / (self.n_x - 1)

    @property
    def h_y(self) -> float:
        return (self.y_b - self.y_a) / (self.n_y - 1)

    def node_x(self, i: int) -> float:
        """x coordinate of the i-th node column."""
        return self.x_a + self.h_x * i

    def node_y(self, j: int) -> float:
        """y coordinate of the j-th node row."""
        return self.y_a + self.h_y * j

    def locate(self, x: float, y: float) -> tuple[int, int]:
        """Indices of the cell holding (x, y), clamped to the grid."""
        i = int((x - self.x_a) / self.h_x)
        j = int((y - self.y_a) / self.h_y)
        i = min(max(i, 0), self.n_x - 2)
        j = min(max(j, 0), self.n_y - 2)
        return i, j


def _basis(h: float) -> Matrix:
    return (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (-3 / (h * h), -2 / h, 3 / (h * h), -1 / h),
        (2 / (h * h * h), 1 / (h * h), -2 / (h * h * h), 1 / (h * h)),
    )


def cell_coefficients(grid: Grid, corners: Sequence[Sequence[float]]) -> Matrix:
    """Bicubic coefficients of a cell from the Hermite data at its corners.

    ``corners`` is a 4x4 matrix whose rows are, for the corners (x0, y0)
    and (x0, y1), then (x1, y0) and (x1, y1)::

        f(x0,y0)   fy(x0,y0)   f(x0,y1)   fy(x0,y1)
        fx(x0,y0)  fxy(x0,y0)  fx(x0,y1)  fxy(x0,y1)
        f(x1,y0)   fy(x1,y0)   f(x1,y1)   fy(x1,y1)
        fx(x1,y0)  fxy(x1,y0)  fx(x1,y1)  fxy(x1,y1)

    Entry [a][b] of the result multiplies dx**a * dy**b.
    """
    rows = [list(row) for row in corners]
    if len(rows) != 4 or any(len(row) != 4 for row in rows):
        raise ValueError("corner data must be a 4x4 matrix")
    ax = _basis(grid.h_x)
    ay = _basis(grid.h_y)
    left = rows[:2] + [
        [sum(rows[k][c] * ax[r][k] for k in range(4)) for c in range(4)]
        for r in (2, 3)
    ]
    return tuple(
        tuple(
            row[c] if c < 2 else sum(ay[c][k] * row[k] for k in range(4))
            for c in range(4)
        )
        for row in left
    )


def evaluate_cell(coefficients: Sequence[Sequence[float]], dx: float, dy: float) -> float:
    """Value of a bicubic patch at offsets (dx, dy) from its lower corner."""
    result = 0.0
    for row in reversed(coefficients):
        acc = 0.0
        for coefficient in reversed(row):
            acc = acc * dy + coefficient
        result = result * dx + acc
    return result