"""Interactive view of a surface, its two interpolants and their errors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

from .functions import Function, label
from .interpolation import Interpolation, Method

_EPS = 1e-15
_PLOT_STEPS = 100

KEY_HELP = (
    "Next graph: 1",
    "Increase scale: 2",
    "Decrease scale: 3",
    "Double points: 4",
    "Half points: 5",
    "Rotate -15: 8",
    "Rotate +15: 9",
    "Next function: 0",
    "Exit: Esc",
)


class Graph(IntEnum):
    """What the scene plots."""

    FUNCTION = 0
    HERMITE = 1
    SPLINE = 2
    HERMITE_ERROR = 3
    SPLINE_ERROR = 4


@dataclass(frozen=True)
class Surface:
    """Sampled graph: ``values[i][j]`` is the height at ``(xs[i], ys[j])``."""

    xs: list[float]
    ys: list[float]
    values: list[list[float]]


def _num(v: float) -> str:
    return f"{v:g}"


def _clip(v: float) -> float:
    return 0.0 if abs(v) < _EPS else v


class Scene:
    """State of the viewer: chosen surface, grid sizes, view window and rotation."""

    def __init__(
        self,
        method: Graph | int,
        n_x: int,
        n_y: int,
        function: Function | int,
        x_a: float,
        x_b: float,
        y_a: float,
        y_b: float,
    ) -> None:
        self.graph = Graph(method)
        self.function = Function(function)
        self.n_x = n_x
        self.n_y = n_y
        self.x_a, self.x_b = x_a, x_b
        self.y_a, self.y_b = y_a, y_b
        self.x_rotation = -90.0
        self.y_rotation = 0.0
        self.z_rotation = 90.0
        self.sup = 0.0
        self.inf = 0.0
        self.error_drop = 0.0
        self._draw_function()

    def _rebuild(self) -> None:
        args = (self.function, self.n_x, self.n_y, self.x_a, self.x_b, self.y_a, self.y_b)
        hermite = Interpolation(Method.HERMITE, *args)
        spline = Interpolation(Method.SPLINE, *args)
        self.hermite, self.spline = hermite, spline

    def _draw_function(self) -> None:
        self.scale = 1.0
        self._rebuild()
        self.x_view = (self.x_a, self.x_b)
        self.y_view = (self.y_a, self.y_b)
        self.last_inf = 0.0
        self.last_sup = 0.0

    @property
    def angle(self) -> float:
        """Rotation about the vertical axis, reduced to [0, 360)."""
        return self.z_rotation - 360 * math.floor(self.z_rotation / 360)

    def value(self, x: float, y: float) -> float:
        """Height of the current graph at (x, y)."""
        graph = self.graph
        if graph is Graph.FUNCTION:
            return self.hermite.exact(x, y)
        if graph is Graph.HERMITE:
            return _clip(self.hermite.evaluate(x, y))
        if graph is Graph.SPLINE:
            return _clip(self.spline.evaluate(x, y))
        exact = self.hermite.exact(x, y)
        if graph is Graph.HERMITE_ERROR:
            return _clip(exact - self.hermite.evaluate(x, y))
        return _clip(exact - self.spline.evaluate(x, y))

    def sample(self, steps: int) -> Surface:
        """Sample the graph on a (steps+1)^2 grid over the view window.

        Updates the extremes and the error drop against the previous extremes.
        """
        if steps < 1:
            raise ValueError("steps must be positive")
        (xa, xb), (ya, yb) = self.x_view, self.y_view
        s_x = (xb - xa) / steps
        s_y = (yb - ya) / steps
        xs = [xa + i * s_x for i in range(steps + 1)]
        ys = [ya + j * s_y for j in range(steps + 1)]
        values = [[self.value(x, y) for y in ys] for x in xs]

        flat = [z for row in values for z in row]
        self.sup = max([0.0, *flat])
        self.inf = min([0.0, *flat])

        abs_max = max(abs(self.sup), abs(self.inf))
        if abs_max < _EPS:
            abs_max = 10.0
        last = max(abs(self.last_sup), abs(self.last_inf))
        if last < _EPS:
            self.error_drop = 0.0
        else:
            drop = abs_max / last
            if _EPS < drop < 1:
                drop = 1 / drop
            self.error_drop = drop
        return Surface(xs, ys, values)

    def status_lines(self) -> list[str]:
        """Text describing the current state of the scene."""
        (xa, xb), (ya, yb) = self.x_view, self.y_view
        lines = [
            label(self.function),
            f"graph = {int(self.graph)}",
            f"n_x = {self.n_x}",
            f"n_y = {self.n_y}",
            f"scale = {_num(self.scale)}",
            f"angle = {_num(self.angle)} degree",
            f"max = {_num(self.sup)}",
            f"min = {_num(self.inf)}",
            f"x: ({_num(xa)}, {_num(xb)})",
            f"y: ({_num(ya)}, {_num(yb)})",
        ]
        if self.graph in (Graph.HERMITE_ERROR, Graph.SPLINE_ERROR):
            lines.append(f"Error drop: {_num(self.error_drop)}")
        return lines

    def change_function(self) -> None:
        self.function = Function((int(self.function) + 1) % len(Function))
        self._draw_function()

    def change_graph(self) -> None:
        self.graph = Graph((int(self.graph) + 1) % len(Graph))
        self.last_inf = 0.0
        self.last_sup = 0.0

    def _rescale_view(self, factor: float) -> None:
        def rescale(bounds: tuple[float, float]) -> tuple[float, float]:
            a, b = bounds
            centre = (a + b) / 2
            half = (b - a) * factor / 2
            return centre - half, centre + half

        self.x_view = rescale(self.x_view)
        self.y_view = rescale(self.y_view)
        self.last_inf = 0.0
        self.last_sup = 0.0

    def zoom_in(self) -> None:
        self.scale *= 2
        self._rescale_view(0.5)

    def zoom_out(self) -> None:
        self.scale /= 2
        self._rescale_view(2.0)

    def double_n(self) -> None:
        self.n_x *= 2
        self.n_y *= 2
        self._rebuild()
        self.last_inf = self.inf
        self.last_sup = self.sup

    def half_n(self) -> None:
        self.n_x = max(self.n_x // 2, 5)
        self.n_y = max(self.n_y // 2, 5)
        self._rebuild()
        self.last_inf = self.inf
        self.last_sup = self.sup

    def rotate_z(self, factor: int) -> None:
        self.z_rotation += factor * 15

    def rotate_up(self) -> None:
        self.x_rotation += 15.0

    def rotate_down(self) -> None:
        self.x_rotation -= 15.0

    def rotate_left(self) -> None:
        self.z_rotation += 1.0

    def rotate_right(self) -> None:
        self.z_rotation -= 1.0

    def handle_key(self, key: str) -> bool:
        """Apply the action bound to ``key``; return False when the view should close."""
        if key == "escape":
            return False
        actions: dict[str, Callable[[], None]] = {
            "up": self.rotate_up,
            "down": self.rotate_down,
            "left": self.rotate_left,
            "right": self.rotate_right,
            "0": self.change_function,
            "1": self.change_graph,
            "2": self.zoom_in,
            "3": self.zoom_out,
            "4": self.double_n,
            "5": self.half_n,
            "8": lambda: self.rotate_z(1),
            "9": lambda: self.rotate_z(-1),
        }
        action = actions.get(key)
        if action is not None:
            action()
        return True


def show(scene: Scene) -> None:
    """Open a window plotting the scene and driving it from the keyboard."""
    import matplotlib.pyplot as plt

    fig = plt.figure(figsize=(10, 6))
    ax = fig.add_subplot(projection="3d")
    fig.text(0.01, 0.99, "   ".join(KEY_HELP), va="top", fontsize=8)

    def redraw() -> None:
        surface = scene.sample(_PLOT_STEPS)
        grid_x = [[x] * len(surface.ys) for x in surface.xs]
        grid_y = [list(surface.ys) for _ in surface.xs]
        ax.clear()
        ax.plot_surface(grid_x, grid_y, surface.values, cmap="viridis", alpha=0.7)
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_title("\n".join(scene.status_lines()), loc="left", fontsize=8)
        ax.view_init(elev=30 + (scene.x_rotation + 90), azim=scene.z_rotation - 150)

    def on_key(event) -> None:
        if not scene.handle_key(event.key):
            plt.close(fig)
            return
        redraw()
        fig.canvas.draw_idle()

    fig.canvas.mpl_connect("key_press_event", on_key)
    redraw()
    plt.show()