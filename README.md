# bicubic2d

Piecewise bicubic interpolation of a function of two variables on a uniform
rectangular grid. It comes with a matplotlib 3D viewer that compares the
interpolants with the exact function.

Each cell of the grid gets its own bicubic polynomial. The polynomial is
built from the values, the x and y slopes and the mixed slope at the four
corners of the cell. The two methods differ only in how they obtain those
slopes:

1. **Hermite** (`Method.HERMITE`, `bicubic2d.hermite`): interior nodes use
   the analytic derivatives. Boundary nodes use central differences, which
   evaluate the function one grid step outside the interval.
2. **Spline** (`Method.SPLINE`, `bicubic2d.spline`): the slopes come from
   cubic splines along each grid line. Each spline is found by solving a
   tridiagonal system (`solve_tridiagonal`). The end conditions fix the
   second derivative at both ends to the analytic `dxx` / `dyy` values.

The test functions (`bicubic2d.functions.Function`) are numbered 0 to 7:

| No. | Name              | f(x, y)                 |
|-----|-------------------|-------------------------|
| 0   | `ONE`             | 1                       |
| 1   | `X`               | x                       |
| 2   | `Y`               | y                       |
| 3   | `X_PLUS_Y`        | x + y                   |
| 4   | `RADIUS`          | sqrt(x * x + y * y)     |
| 5   | `RADIUS_SQUARED`  | x * x + y * y           |
| 6   | `EXP_X2_MINUS_Y2` | exp(x * x - y * y)      |
| 7   | `RUNGE`           | 1 / (25x² + 25y² + 1)   |

`bicubic2d.functions` provides the following:

- `value`, which evaluates the function;
- `dx`, `dy`, `dxy`, `dxx` and `dyy`, which give its analytic derivatives;
- `label`, which gives its formula as text.

## Installation

```
pip install .
```

To include the test requirements:

```
pip install .[test]
```

## Command line

```
bicubic2d METHOD N_X N_Y FUNCTION X_A X_B Y_A Y_B
```

For example:

```
bicubic2d 1 100 100 4 -1 1 -10 10
```

This opens the viewer with 100 × 100 nodes, on function 4 over
`[-1, 1] × [-10, 10]`. It starts on the graph of method 1.

Exactly eight arguments are required. They are checked in order:

- `METHOD` must be 1 or 2.
- `N_X` and `N_Y` must be at least 5.
- `FUNCTION` must be between 0 and 7.
- Each segment must satisfy `a <= b`, and its length must be between `1e-6` and `1e9`.

Numbers are read from the start of each argument, so trailing characters are
ignored.

If a check fails, the command prints the reason and exits with a non-zero
status. `bicubic2d.cli.parse_args` performs the same checks on a list of
strings. It returns an `Options` record, or raises `ArgumentError`, which is
a subclass of `ValueError`.

### Viewer keys

| Key         | Action                                                          |
|-------------|-----------------------------------------------------------------|
| 1           | next graph: function, method 1, method 2, error 1, error 2      |
| 2 / 3       | zoom in / zoom out (halve / double the visible window)          |
| 4 / 5       | double / halve the number of nodes (halving stops at 5)         |
| 8 / 9       | turn the view by +15° / −15° about the vertical axis            |
| 0           | next function (resets zoom and view window)                     |
| up / down   | tilt the view by +15° / −15°                                    |
| left / right| turn the view by +1° / −1°                                      |
| Esc         | close                                                           |

The graph is sampled on a 101 × 101 grid over the visible window. Error graphs
show the exact value minus the interpolated value. Results smaller than
`1e-15` in magnitude are shown as 0.

On an error graph, the status text also shows the *error drop*. It compares
the largest absolute sampled value with the one from before the last change
in node count. The ratio is given as a number not below 1, and it is 0 when
there is nothing to compare with.

## Library use

```python
from bicubic2d.functions import Function
from bicubic2d.interpolation import Interpolation, Method

interp = Interpolation(Method.SPLINE, Function.EXP_X2_MINUS_Y2, 50, 50, -1.0, 1.0, -1.0, 1.0)
approx = interp.evaluate(0.3, -0.2)
exact = interp.exact(0.3, -0.2)
```

`Interpolation` raises `ValueError` in these cases:

- either node count is below 3;
- either interval is empty or reversed;
- the method or the function is unknown.

A point outside the grid is evaluated with the polynomial of the nearest
boundary cell.

The lower-level pieces can also be used on their own:

- `bicubic2d.grid` has `Grid`, with `node_x`, `node_y` and `locate`.
- It also has `cell_coefficients`, which builds a cell's 4×4 coefficient
  matrix from corner data, and `evaluate_cell`.
- `hermite.node_derivatives` and `spline.node_derivatives` give the value and
  slope tables at every node.
- `hermite_coefficients` and `spline_coefficients` give the coefficients of
  every cell.

The viewer state is held in `bicubic2d.scene.Scene` and can be driven without
a window:

```python
from bicubic2d.scene import Scene

scene = Scene(1, 10, 10, 5, -1.0, 1.0, -1.0, 1.0)
scene.change_graph()
surface = scene.sample(50)   # also updates max, min and the error drop
scene.double_n()
for line in scene.status_lines():
    print(line)
```

`Scene.handle_key` takes a key name (`"0"`–`"9"`, `"up"`, `"down"`, `"left"`,
`"right"`, `"escape"`) and applies its action. It returns `False` for
`"escape"`. `bicubic2d.scene.show(scene)` opens the matplotlib window for a
scene.

## Limitations

- The viewer is a plain matplotlib 3D plot. The rotation keys map onto its
  elevation and azimuth, and the colours are a fixed colormap.
- Nothing is saved: images and sampled data stay in memory unless you save
  them yourself.