"""Command line entry: validate the arguments and open the viewer."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Sequence

from .functions import Function
from .scene import Scene, show

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

USAGE = "usage: bicubic2d METHOD N_X N_Y FUNCTION X_A X_B Y_A Y_B"


class ArgumentError(ValueError):
    """The command line arguments are missing or invalid."""


@dataclass(frozen=True)
class Options:
    method: int
    n_x: int
    n_y: int
    function: Function
    x_a: float
    x_b: float
    y_a: float
    y_b: float


def _int(text: str, message: str) -> int:
    match = _INT.match(text)
    if match is None:
        raise ArgumentError(message)
    return int(match.group(1))


def _float(text: str, message: str) -> float:
    match = _FLOAT.match(text)
    if match is None:
        raise ArgumentError(message)
    return float(match.group(1))


def _segment(a_text: str, b_text: str) -> tuple[float, float]:
    message = "Error in the data type in the segment"
    a = _float(a_text, message)
    b = _float(b_text, message)
    if a > b or b - a > 1e9 or b - a < 1e-6:
        raise ArgumentError("Incorrect segment")
    return a, b


def parse_args(argv: Sequence[str]) -> Options:
    """Check the eight arguments and return them parsed."""
    argv = list(argv)
    if len(argv) < 8:
        raise ArgumentError("Not enough arguments")
    if len(argv) > 8:
        raise ArgumentError("Exceeding the number of arguments")

    method = _int(argv[0], "Error in the data type in the method ")
    if method not in (1, 2):
        raise ArgumentError("Unknown method")

    points = []
    for text in argv[1:3]:
        n = _int(text, "Error in the data type in the amount of points")
        if n < 5:
            raise ArgumentError("Not enough amount of points")
        points.append(n)

    k = _int(argv[3], "Error in the data type in the function")
    if not 0 <= k <= 7:
        raise ArgumentError("Invalid function")

    x_a, x_b = _segment(argv[4], argv[5])
    y_a, y_b = _segment(argv[6], argv[7])
    return Options(method, points[0], points[1], Function(k), x_a, x_b, y_a, y_b)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer; return -1 when the arguments are rejected."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
    except ArgumentError as error:
        print(error)
        return -1
    scene = Scene(
        options.method,
        options.n_x,
        options.n_y,
        options.function,
        options.x_a,
        options.x_b,
        options.y_a,
        options.y_b,
    )
    show(scene)
    return 0


if __name__ == "__main__":
    sys.exit(main())