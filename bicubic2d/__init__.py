"""Bicubic Hermite and spline interpolation of two-variable test functions, with a 3D viewer."""

__version__ = "0.1.0"
__all__ = ["functions", "grid", "hermite", "spline", "interpolation", "scene", "cli"]