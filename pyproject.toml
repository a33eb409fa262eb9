[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bicubic2d"
version = "0.1.0"
description = "Bicubic Hermite and spline interpolation of functions of two variables, with a 3D viewer"
requires-python = ">=3.10"
keywords = ["interpolation", "bicubic", "spline", "hermite", "numerical-methods", "visualization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bicubic2d = "bicubic2d.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bicubic2d"]

[tool.pytest.ini_options]
addopts = "-ra"
