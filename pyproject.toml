[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cavalier"
version = "0.1.0"
description = "2D polyline geometry primitives: vectors, line and arc segment operations, and a static packed Hilbert R-tree spatial index."
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "polyline", "arc", "bulge", "spatial index", "r-tree", "cad", "cam"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cavalier"]

[tool.pytest.ini_options]
addopts = "-ra"
