[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sphericalhex"
version = "0.1.0"
description = "Hexagonal and geodesic tile grids laid out on the surface of a sphere"
requires-python = ">=3.10"
dependencies = []
keywords = ["hexagon", "grid", "sphere", "icosahedron", "geodesic", "tiles", "games"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sphericalhex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
