"""Hexagonal and geodesic tile grids on the surface of a sphere."""

__version__ = "0.1.0"