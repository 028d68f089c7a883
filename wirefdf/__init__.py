"""Wireframe viewer for .fdf height maps: map reading, projection, rasterising and controls."""

__version__ = "0.1.0"