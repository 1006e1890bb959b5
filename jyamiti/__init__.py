"""Plane computational geometry: BSP trees, polygon triangulation and Voronoi diagrams."""

__version__ = "0.1.0"
__all__ = ["geometry", "bsp", "voronoi", "triangulation", "samples", "demo"]