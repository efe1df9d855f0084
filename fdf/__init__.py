"""Isometric wireframe viewer for .fdf height maps, with map parsing, rendering, XPM and event-loop helpers."""

__version__ = "0.1.0"