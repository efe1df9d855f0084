"""Isometric projection and line rasterisation."""

from __future__ import annotations

import math
from typing import Iterator, NamedTuple, Tuple

ISO_ANGLE = 0.523599


class Point(NamedTuple):
    """A pixel position."""

    x: int
    y: int


def project_iso(x: int, y: int, z: int) -> Tuple[int, int]:
    """Project a grid position and height to screen space, truncating to ints."""
    screen_x = int((x - y) * math.cos(ISO_ANGLE))
    screen_y = int((x + y) * math.sin(ISO_ANGLE) - z)
    return screen_x, screen_y


def line_points(p0: Point, p1: Point) -> Iterator[Point]:
    """Yield the pixels of a Bresenham line from *p0* up to, not including, *p1*."""
    dx = abs(p1.x - p0.x)
    dy = abs(p1.y - p0.y)
    sx = 1 if p0.x < p1.x else -1
    sy = 1 if p0.y < p1.y else -1
    err = dx - dy
    x, y = p0.x, p0.y
    while x != p1.x or y != p1.y:
        yield Point(x, y)
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy