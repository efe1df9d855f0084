"""Draw an FDF height map as an isometric wireframe."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol, Tuple

from fdf.geometry import Point, line_points, project_iso
from fdf.parser import HeightMap

WIN_WIDTH = 1000
WIN_HEIGHT = 800
MIN_SCALE = 5
ALPHA_MASK = 0xFF000000


class Canvas(Protocol):
    def put_pixel(self, x: int, y: int, color: int) -> None: ...


@dataclass(frozen=True)
class RenderParams:
    """Scale, height factor and offsets used to place map points on screen."""

    scale: int
    z_factor: float
    mid_x: int
    mid_y: int
    x_offset: int
    y_offset: int


@dataclass
class PixelCanvas:
    """Records drawn pixels; with a size set, pixels outside it are dropped."""

    width: Optional[int] = None
    height: Optional[int] = None
    pixels: Dict[Tuple[int, int], int] = field(default_factory=dict)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        if self.width is not None and not 0 <= x < self.width:
            return
        if self.height is not None and not 0 <= y < self.height:
            return
        self.pixels[(x, y)] = color


def setup_render_params(map_width: int, map_height: int) -> RenderParams:
    """Fit a map of the given size into the drawing area."""
    if map_width <= 0 or map_height <= 0:
        raise ValueError(f"map size must be positive: {map_width}x{map_height}")
    scale_x = int(WIN_WIDTH / (map_width + 1.5))
    scale_y = int(WIN_HEIGHT / (map_height + 1.5))
    scale = max(min(scale_x, scale_y), MIN_SCALE)
    z_factor = max(scale / 2, 1.0)
    return RenderParams(
        scale=scale,
        z_factor=z_factor,
        mid_x=int(map_width * scale / 1.5),
        mid_y=int(map_height * scale / 1.5),
        x_offset=int(WIN_WIDTH / 1.5),
        y_offset=int(WIN_HEIGHT / 1.5),
    )


def project_point(x: int, y: int, z: int, params: RenderParams) -> Point:
    """Screen position of grid cell (x, y) at height z."""
    px, py = project_iso(
        x * params.scale - params.mid_x,
        y * params.scale - params.mid_y,
        int(z * params.z_factor),
    )
    return Point(px + params.x_offset, py + params.y_offset)


def draw_line(canvas: Canvas, p0: Point, p1: Point, color: int) -> None:
    """Draw from *p0* up to *p1*; colours with zero alpha are not drawn."""
    if color & ALPHA_MASK == 0:
        return
    for point in line_points(p0, p1):
        canvas.put_pixel(point.x, point.y, color)


def render_map(heightmap: HeightMap, canvas: Canvas) -> None:
    """Draw every cell's edges to its right and lower neighbours."""
    params = setup_render_params(heightmap.width, heightmap.height)
    z = heightmap.z_matrix
    for y in range(heightmap.height):
        for x in range(heightmap.width):
            p0 = project_point(x, y, z[y][x], params)
            color = heightmap.colors[y][x]
            if x + 1 < heightmap.width:
                draw_line(canvas, p0, project_point(x + 1, y, z[y][x + 1], params), color)
            if y + 1 < heightmap.height:
                draw_line(canvas, p0, project_point(x, y + 1, z[y + 1][x], params), color)