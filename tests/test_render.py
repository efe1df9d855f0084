import pytest

from fdf.geometry import Point, line_points
from fdf.parser import HeightMap
from fdf.render import (
    PixelCanvas,
    draw_line,
    project_point,
    render_map,
    setup_render_params,
)


def test_large_map_uses_minimum_scale():
    params = setup_render_params(1000, 1000)
    assert params.scale == 5
    assert params.z_factor == 2.5


def test_scale_shrinks_as_map_grows():
    assert setup_render_params(4, 4).scale >= setup_render_params(8, 8).scale
    assert setup_render_params(8, 8).scale >= setup_render_params(100, 100).scale


def test_offsets_do_not_depend_on_map():
    a = setup_render_params(3, 3)
    b = setup_render_params(50, 7)
    assert (a.x_offset, a.y_offset) == (b.x_offset, b.y_offset)


def test_invalid_map_size():
    with pytest.raises(ValueError):
        setup_render_params(0, 3)


def test_height_moves_point_up_only():
    params = setup_render_params(5, 5)
    flat = project_point(2, 3, 0, params)
    high = project_point(2, 3, 4, params)
    assert high.x == flat.x
    assert flat.y - high.y == int(4 * params.z_factor)


def test_draw_line_opaque():
    canvas = PixelCanvas()
    p0, p1 = Point(0, 0), Point(5, 3)
    draw_line(canvas, p0, p1, 0xFFFFFFFF)
    assert set(canvas.pixels) == set(line_points(p0, p1))
    assert (0, 0) in canvas.pixels
    assert (5, 3) not in canvas.pixels
    assert set(canvas.pixels.values()) == {0xFFFFFFFF}


def test_draw_line_transparent_draws_nothing():
    canvas = PixelCanvas()
    draw_line(canvas, Point(0, 0), Point(10, 10), 0x00FF0000)
    assert canvas.pixels == {}


def test_draw_line_zero_length():
    canvas = PixelCanvas()
    draw_line(canvas, Point(2, 2), Point(2, 2), 0xFFFFFFFF)
    assert canvas.pixels == {}


def test_canvas_clips_to_size():
    canvas = PixelCanvas(width=3, height=3)
    draw_line(canvas, Point(-2, 1), Point(6, 1), 0xFF00FF00)
    assert canvas.pixels
    assert all(0 <= x < 3 and 0 <= y < 3 for x, y in canvas.pixels)


def test_render_single_cell_draws_nothing():
    canvas = PixelCanvas()
    render_map(HeightMap(1, 1, [[5]], [[0xFFFFFFFF]]), canvas)
    assert canvas.pixels == {}


def test_render_uses_source_cell_color():
    heightmap = HeightMap(2, 1, [[0, 3]], [[0xFFFF0000, 0xFF00FF00]])
    canvas = PixelCanvas()
    render_map(heightmap, canvas)
    params = setup_render_params(2, 1)
    p0 = project_point(0, 0, 0, params)
    p1 = project_point(1, 0, 3, params)
    assert set(canvas.pixels) == set(line_points(p0, p1))
    assert set(canvas.pixels.values()) == {0xFFFF0000}


def test_render_transparent_map_is_empty():
    heightmap = HeightMap(2, 2, [[0, 0], [0, 0]], [[0x00FFFFFF] * 2] * 2)
    canvas = PixelCanvas()
    render_map(heightmap, canvas)
    assert canvas.pixels == {}


def test_render_grid_covers_all_edges():
    heightmap = HeightMap(2, 2, [[0, 1], [2, 3]], [[0xFFFFFFFF] * 2] * 2)
    canvas = PixelCanvas()
    render_map(heightmap, canvas)
    params = setup_render_params(2, 2)
    pts = {(x, y): project_point(x, y, heightmap.z_matrix[y][x], params)
           for y in range(2) for x in range(2)}
    expected = set()
    for a, b in [((0, 0), (1, 0)), ((0, 0), (0, 1)), ((1, 0), (1, 1)), ((0, 1), (1, 1))]:
        expected |= set(line_points(pts[a], pts[b]))
    assert set(canvas.pixels) == expected