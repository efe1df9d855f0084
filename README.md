# fdf

A wireframe viewer for height maps. It reads an `.fdf` file, which is a grid of
space-separated altitudes, and draws it as an isometric wireframe in a pygame
window.

## Installing

```
pip install .
```

## Running

```
fdf path/to/map.fdf
```

The map is drawn once, in a 1524x768 window titled `FDF`. Releasing the Escape
key, or closing the window, quits.

If you give no map, or more than one, the command prints a usage line on
standard output and exits with status 1. A map that cannot be opened, or whose
first line holds no values, is reported on standard error and the command
exits with status 1.

## The map format

Each line of the file is one row of the grid. Each cell is an integer altitude,
optionally followed by a comma and a hexadecimal colour:

```
0 0 0 0
0 10,0xFF0000 10 0
0 10 10,0x00FF00 0
0 0 0 0
```

- The first line sets the width of the grid. Extra cells on later rows are
  ignored; missing cells get altitude 0 and the default colour.
- A cell with no colour, or with a colour that is not valid hexadecimal, is
  drawn in white.
- A colour of six hex digits or fewer is made opaque. A colour written with
  eight digits keeps the alpha byte it was given; an alpha of zero is not
  drawn.
- An edge is drawn from each point to its right and lower neighbour, in the
  colour of the point it starts from.

## What it does not do

The view is fixed: there is no zoom, rotation, panning or change of height
scale, and the drawing is fitted to a 1000x800 area of the window rather than
to the whole window. The window is not redrawn from the map after it is first
shown.

## Using it from Python

The parts of the viewer can be used on their own:

- `fdf.parser.parse_map(path)` reads a file into a `HeightMap` (with `width`,
  `height`, `z_matrix` and `colors`); `fdf.parser.parse_lines(lines)` does the
  same for lines you already have. An empty map or an unreadable file raises
  `MapError`. `fdf.parser.count_width(line)` counts the values on a line.
- `fdf.colors.parse_cell(text)` returns the altitude and colour of one cell;
  `parse_z`, `parse_color` and `hex_to_int` do the parts separately.
- `fdf.render.render_map(heightmap, canvas)` draws a map onto any object with a
  `put_pixel(x, y, color)` method, such as `fdf.render.PixelCanvas`, which
  records pixels in a dict. `setup_render_params`, `project_point` and
  `draw_line` are the steps it is built from.
- `fdf.geometry.project_iso(x, y, z)` gives the isometric projection and
  `fdf.geometry.line_points(p0, p1)` yields the pixels of a Bresenham line.
- `fdf.image.Image` is an in-memory 32-bit image with `put_pixel` and
  `get_pixel`; `fdf.image.good_color` converts a colour for a shallower visual.
- `fdf.xpm.xpm_from_file(path)` and `fdf.xpm.xpm_from_data(strings)` load an
  XPM image into an `Image`; malformed data raises `XpmError`.
  `fdf.colornames.lookup_color(name)` looks up an X11 colour name.
- `fdf.display.Display` keeps `Window` objects, each with a framebuffer and
  hooks for key, mouse, expose and other events, and runs an event loop that
  delivers queued `Event`s to them.
- `fdf.lines.LineReader` and `fdf.lines.iter_lines` read a stream line by line
  through a fixed-size buffer.
- `fdf.chars`, `fdf.textutil`, `fdf.buffers` and `fdf.output` hold small
  character, string, byte-buffer and output helpers used by the rest.

## Running the tests

```
pip install .[test]
pytest
```