"""Load an FDF height map from lines of text or from a file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, List, Union

from fdf.colors import DEFAULT_COLOR, parse_cell
from fdf.lines import iter_lines
from fdf.textutil import split


class MapError(Exception):
    """Raised when a map cannot be read or holds no data."""


@dataclass
class HeightMap:
    """A grid of heights with a colour for every cell."""

    width: int
    height: int
    z_matrix: List[List[int]]
    colors: List[List[int]]

    def __post_init__(self) -> None:
        if len(self.z_matrix) != self.height or len(self.colors) != self.height:
            raise ValueError("row count does not match the map height")
        for z_row, color_row in zip(self.z_matrix, self.colors):
            if len(z_row) != self.width or len(color_row) != self.width:
                raise ValueError("row length does not match the map width")


def count_width(line: str) -> int:
    """Number of space-separated values on a line."""
    return len(split(line, " "))


def parse_lines(lines: Iterable[str]) -> HeightMap:
    """Build a map from its lines; the first line sets the width.

    Extra values on a row are ignored; missing ones get height 0 and the
    default colour.
    """
    rows = list(lines)
    width = count_width(rows[0]) if rows else 0
    if width == 0:
        raise MapError("empty or invalid .fdf file")
    z_matrix: List[List[int]] = []
    colors: List[List[int]] = []
    for line in rows:
        cells = [parse_cell(value) for value in split(line, " ")[:width]]
        cells.extend([(0, DEFAULT_COLOR)] * (width - len(cells)))
        z_matrix.append([z for z, _ in cells])
        colors.append([color for _, color in cells])
    return HeightMap(width, len(rows), z_matrix, colors)


def parse_map(path: Union[str, os.PathLike]) -> HeightMap:
    """Read and parse the map file at *path*."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            rows = list(iter_lines(stream))
    except OSError as exc:
        raise MapError(f"cannot open {os.fspath(path)}: {exc.strerror or exc}") from exc
    return parse_lines(rows)