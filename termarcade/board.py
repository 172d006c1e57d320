"""Grids of line-drawing characters and text centring for the puzzle screens."""

from __future__ import annotations

import curses
from contextlib import suppress
from typing import Any

__all__ = ["grid_cells", "draw_grid", "center_x"]

# Glyph name -> (curses alternate-character constant, plain fallback).
_GLYPHS = {
    "HLINE": ("ACS_HLINE", "-"),
    "VLINE": ("ACS_VLINE", "|"),
    "ULCORNER": ("ACS_ULCORNER", "+"),
    "URCORNER": ("ACS_URCORNER", "+"),
    "LLCORNER": ("ACS_LLCORNER", "+"),
    "LRCORNER": ("ACS_LRCORNER", "+"),
    "LTEE": ("ACS_LTEE", "+"),
    "RTEE": ("ACS_RTEE", "+"),
    "TTEE": ("ACS_TTEE", "+"),
    "BTEE": ("ACS_BTEE", "+"),
    "PLUS": ("ACS_PLUS", "+"),
}


def _glyph(name: str) -> int:
    """Return the curses character for a glyph name, falling back to ASCII."""
    constant, fallback = _GLYPHS[name]
    value = getattr(curses, constant, None)
    return value if value is not None else ord(fallback)


def grid_cells(
    starty: int,
    startx: int,
    lines: int,
    cols: int,
    tile_width: int,
    tile_height: int,
) -> dict[tuple[int, int], str]:
    """Map every (y, x) of a ``lines`` by ``cols`` grid of tiles to its glyph name."""
    if tile_width <= 0 or tile_height <= 0:
        raise ValueError("tile width and height must be positive")
    endy = starty + lines * tile_height
    endx = startx + cols * tile_width
    cells: dict[tuple[int, int], str] = {}

    for y in range(starty, endy + 1, tile_height):
        for x in range(startx, endx + 1):
            cells[(y, x)] = "HLINE"
    for x in range(startx, endx + 1, tile_width):
        for y in range(starty, endy + 1):
            cells[(y, x)] = "VLINE"

    cells[(starty, startx)] = "ULCORNER"
    cells[(endy, startx)] = "LLCORNER"
    cells[(starty, endx)] = "URCORNER"
    cells[(endy, endx)] = "LRCORNER"

    inner_x = range(startx + tile_width, endx - tile_width + 1, tile_width)
    for y in range(starty + tile_height, endy - tile_height + 1, tile_height):
        cells[(y, startx)] = "LTEE"
        cells[(y, endx)] = "RTEE"
        for x in inner_x:
            cells[(y, x)] = "PLUS"
    for x in inner_x:
        cells[(starty, x)] = "TTEE"
        cells[(endy, x)] = "BTEE"
    return cells


def draw_grid(
    win: Any,
    starty: int,
    startx: int,
    lines: int,
    cols: int,
    tile_width: int,
    tile_height: int,
) -> None:
    """Draw a grid of tiles into ``win`` and refresh it."""
    for (y, x), name in grid_cells(starty, startx, lines, cols, tile_width, tile_height).items():
        with suppress(curses.error):
            win.addch(y, x, _glyph(name))
    win.refresh()


def center_x(startx: int, width: int, text: str) -> int:
    """Column at which ``text`` starts when centred in ``width`` columns (0 means 80)."""
    if width == 0:
        width = 80
    return startx + int((width - len(text)) / 2)