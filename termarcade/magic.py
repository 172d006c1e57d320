"""Odd-order magic squares drawn on a grid."""

from __future__ import annotations

import curses
import sys
from contextlib import suppress
from typing import Any, Sequence

from .board import draw_grid

__all__ = ["magic_square", "render", "main"]

WIDTH = 6
HEIGHT = 4


def magic_square(n: int) -> list[list[int]]:
    """Build the magic square of odd order ``n`` by the staircase method."""
    if n < 1 or n % 2 == 0:
        raise ValueError("the order must be a positive odd number")
    square = [[-1] * n for _ in range(n)]
    row, col = 0, n // 2
    k = 1
    square[row][col] = k
    while k != n * n:
        if row == 0 and col != n - 1:
            row, col = n - 1, col + 1
        elif row != 0 and col != n - 1:
            if square[row - 1][col + 1] == -1:
                row, col = row - 1, col + 1
            else:
                row += 1
        elif row != 0:
            row, col = row - 1, 0
        else:
            row += 1
        k += 1
        square[row][col] = k
    return square


def render(win: Any, square: Sequence[Sequence[int]]) -> None:
    """Draw ``square`` centred in ``win`` inside a grid of tiles."""
    n = len(square)
    lines, cols = win.getmaxyx()
    starty = (lines - n * HEIGHT) // 2
    startx = (cols - n * WIDTH) // 2
    draw_grid(win, starty, startx, n, n, WIDTH, HEIGHT)
    for i, row in enumerate(square):
        for j, value in enumerate(row):
            with suppress(curses.error):
                win.addstr(starty + j * HEIGHT + HEIGHT // 2, startx + i * WIDTH + WIDTH // 2, str(value))


def _show(stdscr: Any, square: list[list[int]]) -> None:
    with suppress(curses.error):
        curses.curs_set(0)
    curses.noecho()
    render(stdscr, square)
    stdscr.getch()


def main(argv: list[str] | None = None) -> int:
    """Show the magic square of the order given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: magic <magic sqaure order>")
        return 0
    try:
        n = int(args[0])
    except ValueError:
        n = 0
    if n % 2 == 0:
        print("Sorry !!! I don't know how to create magic square of even order")
        print("The order should be an odd number")
        return 0
    try:
        square = magic_square(n)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    curses.wrapper(_show, square)
    return 0