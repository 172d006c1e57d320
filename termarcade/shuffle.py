"""The sliding tile puzzle played with the arrow keys."""

from __future__ import annotations

import curses
import random
import sys
from contextlib import suppress
from enum import Enum
from typing import Any, Sequence

from .board import draw_grid

__all__ = ["Direction", "Puzzle", "main"]

WIDTH = 6
HEIGHT = 4
BLANK = 0


class Direction(Enum):
    """Directions in which the blank square can travel."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)


class Puzzle:
    """An ``n`` by ``n`` board of numbered tiles and one blank square.

    A fresh puzzle has the blank in the top-left corner and the other tiles shuffled.
    """

    def __init__(self, n: int, rng: random.Random | None = None) -> None:
        if n < 1:
            raise ValueError("the board order must be positive")
        rng = rng if rng is not None else random.Random()
        tiles = list(range(1, n * n))
        rng.shuffle(tiles)
        order = [BLANK, *tiles]
        self._load(n, [order[x * n:(x + 1) * n] for x in range(n)])

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Puzzle:
        """Build a puzzle from its rows, top to bottom, with 0 for the blank."""
        n = len(rows)
        if n < 1 or any(len(row) != n for row in rows):
            raise ValueError("the board must be square and not empty")
        if sorted(value for row in rows for value in row) != list(range(n * n)):
            raise ValueError(f"the board must hold each of 0..{n * n - 1} once")
        puzzle = cls.__new__(cls)
        puzzle._load(n, [list(column) for column in zip(*rows)])
        return puzzle

    def _load(self, n: int, grid: list[list[int]]) -> None:
        self.n = n
        self._grid = grid  # indexed [x][y]
        self.blank = next(
            (x, y) for x, column in enumerate(grid) for y, value in enumerate(column) if value == BLANK
        )

    def __repr__(self) -> str:
        return f"Puzzle.from_rows({self.rows()!r})"

    def tile(self, x: int, y: int) -> int:
        """The tile at column ``x``, row ``y`` (0 for the blank)."""
        return self._grid[x][y]

    def rows(self) -> list[list[int]]:
        """The board as rows, top to bottom."""
        return [list(row) for row in zip(*self._grid)]

    def move_blank(self, direction: Direction) -> bool:
        """Slide the blank one square; return False when it is already at that edge."""
        dx, dy = direction.value
        bx, by = self.blank
        nx, ny = bx + dx, by + dy
        if not (0 <= nx < self.n and 0 <= ny < self.n):
            return False
        self._grid[bx][by] = self._grid[nx][ny]
        self._grid[nx][ny] = BLANK
        self.blank = (nx, ny)
        return True

    def solved(self) -> bool:
        """True when the tiles read 1, 2, ... row by row with the blank last."""
        flat = [value for row in self.rows() for value in row]
        return flat == [*range(1, self.n * self.n), BLANK]

    def render(self, win: Any) -> None:
        """Clear ``win`` and draw the board centred in it."""
        win.clear()
        with suppress(curses.error):
            win.addstr(24, 0, "Press F1 to Exit")
        lines, cols = win.getmaxyx()
        starty = (lines - self.n * HEIGHT) // 2
        startx = (cols - self.n * WIDTH) // 2
        draw_grid(win, starty, startx, self.n, self.n, WIDTH, HEIGHT)
        for y, row in enumerate(self.rows()):
            for x, value in enumerate(row):
                if value != BLANK:
                    with suppress(curses.error):
                        win.addstr(
                            starty + y * HEIGHT + HEIGHT // 2,
                            startx + x * WIDTH + WIDTH // 2,
                            f"{value:<2d}",
                        )
        win.refresh()


def _play(stdscr: Any, puzzle: Puzzle) -> bool:
    keys = {
        curses.KEY_LEFT: Direction.RIGHT,
        curses.KEY_RIGHT: Direction.LEFT,
        curses.KEY_UP: Direction.DOWN,
        curses.KEY_DOWN: Direction.UP,
    }
    stdscr.keypad(True)
    curses.cbreak()
    puzzle.render(stdscr)
    while (key := stdscr.getch()) != curses.KEY_F1:
        if key in keys:
            puzzle.move_blank(keys[key])
        puzzle.render(stdscr)
        if puzzle.solved():
            with suppress(curses.error):
                stdscr.addstr(24, 0, "You Win !!!\n")
            stdscr.refresh()
            return True
    return False


def main(argv: list[str] | None = None) -> int:
    """Play the sliding puzzle of the order given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: shuffle <shuffle board order>")
        return 1
    try:
        n = int(args[0])
        puzzle = Puzzle(n)
    except ValueError:
        print("the board order must be a positive integer", file=sys.stderr)
        return 1
    curses.wrapper(_play, puzzle)
    return 0