"""Conway's game of life on a wrapping terminal-sized board."""

from __future__ import annotations

import argparse
import curses
from collections import Counter
from contextlib import suppress
from typing import Any

__all__ = ["Life", "seed_inverted_u", "main"]

CELL_CHAR = "#"
TIME_OUT = 300

_OFFSETS = tuple((dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0))


class Life:
    """A ``width`` by ``height`` board whose edges wrap round."""

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("board must be at least 1 by 1")
        self.width = width
        self.height = height
        self._alive: set[tuple[int, int]] = set()

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"cell ({x}, {y}) is outside a {self.width}x{self.height} board")

    def set_alive(self, x: int, y: int) -> None:
        """Bring the cell at column ``x``, row ``y`` to life."""
        self._check(x, y)
        self._alive.add((x, y))

    def is_alive(self, x: int, y: int) -> bool:
        """True when the cell at (x, y) is alive."""
        self._check(x, y)
        return (x, y) in self._alive

    def step(self) -> None:
        """Advance the board by one generation."""
        counts = Counter(
            ((x + dx) % self.width, (y + dy) % self.height)
            for x, y in self._alive
            for dx, dy in _OFFSETS
        )
        self._alive = {
            cell
            for cell, n in counts.items()
            if n == 3 or (n == 2 and cell in self._alive)
        }

    def live_cells(self) -> list[tuple[int, int]]:
        """The living cells as sorted (x, y) pairs."""
        return sorted(self._alive)

    def render(self, win: Any) -> None:
        """Clear ``win`` and mark every living cell."""
        win.clear()
        for x, y in self._alive:
            with suppress(curses.error):
                win.addch(y, x, ord(CELL_CHAR))
        win.refresh()


def seed_inverted_u(life: Life) -> None:
    """Place the inverted U pattern the demo starts from."""
    for x, y in ((39, 15), (40, 15), (41, 15), (39, 16), (39, 17), (41, 16), (41, 17)):
        life.set_alive(x, y)


def _play(stdscr: Any) -> None:
    curses.cbreak()
    stdscr.timeout(TIME_OUT)
    stdscr.keypad(True)
    lines, cols = stdscr.getmaxyx()
    life = Life(cols, lines)
    seed_inverted_u(life)
    life.render(stdscr)
    while stdscr.getch() != curses.KEY_F1:
        life.step()
        life.render(stdscr)


def main(argv: list[str] | None = None) -> int:
    """Run the game of life until F1 is pressed."""
    parser = argparse.ArgumentParser(prog="life", description="Game of life in the terminal.")
    parser.parse_args(argv)
    curses.wrapper(_play)
    return 0