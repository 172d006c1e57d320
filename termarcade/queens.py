"""Every solution of the n-queens puzzle, shown one board at a time."""

from __future__ import annotations

import curses
import sys
from contextlib import suppress
from typing import Any, Iterator, Sequence

from .board import draw_grid

__all__ = ["is_safe", "solutions", "render", "main"]

QUEEN_CHAR = "*"
_TOP, _LEFT, _TILE_W, _TILE_H = 2, 2, 4, 2


def is_safe(positions: Sequence[int]) -> bool:
    """True when the last queen shares no column or diagonal with the earlier ones.

    ``positions[r]`` is the 1-based column of the queen in row ``r``.
    """
    if len(positions) < 2:
        return True
    last_row = len(positions) - 1
    last = positions[last_row]
    return all(
        col != last and abs(col - last) != last_row - row
        for row, col in enumerate(positions[:last_row])
    )


def solutions(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` queens, columns ascending row by row."""
    if n < 1:
        raise ValueError("the number of queens must be positive")

    def place(prefix: list[int]) -> Iterator[tuple[int, ...]]:
        if len(prefix) == n:
            yield tuple(prefix)
            return
        for col in range(1, n + 1):
            prefix.append(col)
            if is_safe(prefix):
                yield from place(prefix)
            prefix.pop()

    yield from place([])


def render(win: Any, positions: Sequence[int], number: int) -> None:
    """Draw solution ``number`` with its queens and the prompt line."""
    n = len(positions)
    with suppress(curses.error):
        win.addstr(0, 0, f"Solution No: {number}")
    draw_grid(win, _TOP, _LEFT, n, n, _TILE_W, _TILE_H)
    for row, col in enumerate(positions):
        with suppress(curses.error):
            win.addch(
                _TOP + row * _TILE_H + _TILE_H // 2,
                _LEFT + (col - 1) * _TILE_W + _TILE_W // 2,
                ord(QUEEN_CHAR),
            )
    win.refresh()
    lines, _ = win.getmaxyx()
    with suppress(curses.error):
        win.addstr(lines - 2, 0, "Press Any Key to See next solution (F1 to Exit)")


def _browse(stdscr: Any, n: int) -> int | None:
    curses.cbreak()
    stdscr.keypad(True)
    count = 0
    for count, positions in enumerate(solutions(n), 1):
        render(stdscr, positions, count)
        if stdscr.getch() == curses.KEY_F1:
            return None
        stdscr.clear()
    return count


def main(argv: list[str] | None = None) -> int:
    """Show every solution for the board order given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: queens <number of queens (chess board order)>")
        return 1
    try:
        n = int(args[0])
        if n < 1:
            raise ValueError
    except ValueError:
        print("the number of queens must be a positive integer", file=sys.stderr)
        return 1
    total = curses.wrapper(_browse, n)
    if total is not None:
        print(f"Total Number of Solutions : {total}")
    return 0