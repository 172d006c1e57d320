"""Towers of Hanoi, solved move by move on the terminal."""

from __future__ import annotations

import argparse
import curses
import re
from contextlib import suppress
from typing import Any, Iterator

from .board import center_x

__all__ = ["Pegs", "solve_moves", "render", "main"]

POSX = 10
POSY = 5
DISC_CHAR = "*"
PEG_CHAR = "#"
TIME_OUT = 300
WELCOME = "Enter the number of discs you want to be solved: "


class Pegs:
    """Three pegs holding ``n`` discs of widths 3, 5, 7, ... that start on peg 0."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("the number of discs must be positive")
        self.n = n
        # Each stack lists disc widths from the bottom to the top.
        self._stacks: list[list[int]] = [
            [3 + 2 * i for i in reversed(range(n))],
            [],
            [],
        ]
        half = (3 + 2 * (n - 1)) // 2
        first = POSX + 1 + half
        self.bottomx: tuple[int, int, int] = (
            first,
            first + 2 + 2 * half,
            first + 2 * (2 + 2 * half),
        )
        self.bottomy = POSY + 2 + n

    def __repr__(self) -> str:
        return f"Pegs(n={self.n}, rows={self.rows()!r})"

    def move(self, src: int, dst: int) -> int:
        """Move the top disc of peg ``src`` onto peg ``dst`` and return its width."""
        for peg in (src, dst):
            if peg not in range(3):
                raise ValueError(f"no peg number {peg}")
        source, target = self._stacks[src], self._stacks[dst]
        if not source:
            raise ValueError(f"peg {src} holds no disc")
        disc = source[-1]
        if target and target[-1] < disc:
            raise ValueError(f"a disc of width {disc} cannot rest on one of width {target[-1]}")
        source.pop()
        target.append(disc)
        return disc

    def rows(self) -> tuple[tuple[int, ...], ...]:
        """For each peg, the disc widths from the top row down, 0 where the row is empty."""
        return tuple(
            (0,) * (self.n - len(stack)) + tuple(reversed(stack)) for stack in self._stacks
        )


def solve_moves(n: int, src: int = 0, aux: int = 1, dst: int = 2) -> Iterator[tuple[int, int]]:
    """Yield the (source, destination) moves that carry ``n`` discs from ``src`` to ``dst``."""
    if n < 0:
        raise ValueError("the number of discs cannot be negative")
    if n == 0:
        return
    yield from solve_moves(n - 1, src, dst, aux)
    yield src, dst
    yield from solve_moves(n - 1, aux, src, dst)


def _put(win: Any, y: int, x: int, text: str) -> None:
    with suppress(curses.error):
        win.addstr(y, x, text)


def render(win: Any, pegs: Pegs) -> None:
    """Clear ``win`` and draw the pegs with their discs."""
    n = pegs.n
    win.clear()
    win.attron(curses.A_REVERSE)
    _put(win, 24, 0, "Press F1 to Exit")
    win.attroff(curses.A_REVERSE)
    for x in pegs.bottomx:
        _put(win, pegs.bottomy - n - 1, x, PEG_CHAR)
    top = pegs.bottomy - n
    for x, column in zip(pegs.bottomx, pegs.rows()):
        for offset, size in enumerate(column):
            if size:
                _put(win, top + offset, x - size // 2, DISC_CHAR * size)
            else:
                _put(win, top + offset, x, PEG_CHAR)
    win.refresh()


def _ask_discs(stdscr: Any) -> int | None:
    lines, cols = stdscr.getmaxyx()
    _put(stdscr, lines // 2, center_x(0, cols, WELCOME), WELCOME)
    stdscr.refresh()
    curses.echo()
    raw = stdscr.getstr()
    curses.noecho()
    match = re.match(r"\s*([+-]?\d+)", raw.decode(errors="replace"))
    return int(match.group(1)) if match else None


def _play(stdscr: Any, discs: int | None) -> bool:
    curses.cbreak()
    stdscr.keypad(True)
    with suppress(curses.error):
        curses.curs_set(0)
    if discs is None:
        discs = _ask_discs(stdscr)
    if discs is None or discs < 1:
        return False
    stdscr.timeout(TIME_OUT)
    curses.noecho()
    pegs = Pegs(discs)
    render(stdscr, pegs)
    for src, dst in solve_moves(discs):
        pegs.move(src, dst)
        render(stdscr, pegs)
        if stdscr.getch() == curses.KEY_F1:
            break
    return True


def main(argv: list[str] | None = None) -> int:
    """Solve the towers of Hanoi on screen, asking for the number of discs if not given."""
    parser = argparse.ArgumentParser(prog="hanoi", description="Towers of Hanoi in the terminal.")
    parser.add_argument("discs", nargs="?", type=int, help="number of discs")
    args = parser.parse_args(argv)
    if args.discs is not None and args.discs < 1:
        parser.error("the number of discs must be positive")
    if not curses.wrapper(_play, args.discs):
        print("the number of discs must be a positive integer")
        return 1
    return 0