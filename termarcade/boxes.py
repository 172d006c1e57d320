"""A rectangle outline that is moved round the screen with the arrow keys."""

from __future__ import annotations

import argparse
import curses
from contextlib import suppress
from dataclasses import dataclass, field, replace
from typing import Any

__all__ = ["Border", "Box", "main"]


@dataclass(frozen=True)
class Border:
    """Characters for the sides and corners of a box."""

    ls: str = "|"
    rs: str = "|"
    ts: str = "-"
    bs: str = "-"
    tl: str = "+"
    tr: str = "+"
    bl: str = "+"
    br: str = "+"


@dataclass(frozen=True)
class Box:
    """An outline whose top-left corner is at (starty, startx), spanning width by height."""

    startx: int
    starty: int
    width: int = 10
    height: int = 3
    border: Border = field(default_factory=Border)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("a box must be at least 1 by 1")

    @classmethod
    def centered(cls, lines: int, cols: int, width: int = 10, height: int = 3) -> Box:
        """A box placed in the middle of a ``lines`` by ``cols`` screen."""
        return cls(startx=(cols - width) // 2, starty=(lines - height) // 2, width=width, height=height)

    def moved(self, dx: int, dy: int) -> Box:
        """A copy of the box shifted by ``dx`` columns and ``dy`` rows."""
        return replace(self, startx=self.startx + dx, starty=self.starty + dy)

    def outline(self) -> dict[tuple[int, int], str]:
        """Map each (y, x) of the outline to its border character."""
        x, y, w, h, b = self.startx, self.starty, self.width, self.height, self.border
        cells: dict[tuple[int, int], str] = {}
        for col in range(x + 1, x + w):
            cells[(y, col)] = b.ts
            cells[(y + h, col)] = b.bs
        for row in range(y + 1, y + h):
            cells[(row, x)] = b.ls
            cells[(row, x + w)] = b.rs
        cells[(y, x)] = b.tl
        cells[(y, x + w)] = b.tr
        cells[(y + h, x)] = b.bl
        cells[(y + h, x + w)] = b.br
        return cells

    def draw(self, win: Any) -> None:
        """Draw the outline into ``win``."""
        for (row, col), char in self.outline().items():
            with suppress(curses.error):
                win.addch(row, col, char)
        win.refresh()

    def erase(self, win: Any) -> None:
        """Blank every cell the box covers."""
        for row in range(self.starty, self.starty + self.height + 1):
            for col in range(self.startx, self.startx + self.width + 1):
                with suppress(curses.error):
                    win.addch(row, col, " ")
        win.refresh()


_ARROWS = {
    curses.KEY_LEFT: (-1, 0),
    curses.KEY_RIGHT: (1, 0),
    curses.KEY_UP: (0, -1),
    curses.KEY_DOWN: (0, 1),
}


def _custom(stdscr: Any) -> None:
    with suppress(curses.error):
        curses.start_color()
    curses.cbreak()
    stdscr.keypad(True)
    curses.noecho()
    with suppress(curses.error, ValueError):
        curses.init_pair(1, curses.COLOR_CYAN, curses.COLOR_BLACK)
    try:
        colour = curses.color_pair(1)
    except curses.error:
        colour = 0
    lines, cols = stdscr.getmaxyx()
    box = Box.centered(lines, cols)
    stdscr.attron(colour)
    with suppress(curses.error):
        stdscr.addstr("Press F1 to exit")
    stdscr.refresh()
    stdscr.attroff(colour)
    box.draw(stdscr)
    while (key := stdscr.getch()) != curses.KEY_F1:
        if key in _ARROWS:
            box.erase(stdscr)
            box = box.moved(*_ARROWS[key])
            box.draw(stdscr)


def _create(box: Box) -> Any:
    try:
        win = curses.newwin(box.height, box.width, box.starty, box.startx)
    except curses.error:
        return None
    win.box()
    win.refresh()
    return win


def _destroy(win: Any) -> None:
    if win is None:
        return
    win.border(" ", " ", " ", " ", " ", " ", " ", " ")
    win.refresh()


def _window(stdscr: Any) -> None:
    curses.cbreak()
    stdscr.keypad(True)
    lines, cols = stdscr.getmaxyx()
    box = Box.centered(lines, cols)
    with suppress(curses.error):
        stdscr.addstr("Press F1 to exit")
    stdscr.refresh()
    win = _create(box)
    while (key := stdscr.getch()) != curses.KEY_F1:
        if key in _ARROWS:
            _destroy(win)
            box = box.moved(*_ARROWS[key])
            win = _create(box)


def main(argv: list[str] | None = None) -> int:
    """Move a box round the screen with the arrow keys until F1 is pressed."""
    parser = argparse.ArgumentParser(prog="boxes", description="Move a box with the arrow keys.")
    parser.add_argument(
        "mode",
        nargs="?",
        default="custom",
        choices=("custom", "window"),
        help="draw the outline by hand or as a bordered window (default: custom)",
    )
    args = parser.parse_args(argv)
    curses.wrapper(_custom if args.mode == "custom" else _window)
    return 0