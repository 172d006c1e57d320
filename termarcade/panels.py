"""Stacked, labelled windows that can be browsed, hidden, moved and resized."""

from __future__ import annotations

import argparse
import curses
import curses.panel
from contextlib import suppress
from dataclasses import dataclass, replace
from typing import Any, Iterable

from .board import center_x

__all__ = ["Frame", "PanelDeck", "initial_frames", "main"]

NLINES = 10
NCOLS = 40
TAB = 9
ENTER = 10


@dataclass(frozen=True)
class Frame:
    """Position, size and title of one window."""

    x: int
    y: int
    w: int
    h: int
    label: str = ""
    label_color: int = 0


def initial_frames(count: int) -> list[Frame]:
    """The starting windows: each one 3 rows lower and 7 columns further right."""
    if count < 0:
        raise ValueError("the number of windows cannot be negative")
    return [
        Frame(
            x=10 + 7 * i,
            y=2 + 3 * i,
            w=NCOLS,
            h=NLINES,
            label=f"Window Number {i + 1}",
            label_color=i + 1,
        )
        for i in range(count)
    ]


class PanelDeck:
    """A stack of frames with a top frame, hidden frames and pending edits."""

    def __init__(self, frames: Iterable[Frame]) -> None:
        self._frames = list(frames)
        if not self._frames:
            raise ValueError("a deck needs at least one frame")
        self.top = len(self._frames) - 1
        self._hidden: set[int] = set()
        self.moving = False
        self.resizing = False
        self.pending = self._frames[self.top]

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def frames(self) -> tuple[Frame, ...]:
        return tuple(self._frames)

    def is_hidden(self, index: int) -> bool:
        """True when the frame at ``index`` is hidden."""
        self._check(index)
        return index in self._hidden

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._frames):
            raise IndexError(f"no frame number {index}")

    def next(self) -> int:
        """Raise the following frame to the top and return its index."""
        self.top = (self.top + 1) % len(self._frames)
        self.pending = self._frames[self.top]
        return self.top

    def toggle(self, index: int) -> bool:
        """Hide a shown frame or show a hidden one; return whether it is now hidden."""
        self._check(index)
        if index in self._hidden:
            self._hidden.discard(index)
            return False
        self._hidden.add(index)
        return True

    def begin_move(self) -> None:
        """Let the arrow keys move the top frame."""
        self.moving = True

    def begin_resize(self) -> None:
        """Let the arrow keys drag the top-left corner of the top frame."""
        self.resizing = True

    def nudge(self, dx: int, dy: int) -> Frame:
        """Apply one arrow-key step to the pending geometry and return it."""
        p = self.pending
        x, y, w, h = p.x, p.y, p.w, p.h
        if self.resizing:
            x, w = x + dx, w - dx
            y, h = y + dy, h - dy
        if self.moving:
            x, y = x + dx, y + dy
        self.pending = replace(p, x=x, y=y, w=w, h=h)
        return self.pending

    def commit(self) -> Frame:
        """Apply the pending move or resize to the top frame and leave both modes."""
        current = self._frames[self.top]
        updated = current
        if self.resizing:
            if self.pending.w < 1 or self.pending.h < 1:
                raise ValueError("a window must be at least 1 by 1")
            updated = replace(
                updated, x=self.pending.x, y=self.pending.y, w=self.pending.w, h=self.pending.h
            )
        if self.moving:
            updated = replace(updated, x=self.pending.x, y=self.pending.y)
        self._frames[self.top] = updated
        self.moving = False
        self.resizing = False
        return updated


def _color(pair: int) -> int:
    try:
        return curses.color_pair(pair)
    except curses.error:
        return 0


def _decorate(win: Any, frame: Frame) -> None:
    _, width = win.getmaxyx()
    win.box()
    with suppress(curses.error):
        win.addch(2, 0, curses.ACS_LTEE)
        win.hline(2, 1, curses.ACS_HLINE, width - 2)
        win.addch(2, width - 1, curses.ACS_RTEE)
    attr = _color(frame.label_color)
    win.attron(attr)
    with suppress(curses.error):
        win.addstr(1, center_x(0, width, frame.label), frame.label)
    win.attroff(attr)


def _make_window(frame: Frame, labelled: bool) -> Any:
    win = curses.newwin(frame.h, frame.w, frame.y, frame.x)
    if labelled:
        _decorate(win, frame)
    else:
        win.box()
    return win


_HELP = {
    "browse": ["Use tab to browse through the windows (F1 to Exit)"],
    "hide": [
        "Show or Hide a window with 'a'(first window)  'b'(Second Window)  'c'(Third Window)",
        "F1 to Exit",
    ],
    "resize": [
        "Use 'm' for moving, 'r' for resizing",
        "Use tab to browse through the windows (F1 to Exit)",
    ],
}


def _status(stdscr: Any, row: int, text: str) -> None:
    attr = _color(4)
    stdscr.attron(attr)
    with suppress(curses.error):
        stdscr.addstr(row, 0, text)
    stdscr.attroff(attr)


def _help(stdscr: Any, mode: str) -> None:
    lines, _ = stdscr.getmaxyx()
    messages = _HELP[mode]
    for offset, text in enumerate(messages):
        _status(stdscr, lines - 1 - len(messages) + offset, text)


def _run(stdscr: Any, mode: str) -> None:
    curses.cbreak()
    curses.noecho()
    stdscr.keypad(True)
    with suppress(curses.error):
        curses.start_color()
    for pair, colour in enumerate(
        (curses.COLOR_RED, curses.COLOR_GREEN, curses.COLOR_BLUE, curses.COLOR_CYAN), 1
    ):
        with suppress(curses.error, ValueError):
            curses.init_pair(pair, colour, curses.COLOR_BLACK)

    if mode == "simple":
        frames = [Frame(x=4 + 5 * i, y=2 + i, w=NCOLS, h=NLINES) for i in range(3)]
    else:
        frames = initial_frames(3)
    windows = [_make_window(frame, mode != "simple") for frame in frames]
    panels = [curses.panel.new_panel(win) for win in windows]
    curses.panel.update_panels()

    if mode == "simple":
        curses.doupdate()
        stdscr.getch()
        return

    _help(stdscr, mode)
    stdscr.noutrefresh()
    curses.panel.update_panels()
    curses.doupdate()
    deck = PanelDeck(frames)
    arrows = {
        curses.KEY_LEFT: (-1, 0),
        curses.KEY_RIGHT: (1, 0),
        curses.KEY_UP: (0, -1),
        curses.KEY_DOWN: (0, 1),
    }
    lines, _ = stdscr.getmaxyx()

    while (key := stdscr.getch()) != curses.KEY_F1:
        if key == TAB and mode in ("browse", "resize"):
            panels[deck.next()].top()
        elif mode == "hide" and key in (ord("a"), ord("b"), ord("c")):
            index = key - ord("a")
            if deck.toggle(index):
                panels[index].hide()
            else:
                panels[index].show()
        elif mode == "resize":
            if key == ord("r"):
                deck.begin_resize()
                _status(stdscr, lines - 4, "Entered Resizing :Use Arrow Keys to resize and press <ENTER> to end resizing")
            elif key == ord("m"):
                _status(stdscr, lines - 4, "Entered Moving: Use Arrow Keys to Move and press <ENTER> to end moving")
                deck.begin_move()
            elif key in arrows:
                deck.nudge(*arrows[key])
            elif key == ENTER:
                with suppress(curses.error):
                    stdscr.move(lines - 4, 0)
                    stdscr.clrtoeol()
                was_resizing, was_moving = deck.resizing, deck.moving
                try:
                    frame = deck.commit()
                except ValueError:
                    deck.moving = deck.resizing = False
                else:
                    panel = panels[deck.top]
                    if was_resizing:
                        with suppress(curses.error):
                            win = _make_window(frame, True)
                            panel.replace(win)
                            windows[deck.top] = win
                    if was_moving:
                        with suppress(curses.error):
                            panel.move(frame.y, frame.x)
            _help(stdscr, mode)
        stdscr.noutrefresh()
        curses.panel.update_panels()
        curses.doupdate()


def main(argv: list[str] | None = None) -> int:
    """Show three stacked windows to browse, hide, move or resize."""
    parser = argparse.ArgumentParser(prog="panels", description="Stacked windows in the terminal.")
    parser.add_argument(
        "mode",
        nargs="?",
        default="resize",
        choices=("simple", "browse", "hide", "resize"),
        help="what the keys do (default: resize)",
    )
    args = parser.parse_args(argv)
    curses.wrapper(_run, args.mode)
    return 0