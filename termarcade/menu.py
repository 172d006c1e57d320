"""A boxed list of choices driven by the arrow keys or the mouse."""

from __future__ import annotations

import argparse
import curses
from contextlib import suppress
from typing import Any, Iterable

__all__ = ["ChoiceMenu", "DEFAULT_CHOICES", "EXIT", "main"]

WIDTH = 30
HEIGHT = 10
ENTER = 10
EXIT = -1
DEFAULT_CHOICES = ("Choice 1", "Choice 2", "Choice 3", "Choice 4", "Exit")


class ChoiceMenu:
    """Choices numbered from 1 with one highlighted entry and the one picked so far."""

    def __init__(self, choices: Iterable[str] = DEFAULT_CHOICES, highlight: int = 1) -> None:
        self.choices = tuple(choices)
        if not self.choices:
            raise ValueError("a menu needs at least one choice")
        if not 1 <= highlight <= len(self.choices):
            raise ValueError(f"no choice number {highlight}")
        self.highlight = highlight
        self.choice = 0

    def __len__(self) -> int:
        return len(self.choices)

    def up(self) -> int:
        """Move the highlight up, wrapping from the first entry to the last."""
        self.highlight = len(self.choices) if self.highlight == 1 else self.highlight - 1
        return self.highlight

    def down(self) -> int:
        """Move the highlight down, wrapping from the last entry to the first."""
        self.highlight = 1 if self.highlight == len(self.choices) else self.highlight + 1
        return self.highlight

    def select(self) -> int:
        """Pick the highlighted entry and return its number."""
        self.choice = self.highlight
        return self.choice

    def choice_at(self, x: int, y: int, startx: int, starty: int) -> int | None:
        """The entry under the screen point (x, y) for a menu window at (startx, starty).

        Returns the entry's number, EXIT for the last entry, or None when no entry is hit.
        """
        left = startx + 2
        top = starty + 3
        for number, text in enumerate(self.choices):
            if y == top + number and left <= x <= left + len(text):
                return EXIT if number == len(self.choices) - 1 else number + 1
        return None

    def render(self, win: Any) -> None:
        """Draw a box and the entries into ``win``, the highlighted one reversed."""
        win.box()
        for number, text in enumerate(self.choices, 1):
            attr = curses.A_REVERSE if number == self.highlight else curses.A_NORMAL
            with suppress(curses.error):
                win.addstr(1 + number, 2, text, attr)
        win.refresh()


def _put(win: Any, y: int, x: int, text: str) -> None:
    with suppress(curses.error, ValueError):
        win.addstr(y, x, text)


def _origin() -> tuple[int, int]:
    return (80 - WIDTH) // 2, (24 - HEIGHT) // 2


def _printable(key: int) -> str:
    char = chr(key % 256) if key >= 0 else "?"
    return char if char.isprintable() else "?"


def _keys(stdscr: Any) -> int:
    stdscr.clear()
    curses.noecho()
    curses.cbreak()
    startx, starty = _origin()
    win = curses.newwin(HEIGHT, WIDTH, starty, startx)
    win.keypad(True)
    _put(stdscr, 0, 0, "Use arrow keys to go up and down, Press enter to select a choice")
    stdscr.refresh()
    menu = ChoiceMenu()
    menu.render(win)
    while True:
        key = win.getch()
        if key == curses.KEY_UP:
            menu.up()
        elif key == curses.KEY_DOWN:
            menu.down()
        elif key == ENTER:
            menu.select()
        else:
            _put(
                stdscr,
                24,
                0,
                f"Charcter pressed is = {key:3d} Hopefully it can be printed as '{_printable(key)}'",
            )
            stdscr.refresh()
        menu.render(win)
        if menu.choice:
            break
    _put(
        stdscr,
        23,
        0,
        f"You chose choice {menu.choice} with choice string {menu.choices[menu.choice - 1]}\n",
    )
    with suppress(curses.error):
        stdscr.clrtoeol()
    stdscr.refresh()
    return menu.choice


def _mouse(stdscr: Any) -> None:
    stdscr.clear()
    curses.noecho()
    curses.cbreak()
    startx, starty = _origin()
    stdscr.attron(curses.A_REVERSE)
    _put(stdscr, 23, 1, "Click on Exit to quit (Works best in a virtual console)")
    stdscr.refresh()
    stdscr.attroff(curses.A_REVERSE)

    win = curses.newwin(HEIGHT, WIDTH, starty, startx)
    win.keypad(True)
    menu = ChoiceMenu()
    menu.render(win)
    curses.mousemask(curses.ALL_MOUSE_EVENTS)
    choice = 0
    while True:
        if win.getch() != curses.KEY_MOUSE:
            continue
        try:
            _, mx, my, _, state = curses.getmouse()
        except curses.error:
            pass
        else:
            if state & curses.BUTTON1_PRESSED:
                hit = menu.choice_at(mx + 1, my + 1, startx, starty)
                if hit is not None:
                    choice = hit
                if choice == EXIT:
                    return
                if choice > 0:
                    _put(
                        stdscr,
                        22,
                        1,
                        f'Choice made is : {choice} String Chosen is "{menu.choices[choice - 1]:>10}"',
                    )
                    stdscr.refresh()
        menu.highlight = choice
        menu.render(win)


def main(argv: list[str] | None = None) -> int:
    """Show the menu, driven by the arrow keys or by mouse clicks."""
    parser = argparse.ArgumentParser(prog="menu", description="A choice menu in the terminal.")
    parser.add_argument(
        "mode",
        nargs="?",
        default="keys",
        choices=("keys", "mouse"),
        help="how choices are made (default: keys)",
    )
    args = parser.parse_args(argv)
    curses.wrapper(_keys if args.mode == "keys" else _mouse)
    return 0