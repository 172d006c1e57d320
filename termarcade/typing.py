"""A typing tutor that drills groups of keys and reports speed and mistakes."""

from __future__ import annotations

import argparse
import curses
import math
import random
import re
import time
from contextlib import suppress
from dataclasses import dataclass
from typing import Any

from .board import center_x

__all__ = ["GROUPS", "TypingStats", "make_test_string", "count_mistakes", "typing_stats", "main"]

HSIZE = 60
LENGTH = 75
WIDTH = 10
STARTX = 1
STARTY = 5
STATUSX = 1
STATUSY = 25
TITLE = "* * *   Welcome to typing practice (Version 1.0) * * * "

GROUPS = (
    "`123456",
    "7890-=",
    "~!@#$%^",
    "&*()_+",
    "<>?",
    ",./\\",
    "asdfg",
    "jkl;'",
    "qwer",
    "uiop",
    "tyur",
    "zxcv",
    "bnm",
)


@dataclass(frozen=True)
class TypingStats:
    """The outcome of one practice run."""

    mistakes: int
    hours: int
    minutes: int
    seconds: int
    wpm: float

    @property
    def message(self) -> str:
        return (
            f"Mistakes made : {self.mistakes} time taken: "
            f"{self.hours}:{self.minutes}:{self.seconds} WPM : {self.wpm:.2f}"
            "    Press any Key to continue"
        )


def make_test_string(group: str, rng: random.Random | None = None) -> str:
    """A practice line of HSIZE characters: a space every fifth place, keys from ``group`` between."""
    if not group:
        raise ValueError("the key group must not be empty")
    rng = rng if rng is not None else random.Random()
    return "".join(" " if i % 5 == 0 else rng.choice(group) for i in range(HSIZE))


def count_mistakes(expected: str, typed: str) -> int:
    """Count typed characters that differ from ``expected`` or run past its end."""
    return sum(
        1 for i, char in enumerate(typed) if i >= len(expected) or char != expected[i]
    )


def typing_stats(seconds: float, mistakes: int) -> TypingStats:
    """Split the elapsed ``seconds`` into h:m:s and work out the words per minute."""
    if seconds < 0:
        raise ValueError("elapsed time cannot be negative")
    elapsed = int(seconds)
    wpm = math.inf if elapsed == 0 else (HSIZE // 5) / elapsed * 60
    hours, rest = divmod(elapsed, 3600)
    minutes, secs = divmod(rest, 60)
    return TypingStats(mistakes, hours, minutes, secs, wpm)


def _put(win: Any, text: str, y: int | None = None, x: int | None = None) -> None:
    with suppress(curses.error):
        if y is None or x is None:
            win.addstr(text)
        else:
            win.addstr(y, x, text)


def _status(stdscr: Any, text: str) -> None:
    stdscr.attron(curses.A_REVERSE)
    _put(stdscr, text, STATUSY, STATUSX)
    stdscr.attroff(curses.A_REVERSE)


def _read_int(stdscr: Any) -> int | None:
    curses.echo()
    raw = stdscr.getstr()
    curses.noecho()
    match = re.match(r"\s*([+-]?\d+)", raw.decode(errors="replace"))
    return int(match.group(1)) if match else None


def _menu(stdscr: Any) -> int:
    while True:
        stdscr.clear()
        _put(stdscr, "\n\n")
        _put(stdscr, TITLE, 1, center_x(1, 0, TITLE))
        _put(stdscr, "\n\n\n")
        for number, group in enumerate(GROUPS, 1):
            _put(stdscr, f"\t{number:3d}: \tPractice {group}\n")
        _put(stdscr, f"\t{len(GROUPS) + 1:3d}: \tExit\n")
        _put(stdscr, "\n\n\tChoice: ")
        stdscr.refresh()
        choice = _read_int(stdscr)
        if choice is not None and 1 <= choice <= len(GROUPS) + 1:
            return choice
        _status(stdscr, "Wrong choice\tPress any key to continue")
        stdscr.getch()


def _bye(stdscr: Any) -> None:
    _put(stdscr, "\n")
    for line in ("Thank you for using my typing tutor\n", "Bye Bye ! ! !\n"):
        y, _ = stdscr.getyx()
        _put(stdscr, line, y, center_x(0, 0, line))
    stdscr.refresh()


def _practice(stdscr: Any, group: str, rng: random.Random) -> int:
    stdscr.clear()
    title = "Typing window"
    _put(stdscr, title, STARTY - 2, center_x(STARTX, LENGTH, title))
    _status(stdscr, "Press F1 to Main Menu")
    stdscr.refresh()

    text = make_test_string(group, rng)
    win = curses.newwin(WIDTH, LENGTH, STARTY, STARTX)
    win.keypad(True)
    win.box()
    _put(win, text, 1, 1)
    win.refresh()

    y, x = 2, 1
    typed: list[str] = []
    start = int(time.time())
    with suppress(curses.error):
        win.move(y, x)
    win.refresh()
    key = 0
    while key != curses.KEY_F1 and len(typed) != HSIZE + 1:
        key = win.getch()
        with suppress(curses.error, OverflowError, ValueError):
            win.addch(y, x, key)
        win.refresh()
        x += 1
        typed.append(chr(key) if key >= 0 else "\0")
    end = int(time.time())

    stats = typing_stats(end - start, count_mistakes(text, "".join(typed)))
    _status(stdscr, stats.message)
    stdscr.refresh()
    stdscr.getch()
    return key


def _session(stdscr: Any) -> None:
    curses.cbreak()
    curses.noecho()
    stdscr.keypad(True)
    with suppress(curses.error):
        curses.intrflush(False)
    rng = random.Random()
    key = curses.KEY_F1
    group = GROUPS[0]
    while True:
        if key == curses.KEY_F1:
            choice = _menu(stdscr)
            if choice == len(GROUPS) + 1:
                _bye(stdscr)
                return
            group = GROUPS[choice - 1]
        key = _practice(stdscr, group, rng)


def main(argv: list[str] | None = None) -> int:
    """Run the typing tutor until Exit is chosen from its menu."""
    parser = argparse.ArgumentParser(prog="typing-tutor", description="Typing practice in the terminal.")
    parser.parse_args(argv)
    curses.wrapper(_session)
    return 0