"""Page a source file on the terminal with its comments in bold."""

from __future__ import annotations

import curses
import sys
from contextlib import suppress
from typing import Any

__all__ = ["PROMPT", "segments", "page", "main"]

PROMPT = "<-Press Any Key->"


def segments(text: str) -> list[tuple[str, bool]]:
    """Split ``text`` into (piece, bold) runs, bold from each "/*" to the next "*/"."""
    runs: list[tuple[str, bool]] = []

    def add(chars: str, bold: bool) -> None:
        if runs and runs[-1][1] == bold:
            runs[-1] = (runs[-1][0] + chars, bold)
        else:
            runs.append((chars, bold))

    bold = False
    prev = ""
    for ch in text:
        if prev == "/" and ch == "*" and not bold:
            # The slash already written opens the comment, so it turns bold too.
            last, _ = runs.pop()
            if last[:-1]:
                runs.append((last[:-1], False))
            bold = True
            add("/", True)
        add(ch, bold)
        if prev == "*" and ch == "/":
            bold = False
        prev = ch
    return runs


def _write(win: Any, text: str, attr: int) -> None:
    with suppress(curses.error):
        win.addstr(text, attr)


def page(stdscr: Any, text: str) -> None:
    """Show ``text`` a screen at a time, waiting for a key before each new page."""
    rows, _ = stdscr.getmaxyx()
    for chunk, bold in segments(text):
        attr = curses.A_BOLD if bold else curses.A_NORMAL
        for ch in chunk:
            y, _ = stdscr.getyx()
            if y == rows - 1:
                _write(stdscr, PROMPT, curses.A_NORMAL)
                stdscr.getch()
                stdscr.clear()
                stdscr.move(0, 0)
            _write(stdscr, ch, attr)
            stdscr.refresh()


def main(argv: list[str] | None = None) -> int:
    """Page the file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: pager <a c file name>")
        return 1
    try:
        with open(args[0], encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        print(f"Cannot open input file: {exc}", file=sys.stderr)
        return 1
    curses.wrapper(page, text)
    return 0