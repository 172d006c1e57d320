"""The arcade game: a player ship, enemy ships and bullets on a terminal."""

from __future__ import annotations

import argparse
import curses
import select
import sys
import time
from contextlib import suppress
from typing import Any

from .board import _glyph
from .graphics import ObjectType, init_color_pairs
from .objects import ObjectList

__all__ = ["key_pending", "init_screen", "draw_title", "new_world", "handle_key", "run", "main"]

FRAME_DELAY = 0.04
QUIT_KEY = ord("q")
SHOOT_KEY = ord(" ")


def key_pending(fd: int) -> bool:
    """True when a key is waiting to be read from the file descriptor ``fd``."""
    ready, _, _ = select.select([fd], [], [], 0)
    return bool(ready)


def init_screen(stdscr: Any) -> None:
    """Put the terminal into the game's input and colour modes."""
    with suppress(curses.error):
        curses.start_color()
    stdscr.nodelay(True)
    stdscr.keypad(True)
    for setup in (lambda: curses.curs_set(0), curses.cbreak, curses.noecho):
        with suppress(curses.error):
            setup()
    init_color_pairs()


def _pair(number: int) -> int:
    try:
        return curses.color_pair(number)
    except curses.error:
        return 0


def _stroke(win: Any, token: str) -> None:
    with suppress(curses.error):
        if token == "H":
            y, x = win.getyx()
            win.hline(y, x, _glyph("HLINE"), 10)
            win.move(y, x + 10)
        elif token == " ":
            win.addch(ord(" "))
        else:
            win.addch(_glyph(token))


def draw_title(stdscr: Any) -> None:
    """Draw the line-art title on the screen."""
    for pair, colour in ((1, curses.COLOR_MAGENTA), (2, curses.COLOR_CYAN)):
        with suppress(curses.error, ValueError):
            curses.init_pair(pair, colour, curses.COLOR_BLACK)
    stdscr.clear()
    stdscr.attron(_pair(1) | curses.A_BOLD)
    for token in ("ULCORNER", "H", "URCORNER", " "):
        _stroke(stdscr, token)
    with suppress(curses.error):
        stdscr.move(20, 30)
    for token in (
        "ULCORNER", "H", " ",
        "ULCORNER", "H", "URCORNER", " ",
        "ULCORNER", "H", "URCORNER", " ",
        "H", " ",
        "H",
    ):
        _stroke(stdscr, token)
    stdscr.attroff(_pair(1))
    stdscr.attron(_pair(2) | curses.A_BLINK)
    stdscr.attroff(_pair(2) | curses.A_BLINK | curses.A_BOLD)
    stdscr.refresh()


def new_world(width: int, height: int) -> ObjectList:
    """The starting field: the player ship and two enemy ships."""
    world = ObjectList(width, height)
    world.add(ObjectType.SHIP_BASIC, 20, 20)
    world.add(ObjectType.SHIP_ENEMY_1, 35, 10)
    world.add(ObjectType.SHIP_ENEMY_1, 14, 10)
    return world


def handle_key(objects: ObjectList, key: int) -> bool:
    """Apply a key press to the field; return False when the game should end."""
    player = objects.player
    if player is not None:
        if key == curses.KEY_RIGHT:
            player.change_direction(1)
        elif key == curses.KEY_LEFT:
            player.change_direction(-1)
        elif key == SHOOT_KEY:
            objects.shoot(player)
    return key != QUIT_KEY


def run(stdscr: Any) -> None:
    """Play the game until the player presses q."""
    init_screen(stdscr)
    lines, cols = stdscr.getmaxyx()
    win = curses.newwin(lines - 2, cols // 2, 1, cols // 4)
    height, width = win.getmaxyx()
    world = new_world(width, height)
    world.win = win
    fd = sys.stdin.fileno()
    running = True
    while running:
        world.draw()
        stdscr.refresh()
        win.refresh()
        if key_pending(fd):
            key = stdscr.getch()
            if key != -1:
                running = handle_key(world, key)
        world.update_positions()
        time.sleep(FRAME_DELAY)


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(prog="termarcade", description="Terminal space shooter.")
    parser.parse_args(argv)
    curses.wrapper(run)
    return 0