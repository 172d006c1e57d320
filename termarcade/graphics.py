"""Sprite shapes, colour pairs and small helpers for the arcade screen."""

from __future__ import annotations

import curses
from contextlib import suppress
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterator

__all__ = [
    "ObjectType",
    "Sprite",
    "sprite_for",
    "init_color_pairs",
    "in_range",
]


class ObjectType(IntEnum):
    """Kinds of objects living on the play field."""

    SHIP_BASIC = 0
    SHIP_ENEMY_1 = 1
    SHIP_ENEMY_2 = 2
    BULLET_1 = 3
    BULLET_2 = 4


# Letters of the alternate character set and the curses constants they stand for.
_ACS_NAMES = {
    "l": "ACS_ULCORNER",
    "m": "ACS_LLCORNER",
    "k": "ACS_URCORNER",
    "j": "ACS_LRCORNER",
    "t": "ACS_LTEE",
    "u": "ACS_RTEE",
    "v": "ACS_BTEE",
    "w": "ACS_TTEE",
    "q": "ACS_HLINE",
    "x": "ACS_VLINE",
    "n": "ACS_PLUS",
    "o": "ACS_S1",
    "s": "ACS_S9",
    "`": "ACS_DIAMOND",
    "a": "ACS_CKBOARD",
    "f": "ACS_DEGREE",
    "g": "ACS_PLMINUS",
    "~": "ACS_BULLET",
    "h": "ACS_BOARD",
    "i": "ACS_LANTERN",
    "0": "ACS_BLOCK",
}


def _acs(char: str) -> int:
    """Return the alternate-character-set glyph for ``char``."""
    name = _ACS_NAMES.get(char)
    if name is not None:
        glyph = getattr(curses, name, None)
        if glyph is not None:
            return glyph
    return ord(char)


def _color_attr(pair: int) -> int:
    """Return the attribute for a colour pair, or 0 when colours are unavailable."""
    try:
        return curses.color_pair(pair)
    except curses.error:
        return 0


@dataclass(frozen=True)
class Sprite:
    """A small character picture with a colour pair for every cell."""

    rows: tuple[str, ...]
    colors: tuple[tuple[int, ...], ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def cells(self, y: float, x: float) -> Iterator[tuple[int, int, str, int]]:
        """Yield (row, column, character, colour) for the sprite centred at (y, x)."""
        top = int(y) - self.height // 2
        left = int(x) - self.width // 2
        for i, (line, line_colors) in enumerate(zip(self.rows, self.colors)):
            for j, (char, color) in enumerate(zip(line, line_colors)):
                yield top + i, left + j, char, color

    def draw(self, win: Any, y: float, x: float) -> None:
        """Draw the sprite centred at (y, x) into ``win``."""
        for row, col, char, color in self.cells(y, x):
            with suppress(curses.error):
                win.addch(row, col, _acs(char), _color_attr(color))

    def erase(self, win: Any, y: float, x: float) -> None:
        """Blank the area the sprite covers when centred at (y, x)."""
        top = int(y) - self.height // 2
        left = int(x) - self.width // 2
        for i in range(self.height):
            with suppress(curses.error):
                win.hline(top + i, left, " ", self.width)


_SPRITES = {
    ObjectType.SHIP_BASIC: Sprite(
        rows=("  x  ", " lxk ", "auata"),
        colors=((0, 0, 1, 0, 0), (0, 3, 1, 3, 0), (2, 5, 6, 5, 2)),
    ),
    ObjectType.SHIP_ENEMY_1: Sprite(
        rows=("ana", " x "),
        colors=((4, 5, 4), (0, 1, 0)),
    ),
    ObjectType.BULLET_1: Sprite(rows=("`",), colors=((1,),)),
}


def sprite_for(kind: ObjectType) -> Sprite:
    """Return the sprite of an object kind; kinds without a picture raise ValueError."""
    try:
        return _SPRITES[ObjectType(kind)]
    except (KeyError, ValueError):
        raise ValueError(f"no sprite for object type {kind!r}") from None


def init_color_pairs() -> None:
    """Set black to pure black and make pair n draw colour n on black."""
    with suppress(curses.error, ValueError):
        curses.init_color(curses.COLOR_BLACK, 0, 0, 0)
    for pair in range(15):
        with suppress(curses.error, ValueError):
            curses.init_pair(pair, pair, curses.COLOR_BLACK)


def in_range(low: float, value: float, high: float) -> bool:
    """Return True when ``low <= value <= high``."""
    return low <= value <= high