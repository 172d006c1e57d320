import curses

import pytest

from termarcade.menu import DEFAULT_CHOICES, EXIT, ChoiceMenu


class FakeWindow:
    def __init__(self):
        self.boxed = False
        self.lines = {}
        self.refreshed = 0

    def box(self):
        self.boxed = True

    def addstr(self, y, x, text, attr=0):
        self.lines[y] = (x, text, attr)

    def refresh(self):
        self.refreshed += 1


def test_default_choices_start_highlighted_at_first():
    menu = ChoiceMenu()
    assert menu.choices == DEFAULT_CHOICES
    assert menu.highlight == 1
    assert menu.choice == 0


def test_up_wraps_to_last():
    menu = ChoiceMenu()
    assert menu.up() == len(menu.choices)
    assert menu.up() == len(menu.choices) - 1


def test_down_wraps_to_first():
    menu = ChoiceMenu(highlight=len(DEFAULT_CHOICES))
    assert menu.down() == 1
    assert menu.down() == 2


def test_up_then_down_round_trip():
    menu = ChoiceMenu(highlight=3)
    menu.up()
    menu.down()
    assert menu.highlight == 3


def test_select_picks_highlight():
    menu = ChoiceMenu()
    menu.down()
    assert menu.select() == 2
    assert menu.choice == 2


def test_choice_at_hits_first_entry():
    menu = ChoiceMenu()
    assert menu.choice_at(27, 10, 25, 7) == 1
    assert menu.choice_at(27 + len("Choice 1"), 10, 25, 7) == 1


def test_choice_at_last_entry_is_exit():
    menu = ChoiceMenu()
    assert menu.choice_at(27, 14, 25, 7) == EXIT


def test_choice_at_misses():
    menu = ChoiceMenu()
    assert menu.choice_at(26, 10, 25, 7) is None
    assert menu.choice_at(28 + len("Choice 1"), 10, 25, 7) is None
    assert menu.choice_at(27, 9, 25, 7) is None


def test_choice_at_custom_menu():
    menu = ChoiceMenu(["open", "quit"])
    assert menu.choice_at(2, 3, 0, 0) == 1
    assert menu.choice_at(2, 4, 0, 0) == EXIT


def test_render_highlights_one_entry():
    menu = ChoiceMenu(highlight=3)
    win = FakeWindow()
    menu.render(win)
    assert win.boxed
    assert win.refreshed == 1
    assert [win.lines[y][1] for y in sorted(win.lines)] == list(DEFAULT_CHOICES)
    assert win.lines[4] == (2, "Choice 3", curses.A_REVERSE)
    others = [attr for y, (_, _, attr) in win.lines.items() if y != 4]
    assert all(attr == curses.A_NORMAL for attr in others)


def test_empty_menu_rejected():
    with pytest.raises(ValueError):
        ChoiceMenu([])


def test_bad_highlight_rejected():
    with pytest.raises(ValueError):
        ChoiceMenu(highlight=len(DEFAULT_CHOICES) + 1)