import curses

import pytest

from termarcade.pager import PROMPT, main, page, segments


class FakeScreen:
    def __init__(self, rows=24, cols=80):
        self.rows = rows
        self.cols = cols
        self.y = 0
        self.x = 0
        self.written = []
        self.keys = 0
        self.clears = 0

    def getmaxyx(self):
        return self.rows, self.cols

    def getyx(self):
        return self.y, self.x

    def addstr(self, text, attr=0):
        for ch in text:
            self.written.append((ch, attr))
            if ch == "\n":
                self.y += 1
                self.x = 0
            else:
                self.x += 1

    def getch(self):
        self.keys += 1
        return ord(" ")

    def clear(self):
        self.clears += 1
        self.y = self.x = 0

    def move(self, y, x):
        self.y, self.x = y, x

    def refresh(self):
        pass


def test_plain_text_is_one_normal_run():
    assert segments("int main()") == [("int main()", False)]


def test_comment_is_bold():
    assert segments("a /* b */ c") == [("a ", False), ("/* b */", True), (" c", False)]


def test_comment_at_start():
    assert segments("/*/") == [("/*/", True)]


def test_closing_without_opening_stays_normal():
    assert segments("*/") == [("*/", False)]


@pytest.mark.parametrize("text", ["", "a/*b*/c", "//**", "*/*/", "/*x*//*y*/ z", "x = a / *p;"])
def test_segments_keep_every_character(text):
    runs = segments(text)
    assert "".join(piece for piece, _ in runs) == text
    assert all(runs[i][1] != runs[i + 1][1] for i in range(len(runs) - 1))


def test_page_marks_comment_bold():
    screen = FakeScreen()
    page(screen, "x /*c*/ y")
    bold = "".join(ch for ch, attr in screen.written if attr & curses.A_BOLD)
    assert bold == "/*c*/"
    assert "".join(ch for ch, _ in screen.written) == "x /*c*/ y"
    assert screen.keys == 0


def test_page_waits_at_bottom_of_screen():
    screen = FakeScreen(rows=3)
    page(screen, "a\nb\nc\nd")
    shown = "".join(ch for ch, _ in screen.written)
    assert PROMPT in shown
    assert screen.keys == 1
    assert screen.clears == 1
    assert shown.endswith("c\nd")


def test_main_needs_one_argument(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.c")]) == 1
    assert "Cannot open input file" in capsys.readouterr().err