import pytest

from termarcade.queens import is_safe, main, render, solutions


class FakeWindow:
    def __init__(self, rows=24, cols=80):
        self.rows, self.cols = rows, cols
        self.cells = {}
        self.texts = {}
        self.refreshed = 0

    def getmaxyx(self):
        return self.rows, self.cols

    def addch(self, y, x, ch, attr=0):
        self.cells[(y, x)] = ch

    def addstr(self, y, x, text, attr=0):
        self.texts[(y, x)] = text

    def refresh(self):
        self.refreshed += 1


def test_is_safe_cases():
    assert is_safe(()) is True
    assert is_safe((1, 1)) is False
    assert is_safe((1, 2)) is False
    assert is_safe((1, 3)) is True


def test_four_queens():
    assert list(solutions(4)) == [(2, 4, 1, 3), (3, 1, 4, 2)]


def test_eight_queens_count():
    assert sum(1 for _ in solutions(8)) == 92


@pytest.mark.parametrize("n", [1, 5, 6])
def test_solutions_are_safe_and_ordered(n):
    found = list(solutions(n))
    assert found == sorted(found)
    for sol in found:
        assert sorted(sol) == list(range(1, n + 1))
        assert all(is_safe(sol[:k]) for k in range(1, n + 1))


def test_no_solution_for_three():
    assert list(solutions(3)) == []


def test_zero_queens_raises():
    with pytest.raises(ValueError):
        list(solutions(0))


def test_render_places_queens():
    win = FakeWindow()
    render(win, (2, 4, 1, 3), 3)
    assert win.texts[(0, 0)] == "Solution No: 3"
    assert sum(1 for ch in win.cells.values() if ch == ord("*")) == 4
    assert any("F1 to Exit" in t for t in win.texts.values())


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out