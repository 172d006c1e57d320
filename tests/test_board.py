import pytest

from termarcade.board import center_x, draw_grid, grid_cells


class FakeWindow:
    def __init__(self):
        self.cells = {}
        self.refreshed = 0

    def addch(self, y, x, ch, attr=0):
        self.cells[(y, x)] = ch

    def refresh(self):
        self.refreshed += 1


def test_single_tile_corners():
    cells = grid_cells(0, 0, 1, 1, 6, 4)
    assert cells[(0, 0)] == "ULCORNER"
    assert cells[(4, 0)] == "LLCORNER"
    assert cells[(0, 6)] == "URCORNER"
    assert cells[(4, 6)] == "LRCORNER"


def test_edges_and_interior():
    cells = grid_cells(0, 0, 1, 1, 6, 4)
    assert cells[(0, 3)] == "HLINE"
    assert cells[(2, 0)] == "VLINE"
    assert (2, 3) not in cells


def test_two_by_two_junctions():
    cells = grid_cells(0, 0, 2, 2, 6, 4)
    assert cells[(4, 6)] == "PLUS"
    assert cells[(0, 6)] == "TTEE"
    assert cells[(8, 6)] == "BTEE"
    assert cells[(4, 0)] == "LTEE"
    assert cells[(4, 12)] == "RTEE"


def test_offset_shifts_every_cell():
    base = grid_cells(0, 0, 2, 3, 4, 2)
    shifted = grid_cells(5, 7, 2, 3, 4, 2)
    assert shifted == {(y + 5, x + 7): name for (y, x), name in base.items()}


def test_bad_tile_size_raises():
    with pytest.raises(ValueError):
        grid_cells(0, 0, 2, 2, 0, 2)


def test_draw_grid_draws_each_cell_once():
    win = FakeWindow()
    draw_grid(win, 1, 1, 3, 3, 6, 4)
    assert set(win.cells) == set(grid_cells(1, 1, 3, 3, 6, 4))
    assert win.refreshed == 1


def test_center_x_zero_width_means_eighty():
    assert center_x(0, 0, "hello") == center_x(0, 80, "hello")


def test_center_x_is_symmetric():
    text = "abcd"
    start = center_x(10, 20, text)
    left = start - 10
    right = 10 + 20 - (start + len(text))
    assert left == right