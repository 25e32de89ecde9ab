import numpy as np

from conftest import fill_row, filled_count, row_empty
from falling_blocks.game import GameGrid, LineClearer


def test_two_adjacent_full_rows():
    grid = GameGrid(10, 20)
    fill_row(grid, 5)
    fill_row(grid, 6)
    grid.set(0, 4, True, False, (10, 20, 30))
    grid.set(1, 3, True, False, (40, 50, 60))
    grid.set(2, 0, True, False, (70, 80, 90))

    assert LineClearer().scan_and_clear(grid) == 2

    assert grid.get(0, 6).filled
    assert grid.get(0, 6).color == (10, 20, 30)
    assert grid.get(1, 5).filled
    assert grid.get(2, 2).color == (70, 80, 90)
    assert row_empty(grid, 0)
    assert row_empty(grid, 1)
    assert filled_count(grid) == 3


def test_non_adjacent_full_rows():
    grid = GameGrid(10, 20)
    fill_row(grid, 10)
    fill_row(grid, 15)
    grid.set(2, 12, True)
    grid.set(4, 9, True)
    grid.set(7, 18, True)

    assert LineClearer().scan_and_clear(grid) == 2

    assert grid.get(7, 18).filled
    assert grid.get(2, 13).filled
    assert grid.get(4, 11).filled
    assert filled_count(grid) == 3
    assert row_empty(grid, 0) and row_empty(grid, 1)


def test_row_with_one_gap_is_not_full():
    grid = GameGrid(10, 20)
    fill_row(grid, 19)
    grid.set(9, 19, False)
    before = grid.filled.copy()
    clearer = LineClearer()
    assert clearer.find_full_rows(grid) == []
    assert clearer.scan_and_clear(grid) == 0
    assert np.array_equal(grid.filled, before)


def test_whole_board_full():
    grid = GameGrid(4, 3)
    for y in range(3):
        fill_row(grid, y)
    assert LineClearer().scan_and_clear(grid) == 3
    assert filled_count(grid) == 0
    assert grid.filled.shape == (3, 4)
