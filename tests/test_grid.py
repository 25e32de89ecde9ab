import pytest

from conftest import active_cells, fill_row, filled_count, row_full
from falling_blocks.game import Cell, GameGrid


def test_new_grid_is_empty():
    grid = GameGrid(10, 20)
    assert filled_count(grid) == 0
    assert grid.get(0, 0) == Cell()


def test_set_and_get_round_trip():
    grid = GameGrid(10, 20)
    grid.set(3, 7, True, True, (1, 2, 3))
    assert grid.get(3, 7) == Cell(True, True, (1, 2, 3))


def test_only_locked_cells_block():
    grid = GameGrid(10, 20)
    grid.set(1, 1, True, False, (9, 9, 9))
    grid.set(2, 1, True, True, (9, 9, 9))
    assert grid.is_blocking(1, 1)
    assert not grid.is_blocking(2, 1)
    assert not grid.is_blocking(3, 1)


def test_active_requires_filled():
    grid = GameGrid(10, 20)
    with pytest.raises(AssertionError):
        grid.set(0, 0, False, True)


@pytest.mark.parametrize("x, y", [(-1, 0), (10, 0), (0, 20), (0, -1)])
def test_out_of_range_access_fails_fast(x, y):
    grid = GameGrid(10, 20)
    with pytest.raises(AssertionError):
        grid.get(x, y)
    with pytest.raises(AssertionError):
        grid.set(x, y, True)


def test_clear_empties_everything():
    grid = GameGrid(10, 20)
    fill_row(grid, 19)
    grid.set(0, 0, True, True, (5, 5, 5))
    grid.clear()
    assert filled_count(grid) == 0
    assert active_cells(grid) == []
    assert grid.colors.sum() == 0


def test_unmark_active_keeps_terrain():
    grid = GameGrid(10, 20)
    grid.set(0, 0, True, False, (1, 1, 1))
    grid.set(1, 0, True, True, (1, 1, 1))
    grid.unmark_active([(0, 0), (1, 0)])
    assert grid.get(0, 0).filled
    assert not grid.get(1, 0).filled


def test_clone_state_codes():
    grid = GameGrid(3, 2)
    grid.set(0, 0, True, False, (1, 1, 1))
    grid.set(1, 1, True, True, (1, 1, 1))
    assert grid.clone_state().tolist() == [[1, 0, 0], [0, 2, 0]]


def test_copy_is_independent():
    grid = GameGrid(4, 4)
    snapshot = grid.copy()
    fill_row(grid, 3)
    assert filled_count(snapshot) == 0
    assert row_full(grid, 3)


def test_to_text():
    grid = GameGrid(3, 1)
    grid.set(0, 0, True)
    grid.set(2, 0, True, True)
    assert grid.to_text() == "█·▒"
