from __future__ import annotations

from typing import Iterable

from .grid import Coordinate, GameGrid
from .pieces import Piece


class CollisionDetector:
    """Single occupancy rule shared by gravity, lateral moves and rotation.

    A cell is blocked when it lies left of, right of or below the grid, or on
    locked terrain. Cells above the top edge are open.
    """

    def __init__(self, grid: GameGrid) -> None:
        self.grid = grid

    def cell_blocked(self, x: int, y: int) -> bool:
        if x < 0 or x >= self.grid.width or y >= self.grid.height:
            return True
        if y < 0:
            return False
        return self.grid.is_blocking(x, y)

    def placement_blocked(self, cells: Iterable[Coordinate]) -> bool:
        return any(self.cell_blocked(x, y) for x, y in cells)

    def move_blocked(self, piece: Piece, direction: int) -> bool:
        """``direction`` 0 tests one row down; -1/+1 test one column left/right."""
        if direction == 0:
            candidate = piece.moved(0, 1)
        else:
            candidate = piece.moved(direction, 0)
        return self.placement_blocked(candidate.cells())

    def rotate_blocked(self, piece: Piece, direction: int) -> bool:
        # No wall kicks: the rotated shape is tested at the same anchor only.
        return self.placement_blocked(piece.rotated(direction).cells())
