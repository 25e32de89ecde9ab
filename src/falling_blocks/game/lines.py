from __future__ import annotations

from typing import List

import numpy as np

from .grid import GameGrid


class LineClearer:
    """Detects full rows and collapses the grid above them."""

    def find_full_rows(self, grid: GameGrid) -> List[int]:
        return [int(y) for y in np.where(np.all(grid.filled, axis=1))[0]]

    def clear_rows(self, grid: GameGrid, rows: List[int]) -> None:
        """Remove ``rows`` and insert as many empty rows at the top.

        Every remaining row keeps its relative order, so non-adjacent full
        rows collapse correctly and the vacated top rows are always empty.
        """
        if not rows:
            return
        num = len(rows)
        grid.filled = np.vstack(
            (np.zeros((num, grid.width), dtype=np.bool_), np.delete(grid.filled, rows, axis=0))
        )
        grid.active = np.vstack(
            (np.zeros((num, grid.width), dtype=np.bool_), np.delete(grid.active, rows, axis=0))
        )
        grid.colors = np.concatenate(
            (np.zeros((num, grid.width, 3), dtype=np.uint8), np.delete(grid.colors, rows, axis=0)),
            axis=0,
        )
        assert grid.filled.shape == (grid.height, grid.width)

    def scan_and_clear(self, grid: GameGrid) -> int:
        rows = self.find_full_rows(grid)
        self.clear_rows(grid, rows)
        return len(rows)
