from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np

from .shapes import Color


Coordinate = Tuple[int, int]

EMPTY_COLOR: Color = (0, 0, 0)

# clone_state() cell codes
EMPTY = 0
LOCKED = 1
ACTIVE = 2


@dataclass(frozen=True)
class Cell:
    filled: bool = False
    active: bool = False
    color: Color = EMPTY_COLOR


class GameGrid:
    """Fixed-size matrix of cells for the falling-block board.

    Each cell is either empty or filled; a filled cell is ``active`` while it
    belongs to the falling piece and locked terrain otherwise. Storage is
    three parallel numpy arrays indexed ``[y, x]`` with y=0 at the top.
    Coordinates passed to ``get``/``set`` must be inside the grid.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.filled = np.zeros((self.height, self.width), dtype=np.bool_)
        self.active = np.zeros((self.height, self.width), dtype=np.bool_)
        self.colors = np.zeros((self.height, self.width, 3), dtype=np.uint8)

    def clear(self) -> None:
        self.filled.fill(False)
        self.active.fill(False)
        self.colors.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        assert self.is_inside(x, y), f"cell ({x}, {y}) outside {self.width}x{self.height} grid"
        r, g, b = (int(c) for c in self.colors[y, x])
        return Cell(bool(self.filled[y, x]), bool(self.active[y, x]), (r, g, b))

    def set(self, x: int, y: int, filled: bool, active: bool = False, color: Color = EMPTY_COLOR) -> None:
        assert self.is_inside(x, y), f"cell ({x}, {y}) outside {self.width}x{self.height} grid"
        assert filled or not active, "a cell cannot be active without being filled"
        self.filled[y, x] = filled
        self.active[y, x] = active
        self.colors[y, x] = color if filled else EMPTY_COLOR

    def is_blocking(self, x: int, y: int) -> bool:
        """Locked terrain blocks; the falling piece never blocks itself."""
        return bool(self.filled[y, x] and not self.active[y, x])

    def mark(self, cells: Iterable[Coordinate], color: Color, active: bool) -> None:
        for x, y in cells:
            self.set(x, y, True, active, color)

    def unmark_active(self, cells: Iterable[Coordinate]) -> None:
        """Empty the given cells that are currently active; terrain is untouched."""
        for x, y in cells:
            if self.is_inside(x, y) and self.active[y, x]:
                self.set(x, y, False)

    def lock_active(self) -> None:
        self.active.fill(False)

    def clone_state(self) -> np.ndarray:
        """Integer view of the grid: 0 empty, 1 locked, 2 active."""
        state = self.filled.astype(np.int8)
        state[self.active] = ACTIVE
        return state

    def copy(self) -> "GameGrid":
        new_grid = GameGrid(self.width, self.height)
        new_grid.filled = self.filled.copy()
        new_grid.active = self.active.copy()
        new_grid.colors = self.colors.copy()
        return new_grid

    def to_text(self) -> str:
        glyphs = {EMPTY: "·", LOCKED: "█", ACTIVE: "▒"}
        return "\n".join("".join(glyphs[int(v)] for v in row) for row in self.clone_state())


def print_grid(grid: GameGrid) -> None:
    print(grid.to_text())
