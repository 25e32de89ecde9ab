from __future__ import annotations

from typing import Iterable, List, Tuple

import numpy as np
import pytest

from falling_blocks.game import FallingBlockGame, GameConfig, GameGrid, PieceType


class SequenceRng:
    """Deterministic stand-in for ``random.Random`` that cycles through piece types."""

    def __init__(self, kinds: Iterable[PieceType]) -> None:
        self.kinds = [int(k) for k in kinds]
        self.i = 0

    def randrange(self, n: int) -> int:
        value = self.kinds[self.i % len(self.kinds)]
        self.i += 1
        assert 0 <= value < n
        return value

    def seed(self, seed) -> None:
        self.i = 0


def fill_row(grid: GameGrid, y: int, color=(200, 200, 200)) -> None:
    for x in range(grid.width):
        grid.set(x, y, True, False, color)


def row_full(grid: GameGrid, y: int) -> bool:
    return bool(np.all(grid.filled[y, :]))


def row_empty(grid: GameGrid, y: int) -> bool:
    return not bool(np.any(grid.filled[y, :]))


def filled_count(grid: GameGrid) -> int:
    return int(np.count_nonzero(grid.filled))


def active_cells(grid: GameGrid) -> List[Tuple[int, int]]:
    ys, xs = np.nonzero(grid.active)
    return sorted((int(x), int(y)) for x, y in zip(xs, ys))


def make_game(*kinds: PieceType, **config_kwargs) -> FallingBlockGame:
    return FallingBlockGame(GameConfig(**config_kwargs), rng=SequenceRng(kinds or [PieceType.O]))


def lock_current_piece(game: FallingBlockGame, max_ticks: int = 100) -> None:
    spawned = game.pieces_spawned
    for _ in range(max_ticks):
        game.tick()
        if game.pieces_spawned != spawned or game.game_over:
            return
    raise AssertionError("piece never locked")


@pytest.fixture
def o_game() -> FallingBlockGame:
    return make_game(PieceType.O)
