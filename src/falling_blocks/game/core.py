from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, Optional, Tuple

from .collision import CollisionDetector
from .grid import GameGrid
from .lines import LineClearer
from .pieces import Piece
from .shapes import PieceType


logger = logging.getLogger(__name__)


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE_CW = 3
    ROTATE_CCW = 4
    TICK = 5


class GameStatus(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    preview_size: int = 5
    preview_anchor: Tuple[int, int] = (1, 1)
    spawn_y: int = 0
    # A piece that cannot fall while its anchor is at or above this row ends the game
    game_over_row: int = 2
    gravity_interval_ms: int = 500
    random_seed: Optional[int] = None
    clear_on_game_over: bool = True

    @property
    def spawn_x(self) -> int:
        return self.width // 2


@dataclass
class GameFlags:
    over: bool = False
    paused: bool = False


class FallingBlockGame:
    """Falling-block engine: owns the grid, the active and next pieces, and the rules.

    All calls are expected to be made serially by the scheduler and input
    collaborators. Requests that would collide, and requests made while the
    game is paused or over, are silent no-ops.

    ``rng`` is any object with ``randrange`` (and ``seed`` if ``restart`` is
    given a seed); it defaults to ``random.Random(config.random_seed)``.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.width, self.config.height)
        self.preview = GameGrid(self.config.preview_size, self.config.preview_size)
        self.collision = CollisionDetector(self.grid)
        self.line_clearer = LineClearer()
        self.flags = GameFlags()
        self.lines_cleared = 0
        self.pieces_spawned = 0
        self.active: Piece = Piece(PieceType.O)
        self.next_piece: Piece = Piece(PieceType.O)
        # Set when a freshly promoted piece overlaps terrain; it is then never stamped.
        self._spawn_obstructed = False
        self.restart()

    # ---------- State ----------
    @property
    def status(self) -> GameStatus:
        if self.flags.over:
            return GameStatus.GAME_OVER
        if self.flags.paused:
            return GameStatus.PAUSED
        return GameStatus.RUNNING

    @property
    def game_over(self) -> bool:
        return self.flags.over

    @property
    def spawn_obstructed(self) -> bool:
        """True while the promoted piece overlaps terrain and has no cells on the grid."""
        return self._spawn_obstructed

    @property
    def gravity_interval_ms(self) -> int:
        return self.config.gravity_interval_ms

    def restart(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.grid.clear()
        self.preview.clear()
        self.flags = GameFlags()
        self.lines_cleared = 0
        self.pieces_spawned = 0
        self._spawn_obstructed = False

        self.active = self._random_piece()
        self._stamp()
        self.next_piece = self._random_piece()
        self._refresh_preview()
        logger.info("New game: active=%s next=%s", self.active.kind.name, self.next_piece.kind.name)

    def pause(self) -> None:
        if self.status is GameStatus.RUNNING:
            self.flags.paused = True

    def resume(self) -> None:
        if self.status is GameStatus.PAUSED:
            self.flags.paused = False

    def toggle_pause(self) -> None:
        if self.status is GameStatus.PAUSED:
            self.resume()
        else:
            self.pause()

    # ---------- Operations ----------
    def tick(self) -> None:
        """Gravity step: fall one row, or lock, clear lines and spawn the next piece."""
        if self.status is not GameStatus.RUNNING:
            return
        if self._spawn_obstructed or self.collision.move_blocked(self.active, 0):
            if self._spawn_obstructed or self.active.y <= self.config.game_over_row:
                self._end_game()
            else:
                self._lock_piece()
                self._spawn_next()
            return
        self._restamp(dy=1)

    def move(self, direction: int) -> bool:
        if direction not in (-1, 1):
            raise ValueError(f"move direction must be -1 or +1, got {direction!r}")
        if self.status is not GameStatus.RUNNING or self._spawn_obstructed:
            return False
        if self.collision.move_blocked(self.active, direction):
            return False
        self._restamp(dx=direction)
        return True

    def rotate(self, direction: int) -> bool:
        if direction not in (-1, 1):
            raise ValueError(f"rotate direction must be -1 or +1, got {direction!r}")
        if self.status is not GameStatus.RUNNING or self._spawn_obstructed:
            return False
        if self.collision.rotate_blocked(self.active, direction):
            return False
        self._restamp(rotation=direction)
        return True

    def step(self, action: Action) -> int:
        """Apply one ``Action`` and return the number of lines it cleared."""
        before = self.lines_cleared
        if action == Action.LEFT:
            self.move(-1)
        elif action == Action.RIGHT:
            self.move(1)
        elif action == Action.ROTATE_CW:
            self.rotate(1)
        elif action == Action.ROTATE_CCW:
            self.rotate(-1)
        elif action == Action.TICK:
            self.tick()
        elif action == Action.NONE:
            pass
        return self.lines_cleared - before

    # ---------- Internals ----------
    def _random_piece(self) -> Piece:
        kind = PieceType(self.rng.randrange(len(PieceType)))
        return Piece.spawn(kind, self.config.spawn_x, self.config.spawn_y)

    def _stamp(self) -> None:
        self.grid.mark(self.active.cells(), self.active.color, active=True)

    def _restamp(self, dx: int = 0, dy: int = 0, rotation: int = 0) -> None:
        # The only place the active footprint changes; keeps grid marks and piece in sync.
        self.grid.unmark_active(self.active.cells())
        self.active.x += dx
        self.active.y += dy
        if rotation:
            self.active.rotate(rotation)
        self._stamp()

    def _lock_piece(self) -> None:
        self.grid.lock_active()
        cleared = self.line_clearer.scan_and_clear(self.grid)
        if cleared:
            self.lines_cleared += cleared
            logger.debug("Cleared %d rows (total %d)", cleared, self.lines_cleared)

    def _spawn_next(self) -> None:
        self.active = self.next_piece
        self.active.x, self.active.y = self.config.spawn_x, self.config.spawn_y
        self.next_piece = self._random_piece()
        self.pieces_spawned += 1
        self._refresh_preview()
        if self.collision.placement_blocked(self.active.cells()):
            self._spawn_obstructed = True
            logger.debug("Spawn area obstructed for %s", self.active.kind.name)
        else:
            self._stamp()

    def _refresh_preview(self) -> None:
        self.preview.clear()
        ax, ay = self.config.preview_anchor
        self.preview.mark(self.next_piece.cells_at(ax, ay), self.next_piece.color, active=False)

    def _end_game(self) -> None:
        self.flags.over = True
        if self.config.clear_on_game_over:
            self.grid.clear()
            self.preview.clear()
        logger.info("Game over: lines_cleared=%d pieces_spawned=%d", self.lines_cleared, self.pieces_spawned)

    # ---------- Snapshots ----------
    def get_grid(self) -> GameGrid:
        return self.grid.copy()

    def get_preview(self) -> GameGrid:
        return self.preview.copy()

    def get_state(self) -> Dict[str, Any]:
        # An obstructed spawn has no cells on the grid, so no active piece is reported.
        placed = not self._spawn_obstructed
        return {
            "grid": self.grid.clone_state(),
            "colors": self.grid.colors.copy(),
            "preview": self.preview.filled.astype("int8"),
            "active_piece": int(self.active.kind) if placed else None,
            "active_rotation": self.active.rotation if placed else None,
            "active_position": (self.active.x, self.active.y) if placed else None,
            "spawn_obstructed": self._spawn_obstructed,
            "next_piece": int(self.next_piece.kind),
            "lines_cleared": self.lines_cleared,
            "pieces_spawned": self.pieces_spawned,
            "status": self.status.value,
            "gravity_interval_ms": self.gravity_interval_ms,
        }
