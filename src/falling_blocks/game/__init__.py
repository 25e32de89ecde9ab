"""Game module for the falling-block engine.

Exports the core engine and supporting classes:
- PieceType / SHAPE_TABLE: Piece types and their literal rotation offsets
- Piece: Falling piece with anchor, rotation and color
- GameGrid / Cell: Board cells with filled/active state
- CollisionDetector: Shared occupancy rule for moves and rotations
- LineClearer: Full-row detection and removal
- FallingBlockGame: Engine state machine
"""

from .shapes import SHAPE_TABLE, PIECE_COLORS, PieceType, offsets
from .pieces import Piece
from .grid import Cell, GameGrid, print_grid
from .collision import CollisionDetector
from .lines import LineClearer
from .core import Action, FallingBlockGame, GameConfig, GameFlags, GameStatus

__all__ = [
    "SHAPE_TABLE",
    "PIECE_COLORS",
    "PieceType",
    "offsets",
    "Piece",
    "Cell",
    "GameGrid",
    "print_grid",
    "CollisionDetector",
    "LineClearer",
    "Action",
    "FallingBlockGame",
    "GameConfig",
    "GameFlags",
    "GameStatus",
]
