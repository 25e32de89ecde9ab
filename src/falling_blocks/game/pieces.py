from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Tuple

import numpy as np

from .shapes import NUM_ROTATIONS, Color, PieceType, color_for, offsets


Coordinate = Tuple[int, int]


@dataclass
class Piece:
    """A falling piece: type, rotation state, anchor and display color.

    The anchor ``(x, y)`` is the top-left corner of the piece's offset box,
    which may itself be an empty cell.
    """

    kind: PieceType
    rotation: int = 0  # 0..3
    x: int = 0
    y: int = 0
    color: Color = field(init=False)

    def __post_init__(self) -> None:
        self.kind = PieceType(self.kind)
        self.color = color_for(self.kind)

    @classmethod
    def spawn(cls, kind: PieceType, x: int, y: int) -> "Piece":
        return cls(kind=kind, rotation=0, x=x, y=y)

    def offsets(self) -> np.ndarray:
        return offsets(self.kind, self.rotation)

    def rotate(self, direction: int) -> None:
        # Legality is checked by the caller before rotating.
        self.rotation = (self.rotation + direction) % NUM_ROTATIONS

    def rotated(self, direction: int) -> "Piece":
        return replace(self, rotation=(self.rotation + direction) % NUM_ROTATIONS)

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def cells(self) -> List[Coordinate]:
        return self.cells_at(self.x, self.y)

    def cells_at(self, origin_x: int, origin_y: int) -> List[Coordinate]:
        return [(origin_x + int(dx), origin_y + int(dy)) for dx, dy in self.offsets()]
