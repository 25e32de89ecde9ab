from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple

import numpy as np


Color = Tuple[int, int, int]

NUM_ROTATIONS = 4
CELLS_PER_PIECE = 4


class PieceType(IntEnum):
    """Enumeration of piece types, in shape table order"""
    O = 0  # Square piece
    I = 1  # Line piece
    T = 2  # T-piece
    J = 3  # J-piece
    L = 4  # L-piece (reverse J)
    S = 5  # S-piece
    Z = 6  # Z-piece (reverse S)


# (dx, dy) offsets from the piece anchor for every rotation state.
# Rotations are enumerated literally instead of computed, so asymmetric
# pieces never depend on a choice of rotation center.
SHAPE_TABLE = np.array(
    [
        [  # O
            [(0, 0), (1, 0), (0, 1), (1, 1)],
            [(0, 0), (1, 0), (0, 1), (1, 1)],
            [(0, 0), (1, 0), (0, 1), (1, 1)],
            [(0, 0), (1, 0), (0, 1), (1, 1)],
        ],
        [  # I
            [(0, 0), (0, 1), (0, 2), (0, 3)],
            [(0, 0), (1, 0), (2, 0), (3, 0)],
            [(0, 0), (0, 1), (0, 2), (0, 3)],
            [(0, 0), (1, 0), (2, 0), (3, 0)],
        ],
        [  # T
            [(0, 0), (0, 1), (1, 1), (0, 2)],
            [(1, 0), (0, 1), (1, 1), (2, 1)],
            [(0, 1), (1, 0), (1, 1), (1, 2)],
            [(0, 0), (1, 0), (2, 0), (1, 1)],
        ],
        [  # J
            [(0, 0), (1, 0), (0, 1), (0, 2)],
            [(0, 0), (0, 1), (1, 1), (2, 1)],
            [(1, 0), (1, 1), (0, 2), (1, 2)],
            [(0, 0), (1, 0), (2, 0), (2, 1)],
        ],
        [  # L
            [(0, 0), (1, 0), (1, 1), (1, 2)],
            [(0, 0), (1, 0), (2, 0), (0, 1)],
            [(0, 0), (0, 1), (0, 2), (1, 2)],
            [(2, 0), (0, 1), (1, 1), (2, 1)],
        ],
        [  # S
            [(0, 0), (0, 1), (1, 1), (1, 2)],
            [(1, 0), (2, 0), (0, 1), (1, 1)],
            [(0, 0), (0, 1), (1, 1), (1, 2)],
            [(1, 0), (2, 0), (0, 1), (1, 1)],
        ],
        [  # Z
            [(1, 0), (0, 1), (1, 1), (0, 2)],
            [(0, 0), (1, 0), (1, 1), (2, 1)],
            [(1, 0), (0, 1), (1, 1), (0, 2)],
            [(0, 0), (1, 0), (1, 1), (2, 1)],
        ],
    ],
    dtype=np.int8,
)
SHAPE_TABLE.setflags(write=False)

PIECE_COLORS: Dict[PieceType, Color] = {
    PieceType.O: (255, 255, 0),
    PieceType.I: (128, 128, 128),
    PieceType.T: (0, 255, 255),
    PieceType.J: (0, 0, 255),
    PieceType.L: (255, 0, 0),
    PieceType.S: (255, 0, 255),
    PieceType.Z: (0, 204, 0),
}


def offsets(kind: PieceType, rotation: int) -> np.ndarray:
    """Return the (4, 2) read-only array of (dx, dy) offsets for a piece state."""
    return SHAPE_TABLE[int(kind), rotation]


def color_for(kind: PieceType) -> Color:
    return PIECE_COLORS[PieceType(kind)]
