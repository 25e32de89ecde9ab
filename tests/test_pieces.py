from falling_blocks.game import PIECE_COLORS, Piece, PieceType


def test_rotation_is_a_four_cycle():
    piece = Piece(PieceType.T)
    for _ in range(4):
        piece.rotate(1)
    assert piece.rotation == 0
    for _ in range(4):
        piece.rotate(-1)
    assert piece.rotation == 0


def test_rotation_wraps_both_ways():
    piece = Piece(PieceType.L)
    piece.rotate(-1)
    assert piece.rotation == 3
    piece.rotate(1)
    assert piece.rotation == 0


def test_counter_clockwise_undoes_clockwise():
    piece = Piece(PieceType.J, rotation=2)
    piece.rotate(1)
    piece.rotate(-1)
    assert piece.rotation == 2


def test_color_fixed_per_type():
    piece = Piece(PieceType.S)
    assert piece.color == PIECE_COLORS[PieceType.S]
    piece.rotate(1)
    assert piece.color == PIECE_COLORS[PieceType.S]
    assert piece.rotated(1).color == PIECE_COLORS[PieceType.S]


def test_spawn_starts_unrotated():
    piece = Piece.spawn(PieceType.Z, 5, 0)
    assert (piece.rotation, piece.x, piece.y) == (0, 5, 0)


def test_cells_are_offsets_plus_anchor():
    piece = Piece.spawn(PieceType.I, 5, 2)
    assert piece.cells() == [(5, 2), (5, 3), (5, 4), (5, 5)]


def test_candidates_leave_original_untouched():
    piece = Piece.spawn(PieceType.T, 3, 4)
    moved = piece.moved(1, 1)
    rotated = piece.rotated(-1)
    assert (moved.x, moved.y) == (4, 5)
    assert rotated.rotation == 3
    assert (piece.x, piece.y, piece.rotation) == (3, 4, 0)
