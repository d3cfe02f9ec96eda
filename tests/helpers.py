from tetris_board import Playfield
from tetris_piece import ROTATIONS, Piece, PieceKind, Point


def block(field: Playfield, x: int, y: int):
    """Settle a single block at storage row ``y``."""
    field.lock_down(Piece(PieceKind.O, (Point(x, y),) * 4, ROTATIONS[PieceKind.O]))


def fill_row(field: Playfield, y: int, skip=()):
    for x in range(field.width):
        if x not in skip:
            block(field, x, y)


def piece_at(kind: PieceKind, *points) -> Piece:
    return Piece(kind, tuple(Point(x, y) for x, y in points), ROTATIONS[kind])
