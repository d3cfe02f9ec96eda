
"""Piece model, spawn poses, rotation tables"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, NamedTuple, Tuple


class Point(NamedTuple):
    x: int
    y: int


Delta = Tuple[int, int]
Rule = Tuple[Delta, Delta, Delta, Delta]


class PieceKind(Enum):
    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


# Spawn cells as (dx, row) from the anchor column; row 0 is the hidden row.
SHAPES: Dict[PieceKind, List[Tuple[int, int]]] = {
    PieceKind.I: [(-1, 0), (0, 0), (1, 0), (2, 0)],
    PieceKind.O: [(0, 0), (1, 0), (0, 1), (1, 1)],
    PieceKind.T: [(0, 0), (-1, 1), (0, 1), (1, 1)],
    PieceKind.S: [(0, 0), (1, 0), (-1, 1), (0, 1)],
    PieceKind.Z: [(-1, 0), (0, 0), (0, 1), (1, 1)],
    PieceKind.J: [(-1, 0), (-1, 1), (0, 1), (1, 1)],
    PieceKind.L: [(1, 0), (-1, 1), (0, 1), (1, 1)],
}

# ROTATIONS[kind][state] moves each point from `state` to `state + 1`.
# Clockwise about the middle of the three-long row; I turns inside its 4x4 box.
ROTATIONS: Dict[PieceKind, Tuple[Rule, ...]] = {
    PieceKind.I: (
        ((2, -1), (1, 0), (0, 1), (-1, 2)),
        ((-2, 1), (-1, 0), (0, -1), (1, -2)),
    ),
    PieceKind.O: (
        ((0, 0), (0, 0), (0, 0), (0, 0)),
    ),
    PieceKind.T: (
        ((1, 1), (1, -1), (0, 0), (-1, 1)),
        ((-1, 1), (1, 1), (0, 0), (-1, -1)),
        ((-1, -1), (-1, 1), (0, 0), (1, -1)),
        ((1, -1), (-1, -1), (0, 0), (1, 1)),
    ),
    PieceKind.S: (
        ((1, 1), (0, 2), (1, -1), (0, 0)),
        ((-1, -1), (0, -2), (-1, 1), (0, 0)),
    ),
    PieceKind.Z: (
        ((2, 0), (1, 1), (0, 0), (-1, 1)),
        ((-2, 0), (-1, -1), (0, 0), (1, -1)),
    ),
    PieceKind.J: (
        ((2, 0), (1, -1), (0, 0), (-1, 1)),
        ((0, 2), (1, 1), (0, 0), (-1, -1)),
        ((-2, 0), (-1, 1), (0, 0), (1, -1)),
        ((0, -2), (-1, -1), (0, 0), (1, 1)),
    ),
    PieceKind.L: (
        ((0, 2), (1, -1), (0, 0), (-1, 1)),
        ((-2, 0), (1, 1), (0, 0), (-1, -1)),
        ((0, -2), (-1, 1), (0, 0), (1, -1)),
        ((2, 0), (-1, -1), (0, 0), (1, 1)),
    ),
}


@dataclass
class Piece:
    kind: PieceKind
    points: Tuple[Point, ...]
    rules: Tuple[Rule, ...]
    rotation_state: int = 0

    def rotate(self):
        rule = self.rules[self.rotation_state]
        self.points = tuple(Point(p.x + dx, p.y + dy) for p, (dx, dy) in zip(self.points, rule))
        self.rotation_state = (self.rotation_state + 1) % len(self.rules)

    def move_vertical(self, delta: int):
        self.points = tuple(Point(p.x, p.y + delta) for p in self.points)

    def move_horizontal(self, delta: int):
        self.points = tuple(Point(p.x + delta, p.y) for p in self.points)

    def clone(self) -> "Piece":
        # points and rules are immutable tuples, sharing them is a value copy
        return Piece(self.kind, self.points, self.rules, self.rotation_state)


def spawn(kind: PieceKind, width: int) -> Piece:
    """Return a fresh piece of ``kind`` at its spawn pose on a ``width`` grid."""
    anchor = (width - 1) // 2
    points = tuple(Point(anchor + dx, row) for dx, row in SHAPES[kind])
    return Piece(kind, points, ROTATIONS[kind])
