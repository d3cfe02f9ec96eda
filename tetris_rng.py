
"""Next-piece source"""
import random
from typing import Optional

from tetris_piece import PieceKind


class PieceSource:
    """Uniform pick over every piece kind; pass a seed for a repeatable game."""
    KINDS = list(PieceKind)

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def next_kind(self) -> PieceKind:
        return self.rng.choice(self.KINDS)
