
"""Playfield: cell storage, collision, lock-down, line removal"""
from enum import Enum
from typing import List

from tetris_piece import Piece


class Cell(Enum):
    HIDDEN = 0
    EMPTY = 1
    BLOCK = 2


class Playfield:
    """Grid of ``width`` columns and ``height + 1`` rows.

    Row 0 is the hidden buffer row a piece spawns into; rows 1..height are
    playable. Piece points use these storage rows directly, while the read
    accessors (``cell``, ``copy_line``, ``line``) and the line-removal results
    use 0-based playable rows.
    """

    def __init__(self, width: int, height: int):
        if width < 4 or height < 1:
            raise ValueError(f"playfield too small: {width}x{height}")
        self._width = width
        self._rows: List[List[Cell]] = [[Cell.HIDDEN] * width]
        self._rows += [[Cell.EMPTY] * width for _ in range(height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return len(self._rows) - 1

    # read accessors (playable rows, 0-based)

    def cell(self, row: int, col: int) -> Cell:
        return self._rows[row + 1][col]

    def line(self, row: int) -> List[Cell]:
        return list(self._rows[row + 1])

    def copy_line(self, row: int, dst: List[Cell]):
        dst[:] = self._rows[row + 1]

    def count(self, cell: Cell) -> int:
        return sum(r.count(cell) for r in self._rows[1:])

    # collision

    def can_place(self, piece: Piece) -> bool:
        for p in piece.points:
            if p.x < 0 or p.x >= self._width:
                return False
            if p.y < 0 or p.y >= len(self._rows):
                return False
            if self._rows[p.y][p.x] is Cell.BLOCK:
                return False
        return True

    def is_landed(self, piece: Piece) -> bool:
        last = len(self._rows) - 1
        for p in piece.points:
            if p.y == last or self._rows[p.y + 1][p.x] is Cell.BLOCK:
                return True
        return False

    def is_hidden(self, piece: Piece) -> bool:
        return any(self._rows[p.y][p.x] is Cell.HIDDEN for p in piece.points)

    def lock_down(self, piece: Piece):
        for p in piece.points:
            self._rows[p.y][p.x] = Cell.BLOCK

    # line removal

    def completed_lines(self) -> List[int]:
        return [i - 1 for i in self._completed()]

    def remove_completed_lines(self) -> List[int]:
        """Clear full rows and let the rows above fall into the gaps.

        Each completed row is blanked in place, then rows are walked
        bottom-up: a surviving row is swapped down by the number of cleared
        rows seen below it, which carries the blanked rows to the top.
        """
        completed = self._completed()
        for i in completed:
            self._rows[i][:] = [Cell.EMPTY] * self._width

        cleared = set(completed)
        drop = 0
        for i in range(len(self._rows) - 1, 0, -1):
            if i in cleared:
                drop += 1
                continue
            if drop:
                self._rows[i], self._rows[i + drop] = self._rows[i + drop], self._rows[i]
        return [i - 1 for i in completed]

    def _completed(self) -> List[int]:
        return [i for i in range(1, len(self._rows)) if Cell.EMPTY not in self._rows[i]]

    def __str__(self):
        glyph = {Cell.HIDDEN: " ", Cell.EMPTY: ".", Cell.BLOCK: "#"}
        return "\n".join("".join(glyph[c] for c in r) for r in self._rows)
