
"""Pixel geometry of the playfield window"""
from dataclasses import dataclass
from typing import Tuple

from tetris_board import Playfield
from tetris_config import CONFIG
from tetris_piece import Point

PANEL_W = 200


@dataclass
class Dims:
    cols: int
    rows: int
    cell: int
    margin: int
    board_x: int
    board_y: int

    @property
    def board_w(self) -> int:
        return self.cols * self.cell

    @property
    def board_h(self) -> int:
        return self.rows * self.cell

    @property
    def panel_x(self) -> int:
        return self.board_x + self.board_w + self.margin

    @property
    def panel_y(self) -> int:
        return self.board_y

    @property
    def total_w(self) -> int:
        return self.panel_x + PANEL_W + self.margin

    @property
    def total_h(self) -> int:
        return self.board_y + self.board_h + self.margin

    def row_span(self, row: int) -> Tuple[int, int]:
        """Top y and height of playable ``row`` inside the board surface."""
        return row * self.cell, self.cell

    def point_pos(self, p: Point) -> Tuple[int, int]:
        """Screen position of a piece point; storage row 1 is the first drawn row."""
        return (self.board_x + p.x * self.cell + 1,
                self.board_y + (p.y - 1) * self.cell + 1)


def compute_dims(field: Playfield) -> Dims:
    """Geometry for ``field``'s playable area; the hidden row gets no pixels."""
    margin = 16
    return Dims(cols=field.width, rows=field.height, cell=int(CONFIG["CELL_SIZE"]),
                margin=margin, board_x=margin, board_y=margin)
