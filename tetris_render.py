
"""
Rendering helpers for the pygame frontend.

- Pre-render the static background (grid + panel frame) once per Dims.
- Pre-render one cell sprite per piece kind plus one for settled blocks.
- Cache a BOARD SURFACE with the settled blocks; only the rows reported by
  the engine (lock-down rows, LinesUpdated.changed) are repainted into it.
"""
from __future__ import annotations
import pygame
from typing import Dict, Iterable, List, Optional, Tuple
from tetris_board import Cell, Playfield
from tetris_gameplay import Gameplay
from tetris_layout import PANEL_W, Dims
from tetris_piece import Piece, PieceKind

COLORS: Dict[PieceKind, Tuple[int,int,int]] = {
    PieceKind.I: (102,224,255),
    PieceKind.J: (106,119,255),
    PieceKind.L: (255,158,94),
    PieceKind.O: (255,224,102),
    PieceKind.S: (94,224,142),
    PieceKind.T: (200,119,255),
    PieceKind.Z: (255,102,119),
}
BLOCK_COLOR = (150,160,190)
BG_COLOR = (10,13,34)

CONTROLS = [
    "Controls:",
    "←/→ Move",
    "↑ / X Rotate",
    "Space Hard drop",
    "R Restart",
    "Esc Quit",
]


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self.controls = [font.render(t, True, (165,175,215)) for t in CONTROLS]
        self._lines_cache: Optional[Tuple[int, pygame.Surface]] = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG_COLOR)
        grid_col = (40,50,90)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, PANEL_W, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    def _make_cells(self):
        c = self.dims.cell
        self.cell_surf: Dict[PieceKind, pygame.Surface] = {}
        for kind, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[kind] = s
        self.block_surf = pygame.Surface((c-2, c-2))
        self.block_surf.fill(BLOCK_COLOR)

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, field: Playfield):
        self.redraw_rows(field, range(field.height))

    def redraw_rows(self, field: Playfield, rows: Iterable[int]):
        """Repaint playable ``rows`` of the settled-block cache from ``field``."""
        c = self.dims.cell
        line: List[Cell] = [Cell.EMPTY] * field.width
        for y in rows:
            top, h = self.dims.row_span(y)
            self.board_surface.fill((0,0,0,0), pygame.Rect(0, top, self.dims.board_w, h))
            field.copy_line(y, line)
            for x, cell in enumerate(line):
                if cell is Cell.BLOCK:
                    self.board_surface.blit(self.block_surf, (x*c + 1, top + 1))

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, game: Gameplay):
        d = self.dims
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (d.board_x, d.board_y))
        self.draw_piece(screen, game.field(), game.current_piece())
        self.draw_panel(screen, game.lines_cleared)

    def draw_piece(self, screen: pygame.Surface, field: Playfield, piece: Piece):
        # a piece still poking into the hidden row stays invisible
        if field.is_hidden(piece):
            return
        d = self.dims
        for p in piece.points:
            screen.blit(self.cell_surf[piece.kind], d.point_pos(p))

    def draw_panel(self, screen: pygame.Surface, lines: int):
        d = self.dims
        if self._lines_cache is None or self._lines_cache[0] != lines:
            self._lines_cache = (lines, self.font.render(f"Lines: {lines}", True, (200,210,240)))
        screen.blit(self._lines_cache[1], (d.panel_x + 12, d.panel_y + 12))
        y = d.panel_y + 60
        for surf in self.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def draw_game_over(self, screen: pygame.Surface, big_font: pygame.font.Font):
        d = self.dims
        msg = big_font.render("GAME OVER", True, (255,220,220))
        rect = msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        screen.blit(msg, rect)
