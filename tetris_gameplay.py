
"""Gameplay controller: ticks, commands, events"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Union

from tetris_board import Playfield
from tetris_piece import Piece, PieceKind, spawn
from tetris_rng import PieceSource

log = logging.getLogger(__name__)


class Command(Enum):
    MOVE_LEFT = "move-left"
    MOVE_RIGHT = "move-right"
    ROTATE = "rotate"
    HARD_DROP = "hard-drop"


@dataclass(frozen=True)
class LinesUpdated:
    cleared: List[int]
    changed: List[int]


@dataclass(frozen=True)
class GameOver:
    pass


Event = Union[LinesUpdated, GameOver]


class Gameplay:
    """Owns the playfield and the falling piece.

    ``on_tick`` and ``on_command`` are the only mutators; both return the
    events they produced. Every tentative move is checked with
    ``Playfield.can_place`` and either committed or rolled back, so a
    rejected command leaves the piece exactly where it was.
    """

    def __init__(self, width: int = 10, height: int = 20,
                 next_kind: Optional[Callable[[], PieceKind]] = None):
        self._field = Playfield(width, height)
        self._next_kind = next_kind or PieceSource().next_kind
        self._piece = self._spawn()
        self.game_over = False
        self.lines_cleared = 0

    def current_piece(self) -> Piece:
        return self._piece

    def field(self) -> Playfield:
        return self._field

    def on_tick(self) -> List[Event]:
        if self.game_over:
            return []
        if not self._field.is_landed(self._piece):
            self._piece.move_vertical(1)
            return []

        events: List[Event] = []
        self._field.lock_down(self._piece)
        log.debug("locked %s at %s", self._piece.kind.value, list(self._piece.points))
        cleared = self._field.remove_completed_lines()
        if cleared:
            self.lines_cleared += len(cleared)
            log.debug("cleared rows %s", cleared)
            # everything above the lowest cleared row moved
            events.append(LinesUpdated(cleared, list(range(max(cleared) + 1))))

        self._piece = self._spawn()
        if not self._field.can_place(self._piece):
            self.game_over = True
            log.info("game over after %d lines", self.lines_cleared)
            events.append(GameOver())
        return events

    def on_command(self, cmd: Command) -> List[Event]:
        if self.game_over:
            return []
        if cmd is Command.MOVE_LEFT:
            self._shift(-1)
        elif cmd is Command.MOVE_RIGHT:
            self._shift(1)
        elif cmd is Command.ROTATE:
            cand = self._piece.clone()
            cand.rotate()
            if self._field.can_place(cand):
                self._piece = cand
        elif cmd is Command.HARD_DROP:
            while self._field.can_place(self._piece):
                self._piece.move_vertical(1)
            self._piece.move_vertical(-1)
        return []

    def _shift(self, delta: int):
        self._piece.move_horizontal(delta)
        if not self._field.can_place(self._piece):
            self._piece.move_horizontal(-delta)

    def _spawn(self) -> Piece:
        return spawn(self._next_kind(), self._field.width)
