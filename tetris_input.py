
"""Keyboard decoding and DAS/ARR controller"""
from typing import Optional

import pygame

from tetris_config import CONFIG
from tetris_gameplay import Command

KEYMAP = {
    pygame.K_UP: Command.ROTATE,
    pygame.K_x: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
}


def decode_key(key: int) -> Optional[Command]:
    """Map a KEYDOWN key to a one-shot command; left/right go through ShiftRepeat."""
    return KEYMAP.get(key)


class ShiftRepeat:
    def __init__(self):
        self.dir = 0; self.held_ms = 0; self.last = 0; self.initial = False

    def update(self, dt, left, right) -> Optional[Command]:
        nd = (-1 if left else 0) + (1 if right else 0)
        if nd != self.dir:
            self.dir = nd; self.held_ms = 0; self.last = 0; self.initial = False
        if self.dir == 0: return None
        self.held_ms += dt
        if not self.initial:
            self.initial = True; return self._command()
        if self.held_ms < CONFIG["DAS_MS"]: return None
        arr = CONFIG["ARR_MS"]
        if arr == 0: return self._command()
        self.last += dt
        if self.last >= arr:
            self.last = 0; return self._command()
        return None

    def _command(self) -> Command:
        return Command.MOVE_LEFT if self.dir < 0 else Command.MOVE_RIGHT
