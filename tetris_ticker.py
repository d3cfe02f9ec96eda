
"""Gravity tick source that speeds up over time"""
import logging

from tetris_config import CONFIG

log = logging.getLogger(__name__)


class AcceleratingTicker:
    """Turns elapsed milliseconds into gravity ticks.

    Starts at ``CONFIG["TICK_MS"]`` per tick and shortens the interval by
    ``TICK_ACCEL_MS`` every ``TICK_ACCEL_EVERY`` ticks, never going below
    ``TICK_MIN_MS``.
    """

    def __init__(self):
        self.interval = CONFIG["TICK_MS"]
        self.acc = 0.0
        self.count = 0

    def update(self, dt_ms: float) -> int:
        self.acc += dt_ms
        ticks = 0
        while self.acc >= self.interval:
            self.acc -= self.interval
            ticks += 1
            self.count += 1
            if self.count % CONFIG["TICK_ACCEL_EVERY"] == 0:
                self._accelerate()
        return ticks

    def _accelerate(self):
        new = max(CONFIG["TICK_MIN_MS"], self.interval - CONFIG["TICK_ACCEL_MS"])
        if new != self.interval:
            self.interval = new
            log.debug("tick interval now %d ms", new)
