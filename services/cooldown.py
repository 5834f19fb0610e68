"""Resend-code cooldown timer.

Streamlit has no background timer we can hold on to, so a CooldownTimer is a
handle that is advanced either explicitly with `tick()` or by `catch_up()`,
which converts elapsed wall time (from an injectable monotonic clock) into
whole-second ticks on each rerun.
"""
from __future__ import annotations
import logging
import time
from typing import Callable, Optional

from domain.constants import RESEND_COOLDOWN_SECONDS

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class CooldownTimer:
    def __init__(self, seconds: int = RESEND_COOLDOWN_SECONDS, clock: Clock = time.monotonic,
                 on_finish: Optional[Callable[[], None]] = None):
        self.seconds_remaining = seconds
        self._clock = clock
        self._on_finish = on_finish
        self._active = seconds > 0
        self._last_tick_at = clock()
        if not self._active and on_finish:
            on_finish()

    @property
    def active(self) -> bool:
        return self._active

    def tick(self):
        """One one-second step. No-op once finished or cancelled."""
        if not self._active:
            return
        self.seconds_remaining -= 1
        self._last_tick_at += 1.0
        if self.seconds_remaining <= 0:
            self.seconds_remaining = 0
            self._stop()
            if self._on_finish:
                self._on_finish()

    def catch_up(self) -> int:
        """Apply every whole second elapsed since the last tick; returns ticks applied."""
        if not self._active:
            return 0
        due = int(self._clock() - self._last_tick_at)
        applied = 0
        while applied < due and self._active:
            self.tick()
            applied += 1
        return applied

    def cancel(self):
        if self._active:
            logger.debug("cooldown cancelled with %ss left", self.seconds_remaining)
        self._stop()

    def _stop(self):
        self._active = False
