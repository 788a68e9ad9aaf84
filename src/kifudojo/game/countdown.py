"""Memorization countdown on monotonic time."""

from __future__ import annotations

import math
import time

from kifudojo.game.interfaces import ICountdown


class Countdown(ICountdown):
    """Single countdown that can be paused, resumed and restarted."""

    __slots__ = ("_duration", "_remaining", "_last_tick", "_running")

    def __init__(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError(f"Countdown duration must be >= 0, got {seconds}")
        self._duration = float(seconds)
        self._remaining = float(seconds)
        self._last_tick = 0.0
        self._running = False

    # ── ICountdown implementation ────────────────────────────────────────

    def start(self) -> None:
        if self._running:
            return
        self._last_tick = time.monotonic()
        self._running = True

    def stop(self) -> None:
        if self._running:
            self._consume_elapsed()
            self._running = False

    def remaining(self) -> float:
        if self._running:
            elapsed = time.monotonic() - self._last_tick
            return max(0.0, self._remaining - elapsed)
        return max(0.0, self._remaining)

    def is_expired(self) -> bool:
        return self.remaining() <= 0.0

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def seconds_left(self) -> int:
        """Whole seconds to display (rounded up)."""
        return math.ceil(self.remaining())

    def restart(self, seconds: float | None = None) -> None:
        """Reset to the full duration (or *seconds*) and start again."""
        if seconds is not None:
            self._duration = float(seconds)
        self._remaining = self._duration
        self._running = False
        self.start()

    def set_remaining(self, seconds: float) -> None:
        """Manually override remaining time (for testing / UI override)."""
        self._remaining = max(0.0, seconds)
        self._last_tick = time.monotonic()

    # ── Internal ─────────────────────────────────────────────────────────

    def _consume_elapsed(self) -> None:
        now = time.monotonic()
        self._remaining = max(0.0, self._remaining - (now - self._last_tick))
        self._last_tick = now
