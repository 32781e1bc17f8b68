"""Game clock: cancellable one-shot delays for a single game session."""

from __future__ import annotations

import math
from numbers import Real

from keel.api.logging import get_logger
from keel.runtime.errors import ClockDisposedError
from keel.runtime.scheduler import Scheduler, TaskCallback

logger = get_logger(__name__)


class GameClock:
    """Session-owned delay primitive over a virtual-time scheduler.

    Timers fire only when the owner advances the clock. `dispose` ends the
    session; every later call except `reset` and `advance` raises.
    """

    def __init__(self, scheduler: Scheduler | None = None) -> None:
        self._scheduler = scheduler or Scheduler()
        self._timers: set[int] = set()
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def now_ms(self) -> float:
        return self._scheduler.now_ms

    @property
    def pending_count(self) -> int:
        return len(self._timers)

    def is_pending(self, timer_id: object) -> bool:
        return isinstance(timer_id, int) and timer_id in self._timers

    def delay(self, ms: float, callback: TaskCallback) -> int:
        """Run `callback` once after `ms` milliseconds; return its timer id."""
        self._ensure_alive()
        if isinstance(ms, bool) or not isinstance(ms, Real) or not math.isfinite(ms) or ms <= 0:
            raise TypeError("delay ms must be a positive finite number")
        if not callable(callback):
            raise TypeError("callback must be callable")

        timer_id = 0

        def _fire() -> None:
            self._timers.discard(timer_id)
            callback()

        timer_id = self._scheduler.call_later(float(ms), _fire)
        self._timers.add(timer_id)
        return timer_id

    def cancel(self, timer_id: object) -> bool:
        """Cancel one pending timer; return False for unknown or fired ids."""
        self._ensure_alive()
        if not isinstance(timer_id, int) or timer_id not in self._timers:
            return False
        self._timers.discard(timer_id)
        return self._scheduler.cancel(timer_id)

    def cancel_all(self) -> None:
        self._ensure_alive()
        self._cancel_timers()

    def reset(self) -> None:
        """Cancel all timers and make the clock usable again."""
        self._cancel_timers()
        self._disposed = False

    def dispose(self) -> None:
        self._ensure_alive()
        self._cancel_timers()
        self._disposed = True

    def advance(self, delta_ms: float) -> int:
        """Move virtual time forward and fire due timers."""
        return self._scheduler.advance(delta_ms)

    def _cancel_timers(self) -> None:
        if self._timers:
            logger.debug("game_clock_cancel count=%d", len(self._timers))
        for timer_id in self._timers:
            self._scheduler.cancel(timer_id)
        self._timers.clear()

    def _ensure_alive(self) -> None:
        if self._disposed:
            raise ClockDisposedError("GameClock has been disposed")
