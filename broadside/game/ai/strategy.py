"""Attack strategy interface and shared move scheduling."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from concurrent.futures import Future
from functools import partial

from broadside.game.ai.errors import SearchExhaustedError, TargetingStateError
from broadside.game.config.difficulty import DifficultyProfile
from broadside.game.core.models import AttackResult, parse_attack_result
from keel.api.logging import get_logger
from keel.math.grid import Coord
from keel.random.rng import RNG, UINT32_MASK
from keel.runtime.clock import GameClock
from keel.runtime.errors import ClockDisposedError

logger = get_logger(__name__)


def default_seed() -> int:
    """Time-derived seed for sessions that do not ask for reproducibility."""
    return time.time_ns() & UINT32_MASK


class AttackStrategy(ABC):
    """Computer attack strategy contract.

    `request_move` returns a future that resolves after a simulated thinking
    delay on the session clock. The move is chosen when the timer fires, so a
    request cancelled before then leaves the search untouched. Only one
    request may be in flight at a time, and `on_attack_result` must report
    the resolved move before the next request.
    """

    def __init__(
        self,
        *,
        width: int,
        height: int,
        difficulty: DifficultyProfile,
        clock: GameClock,
        seed: int | None = None,
    ) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise TypeError(f"Invalid board {name}")
        if not isinstance(difficulty, DifficultyProfile):
            raise TypeError("difficulty must be a DifficultyProfile")
        if not isinstance(clock, GameClock):
            raise TypeError("clock must be a GameClock")
        self._width = width
        self._height = height
        self._difficulty = difficulty
        self._clock = clock
        self._rng = RNG(default_seed() if seed is None else seed)
        self._pending: Future[Coord] | None = None
        self._pending_timer: int | None = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def difficulty(self) -> DifficultyProfile:
        return self._difficulty

    @property
    def seed(self) -> int:
        return self._rng.initial_seed

    @property
    def pending(self) -> bool:
        """Return whether a move request is waiting on its timer."""
        return self._pending is not None and not self._pending.done()

    def request_move(self) -> Future[Coord]:
        """Schedule the next move; the future resolves when the clock fires."""
        if self._clock.disposed:
            raise ClockDisposedError("GameClock has been disposed")
        if self.pending:
            if self._clock.is_pending(self._pending_timer):
                raise TargetingStateError("a move request is already pending")
            # Timer was dropped by the session clock; the request can never resolve.
            self._pending.cancel()

        timing = self._difficulty.timing
        delay_ms = self._rng.next_float(timing.min_delay_ms, timing.max_delay_ms)
        future: Future[Coord] = Future()
        timer_id = self._clock.delay(delay_ms, partial(self._resolve, future))
        future.add_done_callback(partial(self._on_future_done, timer_id))
        self._pending = future
        self._pending_timer = timer_id
        logger.debug("move_requested delay_ms=%.1f", delay_ms, extra={"strategy": self.name})
        return future

    def on_attack_result(self, move: Coord, result: AttackResult | str) -> None:
        """Fold the board's hit/miss outcome for `move` into the search."""
        if not isinstance(move, Coord):
            raise TypeError("move must be a Coord")
        if not (0 <= move.x < self._width and 0 <= move.y < self._height):
            raise ValueError(f"move {move} is outside the board")
        self._apply_feedback(move, parse_attack_result(result))

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def _select_move(self) -> Coord:
        """Consume and return the next untried coordinate."""

    @abstractmethod
    def _apply_feedback(self, move: Coord, result: AttackResult) -> None:
        """Update search state with a validated outcome."""

    def _resolve(self, future: Future[Coord]) -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            move = self._select_move()
        except SearchExhaustedError as exc:
            logger.warning("search_exhausted strategy=%s", self.name)
            future.set_exception(exc)
            return
        logger.debug("move_resolved move=%s", move, extra={"strategy": self.name})
        future.set_result(move)

    def _on_future_done(self, timer_id: int, future: Future[Coord]) -> None:
        if future.cancelled() and not self._clock.disposed:
            self._clock.cancel(timer_id)
