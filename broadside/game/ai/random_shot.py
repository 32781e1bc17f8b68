"""Random-order attack strategy."""

from __future__ import annotations

from broadside.game.ai.errors import SearchExhaustedError
from broadside.game.ai.strategy import AttackStrategy
from broadside.game.config.difficulty import EASY, DifficultyProfile
from broadside.game.core.models import AttackResult
from keel.math.grid import Coord
from keel.runtime.clock import GameClock


class RandomShotStrategy(AttackStrategy):
    """Fires at every cell exactly once in a seeded random order."""

    def __init__(
        self,
        *,
        width: int,
        height: int,
        clock: GameClock,
        difficulty: DifficultyProfile = EASY,
        seed: int | None = None,
    ) -> None:
        super().__init__(width=width, height=height, difficulty=difficulty, clock=clock, seed=seed)
        cells = [Coord(x, y) for x in range(width) for y in range(height)]
        self._untried = self._rng.shuffle(cells)

    @property
    def remaining_count(self) -> int:
        return len(self._untried)

    def _select_move(self) -> Coord:
        if not self._untried:
            raise SearchExhaustedError("No moves remaining")
        return self._untried.pop()

    def _apply_feedback(self, move: Coord, result: AttackResult) -> None:
        return None
