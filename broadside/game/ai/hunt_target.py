"""Hunt/target attack strategy with parity hunting and direction locking."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from enum import StrEnum

from broadside.game.ai.errors import SearchExhaustedError, TargetingStateError
from broadside.game.ai.strategy import AttackStrategy
from broadside.game.config.difficulty import DifficultyProfile
from broadside.game.core.models import AttackResult
from keel.api.logging import get_logger
from keel.math.grid import CARDINALS, ORIGIN, Coord
from keel.runtime.clock import GameClock

logger = get_logger(__name__)


class TargetingPhase(StrEnum):
    """Targeting sub-state of a hunt/target search."""

    HUNTING = "hunting"
    ANCHORED = "anchored"
    DIRECTED = "directed"


class HuntTargetStrategy(AttackStrategy):
    """Seeded hunt/target search.

    Hunting draws cells from two shuffled parity stacks, even cells first:
    any ship of length two or more covers a cell of each parity, so the even
    stack alone finds every such ship. The first remembered hit anchors a
    targeting session around its neighbors; a second hit next to the anchor
    locks the search onto that line.

    Both the hunt stacks and the candidate list are filtered lazily against
    the untried set when popped, so they may hold stale entries.

    The difficulty's accuracy gate is drawn afresh each time it is consulted:
    once when a move is selected and once more when a miss is reported.
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
        super().__init__(width=width, height=height, difficulty=difficulty, clock=clock, seed=seed)
        self._max_bound = Coord(width - 1, height - 1)

        cells = [Coord(x, y) for x in range(width) for y in range(height)]
        self._untried: set[Coord] = set(cells)
        shuffled = self._rng.shuffle(cells)
        self._even_queue: list[Coord] = [cell for cell in shuffled if (cell.x + cell.y) % 2 == 0]
        self._odd_queue: list[Coord] = [cell for cell in shuffled if (cell.x + cell.y) % 2 == 1]

        self._anchor: Coord | None = None
        self._targets: deque[Coord] | None = None
        self._search_direction: Coord | None = None
        self._miss_tolerance = 0
        self._last_hunt_move: Coord | None = None

    @property
    def phase(self) -> TargetingPhase:
        if self._targets is None:
            return TargetingPhase.HUNTING
        if self._search_direction is None:
            return TargetingPhase.ANCHORED
        return TargetingPhase.DIRECTED

    @property
    def anchor(self) -> Coord | None:
        return self._anchor

    @property
    def search_direction(self) -> Coord | None:
        return self._search_direction

    @property
    def miss_tolerance(self) -> int:
        return self._miss_tolerance

    @property
    def candidates(self) -> tuple[Coord, ...]:
        return tuple(self._targets or ())

    @property
    def remaining_count(self) -> int:
        return len(self._untried)

    def _select_move(self) -> Coord:
        if self._should_target():
            move = self._pop_candidate()
            if move is not None:
                return move
            self._reset_targeting("candidates_exhausted")
        return self._pop_hunt()

    def _apply_feedback(self, move: Coord, result: AttackResult) -> None:
        self._untried.discard(move)
        if result is AttackResult.HIT:
            self._on_hit(move)
        else:
            self._on_miss()

    def _should_target(self) -> bool:
        if self._targets is None:
            return False
        targeting = self._difficulty.targeting
        if not targeting.can_target:
            return False
        return self._rng.next() < targeting.accuracy

    def _pop_candidate(self) -> Coord | None:
        targets = self._targets or deque()
        while targets:
            cell = targets.popleft()
            if cell in self._untried:
                self._untried.remove(cell)
                self._last_hunt_move = None
                return cell
        return None

    def _pop_hunt(self) -> Coord:
        for queue in (self._even_queue, self._odd_queue):
            while queue:
                cell = queue.pop()
                if cell in self._untried:
                    self._untried.remove(cell)
                    self._last_hunt_move = cell
                    return cell
        raise SearchExhaustedError("No moves remaining")

    def _on_hit(self, move: Coord) -> None:
        if not self._difficulty.memory.remember_shots:
            return
        self._miss_tolerance = 0

        if self._anchor is None:
            self._anchor = move
            self._targets = deque(self._rng.shuffle(self._untried_neighbors(move)))
            logger.debug(
                "targeting_anchored anchor=%s candidates=%d",
                move,
                len(self._targets),
                extra={"strategy": self.name},
            )
            return

        if self._search_direction is not None:
            return

        delta = move - self._anchor
        if delta not in CARDINALS:
            if move == self._last_hunt_move:
                # A hunt shot found another ship; keep following the current lead.
                logger.debug("hit_outside_lead move=%s anchor=%s", move, self._anchor)
                return
            raise TargetingStateError(
                f"hit at {move} is not adjacent to anchor {self._anchor}"
            )

        self._search_direction = delta
        self._targets = deque(self._build_candidates(self._anchor, move, delta))
        logger.debug(
            "targeting_directed anchor=%s direction=%s candidates=%d",
            self._anchor,
            delta,
            len(self._targets),
            extra={"strategy": self.name},
        )

    def _on_miss(self) -> None:
        if not self._should_target():
            return
        self._miss_tolerance += 1
        if self._miss_tolerance > self._difficulty.memory.max_miss_tolerance:
            self._reset_targeting("miss_tolerance_exceeded")

    def _build_candidates(self, anchor: Coord, second_hit: Coord, direction: Coord) -> list[Coord]:
        # Extend the hit line past both known ends; a ship cannot cross a resolved cell.
        return [*self._chain(second_hit, direction), *self._chain(anchor, -direction)]

    def _chain(self, origin: Coord, direction: Coord) -> Iterator[Coord]:
        cursor = origin + direction
        while cursor.is_within(ORIGIN, self._max_bound) and cursor in self._untried:
            yield cursor
            cursor = cursor + direction

    def _untried_neighbors(self, cell: Coord) -> list[Coord]:
        neighbors = (cell + direction for direction in CARDINALS)
        return [n for n in neighbors if n.is_within(ORIGIN, self._max_bound) and n in self._untried]

    def _reset_targeting(self, reason: str) -> None:
        logger.debug("targeting_reset reason=%s anchor=%s", reason, self._anchor)
        self._anchor = None
        self._targets = None
        self._search_direction = None
        self._miss_tolerance = 0
