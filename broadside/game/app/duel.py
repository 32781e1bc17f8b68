"""Headless computer-versus-fleet battle orchestration."""

from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass, field

from broadside.game.ai.hunt_target import HuntTargetStrategy
from broadside.game.ai.random_shot import RandomShotStrategy
from broadside.game.ai.strategy import AttackStrategy, default_seed
from broadside.game.config.difficulty import DifficultyProfile, resolve_difficulty
from broadside.game.core.board import BoardState
from broadside.game.core.fleet import build_board_from_fleet, random_fleet
from broadside.game.core.models import ShipType, ShotResult
from broadside.game.core.player import Player, PlayerKind
from broadside.game.infra.config import AppConfig
from keel.api.logging import get_logger
from keel.math.grid import Coord
from keel.random.rng import RNG
from keel.runtime.clock import GameClock

logger = get_logger(__name__)

STRATEGY_KINDS: tuple[str, ...] = ("hunt", "random")


@dataclass(frozen=True, slots=True)
class ShotRecord:
    """One resolved attack."""

    turn: int
    move: Coord
    result: ShotResult
    sunk: ShipType | None
    at_ms: float


@dataclass(frozen=True, slots=True)
class DuelSummary:
    """Outcome of a finished or aborted duel."""

    attacker: str
    shots: int
    hits: int
    sunk: tuple[ShipType, ...]
    won: bool
    elapsed_ms: float
    history: tuple[ShotRecord, ...] = field(default_factory=tuple)

    @property
    def accuracy(self) -> float:
        return self.hits / self.shots if self.shots else 0.0


def build_strategy(
    kind: str,
    *,
    width: int,
    height: int,
    difficulty: DifficultyProfile,
    clock: GameClock,
    seed: int | None = None,
) -> AttackStrategy:
    """Construct an attack strategy by kind name."""
    normalized = kind.strip().lower()
    if normalized == "hunt":
        return HuntTargetStrategy(
            width=width, height=height, difficulty=difficulty, clock=clock, seed=seed
        )
    if normalized == "random":
        return RandomShotStrategy(
            width=width, height=height, difficulty=difficulty, clock=clock, seed=seed
        )
    raise ValueError(f"unknown strategy {kind!r}; expected one of: {', '.join(STRATEGY_KINDS)}")


def create_duel(config: AppConfig, clock: GameClock | None = None) -> Duel:
    """Wire a computer attacker against a random fleet from app settings."""
    seed = default_seed() if config.seed is None else config.seed
    clock = clock or GameClock()
    difficulty = resolve_difficulty(config.difficulty)
    strategy = build_strategy(
        config.strategy,
        width=config.width,
        height=config.height,
        difficulty=difficulty,
        clock=clock,
        seed=seed,
    )
    # Separate stream so the fleet layout does not mirror the attacker's shuffle.
    fleet = random_fleet(RNG(seed + 1), width=config.width, height=config.height)
    target_board = build_board_from_fleet(fleet, width=config.width, height=config.height)
    attacker = Player(f"computer-{difficulty.id}", PlayerKind.COMPUTER, strategy)
    logger.info(
        "duel_created difficulty=%s strategy=%s seed=%d board=%dx%d",
        difficulty.id,
        config.strategy,
        seed,
        config.width,
        config.height,
    )
    return Duel(attacker, target_board, clock)


class Duel:
    """Drives one attacker against a fleet board on a session clock.

    The clock is advanced in fixed ticks, the way a host frame loop would,
    until each pending move resolves.
    """

    def __init__(
        self,
        attacker: Player,
        target_board: BoardState,
        clock: GameClock,
        *,
        tick_ms: float = 50.0,
    ) -> None:
        if tick_ms <= 0.0:
            raise ValueError("tick_ms must be > 0")
        self._attacker = attacker
        self._board = target_board
        self._clock = clock
        self._tick_ms = tick_ms
        self._history: list[ShotRecord] = []
        self._pending: Future[Coord] | None = None
        self._aborted = False

    @property
    def history(self) -> tuple[ShotRecord, ...]:
        return tuple(self._history)

    @property
    def finished(self) -> bool:
        return self._aborted or self._board.all_ships_sunk()

    def step(self) -> ShotRecord:
        """Request, resolve, apply and report a single attack."""
        if self.finished:
            raise RuntimeError("duel is already finished")
        future = self._attacker.request_attack()
        self._pending = future
        while not future.done():
            if self._clock.pending_count == 0:
                raise RuntimeError("move request can no longer resolve")
            self._clock.advance(self._tick_ms)
        self._pending = None
        move = future.result()

        result, sunk = self._board.apply_shot(move)
        if result in (ShotResult.INVALID, ShotResult.REPEAT):
            raise RuntimeError(f"strategy produced unusable move {move}: {result.value}")
        self._attacker.report_attack(move, result.to_attack_result())

        record = ShotRecord(
            turn=len(self._history) + 1,
            move=move,
            result=result,
            sunk=sunk,
            at_ms=self._clock.now_ms,
        )
        self._history.append(record)
        if sunk is not None:
            logger.info("ship_sunk attacker=%s ship=%s turn=%d", self._attacker.name, sunk.value, record.turn)
        else:
            logger.debug("shot attacker=%s move=%s result=%s", self._attacker.name, move, result.value)
        return record

    def run(self, max_turns: int | None = None) -> DuelSummary:
        """Play until every ship is sunk, the duel is aborted, or `max_turns` shots."""
        while not self.finished:
            if max_turns is not None and len(self._history) >= max_turns:
                break
            self.step()
        summary = self.summary()
        logger.info(
            "duel_finished attacker=%s shots=%d hits=%d won=%s",
            summary.attacker,
            summary.shots,
            summary.hits,
            summary.won,
        )
        return summary

    def abort(self) -> None:
        """End the session early, dropping any pending move."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        if not self._clock.disposed:
            self._clock.cancel_all()
        self._aborted = True
        logger.info("duel_aborted attacker=%s shots=%d", self._attacker.name, len(self._history))

    def summary(self) -> DuelSummary:
        hits = [r for r in self._history if r.result in (ShotResult.HIT, ShotResult.SUNK)]
        return DuelSummary(
            attacker=self._attacker.name,
            shots=len(self._history),
            hits=len(hits),
            sunk=tuple(r.sunk for r in self._history if r.sunk is not None),
            won=self._board.all_ships_sunk(),
            elapsed_ms=self._clock.now_ms,
            history=tuple(self._history),
        )
