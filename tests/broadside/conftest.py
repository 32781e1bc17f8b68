from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from broadside.game.ai.strategy import AttackStrategy
from broadside.game.core.models import FleetPlacement, Orientation, ShipPlacement, ShipType
from keel.api.logging import shutdown_logging
from keel.math.grid import Coord
from keel.random.rng import RNG
from keel.runtime.clock import GameClock


def make_valid_fleet() -> FleetPlacement:
    return FleetPlacement(
        ships=[
            ShipPlacement(ShipType.CARRIER, Coord(0, 0), Orientation.VERTICAL),
            ShipPlacement(ShipType.BATTLESHIP, Coord(2, 0), Orientation.VERTICAL),
            ShipPlacement(ShipType.CRUISER, Coord(4, 0), Orientation.VERTICAL),
            ShipPlacement(ShipType.SUBMARINE, Coord(6, 0), Orientation.VERTICAL),
            ShipPlacement(ShipType.DESTROYER, Coord(8, 0), Orientation.VERTICAL),
        ]
    )


@pytest.fixture
def valid_fleet() -> FleetPlacement:
    return make_valid_fleet()


@pytest.fixture
def seeded_rng() -> RNG:
    return RNG(1337)


@pytest.fixture
def clock() -> GameClock:
    return GameClock()


@pytest.fixture
def resolve_move(clock: GameClock) -> Callable[[AttackStrategy], Coord]:
    """Request a move and advance the clock far enough for it to resolve."""

    def _resolve(strategy: AttackStrategy) -> Coord:
        future = strategy.request_move()
        clock.advance(strategy.difficulty.timing.max_delay_ms)
        return future.result(timeout=0)

    return _resolve


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield root
    shutdown_logging()
    root.handlers.clear()
    root.handlers.extend(original_handlers)
    root.setLevel(original_level)
