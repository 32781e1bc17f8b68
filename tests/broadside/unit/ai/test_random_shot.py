from __future__ import annotations

import pytest

from broadside.game.ai.errors import SearchExhaustedError
from broadside.game.ai.random_shot import RandomShotStrategy
from broadside.game.config.difficulty import EASY
from keel.math.grid import Coord


def test_random_shot_fires_every_cell_once_then_exhausts(clock, resolve_move) -> None:
    ai = RandomShotStrategy(width=4, height=3, clock=clock, seed=5)
    assert ai.difficulty is EASY
    moves = []
    for _ in range(12):
        move = resolve_move(ai)
        moves.append(move)
        ai.on_attack_result(move, "hit")
    assert set(moves) == {Coord(x, y) for x in range(4) for y in range(3)}
    assert ai.remaining_count == 0

    future = ai.request_move()
    clock.advance(EASY.timing.max_delay_ms)
    assert isinstance(future.exception(timeout=0), SearchExhaustedError)


def test_random_shot_is_seeded(clock, resolve_move) -> None:
    first = RandomShotStrategy(width=5, height=5, clock=clock, seed=11)
    second = RandomShotStrategy(width=5, height=5, clock=clock, seed=11)
    assert [resolve_move(first) for _ in range(10)] == [resolve_move(second) for _ in range(10)]


def test_random_shot_validates_feedback(clock) -> None:
    ai = RandomShotStrategy(width=5, height=5, clock=clock, seed=1)
    with pytest.raises(TypeError):
        ai.on_attack_result("A1", "hit")
    with pytest.raises(ValueError):
        ai.on_attack_result(Coord(0, 0), "sunk")
