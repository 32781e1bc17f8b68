"""Computer opponent attack strategies."""

from broadside.game.ai.errors import SearchExhaustedError, TargetingStateError
from broadside.game.ai.hunt_target import HuntTargetStrategy, TargetingPhase
from broadside.game.ai.random_shot import RandomShotStrategy
from broadside.game.ai.strategy import AttackStrategy

__all__ = [
    "AttackStrategy",
    "HuntTargetStrategy",
    "RandomShotStrategy",
    "SearchExhaustedError",
    "TargetingPhase",
    "TargetingStateError",
]
