"""Keel: small deterministic engine primitives for turn-based grid games."""

from keel.math.grid import Coord
from keel.random.rng import RNG
from keel.runtime.clock import GameClock

__all__ = ["Coord", "GameClock", "RNG"]
