"""Deterministic random primitives."""

from keel.random.rng import RNG, UINT32_MASK, UINT32_RANGE

__all__ = ["RNG", "UINT32_MASK", "UINT32_RANGE"]
