"""Immutable integer grid coordinates.

Screen-style axes: +x points right, +y points down.
"""

from __future__ import annotations

from dataclasses import dataclass


def _require_int(value: object, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")


def _require_bounds(min_bound: object, max_bound: object) -> None:
    if not isinstance(min_bound, Coord) or not isinstance(max_bound, Coord):
        raise TypeError("bounds must be Coord instances")
    if min_bound.x > max_bound.x or min_bound.y > max_bound.y:
        raise ValueError("min bound exceeds max bound")


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _require_int(self.x, "x")
        _require_int(self.y, "y")

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __add__(self, other: object) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Coord:
        return Coord(-self.x, -self.y)

    def scale(self, factor: int) -> Coord:
        """Return this coordinate multiplied by an integer factor."""
        _require_int(factor, "factor")
        return Coord(self.x * factor, self.y * factor)

    @property
    def manhattan_length(self) -> int:
        return abs(self.x) + abs(self.y)

    def distance_to(self, other: Coord) -> int:
        """Manhattan distance to another coordinate."""
        if not isinstance(other, Coord):
            raise TypeError("other must be a Coord")
        return abs(self.x - other.x) + abs(self.y - other.y)

    def is_within(self, min_bound: Coord, max_bound: Coord) -> bool:
        """Return whether this lies inside the inclusive rectangle."""
        _require_bounds(min_bound, max_bound)
        return min_bound.x <= self.x <= max_bound.x and min_bound.y <= self.y <= max_bound.y

    def clamp(self, min_bound: Coord, max_bound: Coord) -> Coord:
        """Return the nearest coordinate inside the inclusive rectangle."""
        _require_bounds(min_bound, max_bound)
        return Coord(
            min(max(self.x, min_bound.x), max_bound.x),
            min(max(self.y, min_bound.y), max_bound.y),
        )

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


def dot(a: Coord, b: Coord) -> int:
    """Dot product of two coordinates."""
    if not isinstance(a, Coord) or not isinstance(b, Coord):
        raise TypeError("dot expects Coord arguments")
    return a.x * b.x + a.y * b.y


ORIGIN = Coord(0, 0)
ONE = Coord(1, 1)
RIGHT = Coord(1, 0)
LEFT = Coord(-1, 0)
UP = Coord(0, -1)
DOWN = Coord(0, 1)

CARDINALS: tuple[Coord, ...] = (RIGHT, LEFT, UP, DOWN)
