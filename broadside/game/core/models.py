"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from keel.math.grid import Coord

BOARD_WIDTH = 10
BOARD_HEIGHT = 10


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class ShipType(StrEnum):
    """Classic Battleship ship types."""

    CARRIER = "CARRIER"
    BATTLESHIP = "BATTLESHIP"
    CRUISER = "CRUISER"
    SUBMARINE = "SUBMARINE"
    DESTROYER = "DESTROYER"

    @property
    def size(self) -> int:
        return SHIP_LENGTHS[self]


SHIP_LENGTHS: dict[ShipType, int] = {
    ShipType.CARRIER: 5,
    ShipType.BATTLESHIP: 4,
    ShipType.CRUISER: 3,
    ShipType.SUBMARINE: 3,
    ShipType.DESTROYER: 2,
}

DEFAULT_FLEET: tuple[ShipType, ...] = (
    ShipType.CARRIER,
    ShipType.BATTLESHIP,
    ShipType.CRUISER,
    ShipType.SUBMARINE,
    ShipType.DESTROYER,
)


class AttackResult(StrEnum):
    """Outcome reported back to an attack strategy."""

    HIT = "hit"
    MISS = "miss"


class CellState(StrEnum):
    """Visible state of one board cell."""

    CLEAN = "clean"
    HIT = "hit"
    MISS = "miss"


class ShotResult(StrEnum):
    """Result of applying a single shot to a board."""

    MISS = "MISS"
    HIT = "HIT"
    SUNK = "SUNK"
    REPEAT = "REPEAT"
    INVALID = "INVALID"

    def to_attack_result(self) -> AttackResult:
        """Collapse a resolved shot to the hit/miss feedback strategies consume."""
        if self is ShotResult.MISS:
            return AttackResult.MISS
        if self in (ShotResult.HIT, ShotResult.SUNK):
            return AttackResult.HIT
        raise ValueError(f"shot result {self.value} carries no attack feedback")


def parse_attack_result(value: object) -> AttackResult:
    """Validate strategy feedback; only hit or miss are meaningful."""
    if isinstance(value, AttackResult):
        return value
    try:
        return AttackResult(value)
    except ValueError:
        raise ValueError(f"Invalid attack result: {value!r}") from None


@dataclass(frozen=True, slots=True)
class ShipPlacement:
    """Placement of a single ship."""

    ship_type: ShipType
    bow: Coord
    orientation: Orientation


@dataclass(slots=True)
class FleetPlacement:
    """Collection of ship placements."""

    ships: list[ShipPlacement]

    def by_type(self, ship_type: ShipType) -> ShipPlacement | None:
        """Find ship placement for the given type."""
        for ship in self.ships:
            if ship.ship_type == ship_type:
                return ship
        return None


def cells_for_placement(placement: ShipPlacement) -> list[Coord]:
    """Compute occupied cells for a ship placement."""
    result: list[Coord] = []
    for i in range(placement.ship_type.size):
        if placement.orientation is Orientation.HORIZONTAL:
            result.append(Coord(placement.bow.x + i, placement.bow.y))
        else:
            result.append(Coord(placement.bow.x, placement.bow.y + i))
    return result
