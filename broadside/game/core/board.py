"""Board state representation and mutation helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from broadside.game.core.models import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    CellState,
    ShipPlacement,
    ShipType,
    ShotResult,
    cells_for_placement,
)
from keel.math.grid import Coord

_SHOT_NONE = 0
_SHOT_MISS = 1
_SHOT_HIT = 2


@dataclass(slots=True)
class BoardState:
    """Numpy-backed board state, indexed as [y, x]."""

    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT
    ships: np.ndarray = field(default_factory=lambda: np.zeros((0, 0), dtype=np.int16))
    shots: np.ndarray = field(default_factory=lambda: np.zeros((0, 0), dtype=np.int8))
    ship_cells: dict[int, list[Coord]] = field(default_factory=dict)
    ship_types: dict[int, ShipType] = field(default_factory=dict)
    ship_remaining: dict[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise TypeError(f"board {name} must be a positive integer")
        shape = (self.height, self.width)
        if self.ships.shape != shape:
            self.ships = np.zeros(shape, dtype=np.int16)
        if self.shots.shape != shape:
            self.shots = np.zeros(shape, dtype=np.int8)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def can_place(self, placement: ShipPlacement) -> bool:
        """Return whether a placement is in bounds and neither overlaps nor touches a ship."""
        for cell in cells_for_placement(placement):
            if not self.in_bounds(cell):
                return False
            y0, y1 = max(cell.y - 1, 0), min(cell.y + 2, self.height)
            x0, x1 = max(cell.x - 1, 0), min(cell.x + 2, self.width)
            if np.any(self.ships[y0:y1, x0:x1] != 0):
                return False
        return True

    def place_ship(self, ship_id: int, placement: ShipPlacement) -> None:
        """Place a ship on the board."""
        if ship_id <= 0:
            raise ValueError("ship_id must be > 0")
        if not self.can_place(placement):
            raise ValueError(f"Invalid placement for {placement.ship_type.value}.")
        cells = cells_for_placement(placement)
        for cell in cells:
            self.ships[cell.y, cell.x] = ship_id
        self.ship_cells[ship_id] = cells
        self.ship_types[ship_id] = placement.ship_type
        self.ship_remaining[ship_id] = len(cells)

    def was_shot(self, coord: Coord) -> bool:
        """Return whether this cell was previously targeted."""
        return self.shots[coord.y, coord.x] != _SHOT_NONE

    def cell_state(self, coord: Coord) -> CellState:
        """Return the visible state of a cell."""
        if not self.in_bounds(coord):
            raise ValueError(f"coordinate {coord} is outside the board")
        mark = int(self.shots[coord.y, coord.x])
        if mark == _SHOT_HIT:
            return CellState.HIT
        if mark == _SHOT_MISS:
            return CellState.MISS
        return CellState.CLEAN

    def apply_shot(self, coord: Coord) -> tuple[ShotResult, ShipType | None]:
        """Apply a shot and return result + sunk ship type if any."""
        if not self.in_bounds(coord):
            return ShotResult.INVALID, None
        if self.was_shot(coord):
            return ShotResult.REPEAT, None

        ship_id = int(self.ships[coord.y, coord.x])
        if ship_id == 0:
            self.shots[coord.y, coord.x] = _SHOT_MISS
            return ShotResult.MISS, None

        self.shots[coord.y, coord.x] = _SHOT_HIT
        self.ship_remaining[ship_id] -= 1
        if self.ship_remaining[ship_id] == 0:
            return ShotResult.SUNK, self.ship_types[ship_id]
        return ShotResult.HIT, None

    def ship_health(self, ship_id: int) -> float:
        """Return the fraction of a ship's cells not yet hit."""
        if ship_id not in self.ship_cells:
            raise KeyError(f"unknown ship id: {ship_id}")
        return self.ship_remaining[ship_id] / len(self.ship_cells[ship_id])

    def all_ships_sunk(self) -> bool:
        """Return whether every ship has been sunk."""
        return all(remaining == 0 for remaining in self.ship_remaining.values())

    def shots_fired(self) -> int:
        return int(np.count_nonzero(self.shots))
