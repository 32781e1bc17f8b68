"""Fleet placement validation and construction."""

from __future__ import annotations

from collections.abc import Sequence

from broadside.game.core.board import BoardState
from broadside.game.core.models import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DEFAULT_FLEET,
    FleetPlacement,
    Orientation,
    ShipPlacement,
    ShipType,
)
from keel.math.grid import Coord
from keel.random.rng import RNG

_MAX_FLEET_ATTEMPTS = 400


def validate_fleet(
    fleet: FleetPlacement,
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
    expected: Sequence[ShipType] = DEFAULT_FLEET,
) -> tuple[bool, str]:
    """Validate whether a fleet exactly matches the expected ship roster."""
    seen: set[ShipType] = set()
    board = BoardState(width=width, height=height)

    if len(fleet.ships) != len(expected):
        return False, f"Fleet must contain exactly {len(expected)} ships."

    for placement in fleet.ships:
        if placement.ship_type in seen:
            return False, f"Duplicate ship type: {placement.ship_type.value}."
        seen.add(placement.ship_type)
        if not board.can_place(placement):
            return False, f"Invalid placement for {placement.ship_type.value}."
        board.place_ship(len(seen), placement)

    missing = [ship for ship in expected if ship not in seen]
    if missing:
        return False, f"Missing ships: {', '.join(ship.value for ship in missing)}."
    return True, ""


def build_board_from_fleet(
    fleet: FleetPlacement,
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
    expected: Sequence[ShipType] = DEFAULT_FLEET,
) -> BoardState:
    """Create a board state from a validated fleet placement."""
    valid, reason = validate_fleet(fleet, width=width, height=height, expected=expected)
    if not valid:
        raise ValueError(reason)
    board = BoardState(width=width, height=height)
    for idx, placement in enumerate(fleet.ships, start=1):
        board.place_ship(idx, placement)
    return board


def random_fleet(
    rng: RNG,
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
    ships: Sequence[ShipType] = DEFAULT_FLEET,
) -> FleetPlacement:
    """Generate a random valid fleet placement with non-touching ships."""
    for _ in range(_MAX_FLEET_ATTEMPTS):
        generated = _generate_fleet(rng, width, height, ships)
        if generated is not None:
            return generated
    raise RuntimeError(f"Failed to place fleet on a {width}x{height} board.")


def _generate_fleet(
    rng: RNG, width: int, height: int, ships: Sequence[ShipType]
) -> FleetPlacement | None:
    board = BoardState(width=width, height=height)
    placements_by_type: dict[ShipType, ShipPlacement] = {}

    for ship_type in rng.shuffle(ships):
        candidates = _candidate_placements(board, ship_type)
        if not candidates:
            return None
        placement = rng.pick(candidates)
        board.place_ship(len(placements_by_type) + 1, placement)
        placements_by_type[ship_type] = placement

    return FleetPlacement(ships=[placements_by_type[ship_type] for ship_type in ships])


def _candidate_placements(board: BoardState, ship_type: ShipType) -> list[ShipPlacement]:
    candidates: list[ShipPlacement] = []
    for orientation in (Orientation.HORIZONTAL, Orientation.VERTICAL):
        for y in range(board.height):
            for x in range(board.width):
                placement = ShipPlacement(
                    ship_type=ship_type, bow=Coord(x, y), orientation=orientation
                )
                if board.can_place(placement):
                    candidates.append(placement)
    return candidates
