from __future__ import annotations

import pytest

from broadside.game.core.fleet import build_board_from_fleet, random_fleet, validate_fleet
from broadside.game.core.models import FleetPlacement, Orientation, ShipPlacement, ShipType
from keel.math.grid import Coord
from keel.random.rng import RNG


def test_validate_fleet_accepts_valid_layout(valid_fleet: FleetPlacement) -> None:
    assert validate_fleet(valid_fleet) == (True, "")


def test_validate_fleet_reports_wrong_count(valid_fleet: FleetPlacement) -> None:
    fleet = FleetPlacement(ships=valid_fleet.ships[:4])
    valid, reason = validate_fleet(fleet)
    assert not valid
    assert "exactly 5" in reason


def test_validate_fleet_reports_duplicates(valid_fleet: FleetPlacement) -> None:
    ships = list(valid_fleet.ships[:4])
    ships.append(ShipPlacement(ShipType.CARRIER, Coord(0, 7), Orientation.HORIZONTAL))
    valid, reason = validate_fleet(FleetPlacement(ships=ships))
    assert not valid
    assert "Duplicate" in reason


def test_validate_fleet_reports_touching_ships(valid_fleet: FleetPlacement) -> None:
    ships = list(valid_fleet.ships[:4])
    ships.append(ShipPlacement(ShipType.DESTROYER, Coord(7, 0), Orientation.VERTICAL))
    valid, reason = validate_fleet(FleetPlacement(ships=ships))
    assert not valid
    assert "DESTROYER" in reason


def test_build_board_from_fleet(valid_fleet: FleetPlacement) -> None:
    board = build_board_from_fleet(valid_fleet)
    assert sum(board.ship_remaining.values()) == 17
    with pytest.raises(ValueError):
        build_board_from_fleet(FleetPlacement(ships=[]))


def test_random_fleet_is_valid_and_seeded(seeded_rng: RNG) -> None:
    fleet = random_fleet(seeded_rng)
    assert validate_fleet(fleet) == (True, "")
    assert [ship.ship_type for ship in fleet.ships] == list(ShipType)
    assert random_fleet(RNG(1337)) == random_fleet(RNG(1337))


def test_random_fleet_fails_when_board_is_too_small() -> None:
    with pytest.raises(RuntimeError):
        random_fleet(RNG(1), width=3, height=3)
