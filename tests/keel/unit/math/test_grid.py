from __future__ import annotations

import dataclasses

import pytest

from keel.math.grid import CARDINALS, DOWN, LEFT, ONE, ORIGIN, RIGHT, UP, Coord, dot


@pytest.mark.parametrize("x,y", [(None, 0), (1, None), (0.25, 1), ("3", 0), (True, 0)])
def test_coord_rejects_non_integer_components(x, y) -> None:
    with pytest.raises(TypeError):
        Coord(x, y)


def test_coord_is_immutable_and_hashable() -> None:
    coord = Coord(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        coord.x = 5  # type: ignore[misc]
    assert {Coord(1, 2), Coord(1, 2)} == {coord}


def test_coord_arithmetic_returns_new_values() -> None:
    a = Coord(1, 2)
    b = Coord(2, 1)
    assert a + b == Coord(3, 3)
    assert a - b == Coord(-1, 1)
    assert -a == Coord(-1, -2)
    assert a.scale(5) == Coord(5, 10)
    assert ORIGIN - RIGHT == LEFT
    assert a == Coord(1, 2)


def test_coord_arithmetic_rejects_foreign_operands() -> None:
    with pytest.raises(TypeError):
        ORIGIN + (0, 1)  # type: ignore[operator]
    with pytest.raises(TypeError):
        ORIGIN - 1  # type: ignore[operator]
    with pytest.raises(TypeError):
        ONE.scale(1.5)  # type: ignore[arg-type]


def test_cardinal_constants() -> None:
    assert RIGHT == Coord(1, 0)
    assert LEFT == Coord(-1, 0)
    assert UP == Coord(0, -1)
    assert DOWN == Coord(0, 1)
    assert set(CARDINALS) == {RIGHT, LEFT, UP, DOWN}
    assert all(direction.manhattan_length == 1 for direction in CARDINALS)


def test_metrics_and_dot() -> None:
    assert Coord(55, 21).manhattan_length == 76
    assert Coord(5, 64).distance_to(Coord(56, 32)) == 83
    assert dot(Coord(2, 5), Coord(5, 3)) == 25
    assert dot(Coord(-1, -10), Coord(1, -5)) == 49
    with pytest.raises(TypeError):
        dot(Coord(1, 1), (1, 1))  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "low,high,point,expected",
    [
        ((0, 0), (2, 2), (1, 2), True),
        ((0, 0), (1, 2), (5, 2), False),
        ((-10, -5), (1, 10), (-1, -10), False),
    ],
)
def test_is_within_inclusive_bounds(low, high, point, expected) -> None:
    assert Coord(*point).is_within(Coord(*low), Coord(*high)) is expected


def test_clamp_and_improper_bounds() -> None:
    assert Coord(5, 5).clamp(Coord(0, 0), Coord(10, 2)) == Coord(5, 2)
    assert Coord(-1, -10).clamp(Coord(-10, -5), Coord(1, 10)) == Coord(-1, -5)
    with pytest.raises(ValueError):
        Coord(2, 2).clamp(Coord(5, 5), Coord(1, 1))
    with pytest.raises(ValueError):
        Coord(2, 2).is_within(Coord(5, 5), Coord(1, 1))
    with pytest.raises(TypeError):
        Coord(2, 2).is_within((0, 0), Coord(1, 1))  # type: ignore[arg-type]


def test_string_and_tuple_forms() -> None:
    assert str(Coord(9, 7)) == "(9, 7)"
    assert Coord(3, 1).to_tuple() == (3, 1)
