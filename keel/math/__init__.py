"""Integer grid math."""

from keel.math.grid import CARDINALS, DOWN, LEFT, ONE, ORIGIN, RIGHT, UP, Coord, dot

__all__ = ["CARDINALS", "Coord", "DOWN", "LEFT", "ONE", "ORIGIN", "RIGHT", "UP", "dot"]
