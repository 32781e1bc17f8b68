"""Player identity and attack strategy binding."""

from __future__ import annotations

from concurrent.futures import Future
from enum import StrEnum
from typing import Protocol, runtime_checkable

from broadside.game.core.board import BoardState
from broadside.game.core.models import AttackResult
from keel.math.grid import Coord


class PlayerKind(StrEnum):
    HUMAN = "human"
    COMPUTER = "computer"


@runtime_checkable
class MoveSource(Protocol):
    """Anything that can pick attack coordinates and learn from outcomes."""

    def request_move(self) -> Future[Coord]: ...

    def on_attack_result(self, move: Coord, result: AttackResult | str) -> None: ...


class Player:
    """A named participant owning a board and an attack strategy."""

    def __init__(
        self,
        name: str,
        kind: PlayerKind | str,
        strategy: MoveSource,
        board: BoardState | None = None,
    ) -> None:
        if not isinstance(name, str):
            raise TypeError("name must be a string")
        self._name = name
        try:
            self._kind = PlayerKind(kind)
        except ValueError:
            raise ValueError(f"Invalid player kind: {kind!r}") from None
        self._board = board or BoardState()
        self.set_strategy(strategy)

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> PlayerKind:
        return self._kind

    @property
    def board(self) -> BoardState:
        return self._board

    @property
    def strategy(self) -> MoveSource:
        return self._strategy

    def set_strategy(self, strategy: MoveSource) -> None:
        if not isinstance(strategy, MoveSource):
            raise TypeError("Invalid attack strategy")
        self._strategy = strategy

    def request_attack(self) -> Future[Coord]:
        return self._strategy.request_move()

    def report_attack(self, move: Coord, result: AttackResult | str) -> None:
        self._strategy.on_attack_result(move, result)
