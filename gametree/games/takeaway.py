"""Take-away game for any number of players.

Players take turns removing between 1 and ``max_take`` objects from a single
pile; whoever takes the last object wins. With two players the side to move
loses exactly when the pile is a multiple of ``max_take + 1``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..exceptions import GameOverError, IllegalMoveError, InvalidConfigError
from ..rules import GameRules


@dataclass(frozen=True)
class TakeawayPosition:
    """Objects left and the player who took last."""

    remaining: int
    last_taker: Optional[int] = None


class TakeawayRules(GameRules):
    """Subtraction game over sides ``0 .. players - 1``."""

    def __init__(self, pile: int = 10, max_take: int = 3, players: int = 2) -> None:
        if pile < 1:
            raise InvalidConfigError("pile", pile, "must be positive")
        if max_take < 1:
            raise InvalidConfigError("max_take", max_take, "must be positive")
        if players < 2:
            raise InvalidConfigError("players", players, "must be at least 2")
        self.pile = pile
        self.max_take = max_take
        self.players = players
        self._sides = tuple(range(players))

    @property
    def name(self) -> str:
        return f"takeaway({self.pile},{self.max_take},{self.players})"

    def initial_position(self) -> TakeawayPosition:
        return TakeawayPosition(remaining=self.pile)

    def sides(self, position: TakeawayPosition) -> Sequence[int]:
        del position  # unused
        return self._sides

    def legal_moves(self, position: TakeawayPosition, side: int) -> Sequence[int]:
        del side  # unused
        return tuple(range(1, min(self.max_take, position.remaining) + 1))

    def apply(self, position: TakeawayPosition, side: int, move: int) -> TakeawayPosition:
        if position.remaining == 0:
            raise GameOverError()
        if side not in self._sides or not 1 <= move <= min(self.max_take, position.remaining):
            raise IllegalMoveError(move, side)
        return TakeawayPosition(remaining=position.remaining - move, last_taker=side)

    def next_side(self, position: TakeawayPosition, side: int) -> int:
        del position  # unused
        return (side + 1) % self.players

    def is_winning(self, position: TakeawayPosition, side: int) -> bool:
        return position.remaining == 0 and position.last_taker == side


__all__ = ["TakeawayPosition", "TakeawayRules"]
