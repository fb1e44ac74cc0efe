"""Exhaustive minimax oracle for small two-sided games.

Searches every line to the end of the game and memoizes results by
(position, side), so positions must be hashable. Intended for games small
enough to solve outright, where it serves as a perfect opponent and as a
reference for checking other players.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .base import Memory, Player

if TYPE_CHECKING:
    from ..rules import GameRules, Move, Position, Side

WIN_VALUE = 1
DRAW_VALUE = 0
LOSS_VALUE = -1


class MinimaxPlayer(Player):
    """Player that offers every move with the best game-theoretic value."""

    def __init__(self, rules: GameRules) -> None:
        super().__init__(rules)
        self._table: dict[tuple[Position, Side], int] = {}

    def moves(self, memory: Memory, position: Position, side: Side) -> Sequence[Move]:
        del memory  # unused
        values = self.move_values(position, side)
        if not values:
            return ()
        best = max(values.values())
        return tuple(move for move, value in values.items() if value == best)

    def move_values(self, position: Position, side: Side) -> dict[Move, int]:
        """Value of each legal move for ``side``: 1 win, 0 draw, -1 loss."""

        following = self.rules.next_side(position, side)
        return {
            move: -self.value(self.rules.apply(position, side, move), following)
            for move in self.rules.legal_moves(position, side)
        }

    def value(self, position: Position, side: Side) -> int:
        """Game-theoretic value of ``position`` for ``side``, who is to move."""

        key = (position, side)
        cached = self._table.get(key)
        if cached is not None:
            return cached

        sides = self.rules.sides(position)
        if len(sides) != 2:
            raise ValueError(f"MinimaxPlayer supports two sides, got {len(sides)}")

        winners = [s for s in sides if self.rules.is_winning(position, s)]
        if winners:
            result = WIN_VALUE if side in winners else LOSS_VALUE
        else:
            legal = self.rules.legal_moves(position, side)
            if not legal:
                result = DRAW_VALUE
            else:
                following = self.rules.next_side(position, side)
                result = LOSS_VALUE
                for move in legal:
                    result = max(result, -self.value(self.rules.apply(position, side, move), following))
                    if result == WIN_VALUE:
                        break

        self._table[key] = result
        return result


__all__ = ["DRAW_VALUE", "LOSS_VALUE", "MinimaxPlayer", "WIN_VALUE"]
