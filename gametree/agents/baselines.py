"""Baseline player implementations."""
from __future__ import annotations

import random
from typing import Optional, Sequence

from ..rules import GameRules, Move, Position, Side
from .base import Memory, Player


class FirstLegalPlayer(Player):
    """Deterministic player that always offers the first legal move."""

    def moves(self, memory: Memory, position: Position, side: Side) -> Sequence[Move]:
        del memory  # unused
        legal = self.rules.legal_moves(position, side)
        return tuple(legal[:1])


class RandomPlayer(Player):
    """Player that samples uniformly from the available legal moves."""

    def __init__(self, rules: GameRules, seed: Optional[int] = None) -> None:
        super().__init__(rules)
        self._rng = random.Random(seed)

    def moves(self, memory: Memory, position: Position, side: Side) -> Sequence[Move]:
        del memory  # unused
        legal = self.rules.legal_moves(position, side)
        if not legal:
            return ()
        return (legal[self._rng.randrange(len(legal))],)


__all__ = ["FirstLegalPlayer", "RandomPlayer"]
