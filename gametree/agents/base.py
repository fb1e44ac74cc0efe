"""Player abstractions driven by the game runner."""
from __future__ import annotations

import abc
from typing import Any, Iterable, Sequence

from ..exceptions import IllegalMoveError
from ..rules import GameRules, Move, Position, Side

# Whatever a player carries from one turn to the next; None when it has nothing.
Memory = Any


class Player(abc.ABC):
    """Base class for players.

    The runner threads a player's memory through four calls: ``start`` once
    per game, ``next`` before the player's own turn, ``moves`` to get the
    candidates it would play, and ``advance`` after every move by any side.
    Players never keep per-game state on ``self``, so one instance can sit
    on several sides of the same game.
    """

    def __init__(self, rules: GameRules) -> None:
        self.rules = rules

    def start(self) -> Memory:
        """Memory at the start of a game."""
        return None

    def next(self, memory: Memory, position: Position, side: Side) -> Memory:
        """Think about ``position`` before ``side`` moves. Override if needed."""
        del position, side  # unused
        return memory

    @abc.abstractmethod
    def moves(self, memory: Memory, position: Position, side: Side) -> Sequence[Move]:
        """Return the moves this player considers best, in rules order."""

    def advance(self, memory: Memory, side: Side, move: Move) -> Memory:
        """Update memory after ``side`` played ``move``. Override if needed."""
        del memory, side, move  # unused
        return None

    @property
    def name(self) -> str:
        """Return the player's name for display purposes."""
        return self.__class__.__name__


def ensure_legal(move: Move, legal: Iterable[Move], side: Side | None = None) -> Move:
    """Validate that the chosen move is legal, raising otherwise."""

    if move not in legal:
        raise IllegalMoveError(move, side)
    return move


__all__ = ["Memory", "Player", "ensure_legal"]
