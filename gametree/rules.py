"""Game-rules collaborator consumed by the search engine.

The engine never looks inside a position. Everything it needs to know about
a game comes through the five operations below, which every concrete game
implements. Positions are treated as immutable values: ``apply`` must return
a new position and leave its argument untouched.
"""
from __future__ import annotations

import abc
from collections.abc import Hashable, Sequence
from typing import Any

Side = Hashable
Move = Any
Position = Any


class GameRules(abc.ABC):
    """Base class for turn-based game rules."""

    @abc.abstractmethod
    def initial_position(self) -> Position:
        """Return the position a fresh game starts from."""

    @abc.abstractmethod
    def sides(self, position: Position) -> Sequence[Side]:
        """Return every participant at ``position`` in a stable order."""

    @abc.abstractmethod
    def legal_moves(self, position: Position, side: Side) -> Sequence[Move]:
        """Return the moves available to ``side``; empty when it cannot move."""

    @abc.abstractmethod
    def apply(self, position: Position, side: Side, move: Move) -> Position:
        """Return the position reached when ``side`` plays ``move``."""

    @abc.abstractmethod
    def next_side(self, position: Position, side: Side) -> Side:
        """Return the side that moves after ``side`` has moved from ``position``."""

    @abc.abstractmethod
    def is_winning(self, position: Position, side: Side) -> bool:
        """Return True if ``side`` currently satisfies a winning condition."""

    def first_side(self, position: Position) -> Side:
        """Return the side that moves first from ``position``."""

        return self.sides(position)[0]

    @property
    def name(self) -> str:
        return self.__class__.__name__


__all__ = ["GameRules", "Move", "Position", "Side"]
