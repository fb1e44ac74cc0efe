"""Custom exception classes for the gametree engine."""

from __future__ import annotations


class GameTreeError(Exception):
    """Base exception for all gametree errors."""


class InvalidConfigError(GameTreeError, ValueError):
    """Raised when an engine or series configuration is out of range."""

    def __init__(self, field: str, value: object, requirement: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} {requirement}, got {value!r}")


class IllegalMoveError(GameTreeError, ValueError):
    """Raised when a move outside the legal move list is played."""

    def __init__(self, move: object, side: object = None) -> None:
        self.move = move
        self.side = side
        if side is None:
            super().__init__(f"Illegal move selected: {move!r}")
        else:
            super().__init__(f"Illegal move {move!r} for side {side!r}")


class GameOverError(GameTreeError):
    """Raised when trying to continue a game that has already ended."""

    def __init__(self) -> None:
        super().__init__("Cannot apply a move; game already finished")


class UnknownGameError(GameTreeError, KeyError):
    """Raised when a game name is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown game '{name}'")


class UnknownPlayerError(GameTreeError, KeyError):
    """Raised when a player name is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown player '{name}'")


__all__ = [
    "GameOverError",
    "GameTreeError",
    "IllegalMoveError",
    "InvalidConfigError",
    "UnknownGameError",
    "UnknownPlayerError",
]
