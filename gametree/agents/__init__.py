"""Player implementations and utilities."""

from .base import Memory, Player, ensure_legal
from .baselines import FirstLegalPlayer, RandomPlayer
from .engine import SearchPlayer
from .minimax import MinimaxPlayer

__all__ = [
    "Memory",
    "Player",
    "ensure_legal",
    "FirstLegalPlayer",
    "RandomPlayer",
    "SearchPlayer",
    "MinimaxPlayer",
]
