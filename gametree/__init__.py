"""Game-tree decision engine: exact lookahead, Monte-Carlo sampling and a cached tree."""

from . import agents, config, exceptions, games, rules, search, simulate, tournament
from .agents import SearchPlayer
from .config import EngineConfig
from .rules import GameRules

__all__ = [
    "EngineConfig",
    "GameRules",
    "SearchPlayer",
    "agents",
    "config",
    "exceptions",
    "games",
    "rules",
    "search",
    "simulate",
    "tournament",
]
