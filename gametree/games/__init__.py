"""Bundled game rules and a registry to create them by name."""
from __future__ import annotations

from typing import Any, Callable

from ..exceptions import UnknownGameError
from ..rules import GameRules
from .mnk import MNKPosition, MNKRules, tictactoe
from .takeaway import TakeawayPosition, TakeawayRules

_GAME_LOOKUP: dict[str, Callable[..., GameRules]] = {
    "tictactoe": tictactoe,
    "mnk": MNKRules,
    "takeaway": TakeawayRules,
}


def available_games() -> list[str]:
    return sorted(_GAME_LOOKUP)


def create_rules(name: str, **options: Any) -> GameRules:
    """Instantiate the rules registered under ``name``."""

    try:
        factory = _GAME_LOOKUP[name]
    except KeyError as exc:
        raise UnknownGameError(name) from exc
    return factory(**options)


__all__ = [
    "MNKPosition",
    "MNKRules",
    "TakeawayPosition",
    "TakeawayRules",
    "available_games",
    "create_rules",
    "tictactoe",
]
