"""Turn-based game runner.

Drives any set of players over any rules: each turn the side to move thinks,
offers its candidate moves, the runner picks one, and every player updates
its own memory with the move played.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, Sequence, Tuple

from .agents.base import Memory, Player, ensure_legal
from .logging_config import get_logger
from .rules import GameRules, Move, Position, Side
from .search.outcome import classify

logger = get_logger(__name__)


@dataclass(frozen=True)
class GameResult:
    """How a game ended.

    Attributes:
        final_position: Position when play stopped.
        winners: Sides winning at the end; empty for a tie or an unfinished game.
        history: ``(side, move)`` pairs in the order they were played.
        finished: False when the game was cut off by ``max_turns``.
    """

    final_position: Position
    winners: frozenset
    history: Tuple[Tuple[Side, Move], ...]
    finished: bool = True

    @property
    def turns(self) -> int:
        return len(self.history)

    @property
    def is_tie(self) -> bool:
        return self.finished and not self.winners


@dataclass
class SimulationConfig:
    """Configuration for a batch of games with fixed seating.

    ``players`` lists one player per side in the order ``rules.sides``
    returns them.
    """

    rules: GameRules
    players: Sequence[Player]
    seed: int = 0
    games: int = 1
    random_choice: bool = True
    max_turns: Optional[int] = None


def play_game(
    rules: GameRules,
    position: Position,
    side: Side,
    players: Mapping[Side, Player],
    *,
    rng: Optional[random.Random] = None,
    max_turns: Optional[int] = None,
) -> GameResult:
    """Play one game from ``position`` with ``side`` to move.

    When a player offers several moves the runner picks one uniformly with
    ``rng``, or the first if no ``rng`` is given.
    """

    missing = [s for s in rules.sides(position) if s not in players]
    if missing:
        raise ValueError(f"No player seated for sides {missing!r}")

    memories: dict[Side, Memory] = {s: player.start() for s, player in players.items()}
    history: list[Tuple[Side, Move]] = []

    while True:
        outcome = classify(rules, position)
        if outcome.is_decided:
            return _finish(position, outcome.winners, history)

        legal = tuple(rules.legal_moves(position, side))
        if not legal:
            return _finish(position, frozenset(), history)

        if max_turns is not None and len(history) >= max_turns:
            logger.debug("Game stopped after %d turns", len(history))
            return GameResult(position, frozenset(), tuple(history), finished=False)

        player = players[side]
        memories[side] = player.next(memories[side], position, side)
        offered = player.moves(memories[side], position, side)
        if not offered:
            raise RuntimeError(f"{player.name} offered no moves for side {side!r}")
        move = offered[rng.randrange(len(offered))] if rng is not None else offered[0]
        ensure_legal(move, legal, side)

        for seat, seated in players.items():
            memories[seat] = seated.advance(memories[seat], side, move)
        history.append((side, move))

        following = rules.next_side(position, side)
        position = rules.apply(position, side, move)
        side = following


def run(config: SimulationConfig) -> Iterator[GameResult]:
    """Run one or more games according to the provided configuration.

    Seeds advance deterministically so re-running the same config with
    deterministic players yields identical games.
    """

    if config.games < 1:
        raise ValueError("Number of games must be at least 1")

    start = config.rules.initial_position()
    sides = config.rules.sides(start)
    if len(config.players) != len(sides):
        raise ValueError(f"Expected {len(sides)} players, got {len(config.players)}")
    seating = dict(zip(sides, config.players))

    for offset in range(config.games):
        rng = random.Random(config.seed + offset) if config.random_choice else None
        yield play_game(
            config.rules,
            start,
            config.rules.first_side(start),
            seating,
            rng=rng,
            max_turns=config.max_turns,
        )


def _finish(position: Position, winners: frozenset, history: list[Tuple[Side, Move]]) -> GameResult:
    logger.debug("Game over after %d turns, winners=%s", len(history), sorted(map(repr, winners)))
    return GameResult(position, winners, tuple(history))


__all__ = [
    "GameResult",
    "SimulationConfig",
    "play_game",
    "run",
]
