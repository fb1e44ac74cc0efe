"""Search player: exact lookahead plus Monte-Carlo sampling over a cached tree."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Optional, Sequence

from ..config import EngineConfig
from ..logging_config import get_logger
from ..search import Node, deepen, find_child, tree_depth, tree_size
from .base import Player

if TYPE_CHECKING:
    from ..rules import GameRules, Move, Position, Side

logger = get_logger(__name__)


class SearchPlayer(Player):
    """Player whose memory is the search tree rooted at the current position.

    Each ``next`` deepens the cached tree by the configured number of plies
    rather than starting over, and each ``advance`` re-roots the tree at the
    move actually played, dropping its siblings. The tree is None whenever
    nothing useful is cached.
    """

    def __init__(
        self,
        rules: GameRules,
        config: EngineConfig | None = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(rules)
        self.config = config or EngineConfig()
        self.config.validate()
        self._rng = rng or random.Random(self.config.seed)

    @property
    def name(self) -> str:
        c = self.config
        return f"SearchPlayer(n={c.lookahead}, p={c.playouts}, k={c.playout_length})"

    def start(self) -> Node | None:
        return None

    def next(self, memory: Node | None, position: Position, side: Side) -> Node:
        tree = deepen(
            self.rules,
            memory,
            position,
            side,
            self.config.lookahead_plies,
            self.config.playouts,
            self.config.playout_plies,
            self._rng,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "side=%r reused=%s nodes=%d depth=%d outcome=%s candidates=%d",
                side,
                memory is not None,
                tree_size(tree),
                tree_depth(tree),
                tree.outcome,
                len(tree.children),
            )
        return tree

    def moves(self, memory: Node | None, position: Position, side: Side) -> Sequence[Move]:
        if memory is None:
            return tuple(self.rules.legal_moves(position, side))
        return memory.moves

    def advance(self, memory: Node | None, side: Side, move: Move) -> Node | None:
        del side  # unused
        return find_child(memory, move)


__all__ = ["SearchPlayer"]
