"""Exhaustive lookahead to a fixed ply budget."""
from __future__ import annotations

import random
from typing import TYPE_CHECKING

from .outcome import FORCED_TIE, classify
from .sampler import sample
from .selector import select
from .tree import ChildEntry, Node, terminal_node

if TYPE_CHECKING:
    from ..rules import GameRules, Position, Side


def lookahead(
    rules: GameRules,
    position: Position,
    side: Side,
    depth: int,
    playouts: int,
    playout_length: int,
    rng: random.Random,
) -> Node:
    """Search every line from ``position`` for ``depth`` plies.

    A decided position ends the line regardless of the remaining depth.
    Positions at the horizon are handed to the sampler, and a position with
    no legal moves and no winner is a forced tie. Terminal nodes credit
    ``playouts`` wins to each winner so proven results weigh like a fully
    sampled leaf.
    """

    decided = classify(rules, position)
    if decided.is_decided:
        return terminal_node(decided, playouts)
    if depth == 0:
        return sample(rules, position, side, playouts, playout_length, rng)

    moves = rules.legal_moves(position, side)
    if not moves:
        return terminal_node(FORCED_TIE, playouts)

    following = rules.next_side(position, side)
    children = [
        ChildEntry(
            move,
            lookahead(
                rules,
                rules.apply(position, side, move),
                following,
                depth - 1,
                playouts,
                playout_length,
                rng,
            ),
        )
        for move in moves
    ]
    return select(position, side, children)


__all__ = ["lookahead"]
