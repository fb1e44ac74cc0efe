"""Extending a cached tree instead of searching from scratch."""
from __future__ import annotations

import random
from typing import TYPE_CHECKING

from .ledger import Ledger
from .lookahead import lookahead
from .outcome import FORCED_TIE, classify
from .selector import select
from .tree import ChildEntry, Node, terminal_node

if TYPE_CHECKING:
    from ..rules import GameRules, Position, Side


def deepen(
    rules: GameRules,
    cached: Node | None,
    position: Position,
    side: Side,
    depth: int,
    playouts: int,
    playout_length: int,
    rng: random.Random,
) -> Node:
    """Push the exact horizon of ``cached`` out to ``depth`` plies below ``position``.

    Forced nodes are final and come back unchanged, even with ``depth == 0``:
    rebuilding one at a shallower horizon would re-sample below it and lose
    the proof, so this takes precedence over the zero-depth rebuild. Missing
    subtrees and, for unproven nodes, subtrees at the horizon are rebuilt
    with :func:`lookahead`. Otherwise every existing child is deepened one
    ply shallower. When all children were already explored and none changed
    its outcome, the node keeps every updated child and its own outcome, and
    only its ledger is recombined; selection runs again only when a child was
    new or its outcome moved.
    """

    if cached is not None and cached.outcome.is_decided:
        return cached
    if cached is None or depth == 0:
        return lookahead(rules, position, side, depth, playouts, playout_length, rng)

    # Sampled nodes were never classified.
    decided = classify(rules, position)
    if decided.is_decided:
        return terminal_node(decided, playouts)
    if not cached.children:
        return terminal_node(FORCED_TIE, playouts)

    following = rules.next_side(position, side)
    updated = tuple(
        ChildEntry(
            entry.move,
            deepen(
                rules,
                entry.node,
                rules.apply(position, side, entry.move),
                following,
                depth - 1,
                playouts,
                playout_length,
                rng,
            ),
        )
        for entry in cached.children
    )

    previous = cached.child_outcomes()
    if None not in previous and previous == [entry.node.outcome for entry in updated]:
        return Node(
            outcome=cached.outcome,
            ledger=Ledger.combine(entry.node.ledger for entry in updated),
            children=updated,
        )
    return select(position, side, updated)


__all__ = ["deepen"]
