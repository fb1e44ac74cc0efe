"""Monte-Carlo sampling of random continuations.

Each playout picks uniformly among the legal moves until it runs out of moves
or reaches its step bound, then credits every side winning at the stopping
position. All playouts from one position are folded into a single partial
tree whose nodes stay UNKNOWN: sampling never proves anything.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .ledger import Ledger
from .outcome import winners_at
from .tree import ChildEntry, Node, unexplored_node

if TYPE_CHECKING:
    from ..rules import GameRules, Move, Position, Side


@dataclass(frozen=True)
class Playout:
    """Trace of one random continuation.

    Attributes:
        moves: Moves taken, in order.
        options: Legal moves at every visited position, so ``options[i]`` is
            what was available before ``moves[i]`` and the last entry belongs
            to the stopping position.
        winners: Sides winning where the playout stopped, possibly none.
    """

    moves: tuple[Move, ...]
    options: tuple[tuple[Move, ...], ...]
    winners: frozenset

    @property
    def ledger(self) -> Ledger:
        return Ledger.for_winners(self.winners)


def playout(
    rules: GameRules,
    position: Position,
    side: Side,
    steps: int,
    rng: random.Random,
) -> Playout:
    """Play up to ``steps`` uniformly random moves from ``position``."""

    moves: list[Move] = []
    options: list[tuple[Move, ...]] = []
    for _ in range(steps):
        legal = tuple(rules.legal_moves(position, side))
        options.append(legal)
        if not legal:
            break
        move = legal[rng.randrange(len(legal))]
        moves.append(move)
        position, side = rules.apply(position, side, move), rules.next_side(position, side)
    else:
        options.append(tuple(rules.legal_moves(position, side)))

    return Playout(moves=tuple(moves), options=tuple(options), winners=winners_at(rules, position))


def sample(
    rules: GameRules,
    position: Position,
    side: Side,
    playouts: int,
    playout_length: int,
    rng: random.Random,
) -> Node:
    """Build a sampled subtree for ``position`` from ``playouts`` random playouts.

    With ``playout_length == 0`` nothing is played and the result is a node
    with an empty ledger and one unexplored entry per legal move.
    """

    root = unexplored_node(rules.legal_moves(position, side))
    if playout_length == 0:
        return root

    for _ in range(playouts):
        trace = playout(rules, position, side, playout_length, rng)
        root = _fold(root, trace, trace.ledger, 0)
    return root


def _fold(node: Node, trace: Playout, ledger: Ledger, step: int) -> Node:
    combined = node.ledger + ledger
    if step == len(trace.moves):
        return Node(outcome=node.outcome, ledger=combined, children=node.children)

    move = trace.moves[step]
    children = list(node.children)
    for index, entry in enumerate(children):
        if entry.move != move:
            continue
        target = entry.node
        if target is None:
            target = unexplored_node(trace.options[step + 1])
        children[index] = ChildEntry(move, _fold(target, trace, ledger, step + 1))
        break
    return Node(outcome=node.outcome, ledger=combined, children=tuple(children))


__all__ = ["Playout", "playout", "sample"]
