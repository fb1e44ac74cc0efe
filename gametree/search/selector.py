"""Choosing the best children of a fully expanded node."""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .ledger import Ledger
from .outcome import UNKNOWN, Outcome
from .tree import ChildEntry, Node

if TYPE_CHECKING:
    from ..rules import Position, Side


def select(position: Position, side: Side, children: Sequence[ChildEntry]) -> Node:
    """Build the node for ``position`` from its explored ``children``.

    Three tiers, checked in order:

    1. Winning: some child is a forced win that includes ``side``. The node is
       a forced win for ``side`` and keeps only those children.
    2. Non-losing: some child is UNKNOWN or a forced tie. The node stays
       UNKNOWN and keeps the non-losing children with the best win fraction
       for ``side``.
    3. All losing: every child is a forced win for others. The node is forced
       for the sides that win in every branch (a tie if none do) and keeps the
       children with the best win fraction for ``side``.

    Ties keep every tied child. The ledger always combines all children,
    kept or not.
    """

    del position  # unused
    if not children:
        raise ValueError("select needs at least one child")
    if any(entry.node is None for entry in children):
        raise ValueError("select needs every child explored")

    ledger = Ledger.combine(entry.node.ledger for entry in children)

    winning = tuple(entry for entry in children if entry.node.outcome.wins_for(side))
    if winning:
        return Node(outcome=Outcome.win((side,)), ledger=ledger, children=winning)

    non_losing = [entry for entry in children if not entry.node.outcome.is_win]
    if non_losing:
        return Node(outcome=UNKNOWN, ledger=ledger, children=_best_for(side, non_losing))

    shared = frozenset.intersection(*(entry.node.outcome.winners for entry in children))
    return Node(outcome=Outcome.decided(shared), ledger=ledger, children=_best_for(side, children))


def _best_for(side: Side, entries: Sequence[ChildEntry]) -> tuple[ChildEntry, ...]:
    fractions = [entry.node.ledger.win_fraction(side) for entry in entries]
    best = max(fractions)
    return tuple(entry for entry, fraction in zip(entries, fractions) if fraction == best)


__all__ = ["select"]
