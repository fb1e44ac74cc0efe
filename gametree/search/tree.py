"""Persistent search tree shared across turns.

Nodes are frozen; every search step builds new nodes and shares untouched
subtrees with the previous tree, so a cached tree handed back to a caller is
never modified behind its back.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from .ledger import EMPTY_LEDGER, Ledger
from .outcome import UNKNOWN, Outcome

if TYPE_CHECKING:
    from ..rules import Move


@dataclass(frozen=True)
class ChildEntry:
    """One legal move from a node and, once explored, the subtree it leads to."""

    move: Move
    node: Node | None = None

    @property
    def explored(self) -> bool:
        return self.node is not None


@dataclass(frozen=True)
class Node:
    """An explored position.

    Attributes:
        outcome: Forced result, UNKNOWN until proven.
        ledger: Playout wins aggregated over the subtree.
        children: Child entries in the order the rules enumerate moves. A
            freshly expanded node has one entry per legal move; selection may
            keep only the best subset.
    """

    outcome: Outcome
    ledger: Ledger
    children: tuple[ChildEntry, ...] = ()

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(entry.move for entry in self.children)

    def child_outcomes(self) -> list[Outcome | None]:
        return [entry.node.outcome if entry.node is not None else None for entry in self.children]


def terminal_node(outcome: Outcome, weight: int = 1) -> Node:
    """Childless node for a decided position, crediting ``weight`` wins to each winner."""

    return Node(outcome=outcome, ledger=Ledger.for_winners(outcome.winners, weight))


def unexplored_node(moves: Iterable[Move]) -> Node:
    """Node with nothing known and one unexplored entry per move."""

    return Node(
        outcome=UNKNOWN,
        ledger=EMPTY_LEDGER,
        children=tuple(ChildEntry(move) for move in moves),
    )


def find_child(node: Node | None, move: Move) -> Node | None:
    """Return the subtree behind ``move``, or None if absent or unexplored."""

    if node is None:
        return None
    for entry in node.children:
        if entry.move == move:
            return entry.node
    return None


def tree_size(node: Node | None) -> int:
    """Number of explored nodes in the tree."""

    if node is None:
        return 0
    count = 0
    stack = [node]
    while stack:
        current = stack.pop()
        count += 1
        stack.extend(entry.node for entry in current.children if entry.node is not None)
    return count


def tree_depth(node: Node | None) -> int:
    """Length of the longest explored path, 0 for a lone node."""

    if node is None:
        return 0
    deepest = 0
    stack = [(node, 0)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((entry.node, depth + 1) for entry in current.children if entry.node is not None)
    return deepest


__all__ = [
    "ChildEntry",
    "Node",
    "find_child",
    "terminal_node",
    "tree_depth",
    "tree_size",
    "unexplored_node",
]
