"""Search core: forced outcomes, ledgers, the cached tree and the algorithms over it."""

from .deepen import deepen
from .ledger import EMPTY_LEDGER, Ledger
from .lookahead import lookahead
from .outcome import FORCED_TIE, UNKNOWN, Outcome, OutcomeKind, classify, winners_at
from .sampler import Playout, playout, sample
from .selector import select
from .tree import ChildEntry, Node, find_child, terminal_node, tree_depth, tree_size, unexplored_node

__all__ = [
    "ChildEntry",
    "EMPTY_LEDGER",
    "FORCED_TIE",
    "Ledger",
    "Node",
    "Outcome",
    "OutcomeKind",
    "Playout",
    "UNKNOWN",
    "classify",
    "deepen",
    "find_child",
    "lookahead",
    "playout",
    "sample",
    "select",
    "terminal_node",
    "tree_depth",
    "tree_size",
    "unexplored_node",
    "winners_at",
]
