"""Tests for child selection."""

import pytest

from gametree.search import FORCED_TIE, UNKNOWN, ChildEntry, Ledger, Node, Outcome, select


def leaf(outcome=UNKNOWN, **counts) -> Node:
    return Node(outcome=outcome, ledger=Ledger(counts))


def entries(*nodes: Node) -> list[ChildEntry]:
    return [ChildEntry(index, node) for index, node in enumerate(nodes)]


class TestWinningTier:
    def test_winning_child_forces_win(self) -> None:
        children = entries(leaf(a=1, b=5), leaf(Outcome.win({"a"}), a=2), leaf(b=3))
        node = select(None, "a", children)

        assert node.outcome == Outcome.win({"a"})
        assert node.moves == (1,)
        assert node.ledger == Ledger({"a": 3, "b": 8})

    def test_win_overrides_losing_and_tied_siblings(self) -> None:
        children = entries(
            leaf(Outcome.win({"b"}), b=10),
            leaf(FORCED_TIE),
            leaf(Outcome.win({"a"})),
        )
        node = select(None, "a", children)
        assert node.outcome == Outcome.win({"a"})
        assert node.moves == (2,)

    def test_winning_children_with_different_winner_sets_all_kept(self) -> None:
        children = entries(leaf(Outcome.win({"a"})), leaf(Outcome.win({"a", "b"})), leaf())
        node = select(None, "a", children)
        assert node.outcome == Outcome.win({"a"})
        assert node.moves == (0, 1)


class TestNonLosingTier:
    def test_best_fraction_kept_outcome_unknown(self) -> None:
        children = entries(
            leaf(a=1, b=3),
            leaf(a=3, b=1),
            leaf(Outcome.win({"b"}), b=4),
            leaf(a=6, b=2),
        )
        node = select(None, "a", children)

        assert node.outcome == UNKNOWN
        assert node.moves == (1, 3)
        assert node.ledger == Ledger({"a": 10, "b": 10})

    def test_losing_child_never_kept_even_with_better_fraction(self) -> None:
        children = entries(leaf(Outcome.win({"b"}), a=9, b=1), leaf(a=1, b=9))
        node = select(None, "a", children)
        assert node.moves == (1,)

    def test_forced_tie_counts_as_non_losing(self) -> None:
        children = entries(leaf(FORCED_TIE), leaf(Outcome.win({"b"}), b=2), leaf())
        node = select(None, "a", children)
        assert node.outcome == UNKNOWN
        assert node.moves == (0, 2)


class TestAllLosingTier:
    def test_intersection_of_winner_sets(self) -> None:
        children = entries(
            leaf(Outcome.win({"b", "c"}), b=2, c=2),
            leaf(Outcome.win({"b"}), a=1, b=3),
        )
        node = select(None, "a", children)
        assert node.outcome == Outcome.win({"b"})
        assert node.moves == (1,)

    def test_empty_intersection_is_forced_tie(self) -> None:
        children = entries(leaf(Outcome.win({"b"}), b=1), leaf(Outcome.win({"c"}), c=1))
        node = select(None, "a", children)
        assert node.outcome == FORCED_TIE
        assert node.moves == (0, 1)
        assert node.ledger == Ledger({"b": 1, "c": 1})


def test_select_requires_explored_children():
    with pytest.raises(ValueError):
        select(None, "a", [])
    with pytest.raises(ValueError):
        select(None, "a", [ChildEntry(0, leaf()), ChildEntry(1)])
