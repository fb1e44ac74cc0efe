"""Tests for the additive score ledger."""

import itertools

import pytest

from gametree.search import EMPTY_LEDGER, ChildEntry, Ledger, Node, Outcome, terminal_node


LEDGERS = [
    Ledger({"a": 3, "b": 1}),
    Ledger({"b": 2, "c": 5}),
    Ledger({"a": 1}),
    EMPTY_LEDGER,
]


def test_combination_is_order_independent():
    expected = Ledger({"a": 4, "b": 3, "c": 5})
    for ordering in itertools.permutations(LEDGERS):
        assert Ledger.combine(ordering) == expected


def test_combination_is_associative():
    a, b, c, _ = LEDGERS
    assert (a + b) + c == a + (b + c)
    assert a + b == b + a


def test_absent_side_counts_as_zero():
    ledger = Ledger({"a": 2})
    assert ledger.count("z") == 0
    assert ledger.win_fraction("z") == 0.0
    assert "z" not in ledger


def test_zero_counts_are_not_stored():
    assert Ledger({"a": 0, "b": 1}) == Ledger({"b": 1})
    assert len(Ledger({"a": 0})) == 0


def test_negative_counts_rejected():
    with pytest.raises(ValueError):
        Ledger({"a": -1})


def test_win_fractions_lie_in_unit_interval():
    for ledger in LEDGERS[:-1]:
        fractions = [ledger.win_fraction(side) for side in ("a", "b", "c", "d")]
        assert all(0.0 <= f <= 1.0 for f in fractions)
        assert sum(fractions) == pytest.approx(1.0)


def test_empty_ledger_fractions_are_zero():
    assert EMPTY_LEDGER.total == 0
    assert EMPTY_LEDGER.win_fraction("a") == 0.0


def test_for_winners_credits_each_winner():
    ledger = Ledger.for_winners({"a", "b"}, weight=4)
    assert ledger == {"a": 4, "b": 4}
    assert ledger.total == 8
    assert ledger.win_fraction("a") == 0.5
    assert Ledger.for_winners(()) == EMPTY_LEDGER


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        Ledger({"a": 1}) + {"a": 1}


def test_equal_ledgers_hash_alike():
    assert hash(Ledger({"a": 2, "b": 0})) == hash(Ledger({"a": 2}))
    assert hash(EMPTY_LEDGER) == hash(Ledger({"z": 0}))
    assert len({Ledger({"a": 1}), Ledger({"a": 1}), Ledger({"a": 2})}) == 2


def test_tree_nodes_are_hashable():
    win = terminal_node(Outcome.win({"a"}), 3)
    parent = Node(outcome=Outcome.win({"a"}), ledger=win.ledger, children=(ChildEntry("m", win), ChildEntry("n")))
    twin = Node(outcome=Outcome.win({"a"}), ledger=Ledger({"a": 3}), children=(ChildEntry("m", win), ChildEntry("n")))

    assert hash(parent) == hash(twin)
    assert {parent, twin} == {parent}
