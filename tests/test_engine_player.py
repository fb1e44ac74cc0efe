import random

import pytest

from gametree import EngineConfig, SearchPlayer
from gametree.agents import FirstLegalPlayer, RandomPlayer
from gametree.exceptions import InvalidConfigError
from gametree.games import TakeawayRules
from gametree.search import Outcome, find_child, sample


def make_engine(rules, lookahead=3, playouts=2, playout_length=1, seed=7):
    config = EngineConfig(lookahead=lookahead, playouts=playouts, playout_length=playout_length)
    return SearchPlayer(rules, config, rng=random.Random(seed))


def test_start_has_no_tree(takeaway):
    assert make_engine(takeaway).start() is None


def test_moves_without_tree_are_the_legal_moves(takeaway):
    engine = make_engine(takeaway)
    position = takeaway.initial_position()
    assert engine.moves(None, position, 0) == (1, 2, 3)


def test_next_proves_takeaway_win():
    rules = TakeawayRules(pile=5, max_take=3)
    engine = make_engine(rules)
    position = rules.initial_position()

    tree = engine.next(engine.start(), position, 0)

    assert tree.outcome == Outcome.win({0})
    assert engine.moves(tree, position, 0) == (1,)


def test_next_takes_immediate_win(ttt, x_to_win):
    engine = make_engine(ttt, lookahead=1, playouts=5, playout_length=1)
    tree = engine.next(None, x_to_win, "X")
    assert engine.moves(tree, x_to_win, "X") == ((0, 2),)
    assert tree.outcome == Outcome.win({"X"})


class TestAdvance:
    def test_returns_the_cached_child_itself(self):
        rules = TakeawayRules(pile=5, max_take=3)
        engine = make_engine(rules)
        tree = engine.next(None, rules.initial_position(), 0)

        child = engine.advance(tree, 0, 1)

        assert child is tree.children[0].node
        assert child is find_child(tree, 1)

    def test_pruned_move_gives_no_tree(self):
        rules = TakeawayRules(pile=5, max_take=3)
        engine = make_engine(rules)
        tree = engine.next(None, rules.initial_position(), 0)

        assert engine.advance(tree, 0, 2) is None

    def test_unexplored_move_gives_no_tree(self, takeaway, rng):
        engine = make_engine(takeaway)
        shallow = sample(takeaway, takeaway.initial_position(), 0, 10, 0, rng)

        assert engine.advance(shallow, 0, 1) is None

    def test_absent_tree_stays_absent(self, takeaway):
        assert make_engine(takeaway).advance(None, 0, 1) is None


def test_tree_is_reused_across_turns():
    rules = TakeawayRules(pile=5, max_take=3)
    engine = make_engine(rules)
    position = rules.initial_position()

    tree = engine.next(None, position, 0)
    position = rules.apply(position, 0, 1)
    tree = engine.advance(tree, 0, 1)
    reply = engine.moves(tree, position, 1)[0]
    position = rules.apply(position, 1, reply)
    tree = engine.advance(tree, 1, reply)
    assert tree is not None

    again = engine.next(tree, position, 0)

    assert again is tree
    assert again.outcome == Outcome.win({0})
    assert engine.moves(again, position, 0) == (4 - reply,)


def test_same_seed_builds_same_tree(takeaway):
    position = takeaway.initial_position()
    first = make_engine(takeaway, lookahead=1, playouts=8, playout_length=2, seed=3)
    second = make_engine(takeaway, lookahead=1, playouts=8, playout_length=2, seed=3)

    assert first.next(None, position, 0) == second.next(None, position, 0)


def test_config_seed_used_without_rng(takeaway):
    config = EngineConfig(lookahead=1, playouts=8, playout_length=2, seed=42)
    position = takeaway.initial_position()

    first = SearchPlayer(takeaway, config).next(None, position, 0)
    second = SearchPlayer(takeaway, config).next(None, position, 0)

    assert first == second


@pytest.mark.parametrize(
    "config",
    [
        EngineConfig(lookahead=0),
        EngineConfig(playouts=-1),
        EngineConfig(playout_length=1.5),
    ],
)
def test_rejects_invalid_config(takeaway, config):
    with pytest.raises(InvalidConfigError):
        SearchPlayer(takeaway, config)


def test_name_shows_parameters(takeaway):
    engine = SearchPlayer(takeaway, EngineConfig(lookahead=3, playouts=12, playout_length=4))
    assert engine.name == "SearchPlayer(n=3, p=12, k=4)"


def test_baseline_players(takeaway, ttt):
    position = takeaway.initial_position()
    assert FirstLegalPlayer(takeaway).moves(None, position, 0) == (1,)

    picks = [RandomPlayer(takeaway, seed=5).moves(None, position, 0) for _ in range(3)]
    assert picks[0] == picks[1] == picks[2]
    assert picks[0][0] in (1, 2, 3)

    full = ttt.initial_position()
    assert FirstLegalPlayer(ttt).moves(None, full, "X") == ((0, 0),)
