"""Shared pytest fixtures for gametree tests."""

import random

import pytest

from gametree.games import MNKPosition, MNKRules, TakeawayRules, tictactoe


@pytest.fixture
def ttt() -> MNKRules:
    return tictactoe()


@pytest.fixture
def takeaway() -> TakeawayRules:
    return TakeawayRules(pile=10, max_take=3, players=2)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(2025)


@pytest.fixture
def x_to_win() -> MNKPosition:
    """X to move and wins at (0, 2); the other empty cells do not win at once."""
    return MNKPosition.parse(
        [
            "XX.",
            "OO.",
            "...",
        ]
    )
