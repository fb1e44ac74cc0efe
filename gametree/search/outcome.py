"""Forced outcomes and the classifier that detects them."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, AbstractSet, Iterable

if TYPE_CHECKING:
    from ..rules import GameRules, Position, Side


class OutcomeKind(IntEnum):
    """Classification of a node's result."""

    UNKNOWN = 0  # nothing proven
    TIE = 1      # proven, nobody wins
    WIN = 2      # proven, the winner set is non-empty


@dataclass(frozen=True)
class Outcome:
    """A result proven by exhaustive rule checking.

    ``winners`` is empty for UNKNOWN and TIE and non-empty for WIN, so a tie
    is exactly a decided result with an empty winner set.
    """

    kind: OutcomeKind
    winners: frozenset = frozenset()

    def __post_init__(self) -> None:
        if self.kind is OutcomeKind.WIN and not self.winners:
            raise ValueError("A forced win needs at least one winner")
        if self.kind is not OutcomeKind.WIN and self.winners:
            raise ValueError(f"{self.kind.name} outcome cannot carry winners")

    @classmethod
    def unknown(cls) -> Outcome:
        return UNKNOWN

    @classmethod
    def tie(cls) -> Outcome:
        return FORCED_TIE

    @classmethod
    def win(cls, winners: Iterable[Side]) -> Outcome:
        return cls(OutcomeKind.WIN, frozenset(winners))

    @classmethod
    def decided(cls, winners: AbstractSet[Side]) -> Outcome:
        """Forced result for ``winners``; a tie when the set is empty."""

        if not winners:
            return FORCED_TIE
        return cls.win(winners)

    @property
    def is_unknown(self) -> bool:
        return self.kind is OutcomeKind.UNKNOWN

    @property
    def is_decided(self) -> bool:
        return self.kind is not OutcomeKind.UNKNOWN

    @property
    def is_tie(self) -> bool:
        return self.kind is OutcomeKind.TIE

    @property
    def is_win(self) -> bool:
        return self.kind is OutcomeKind.WIN

    def wins_for(self, side: Side) -> bool:
        """Return True if this is a forced win that includes ``side``."""

        return side in self.winners

    def __str__(self) -> str:
        if self.is_win:
            return f"WIN({', '.join(sorted(map(repr, self.winners)))})"
        return self.kind.name


UNKNOWN = Outcome(OutcomeKind.UNKNOWN)
FORCED_TIE = Outcome(OutcomeKind.TIE)


def winners_at(rules: GameRules, position: Position) -> frozenset:
    """Return every side satisfying a winning condition at ``position``."""

    return frozenset(side for side in rules.sides(position) if rules.is_winning(position, side))


def classify(rules: GameRules, position: Position) -> Outcome:
    """Detect a forced win at ``position``.

    Queries the rules once per side; several sides may win at once. Returns
    UNKNOWN when nobody is winning. Running out of moves is not a tie here,
    callers that care check the legal moves themselves.
    """

    winners = winners_at(rules, position)
    if winners:
        return Outcome.win(winners)
    return UNKNOWN


__all__ = [
    "FORCED_TIE",
    "Outcome",
    "OutcomeKind",
    "UNKNOWN",
    "classify",
    "winners_at",
]
