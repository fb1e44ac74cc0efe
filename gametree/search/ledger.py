"""Additive per-side tallies of playout wins."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..rules import Side


class Ledger(Mapping):
    """Immutable mapping from side to a nonnegative win count.

    A side that is absent counts as zero, so zero entries are never stored and
    two ledgers compare equal whenever their nonzero counts agree. Equal
    ledgers hash alike, so frozen tree nodes holding them are hashable.
    """

    __slots__ = ("_counts", "_total")

    def __init__(self, counts: Mapping[Side, int] | None = None) -> None:
        cleaned: dict[Side, int] = {}
        for side, count in (counts or {}).items():
            if count < 0:
                raise ValueError(f"Ledger counts must be nonnegative, got {count} for {side!r}")
            if count:
                cleaned[side] = count
        self._counts = cleaned
        self._total = sum(cleaned.values())

    @classmethod
    def for_winners(cls, winners: Iterable[Side], weight: int = 1) -> Ledger:
        """Ledger crediting ``weight`` wins to every side in ``winners``."""

        return cls({side: weight for side in winners})

    @classmethod
    def combine(cls, ledgers: Iterable[Ledger]) -> Ledger:
        """Pointwise sum of any number of ledgers."""

        merged: dict[Side, int] = {}
        for ledger in ledgers:
            for side, count in ledger._counts.items():
                merged[side] = merged.get(side, 0) + count
        return cls(merged)

    def __add__(self, other: Ledger) -> Ledger:
        if not isinstance(other, Ledger):
            return NotImplemented
        return Ledger.combine((self, other))

    def __getitem__(self, side: Side) -> int:
        return self._counts[side]

    def __iter__(self) -> Iterator[Side]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __hash__(self) -> int:
        return hash(frozenset(self._counts.items()))

    def __repr__(self) -> str:
        return f"Ledger({self._counts!r})"

    def count(self, side: Side) -> int:
        return self._counts.get(side, 0)

    @property
    def total(self) -> int:
        return self._total

    def win_fraction(self, side: Side) -> float:
        """Share of all recorded wins that belong to ``side``; 0.0 when empty."""

        if self._total == 0:
            return 0.0
        return self._counts.get(side, 0) / self._total


EMPTY_LEDGER = Ledger()


__all__ = ["EMPTY_LEDGER", "Ledger"]
