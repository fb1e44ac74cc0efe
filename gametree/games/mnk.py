"""m,n,k-game: place marks on an m x n board, k in a row wins.

Tic-tac-toe is the 3,3,3 game. The board lives in an immutable byte string so
positions are hashable; line detection runs over a numpy view of it.
"""
from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from ..exceptions import GameOverError, IllegalMoveError, InvalidConfigError
from ..rules import GameRules

EMPTY = 0
SIDE_MARKS = {"X": 1, "O": 2}
MARK_SIDES = {mark: side for side, mark in SIDE_MARKS.items()}
_SYMBOLS = {".": EMPTY, "X": 1, "O": 2}

# Directions scanned for lines: right, down, down-right, down-left.
_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

Cell = Tuple[int, int]


@dataclass(frozen=True)
class MNKPosition:
    """Immutable board snapshot, row-major, one byte per cell."""

    rows: int
    cols: int
    cells: bytes

    def __post_init__(self) -> None:
        if len(self.cells) != self.rows * self.cols:
            raise ValueError("Cell count does not match board dimensions")

    @classmethod
    def empty(cls, rows: int, cols: int) -> MNKPosition:
        return cls(rows=rows, cols=cols, cells=bytes(rows * cols))

    @classmethod
    def parse(cls, lines: Sequence[str]) -> MNKPosition:
        """Build a position from rows such as ``["X.O", ".X.", "O.."]``."""

        rows = len(lines)
        cols = len(lines[0]) if rows else 0
        if any(len(line) != cols for line in lines):
            raise ValueError("All rows must have the same length")
        try:
            cells = bytes(_SYMBOLS[symbol] for line in lines for symbol in line)
        except KeyError as exc:
            raise ValueError(f"Unknown board symbol {exc.args[0]!r}") from exc
        return cls(rows=rows, cols=cols, cells=cells)

    @property
    def board(self) -> np.ndarray:
        """Read-only (rows, cols) view of the cells."""
        return np.frombuffer(self.cells, dtype=np.int8).reshape(self.rows, self.cols)

    @property
    def stones(self) -> int:
        return sum(1 for cell in self.cells if cell != EMPTY)


class MNKRules(GameRules):
    """Rules for the m,n,k-game with sides ``"X"`` (moves first) and ``"O"``."""

    SIDES = ("X", "O")

    def __init__(self, rows: int = 3, cols: int = 3, k: int = 3, cache_size: int = 1 << 16) -> None:
        if rows < 1 or cols < 1:
            raise InvalidConfigError("board", (rows, cols), "must have positive dimensions")
        if not 1 <= k <= max(rows, cols):
            raise InvalidConfigError("k", k, f"must be between 1 and {max(rows, cols)}")
        self.rows = rows
        self.cols = cols
        self.k = k
        self._lines = _line_indices(rows, cols, k)
        self._winners = functools.lru_cache(maxsize=cache_size)(self._scan_winners)
        self._empty_cells = functools.lru_cache(maxsize=cache_size)(self._scan_empty)

    @property
    def name(self) -> str:
        return f"mnk({self.rows},{self.cols},{self.k})"

    def initial_position(self) -> MNKPosition:
        return MNKPosition.empty(self.rows, self.cols)

    def sides(self, position: MNKPosition) -> Sequence[str]:
        del position  # unused
        return self.SIDES

    def legal_moves(self, position: MNKPosition, side: str) -> Sequence[Cell]:
        del side  # unused
        if self._winners(position.cells):
            return ()
        return self._empty_cells(position.cells)

    def apply(self, position: MNKPosition, side: str, move: Cell) -> MNKPosition:
        if side not in SIDE_MARKS:
            raise IllegalMoveError(move, side)
        if self._winners(position.cells):
            raise GameOverError()
        if move not in self._empty_cells(position.cells):
            raise IllegalMoveError(move, side)

        row, col = move
        board = np.frombuffer(position.cells, dtype=np.int8).copy()
        board[row * self.cols + col] = SIDE_MARKS[side]
        return MNKPosition(rows=self.rows, cols=self.cols, cells=board.tobytes())

    def next_side(self, position: MNKPosition, side: str) -> str:
        del position  # unused
        return "O" if side == "X" else "X"

    def is_winning(self, position: MNKPosition, side: str) -> bool:
        return side in self._winners(position.cells)

    def _scan_winners(self, cells: bytes) -> frozenset:
        if len(self._lines) == 0:
            return frozenset()
        board = np.frombuffer(cells, dtype=np.int8)
        runs = board[self._lines]
        complete = np.all(runs == runs[:, :1], axis=1) & (runs[:, 0] != EMPTY)
        return frozenset(MARK_SIDES[int(mark)] for mark in np.unique(runs[complete, 0]))

    def _scan_empty(self, cells: bytes) -> tuple[Cell, ...]:
        board = np.frombuffer(cells, dtype=np.int8)
        return tuple(divmod(int(index), self.cols) for index in np.flatnonzero(board == EMPTY))


def _line_indices(rows: int, cols: int, k: int) -> np.ndarray:
    """Flat cell indices of every k-long line, shape (lines, k)."""

    lines: list[list[int]] = []
    for row in range(rows):
        for col in range(cols):
            for d_row, d_col in _DIRECTIONS:
                end_row = row + d_row * (k - 1)
                end_col = col + d_col * (k - 1)
                if not (0 <= end_row < rows and 0 <= end_col < cols):
                    continue
                if k == 1 and (d_row, d_col) != (0, 1):
                    continue
                lines.append([(row + d_row * i) * cols + (col + d_col * i) for i in range(k)])
    return np.array(lines, dtype=np.intp).reshape(-1, k)


def tictactoe() -> MNKRules:
    """Standard 3x3 tic-tac-toe."""

    return MNKRules(3, 3, 3)


__all__ = ["MNKPosition", "MNKRules", "SIDE_MARKS", "tictactoe"]
