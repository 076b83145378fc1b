"""
Board - immutable 3x3 grid of marks.

Uses a read-only flat int8 array:
    0 = empty
    1 = Mark.FIRST (X)
    2 = Mark.SECOND (O)

Cells are indexed 0-8 in row-major order.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

import numpy as np

from tictactoe.core.types import EMPTY, MARK_SYMBOLS, Mark

SIZE = 3
NUM_CELLS = SIZE * SIZE


class IllegalMove(ValueError):
    """Raised when a move breaks the board contract (bad index, occupied cell)."""


def check_index(index: int) -> int:
    """Return index as an int, or raise IllegalMove if it is not in 0-8."""
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise IllegalMove(f"Cell index must be an integer, got {index!r}")
    if not 0 <= index < NUM_CELLS:
        raise IllegalMove(f"Cell index {index} is outside 0-{NUM_CELLS - 1}")
    return int(index)


class Board:
    """
    Immutable board value.

    Every mutation returns a new Board; the backing array is flagged
    read-only so nothing can alias and modify it in place.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: np.ndarray):
        cells = np.array(cells, dtype=np.int8).reshape(NUM_CELLS)
        if not np.isin(cells, (EMPTY, Mark.FIRST, Mark.SECOND)).all():
            raise ValueError(f"Board cells must be 0, 1 or 2, got {cells.tolist()}")
        cells.flags.writeable = False
        self._cells = cells

    @classmethod
    def empty(cls) -> "Board":
        return cls(np.zeros(NUM_CELLS, dtype=np.int8))

    @classmethod
    def from_cells(cls, cells: Sequence[Optional[int]]) -> "Board":
        """Build a board from a sequence of None / 0 / Mark / 1 / 2."""
        if len(cells) != NUM_CELLS:
            raise ValueError(f"Board needs {NUM_CELLS} cells, got {len(cells)}")
        return cls(np.array([EMPTY if c is None else int(c) for c in cells], dtype=np.int8))

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @property
    def array(self) -> np.ndarray:
        """Read-only flat int8 view of the cells."""
        return self._cells

    def cells(self) -> List[int]:
        """Plain list of cell codes, for fast search loops."""
        return self._cells.tolist()

    def __getitem__(self, index: int) -> Optional[Mark]:
        value = int(self._cells[check_index(index)])
        return None if value == EMPTY else Mark(value)

    def __len__(self) -> int:
        return NUM_CELLS

    def __iter__(self) -> Iterator[Optional[Mark]]:
        return (None if v == EMPTY else Mark(v) for v in self._cells.tolist())

    def is_empty(self, index: int) -> bool:
        return bool(self._cells[check_index(index)] == EMPTY)

    def empty_cells(self) -> List[int]:
        """Indices of empty cells in board order."""
        return np.flatnonzero(self._cells == EMPTY).tolist()

    def is_full(self) -> bool:
        return not np.any(self._cells == EMPTY)

    def count(self, mark: Mark) -> int:
        return int(np.count_nonzero(self._cells == mark))

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def apply(self, index: int, mark: Mark) -> "Board":
        """Return a new board with `mark` placed at `index`."""
        index = check_index(index)
        if self._cells[index] != EMPTY:
            raise IllegalMove(f"Cell {index} is occupied")
        cells = self._cells.copy()
        cells[index] = Mark(mark)
        return Board(cells)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash(self._cells.tobytes())

    def __repr__(self) -> str:
        return f"Board({self._cells.tolist()})"

    def state_string(self) -> str:
        """Box-drawn board, empty cells show their index."""
        cells = self._cells.tolist()
        lines = ["╭───┬───┬───╮"]
        for r in range(SIZE):
            row = []
            for c in range(SIZE):
                i = r * SIZE + c
                row.append(MARK_SYMBOLS[Mark(cells[i])] if cells[i] != EMPTY else str(i))
            lines.append("│ " + " │ ".join(row) + " │")
            if r < SIZE - 1:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)


def apply(board: Board, index: int, mark: Mark) -> Board:
    """Pure move application. Raises IllegalMove on a bad index or occupied cell."""
    return board.apply(index, mark)
