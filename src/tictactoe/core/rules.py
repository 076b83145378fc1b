"""
Win/draw detection over the eight winning lines.

All functions are pure. They accept a Board or, for the search hot path,
a plain list of cell codes.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from tictactoe.core.board import Board
from tictactoe.core.types import DRAW, EMPTY, IN_PROGRESS, GameResult, Mark

# Pre-computed winning lines (indices into the flat 3x3 board)
WIN_LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 4, 8], [2, 4, 6],             # diagonals
], dtype=np.int8)

# Same lines as plain tuples, for indexing cell lists in the search loop
_LINES: Tuple[Tuple[int, int, int], ...] = tuple(tuple(int(i) for i in line) for line in WIN_LINES)

CENTER = 4
CORNERS = (0, 2, 6, 8)

Cells = Union[Board, Sequence[int]]


def _as_cells(board: Cells) -> Sequence[int]:
    return board.cells() if isinstance(board, Board) else board


def line_winner(cells: Sequence[int]) -> int:
    """Return the mark code owning a full line, or 0 if no line is complete."""
    for a, b, c in _LINES:
        v = cells[a]
        if v != EMPTY and cells[b] == v and cells[c] == v:
            return v
    return EMPTY


def winning_line(board: Cells) -> Optional[Tuple[int, int, int]]:
    """Indices of the completed line, or None."""
    cells = _as_cells(board)
    for line in _LINES:
        a, b, c = line
        if cells[a] != EMPTY and cells[a] == cells[b] == cells[c]:
            return line
    return None


def evaluate(board: Cells) -> GameResult:
    """
    Evaluate a board.

    Returns:
        won(mark) if a line is owned by one mark, DRAW if the board is full,
        IN_PROGRESS otherwise.
    """
    cells = _as_cells(board)
    winner = line_winner(cells)
    if winner != EMPTY:
        return GameResult.won(Mark(winner))
    if EMPTY not in cells:
        return DRAW
    return IN_PROGRESS


def completing_moves(board: Cells, mark: Mark) -> List[int]:
    """Empty cells that would complete a line for `mark`, in board order."""
    cells = _as_cells(board)
    found = set()
    for line in _LINES:
        owned = [i for i in line if cells[i] == mark]
        empty = [i for i in line if cells[i] == EMPTY]
        if len(owned) == 2 and len(empty) == 1:
            found.add(empty[0])
    return sorted(found)
