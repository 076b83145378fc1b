"""
Strategy - abstract base class for computer opponents.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import List, Optional

from tictactoe.core.board import Board, IllegalMove
from tictactoe.core.types import Mark


class Strategy(ABC):
    """
    Chooses a cell for `mark` to play on `board`.

    Strategies are stateless apart from their random source, so one
    instance can be shared across games.
    """

    name: str = "strategy"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def choose_move(self, board: Board, mark: Mark) -> int:
        """
        Return the index of an empty cell.

        Raises:
            IllegalMove: if the board is full (caller bug).
        """
        empty = board.empty_cells()
        if not empty:
            raise IllegalMove("Cannot choose a move on a full board")
        return self._choose(board, Mark(mark), empty)

    @abstractmethod
    def _choose(self, board: Board, mark: Mark, empty: List[int]) -> int:
        """Pick one of `empty`, which is never empty."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
