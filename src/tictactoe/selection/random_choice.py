"""
Easy opponent: uniform choice among empty cells, no look-ahead.
"""

from __future__ import annotations

from typing import List

from tictactoe.core.board import Board
from tictactoe.core.types import Mark
from tictactoe.selection.base import Strategy


class RandomStrategy(Strategy):
    name = "random"

    def _choose(self, board: Board, mark: Mark, empty: List[int]) -> int:
        return self.rng.choice(empty)
