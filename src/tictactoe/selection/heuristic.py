"""
Medium opponent: single-ply rules, first match wins.

    1. Win now
    2. Block the opponent's win
    3. Center
    4. Any corner
    5. Anything left
"""

from __future__ import annotations

from typing import List

from tictactoe.core.board import Board
from tictactoe.core.rules import CENTER, CORNERS, completing_moves
from tictactoe.core.types import Mark
from tictactoe.selection.base import Strategy


class HeuristicStrategy(Strategy):
    name = "heuristic"

    def _choose(self, board: Board, mark: Mark, empty: List[int]) -> int:
        cells = board.cells()

        wins = completing_moves(cells, mark)
        if wins:
            return wins[0]

        blocks = completing_moves(cells, mark.opponent)
        if blocks:
            return blocks[0]

        if CENTER in empty:
            return CENTER

        corners = [i for i in CORNERS if i in empty]
        if corners:
            return self.rng.choice(corners)

        return self.rng.choice(empty)
