"""
Hard opponent: exhaustive minimax over the remaining game tree.

Terminal scores, from the AI's point of view:
    AI win        +10 - plies   (prefer faster wins)
    opponent win  plies - 10    (prefer slower losses)
    draw          0

Alpha-beta pruning cuts the tree without changing the chosen move: the
root only replaces its best move on a strictly greater score, so ties
still go to the first empty index in board order.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional

from tictactoe.core.board import Board
from tictactoe.core.rules import line_winner
from tictactoe.core.types import EMPTY, Mark
from tictactoe.selection.base import Strategy

logger = logging.getLogger(__name__)

WIN_SCORE = 10

_NEG_INF = float("-inf")
_POS_INF = float("inf")


class MinimaxStrategy(Strategy):
    name = "minimax"

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__(rng)
        # Nodes visited by the last search (for debugging)
        self.nodes_evaluated = 0

    def _choose(self, board: Board, mark: Mark, empty: List[int]) -> int:
        self.nodes_evaluated = 0
        cells = board.cells()
        ai = int(mark)

        best_score = _NEG_INF
        best_move = empty[0]
        alpha = _NEG_INF

        for index in empty:
            cells[index] = ai
            score = self._minimax(cells, ai, 1, False, alpha, _POS_INF)
            cells[index] = EMPTY

            if score > best_score:
                best_score = score
                best_move = index
            alpha = max(alpha, score)

        logger.debug(
            "Minimax evaluated %d positions. Best move: %d (score: %s)",
            self.nodes_evaluated, best_move, best_score,
        )
        return best_move

    def score_moves(self, board: Board, mark: Mark) -> Dict[int, float]:
        """Exact minimax score of every empty cell (no root pruning)."""
        cells = board.cells()
        ai = int(mark)
        scores = {}
        for index in board.empty_cells():
            cells[index] = ai
            scores[index] = self._minimax(cells, ai, 1, False, _NEG_INF, _POS_INF)
            cells[index] = EMPTY
        return scores

    def _minimax(
        self,
        cells: List[int],
        ai: int,
        ply: int,
        is_maximizing: bool,
        alpha: float,
        beta: float,
    ) -> float:
        """Score `cells` with the side given by `is_maximizing` to move."""
        self.nodes_evaluated += 1

        winner = line_winner(cells)
        if winner == ai:
            return WIN_SCORE - ply
        if winner != EMPTY:
            return ply - WIN_SCORE
        if EMPTY not in cells:
            return 0

        if is_maximizing:
            best = _NEG_INF
            for i in range(len(cells)):
                if cells[i] != EMPTY:
                    continue
                cells[i] = ai
                best = max(best, self._minimax(cells, ai, ply + 1, False, alpha, beta))
                cells[i] = EMPTY
                alpha = max(alpha, best)
                if beta <= alpha:
                    break  # Prune
            return best

        opponent = 3 - ai
        best = _POS_INF
        for i in range(len(cells)):
            if cells[i] != EMPTY:
                continue
            cells[i] = opponent
            best = min(best, self._minimax(cells, ai, ply + 1, True, alpha, beta))
            cells[i] = EMPTY
            beta = min(beta, best)
            if beta <= alpha:
                break  # Prune
        return best
