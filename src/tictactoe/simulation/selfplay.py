"""
Strategy-vs-strategy games, played synchronously on bare boards.

Used for benchmarking opponents and for checking that minimax never
loses.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from tictactoe.core.board import Board
from tictactoe.core.rules import evaluate
from tictactoe.core.types import GameResult, Mark
from tictactoe.memory.statistics import GameStatistics
from tictactoe.selection.base import Strategy

logger = logging.getLogger(__name__)


def play_game(
    first: Strategy,
    second: Strategy,
    board: Optional[Board] = None,
    to_move: Mark = Mark.FIRST,
) -> Tuple[GameResult, List[int]]:
    """
    Play one game to the end.

    Args:
        first: Strategy playing Mark.FIRST
        second: Strategy playing Mark.SECOND
        board: Starting position (default: empty)
        to_move: Mark to move first from `board`

    Returns:
        (final result, list of moves played)
    """
    players = {Mark.FIRST: first, Mark.SECOND: second}
    board = board if board is not None else Board.empty()
    mark = Mark(to_move)
    moves: List[int] = []

    result = evaluate(board)
    while not result.is_terminal:
        index = players[mark].choose_move(board, mark)
        board = board.apply(index, mark)
        moves.append(index)
        result = evaluate(board)
        mark = mark.opponent

    return result, moves


def run_matches(
    first: Strategy,
    second: Strategy,
    games: int,
    statistics: Optional[GameStatistics] = None,
) -> GameStatistics:
    """
    Play `games` games and record every result.

    Returns:
        The statistics object (a new one if none was passed)
    """
    statistics = statistics if statistics is not None else GameStatistics()

    for _ in range(games):
        result, _moves = play_game(first, second)
        statistics.record_result(result)

    logger.info("%s vs %s: %s", first.name, second.name, statistics.summary())
    return statistics
