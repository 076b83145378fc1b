"""
Core module - fundamental types, the board, and win detection.

This module provides the building blocks used throughout the engine.
"""

from tictactoe.core.types import (
    EMPTY,
    DRAW,
    IN_PROGRESS,
    Difficulty,
    GameMode,
    GameResult,
    Mark,
    Outcome,
    State,
)
from tictactoe.core.board import Board, IllegalMove, NUM_CELLS, apply, check_index
from tictactoe.core.rules import (
    CENTER,
    CORNERS,
    WIN_LINES,
    completing_moves,
    evaluate,
    winning_line,
)

__all__ = [
    # Types
    "Mark",
    "GameMode",
    "Difficulty",
    "Outcome",
    "State",
    "GameResult",
    "Board",
    "IllegalMove",
    # Constants
    "EMPTY",
    "DRAW",
    "IN_PROGRESS",
    "NUM_CELLS",
    "WIN_LINES",
    "CENTER",
    "CORNERS",
    # Functions
    "apply",
    "check_index",
    "evaluate",
    "winning_line",
    "completing_moves",
]
