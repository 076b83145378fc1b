"""
GameState - immutable snapshot of one game.

The engine swaps in a new snapshot on every change, so a reference held
by an observer never changes underneath it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from tictactoe.core.board import Board
from tictactoe.core.types import IN_PROGRESS, Difficulty, GameMode, GameResult, Mark


@dataclass(frozen=True)
class GameState:
    board: Board
    current_player: Mark
    result: GameResult
    mode: GameMode
    difficulty: Difficulty
    ai_pending: bool = False

    @classmethod
    def initial(cls, mode: GameMode, difficulty: Difficulty) -> "GameState":
        """Empty board, FIRST to move, game in progress."""
        return cls(
            board=Board.empty(),
            current_player=Mark.FIRST,
            result=IN_PROGRESS,
            mode=mode,
            difficulty=difficulty,
        )

    @property
    def is_over(self) -> bool:
        return self.result.is_terminal

    def copy(self, **changes) -> "GameState":
        return replace(self, **changes)
