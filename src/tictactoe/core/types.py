"""
Core types and constants.

This module contains the fundamental types used throughout the engine:
- Mark: the two player symbols
- GameMode / Difficulty: engine configuration enums
- GameResult: in-progress / won / draw, with per-player perspective
"""

from __future__ import annotations

from enum import Enum, IntEnum, auto
from typing import NamedTuple, Optional


# Cell encoding on the int8 board
EMPTY = 0


class Mark(IntEnum):
    """A player symbol. Empty cells are encoded as 0, never as a Mark."""

    FIRST = 1
    SECOND = 2

    @property
    def opponent(self) -> "Mark":
        return Mark(3 - self.value)  # Toggle 1↔2

    @property
    def symbol(self) -> str:
        return MARK_SYMBOLS[self]


MARK_SYMBOLS = {Mark.FIRST: "X", Mark.SECOND: "O"}


class GameMode(Enum):
    LOCAL_TWO_PLAYER = "two-player"
    VS_COMPUTER = "vs-computer"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Outcome(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()


class State(Enum):
    """Result of a game from one player's point of view."""

    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


class GameResult(NamedTuple):
    """Game outcome. `winner` is set only when outcome is WON."""

    outcome: Outcome = Outcome.IN_PROGRESS
    winner: Optional[Mark] = None

    @classmethod
    def won(cls, mark: Mark) -> "GameResult":
        return cls(Outcome.WON, Mark(mark))

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.outcome is Outcome.DRAW

    def outcome_for(self, mark: Mark) -> State:
        """Return WIN / TIE / LOSS / NEUTRAL for the given player."""
        if self.outcome is Outcome.WON:
            return State.WIN if self.winner == mark else State.LOSS
        if self.outcome is Outcome.DRAW:
            return State.TIE
        return State.NEUTRAL

    def __str__(self) -> str:
        if self.outcome is Outcome.WON:
            return f"{self.winner.symbol} wins"
        if self.outcome is Outcome.DRAW:
            return "draw"
        return "in progress"


IN_PROGRESS = GameResult(Outcome.IN_PROGRESS)
DRAW = GameResult(Outcome.DRAW)
