"""
Configuration and defaults.
"""

from typing import Dict, Mapping, Optional

from tictactoe.core.types import Difficulty, GameMode, Mark


# ---------------------------------------------------------------------------
# Seats
# ---------------------------------------------------------------------------

HUMAN_MARK = Mark.FIRST
COMPUTER_MARK = Mark.SECOND


# ---------------------------------------------------------------------------
# Thinking delays (seconds before the computer's move lands)
# ---------------------------------------------------------------------------

THINKING_DELAYS: Dict[Difficulty, float] = {
    Difficulty.EASY: 0.5,
    Difficulty.MEDIUM: 0.8,
    Difficulty.HARD: 1.2,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_MODE = GameMode.LOCAL_TWO_PLAYER
DEFAULT_DIFFICULTY = Difficulty.MEDIUM


def _merge_delays(overrides: Optional[Mapping]) -> Dict[Difficulty, float]:
    """Overlay per-difficulty overrides on THINKING_DELAYS."""
    delays = dict(THINKING_DELAYS)
    for key, value in (overrides or {}).items():
        delay = float(value)
        if delay < 0:
            raise ValueError(f"Thinking delay for {key} must be >= 0, got {delay}")
        delays[Difficulty(key)] = delay
    return delays


class Config:
    """Engine configuration with sensible defaults."""

    def __init__(
        self,
        mode: GameMode = DEFAULT_MODE,
        difficulty: Difficulty = DEFAULT_DIFFICULTY,
        thinking_delays: Optional[Mapping] = None,
        seed: Optional[int] = None,
    ):
        self.mode = GameMode(mode)
        self.difficulty = Difficulty(difficulty)
        self.thinking_delays = _merge_delays(thinking_delays)
        self.seed = seed

    def delay_for(self, difficulty: Difficulty) -> float:
        return self.thinking_delays[Difficulty(difficulty)]

    @classmethod
    def instant(cls, **kwargs) -> "Config":
        """Config whose computer answers without a thinking delay."""
        return cls(thinking_delays={d: 0.0 for d in Difficulty}, **kwargs)


# Default configuration
DEFAULT_CONFIG = Config()
