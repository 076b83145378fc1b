"""
Memory module - recording of completed games.
"""

from tictactoe.memory.statistics import (
    GameStatistics,
    NullStatistics,
    StatisticsSink,
    Tally,
)

__all__ = [
    "StatisticsSink",
    "NullStatistics",
    "GameStatistics",
    "Tally",
]
