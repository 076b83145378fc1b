"""
Simulation module - turn scheduling and self-play.

Provides the delayed, cancellable computer-move scheduler used by the
engine, and synchronous strategy-vs-strategy matches.
"""

from tictactoe.simulation.scheduler import TurnScheduler
from tictactoe.simulation.selfplay import play_game, run_matches

__all__ = [
    "TurnScheduler",
    "play_game",
    "run_matches",
]
