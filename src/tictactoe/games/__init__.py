"""
Games module - game state and the engine that owns it.
"""

from tictactoe.games.game_state import GameState
from tictactoe.games.engine import GameEngine

__all__ = [
    "GameState",
    "GameEngine",
]
