"""
tictactoe - turn-based 3x3 game engine with a pluggable computer opponent.

Quick Start:
    from tictactoe import create_engine, Config, GameMode, Difficulty

    engine = create_engine(Config(mode=GameMode.VS_COMPUTER, difficulty=Difficulty.HARD))
    engine.make_move(4)
    engine.wait_for_computer()
    print(engine.board.state_string())

Modules:
    core       - Marks, results, the immutable Board and win detection
    games      - GameState snapshots and the GameEngine state machine
    selection  - Computer strategies (random, heuristic, minimax)
    simulation - Cancellable thinking-delay scheduler and self-play
    memory     - Statistics sinks for finished games
"""

from tictactoe.api import play_console, benchmark

from tictactoe.core import (
    Board,
    Difficulty,
    GameMode,
    GameResult,
    IllegalMove,
    Mark,
    evaluate,
)
from tictactoe.games import GameEngine, GameState
from tictactoe.memory import GameStatistics, NullStatistics, StatisticsSink
from tictactoe.selection import strategy_for
from tictactoe.utils.config import Config
from tictactoe.utils.factory import create_engine, create_strategy

__version__ = "1.0.0"

__all__ = [
    # Main API
    "create_engine",
    "create_strategy",
    "play_console",
    "benchmark",
    "strategy_for",
    "Config",
    # Engine
    "GameEngine",
    "GameState",
    # Types
    "Board",
    "Mark",
    "GameMode",
    "Difficulty",
    "GameResult",
    "IllegalMove",
    "evaluate",
    # Statistics
    "StatisticsSink",
    "NullStatistics",
    "GameStatistics",
]
