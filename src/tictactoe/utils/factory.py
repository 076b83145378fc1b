"""
Factory functions for creating engines and strategies.
"""

import random
from typing import Optional

from tictactoe.core.types import Difficulty
from tictactoe.games.engine import GameEngine
from tictactoe.memory.statistics import StatisticsSink
from tictactoe.selection import Strategy, strategy_for
from tictactoe.utils.config import DEFAULT_CONFIG, Config


def create_strategy(difficulty: Difficulty, seed: Optional[int] = None) -> Strategy:
    """
    Create a strategy, seeded if `seed` is given.

    Args:
        difficulty: Difficulty enum member or its value ("easy", ...)
        seed: Optional seed for the strategy's random source

    Returns:
        Strategy instance
    """
    rng = random.Random(seed) if seed is not None else None
    return strategy_for(Difficulty(difficulty), rng)


def create_engine(
    config: Config = DEFAULT_CONFIG,
    statistics: Optional[StatisticsSink] = None,
) -> GameEngine:
    """
    Create an engine from a configuration.

    Args:
        config: Mode, difficulty, thinking delays and seed
        statistics: Sink for finished games (default: discard)

    Returns:
        Configured GameEngine
    """
    rng = random.Random(config.seed) if config.seed is not None else None
    return GameEngine(
        mode=config.mode,
        difficulty=config.difficulty,
        statistics=statistics,
        thinking_delays=config.thinking_delays,
        rng=rng,
    )
