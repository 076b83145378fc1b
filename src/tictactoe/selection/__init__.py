"""
Selection module - computer opponent strategies.

Provides the main entry points:
- STRATEGIES: Difficulty -> strategy class registry
- strategy_for(): build the strategy for a difficulty
"""

from __future__ import annotations

import random
from typing import Dict, Optional, Type

from tictactoe.core.types import Difficulty
from tictactoe.selection.base import Strategy
from tictactoe.selection.heuristic import HeuristicStrategy
from tictactoe.selection.minimax import MinimaxStrategy
from tictactoe.selection.random_choice import RandomStrategy

STRATEGIES: Dict[Difficulty, Type[Strategy]] = {
    Difficulty.EASY: RandomStrategy,
    Difficulty.MEDIUM: HeuristicStrategy,
    Difficulty.HARD: MinimaxStrategy,
}


def strategy_for(difficulty: Difficulty, rng: Optional[random.Random] = None) -> Strategy:
    """
    Create the strategy for a difficulty level.

    Args:
        difficulty: Difficulty enum member
        rng: Optional random source (seed it for reproducible play)

    Returns:
        Strategy instance
    """
    return STRATEGIES[Difficulty(difficulty)](rng)


__all__ = [
    "Strategy",
    "RandomStrategy",
    "HeuristicStrategy",
    "MinimaxStrategy",
    "STRATEGIES",
    "strategy_for",
]
