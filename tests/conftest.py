"""
Shared test fixtures for tictactoe tests.

Design principles:
- Engines with millisecond thinking delays so timing tests stay fast
- Recording statistics fake instead of any global store
- Minimal, focused fixtures
"""

import random
from typing import Generator, List, Optional, Tuple

import pytest

from tictactoe.core.board import Board
from tictactoe.core.types import Difficulty, GameMode, Mark
from tictactoe.games.engine import GameEngine


# Short enough to keep the suite quick, long enough to cancel before firing.
FAST_DELAY = 0.05


# =============================================================================
# Statistics Fixtures
# =============================================================================

class RecordingStatistics:
    """StatisticsSink fake that remembers every call."""

    def __init__(self):
        self.calls: List[Tuple[Optional[Mark], bool]] = []

    def record_game(self, winner: Optional[Mark], is_draw: bool) -> None:
        self.calls.append((winner, is_draw))


@pytest.fixture
def recorder() -> RecordingStatistics:
    return RecordingStatistics()


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture
def midgame_board() -> Board:
    """X O _ / X _ O / _ _ _"""
    return Board.from_cells([1, 2, 0, 1, 0, 2, 0, 0, 0])


# =============================================================================
# Engine Fixtures
# =============================================================================

def make_engine(
    mode: GameMode = GameMode.VS_COMPUTER,
    difficulty: Difficulty = Difficulty.MEDIUM,
    delay: float = FAST_DELAY,
    statistics=None,
    seed: int = 0,
) -> GameEngine:
    return GameEngine(
        mode=mode,
        difficulty=difficulty,
        statistics=statistics,
        thinking_delays={d: delay for d in Difficulty},
        rng=random.Random(seed),
    )


@pytest.fixture
def two_player_engine(recorder: RecordingStatistics) -> Generator[GameEngine, None, None]:
    engine = make_engine(mode=GameMode.LOCAL_TWO_PLAYER, statistics=recorder)
    yield engine
    engine.scheduler.cancel()


@pytest.fixture
def computer_engine(recorder: RecordingStatistics) -> Generator[GameEngine, None, None]:
    engine = make_engine(statistics=recorder)
    yield engine
    engine.scheduler.cancel()


@pytest.fixture
def engine_factory():
    """Build engines with fast delays; all are cancelled on teardown."""
    engines: List[GameEngine] = []

    def factory(**kwargs) -> GameEngine:
        engine = make_engine(**kwargs)
        engines.append(engine)
        return engine

    yield factory
    for engine in engines:
        engine.scheduler.cancel()
