"""
Public API for playing the game.

Usage:
    from tictactoe import create_engine, Config, GameMode, play_console

    engine = create_engine(Config(mode=GameMode.VS_COMPUTER))
    play_console(engine)
"""

from __future__ import annotations

import logging
from typing import Callable

from tictactoe.core.types import GameMode, GameResult, Mark, State
from tictactoe.games.engine import GameEngine
from tictactoe.memory import GameStatistics, NullStatistics, StatisticsSink, Tally
from tictactoe.simulation import run_matches
from tictactoe.utils.config import Config, DEFAULT_CONFIG, HUMAN_MARK
from tictactoe.utils.factory import create_engine, create_strategy

logger = logging.getLogger(__name__)

PROMPT = "Move (0-8, r = new game, q = quit): "

# Game-over wording for the human seat in computer mode
VERDICTS = {
    State.WIN: "you win",
    State.LOSS: "the computer wins",
    State.TIE: "draw",
}


def _render(engine: GameEngine, output_fn: Callable[[str], None]) -> None:
    state = engine.state
    output_fn(state.board.state_string())
    if state.result.is_terminal:
        verdict = str(state.result)
        if state.mode is GameMode.VS_COMPUTER:
            verdict = VERDICTS[state.result.outcome_for(HUMAN_MARK)]
        output_fn(f"Game over: {verdict}. Press r to play again.")
    else:
        output_fn(f"{state.current_player.symbol} to move")


def _human_turn(
    engine: GameEngine,
    input_fn: Callable[[str], str],
    output_fn: Callable[[str], None],
) -> bool:
    """Read one command and apply it. Returns False when the player quits."""
    raw = input_fn(PROMPT).strip().lower()
    if raw in ("q", "quit"):
        return False
    if raw in ("r", "reset"):
        engine.reset_game()
        return True

    try:
        engine.make_move(int(raw))
    except ValueError as e:
        output_fn(f"Invalid input: {e}")
    return True


def play_console(
    engine: GameEngine,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> GameResult:
    """
    Text front end: read moves, wait for the computer, print the board.

    Returns:
        Result of the game on screen when the player quits.
    """
    output_fn(f"Starting {engine.mode.value} game ({engine.difficulty.value})")
    _render(engine, output_fn)

    try:
        while True:
            before = engine.state
            if not _human_turn(engine, input_fn, output_fn):
                break
            engine.wait_for_computer()
            if engine.state is not before:
                _render(engine, output_fn)

    except (KeyboardInterrupt, EOFError):
        output_fn("\nInterrupted - quitting")
    except Exception:
        logger.exception("Fatal error in game loop")
        raise
    finally:
        engine.scheduler.cancel()

    return engine.result


def benchmark(
    first_difficulty: str,
    second_difficulty: str,
    games: int,
    seed: int | None = None,
) -> GameStatistics:
    """Play two difficulty levels against each other (FIRST vs SECOND)."""
    first = create_strategy(first_difficulty, seed)
    second = create_strategy(second_difficulty, None if seed is None else seed + 1)
    return run_matches(first, second, games)


def describe_record(tally: Tally, mark: Mark = HUMAN_MARK) -> str:
    """One seat's record, e.g. "X: 2 wins, 1 losses, 3 draws"."""
    mark = Mark(mark)
    return (
        f"{mark.symbol}: {tally.wins_for(mark)} wins, "
        f"{tally.losses_for(mark)} losses, {tally.draws} draws"
    )


__all__ = [
    "play_console",
    "benchmark",
    "describe_record",
    "create_engine",
    "create_strategy",
    "Config",
    "DEFAULT_CONFIG",
    "GameStatistics",
    "NullStatistics",
    "StatisticsSink",
]
