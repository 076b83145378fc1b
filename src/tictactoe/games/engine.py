"""
GameEngine - the single owner of game state.

States:
    IN_PROGRESS -> won(FIRST) | won(SECOND) | DRAW

Terminal states only leave via reset_game / change_game_mode /
change_ai_difficulty, each of which installs a fresh GameState.

Every read and write of the state happens under one re-entrant lock, so
human input and the computer's timer callback never interleave.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Callable, Dict, List, Mapping, Optional

from tictactoe.core.board import Board, check_index
from tictactoe.core.rules import evaluate
from tictactoe.core.types import Difficulty, GameMode, GameResult, Mark
from tictactoe.games.game_state import GameState
from tictactoe.memory.statistics import NullStatistics, StatisticsSink
from tictactoe.selection import Strategy, strategy_for
from tictactoe.simulation.scheduler import TurnScheduler
from tictactoe.utils.config import COMPUTER_MARK, DEFAULT_DIFFICULTY, DEFAULT_MODE

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]
StrategyFactory = Callable[[Difficulty, Optional[random.Random]], Strategy]


class GameEngine:
    """
    Turn-based game engine with an optional computer opponent.

    Args:
        mode: LOCAL_TWO_PLAYER or VS_COMPUTER
        difficulty: Computer strength (only used in VS_COMPUTER)
        statistics: Sink told about every finished game, exactly once
        thinking_delays: Per-difficulty delay overrides, in seconds
        rng: Random source shared by the strategies
        strategy_factory: Builds the strategy for a difficulty
    """

    def __init__(
        self,
        mode: GameMode = DEFAULT_MODE,
        difficulty: Difficulty = DEFAULT_DIFFICULTY,
        statistics: Optional[StatisticsSink] = None,
        thinking_delays: Optional[Mapping[Difficulty, float]] = None,
        rng: Optional[random.Random] = None,
        strategy_factory: StrategyFactory = strategy_for,
    ):
        self._lock = threading.RLock()
        self._statistics = statistics if statistics is not None else NullStatistics()
        self._rng = rng
        self._strategy_factory = strategy_factory
        self._strategies: Dict[Difficulty, Strategy] = {}
        self._listeners: List[Listener] = []
        self._reported = False
        self._state = GameState.initial(GameMode(mode), Difficulty(difficulty))
        self.scheduler = TurnScheduler(self, thinking_delays)

    # ------------------------------------------------------------------
    # Read-only snapshot
    # ------------------------------------------------------------------

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_player(self) -> Mark:
        return self._state.current_player

    @property
    def result(self) -> GameResult:
        return self._state.result

    @property
    def mode(self) -> GameMode:
        return self._state.mode

    @property
    def difficulty(self) -> Difficulty:
        return self._state.difficulty

    @property
    def is_ai_thinking(self) -> bool:
        return self._state.ai_pending

    @property
    def statistics(self) -> StatisticsSink:
        return self._statistics

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call `listener` with every new snapshot.

        Listeners run on whichever thread changed the state (the caller's,
        or the computer's timer thread) while the engine lock is held. An
        exception raised by a listener is logged and does not stop the game.

        Returns:
            A function that removes the listener.
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def strategy(self) -> Strategy:
        """Strategy for the current difficulty (built once per difficulty)."""
        with self._lock:
            difficulty = self._state.difficulty
            if difficulty not in self._strategies:
                self._strategies[difficulty] = self._strategy_factory(difficulty, self._rng)
            return self._strategies[difficulty]

    def wait_for_computer(self, timeout: Optional[float] = None) -> bool:
        """Block until no computer move is pending. Returns False on timeout."""
        return self.scheduler.wait_idle(timeout)

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def make_move(self, index: int) -> None:
        """
        Place the current player's mark at `index`.

        Silently ignored if the game is over, the computer is thinking, or
        the cell is occupied.

        Raises:
            IllegalMove: if index is outside 0-8.
        """
        index = check_index(index)

        with self._lock:
            state = self._state
            if state.result.is_terminal:
                logger.debug("Ignoring move %d: game is over", index)
                return
            if state.ai_pending:
                logger.debug("Ignoring move %d: computer is thinking", index)
                return
            if not state.board.is_empty(index):
                logger.debug("Ignoring move %d: cell is occupied", index)
                return

            self._apply(index)

            if self._computer_to_move():
                self.scheduler.schedule()

    def reset_game(self) -> None:
        """Start over with the same mode and difficulty."""
        with self._lock:
            self.scheduler.cancel()
            self._start_new_game(self._state.mode, self._state.difficulty)

    def change_game_mode(self, mode: GameMode) -> None:
        mode = GameMode(mode)
        with self._lock:
            self.scheduler.cancel()
            self._start_new_game(mode, self._state.difficulty)

    def change_ai_difficulty(self, difficulty: Difficulty) -> None:
        """
        Change the computer's strength.

        Against the computer this always starts a new game, so a move
        computed under the old difficulty can never land. In two-player
        mode only the stored value changes.
        """
        difficulty = Difficulty(difficulty)
        with self._lock:
            if self._state.mode is GameMode.VS_COMPUTER:
                self.scheduler.cancel()
                self._start_new_game(self._state.mode, difficulty)
            else:
                self._replace(self._state.copy(difficulty=difficulty))

    # ------------------------------------------------------------------
    # Internals (lock held)
    # ------------------------------------------------------------------

    def _computer_to_move(self) -> bool:
        state = self._state
        return (
            state.mode is GameMode.VS_COMPUTER
            and not state.result.is_terminal
            and state.current_player == COMPUTER_MARK
        )

    def _apply(self, index: int) -> None:
        state = self._state
        board = state.board.apply(index, state.current_player)
        result = evaluate(board)
        next_player = state.current_player if result.is_terminal else state.current_player.opponent

        # Report before listeners run, since a listener may start the next game
        if result.is_terminal:
            self._report(result)

        self._replace(state.copy(board=board, result=result, current_player=next_player))

    def _apply_computer_move(self, index: int) -> None:
        """Scheduler entry point; bypasses the ai_pending rejection."""
        with self._lock:
            if not self._computer_to_move():
                raise RuntimeError("Computer move applied when it is not the computer's turn")
            self._apply(index)

    def _set_ai_pending(self, pending: bool) -> None:
        with self._lock:
            if self._state.ai_pending != pending:
                self._replace(self._state.copy(ai_pending=pending))

    def _start_new_game(self, mode: GameMode, difficulty: Difficulty) -> None:
        self._reported = False
        self._replace(GameState.initial(mode, difficulty))

    def _replace(self, state: GameState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener %r failed", listener)

    def _report(self, result: GameResult) -> None:
        if self._reported:
            return
        self._reported = True
        logger.info("Game over: %s", result)
        try:
            self._statistics.record_game(result.winner, result.is_draw)
        except Exception:
            logger.exception("Statistics sink failed to record game")
