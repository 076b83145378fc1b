"""
Turn scheduler - delayed, cancellable computer moves.

States per engine:

    Idle --schedule()--> AIThinking --timer fires--> Idle
                              |
                              +----cancel()--------> Idle

Each scheduled move captures the current generation number. cancel() and
schedule() bump the generation, so a timer that fires late (or was
already waiting on the engine lock) sees a stale token and does nothing.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Mapping, Optional, TYPE_CHECKING

from tictactoe.core.types import Difficulty
from tictactoe.utils.config import COMPUTER_MARK, THINKING_DELAYS

if TYPE_CHECKING:
    from tictactoe.games.engine import GameEngine

logger = logging.getLogger(__name__)


class TurnScheduler:
    """
    Runs at most one pending computer move for an engine.

    Holds only scheduling metadata (the pending timer and the generation
    token); board and result live on the engine. All transitions happen
    under the engine's lock.
    """

    def __init__(self, engine: "GameEngine", thinking_delays: Optional[Mapping] = None):
        self._engine = engine
        self._delays: Dict[Difficulty, float] = dict(THINKING_DELAYS)
        self._delays.update({Difficulty(k): float(v) for k, v in (thinking_delays or {}).items()})
        self._generation = 0
        self._timer: Optional[threading.Timer] = None
        self._idle = threading.Event()
        self._idle.set()

    @property
    def is_thinking(self) -> bool:
        return self._timer is not None

    @property
    def generation(self) -> int:
        return self._generation

    def delay_for(self, difficulty: Difficulty) -> float:
        return self._delays[difficulty]

    def schedule(self) -> None:
        """Start a delayed computer move, replacing any pending one."""
        engine = self._engine
        with engine.lock:
            self._stop_timer()
            self._generation += 1
            token = self._generation
            delay = self.delay_for(engine.difficulty)

            timer = threading.Timer(delay, self._fire, args=(token,))
            timer.daemon = True
            self._timer = timer
            self._idle.clear()
            logger.debug("Computer move %d scheduled in %.2fs", token, delay)
            timer.start()

            # Published last; the timer blocks on the lock until we return
            engine._set_ai_pending(True)

    def cancel(self) -> None:
        """
        Drop the pending computer move, if any.

        ai_pending is cleared before this returns, so human input is
        unblocked immediately.
        """
        engine = self._engine
        with engine.lock:
            had_timer = self._timer is not None
            self._generation += 1
            self._stop_timer()
            if engine.state.ai_pending:
                engine._set_ai_pending(False)
            self._idle.set()
            if had_timer:
                logger.debug("Computer move cancelled (generation now %d)", self._generation)

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """
        Block until no computer move is pending.

        Must not be called while holding the engine lock.

        Returns:
            True if idle, False on timeout.
        """
        return self._idle.wait(timeout)

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self, token: int) -> None:
        """Timer callback, runs on the timer thread."""
        engine = self._engine
        with engine.lock:
            if token != self._generation:
                logger.debug("Discarding stale computer move %d (current %d)", token, self._generation)
                return

            self._timer = None
            try:
                board = engine.state.board
                index = engine.strategy().choose_move(board, COMPUTER_MARK)
                engine._apply_computer_move(index)
            except Exception:
                # Not re-raised: the timer thread has no caller to handle it
                logger.exception("Computer move failed")
            finally:
                try:
                    engine._set_ai_pending(False)
                finally:
                    self._idle.set()
