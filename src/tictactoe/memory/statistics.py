"""
Outcome recording for finished games.

The engine only knows the StatisticsSink protocol; the concrete sink is
injected at construction so tests can pass a recording fake and the app
can pass one process-wide GameStatistics.
"""

from __future__ import annotations

import threading
from typing import NamedTuple, Optional, Protocol, runtime_checkable

from tictactoe.core.types import GameResult, Mark


@runtime_checkable
class StatisticsSink(Protocol):
    """Receives each completed game exactly once."""

    def record_game(self, winner: Optional[Mark], is_draw: bool) -> None:
        ...


class NullStatistics:
    """Sink that discards everything."""

    def record_game(self, winner: Optional[Mark], is_draw: bool) -> None:
        return None


class Tally(NamedTuple):
    """Outcome counts with derived rates."""

    first_wins: int = 0
    second_wins: int = 0
    draws: int = 0
    # Games reported with neither a winner nor a draw
    unresolved: int = 0

    @property
    def games_played(self) -> int:
        return self.first_wins + self.second_wins + self.draws + self.unresolved

    @property
    def decided(self) -> int:
        return self.first_wins + self.second_wins

    @property
    def win_rate(self) -> float:
        """Percentage of games that ended with a winner (0 when no games)."""
        if self.games_played == 0:
            return 0.0
        return self.decided / self.games_played * 100

    def wins_for(self, mark: Mark) -> int:
        return self.first_wins if mark == Mark.FIRST else self.second_wins

    def losses_for(self, mark: Mark) -> int:
        return self.wins_for(Mark(mark).opponent)


class GameStatistics:
    """
    Thread-safe in-memory counters.

    Records arrive from the engine lock or the AI timer thread, so updates
    are guarded by their own lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._tally = Tally()

    def record_game(self, winner: Optional[Mark], is_draw: bool) -> None:
        with self._lock:
            first, second, draws, unresolved = self._tally
            if is_draw:
                draws += 1
            elif winner == Mark.FIRST:
                first += 1
            elif winner == Mark.SECOND:
                second += 1
            else:
                unresolved += 1
            self._tally = Tally(first, second, draws, unresolved)

    def record_result(self, result: GameResult) -> None:
        """Record a terminal GameResult."""
        if not result.is_terminal:
            raise ValueError("Cannot record a game that is still in progress")
        self.record_game(result.winner, result.is_draw)

    @property
    def tally(self) -> Tally:
        with self._lock:
            return self._tally

    @property
    def games_played(self) -> int:
        return self.tally.games_played

    @property
    def win_rate(self) -> float:
        return self.tally.win_rate

    def reset(self) -> None:
        with self._lock:
            self._tally = Tally()

    def summary(self) -> str:
        t = self.tally
        return (
            f"{t.games_played} games: "
            f"X {t.first_wins}, O {t.second_wins}, draws {t.draws}"
        )
