"""
Tests for tictactoe.memory.statistics

Tests the StatisticsSink protocol and the in-memory counters.
"""

import threading

import pytest

from tictactoe.core.types import DRAW, IN_PROGRESS, GameResult, Mark
from tictactoe.memory import GameStatistics, NullStatistics, StatisticsSink, Tally


@pytest.fixture
def stats() -> GameStatistics:
    return GameStatistics()


class TestTally:
    """Tally NamedTuple tests."""

    def test_defaults(self):
        t = Tally()
        assert t.games_played == 0
        assert t.win_rate == 0.0

    def test_win_rate(self):
        t = Tally(first_wins=3, second_wins=1, draws=4)
        assert t.games_played == 8
        assert t.decided == 4
        assert t.win_rate == pytest.approx(50.0)

    def test_per_mark(self):
        t = Tally(first_wins=3, second_wins=1, draws=0)
        assert t.wins_for(Mark.FIRST) == 3
        assert t.losses_for(Mark.FIRST) == 1
        assert t.wins_for(Mark.SECOND) == 1

    def test_unresolved_counts_as_played(self):
        t = Tally(first_wins=1, unresolved=1)
        assert t.games_played == 2
        assert t.win_rate == pytest.approx(50.0)


class TestGameStatistics:
    """GameStatistics tests."""

    def test_initial(self, stats: GameStatistics):
        assert stats.tally == Tally()
        assert stats.games_played == 0
        assert stats.win_rate == 0.0

    def test_record_first_win(self, stats: GameStatistics):
        stats.record_game(Mark.FIRST, False)
        assert stats.tally == Tally(1, 0, 0)

    def test_record_second_win(self, stats: GameStatistics):
        stats.record_game(Mark.SECOND, False)
        assert stats.tally == Tally(0, 1, 0)

    def test_record_draw(self, stats: GameStatistics):
        stats.record_game(None, True)
        assert stats.tally == Tally(0, 0, 1)

    def test_win_rate(self, stats: GameStatistics):
        stats.record_game(Mark.FIRST, False)
        stats.record_game(Mark.SECOND, False)
        stats.record_game(None, True)
        stats.record_game(None, True)
        assert stats.win_rate == pytest.approx(50.0)

    def test_no_winner_no_draw_still_counted(self, stats: GameStatistics):
        stats.record_game(None, False)
        assert stats.tally == Tally(unresolved=1)
        assert stats.games_played == 1
        assert stats.win_rate == 0.0

    def test_record_result(self, stats: GameStatistics):
        stats.record_result(GameResult.won(Mark.SECOND))
        stats.record_result(DRAW)
        assert stats.tally == Tally(0, 1, 1)

    def test_record_in_progress_raises(self, stats: GameStatistics):
        with pytest.raises(ValueError):
            stats.record_result(IN_PROGRESS)

    def test_reset(self, stats: GameStatistics):
        stats.record_game(Mark.FIRST, False)
        stats.reset()
        assert stats.games_played == 0

    def test_summary(self, stats: GameStatistics):
        stats.record_game(Mark.FIRST, False)
        assert stats.summary() == "1 games: X 1, O 0, draws 0"

    def test_concurrent_records(self, stats: GameStatistics):
        def worker():
            for _ in range(500):
                stats.record_game(Mark.FIRST, False)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert stats.tally.first_wins == 2000


class TestProtocol:
    """StatisticsSink protocol tests."""

    def test_implementations_satisfy_protocol(self):
        assert isinstance(GameStatistics(), StatisticsSink)
        assert isinstance(NullStatistics(), StatisticsSink)

    def test_null_discards(self):
        assert NullStatistics().record_game(Mark.FIRST, False) is None
