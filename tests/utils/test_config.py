"""
Tests for tictactoe.utils.config

Tests defaults and the Config class.
"""

import pytest

from tictactoe.core.types import Difficulty, GameMode, Mark
from tictactoe.utils.config import (
    COMPUTER_MARK,
    DEFAULT_CONFIG,
    DEFAULT_DIFFICULTY,
    DEFAULT_MODE,
    HUMAN_MARK,
    THINKING_DELAYS,
    Config,
)


class TestDefaults:
    """Module constant tests."""

    def test_seats(self):
        assert HUMAN_MARK is Mark.FIRST
        assert COMPUTER_MARK is Mark.SECOND

    def test_delay_for_every_difficulty(self):
        assert set(THINKING_DELAYS) == set(Difficulty)

    def test_default_mode_and_difficulty(self):
        assert DEFAULT_MODE is GameMode.LOCAL_TWO_PLAYER
        assert DEFAULT_DIFFICULTY is Difficulty.MEDIUM


class TestConfig:
    """Config class tests."""

    def test_default_config(self):
        assert DEFAULT_CONFIG.mode is DEFAULT_MODE
        assert DEFAULT_CONFIG.difficulty is DEFAULT_DIFFICULTY
        assert DEFAULT_CONFIG.thinking_delays == THINKING_DELAYS
        assert DEFAULT_CONFIG.seed is None

    def test_accepts_string_values(self):
        config = Config(mode="vs-computer", difficulty="hard")
        assert config.mode is GameMode.VS_COMPUTER
        assert config.difficulty is Difficulty.HARD

    def test_partial_delay_override(self):
        config = Config(thinking_delays={"hard": 2.0})
        assert config.delay_for(Difficulty.HARD) == 2.0
        assert config.delay_for(Difficulty.EASY) == THINKING_DELAYS[Difficulty.EASY]

    def test_override_does_not_touch_defaults(self):
        Config(thinking_delays={Difficulty.EASY: 9.0})
        assert THINKING_DELAYS[Difficulty.EASY] == 0.5

    def test_negative_delay_raises(self):
        with pytest.raises(ValueError):
            Config(thinking_delays={Difficulty.EASY: -1})

    def test_unknown_difficulty_raises(self):
        with pytest.raises(ValueError):
            Config(difficulty="impossible")

    def test_instant(self):
        config = Config.instant(mode=GameMode.VS_COMPUTER)
        assert all(delay == 0.0 for delay in config.thinking_delays.values())
        assert config.mode is GameMode.VS_COMPUTER
