"""
Command-line interface for playing and benchmarking.
"""

import argparse
import logging
from typing import List, Optional

from tictactoe.api import benchmark, describe_record, play_console
from tictactoe.core.types import Difficulty, GameMode
from tictactoe.memory import GameStatistics
from tictactoe.utils.config import Config
from tictactoe.utils.factory import create_engine

DIFFICULTIES = [d.value for d in Difficulty]
MODES = [m.value for m in GameMode]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe against a friend or the computer"
    )
    parser.add_argument(
        "--mode", "-m",
        choices=MODES,
        default=GameMode.VS_COMPUTER.value,
        help="Game mode (default: vs-computer)",
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=DIFFICULTIES,
        default=Difficulty.MEDIUM.value,
        help="Computer strength (default: medium)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for the computer's random choices",
    )
    parser.add_argument(
        "--self-play",
        type=int,
        metavar="GAMES",
        default=None,
        help="Instead of playing, run GAMES of --opponent (X) vs --difficulty (O)",
    )
    parser.add_argument(
        "--opponent", "-o",
        choices=DIFFICULTIES,
        default=Difficulty.EASY.value,
        help="Strategy playing X in --self-play (default: easy)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.self_play is not None:
        if args.self_play < 1:
            raise SystemExit("--self-play needs a positive number of games")
        stats = benchmark(args.opponent, args.difficulty, args.self_play, seed=args.seed)
        print(f"{args.opponent} (X) vs {args.difficulty} (O): {stats.summary()}")
        return

    config = Config(mode=args.mode, difficulty=args.difficulty, seed=args.seed)
    statistics = GameStatistics()
    engine = create_engine(config, statistics=statistics)

    play_console(engine)
    print(f"Session: {statistics.summary()}")
    if config.mode is GameMode.VS_COMPUTER:
        print(f"You as {describe_record(statistics.tally)}")


if __name__ == "__main__":
    main()
