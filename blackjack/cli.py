"""Console driver: ask for the table, then play rounds until the user stops.

Run:
    blackjack
    python -m blackjack.cli --players Ann Bob --seed 7
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable

import numpy as np

from blackjack.config import LOG_LEVEL, MAX_PLAYERS, MIN_PLAYERS, default_seed
from blackjack.engine.decisions import is_yes
from blackjack.engine.game import Game
from blackjack.logging_utils import get_logger, setup_logging

logger = get_logger(__name__)

BANNER = "\t\tWelcome to Blackjack!\n"

# prompt(text) -> line; input() by default
Prompt = Callable[[str], str]


def ask_player_count(prompt: Prompt | None = None) -> int:
    """Ask until an integer in 1..7 is entered.

    Raises:
        EOFError: If input ends before a valid count is given.
    """
    prompt = prompt or input
    while True:
        answer = prompt(f"How many players? ({MIN_PLAYERS}-{MAX_PLAYERS}): ").strip()
        try:
            count = int(answer)
        except ValueError:
            continue
        if MIN_PLAYERS <= count <= MAX_PLAYERS:
            return count


def ask_player_names(count: int, prompt: Prompt | None = None) -> list[str]:
    """Read one non-blank name per player."""
    prompt = prompt or input
    names: list[str] = []
    while len(names) < count:
        name = prompt("Enter player name: ").strip()
        if name:
            names.append(name)
    return names


def ask_play_again(prompt: Prompt | None = None) -> bool:
    try:
        return is_yes((prompt or input)("Do you want to play again? (Y/N): "))
    except EOFError:
        return False


def run_session(game: Game, prompt: Prompt | None = None) -> int:
    """Play rounds on ``game`` until the user declines. Returns rounds played."""
    rounds = 0
    while True:
        game.play()
        rounds += 1
        if not ask_play_again(prompt):
            return rounds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blackjack", description="Text Blackjack against the House")
    parser.add_argument(
        "--players",
        nargs="+",
        metavar="NAME",
        help=f"Player names ({MIN_PLAYERS}-{MAX_PLAYERS}); skips the interactive prompts",
    )
    parser.add_argument("--seed", type=int, default=None, help="Shuffle seed (default: BLACKJACK_SEED or clock)")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="DEBUG, INFO, WARNING or ERROR")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.players is not None and not MIN_PLAYERS <= len(args.players) <= MAX_PLAYERS:
        parser.error(f"--players takes {MIN_PLAYERS}-{MAX_PLAYERS} names")

    print(BANNER)
    try:
        names = args.players or ask_player_names(ask_player_count())
        print()
        seed = args.seed if args.seed is not None else default_seed()
        logger.info("starting table %s with seed %d", names, seed)
        game = Game(names, rng=np.random.default_rng(seed))
        rounds = run_session(game)
    except EOFError:
        print()
        return 0
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130

    logger.info("session over after %d round(s)", rounds)
    return 0


if __name__ == "__main__":
    sys.exit(main())
