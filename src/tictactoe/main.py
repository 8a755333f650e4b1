from __future__ import annotations

import argparse
import logging

from tictactoe import config
from tictactoe.game.controller import run_game
from tictactoe.game.roster import default_roster


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play tic-tac-toe against a minimax AI.")
    ap.add_argument("--width", type=int, default=config.BOARD_WIDTH, help="Board width (square board). Full search is only practical for 3.")
    ap.add_argument("--ai-first", action="store_true", help="Let the AI open the game")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")
    ap.add_argument("--no-delay", action="store_true", help="Skip the AI thinking pause")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.width <= 0:
        ap.error("--width must be positive")

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False
    if args.no_delay:
        config.AI_THINK_DELAY_SEC = 0

    roster = default_roster(human_first=not args.ai_first)
    print("Welcome to tic-tac-toe.")

    try:
        run_game(roster, width=args.width)
    except (KeyboardInterrupt, EOFError):
        print("\nBye.")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
