from __future__ import annotations

import logging
import sys

from .cli.analyze_csv import main as analyze_main
from .cli.make_figures import main as figures_main

COMMANDS = {
    "analyze": analyze_main,
    "figures": figures_main,
}

USAGE = """Usage:
  python -m tictactoe_analysis [analyze] [--csv PATH] [--metric ppg] [--summary]
  python -m tictactoe_analysis figures [--csv PATH] [--figures-dir data/figures]"""


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # No subcommand, or bare flags, means analyze
    if not argv or argv[0].startswith("-"):
        return analyze_main(argv)

    cmd = COMMANDS.get(argv[0].lower())
    if cmd is None:
        print(USAGE, file=sys.stderr)
        return 2
    return cmd(argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
