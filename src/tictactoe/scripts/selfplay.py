from __future__ import annotations

import argparse
import csv
import logging
import time
from functools import partial
from itertools import combinations
from pathlib import Path
from typing import Dict, List

from tictactoe import config
from tictactoe.ai.adjacency_agent import AdjacencyAgent
from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.core.rules import Outcome, Status
from tictactoe.game.headless import play_headless
from tictactoe.game.roster import Roster, Seat

from .selfplay_scoring import avg_ms_per_move, avg_nodes_per_move, ppg, strength_score
from .selfplay_types import Agg, Team

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "moves", "time_ms", "nodes",
    "avg_ms_per_move", "avg_nodes_per_move",
]


def _make_minimax(seed: int, prune: bool = True) -> MinimaxAgent:
    return MinimaxAgent(name="Minimax", prune=prune)


def _make_random(seed: int) -> RandomAgent:
    return RandomAgent(name="Random", seed=seed)


def _make_adjacency(seed: int) -> AdjacencyAgent:
    return AdjacencyAgent(name="Adjacency")


def build_roster() -> List[Team]:
    return [
        Team("Minimax", partial(_make_minimax, prune=True)),
        Team("Minimax (no pruning)", partial(_make_minimax, prune=False)),
        Team("Random", _make_random),
        Team("Adjacency", _make_adjacency),
    ]


def add_result(agg_a: Agg, agg_b: Agg, outcome: Outcome, a_piece: str) -> None:
    agg_a.games += 1
    agg_b.games += 1

    if outcome.status is Status.DRAW:
        agg_a.draws += 1
        agg_b.draws += 1
        agg_a.points += 0.5
        agg_b.points += 0.5
        return

    if outcome.winner == a_piece:
        agg_a.wins += 1
        agg_b.losses += 1
        agg_a.points += 1.0
    else:
        agg_b.wins += 1
        agg_a.losses += 1
        agg_b.points += 1.0


def _add_stats(agg: Agg, stats: Dict[str, int]) -> None:
    agg.moves += stats["moves"]
    agg.time_ms += stats["time_ms"]
    agg.nodes += stats["nodes"]


def play_pairing(a: Team, b: Team, agg: Dict[str, Agg], games: int, seed: int, width: int) -> None:
    """Play `games` games between two teams, swapping who opens each game."""
    for g in range(games):
        a_first = (g % 2 == 0)
        game_seed = seed + g
        seat_a = Seat(a.name, "X" if a_first else "O", a.make(game_seed))
        seat_b = Seat(b.name, "O" if a_first else "X", b.make(game_seed + 7919))
        roster = Roster(seat_a, seat_b) if a_first else Roster(seat_b, seat_a)

        outcome, stats = play_headless(roster, width)
        add_result(agg[a.name], agg[b.name], outcome, seat_a.piece)
        _add_stats(agg[a.name], stats[a.name])
        _add_stats(agg[b.name], stats[b.name])
        logger.debug("%s vs %s game %d: %s", a.name, b.name, g + 1, outcome)


def run_selfplay(teams: List[Team], games_per_pair: int, seed: int, width: int = config.BOARD_WIDTH) -> Dict[str, Agg]:
    agg = {t.name: Agg() for t in teams}
    for i, (a, b) in enumerate(combinations(teams, 2)):
        logger.info("Pairing %s vs %s (%d games)", a.name, b.name, games_per_pair)
        play_pairing(a, b, agg, games_per_pair, seed + 1000 * i, width)
    return agg


def print_table(agg: Dict[str, Agg], z: float) -> None:
    ranked = sorted(agg.items(), key=lambda kv: (-ppg(kv[1]), kv[0]))
    print("\n=== SELF-PLAY RESULTS ===")
    print(f"{'rk':>3}  {'name':<22}{'W-D-L':>12}{'ppg':>8}{'lcb':>8}{'ms/move':>10}{'nodes/move':>12}")
    for rk, (name, a) in enumerate(ranked, start=1):
        wdl = f"{a.wins}-{a.draws}-{a.losses}"
        print(
            f"{rk:>3}  {name:<22}{wdl:>12}{ppg(a):>8.3f}{strength_score(a, z):>8.3f}"
            f"{avg_ms_per_move(a):>10.1f}{avg_nodes_per_move(a):>12.1f}"
        )


def write_csv(agg: Dict[str, Agg], out_dir: Path, z: float) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = out_dir / f"selfplay_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for name, a in agg.items():
            w.writerow([
                name,
                a.games, a.wins, a.draws, a.losses,
                a.points, round(ppg(a), 6),
                round(strength_score(a, z), 6),
                a.moves, a.time_ms, a.nodes,
                round(avg_ms_per_move(a), 3), round(avg_nodes_per_move(a), 3),
            ])
    return out_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play the built-in agents against each other and export a results CSV.")
    ap.add_argument("--games", type=int, default=config.SELFPLAY_GAMES, help="Games per pairing")
    ap.add_argument("--seed", type=int, default=config.SELFPLAY_SEED, help="Seed for the random agents")
    ap.add_argument("--width", type=int, default=config.BOARD_WIDTH, help="Board width")
    ap.add_argument("--z", type=float, default=1.28, help="Z value for the Wilson lower bound")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Where to write the CSV")
    ap.add_argument("--no-csv", action="store_true", help="Only print the table")
    ap.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    teams = build_roster()
    logger.info("Roster size: %d teams", len(teams))

    agg = run_selfplay(teams, args.games, args.seed, args.width)
    print_table(agg, args.z)

    if not args.no_csv:
        out_path = write_csv(agg, Path(args.results_dir), args.z)
        print(f"\nWrote CSV: {out_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
