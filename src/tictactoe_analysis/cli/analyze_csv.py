from __future__ import annotations

import argparse
import logging

from ..io.load_results import DEFAULT_PATTERN, DEFAULT_RESULTS_DIR, LoadSpec, load_results, resolve_csv_path
from ..metrics.summarize import SummaryConfig, numeric_summary, outcome_shares, top_table

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tictactoe_analysis analyze",
        description="Rank the agents in a self-play results CSV.",
    )
    ap.add_argument("--csv", type=str, default=None, help="Results CSV. Defaults to the newest one in --results-dir.")
    ap.add_argument("--results-dir", type=str, default=DEFAULT_RESULTS_DIR, help="Where selfplay writes its CSVs")
    ap.add_argument("--pattern", type=str, default=DEFAULT_PATTERN, help="Glob used to find the newest CSV")
    ap.add_argument("--metric", type=str, default="ppg", help="Ranking metric (ppg, strength_wilson_lcb, avg_ms_per_move, ...)")
    ap.add_argument("--top", type=int, default=20, help="Rows to show")
    ap.add_argument("--min-games", type=int, default=0, help="Hide agents with fewer games")
    ap.add_argument("--summary", action="store_true", help="Also print describe() of every numeric column")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = resolve_csv_path(args.csv, args.results_dir, args.pattern)
    df = load_results(LoadSpec(csv_path=csv_path))
    logger.info("Loaded %d agents from %s", len(df), csv_path)

    cfg = SummaryConfig(metric=args.metric, top_n=args.top, min_games=args.min_games)  # type: ignore[arg-type]

    print(f"\n{csv_path.name}: {len(df)} agents")
    print(f"\n=== Ranked by {cfg.metric} ===")
    print(top_table(df, cfg).to_string(index=False))

    print("\n=== Win / draw / loss share ===")
    print(outcome_shares(df).to_string(index=False, float_format=lambda v: f"{v:.3f}"))

    if args.summary:
        desc = numeric_summary(df)
        if not desc.empty:
            print("\n=== Numeric summary ===")
            print(desc.to_string())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
