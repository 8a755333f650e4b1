from __future__ import annotations

import argparse
import logging
from pathlib import Path

from ..io.load_results import DEFAULT_PATTERN, DEFAULT_RESULTS_DIR, LoadSpec, load_results, resolve_csv_path
from ..plots import plot_outcome_shares, plot_scatter, plot_top_bar

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tictactoe_analysis figures",
        description="Save charts for a self-play results CSV.",
    )
    ap.add_argument("--csv", type=str, default=None, help="Results CSV. Defaults to the newest one in --results-dir.")
    ap.add_argument("--results-dir", type=str, default=DEFAULT_RESULTS_DIR, help="Where selfplay writes its CSVs")
    ap.add_argument("--pattern", type=str, default=DEFAULT_PATTERN, help="Glob used to find the newest CSV")
    ap.add_argument("--figures-dir", type=str, default="data/figures", help="Output directory for PNGs")
    ap.add_argument("--metric", type=str, default="ppg", help="Metric for the bar chart")
    ap.add_argument("--top", type=int, default=10, help="Agents in the bar chart")
    ap.add_argument("--show", action="store_true", help="Open windows instead of saving")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = resolve_csv_path(args.csv, args.results_dir, args.pattern)
    df = load_results(LoadSpec(csv_path=csv_path, drop_unplayed=True))
    outdir = Path(args.figures_dir)

    written = [
        p
        for p in (
            plot_top_bar(df, outdir, metric=args.metric, top_n=args.top, show=args.show),
            plot_outcome_shares(df, outdir, show=args.show),
            plot_scatter(df, outdir, x="avg_nodes_per_move", y="avg_ms_per_move", show=args.show),
        )
        if p is not None
    ]
    logger.info("Wrote %d figures from %s", len(written), csv_path)

    for p in written:
        print(p)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
