from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd


# Columns written by tictactoe.scripts.selfplay, apart from "name"
NUMERIC_COLS = [
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "moves", "time_ms", "nodes",
    "avg_ms_per_move", "avg_nodes_per_move",
]

DEFAULT_PATTERN = "selfplay_results_*.csv"
DEFAULT_RESULTS_DIR = "data/results"


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    drop_unplayed: bool = False


def load_results(spec: LoadSpec) -> pd.DataFrame:
    """
    Read one self-play CSV into a frame with numeric stat columns.
    Agents with a blank name are dropped.
    """
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path)
    df = df.rename(columns=lambda c: str(c).strip())

    if "name" not in df.columns:
        raise ValueError(f"{spec.csv_path} has no 'name' column. Columns: {list(df.columns)}")

    present = [c for c in NUMERIC_COLS if c in df.columns]
    if present:
        df[present] = df[present].apply(pd.to_numeric, errors="coerce")

    df["name"] = df["name"].fillna("").astype(str).str.strip()
    df = df[df["name"] != ""]

    if spec.drop_unplayed and "games" in df.columns:
        df = df[df["games"].fillna(0) > 0]

    return df.reset_index(drop=True)


def load_latest_from_dir(results_dir: Path, pattern: str = DEFAULT_PATTERN) -> Path:
    if not results_dir.is_dir():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    # The timestamp in the file name sorts lexicographically
    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")
    return files[-1]


def resolve_csv_path(csv: Optional[str], results_dir: str, pattern: str = DEFAULT_PATTERN) -> Path:
    """An explicit --csv wins; otherwise the newest matching file in results_dir."""
    if csv:
        return Path(csv)
    return load_latest_from_dir(Path(results_dir), pattern=pattern)
