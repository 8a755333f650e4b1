from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal[
    "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "avg_nodes_per_move",
    "wins",
    "points",
]

# Cost metrics: cheaper agents rank first
LOWER_IS_BETTER = {"avg_ms_per_move", "avg_nodes_per_move"}

TABLE_COLS = [
    "name",
    "games", "wins", "draws", "losses",
    "ppg", "strength_wilson_lcb",
    "avg_ms_per_move", "avg_nodes_per_move",
]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "ppg"
    top_n: int = 20
    min_games: int = 0


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    if cfg.min_games <= 0:
        return df
    _require_cols(df, ["games"])
    return df[df["games"].fillna(0) >= cfg.min_games]


def top_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    """Agents ranked by cfg.metric, ties broken by name, with a 1-based rk column."""
    _require_cols(df, ["name", cfg.metric])

    ranked = filter_rows(df, cfg).sort_values(
        [cfg.metric, "name"],
        ascending=[cfg.metric in LOWER_IS_BETTER, True],
    )
    keep = [c for c in TABLE_COLS if c in ranked.columns]
    if cfg.metric not in keep:
        keep.append(cfg.metric)

    out = ranked[keep].head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe().T


def outcome_shares(df: pd.DataFrame) -> pd.DataFrame:
    """Win/draw/loss fractions per agent. Agents with no games get zeros."""
    _require_cols(df, ["name", "games", "wins", "draws", "losses"])
    out = df[["name"]].copy()
    games = df["games"].where(df["games"] > 0)
    for col in ("wins", "draws", "losses"):
        out[f"{col}_share"] = (df[col] / games).fillna(0.0)
    return out
