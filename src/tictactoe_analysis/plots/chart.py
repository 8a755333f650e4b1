from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd
import matplotlib.pyplot as plt

from ..metrics.summarize import outcome_shares


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outpath: Path, *, show: bool) -> Optional[Path]:
    if show:
        plt.show()
        return None
    _ensure_dir(outpath.parent)
    fig.savefig(outpath, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return outpath


def plot_scatter(df: pd.DataFrame, outdir: Path, x: str, y: str, *, show: bool) -> Optional[Path]:
    if x not in df.columns or y not in df.columns:
        return None
    if not (pd.api.types.is_numeric_dtype(df[x]) and pd.api.types.is_numeric_dtype(df[y])):
        return None

    fig = plt.figure()
    plt.scatter(df[x], df[y], alpha=0.7)
    if "name" in df.columns:
        for _, row in df.iterrows():
            plt.annotate(str(row["name"]), (row[x], row[y]), fontsize=8, xytext=(4, 4), textcoords="offset points")
    plt.title(f"{y} vs {x}")
    plt.xlabel(x)
    plt.ylabel(y)

    return _finish(fig, outdir / f"scatter_{y}_vs_{x}.png", show=show)


def plot_top_bar(df: pd.DataFrame, outdir: Path, metric: str, top_n: int, *, show: bool) -> Optional[Path]:
    if "name" not in df.columns or metric not in df.columns:
        return None
    if not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    top = df[["name", metric]].dropna().sort_values(metric, ascending=False).head(top_n)
    fig = plt.figure(figsize=(8, 4))
    plt.bar(top["name"].astype(str), top[metric].astype(float))
    plt.title(f"Top {min(top_n, len(top))}: {metric}")
    plt.xlabel("agent")
    plt.ylabel(metric)
    plt.xticks(rotation=30, ha="right")

    return _finish(fig, outdir / f"top_{top_n}_{metric}.png", show=show)


def plot_outcome_shares(df: pd.DataFrame, outdir: Path, *, show: bool) -> Optional[Path]:
    """Stacked win/draw/loss bars, one per agent."""
    if not {"name", "games", "wins", "draws", "losses"} <= set(df.columns):
        return None

    shares = outcome_shares(df).sort_values("wins_share", ascending=False)
    names = shares["name"].astype(str)

    fig = plt.figure(figsize=(8, 4))
    bottom = pd.Series(0.0, index=shares.index)
    for col, label in (("wins_share", "win"), ("draws_share", "draw"), ("losses_share", "loss")):
        plt.bar(names, shares[col], bottom=bottom, label=label)
        bottom = bottom + shares[col]
    plt.title("Outcome share per agent")
    plt.ylabel("fraction of games")
    plt.ylim(0, 1)
    plt.xticks(rotation=30, ha="right")
    plt.legend()

    return _finish(fig, outdir / "outcome_shares.png", show=show)
