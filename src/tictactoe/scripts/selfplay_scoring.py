from __future__ import annotations

import math

from .selfplay_types import Agg


def ppg(a: Agg) -> float:
    return (a.points / a.games) if a.games else 0.0


def avg_ms_per_move(a: Agg) -> float:
    return (a.time_ms / a.moves) if a.moves else 0.0


def avg_nodes_per_move(a: Agg) -> float:
    return (a.nodes / a.moves) if a.moves else 0.0


def wilson_lcb(p: float, n: int, z: float) -> float:
    if n <= 0:
        return 0.0
    p = max(0.0, min(1.0, p))
    z2 = z * z
    denom = 1.0 + (z2 / n)
    center = p + (z2 / (2.0 * n))
    rad = z * math.sqrt(max(0.0, (p * (1.0 - p) + (z2 / (4.0 * n))) / n))
    return max(0.0, (center - rad) / denom)


def strength_score(a: Agg, z: float) -> float:
    return wilson_lcb(ppg(a), a.games, z)
