from __future__ import annotations

from dataclasses import dataclass
from math import inf
from typing import Optional, Tuple

from tictactoe.config import DRAW_SCORE, LOSS_SCORE, WIN_SCORE
from tictactoe.core.board import Grid
from tictactoe.core.rules import Status, evaluate
from tictactoe.types import Move, Piece


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0


def terminal_score(grid: Grid, depth: int, engine: Piece, opponent: Piece) -> Optional[int]:
    """
    Score a finished grid from the engine's point of view, or None if play continues.
    Quicker wins and slower losses score better.
    """
    outcome = evaluate(grid)
    if outcome.status is Status.WINNER:
        if outcome.winner == engine:
            return WIN_SCORE - depth
        return LOSS_SCORE + depth
    if outcome.status is Status.DRAW:
        return DRAW_SCORE
    return None


def minimax(
    grid: Grid,
    depth: int,
    maximizing: bool,
    engine: Piece,
    opponent: Piece,
    *,
    alpha: float = -inf,
    beta: float = inf,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> float:
    if stats is not None:
        stats.nodes += 1

    term = terminal_score(grid, depth, engine, opponent)
    if term is not None:
        return term

    to_play = engine if maximizing else opponent

    if maximizing:
        v = -inf
        for m in grid.empty_cell_indices():
            child = grid.copy()
            child.place(m, to_play)
            v = max(v, minimax(child, depth + 1, False, engine, opponent,
                               alpha=alpha, beta=beta, prune=prune, stats=stats))
            if prune:
                if v >= beta:
                    if stats is not None:
                        stats.cutoffs += 1
                    break
                alpha = max(alpha, v)
        return v

    v = inf
    for m in grid.empty_cell_indices():
        child = grid.copy()
        child.place(m, to_play)
        v = min(v, minimax(child, depth + 1, True, engine, opponent,
                           alpha=alpha, beta=beta, prune=prune, stats=stats))
        if prune:
            if v <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break
            beta = min(beta, v)
    return v


def best_move_and_score(
    grid: Grid,
    engine: Piece,
    opponent: Piece,
    *,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> Tuple[Move, float]:
    """
    Pick the engine's move by exhaustive minimax.

    Candidates are tried in ascending cell order and only a strictly better
    score replaces the current best, so ties go to the lowest index.
    With pruning on, the running best is passed down as alpha: a candidate
    that cannot beat it comes back <= alpha and is never selected, which
    keeps the result identical to the unpruned search.
    """
    moves = grid.empty_cell_indices()
    if not moves or evaluate(grid).is_over:
        raise RuntimeError("Search called on a finished grid.")

    # Terminal scores are finite, so the first candidate always takes over.
    best = moves[0]
    best_score = -inf

    for m in moves:
        child = grid.copy()
        child.place(m, engine)
        score = minimax(child, 1, False, engine, opponent,
                        alpha=best_score if prune else -inf, prune=prune, stats=stats)
        if score > best_score:
            best = m
            best_score = score

    return best, best_score


def best_move(grid: Grid, engine: Piece, opponent: Piece, *, prune: bool = True) -> Move:
    return best_move_and_score(grid, engine, opponent, prune=prune)[0]
