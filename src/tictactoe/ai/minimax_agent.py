from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import time

from tictactoe.ai.search import SearchStats, best_move_and_score
from tictactoe.game.state import GameState
from tictactoe.types import Move, Piece

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MinimaxAgent:
    """
    Full-depth minimax over every empty cell.
    Knobs:
      - prune: alpha-beta cutoffs (same move and score, fewer nodes)
    """
    name: str = "Minimax AI"
    prune: bool = True
    interactive: bool = False

    # Stats
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        board = state.board
        me: Piece = state.current
        opp: Piece = state.opponent

        stats = SearchStats()
        start = time.perf_counter()
        move, score = best_move_and_score(board, me, opp, prune=self.prune, stats=stats)
        elapsed = time.perf_counter() - start

        self.last_info = {
            "move": int(move),
            "eval": int(score) if score not in (inf, -inf) else score,
            "nodes": stats.nodes,
            "cutoffs": stats.cutoffs,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug("%s picked %s: %s", self.name, move, self.last_info)

        return move
