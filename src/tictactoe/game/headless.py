from __future__ import annotations

import logging
from typing import Dict, Tuple

from tictactoe.ai.base import Command
from tictactoe.config import BOARD_WIDTH
from tictactoe.core.errors import BoardError
from tictactoe.core.rules import Outcome, evaluate
from tictactoe.game.actions import apply_move
from tictactoe.game.controller import new_game
from tictactoe.game.roster import Roster

logger = logging.getLogger(__name__)


def play_headless(roster: Roster, width: int = BOARD_WIDTH) -> Tuple[Outcome, Dict[str, Dict[str, int]]]:
    """
    Play one game with no rendering. Both seats must be computer agents.
    Returns the outcome and per-seat stats keyed by seat name.
    """
    state = new_game(roster, width)
    stats = {
        seat.name: {"moves": 0, "time_ms": 0, "nodes": 0}
        for seat in roster.seats
    }

    while True:
        outcome = evaluate(state.board)
        if outcome.is_over:
            return outcome, stats

        seat = roster.seat_for(state.current)
        move = seat.agent.choose_move(state)
        if isinstance(move, Command):
            raise RuntimeError(f"{seat.name} sent {move.value!r} in a headless game.")

        info = getattr(seat.agent, "last_info", None) or {}
        side_stats = stats[seat.name]
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, int(info.get("time_ms", 0)))
        side_stats["nodes"] += int(info.get("nodes", 0))

        try:
            apply_move(state.board, move, seat.piece)
        except BoardError as e:
            raise RuntimeError(f"{seat.name} produced an illegal move: {e}") from e
        logger.debug("%s placed %s at %s", seat.name, seat.piece, move)
        state.current = roster.other(state.current)
