from __future__ import annotations

import logging
from typing import Optional

from tictactoe.ai.base import Command
from tictactoe.config import BOARD_WIDTH
from tictactoe.core.board import Grid
from tictactoe.core.errors import BoardError, InputError
from tictactoe.core.rules import Outcome, Status, check_winner_with_line, evaluate
from tictactoe.game.actions import apply_move
from tictactoe.game.roster import Roster
from tictactoe.game.state import GameState
from tictactoe.ui.effects import ai_thinking
from tictactoe.ui.render import render

logger = logging.getLogger(__name__)


def new_game(roster: Roster, width: int = BOARD_WIDTH) -> GameState:
    first = roster.first
    return GameState(
        board=Grid(width),
        roster=roster,
        current=first.piece,
        last_status=f"{first.name} ({first.piece}) starts.",
    )


def _status_with_roster(status: str, state: GameState) -> str:
    """
    Prepend a persistent header showing who plays which piece.
    """
    a, b = state.roster.seats
    header = f"{a.piece}: {a.name} | {b.piece}: {b.name} | Turn: {state.current}"
    if status:
        return f"{header}\n{status}"
    return header


def _outcome_text(outcome: Outcome, roster: Roster) -> str:
    if outcome.status is Status.WINNER:
        return f"{roster.name_for(outcome.winner)} ({outcome.winner}) wins!"
    return "Draw game."


def run_game(roster: Roster, width: int = BOARD_WIDTH, show_thinking: bool = True) -> Optional[Outcome]:
    """
    Alternate the two seats until someone wins, the grid fills up, or a
    player asks to exit. Returns the final outcome, or None on exit.
    """
    state = new_game(roster, width)
    labels = roster.labels()
    show_help = False
    logger.info("New %dx%d game: %s vs %s", width, width, roster.first.name, roster.second.name)

    while True:
        outcome = evaluate(state.board)
        if outcome.is_over:
            w = check_winner_with_line(state.board)
            render(
                state.board,
                _status_with_roster(_outcome_text(outcome, roster), state),
                labels,
                highlight=w[1] if w else None,
            )
            logger.info("Game over: %s", outcome)
            return outcome

        render(state.board, _status_with_roster(state.last_status, state), labels, show_help=show_help)
        show_help = False

        seat = roster.seat_for(state.current)

        if not seat.agent.interactive and show_thinking:
            ai_thinking(f"{seat.name}")

        try:
            request = seat.agent.choose_move(state)
        except (BoardError, InputError) as e:
            if not seat.agent.interactive:
                raise RuntimeError(f"{seat.name} failed to pick a move: {e}") from e
            logger.warning("Rejected input from %s: %s", seat.name, e)
            state.last_status = str(e)
            continue

        if isinstance(request, Command) and not seat.agent.interactive:
            raise RuntimeError(f"{seat.name} sent {request.value!r}, computer seats may only move.")

        if request is Command.HELP:
            show_help = True
            continue

        if request is Command.EXIT:
            logger.info("%s left the game.", seat.name)
            render(state.board, _status_with_roster("Game quit.", state), labels)
            return None

        if request is Command.RESTART:
            logger.info("%s restarted the game.", seat.name)
            state = new_game(roster, width)
            state.last_status = f"Restarted. {state.last_status}"
            continue

        try:
            apply_move(state.board, request, seat.piece)
        except BoardError as e:
            if not seat.agent.interactive:
                raise RuntimeError(f"{seat.name} produced an illegal move: {e}") from e
            logger.warning("Rejected move from %s: %s", seat.name, e)
            state.last_status = str(e)
            continue

        logger.debug("%s placed %s at %s", seat.name, seat.piece, request)
        state.last_status = f"{seat.name} chose {int(request)}"
        info = getattr(seat.agent, "last_info", None)
        if info:
            state.last_status += f" | nodes={info.get('nodes')} | eval={info.get('eval')} | {info.get('time_ms')}ms"
        state.current = roster.other(state.current)
