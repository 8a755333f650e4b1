from __future__ import annotations
from typing import Callable

from tictactoe.ai.base import Request
from tictactoe.game.state import GameState
from tictactoe.ui.prompts import parse_command, prompt_text


class HumanAgent:
    name = "Human"
    interactive = True

    def __init__(self, read_line: Callable[[str], str] = input) -> None:
        self._read_line = read_line

    def choose_move(self, state: GameState) -> Request:
        raw = self._read_line(f"Player {state.current} {prompt_text(state.board)}")
        return parse_command(raw, state.board)
