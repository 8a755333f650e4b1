from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tictactoe.core.board import Grid
from tictactoe.types import Piece

if TYPE_CHECKING:
    from tictactoe.game.roster import Roster


@dataclass(slots=True)
class GameState:
    board: Grid
    roster: "Roster"
    current: Piece
    last_status: str = ""

    @property
    def opponent(self) -> Piece:
        return self.roster.other(self.current)
