from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from tictactoe import config
from tictactoe.types import Piece

if TYPE_CHECKING:
    from tictactoe.ai.base import Agent


@dataclass(frozen=True, slots=True)
class Seat:
    name: str
    piece: Piece
    agent: "Agent"


@dataclass(frozen=True, slots=True)
class Roster:
    """
    The two seats of a game, in turn order.
    `first` always opens, including after a restart.
    """
    first: Seat
    second: Seat

    def __post_init__(self) -> None:
        if self.first.piece is None or self.second.piece is None:
            raise ValueError("Seats need a piece.")
        if self.first.piece == self.second.piece:
            raise ValueError(f"Both seats use piece {self.first.piece!r}.")

    @property
    def seats(self) -> Tuple[Seat, Seat]:
        return (self.first, self.second)

    def seat_for(self, piece: Piece) -> Seat:
        for seat in self.seats:
            if seat.piece == piece:
                return seat
        raise KeyError(piece)

    def other(self, piece: Piece) -> Piece:
        return self.second.piece if piece == self.first.piece else self.first.piece

    def name_for(self, piece: Piece) -> str:
        return self.seat_for(piece).name

    def labels(self) -> dict:
        return {seat.piece: str(seat.piece) for seat in self.seats}


def default_roster(human_first: bool = True) -> Roster:
    from tictactoe.ai.minimax_agent import MinimaxAgent
    from tictactoe.ui.human import HumanAgent

    human = Seat(config.HUMAN_NAME, config.HUMAN_PIECE, HumanAgent())
    ai = Seat(config.AI_NAME, config.AI_PIECE, MinimaxAgent(name=config.AI_NAME))
    if human_first:
        return Roster(human, ai)
    return Roster(ai, human)
