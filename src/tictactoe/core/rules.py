from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, List, Tuple

from tictactoe.types import Piece
from tictactoe.core.board import Grid


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WINNER = "winner"
    DRAW = "draw"


@dataclass(frozen=True, slots=True)
class Outcome:
    status: Status
    winner: Optional[Piece] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(Status.IN_PROGRESS)

    @classmethod
    def win(cls, piece: Piece) -> "Outcome":
        return cls(Status.WINNER, piece)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(Status.DRAW)

    @property
    def is_over(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status is Status.DRAW


def check_winner_with_line(grid: Grid) -> Optional[Tuple[Piece, List[int]]]:
    # Rows, then columns, then major and minor diagonal; first full line wins.
    for line in grid.axes():
        if not line:
            continue
        p = grid[line[0]]
        if p is not None and all(grid[i] == p for i in line):
            return p, line
    return None


def check_winner(grid: Grid) -> Optional[Piece]:
    res = check_winner_with_line(grid)
    return res[0] if res else None


def is_draw(grid: Grid) -> bool:
    return grid.is_full() and check_winner(grid) is None


def evaluate(grid: Grid) -> Outcome:
    w = check_winner(grid)
    if w is not None:
        return Outcome.win(w)
    if grid.is_full():
        return Outcome.draw()
    return Outcome.in_progress()
