from __future__ import annotations
from tictactoe.core.board import Grid
from tictactoe.types import Piece, Move


def apply_move(board: Grid, move: Move, piece: Piece) -> None:
    board.place(move, piece)
