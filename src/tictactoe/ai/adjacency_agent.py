from __future__ import annotations

from dataclasses import dataclass
from typing import List

from tictactoe.core.board import Grid
from tictactoe.game.state import GameState
from tictactoe.types import Move, Piece


def adjacency_score(board: Grid, index: int, piece: Piece) -> int:
    """Number of orthogonal neighbours of `index` already holding `piece`."""
    return sum(1 for cell in board.adjacent_cells(index) if cell == piece)


def is_blocked(line: List[object], opponent: Piece) -> bool:
    return opponent in line


@dataclass(slots=True)
class AdjacencyAgent:
    """
    Cheap 1-ply agent: take the empty cell touching the most of our own pieces,
    then the one sitting on the most lines the opponent has not blocked.
    Ties go to the lowest index.
    """
    name: str = "Adjacency AI"
    interactive: bool = False

    def _freedom(self, board: Grid, index: int, opponent: Piece) -> int:
        return sum(1 for line in board.axes() if index in line and not is_blocked([board[i] for i in line], opponent))

    def choose_move(self, state: GameState) -> Move:
        board = state.board
        me = state.current
        opp = state.opponent

        moves = board.empty_cell_indices()
        if not moves:
            raise RuntimeError("No valid moves.")

        best = moves[0]
        best_key = None
        for m in moves:
            key = (adjacency_score(board, m, me), self._freedom(board, m, opp))
            if best_key is None or key > best_key:
                best, best_key = m, key
        return best
