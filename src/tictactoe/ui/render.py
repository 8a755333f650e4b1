from __future__ import annotations
from typing import Dict, Optional, Iterable, Set

from tictactoe import config
from tictactoe.core.board import Grid
from tictactoe.types import Cell, Piece
from tictactoe.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE, RESET

PIECE_COLORS = (FG_RED, FG_YELLOW)


def _piece(cell: Cell, labels: Dict[Piece, str]) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    order = list(labels)
    code = PIECE_COLORS[order.index(cell) % len(PIECE_COLORS)] if cell in labels else FG_CYAN
    return c(labels.get(cell, str(cell)), code)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(
    board: Grid,
    status: str = "",
    labels: Optional[Dict[Piece, str]] = None,
    highlight: Optional[Iterable[int]] = None,
    show_help: bool = False,
) -> None:
    clear_screen()

    labels = labels or {}
    hl: Set[int] = set(highlight) if highlight else set()

    print(c("TIC-TAC-TOE", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    sep = c("---+" * (board.width - 1) + "---", DIM)
    for r in range(board.width):
        parts = []
        for i in board.row_indices(r):
            p = _piece(board[i], labels)
            if i in hl:
                p = f"{REVERSE}{p}{RESET}" if config.USE_COLOR else f"[{p}]"
            parts.append(p)
        print(" " + c(" | ", DIM).join(parts))
        if r < board.width - 1:
            print(sep)

    print(c("   Type a cell number to play. Type help, restart or exit.", DIM))
    if show_help:
        render_help(board)


def render_help(board: Grid) -> None:
    """Show how cells are numbered."""
    w = len(str(len(board) - 1))
    print()
    print("This is how you designate the board cells:")
    for r in range(board.width):
        print(" " + " | ".join(str(i).rjust(w) for i in board.row_indices(r)))
        if r < board.width - 1:
            print("-" * (board.width * (w + 3) - 1))
    print()
