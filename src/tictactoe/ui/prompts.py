from __future__ import annotations

from tictactoe.ai.base import Command, Request
from tictactoe.core.board import Grid
from tictactoe.core.errors import InputError
from tictactoe.types import Move

COMMANDS = {
    "help": Command.HELP,
    "h": Command.HELP,
    "?": Command.HELP,
    "exit": Command.EXIT,
    "quit": Command.EXIT,
    "q": Command.EXIT,
    "restart": Command.RESTART,
    "r": Command.RESTART,
}


def parse_command(raw: str, board: Grid) -> Request:
    """
    Turn one line of player input into a command or a cell index.
    Cell indices are checked against the board, so an occupied or
    out-of-range cell raises a BoardError here rather than later.
    """
    s = raw.strip().lower()
    if s in COMMANDS:
        return COMMANDS[s]
    digits = s[1:] if s.startswith("-") else s
    if not digits.isdecimal():
        raise InputError("Invalid command. Enter a cell number, help, restart or exit.")
    index = int(s)
    board.check_move(index)
    return Move(index)


def prompt_text(board: Grid) -> str:
    return f"Cell 0-{len(board) - 1} (help / restart / exit): "
