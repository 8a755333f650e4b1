from __future__ import annotations
from enum import Enum
from typing import Protocol, Union

from tictactoe.game.state import GameState
from tictactoe.types import Move


class Command(Enum):
    HELP = "help"
    EXIT = "exit"
    RESTART = "restart"


# What a move source hands back to the turn coordinator.
Request = Union[Move, Command]


class Agent(Protocol):
    name: str
    interactive: bool

    def choose_move(self, state: GameState) -> Request:
        ...
