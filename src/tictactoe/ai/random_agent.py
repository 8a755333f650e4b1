from __future__ import annotations
import random
from dataclasses import dataclass, field

from tictactoe.game.state import GameState
from tictactoe.types import Move


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    seed: int | None = None
    interactive: bool = False
    rng: random.Random = field(init=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def choose_move(self, state: GameState) -> Move:
        moves = state.board.empty_cell_indices()
        if not moves:
            raise RuntimeError("No valid moves.")
        return self.rng.choice(moves)
