
# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from math import isqrt
from typing import Iterator, List, Sequence

from tictactoe.config import BOARD_WIDTH
from tictactoe.types import Cell, Piece, Move
from tictactoe.core.errors import CellOccupied, OutOfBounds


class Diagonal(Enum):
    MAJOR = "major"  # top-left -> bottom-right
    MINOR = "minor"  # top-right -> bottom-left


@dataclass(slots=True)
class Grid:
    width: int = BOARD_WIDTH
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"Grid width must be positive, got {self.width}.")
        if not self.cells:
            self.cells = [None] * (self.width * self.width)
        else:
            self.cells = list(self.cells)
        if len(self.cells) != self.width * self.width:
            raise ValueError(
                f"Grid of width {self.width} needs {self.width * self.width} cells, got {len(self.cells)}."
            )

    def __setattr__(self, name: str, value: object) -> None:
        # width is set once by __init__ and never again
        if name == "width" and hasattr(self, "width"):
            raise AttributeError("Grid width is fixed once the grid is built.")
        object.__setattr__(self, name, value)

    @classmethod
    def from_cells(cls, cells: Sequence[Cell]) -> "Grid":
        """
        Build a grid from a flat row-major sequence.
        The length must be a non-zero perfect square.
        """
        n = len(cells)
        width = isqrt(n)
        if n == 0 or width * width != n:
            raise ValueError(f"Cannot build a square grid from {n} cells.")
        return cls(width, cells)

    def copy(self) -> "Grid":
        return Grid(self.width, self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    # --- moves ---

    def check_move(self, index: int) -> None:
        if index < 0 or index >= len(self.cells):
            raise OutOfBounds(index)
        if self.cells[index] is not None:
            raise CellOccupied(index)

    def place(self, index: Move, piece: Piece) -> None:
        if piece is None:
            raise ValueError("None is not a piece.")
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Move must be an int cell index, got {index!r}.")
        self.check_move(index)
        self.cells[index] = piece

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def empty_cell_indices(self) -> List[Move]:
        return [Move(i) for i, cell in enumerate(self.cells) if cell is None]

    # --- axes ---

    def row_indices(self, n: int) -> List[int]:
        if n < 0 or n >= self.width:
            return []
        start = n * self.width
        return list(range(start, start + self.width))

    def column_indices(self, n: int) -> List[int]:
        if n < 0 or n >= self.width:
            return []
        return list(range(n, len(self.cells), self.width))

    def diagonal_indices(self, diagonal: Diagonal) -> List[int]:
        w = self.width
        if diagonal is Diagonal.MAJOR:
            return [i * (w + 1) for i in range(w)]
        return [(i + 1) * (w - 1) for i in range(w)]

    def axes(self) -> Iterator[List[int]]:
        """Every winnable line, in the order the rules check them."""
        for n in range(self.width):
            yield self.row_indices(n)
        for n in range(self.width):
            yield self.column_indices(n)
        yield self.diagonal_indices(Diagonal.MAJOR)
        yield self.diagonal_indices(Diagonal.MINOR)

    def _pick(self, indices: List[int]) -> List[Cell]:
        return [self.cells[i] for i in indices]

    def row(self, n: int) -> List[Cell]:
        return self._pick(self.row_indices(n))

    def column(self, n: int) -> List[Cell]:
        return self._pick(self.column_indices(n))

    def diagonal(self, diagonal: Diagonal) -> List[Cell]:
        return self._pick(self.diagonal_indices(diagonal))

    def rows(self) -> List[List[Cell]]:
        return [self.row(n) for n in range(self.width)]

    def columns(self) -> List[List[Cell]]:
        return [self.column(n) for n in range(self.width)]

    # --- neighbours ---

    def adjacent_indices(self, index: int) -> List[int]:
        """
        Orthogonal neighbours in ascending index order.
        Row edges are respected: the last cell of a row has no right neighbour.
        """
        if index < 0 or index >= len(self.cells):
            return []
        r, c = divmod(index, self.width)
        out = []
        if r > 0:
            out.append(index - self.width)
        if c > 0:
            out.append(index - 1)
        if c < self.width - 1:
            out.append(index + 1)
        if r < self.width - 1:
            out.append(index + self.width)
        return out

    def adjacent_cells(self, index: int) -> List[Cell]:
        return self._pick(self.adjacent_indices(index))
