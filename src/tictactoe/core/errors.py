from __future__ import annotations


class BoardError(ValueError):
    """A move that cannot be applied to the grid."""

    def __init__(self, index: int, message: str) -> None:
        super().__init__(message)
        self.index = index


class OutOfBounds(BoardError):
    def __init__(self, index: int) -> None:
        super().__init__(index, f"Move {index} would be out of bounds.")


class CellOccupied(BoardError):
    def __init__(self, index: int) -> None:
        super().__init__(index, f"{index} is not a legal move, the cell is taken.")


class InputError(ValueError):
    """Unrecognised command text from a human player."""
