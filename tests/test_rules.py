import random
import unittest

from tictactoe.core.board import Grid
from tictactoe.core.rules import (
    Outcome,
    Status,
    check_winner,
    check_winner_with_line,
    evaluate,
    is_draw,
)

_ = None


def grid(*cells):
    return Grid.from_cells(list(cells))


def random_grid(rng: random.Random, width: int = 3) -> Grid:
    return Grid.from_cells([rng.choice(["X", "O", None]) for _ in range(width * width)])


class TestEvaluate(unittest.TestCase):
    def test_empty_grid_in_progress(self) -> None:
        self.assertEqual(evaluate(Grid(3)), Outcome.in_progress())

    def test_row_win_on_sparse_board(self) -> None:
        g = grid("E", "E", "E",
                 _, _, _,
                 _, _, _)
        self.assertEqual(evaluate(g), Outcome.win("E"))
        self.assertFalse(g.is_full())

    def test_column_win(self) -> None:
        g = grid("X", "O", _,
                 "X", "O", _,
                 _, "O", "X")
        self.assertEqual(evaluate(g), Outcome.win("O"))

    def test_major_diagonal_win(self) -> None:
        g = grid("X", "O", _,
                 "O", "X", _,
                 _, _, "X")
        self.assertEqual(check_winner_with_line(g), ("X", [0, 4, 8]))

    def test_minor_diagonal_win(self) -> None:
        g = grid("X", "X", "O",
                 _, "O", _,
                 "O", _, "X")
        self.assertEqual(check_winner_with_line(g), ("O", [2, 4, 6]))

    def test_full_board_without_line_is_draw(self) -> None:
        g = grid("X", "O", "X",
                 "X", "O", "O",
                 "O", "X", "X")
        self.assertEqual(evaluate(g), Outcome.draw())
        self.assertTrue(is_draw(g))
        self.assertIsNone(check_winner(g))

    def test_full_board_with_line_is_a_win(self) -> None:
        g = grid("X", "X", "X",
                 "O", "O", "X",
                 "X", "O", "O")
        self.assertEqual(evaluate(g).status, Status.WINNER)
        self.assertFalse(is_draw(g))

    def test_mixed_line_never_wins(self) -> None:
        g = grid("X", "O", "X",
                 _, _, _,
                 _, _, _)
        self.assertEqual(evaluate(g).status, Status.IN_PROGRESS)

    def test_rows_are_checked_first(self) -> None:
        g = Grid.from_cells(["A"] * 9)
        self.assertEqual(check_winner_with_line(g), ("A", [0, 1, 2]))

    def test_single_cell_grid(self) -> None:
        g = Grid(1)
        self.assertEqual(evaluate(g), Outcome.in_progress())
        g.place(0, "X")
        self.assertEqual(evaluate(g), Outcome.win("X"))

    def test_outcome_flags(self) -> None:
        self.assertFalse(Outcome.in_progress().is_over)
        self.assertTrue(Outcome.draw().is_over)
        self.assertTrue(Outcome.draw().is_draw)
        self.assertTrue(Outcome.win("X").is_over)
        self.assertFalse(Outcome.win("X").is_draw)


class TestOutcomeProperties(unittest.TestCase):
    def setUp(self) -> None:
        rng = random.Random(42)
        self.grids = [random_grid(rng) for _ in range(500)]
        self.grids += [random_grid(rng, width=4) for _ in range(200)]

    def test_winner_owns_a_full_axis(self) -> None:
        for g in self.grids:
            outcome = evaluate(g)
            if outcome.status is Status.WINNER:
                lines = [[g[i] for i in line] for line in g.axes()]
                self.assertIn([outcome.winner] * g.width, lines)

    def test_full_grid_is_never_in_progress(self) -> None:
        for g in self.grids:
            if g.is_full():
                self.assertNotEqual(evaluate(g).status, Status.IN_PROGRESS)

    def test_evaluate_is_idempotent(self) -> None:
        for g in self.grids:
            before = g.copy()
            self.assertEqual(evaluate(g), evaluate(g))
            self.assertEqual(g, before)


if __name__ == "__main__":
    unittest.main()
