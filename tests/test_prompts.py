import unittest

from tictactoe.ai.base import Command
from tictactoe.core.board import Grid
from tictactoe.core.errors import CellOccupied, InputError, OutOfBounds
from tictactoe.game.roster import Roster, Seat
from tictactoe.game.state import GameState
from tictactoe.ui.human import HumanAgent
from tictactoe.ui.prompts import parse_command


class TestParseCommand(unittest.TestCase):
    def setUp(self) -> None:
        self.board = Grid(3)
        self.board.place(4, "O")

    def test_keywords(self) -> None:
        self.assertIs(parse_command("help", self.board), Command.HELP)
        self.assertIs(parse_command("HELP", self.board), Command.HELP)
        self.assertIs(parse_command("  Exit \n", self.board), Command.EXIT)
        self.assertIs(parse_command("q", self.board), Command.EXIT)
        self.assertIs(parse_command("restart", self.board), Command.RESTART)

    def test_bare_integer_is_a_cell(self) -> None:
        self.assertEqual(parse_command("0", self.board), 0)
        self.assertEqual(parse_command(" 8 ", self.board), 8)

    def test_occupied_cell(self) -> None:
        with self.assertRaises(CellOccupied):
            parse_command("4", self.board)

    def test_out_of_range_cell(self) -> None:
        with self.assertRaises(OutOfBounds):
            parse_command("9", self.board)
        with self.assertRaises(OutOfBounds):
            parse_command("-1", self.board)

    def test_anything_else_is_invalid(self) -> None:
        for raw in ("", "banana", "1.5", "--1", "4 5", "-"):
            with self.assertRaises(InputError):
                parse_command(raw, self.board)


class TestHumanAgent(unittest.TestCase):
    def test_reads_one_line_per_request(self) -> None:
        prompts = []

        def read_line(prompt):
            prompts.append(prompt)
            return "7"

        human = HumanAgent(read_line=read_line)
        roster = Roster(Seat("You", "X", human), Seat("Them", "O", human))
        state = GameState(board=Grid(3), roster=roster, current="X")

        self.assertEqual(human.choose_move(state), 7)
        self.assertEqual(len(prompts), 1)
        self.assertIn("Player X", prompts[0])
        self.assertIn("0-8", prompts[0])
        self.assertTrue(human.interactive)


if __name__ == "__main__":
    unittest.main()
