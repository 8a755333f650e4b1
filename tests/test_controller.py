import io
import unittest
from contextlib import redirect_stdout

from tictactoe import config
from tictactoe.ai.base import Command
from tictactoe.ai.minimax_agent import MinimaxAgent
from tictactoe.core.errors import CellOccupied
from tictactoe.core.rules import Outcome, Status
from tictactoe.game.controller import new_game, run_game
from tictactoe.game.headless import play_headless
from tictactoe.game.roster import Roster, Seat
from tictactoe.ui.human import HumanAgent


class ScriptedAgent:
    """Move source that replays a fixed list of requests and records what it saw."""

    def __init__(self, name, requests, interactive=True):
        self.name = name
        self.interactive = interactive
        self._requests = list(requests)
        self.seen = []

    def choose_move(self, state):
        self.seen.append(list(state.board.cells))
        return self._requests.pop(0)


def scripted_roster(x_requests, o_requests, interactive=True):
    x = ScriptedAgent("Xavier", x_requests, interactive)
    o = ScriptedAgent("Olive", o_requests, interactive)
    return Roster(Seat("Xavier", "X", x), Seat("Olive", "O", o)), x, o


class QuietTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._saved = (config.CLEAR_SCREEN, config.USE_COLOR)
        config.CLEAR_SCREEN = False
        config.USE_COLOR = False

    def tearDown(self) -> None:
        config.CLEAR_SCREEN, config.USE_COLOR = self._saved

    def play(self, roster):
        out = io.StringIO()
        with redirect_stdout(out):
            result = run_game(roster, show_thinking=False)
        return result, out.getvalue()


class TestRunGame(QuietTestCase):
    def test_first_seat_wins_on_top_row(self) -> None:
        roster, x, o = scripted_roster([0, 1, 2], [3, 4])
        result, text = self.play(roster)
        self.assertEqual(result, Outcome.win("X"))
        self.assertEqual(len(x.seen), 3)
        self.assertEqual(len(o.seen), 2)
        self.assertIn("Xavier (X) wins!", text)

    def test_outcome_checked_after_every_placement(self) -> None:
        # O completes its column before X gets another turn.
        roster, x, o = scripted_roster([0, 1, 3, 7], [2, 5, 8])
        result, _ = self.play(roster)
        self.assertEqual(result, Outcome.win("O"))
        self.assertEqual(len(x.seen), 3)
        self.assertEqual(len(o.seen), 3)

    def test_draw(self) -> None:
        roster, _x, _o = scripted_roster([0, 2, 3, 7, 8], [1, 4, 5, 6])
        result, text = self.play(roster)
        self.assertEqual(result, Outcome.draw())
        self.assertIn("Draw game.", text)

    def test_exit_returns_none(self) -> None:
        roster, x, o = scripted_roster([4, Command.EXIT], [0])
        result, text = self.play(roster)
        self.assertIsNone(result)
        self.assertIn("Game quit.", text)
        self.assertEqual(len(o.seen), 1)

    def test_help_asks_the_same_seat_again(self) -> None:
        roster, x, o = scripted_roster([Command.HELP, Command.EXIT], [])
        result, text = self.play(roster)
        self.assertIsNone(result)
        self.assertEqual(len(x.seen), 2)
        self.assertEqual(o.seen, [])
        self.assertIn("designate the board cells", text)

    def test_restart_clears_board_and_first_seat_opens(self) -> None:
        roster, x, o = scripted_roster([0, Command.RESTART, Command.EXIT], [4, 8])
        result, _ = self.play(roster)
        self.assertIsNone(result)
        empty = [None] * 9
        self.assertEqual(x.seen[0], empty)
        self.assertEqual(x.seen[1], ["X", None, None, None, "O", None, None, None, None])
        self.assertEqual(x.seen[2], empty)
        self.assertEqual(len(o.seen), 1)

    def test_illegal_move_from_interactive_seat_is_retried(self) -> None:
        roster, x, o = scripted_roster([0, 1, 2], [0, 9, 3, 4])
        result, text = self.play(roster)
        self.assertEqual(result, Outcome.win("X"))
        self.assertEqual(len(o.seen), 4)
        self.assertIn("out of bounds", text)

    def test_illegal_move_from_computer_seat_is_fatal(self) -> None:
        roster, _x, _o = scripted_roster([0, 0], [4], interactive=False)
        with self.assertRaises(RuntimeError):
            self.play(roster)

    def test_commands_from_computer_seat_are_fatal(self) -> None:
        for command in Command:
            roster, x, _o = scripted_roster([command, 0], [4], interactive=False)
            with self.assertRaises(RuntimeError):
                self.play(roster)
            self.assertEqual(len(x.seen), 1)


class TestHumanAgainstMinimax(QuietTestCase):
    def test_minimax_never_loses_to_scripted_human(self) -> None:
        lines = iter([str(i) for i in range(9)] + ["exit"])
        human = HumanAgent(read_line=lambda _prompt: next(lines))
        roster = Roster(Seat("You", "X", human), Seat("Minimax AI", "O", MinimaxAgent()))
        result, _ = self.play(roster)
        self.assertIsNotNone(result)
        self.assertTrue(result.is_over)
        self.assertNotEqual(result.winner, "X")

    def test_bad_command_is_reported_and_retried(self) -> None:
        lines = iter(["banana", "help", "exit"])
        prompts = []

        def read_line(prompt):
            prompts.append(prompt)
            return next(lines)

        human = HumanAgent(read_line=read_line)
        roster = Roster(Seat("You", "X", human), Seat("Minimax AI", "O", MinimaxAgent()))
        result, text = self.play(roster)
        self.assertIsNone(result)
        self.assertEqual(len(prompts), 3)
        self.assertIn("Invalid command", text)


class TestHeadless(unittest.TestCase):
    def test_minimax_self_play_is_a_draw(self) -> None:
        roster = Roster(
            Seat("A", "X", MinimaxAgent(name="A")),
            Seat("B", "O", MinimaxAgent(name="B")),
        )
        outcome, stats = play_headless(roster)
        self.assertEqual(outcome.status, Status.DRAW)
        self.assertEqual(stats["A"]["moves"] + stats["B"]["moves"], 9)
        self.assertGreater(stats["A"]["nodes"], 0)

    def test_commands_are_rejected(self) -> None:
        roster, _x, _o = scripted_roster([Command.HELP], [], interactive=False)
        with self.assertRaises(RuntimeError):
            play_headless(roster)

    def test_illegal_moves_are_fatal(self) -> None:
        # O asks for the cell X has just taken.
        roster, _x, _o = scripted_roster([0, 0], [0], interactive=False)
        with self.assertRaises(RuntimeError) as ctx:
            play_headless(roster)
        self.assertIsInstance(ctx.exception.__cause__, CellOccupied)

    def test_new_game_starts_with_first_seat(self) -> None:
        roster, _x, _o = scripted_roster([], [])
        state = new_game(roster, width=4)
        self.assertEqual(state.current, "X")
        self.assertEqual(state.opponent, "O")
        self.assertEqual(len(state.board), 16)


if __name__ == "__main__":
    unittest.main()
