"""
Unit tests for Tic-Tac-Toe win detection.

Run (with venv activated):
  python -m unittest tests.tic_tac_toe.test_rules -v
  pytest tests/tic_tac_toe/ -v
"""
import unittest

from app.projects.tic_tac_toe.core.rules import (
    WIN_LINES,
    evaluate,
    is_filled,
    square_location,
)


def _board(marks):
    """Build a board from a 9-character string; '.' is empty."""
    return ["" if c == "." else c for c in marks]


class TestEvaluate(unittest.TestCase):
    """Winning line detection."""

    def test_each_line_wins(self):
        for line in WIN_LINES:
            with self.subTest(line=line):
                board = [""] * 9
                for i in line:
                    board[i] = "O"
                result = evaluate(board)
                self.assertEqual(result, {"indices": list(line), "mark": "O"})

    def test_empty_board_has_no_winner(self):
        self.assertIsNone(evaluate([""] * 9))

    def test_game_in_progress_has_no_winner(self):
        self.assertIsNone(evaluate(_board("XO.XO.O..")))

    def test_mixed_line_is_not_a_win(self):
        self.assertIsNone(evaluate(_board("XXO......")))

    def test_full_board_without_line(self):
        self.assertIsNone(evaluate(_board("XOXXOOOXX")))

    def test_last_matching_line_wins(self):
        # Every line matches on a full board of one mark
        result = evaluate(_board("XXXXXXXXX"))
        self.assertEqual(result, {"indices": [2, 4, 6], "mark": "X"})

    def test_last_matching_line_wins_across_marks(self):
        # Top row X, bottom row O: the bottom row comes later in the scan
        result = evaluate(_board("XXX...OOO"))
        self.assertEqual(result, {"indices": [6, 7, 8], "mark": "O"})

    def test_board_not_mutated(self):
        board = _board("XXX.O.O..")
        before = list(board)
        evaluate(board)
        self.assertEqual(board, before)


class TestIsFilled(unittest.TestCase):

    def test_empty_board(self):
        self.assertFalse(is_filled([""] * 9))

    def test_one_square_left(self):
        self.assertFalse(is_filled(_board("XOXXOOOX.")))

    def test_full_board(self):
        self.assertTrue(is_filled(_board("XOXXOOOXX")))


class TestSquareLocation(unittest.TestCase):

    def test_corners_and_center(self):
        self.assertEqual(square_location(0), "row 1, column 1")
        self.assertEqual(square_location(2), "row 1, column 3")
        self.assertEqual(square_location(4), "row 2, column 2")
        self.assertEqual(square_location(6), "row 3, column 1")
        self.assertEqual(square_location(8), "row 3, column 3")


if __name__ == "__main__":
    unittest.main()
