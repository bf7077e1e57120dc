"""
Tic-Tac-Toe rules: win detection over a fixed 3x3 board.
Boards are lists of 9 strings; "" is an empty square.
"""

EMPTY = ""

# Scan order matters: when more than one line matches, the last one wins.
WIN_LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
]


def evaluate(board):
    """
    Find the winning line on a board, if any.

    Args:
        board (list): 9 square values ("", "X" or "O")

    Returns:
        dict: {"indices": [a, b, c], "mark": "X"|"O"} for the last matching
              line in WIN_LINES order, or None while the game is undecided
    """
    result = None
    for a, b, c in WIN_LINES:
        if board[a] and board[a] == board[b] == board[c]:
            result = {"indices": [a, b, c], "mark": board[a]}
    return result


def is_filled(board):
    """True when every square holds a mark."""
    return all(square != EMPTY for square in board)


def square_location(index: int) -> str:
    """Human-readable 1-based position of a square, e.g. "row 2, column 3"."""
    row = index // 3 + 1
    col = index % 3 + 1
    return f"row {row}, column {col}"
