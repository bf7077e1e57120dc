"""
Constants for Tic-Tac-Toe: marks, board size, session key, display labels.
"""

BOARD_SIZE = 9

MARK_X = "X"
MARK_O = "O"

# Flask session key holding the serialized game
SESSION_KEY = "tic_tac_toe_game"

# --- Status text ---
STATUS_WINNER = "Winner: {mark}"
STATUS_TIE = "Tie"
STATUS_NEXT = "Next player: {mark}"

# --- Move list labels ---
LABEL_START = "Go to game start"
LABEL_CURRENT = "You are at move #{move}"
LABEL_GO_TO = "Go to move #{move}"
